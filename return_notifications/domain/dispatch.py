"""Wrapper that maps gateway failures onto DispatchError."""

from __future__ import annotations

from typing import Any

from ..errors import DispatchError
from ..types import DispatchMessagesFn


def dispatch_or_raise(dispatch_messages: DispatchMessagesFn, *args: Any, **kwargs: Any) -> None:
    try:
        dispatch_messages(*args, **kwargs)
    except DispatchError:
        raise
    except Exception as exc:
        raise DispatchError(f"Message dispatch failed: {exc}") from exc
