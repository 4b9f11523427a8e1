"""Shared type aliases for the return-notification package."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Optional, Sequence

Payload = Mapping[str, Any]
TemplateData = dict[str, Any]
Message = dict[str, str]
NotificationResult = dict[str, Any]
ResultUpdate = dict[str, Any]

FindByIdFn = Callable[[int], Optional[Any]]
StatusNameFn = Callable[[int], str]
TranslateFn = Callable[[str, Optional[Mapping[str, Any]], int], str]
FromAddressFn = Callable[[int], str]
PermittedEmailsFn = Callable[[int, str], Sequence[str]]
DispatchMessagesFn = Callable[..., None]
ClientNotificationFn = Callable[
    [int, int, str, int, Mapping[str, Any]], tuple[bool, Optional[str]]
]
