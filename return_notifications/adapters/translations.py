"""Message catalog adapter used as the `translate` collaborator.

Templates use `{NAME}` placeholders filled from the params mapping. Unknown
named placeholders render as empty text and unknown keys render as the key
itself. A template that cannot be formatted (positional fields, unbalanced
braces) is returned raw, so a bad catalog entry shows up in the output instead
of failing a send.
"""

from __future__ import annotations

import string
from typing import Any, Mapping, Optional

from ..types import TranslateFn

DEFAULT_MESSAGES: dict[str, str] = {
    "NewPositionAdded": "New position added",
    "PositionStatusHasChanged": "Position status has changed from {FROM} to {TO}",
    "complaintEmployeeEmailSubject": (
        "Goods return {COMPLAINT_NUMBER}: {DIFFERENCES}"
    ),
    "complaintEmployeeEmailBody": (
        "Complaint {COMPLAINT_NUMBER} (id {COMPLAINT_ID}) from {DATE}\n"
        "Client: {CLIENT_NAME} (id {CLIENT_ID})\n"
        "Creator: {CREATOR_NAME} (id {CREATOR_ID})\n"
        "Expert: {EXPERT_NAME} (id {EXPERT_ID})\n"
        "Consumption: {CONSUMPTION_NUMBER} (id {CONSUMPTION_ID})\n"
        "Agreement: {AGREEMENT_NUMBER}\n"
        "{DIFFERENCES}"
    ),
    "complaintClientEmailSubject": "Your return {COMPLAINT_NUMBER}: {DIFFERENCES}",
    "complaintClientEmailBody": (
        "Dear {CLIENT_NAME},\n\n"
        "{DIFFERENCES} for your return {COMPLAINT_NUMBER} "
        "under agreement {AGREEMENT_NUMBER}."
    ),
    "complaintClientSmsBody": "Return {COMPLAINT_NUMBER}: {DIFFERENCES}",
}


class _BlankMissing(dict):
    def __missing__(self, key: str) -> str:
        return ""


def make_translator(
    messages: Optional[Mapping[str, str]] = None,
    *,
    reseller_overrides: Optional[Mapping[int, Mapping[str, str]]] = None,
) -> TranslateFn:
    """Build a `translate(key, params, reseller_id)` callable over a catalog."""
    catalog = dict(DEFAULT_MESSAGES if messages is None else messages)
    overrides = {
        int(reseller_id): dict(entries)
        for reseller_id, entries in (reseller_overrides or {}).items()
    }

    def translate(key: str, params: Optional[Mapping[str, Any]], reseller_id: int) -> str:
        template = overrides.get(reseller_id, {}).get(key, catalog.get(key))
        if template is None:
            return key
        values = _BlankMissing({str(name): value for name, value in (params or {}).items()})
        try:
            return string.Formatter().vformat(template, (), values)
        except (ValueError, IndexError):
            return template

    return translate
