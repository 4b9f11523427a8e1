"""Error taxonomy for the return-notification workflow.

Every error carries a human-readable message and a coarse status code:
400 for bad input or failed lookups, 500 for internal consistency and
collaborator failures.
"""

from __future__ import annotations


class ReturnNotificationError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ReturnNotificationError):
    status_code = 400


class NotFoundError(ReturnNotificationError):
    status_code = 400


class IncompleteTemplateError(ReturnNotificationError):
    status_code = 500


class DispatchError(ReturnNotificationError):
    status_code = 500
