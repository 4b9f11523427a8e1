"""Goods-return complaint notifications for employees and clients."""

from .adapters.consumer_handler import handle_batch, handle_message
from .adapters.kafka_runtime import publish_return_event, run_return_worker_forever
from .adapters.payload import parse_notification_request
from .application.collaborators import Collaborators
from .application.process import perform_return_notification
from .errors import (
    DispatchError,
    IncompleteTemplateError,
    NotFoundError,
    ReturnNotificationError,
    ValidationError,
)

__all__ = [
    "Collaborators",
    "DispatchError",
    "IncompleteTemplateError",
    "NotFoundError",
    "ReturnNotificationError",
    "ValidationError",
    "handle_batch",
    "handle_message",
    "parse_notification_request",
    "perform_return_notification",
    "publish_return_event",
    "run_return_worker_forever",
]
