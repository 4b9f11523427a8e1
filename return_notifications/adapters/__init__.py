"""Adapter layer: payload mapping, reference data, rendering and senders.

The consumer handler and Kafka runtime import the application layer, so they
are imported from their own modules rather than re-exported here.
"""

from .directory import StaticDirectory, load_directory_from_env, load_directory_from_file
from .fake_senders import dispatch_messages_via_console, send_client_notification_via_console
from .payload import parse_notification_request
from .real_senders import (
    dispatch_messages_via_mailgun_from_env,
    make_twilio_client_notifier,
    send_sms_via_twilio_from_env,
)
from .translations import DEFAULT_MESSAGES, make_translator

__all__ = [
    "DEFAULT_MESSAGES",
    "StaticDirectory",
    "dispatch_messages_via_console",
    "dispatch_messages_via_mailgun_from_env",
    "load_directory_from_env",
    "load_directory_from_file",
    "make_translator",
    "make_twilio_client_notifier",
    "parse_notification_request",
    "send_client_notification_via_console",
    "send_sms_via_twilio_from_env",
]
