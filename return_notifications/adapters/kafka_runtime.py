"""Kafka transport adapters for publishing and consuming return notifications.

Mental model refresher:
- This module is transport glue to Kafka itself.
- Each polled record is decoded here and handed to `handle_message`.
- What happens to a record that did not commit depends on how it failed:
  - `rejected_invalid_request` / `parse_failed`: the request itself is bad and
    redelivery cannot fix it. It goes to the DLQ, or is dropped (committed and
    logged) when the DLQ is off.
  - `processed_failed`: template or gateway trouble that may clear up. It goes
    to the DLQ, or is held uncommitted when the DLQ is off.
- Business/channel logic still lives in domain/application layers.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
import json
import os
from typing import Any, Callable, Mapping

from ..application.collaborators import Collaborators
from .consumer_handler import CommitFn, Record, handle_message

DEFAULT_TOPIC = "returns.notifications"
DEFAULT_GROUP_ID = "return-notifications-worker"

ACTION_NONE = "none"
ACTION_DLQ = "dlq"
ACTION_DROP = "drop"
ACTION_HOLD = "hold"

PERMANENT_FAILURES = frozenset({"rejected_invalid_request", "parse_failed"})


@dataclass(frozen=True)
class WorkerSettings:
    bootstrap_servers: list[str]
    topic: str
    dlq_topic: str
    dlq_enabled: bool
    group_id: str
    auto_offset_reset: str
    poll_timeout_ms: int
    max_records: int
    send_timeout_seconds: float

    @classmethod
    def from_env(cls) -> "WorkerSettings":
        topic = _topic_from_env()
        return cls(
            bootstrap_servers=_bootstrap_servers_from_env(),
            topic=topic,
            dlq_topic=os.getenv("KAFKA_TOPIC_RETURN_NOTIFICATIONS_DLQ", f"{topic}.dlq"),
            dlq_enabled=_env_bool("KAFKA_DLQ_ENABLED", default=True),
            group_id=os.getenv("KAFKA_GROUP_ID", DEFAULT_GROUP_ID),
            auto_offset_reset=os.getenv("KAFKA_AUTO_OFFSET_RESET", "earliest"),
            poll_timeout_ms=_poll_timeout_ms_from_env(),
            max_records=int(os.getenv("KAFKA_MAX_RECORDS_PER_POLL", "50")),
            send_timeout_seconds=float(
                os.getenv(
                    "KAFKA_DLQ_SEND_TIMEOUT_SECONDS",
                    os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10"),
                )
            ),
        )


def publish_return_event(
    payload: Mapping[str, Any],
    *,
    topic: str | None = None,
) -> dict[str, Any]:
    """Publish one goods-return notification request to Kafka."""
    _KafkaConsumer, KafkaProducer, _TopicPartition, _OffsetAndMetadata = _import_kafka_python()
    send_timeout_seconds = float(os.getenv("KAFKA_SEND_TIMEOUT_SECONDS", "10"))

    producer = _json_producer(KafkaProducer, _bootstrap_servers_from_env())
    try:
        future = producer.send(topic or _topic_from_env(), value=dict(payload))
        metadata = future.get(timeout=send_timeout_seconds)
        producer.flush(timeout=send_timeout_seconds)
    finally:
        producer.close()

    return {
        "topic": metadata.topic,
        "partition": metadata.partition,
        "offset": metadata.offset,
    }


def failure_action(status: str, *, dlq_enabled: bool) -> str:
    """Decide what the worker does with a record after `handle_message`."""
    if status == "processed_and_committed":
        return ACTION_NONE
    if dlq_enabled:
        return ACTION_DLQ
    if status in PERMANENT_FAILURES:
        return ACTION_DROP
    return ACTION_HOLD


def process_record(
    record: Record,
    *,
    collaborators: Collaborators,
    commit: CommitFn,
) -> dict[str, Any]:
    """Decode one raw Kafka record and run it through the consumer handler."""
    try:
        payload = _decode_request(record.get("value"))
    except ValueError as exc:
        return {
            "status": "parse_failed",
            "record_meta": _record_meta(record),
            "result": None,
            "should_commit": False,
            "error": f"decode_failed: {exc}",
        }

    return handle_message(
        {**record, "value": payload},
        collaborators=collaborators,
        commit=commit,
    )


def run_return_worker_forever(collaborators: Collaborators) -> int:
    """Run Kafka consumer loop for goods-return notifications.

    Offsets are committed manually: on success by the handler, and after a
    failure according to `failure_action`.
    """
    KafkaConsumer, KafkaProducer, TopicPartition, OffsetAndMetadata = _import_kafka_python()
    settings = WorkerSettings.from_env()

    consumer = KafkaConsumer(
        settings.topic,
        bootstrap_servers=settings.bootstrap_servers,
        group_id=settings.group_id,
        enable_auto_commit=False,
        auto_offset_reset=settings.auto_offset_reset,
    )
    dlq_producer = (
        _json_producer(KafkaProducer, settings.bootstrap_servers)
        if settings.dlq_enabled
        else None
    )
    print(
        f"[WORKER START] topic={settings.topic} group_id={settings.group_id} "
        f"dlq_enabled={settings.dlq_enabled} dlq_topic={settings.dlq_topic}"
    )

    def commit(record: Record) -> None:
        partition = TopicPartition(record["topic"], record["partition"])
        consumer.commit(offsets={partition: OffsetAndMetadata(record["offset"] + 1, "", -1)})
        print(f"[COMMIT] {_where(record)}")

    try:
        while True:
            batches = consumer.poll(
                timeout_ms=settings.poll_timeout_ms, max_records=settings.max_records
            )
            for records in batches.values():
                for message in records:
                    record = {
                        "topic": message.topic,
                        "partition": int(message.partition),
                        "offset": int(message.offset),
                        "value": message.value,
                    }
                    outcome = process_record(record, collaborators=collaborators, commit=commit)
                    print(
                        f"[RESULT] {_where(record)} status={outcome['status']} "
                        f"error={outcome['error']} "
                        f"result={json.dumps(outcome['result'], separators=(',', ':'))}"
                    )
                    _settle_failure(
                        record,
                        outcome,
                        settings=settings,
                        dlq_producer=dlq_producer,
                        commit=commit,
                    )
    except KeyboardInterrupt:
        print("[WORKER STOP] received keyboard interrupt")
        return 0
    except Exception as exc:
        print(f"[WORKER ERROR] {exc}")
        return 1
    finally:
        try:
            consumer.close()
        except Exception as exc:
            print(f"[WORKER WARN] consumer close failed: {exc}")
        if dlq_producer is not None:
            try:
                dlq_producer.flush(timeout=settings.send_timeout_seconds)
                dlq_producer.close()
            except Exception as exc:
                print(f"[WORKER WARN] dlq producer shutdown failed: {exc}")


def _settle_failure(
    record: Record,
    outcome: Mapping[str, Any],
    *,
    settings: WorkerSettings,
    dlq_producer: Any,
    commit: Callable[[Record], None],
) -> None:
    action = failure_action(outcome["status"], dlq_enabled=dlq_producer is not None)
    if action == ACTION_NONE:
        return

    if action == ACTION_DROP:
        print(f"[DROPPED] {_where(record)} status={outcome['status']} error={outcome['error']}")
        commit(record)
        return

    if action == ACTION_DLQ:
        dlq_payload = _build_dlq_payload(outcome, record.get("value"))
        try:
            metadata = dlq_producer.send(settings.dlq_topic, value=dlq_payload).get(
                timeout=settings.send_timeout_seconds
            )
        except Exception as exc:
            print(f"[DLQ ERROR] {_where(record)} error={exc}")
        else:
            print(
                f"[DLQ] {_where(record)} dlq_topic={metadata.topic} "
                f"dlq_partition={metadata.partition} dlq_offset={metadata.offset}"
            )
            commit(record)
            return

    print(f"[NO-COMMIT] {_where(record)} status={outcome['status']} error={outcome['error']}")


def _build_dlq_payload(outcome: Mapping[str, Any], source_value: Any) -> dict[str, Any]:
    meta = outcome["record_meta"]
    payload: dict[str, Any] = {
        "event_type": f"{meta['topic']}.dlq",
        "failed_at": datetime.now(tz=UTC).isoformat(),
        "failure_status": outcome["status"],
        "failure_reason": outcome["error"],
        "source": dict(meta),
    }

    if isinstance(source_value, (bytes, bytearray)):
        try:
            source_value = _decode_request(source_value)
        except ValueError:
            source_value = bytes(source_value).decode("utf-8", errors="replace")

    if isinstance(source_value, Mapping):
        payload["payload"] = dict(source_value)
        data = source_value.get("data")
        request = data if isinstance(data, Mapping) else source_value
        complaint_id = request.get("complaintId")
        if complaint_id not in (None, "", 0):
            payload["source_complaint_id"] = complaint_id
    else:
        payload["payload"] = source_value if isinstance(source_value, str) else repr(source_value)

    return payload


def _decode_request(raw: Any) -> dict[str, Any]:
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8")
    if not isinstance(raw, str):
        raise ValueError(f"Unsupported Kafka payload type: {type(raw).__name__}")

    parsed = json.loads(raw)
    if not isinstance(parsed, dict):
        raise ValueError("Kafka payload must decode to a JSON object")
    return parsed


def _json_producer(producer_type: Any, bootstrap_servers: list[str]) -> Any:
    return producer_type(
        bootstrap_servers=bootstrap_servers,
        value_serializer=lambda value: json.dumps(value, separators=(",", ":")).encode("utf-8"),
        acks=os.getenv("KAFKA_PRODUCER_ACKS", "all"),
    )


def _record_meta(record: Record) -> dict[str, Any]:
    return {
        "topic": record.get("topic"),
        "partition": record.get("partition"),
        "offset": record.get("offset"),
    }


def _where(record: Mapping[str, Any]) -> str:
    return f"topic={record['topic']} partition={record['partition']} offset={record['offset']}"


def _import_kafka_python() -> tuple[Any, Any, Any, Any]:
    try:
        from kafka import KafkaConsumer, KafkaProducer, TopicPartition
        from kafka.structs import OffsetAndMetadata
    except ImportError as exc:
        raise RuntimeError(
            "Kafka support requires `kafka-python`. Install with: pip install kafka-python"
        ) from exc
    return KafkaConsumer, KafkaProducer, TopicPartition, OffsetAndMetadata


def _required_env(name: str) -> str:
    value = os.getenv(name)
    if value is None or not value.strip():
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value.strip()


def _topic_from_env() -> str:
    return os.getenv("KAFKA_TOPIC_RETURN_NOTIFICATIONS", DEFAULT_TOPIC)


def _bootstrap_servers_from_env() -> list[str]:
    raw = _required_env("KAFKA_BOOTSTRAP_SERVERS")
    servers = [item.strip() for item in raw.split(",") if item.strip()]
    if not servers:
        raise RuntimeError("KAFKA_BOOTSTRAP_SERVERS must include at least one host:port")
    return servers


def _poll_timeout_ms_from_env() -> int:
    timeout_ms = int(float(os.getenv("KAFKA_POLL_TIMEOUT_SECONDS", "1.0")) * 1000)
    if timeout_ms <= 0:
        raise RuntimeError("KAFKA_POLL_TIMEOUT_SECONDS must be > 0")
    return timeout_ms


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    normalized = raw.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    raise RuntimeError(f"Invalid boolean value for {name}: {raw!r}")
