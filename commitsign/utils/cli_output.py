"""CLI JSON output wrapper.

Wraps CLI JSON outputs with schema metadata (schema_id, schema_version,
producer, produced_at) so scripts can detect the payload shape.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any

from commitsign import __version__


@dataclass(frozen=True, slots=True)
class SchemaStamp:
    """Schema metadata applied to CLI payloads."""

    schema_id: str
    schema_version: int
    producer: str
    produced_at: str


def build_schema_stamp(
    *,
    schema_id: str,
    schema_version: int,
    producer: str | None = None,
    produced_at: str | None = None,
) -> SchemaStamp:
    """Construct a :class:`SchemaStamp` for reuse across writers."""

    default_producer = producer or f"commitsign-{__version__}"
    timestamp = produced_at or datetime.now(UTC).isoformat()
    return SchemaStamp(
        schema_id=schema_id,
        schema_version=schema_version,
        producer=default_producer,
        produced_at=timestamp,
    )


def json_response(
    schema_id: str,
    schema_version: int,
    **data: Any,
) -> str:
    """Create schema-wrapped JSON response for CLI output.

    Example:
        >>> json_response("signer", 1, program="gpg", signing_key="FFAA")
        {
          "schema_id": "signer",
          "schema_version": 1,
          "producer": "commitsign-0.1.0",
          "produced_at": "2026-10-19T10:30:00+00:00",
          "program": "gpg",
          "signing_key": "FFAA"
        }
    """
    stamp = build_schema_stamp(schema_id=schema_id, schema_version=schema_version)
    wrapped = {
        "schema_id": stamp.schema_id,
        "schema_version": stamp.schema_version,
        "producer": stamp.producer,
        "produced_at": stamp.produced_at,
        **data,
    }
    return json.dumps(wrapped, indent=2, default=str)
