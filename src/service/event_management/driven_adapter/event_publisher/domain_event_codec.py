"""
Domain Event Codec

Every domain event is encoded into the same envelope:

    {
        "event_type": "EventPublished",
        "aggregate_id": "0192...",
        "occurred_at": "2026-01-01T10:00:00+00:00",
        "data": { ...remaining attributes... }
    }

Money stays exact: Decimal values are written as strings.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict

import attrs
import orjson

from src.service.event_management.domain.domain_event import DomainEvent


_ENVELOPE_KEYS = frozenset({'aggregate_id', 'occurred_at'})


def _default(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if attrs.has(type(value)):
        return attrs.asdict(value, recurse=True)
    if isinstance(value, (set, frozenset)):
        return sorted(value)
    raise TypeError(f'Type is not JSON serializable: {type(value).__name__}')


def build_event_envelope(event: DomainEvent) -> Dict[str, Any]:
    attributes = attrs.asdict(event, recurse=True) if attrs.has(type(event)) else vars(event).copy()
    occurred_at: datetime = event.occurred_at
    return {
        'event_type': type(event).__name__,
        'aggregate_id': event.aggregate_id,
        'occurred_at': occurred_at.isoformat(),
        'data': {key: value for key, value in attributes.items() if key not in _ENVELOPE_KEYS},
    }


def encode_domain_event(event: DomainEvent) -> bytes:
    return orjson.dumps(build_event_envelope(event), default=_default)


def decode_domain_event(payload: bytes) -> Dict[str, Any]:
    """Parse an encoded envelope back into a plain dict; the event class is not rebuilt."""
    envelope = orjson.loads(payload)
    if not isinstance(envelope, dict):
        raise ValueError('Malformed domain event payload, expected an object')
    missing = {'event_type', 'aggregate_id', 'occurred_at', 'data'} - envelope.keys()
    if missing:
        raise ValueError(f'Malformed domain event payload, missing: {sorted(missing)}')
    return envelope
