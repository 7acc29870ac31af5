from datetime import datetime
from typing import Protocol, runtime_checkable


@runtime_checkable
class DomainEvent(Protocol):
    """
    Minimal contract of every event management domain event

    - aggregate_id: id of the Event aggregate that emitted it
    - occurred_at: when the fact happened (UTC)
    """

    @property
    def aggregate_id(self) -> str: ...

    @property
    def occurred_at(self) -> datetime: ...
