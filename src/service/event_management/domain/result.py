from typing import Any, Dict, Generic, Optional, TypeVar

import attrs

from src.service.event_management.domain.event_error import EventError, EventErrorCode


T = TypeVar('T')


@attrs.define(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a domain operation

    Success carries an optional value, failure carries exactly one EventError.
    Domain methods never raise across the aggregate boundary; they return this.
    """

    value: Optional[T] = None
    error: Optional[EventError] = None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> 'Result[T]':
        return cls(value=value)

    @classmethod
    def fail(cls, error: EventError) -> 'Result[T]':
        return cls(error=error)

    @classmethod
    def failure(
        cls, code: EventErrorCode, message: str, details: Optional[Dict[str, Any]] = None
    ) -> 'Result[T]':
        return cls(error=EventError(code=code, message=message, details=details or {}))

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def code(self) -> Optional[EventErrorCode]:
        return self.error.code if self.error else None

    def unwrap(self) -> T:
        if self.error is not None:
            raise ValueError(f'Cannot unwrap a failed result: {self.error}')
        return self.value  # type: ignore[return-value]
