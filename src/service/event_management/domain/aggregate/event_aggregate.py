"""
Event Aggregate - Aggregate Root for Event Management

[DDD Design Principles]
- Event is the Aggregate Root, TicketType entities live inside it
- All mutations go through Event methods and return a Result
- Domain events are buffered on the aggregate; the caller drains them
  with `pull_domain_events()` after a successful save
- The aggregate never performs I/O and never authorizes (callers check ownership)

[Business Invariants]
- total_capacity == sum(ticket_type.quantity), recomputed on every read
- 0 <= sold_tickets <= total_capacity, revenue_amount >= 0
- status only moves along EVENT_STATUS_TRANSITIONS
- ticket type names are unique (case-insensitive), at most 10 per event
- a failed call leaves the aggregate untouched and buffers no event
"""

from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, List, Optional, Union

import attrs
from uuid_utils import uuid7

from src.platform.config.core_setting import settings
from src.platform.logging.loguru_io import Logger
from src.service.event_management.domain.clock import progress_percentage, utc_now
from src.service.event_management.domain.domain_event import (
    Changes,
    DomainEvent,
    EventCancelled,
    EventCreated,
    EventPublished,
    EventUpdated,
    FieldChange,
    TicketTypeAdded,
    TicketTypeSoldOut,
    TicketTypeUpdated,
)
from src.service.event_management.domain.entity.ticket_type_entity import TicketType
from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.enum.event_category import EventCategory
from src.service.event_management.domain.enum.event_status import EventStatus
from src.service.event_management.domain.event_error import EventErrorCode
from src.service.event_management.domain.result import Result
from src.service.event_management.domain.value_object.date_range import DateRange
from src.service.event_management.domain.value_object.location import Location
from src.service.event_management.domain.value_object.sales_period import SalesPeriod
from src.service.event_management.domain.value_object.ticket_price import TicketPrice


MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000
MAX_TICKET_TYPES = 10
DEFAULT_CANCELLATION_REASON = 'No reason provided'

# Marks an optional update argument as "not provided" (None is a real value for nullable fields)
UNSET: Any = attrs.NOTHING


def _validate_title(title: Any) -> Result[str]:
    if not isinstance(title, str) or not title.strip():
        return Result.failure(EventErrorCode.MISSING_TITLE, 'Event title is required')
    if len(title.strip()) > MAX_TITLE_LENGTH:
        return Result.failure(
            EventErrorCode.TITLE_TOO_LONG,
            f'Event title must be at most {MAX_TITLE_LENGTH} characters',
        )
    return Result.ok(title.strip())


def _validate_description(description: Any) -> Result[Optional[str]]:
    if description is None:
        return Result.ok(None)
    if not isinstance(description, str) or len(description) > MAX_DESCRIPTION_LENGTH:
        return Result.failure(
            EventErrorCode.DESCRIPTION_TOO_LONG,
            f'Event description must be text of at most {MAX_DESCRIPTION_LENGTH} characters',
        )
    return Result.ok(description.strip() or None)


def _validate_category(category: Any) -> Result[EventCategory]:
    if isinstance(category, EventCategory):
        return Result.ok(category)
    parsed = EventCategory.from_string(category)
    if parsed is None:
        return Result.failure(
            EventErrorCode.INVALID_CATEGORY,
            f'Invalid event category: {category}',
            {'allowed': [c.value for c in EventCategory]},
        )
    return Result.ok(parsed)


def _default_revenue_currency() -> Currency:
    return Currency.from_string(settings.DEFAULT_CURRENCY) or Currency.TND


@attrs.define
class Event:
    id: str
    organizer_id: str
    title: str
    category: EventCategory
    location: Optional[Location]
    date_range: DateRange
    description: Optional[str] = None
    image_url: Optional[str] = None
    status: EventStatus = EventStatus.DRAFT
    ticket_types: List[TicketType] = attrs.field(factory=list)
    sold_tickets: int = 0
    revenue_amount: Decimal = Decimal('0')
    revenue_currency: Currency = Currency.TND
    created_at: datetime = attrs.field(factory=utc_now)
    updated_at: datetime = attrs.field(factory=utc_now)
    published_at: Optional[datetime] = None
    cancelled_at: Optional[datetime] = None
    cancellation_reason: Optional[str] = None
    _domain_events: List[DomainEvent] = attrs.field(factory=list, init=False, repr=False, eq=False)

    # ================================================================ factories

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        organizer_id: str,
        title: str,
        category: Union[EventCategory, str],
        location: Optional[Location],
        date_range: DateRange,
        description: Optional[str] = None,
        image_url: Optional[str] = None,
        id: Optional[str] = None,
    ) -> Result['Event']:
        """
        Create a DRAFT event - the only way to start an event's lifecycle

        Validates organizer, title, description and category; capacity, sold
        tickets and revenue start at zero. Emits EventCreated.
        """
        if not isinstance(organizer_id, str) or not organizer_id.strip():
            return Result.failure(EventErrorCode.MISSING_ORGANIZER, 'Organizer id is required')

        title_result = _validate_title(title)
        if title_result.is_failure:
            return Result.fail(title_result.error)  # type: ignore[arg-type]

        description_result = _validate_description(description)
        if description_result.is_failure:
            return Result.fail(description_result.error)  # type: ignore[arg-type]

        category_result = _validate_category(category)
        if category_result.is_failure:
            return Result.fail(category_result.error)  # type: ignore[arg-type]

        if location is not None and not isinstance(location, Location):
            return Result.failure(EventErrorCode.INVALID_LOCATION, 'Location is invalid')
        if not isinstance(date_range, DateRange):
            return Result.failure(EventErrorCode.INVALID_DATE_RANGE, 'Event date range is required')

        now = utc_now()
        event = cls(
            id=id or str(uuid7()),
            organizer_id=organizer_id.strip(),
            title=title_result.unwrap(),
            description=description_result.value,
            category=category_result.unwrap(),
            location=location,
            date_range=date_range,
            image_url=image_url or None,
            status=EventStatus.DRAFT,
            revenue_currency=_default_revenue_currency(),
            created_at=now,
            updated_at=now,
        )
        event._record(
            EventCreated(
                event_id=event.id,
                organizer_id=event.organizer_id,
                title=event.title,
                category=event.category,
            )
        )
        return Result.ok(event)

    @classmethod
    def reconstitute(cls, **props: Any) -> 'Event':
        """Rebuild from persistence: no validation, no domain events."""
        return cls(**props)

    # ============================================================ domain events

    @property
    def domain_events(self) -> List[DomainEvent]:
        return list(self._domain_events)

    def pull_domain_events(self) -> List[DomainEvent]:
        events, self._domain_events = self._domain_events, []
        return events

    def _record(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def _touch(self) -> None:
        self.updated_at = utc_now()

    # ================================================================== queries

    @property
    def total_capacity(self) -> int:
        return sum(ticket_type.quantity for ticket_type in self.ticket_types)

    @property
    def ticket_type_count(self) -> int:
        return len(self.ticket_types)

    def available_capacity(self) -> int:
        return max(0, self.total_capacity - self.sold_tickets)

    def sales_progress(self) -> int:
        return progress_percentage(self.sold_tickets, self.total_capacity)

    def is_sold_out(self) -> bool:
        capacity = self.total_capacity
        return capacity > 0 and self.sold_tickets >= capacity

    def can_be_cancelled(self) -> bool:
        return self.status.is_cancellable() and not self.has_started()

    def can_be_modified(self) -> bool:
        return self.status.is_modifiable()

    def is_published(self) -> bool:
        return self.status is EventStatus.PUBLISHED

    def has_started(self) -> bool:
        return self.date_range.has_started()

    def has_ended(self) -> bool:
        return self.date_range.is_in_past()

    def is_ongoing(self) -> bool:
        return self.date_range.is_ongoing()

    def is_in_future(self) -> bool:
        return self.date_range.is_in_future()

    def active_ticket_types(self) -> List[TicketType]:
        """Ticket types a buyer can purchase right now."""
        return [tt for tt in self.ticket_types if tt.is_on_sale()]

    def find_ticket_type(self, ticket_type_id: str) -> Optional[TicketType]:
        return next((tt for tt in self.ticket_types if tt.id == ticket_type_id), None)

    def _ticket_type_index(self, ticket_type_id: str) -> Optional[int]:
        return next(
            (i for i, tt in enumerate(self.ticket_types) if tt.id == ticket_type_id), None
        )

    def total_revenue(self) -> Optional[TicketPrice]:
        """None while nothing has been sold (a TicketPrice is always positive)."""
        if self.revenue_amount <= 0:
            return None
        return TicketPrice(amount=self.revenue_amount, currency=self.revenue_currency)

    def _name_taken(self, name: str, exclude_id: Optional[str] = None) -> bool:
        wanted = name.strip().casefold()
        return any(
            tt.name.casefold() == wanted for tt in self.ticket_types if tt.id != exclude_id
        )

    # ==================================================== ticket type commands

    @Logger.io
    def add_ticket_type(self, ticket_type: TicketType) -> Result[None]:
        if self.status not in (EventStatus.DRAFT, EventStatus.PUBLISHED):
            return Result.failure(
                EventErrorCode.EVENT_CANNOT_BE_MODIFIED,
                f'Cannot add ticket type to an event in status {self.status}',
                {'status': self.status.value},
            )
        if len(self.ticket_types) >= MAX_TICKET_TYPES:
            return Result.failure(
                EventErrorCode.MAX_TICKET_TYPES_REACHED,
                f'An event can have at most {MAX_TICKET_TYPES} ticket types',
                {'limit': MAX_TICKET_TYPES},
            )
        if self._name_taken(ticket_type.name):
            return Result.failure(
                EventErrorCode.DUPLICATE_TICKET_TYPE_NAME,
                f'Ticket type name "{ticket_type.name}" already exists',
                {'name': ticket_type.name},
            )
        if not ticket_type.sales_period.validate_for_event(self.date_range.start):
            return Result.failure(
                EventErrorCode.INVALID_SALES_PERIOD,
                'Ticket sales must end before the event starts',
                {
                    'sales_end': ticket_type.sales_period.end.isoformat(),
                    'event_start': self.date_range.start.isoformat(),
                },
            )

        self.ticket_types.append(ticket_type)
        self._touch()
        self._record(
            TicketTypeAdded(
                event_id=self.id,
                ticket_type_id=ticket_type.id,
                name=ticket_type.name,
                price=ticket_type.price,
                quantity=ticket_type.quantity,
                sales_period=ticket_type.sales_period,
            )
        )
        return Result.ok()

    @Logger.io
    def update_ticket_type(
        self,
        ticket_type_id: str,
        *,
        name: Optional[str] = None,
        description: Optional[str] = UNSET,
        price: Optional[TicketPrice] = None,
        quantity: Optional[int] = None,
        sales_period: Optional[SalesPeriod] = None,
        is_active: Optional[bool] = None,
    ) -> Result[TicketType]:
        """
        Apply the provided fields through the entity's own update methods

        Works on a copy that replaces the original only when every field
        succeeded, so the first failure leaves the event unchanged. Values are
        compared after normalization, so re-sending the stored value is a no-op.
        """
        index = self._ticket_type_index(ticket_type_id)
        if index is None:
            return Result.failure(
                EventErrorCode.TICKET_TYPE_NOT_FOUND,
                f'Ticket type {ticket_type_id} not found',
                {'ticket_type_id': ticket_type_id},
            )

        original = self.ticket_types[index]
        draft = attrs.evolve(original)
        changes: Changes = {}

        if name is not None:
            result = draft.update_name(name)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            if draft.name != original.name:
                if self._name_taken(draft.name, exclude_id=ticket_type_id):
                    return Result.failure(
                        EventErrorCode.DUPLICATE_TICKET_TYPE_NAME,
                        f'Ticket type name "{draft.name}" already exists',
                        {'name': draft.name},
                    )
                changes['name'] = FieldChange(old=original.name, new=draft.name)

        if description is not UNSET:
            result = draft.update_description(description)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            if draft.description != original.description:
                changes['description'] = FieldChange(
                    old=original.description, new=draft.description
                )

        if price is not None and price != original.price:
            result = draft.update_price(price)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            changes['price'] = FieldChange(old=original.price.to_dict(), new=price.to_dict())

        if quantity is not None and quantity != original.quantity:
            result = draft.update_quantity(quantity)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            changes['quantity'] = FieldChange(old=original.quantity, new=quantity)

        if sales_period is not None and sales_period != original.sales_period:
            if not isinstance(sales_period, SalesPeriod):
                return Result.failure(
                    EventErrorCode.INVALID_SALES_PERIOD, 'Sales period is invalid'
                )
            if not sales_period.validate_for_event(self.date_range.start):
                return Result.failure(
                    EventErrorCode.INVALID_SALES_PERIOD,
                    'Ticket sales must end before the event starts',
                    {
                        'sales_end': sales_period.end.isoformat(),
                        'event_start': self.date_range.start.isoformat(),
                    },
                )
            result = draft.update_sales_period(sales_period)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            changes['sales_period'] = FieldChange(
                old=original.sales_period.to_iso_strings(), new=sales_period.to_iso_strings()
            )

        # Last, so reactivation is checked against the new sales window
        if is_active is not None and bool(is_active) != original.is_active:
            result = draft.reactivate() if is_active else draft.deactivate()
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            changes['is_active'] = FieldChange(old=original.is_active, new=draft.is_active)

        if not changes:
            return Result.ok(original)

        self.ticket_types[index] = draft
        self._touch()
        self._record(
            TicketTypeUpdated(
                event_id=self.id,
                ticket_type_id=draft.id,
                name=draft.name,
                changes=changes,
                updated_at=self.updated_at,
            )
        )
        return Result.ok(draft)

    @Logger.io
    def remove_ticket_type(self, ticket_type_id: str) -> Result[None]:
        if self.status is not EventStatus.DRAFT:
            return Result.failure(
                EventErrorCode.EVENT_CANNOT_BE_MODIFIED,
                'Ticket types can only be removed while the event is a draft',
                {'status': self.status.value},
            )
        ticket_type = self.find_ticket_type(ticket_type_id)
        if ticket_type is None:
            return Result.failure(
                EventErrorCode.TICKET_TYPE_NOT_FOUND,
                f'Ticket type {ticket_type_id} not found',
                {'ticket_type_id': ticket_type_id},
            )
        if ticket_type.has_sales():
            return Result.failure(
                EventErrorCode.TICKET_TYPE_HAS_SALES,
                f'Cannot remove "{ticket_type.name}": {ticket_type.sold_quantity} tickets sold',
                {'sold_quantity': ticket_type.sold_quantity},
            )

        self.ticket_types.remove(ticket_type)
        self._touch()
        return Result.ok()

    # ======================================================= lifecycle commands

    @Logger.io
    def publish(self) -> Result[None]:
        if self.status is not EventStatus.DRAFT:
            return Result.failure(
                EventErrorCode.WRONG_STATUS,
                f'Only draft events can be published (current status: {self.status})',
                {'status': self.status.value},
            )
        if not self.title or not self.title.strip():
            return Result.failure(EventErrorCode.MISSING_TITLE, 'Event title is required')
        if self.location is None:
            return Result.failure(EventErrorCode.MISSING_LOCATION, 'Event location is required')
        if not self.date_range.is_in_future():
            return Result.failure(
                EventErrorCode.EVENT_DATE_IN_PAST, 'Cannot publish an event that has already started'
            )
        if not any(tt.is_active for tt in self.ticket_types):
            return Result.failure(
                EventErrorCode.MISSING_TICKET_TYPES,
                'At least one active ticket type is required to publish',
            )

        self.status = EventStatus.PUBLISHED
        self.published_at = utc_now()
        self._touch()
        self._record(
            EventPublished(
                event_id=self.id,
                organizer_id=self.organizer_id,
                title=self.title,
                published_at=self.published_at,
                ticket_type_count=self.ticket_type_count,
                total_capacity=self.total_capacity,
            )
        )
        return Result.ok()

    @Logger.io
    def cancel(self, reason: Optional[str] = None) -> Result[None]:
        if not self.can_be_cancelled():
            if self.status is EventStatus.CANCELLED:
                return Result.failure(EventErrorCode.ALREADY_CANCELLED, 'Event is already cancelled')
            if self.status is EventStatus.COMPLETED:
                return Result.failure(EventErrorCode.ALREADY_COMPLETED, 'Event is already completed')
            if self.has_started():
                return Result.failure(
                    EventErrorCode.EVENT_ALREADY_STARTED,
                    'Cannot cancel an event that has already started',
                    {'start': self.date_range.start.isoformat()},
                )
            return Result.failure(
                EventErrorCode.WRONG_STATUS,
                f'Event cannot be cancelled in status {self.status}',
                {'status': self.status.value},
            )

        self.status = EventStatus.CANCELLED
        self.cancelled_at = utc_now()
        self.cancellation_reason = (reason or '').strip() or DEFAULT_CANCELLATION_REASON
        self._touch()
        self._record(
            EventCancelled(
                event_id=self.id,
                organizer_id=self.organizer_id,
                title=self.title,
                reason=self.cancellation_reason,
                cancelled_at=self.cancelled_at,
                sold_tickets=self.sold_tickets,
                revenue_amount=self.revenue_amount,
                revenue_currency=self.revenue_currency,
            )
        )
        return Result.ok()

    def mark_as_completed(self) -> EventStatus:
        """Scheduler hook: PUBLISHED and ended -> COMPLETED, otherwise a silent no-op."""
        if self.status is EventStatus.PUBLISHED and self.has_ended():
            self.status = EventStatus.COMPLETED
            self._touch()
        return self.status

    @Logger.io
    def update_details(
        self,
        *,
        title: Optional[str] = None,
        description: Optional[str] = UNSET,
        category: Union[EventCategory, str, None] = None,
        location: Optional[Location] = None,
        date_range: Optional[DateRange] = None,
    ) -> Result[None]:
        # Validate everything first, then apply
        changes: Changes = {}
        updates: Dict[str, Any] = {}

        if title is not None:
            result = _validate_title(title)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            if result.value != self.title:
                updates['title'] = result.value
                changes['title'] = FieldChange(old=self.title, new=result.value)

        if description is not UNSET:
            result = _validate_description(description)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            if result.value != self.description:
                updates['description'] = result.value
                changes['description'] = FieldChange(old=self.description, new=result.value)

        if category is not None:
            result = _validate_category(category)
            if result.is_failure:
                return Result.fail(result.error)  # type: ignore[arg-type]
            if result.value is not self.category:
                updates['category'] = result.value
                changes['category'] = FieldChange(old=self.category, new=result.value)

        if location is not None:
            if self.is_published():
                return Result.failure(
                    EventErrorCode.EVENT_CANNOT_BE_MODIFIED,
                    'Cannot change the location of a published event',
                )
            if not isinstance(location, Location):
                return Result.failure(EventErrorCode.INVALID_LOCATION, 'Location is invalid')
            if location != self.location:
                updates['location'] = location
                changes['location'] = FieldChange(
                    old=self.location.short_location if self.location else None,
                    new=location.short_location,
                )

        if date_range is not None:
            if self.is_published():
                return Result.failure(
                    EventErrorCode.EVENT_CANNOT_BE_MODIFIED,
                    'Cannot change the dates of a published event',
                )
            if not isinstance(date_range, DateRange):
                return Result.failure(EventErrorCode.INVALID_DATE_RANGE, 'Date range is invalid')
            late_sales = [
                tt.name
                for tt in self.ticket_types
                if not tt.sales_period.validate_for_event(date_range.start)
            ]
            if late_sales:
                return Result.failure(
                    EventErrorCode.INVALID_SALES_PERIOD,
                    'Ticket sales must end before the new event start',
                    {'ticket_types': late_sales, 'event_start': date_range.start.isoformat()},
                )
            if date_range != self.date_range:
                updates['date_range'] = date_range
                changes['date_range'] = FieldChange(
                    old=self.date_range.to_iso_strings(), new=date_range.to_iso_strings()
                )

        if not changes:
            return Result.ok()

        for field_name, value in updates.items():
            setattr(self, field_name, value)
        self._touch()
        self._record(
            EventUpdated(
                event_id=self.id,
                organizer_id=self.organizer_id,
                changes=changes,
                updated_at=self.updated_at,
            )
        )
        return Result.ok()

    def update_image(self, image_url: Optional[str]) -> Result[None]:
        self.image_url = image_url or None
        self._touch()
        return Result.ok()

    # ============================================================ sales ledger

    @Logger.io
    def increment_sold_tickets(self, ticket_type_id: str, quantity: int) -> Result[None]:
        index = self._ticket_type_index(ticket_type_id)
        if index is None:
            return Result.failure(
                EventErrorCode.TICKET_TYPE_NOT_FOUND,
                f'Ticket type {ticket_type_id} not found',
                {'ticket_type_id': ticket_type_id},
            )

        original = self.ticket_types[index]
        draft = attrs.evolve(original)
        result = draft.increment_sold(quantity)
        if result.is_failure:
            return result
        revenue = self._round_revenue(self.revenue_amount + draft.price.amount * quantity)
        if revenue.is_failure:
            return Result.fail(revenue.error)  # type: ignore[arg-type]

        self._warn_on_currency_mismatch(draft)
        self.ticket_types[index] = draft
        self.sold_tickets += quantity
        self.revenue_amount = revenue.unwrap()
        self._touch()

        if draft.is_sold_out() and not original.is_sold_out():
            self._record(
                TicketTypeSoldOut(
                    event_id=self.id,
                    ticket_type_id=draft.id,
                    name=draft.name,
                    total_quantity=draft.quantity,
                )
            )
        return Result.ok()

    @Logger.io
    def decrement_sold_tickets(self, ticket_type_id: str, quantity: int) -> Result[None]:
        index = self._ticket_type_index(ticket_type_id)
        if index is None:
            return Result.failure(
                EventErrorCode.TICKET_TYPE_NOT_FOUND,
                f'Ticket type {ticket_type_id} not found',
                {'ticket_type_id': ticket_type_id},
            )

        draft = attrs.evolve(self.ticket_types[index])
        result = draft.decrement_sold(quantity)
        if result.is_failure:
            return result
        revenue = self._round_revenue(self.revenue_amount - draft.price.amount * quantity)
        if revenue.is_failure:
            return Result.fail(revenue.error)  # type: ignore[arg-type]

        self._warn_on_currency_mismatch(draft)
        self.ticket_types[index] = draft
        self.sold_tickets = max(0, self.sold_tickets - quantity)
        self.revenue_amount = max(Decimal('0'), revenue.unwrap())
        self._touch()
        return Result.ok()

    def _round_revenue(self, amount: Decimal) -> Result[Decimal]:
        try:
            return Result.ok(self.revenue_currency.round_amount(amount))
        except InvalidOperation:
            return Result.failure(
                EventErrorCode.INVALID_PRICE,
                'Revenue amount exceeds the supported precision',
                {'currency': self.revenue_currency.value},
            )

    def _warn_on_currency_mismatch(self, ticket_type: TicketType) -> None:
        # Single reporting currency per event; amounts are added without conversion
        if ticket_type.price.currency is not self.revenue_currency:
            Logger.base.warning(
                f'Ticket type {ticket_type.id} is priced in {ticket_type.price.currency} '
                f'but event {self.id} reports revenue in {self.revenue_currency}; no conversion applied'
            )

    # ============================================================ serialization

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'organizer_id': self.organizer_id,
            'title': self.title,
            'description': self.description,
            'category': self.category.value,
            'location': self.location.to_dict() if self.location else None,
            'date_range': self.date_range.to_iso_strings(),
            'image_url': self.image_url,
            'status': self.status.value,
            'ticket_types': [tt.to_dict() for tt in self.ticket_types],
            'total_capacity': self.total_capacity,
            'sold_tickets': self.sold_tickets,
            'available_capacity': self.available_capacity(),
            'revenue': {'amount': self.revenue_amount, 'currency': self.revenue_currency.value},
            'sales_progress': self.sales_progress(),
            'is_sold_out': self.is_sold_out(),
            'created_at': self.created_at.isoformat(),
            'updated_at': self.updated_at.isoformat(),
            'published_at': self.published_at.isoformat() if self.published_at else None,
            'cancelled_at': self.cancelled_at.isoformat() if self.cancelled_at else None,
            'cancellation_reason': self.cancellation_reason,
        }
