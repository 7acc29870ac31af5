"""
Unit tests for the Event aggregate

Covers the lifecycle (DRAFT -> PUBLISHED -> COMPLETED / CANCELLED), the
ticket type collection rules, the sales ledger and the domain events each
command buffers.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from src.service.event_management.domain.aggregate.event_aggregate import (
    DEFAULT_CANCELLATION_REASON,
    MAX_TICKET_TYPES,
    Event,
)
from src.service.event_management.domain.clock import utc_now
from src.service.event_management.domain.domain_event import (
    EventCancelled,
    EventCreated,
    EventPublished,
    EventUpdated,
    FieldChange,
    TicketTypeAdded,
    TicketTypeSoldOut,
    TicketTypeUpdated,
)
from src.service.event_management.domain.enum import (
    EVENT_STATUS_TRANSITIONS,
    Currency,
    EventCategory,
    EventStatus,
)
from src.service.event_management.domain.event_error import EventErrorCode
from src.service.event_management.domain.value_object import DateRange, SalesPeriod
from test.event_test_constants import ORGANIZER_ID
from test.service.event_management.helpers import (
    future_date_range,
    make_ended_event,
    make_event,
    make_event_with_ticket_type,
    make_location,
    make_price,
    make_published_event,
    make_ticket_type,
    sales_period_for,
)


def make_started_event() -> Event:
    """PUBLISHED event whose start is behind us and end still ahead."""
    start = utc_now() - timedelta(hours=1)
    return Event.reconstitute(
        id='started-event',
        organizer_id=ORGANIZER_ID,
        title='Running concert',
        category=EventCategory.CONCERT,
        location=make_location(),
        date_range=DateRange.from_existing(start, start + timedelta(hours=5)).unwrap(),
        status=EventStatus.PUBLISHED,
        published_at=start - timedelta(days=5),
    )


@pytest.mark.unit
class TestEventCreate:
    def test_create_event_two_hours_ahead(self) -> None:
        """
        Given a start 2 hours from now and an end 2 hours later
        When the event is created
        Then it is a DRAFT with zero capacity and one EventCreated buffered
        """
        # Arrange
        start = utc_now() + timedelta(hours=2)
        date_range = DateRange.create(start, start + timedelta(hours=2)).unwrap()

        # Act
        result = Event.create(
            organizer_id=ORGANIZER_ID,
            title='  Jazz Night  ',
            category='concert',
            location=make_location(),
            date_range=date_range,
        )

        # Assert
        assert result.is_success
        event = result.unwrap()
        assert event.status is EventStatus.DRAFT
        assert event.title == 'Jazz Night'
        assert event.category is EventCategory.CONCERT
        assert event.total_capacity == 0
        assert event.sold_tickets == 0
        assert event.revenue_amount == Decimal('0')
        assert event.revenue_currency is Currency.TND
        assert event.total_revenue() is None
        assert [type(e) for e in event.domain_events] == [EventCreated]

    @pytest.mark.parametrize(
        ('kwargs', 'code'),
        [
            ({'organizer_id': '  '}, EventErrorCode.MISSING_ORGANIZER),
            ({'title': ''}, EventErrorCode.MISSING_TITLE),
            ({'title': 't' * 201}, EventErrorCode.TITLE_TOO_LONG),
            ({'description': 'd' * 5001}, EventErrorCode.DESCRIPTION_TOO_LONG),
            ({'category': 'OPERA'}, EventErrorCode.INVALID_CATEGORY),
        ],
    )
    def test_create_validation(self, kwargs: dict, code: EventErrorCode) -> None:
        params = {
            'organizer_id': ORGANIZER_ID,
            'title': 'Jazz Night',
            'category': EventCategory.CONCERT,
            'location': make_location(),
            'date_range': future_date_range(),
        }
        params.update(kwargs)

        result = Event.create(**params)

        assert result.code is code

    def test_location_is_optional_at_creation(self) -> None:
        result = Event.create(
            organizer_id=ORGANIZER_ID,
            title='Secret show',
            category=EventCategory.CONCERT,
            location=None,
            date_range=future_date_range(),
        )

        assert result.is_success
        assert result.unwrap().location is None

    def test_reconstitute_buffers_no_events(self) -> None:
        event = make_ended_event()

        assert event.domain_events == []
        assert event.has_ended()


@pytest.mark.unit
class TestTicketTypeCollection:
    def test_add_ticket_type(self, draft_event: Event) -> None:
        # Arrange
        ticket_type = make_ticket_type(draft_event, name='VIP', quantity=50)

        # Act
        result = draft_event.add_ticket_type(ticket_type)

        # Assert
        assert result.is_success
        assert draft_event.total_capacity == 50
        assert draft_event.ticket_type_count == 1
        events = draft_event.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], TicketTypeAdded)
        assert events[0].ticket_type_id == ticket_type.id

    def test_sales_ending_after_event_start_fails(self, draft_event: Event) -> None:
        """
        Given a sales period that closes after the event has started
        When the ticket type is added
        Then INVALID_SALES_PERIOD is returned and nothing is added
        """
        late_period = SalesPeriod.create(
            utc_now(), draft_event.date_range.start + timedelta(hours=1)
        ).unwrap()
        ticket_type = make_ticket_type(draft_event, sales_period=late_period)

        result = draft_event.add_ticket_type(ticket_type)

        assert result.code is EventErrorCode.INVALID_SALES_PERIOD
        assert draft_event.ticket_types == []
        assert draft_event.domain_events == []

    def test_sales_ending_exactly_at_start_fails(self, draft_event: Event) -> None:
        period = SalesPeriod.create(utc_now(), draft_event.date_range.start).unwrap()

        result = draft_event.add_ticket_type(make_ticket_type(draft_event, sales_period=period))

        assert result.code is EventErrorCode.INVALID_SALES_PERIOD

    def test_duplicate_name_is_case_insensitive(self, draft_event: Event) -> None:
        draft_event.add_ticket_type(make_ticket_type(draft_event, name='VIP')).unwrap()

        result = draft_event.add_ticket_type(make_ticket_type(draft_event, name=' vip '))

        assert result.code is EventErrorCode.DUPLICATE_TICKET_TYPE_NAME
        assert draft_event.ticket_type_count == 1

    def test_max_ticket_types(self, draft_event: Event) -> None:
        for index in range(MAX_TICKET_TYPES):
            draft_event.add_ticket_type(make_ticket_type(draft_event, name=f'Tier {index}')).unwrap()

        result = draft_event.add_ticket_type(make_ticket_type(draft_event, name='One more'))

        assert result.code is EventErrorCode.MAX_TICKET_TYPES_REACHED
        assert draft_event.ticket_type_count == MAX_TICKET_TYPES

    def test_published_event_accepts_new_ticket_types(self, published_event: Event) -> None:
        result = published_event.add_ticket_type(make_ticket_type(published_event, name='Late'))

        assert result.is_success
        assert published_event.ticket_type_count == 2

    def test_cancelled_event_rejects_ticket_types(self, draft_event: Event) -> None:
        draft_event.cancel('rain').unwrap()

        result = draft_event.add_ticket_type(make_ticket_type(draft_event))

        assert result.code is EventErrorCode.EVENT_CANNOT_BE_MODIFIED

    def test_remove_ticket_type(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id

        result = event_with_ticket_type.remove_ticket_type(ticket_type_id)

        assert result.is_success
        assert event_with_ticket_type.total_capacity == 0

    def test_remove_unknown_ticket_type(self, event_with_ticket_type: Event) -> None:
        result = event_with_ticket_type.remove_ticket_type('missing')

        assert result.code is EventErrorCode.TICKET_TYPE_NOT_FOUND

    def test_remove_sold_ticket_type_fails(self, event_with_ticket_type: Event) -> None:
        ticket_type = event_with_ticket_type.ticket_types[0]
        event_with_ticket_type.increment_sold_tickets(ticket_type.id, 1).unwrap()

        result = event_with_ticket_type.remove_ticket_type(ticket_type.id)

        assert result.code is EventErrorCode.TICKET_TYPE_HAS_SALES
        assert event_with_ticket_type.ticket_type_count == 1

    def test_remove_after_publish_fails(self, published_event: Event) -> None:
        result = published_event.remove_ticket_type(published_event.ticket_types[0].id)

        assert result.code is EventErrorCode.EVENT_CANNOT_BE_MODIFIED


@pytest.mark.unit
class TestUpdateTicketType:
    def test_update_several_fields(self, event_with_ticket_type: Event) -> None:
        # Arrange
        ticket_type_id = event_with_ticket_type.ticket_types[0].id

        # Act
        result = event_with_ticket_type.update_ticket_type(
            ticket_type_id, name='Early Bird', price=make_price('35'), quantity=150
        )

        # Assert
        updated = result.unwrap()
        assert updated.name == 'Early Bird'
        assert updated.price.amount == Decimal('35.000')
        assert event_with_ticket_type.total_capacity == 150
        events = event_with_ticket_type.pull_domain_events()
        assert len(events) == 1
        assert isinstance(events[0], TicketTypeUpdated)
        assert set(events[0].changes) == {'name', 'price', 'quantity'}
        assert events[0].changes['quantity'] == FieldChange(old=100, new=150)

    def test_quantity_below_sold_fails(self, event_with_ticket_type: Event) -> None:
        """
        Given a ticket type with 5 tickets sold
        When its quantity is reduced to 3
        Then CANNOT_REDUCE_QUANTITY is returned and the quantity is unchanged
        """
        ticket_type_id = event_with_ticket_type.ticket_types[0].id
        event_with_ticket_type.increment_sold_tickets(ticket_type_id, 5).unwrap()

        result = event_with_ticket_type.update_ticket_type(ticket_type_id, quantity=3)

        assert result.code is EventErrorCode.CANNOT_REDUCE_QUANTITY
        assert event_with_ticket_type.total_capacity == 100

    def test_failure_leaves_every_field_untouched(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id
        event_with_ticket_type.increment_sold_tickets(ticket_type_id, 1).unwrap()
        event_with_ticket_type.pull_domain_events()

        # name is valid, price is frozen after the first sale
        result = event_with_ticket_type.update_ticket_type(
            ticket_type_id, name='Renamed', price=make_price('10')
        )

        assert result.code is EventErrorCode.CANNOT_MODIFY_AFTER_SALES
        ticket_type = event_with_ticket_type.find_ticket_type(ticket_type_id)
        assert ticket_type.name == 'General'
        assert ticket_type.price.amount == Decimal('50.000')
        assert event_with_ticket_type.domain_events == []

    def test_rename_to_existing_name_fails(self, event_with_ticket_type: Event) -> None:
        event_with_ticket_type.add_ticket_type(
            make_ticket_type(event_with_ticket_type, name='VIP')
        ).unwrap()
        general_id = event_with_ticket_type.ticket_types[0].id

        result = event_with_ticket_type.update_ticket_type(general_id, name='vip')

        assert result.code is EventErrorCode.DUPLICATE_TICKET_TYPE_NAME

    def test_same_values_are_a_no_op(self, event_with_ticket_type: Event) -> None:
        ticket_type = event_with_ticket_type.ticket_types[0]

        result = event_with_ticket_type.update_ticket_type(
            ticket_type.id, name=ticket_type.name, quantity=ticket_type.quantity
        )

        assert result.is_success
        assert event_with_ticket_type.domain_events == []

    def test_description_can_be_cleared(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id
        event_with_ticket_type.update_ticket_type(ticket_type_id, description='Standing').unwrap()

        event_with_ticket_type.update_ticket_type(ticket_type_id, description=None).unwrap()

        assert event_with_ticket_type.find_ticket_type(ticket_type_id).description is None

    def test_unknown_ticket_type(self, event_with_ticket_type: Event) -> None:
        result = event_with_ticket_type.update_ticket_type('missing', name='x')

        assert result.code is EventErrorCode.TICKET_TYPE_NOT_FOUND

    def test_padded_same_name_is_a_no_op(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id

        result = event_with_ticket_type.update_ticket_type(
            ticket_type_id, name='  General ', description='   '
        )

        assert result.is_success
        assert event_with_ticket_type.find_ticket_type(ticket_type_id).name == 'General'
        assert event_with_ticket_type.domain_events == []

    def test_padded_name_is_stored_stripped(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id

        event_with_ticket_type.update_ticket_type(ticket_type_id, name=' Early Bird ').unwrap()

        changes = event_with_ticket_type.pull_domain_events()[0].changes
        assert changes['name'] == FieldChange(old='General', new='Early Bird')

    def test_update_sales_period(self, event_with_ticket_type: Event) -> None:
        # Arrange
        ticket_type = event_with_ticket_type.ticket_types[0]
        event_start = event_with_ticket_type.date_range.start
        new_period = SalesPeriod.create(
            utc_now() + timedelta(days=1), event_start - timedelta(days=1)
        ).unwrap()

        # Act
        result = event_with_ticket_type.update_ticket_type(ticket_type.id, sales_period=new_period)

        # Assert
        assert result.unwrap().sales_period == new_period
        assert event_with_ticket_type.find_ticket_type(ticket_type.id).sales_period == new_period
        updated = event_with_ticket_type.pull_domain_events()[0]
        assert isinstance(updated, TicketTypeUpdated)
        assert updated.changes['sales_period'] == FieldChange(
            old=ticket_type.sales_period.to_iso_strings(), new=new_period.to_iso_strings()
        )

    def test_sales_period_ending_after_event_start_fails(
        self, event_with_ticket_type: Event
    ) -> None:
        ticket_type = event_with_ticket_type.ticket_types[0]
        event_start = event_with_ticket_type.date_range.start
        late_period = SalesPeriod.create(utc_now(), event_start + timedelta(hours=1)).unwrap()

        result = event_with_ticket_type.update_ticket_type(ticket_type.id, sales_period=late_period)

        assert result.code is EventErrorCode.INVALID_SALES_PERIOD
        assert (
            event_with_ticket_type.find_ticket_type(ticket_type.id).sales_period
            == ticket_type.sales_period
        )
        assert event_with_ticket_type.domain_events == []

    def test_sales_period_is_frozen_after_sales(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id
        event_with_ticket_type.increment_sold_tickets(ticket_type_id, 1).unwrap()
        event_start = event_with_ticket_type.date_range.start
        new_period = SalesPeriod.create(
            utc_now() + timedelta(days=2), event_start - timedelta(days=2)
        ).unwrap()

        result = event_with_ticket_type.update_ticket_type(ticket_type_id, sales_period=new_period)

        assert result.code is EventErrorCode.CANNOT_MODIFY_AFTER_SALES

    def test_deactivate_and_reactivate(self, event_with_ticket_type: Event) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id

        event_with_ticket_type.update_ticket_type(ticket_type_id, is_active=False).unwrap()
        assert not event_with_ticket_type.find_ticket_type(ticket_type_id).is_active

        event_with_ticket_type.update_ticket_type(ticket_type_id, is_active=True).unwrap()
        assert event_with_ticket_type.find_ticket_type(ticket_type_id).is_active

        changes = [e.changes['is_active'] for e in event_with_ticket_type.pull_domain_events()]
        assert changes == [FieldChange(old=True, new=False), FieldChange(old=False, new=True)]

    def test_reactivate_after_sales_window_fails(self, draft_event: Event) -> None:
        """
        Given a deactivated ticket type whose sales window has already closed
        When it is reactivated
        Then SALES_PERIOD_ELAPSED is returned and it stays inactive
        """
        closed = SalesPeriod.create(
            utc_now() - timedelta(days=3), utc_now() - timedelta(days=1)
        ).unwrap()
        draft_event.add_ticket_type(make_ticket_type(draft_event, sales_period=closed)).unwrap()
        ticket_type_id = draft_event.ticket_types[0].id
        draft_event.update_ticket_type(ticket_type_id, is_active=False).unwrap()
        draft_event.pull_domain_events()

        result = draft_event.update_ticket_type(ticket_type_id, is_active=True)

        assert result.code is EventErrorCode.SALES_PERIOD_ELAPSED
        assert not draft_event.find_ticket_type(ticket_type_id).is_active
        assert draft_event.domain_events == []

    def test_reactivate_with_reopened_sales_window(self, draft_event: Event) -> None:
        closed = SalesPeriod.create(
            utc_now() - timedelta(days=3), utc_now() - timedelta(days=1)
        ).unwrap()
        draft_event.add_ticket_type(make_ticket_type(draft_event, sales_period=closed)).unwrap()
        ticket_type_id = draft_event.ticket_types[0].id
        draft_event.update_ticket_type(ticket_type_id, is_active=False).unwrap()

        result = draft_event.update_ticket_type(
            ticket_type_id,
            sales_period=sales_period_for(draft_event.date_range),
            is_active=True,
        )

        assert result.unwrap().is_active
        assert result.unwrap().is_on_sale()


@pytest.mark.unit
class TestPublish:
    def test_publish_with_active_ticket_type(self, event_with_ticket_type: Event) -> None:
        """
        Given a draft with one active ticket type and a future start
        When it is published
        Then published_at is set and EventPublished reports one ticket type
        """
        result = event_with_ticket_type.publish()

        assert result.is_success
        assert event_with_ticket_type.status is EventStatus.PUBLISHED
        assert event_with_ticket_type.published_at is not None
        events = event_with_ticket_type.pull_domain_events()
        assert len(events) == 1
        published = events[0]
        assert isinstance(published, EventPublished)
        assert published.ticket_type_count == 1
        assert published.total_capacity == 100

    def test_publish_without_ticket_types_fails(self, draft_event: Event) -> None:
        result = draft_event.publish()

        assert result.code is EventErrorCode.MISSING_TICKET_TYPES
        assert draft_event.status is EventStatus.DRAFT

    def test_publish_with_only_inactive_ticket_types_fails(
        self, event_with_ticket_type: Event
    ) -> None:
        ticket_type_id = event_with_ticket_type.ticket_types[0].id
        event_with_ticket_type.update_ticket_type(ticket_type_id, is_active=False).unwrap()

        result = event_with_ticket_type.publish()

        assert result.code is EventErrorCode.MISSING_TICKET_TYPES

    def test_publish_without_location_fails(self) -> None:
        event = Event.create(
            organizer_id=ORGANIZER_ID,
            title='Secret show',
            category=EventCategory.CONCERT,
            location=None,
            date_range=future_date_range(),
        ).unwrap()
        event.add_ticket_type(make_ticket_type(event)).unwrap()

        result = event.publish()

        assert result.code is EventErrorCode.MISSING_LOCATION

    def test_publish_twice_fails(self, published_event: Event) -> None:
        result = published_event.publish()

        assert result.code is EventErrorCode.WRONG_STATUS

    def test_publish_started_event_fails(self) -> None:
        event = make_started_event()
        event.status = EventStatus.DRAFT

        result = event.publish()

        assert result.code is EventErrorCode.EVENT_DATE_IN_PAST


@pytest.mark.unit
class TestCancel:
    def test_cancel_published_event_with_sales(self, published_event: Event) -> None:
        # Arrange
        ticket_type_id = published_event.ticket_types[0].id
        published_event.increment_sold_tickets(ticket_type_id, 4).unwrap()
        published_event.pull_domain_events()

        # Act
        result = published_event.cancel('venue issue')

        # Assert
        assert result.is_success
        assert published_event.status is EventStatus.CANCELLED
        assert published_event.cancellation_reason == 'venue issue'
        assert published_event.cancelled_at is not None
        cancelled = published_event.pull_domain_events()[0]
        assert isinstance(cancelled, EventCancelled)
        assert cancelled.sold_tickets == 4
        assert cancelled.revenue_amount == Decimal('200.000')
        assert cancelled.needs_refunds()

    def test_cancel_draft_records_cancelled(self, draft_event: Event) -> None:
        result = draft_event.cancel()

        assert result.is_success
        assert draft_event.status is EventStatus.CANCELLED
        assert draft_event.cancellation_reason == DEFAULT_CANCELLATION_REASON
        assert not draft_event.pull_domain_events()[0].needs_refunds()

    def test_cancel_started_event_fails(self) -> None:
        """
        Given a PUBLISHED event that has already started
        When it is cancelled for "venue issue"
        Then EVENT_ALREADY_STARTED is returned
        """
        event = make_started_event()

        result = event.cancel('venue issue')

        assert result.code is EventErrorCode.EVENT_ALREADY_STARTED
        assert event.status is EventStatus.PUBLISHED

    def test_cancel_twice_fails(self, draft_event: Event) -> None:
        draft_event.cancel('first').unwrap()

        assert draft_event.cancel('second').code is EventErrorCode.ALREADY_CANCELLED
        assert draft_event.cancellation_reason == 'first'

    def test_cancel_completed_fails(self) -> None:
        event = make_ended_event(status=EventStatus.COMPLETED)

        assert event.cancel('late').code is EventErrorCode.ALREADY_COMPLETED


@pytest.mark.unit
class TestMarkAsCompleted:
    def test_ended_published_event_completes(self) -> None:
        event = make_ended_event()

        assert event.mark_as_completed() is EventStatus.COMPLETED
        assert event.status is EventStatus.COMPLETED

    def test_future_published_event_is_untouched(self, published_event: Event) -> None:
        assert published_event.mark_as_completed() is EventStatus.PUBLISHED

    def test_ended_draft_is_untouched(self) -> None:
        event = make_ended_event(status=EventStatus.DRAFT)

        assert event.mark_as_completed() is EventStatus.DRAFT

    def test_repeated_call_is_idempotent(self) -> None:
        event = make_ended_event()
        event.mark_as_completed()

        assert event.mark_as_completed() is EventStatus.COMPLETED


@pytest.mark.unit
class TestUpdateDetails:
    def test_update_title_and_category(self, draft_event: Event) -> None:
        result = draft_event.update_details(title='Winter Concert', category=EventCategory.FESTIVAL)

        assert result.is_success
        assert draft_event.title == 'Winter Concert'
        assert draft_event.category is EventCategory.FESTIVAL
        updated = draft_event.pull_domain_events()[0]
        assert isinstance(updated, EventUpdated)
        assert set(updated.changes) == {'title', 'category'}

    def test_invalid_field_applies_nothing(self, draft_event: Event) -> None:
        result = draft_event.update_details(title='Valid title', description='d' * 5001)

        assert result.code is EventErrorCode.DESCRIPTION_TOO_LONG
        assert draft_event.title != 'Valid title'
        assert draft_event.domain_events == []

    def test_draft_can_move_dates_and_location(self, draft_event: Event) -> None:
        new_range = future_date_range(days_ahead=60)
        new_location = make_location(city='Sousse')

        draft_event.update_details(date_range=new_range, location=new_location).unwrap()

        assert draft_event.date_range == new_range
        assert draft_event.location.city == 'Sousse'

    def test_moving_start_before_sales_end_fails(self, event_with_ticket_type: Event) -> None:
        """
        Given a draft whose ticket sales close one hour before the event starts
        When the event is moved to start a day earlier
        Then INVALID_SALES_PERIOD is returned and the dates are unchanged
        """
        # Arrange
        original_range = event_with_ticket_type.date_range
        sales_end = event_with_ticket_type.ticket_types[0].sales_period.end
        earlier_start = sales_end - timedelta(days=1)
        earlier = DateRange.create(earlier_start, earlier_start + timedelta(hours=4)).unwrap()

        # Act
        result = event_with_ticket_type.update_details(title='Moved', date_range=earlier)

        # Assert
        assert result.code is EventErrorCode.INVALID_SALES_PERIOD
        assert result.error.details['ticket_types'] == ['General']
        assert event_with_ticket_type.date_range == original_range
        assert event_with_ticket_type.title != 'Moved'
        assert event_with_ticket_type.domain_events == []
        assert all(
            tt.sales_period.validate_for_event(event_with_ticket_type.date_range.start)
            for tt in event_with_ticket_type.ticket_types
        )

    def test_moving_start_later_keeps_sales_valid(self, event_with_ticket_type: Event) -> None:
        later = future_date_range(days_ahead=90)

        event_with_ticket_type.update_details(date_range=later).unwrap()

        assert event_with_ticket_type.date_range == later

    def test_published_event_cannot_move(self, published_event: Event) -> None:
        assert (
            published_event.update_details(date_range=future_date_range(days_ahead=60)).code
            is EventErrorCode.EVENT_CANNOT_BE_MODIFIED
        )
        assert (
            published_event.update_details(location=make_location(city='Sfax')).code
            is EventErrorCode.EVENT_CANNOT_BE_MODIFIED
        )

    def test_published_event_can_change_title(self, published_event: Event) -> None:
        assert published_event.update_details(title='Renamed').is_success
        assert published_event.title == 'Renamed'

    def test_same_values_emit_nothing(self, draft_event: Event) -> None:
        result = draft_event.update_details(title=draft_event.title, category=draft_event.category)

        assert result.is_success
        assert draft_event.domain_events == []

    def test_update_image(self, draft_event: Event) -> None:
        draft_event.update_image('https://cdn.example.com/poster.png').unwrap()
        assert draft_event.image_url == 'https://cdn.example.com/poster.png'

        draft_event.update_image('')
        assert draft_event.image_url is None


@pytest.mark.unit
class TestSalesLedger:
    def test_increment_updates_totals(self, published_event: Event) -> None:
        """
        Given a ticket type priced at 50.000 TND
        When 10 tickets are recorded as sold
        Then sold tickets grow by 10 and revenue by 500.000
        """
        ticket_type_id = published_event.ticket_types[0].id

        result = published_event.increment_sold_tickets(ticket_type_id, 10)

        assert result.is_success
        assert published_event.sold_tickets == 10
        assert published_event.revenue_amount == Decimal('500.000')
        assert published_event.total_revenue().formatted == '500.000 DT'
        assert published_event.available_capacity() == 90
        assert published_event.sales_progress() == 10

    def test_sold_tickets_matches_ticket_types(self, published_event: Event) -> None:
        published_event.add_ticket_type(
            make_ticket_type(published_event, name='VIP', amount='120', quantity=20)
        ).unwrap()
        general, vip = published_event.ticket_types

        published_event.increment_sold_tickets(general.id, 7).unwrap()
        published_event.increment_sold_tickets(vip.id, 3).unwrap()
        published_event.decrement_sold_tickets(general.id, 2).unwrap()

        assert published_event.sold_tickets == sum(tt.sold_quantity for tt in published_event.ticket_types)
        assert published_event.revenue_amount == Decimal('610.000')
        assert published_event.total_capacity == 120

    def test_oversell_fails_without_change(self) -> None:
        event = make_published_event(quantity=5)
        ticket_type_id = event.ticket_types[0].id

        result = event.increment_sold_tickets(ticket_type_id, 6)

        assert result.code is EventErrorCode.INSUFFICIENT_AVAILABILITY
        assert event.sold_tickets == 0
        assert event.revenue_amount == Decimal('0')

    def test_sell_out_emits_once(self) -> None:
        event = make_published_event(quantity=5)
        ticket_type_id = event.ticket_types[0].id

        event.increment_sold_tickets(ticket_type_id, 3).unwrap()
        event.increment_sold_tickets(ticket_type_id, 2).unwrap()
        sold_out = [e for e in event.pull_domain_events() if isinstance(e, TicketTypeSoldOut)]

        assert len(sold_out) == 1
        assert sold_out[0].total_quantity == 5
        assert event.is_sold_out()
        assert event.active_ticket_types() == []

    def test_decrement_past_zero_fails(self, published_event: Event) -> None:
        ticket_type_id = published_event.ticket_types[0].id

        result = published_event.decrement_sold_tickets(ticket_type_id, 1)

        assert result.code is EventErrorCode.INVALID_SOLD_QUANTITY
        assert published_event.sold_tickets == 0

    def test_unknown_ticket_type(self, published_event: Event) -> None:
        assert (
            published_event.increment_sold_tickets('missing', 1).code
            is EventErrorCode.TICKET_TYPE_NOT_FOUND
        )

    def test_foreign_currency_is_added_without_conversion(self, published_event: Event) -> None:
        published_event.add_ticket_type(
            make_ticket_type(published_event, name='Tourist', amount='20', currency=Currency.EUR)
        ).unwrap()
        tourist = published_event.ticket_types[1]

        published_event.increment_sold_tickets(tourist.id, 2).unwrap()

        assert published_event.revenue_currency is Currency.TND
        assert published_event.revenue_amount == Decimal('40.000')

    def test_revenue_overflow_fails_without_change(self, draft_event: Event) -> None:
        draft_event.add_ticket_type(
            make_ticket_type(draft_event, amount='9' * 24, quantity=10_000)
        ).unwrap()
        draft_event.pull_domain_events()
        ticket_type_id = draft_event.ticket_types[0].id

        result = draft_event.increment_sold_tickets(ticket_type_id, 10_000)

        assert result.code is EventErrorCode.INVALID_PRICE
        assert draft_event.sold_tickets == 0
        assert draft_event.revenue_amount == Decimal('0')
        assert draft_event.find_ticket_type(ticket_type_id).sold_quantity == 0
        assert draft_event.domain_events == []


def event_in_status(status: EventStatus) -> Event:
    if status is EventStatus.DRAFT:
        return make_event_with_ticket_type()
    if status is EventStatus.PUBLISHED:
        return make_published_event()
    if status is EventStatus.CANCELLED:
        event = make_event_with_ticket_type()
        event.cancel('called off').unwrap()
        event.pull_domain_events()
        return event
    return make_ended_event(status=status)


@pytest.mark.unit
class TestStateMachine:
    @pytest.mark.parametrize(
        ('status', 'command', 'expected'),
        [
            (EventStatus.DRAFT, 'publish', EventStatus.PUBLISHED),
            (EventStatus.DRAFT, 'cancel', EventStatus.CANCELLED),
            (EventStatus.DRAFT, 'mark_as_completed', EventStatus.DRAFT),
            (EventStatus.PUBLISHED, 'publish', EventStatus.PUBLISHED),
            (EventStatus.PUBLISHED, 'cancel', EventStatus.CANCELLED),
            (EventStatus.PUBLISHED, 'mark_as_completed', EventStatus.PUBLISHED),
            (EventStatus.CANCELLED, 'publish', EventStatus.CANCELLED),
            (EventStatus.CANCELLED, 'cancel', EventStatus.CANCELLED),
            (EventStatus.CANCELLED, 'mark_as_completed', EventStatus.CANCELLED),
            (EventStatus.COMPLETED, 'publish', EventStatus.COMPLETED),
            (EventStatus.COMPLETED, 'cancel', EventStatus.COMPLETED),
            (EventStatus.COMPLETED, 'mark_as_completed', EventStatus.COMPLETED),
        ],
    )
    def test_only_table_transitions_succeed(
        self, status: EventStatus, command: str, expected: EventStatus
    ) -> None:
        # Arrange
        event = event_in_status(status)
        assert event.status is status

        # Act
        outcome = getattr(event, command)()

        # Assert
        assert event.status is expected
        if expected is status:
            assert event.domain_events == []
            if command != 'mark_as_completed':
                assert outcome.is_failure
        else:
            assert expected in EVENT_STATUS_TRANSITIONS[status]
            assert len(event.domain_events) == 1


@pytest.mark.unit
class TestDomainEventBuffer:
    def test_pull_drains_buffer(self) -> None:
        event = make_event(clear_events=False)

        first = event.pull_domain_events()
        second = event.pull_domain_events()

        assert len(first) == 1
        assert second == []

    def test_events_are_attributed_to_event(self, event_with_ticket_type: Event) -> None:
        event_with_ticket_type.publish().unwrap()

        for domain_event in event_with_ticket_type.pull_domain_events():
            assert domain_event.aggregate_id == event_with_ticket_type.id
            assert domain_event.occurred_at.tzinfo is not None

    def test_to_dict(self, published_event: Event) -> None:
        data = published_event.to_dict()

        assert data['status'] == 'PUBLISHED'
        assert data['total_capacity'] == 100
        assert data['revenue'] == {'amount': Decimal('0'), 'currency': 'TND'}
        assert len(data['ticket_types']) == 1
