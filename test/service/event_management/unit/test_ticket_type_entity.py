"""
Unit tests for TicketType

Inventory bookkeeping (sold / available), freeze of price and sales period
after the first sale, and the quantity floor.
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from src.service.event_management.domain.clock import utc_now
from src.service.event_management.domain.entity.ticket_type_entity import TicketType
from src.service.event_management.domain.event_error import EventErrorCode
from src.service.event_management.domain.value_object import SalesPeriod
from test.service.event_management.helpers import make_event, make_price, make_ticket_type


@pytest.fixture
def ticket_type() -> TicketType:
    return make_ticket_type(make_event(), name='VIP', amount='120', quantity=10)


@pytest.mark.unit
class TestTicketTypeCreate:
    def test_create_sets_defaults(self, ticket_type: TicketType) -> None:
        assert ticket_type.id
        assert ticket_type.name == 'VIP'
        assert ticket_type.sold_quantity == 0
        assert ticket_type.available_quantity == 10
        assert ticket_type.is_active
        assert ticket_type.is_on_sale()

    def test_ids_are_unique(self) -> None:
        event = make_event()

        assert make_ticket_type(event).id != make_ticket_type(event).id

    @pytest.mark.parametrize('quantity', [0, -1, 2.5, True])
    def test_quantity_must_be_positive_integer(self, quantity: object) -> None:
        event = make_event()

        result = TicketType.create(
            event_id=event.id,
            name='General',
            price=make_price(),
            quantity=quantity,  # type: ignore[arg-type]
            sales_period=SalesPeriod.starting_now(event.date_range.start).unwrap(),
        )

        assert result.code is EventErrorCode.INVALID_TICKET_TYPE

    @pytest.mark.parametrize('name', ['', '   ', 'n' * 101])
    def test_name_validation(self, name: str) -> None:
        event = make_event()

        result = TicketType.create(
            event_id=event.id,
            name=name,
            price=make_price(),
            quantity=5,
            sales_period=SalesPeriod.starting_now(event.date_range.start).unwrap(),
        )

        assert result.code is EventErrorCode.INVALID_TICKET_TYPE

    def test_description_too_long(self) -> None:
        event = make_event()

        result = TicketType.create(
            event_id=event.id,
            name='General',
            price=make_price(),
            quantity=5,
            sales_period=SalesPeriod.starting_now(event.date_range.start).unwrap(),
            description='d' * 501,
        )

        assert result.code is EventErrorCode.INVALID_TICKET_TYPE

    def test_pending_sales_period_is_not_on_sale(self) -> None:
        event = make_event()
        pending = SalesPeriod.create(
            utc_now() + timedelta(days=1), event.date_range.start - timedelta(hours=1)
        ).unwrap()

        ticket_type = make_ticket_type(event, sales_period=pending)

        assert not ticket_type.is_on_sale()


@pytest.mark.unit
class TestTicketTypeInventory:
    def test_increment_and_decrement(self, ticket_type: TicketType) -> None:
        # Act
        ticket_type.increment_sold(4).unwrap()
        ticket_type.decrement_sold(1).unwrap()

        # Assert
        assert ticket_type.sold_quantity == 3
        assert ticket_type.available_quantity == 7
        assert ticket_type.sales_progress() == 30

    def test_increment_beyond_quantity_fails_without_change(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(8).unwrap()

        result = ticket_type.increment_sold(3)

        assert result.code is EventErrorCode.INSUFFICIENT_AVAILABILITY
        assert result.error.details == {'requested': 3, 'available': 2}
        assert ticket_type.sold_quantity == 8

    def test_sell_out(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(10).unwrap()

        assert ticket_type.is_sold_out()
        assert not ticket_type.is_on_sale()
        assert ticket_type.sales_progress() == 100

    def test_decrement_below_zero_fails(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(1).unwrap()

        result = ticket_type.decrement_sold(2)

        assert result.code is EventErrorCode.INVALID_SOLD_QUANTITY
        assert ticket_type.sold_quantity == 1

    @pytest.mark.parametrize('quantity', [0, -3])
    def test_non_positive_sale_quantities_fail(self, ticket_type: TicketType, quantity: int) -> None:
        assert ticket_type.increment_sold(quantity).is_failure
        assert ticket_type.decrement_sold(quantity).is_failure


@pytest.mark.unit
class TestTicketTypeUpdates:
    def test_price_frozen_after_first_sale(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(1).unwrap()

        result = ticket_type.update_price(make_price('99'))

        assert result.code is EventErrorCode.CANNOT_MODIFY_AFTER_SALES
        assert ticket_type.price.amount == Decimal('120.000')

    def test_price_update_before_sales(self, ticket_type: TicketType) -> None:
        previous = ticket_type.updated_at

        ticket_type.update_price(make_price('99')).unwrap()

        assert ticket_type.price.amount == Decimal('99.000')
        assert ticket_type.updated_at >= previous

    def test_sales_period_frozen_after_first_sale(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(1).unwrap()
        new_period = SalesPeriod.starting_now(utc_now() + timedelta(days=2)).unwrap()

        result = ticket_type.update_sales_period(new_period)

        assert result.code is EventErrorCode.CANNOT_MODIFY_AFTER_SALES

    def test_quantity_cannot_drop_below_sold(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(6).unwrap()

        assert ticket_type.update_quantity(5).code is EventErrorCode.CANNOT_REDUCE_QUANTITY
        assert ticket_type.update_quantity(6).is_success
        assert ticket_type.is_sold_out()

    def test_name_and_description(self, ticket_type: TicketType) -> None:
        ticket_type.update_name('  Gold  ').unwrap()
        ticket_type.update_description('Front rows').unwrap()

        assert ticket_type.name == 'Gold'
        assert ticket_type.description == 'Front rows'
        assert ticket_type.update_name('').is_failure

    def test_deactivate_and_reactivate(self, ticket_type: TicketType) -> None:
        ticket_type.deactivate().unwrap()
        assert not ticket_type.is_on_sale()

        ticket_type.reactivate().unwrap()
        assert ticket_type.is_on_sale()

    def test_reactivate_after_sales_ended_fails(self, ticket_type: TicketType) -> None:
        ticket_type.sales_period = SalesPeriod.create(
            utc_now() - timedelta(days=3), utc_now() - timedelta(days=1)
        ).unwrap()
        ticket_type.deactivate().unwrap()

        result = ticket_type.reactivate()

        assert result.code is EventErrorCode.SALES_PERIOD_ELAPSED
        assert not ticket_type.is_active

    def test_to_dict(self, ticket_type: TicketType) -> None:
        ticket_type.increment_sold(2).unwrap()

        data = ticket_type.to_dict()

        assert data['price'] == {'amount': Decimal('120.000'), 'currency': 'TND'}
        assert data['available_quantity'] == 8
        assert data['sales_status'] == 'active'
        assert data['is_on_sale'] is True
