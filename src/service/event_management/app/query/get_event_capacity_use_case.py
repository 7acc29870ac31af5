from decimal import Decimal

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.dto.event_capacity_info import (
    EventCapacityInfo,
    TicketTypeCapacityInfo,
)
from src.service.event_management.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_management.domain.event_error import EventErrorCode


class GetEventCapacityUseCase:
    def __init__(self, *, event_command_repo: IEventCommandRepo) -> None:
        self.event_command_repo = event_command_repo

    @Logger.io
    async def execute(self, *, event_id: str) -> EventCapacityInfo:
        event = await self.event_command_repo.find_by_id(event_id=event_id)
        if event is None:
            raise NotFoundError(
                f'Event {event_id} not found', error_code=EventErrorCode.EVENT_NOT_FOUND.value
            )

        potential_revenue = sum(
            (tt.price.amount * tt.quantity for tt in event.ticket_types), Decimal('0')
        )

        return EventCapacityInfo(
            event_id=event.id,
            total_capacity=event.total_capacity,
            sold_tickets=event.sold_tickets,
            available_tickets=event.available_capacity(),
            sales_progress=event.sales_progress(),
            is_sold_out=event.is_sold_out(),
            potential_revenue=event.revenue_currency.round_amount(potential_revenue),
            realized_revenue=event.revenue_amount,
            currency=event.revenue_currency,
            ticket_types=[
                TicketTypeCapacityInfo(
                    ticket_type_id=tt.id,
                    name=tt.name,
                    quantity=tt.quantity,
                    sold_quantity=tt.sold_quantity,
                    available_quantity=tt.available_quantity,
                    sales_progress=tt.sales_progress(),
                    is_sold_out=tt.is_sold_out(),
                    is_on_sale=tt.is_on_sale(),
                    is_active=tt.is_active,
                )
                for tt in event.ticket_types
            ],
        )
