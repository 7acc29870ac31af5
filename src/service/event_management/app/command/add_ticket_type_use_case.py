from datetime import datetime
from decimal import Decimal
from typing import Optional, Union

from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    OwnedEventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.entity.ticket_type_entity import TicketType
from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.value_object.sales_period import SalesPeriod
from src.service.event_management.domain.value_object.ticket_price import TicketPrice


class AddTicketTypeUseCase(OwnedEventCommandUseCase):
    @Logger.io
    async def execute(
        self,
        *,
        event_id: str,
        user_id: str,
        name: str,
        price: Union[int, float, Decimal],
        quantity: int,
        sales_start: datetime,
        sales_end: datetime,
        currency: Union[Currency, str] = Currency.TND,
        description: Optional[str] = None,
    ) -> TicketType:
        ticket_price = raise_for_failure(TicketPrice.create(price, currency))
        sales_period = raise_for_failure(SalesPeriod.create(sales_start, sales_end))

        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_owned_event(event_id=event_id, user_id=user_id)

            ticket_type: TicketType = raise_for_failure(  # type: ignore[assignment]
                TicketType.create(
                    event_id=event.id,
                    name=name,
                    price=ticket_price,  # type: ignore[arg-type]
                    quantity=quantity,
                    sales_period=sales_period,  # type: ignore[arg-type]
                    description=description,
                )
            )
            raise_for_failure(event.add_ticket_type(ticket_type))
            await self._commit(event=event)

        Logger.base.info(
            f'Added ticket type "{ticket_type.name}" ({ticket_type.quantity} x '
            f'{ticket_type.price.formatted}) to event {event_id}'
        )
        return ticket_type
