from datetime import datetime
from decimal import Decimal
from typing import Any, Optional, Union

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.base_event_command_use_case import (
    OwnedEventCommandUseCase,
    raise_for_failure,
)
from src.service.event_management.domain.aggregate.event_aggregate import UNSET
from src.service.event_management.domain.entity.ticket_type_entity import TicketType
from src.service.event_management.domain.enum.currency import Currency
from src.service.event_management.domain.event_error import EventErrorCode
from src.service.event_management.domain.value_object.sales_period import SalesPeriod
from src.service.event_management.domain.value_object.ticket_price import TicketPrice


class UpdateTicketTypeUseCase(OwnedEventCommandUseCase):
    @Logger.io
    async def execute(
        self,
        *,
        event_id: str,
        user_id: str,
        ticket_type_id: str,
        name: Optional[str] = None,
        description: Any = UNSET,
        price: Union[int, float, Decimal, None] = None,
        currency: Union[Currency, str, None] = None,
        quantity: Optional[int] = None,
        sales_start: Optional[datetime] = None,
        sales_end: Optional[datetime] = None,
        is_active: Optional[bool] = None,
    ) -> TicketType:
        """
        Partial update of one ticket type

        A lone `sales_start` or `sales_end` keeps the other bound of the
        current window; a lone `currency` keeps the current amount.
        """
        async with self.event_command_repo.lock(event_id=event_id):
            event = await self._load_owned_event(event_id=event_id, user_id=user_id)

            current = event.find_ticket_type(ticket_type_id)
            if current is None:
                raise NotFoundError(
                    f'Ticket type {ticket_type_id} not found',
                    error_code=EventErrorCode.TICKET_TYPE_NOT_FOUND.value,
                )

            new_price = None
            if price is not None or currency is not None:
                new_price = raise_for_failure(
                    TicketPrice.create(
                        price if price is not None else current.price.amount,
                        currency if currency is not None else current.price.currency,
                    )
                )

            new_sales_period = None
            if sales_start is not None or sales_end is not None:
                new_sales_period = raise_for_failure(
                    SalesPeriod.create(
                        sales_start if sales_start is not None else current.sales_period.start,
                        sales_end if sales_end is not None else current.sales_period.end,
                    )
                )

            updated: TicketType = raise_for_failure(  # type: ignore[assignment]
                event.update_ticket_type(
                    ticket_type_id,
                    name=name,
                    description=description,
                    price=new_price,
                    quantity=quantity,
                    sales_period=new_sales_period,
                    is_active=is_active,
                )
            )
            await self._commit(event=event)

        Logger.base.info(f'Updated ticket type {ticket_type_id} of event {event_id}')
        return updated
