"""Application layer interfaces (Ports)"""

from src.service.event_management.app.interface.i_domain_event_publisher import (
    IDomainEventPublisher,
)
from src.service.event_management.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_management.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.event_management.app.interface.i_ownership_checker import IOwnershipChecker

__all__ = ['IDomainEventPublisher', 'IEventCommandRepo', 'IEventQueryRepo', 'IOwnershipChecker']
