"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.event_management.app.command.add_ticket_type_use_case import (
    AddTicketTypeUseCase,
)
from src.service.event_management.app.command.cancel_event_use_case import CancelEventUseCase
from src.service.event_management.app.command.complete_event_use_case import (
    CompleteEventUseCase,
)
from src.service.event_management.app.command.create_event_use_case import CreateEventUseCase
from src.service.event_management.app.command.publish_event_use_case import PublishEventUseCase
from src.service.event_management.app.command.record_ticket_sales_use_case import (
    RecordTicketSalesUseCase,
)
from src.service.event_management.app.command.remove_ticket_type_use_case import (
    RemoveTicketTypeUseCase,
)
from src.service.event_management.app.command.update_event_image_use_case import (
    UpdateEventImageUseCase,
)
from src.service.event_management.app.command.update_event_use_case import UpdateEventUseCase
from src.service.event_management.app.command.update_ticket_type_use_case import (
    UpdateTicketTypeUseCase,
)
from src.service.event_management.app.event_handler import (
    EventCancelledHandler,
    EventPublishedHandler,
    TicketTypeSoldOutHandler,
)
from src.service.event_management.app.query.get_event_capacity_use_case import (
    GetEventCapacityUseCase,
)
from src.service.event_management.app.query.get_event_use_case import GetEventUseCase
from src.service.event_management.app.query.get_events_by_category_use_case import (
    GetEventsByCategoryUseCase,
)
from src.service.event_management.app.query.get_organizer_events_use_case import (
    GetOrganizerEventsUseCase,
)
from src.service.event_management.app.query.get_published_events_use_case import (
    GetPublishedEventsUseCase,
)
from src.service.event_management.app.query.get_upcoming_events_use_case import (
    GetUpcomingEventsUseCase,
)
from src.service.event_management.app.service.event_completion_job import EventCompletionJob
from src.service.event_management.domain.domain_event import (
    EventCancelled,
    EventPublished,
    TicketTypeSoldOut,
)
from src.service.event_management.driven_adapter.event_publisher.in_process_domain_event_publisher import (
    InProcessDomainEventPublisher,
)
from src.service.event_management.driven_adapter.ownership.organizer_ownership_checker import (
    OrganizerOwnershipChecker,
)
from src.service.event_management.driven_adapter.repo.event_command_repo_memory_impl import (
    InMemoryEventCommandRepo,
)
from src.service.event_management.driven_adapter.repo.event_query_repo_memory_impl import (
    InMemoryEventQueryRepo,
)


def build_domain_event_publisher(
    *,
    event_published_handler: EventPublishedHandler,
    event_cancelled_handler: EventCancelledHandler,
    ticket_type_sold_out_handler: TicketTypeSoldOutHandler,
) -> InProcessDomainEventPublisher:
    publisher = InProcessDomainEventPublisher()
    publisher.register(EventPublished, event_published_handler)
    publisher.register(EventCancelled, event_cancelled_handler)
    publisher.register(TicketTypeSoldOut, ticket_type_sold_out_handler)
    return publisher


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Repositories / adapters (process-wide state)
    event_command_repo = providers.Singleton(InMemoryEventCommandRepo)
    event_query_repo = providers.Singleton(
        InMemoryEventQueryRepo, event_command_repo=event_command_repo
    )
    ownership_checker = providers.Singleton(OrganizerOwnershipChecker)

    # Domain event handlers
    event_published_handler = providers.Singleton(EventPublishedHandler)
    event_cancelled_handler = providers.Singleton(EventCancelledHandler)
    ticket_type_sold_out_handler = providers.Singleton(TicketTypeSoldOutHandler)

    domain_event_publisher = providers.Singleton(
        build_domain_event_publisher,
        event_published_handler=event_published_handler,
        event_cancelled_handler=event_cancelled_handler,
        ticket_type_sold_out_handler=ticket_type_sold_out_handler,
    )

    # Command use cases
    create_event_use_case = providers.Factory(
        CreateEventUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
    )
    update_event_use_case = providers.Factory(
        UpdateEventUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    update_event_image_use_case = providers.Factory(
        UpdateEventImageUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    publish_event_use_case = providers.Factory(
        PublishEventUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    cancel_event_use_case = providers.Factory(
        CancelEventUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    add_ticket_type_use_case = providers.Factory(
        AddTicketTypeUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    update_ticket_type_use_case = providers.Factory(
        UpdateTicketTypeUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    remove_ticket_type_use_case = providers.Factory(
        RemoveTicketTypeUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
        ownership_checker=ownership_checker,
    )
    record_ticket_sales_use_case = providers.Factory(
        RecordTicketSalesUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
    )
    complete_event_use_case = providers.Factory(
        CompleteEventUseCase,
        event_command_repo=event_command_repo,
        domain_event_publisher=domain_event_publisher,
    )

    # Query use cases
    get_event_use_case = providers.Factory(GetEventUseCase, event_command_repo=event_command_repo)
    get_event_capacity_use_case = providers.Factory(
        GetEventCapacityUseCase, event_command_repo=event_command_repo
    )
    get_organizer_events_use_case = providers.Factory(
        GetOrganizerEventsUseCase, event_query_repo=event_query_repo
    )
    get_published_events_use_case = providers.Factory(
        GetPublishedEventsUseCase, event_query_repo=event_query_repo
    )
    get_events_by_category_use_case = providers.Factory(
        GetEventsByCategoryUseCase, event_query_repo=event_query_repo
    )
    get_upcoming_events_use_case = providers.Factory(
        GetUpcomingEventsUseCase, event_query_repo=event_query_repo
    )

    # Scheduled job (triggered externally)
    event_completion_job = providers.Factory(
        EventCompletionJob,
        event_command_repo=event_command_repo,
        complete_event_use_case=complete_event_use_case,
        enabled=config_service.provided.EVENT_SCHEDULER_ENABLED,
        batch_limit=config_service.provided.EVENT_SCHEDULER_BATCH_LIMIT,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
