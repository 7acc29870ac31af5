"""
Test Configuration and Fixtures

This module provides:
- Environment setup before any application module reads settings
- Event fixtures built from test/service/event_management/helpers.py
- In-memory adapters wired the same way the DI container wires them
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings and the loguru sinks are created at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)

    os.environ.setdefault('DEBUG', 'true')
    os.environ.setdefault('DEFAULT_CURRENCY', 'TND')
    os.environ.setdefault('EVENT_SCHEDULER_ENABLED', 'true')


# Call immediately to set env vars before any imports
_early_setup_test_environment()

import pytest  # noqa: E402

from src.platform.config.di import build_domain_event_publisher  # noqa: E402
from src.service.event_management.app.event_handler import (  # noqa: E402
    EventCancelledHandler,
    EventPublishedHandler,
    TicketTypeSoldOutHandler,
)
from src.service.event_management.domain.aggregate.event_aggregate import Event  # noqa: E402
from src.service.event_management.driven_adapter.event_publisher.in_process_domain_event_publisher import (  # noqa: E402
    InProcessDomainEventPublisher,
)
from src.service.event_management.driven_adapter.ownership.organizer_ownership_checker import (  # noqa: E402
    OrganizerOwnershipChecker,
)
from src.service.event_management.driven_adapter.repo.event_command_repo_memory_impl import (  # noqa: E402
    InMemoryEventCommandRepo,
)
from src.service.event_management.driven_adapter.repo.event_query_repo_memory_impl import (  # noqa: E402
    InMemoryEventQueryRepo,
)
from test.service.event_management.helpers import (  # noqa: E402
    make_event,
    make_event_with_ticket_type,
    make_published_event,
)


@pytest.fixture
def draft_event() -> Event:
    return make_event()


@pytest.fixture
def event_with_ticket_type() -> Event:
    return make_event_with_ticket_type()


@pytest.fixture
def published_event() -> Event:
    return make_published_event()


@pytest.fixture
def event_command_repo() -> InMemoryEventCommandRepo:
    return InMemoryEventCommandRepo()


@pytest.fixture
def domain_event_publisher() -> InProcessDomainEventPublisher:
    return build_domain_event_publisher(
        event_published_handler=EventPublishedHandler(),
        event_cancelled_handler=EventCancelledHandler(),
        ticket_type_sold_out_handler=TicketTypeSoldOutHandler(),
    )


@pytest.fixture
def ownership_checker() -> OrganizerOwnershipChecker:
    return OrganizerOwnershipChecker()


@pytest.fixture
def event_query_repo(event_command_repo: InMemoryEventCommandRepo) -> InMemoryEventQueryRepo:
    return InMemoryEventQueryRepo(event_command_repo=event_command_repo)
