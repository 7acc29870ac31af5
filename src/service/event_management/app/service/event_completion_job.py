"""
Event Completion Job

Moves every PUBLISHED event whose end date has passed to COMPLETED. Meant to
be triggered by an external scheduler (cron, k8s CronJob); each event is
completed on its own so one failure does not stop the batch.
"""

from typing import List, Optional

import attrs

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.event_management.app.command.complete_event_use_case import (
    CompleteEventUseCase,
)
from src.service.event_management.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.event_management.domain.clock import utc_now


@attrs.define(frozen=True)
class CompletionFailure:
    event_id: str
    error: str


@attrs.define
class CompletionReport:
    processed: int = 0
    succeeded: int = 0
    failed: int = 0
    errors: List[CompletionFailure] = attrs.field(factory=list)


class EventCompletionJob:
    def __init__(
        self,
        *,
        event_command_repo: IEventCommandRepo,
        complete_event_use_case: CompleteEventUseCase,
        enabled: Optional[bool] = None,
        batch_limit: Optional[int] = None,
    ) -> None:
        self.event_command_repo = event_command_repo
        self.complete_event_use_case = complete_event_use_case
        self.enabled = settings.EVENT_SCHEDULER_ENABLED if enabled is None else enabled
        self.batch_limit = settings.EVENT_SCHEDULER_BATCH_LIMIT if batch_limit is None else batch_limit

    @Logger.io
    async def process_ended_events(self) -> CompletionReport:
        if not self.enabled:
            Logger.base.warning('Event completion job is disabled, skipping')
            return CompletionReport()

        now = utc_now()
        events = await self.event_command_repo.find_events_to_complete(
            before=now, limit=self.batch_limit
        )
        Logger.base.info(f'Found {len(events)} ended event(s) to complete before {now.isoformat()}')

        report = CompletionReport(processed=len(events))
        for event in events:
            try:
                await self.complete_event_use_case.execute(event_id=event.id)
                report.succeeded += 1
            except CustomBaseError as e:
                report.errors.append(CompletionFailure(event_id=event.id, error=e.message))
                Logger.base.warning(f'Failed to complete event {event.id}: [{e.error_code}] {e.message}')
            except Exception as e:
                report.errors.append(CompletionFailure(event_id=event.id, error=str(e)))
                Logger.base.exception(f'Unexpected error while completing event {event.id}: {e}')

        report.failed = len(report.errors)
        Logger.base.info(
            f'Completion job done: {report.processed} processed, '
            f'{report.succeeded} succeeded, {report.failed} failed'
        )
        return report
