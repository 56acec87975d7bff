"""Match a push event against candidate jobs and fire their bindings."""

from __future__ import annotations

import typing as typ

from gbhook.common.url import normalize_remote_url
from gbhook.scm.extraction import RemoteUrlExtractor, describe_job
from gbhook.security.identity import get_current_identity

from .models import DispatchResult, DispatchStatus
from .observability import DispatchEventLogger

if typ.TYPE_CHECKING:
    from collections.abc import Iterable

    from gbhook.events import PushEvent
    from gbhook.jobs.scanner import Candidate
    from gbhook.security.identity import Identity


def target_repository_url(event: PushEvent) -> str | None:
    """Return the normalized repository URL of ``event``, if it has one."""
    if event.repository_url is None:
        return None
    normalized = normalize_remote_url(event.repository_url)
    return normalized or None


class PushDispatcher:
    """Trigger every candidate job configured against the pushed repository.

    Matching is exact string equality between normalized URLs. Each
    qualifying job is triggered once per event, however many of its remotes
    match.

    Parameters
    ----------
    extractor
        Remote URL extractor; defaults to one using the standard adapters.
    event_logger
        Structured event emitter; defaults to :class:`DispatchEventLogger`.

    """

    def __init__(
        self,
        extractor: RemoteUrlExtractor | None = None,
        event_logger: DispatchEventLogger | None = None,
    ) -> None:
        """Initialise the dispatcher with optional collaborators."""
        self._extractor = extractor or RemoteUrlExtractor()
        self._event_logger = event_logger or DispatchEventLogger()

    def dispatch(
        self,
        event: PushEvent,
        candidates: Iterable[Candidate],
        *,
        identity: Identity | None = None,
    ) -> DispatchResult:
        """Invoke the binding of each candidate whose remotes match ``event``.

        ``candidates`` is not iterated when the event has no usable
        repository URL, so a lazy scanner never touches the registry in that
        case.

        ``identity`` names the principal the pass runs under in log events;
        it defaults to the identity of the current call.

        Raises
        ------
        Exception
            Whatever a binding raises. Bindings invoked before the failure
            are not rolled back.

        """
        repository_url = target_repository_url(event)
        if repository_url is None:
            self._event_logger.log_run_skipped(reason="No repository url found.")
            return DispatchResult.no_repository_url()

        self._event_logger.log_run_started(
            repository_url=repository_url,
            identity=(identity or get_current_identity()).name,
        )
        triggered: list[str] = []
        scanned = 0
        for job, binding in candidates:
            scanned += 1
            job_name = describe_job(job)
            try:
                urls = self._extractor.extract(job)
            except Exception as exc:  # noqa: BLE001 - skip this job, keep the pass going
                self._event_logger.log_job_extraction_failed(job_name=job_name, error=exc)
                continue
            if repository_url not in urls:
                continue

            try:
                binding.on_push(event)
            except Exception as exc:
                self._event_logger.log_run_failed(
                    repository_url=repository_url,
                    job_name=job_name,
                    error=exc,
                )
                raise
            triggered.append(job_name)
            self._event_logger.log_job_triggered(
                repository_url=repository_url,
                job_name=job_name,
            )

        self._event_logger.log_run_completed(
            repository_url=repository_url,
            candidates_scanned=scanned,
            jobs_triggered=len(triggered),
        )
        return DispatchResult(
            DispatchStatus.DISPATCHED,
            repository_url=repository_url,
            triggered=tuple(triggered),
        )


__all__ = ["PushDispatcher", "target_repository_url"]
