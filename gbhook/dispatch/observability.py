"""Structured log events for push dispatch passes.

Usage
-----
>>> event_logger = DispatchEventLogger()
>>> event_logger.log_job_triggered(
...     repository_url="https://gb.example.com/alice/app.git",
...     job_name="alice-app",
... )

"""

from __future__ import annotations

import enum

from gbhook.logging import (
    format_log_message,
    get_logger,
    log_debug,
    log_exception,
    log_info,
    log_warning,
)

logger = get_logger(__name__)


class DispatchEventType(enum.StrEnum):
    """Structured log event types for dispatch passes."""

    RUN_STARTED = "dispatch.run.started"
    RUN_COMPLETED = "dispatch.run.completed"
    RUN_FAILED = "dispatch.run.failed"
    RUN_SKIPPED = "dispatch.run.skipped"
    JOB_TRIGGERED = "dispatch.job.triggered"
    JOB_EXTRACTION_FAILED = "dispatch.job.extraction_failed"


class DispatchEventLogger:
    """Emit dispatch events via femtologging.

    Successful passes log at INFO, a pass without a repository URL at
    WARNING, per-job extraction failures at DEBUG and trigger failures at
    ERROR.
    """

    def log_run_started(self, *, repository_url: str, identity: str) -> None:
        """Log the start of a pass for a normalized repository URL."""
        log_info(
            logger,
            "[%s] repository_url=%s identity=%s",
            DispatchEventType.RUN_STARTED,
            repository_url,
            identity,
        )

    def log_run_skipped(self, *, reason: str) -> None:
        """Log a pass abandoned before any job was scanned."""
        log_warning(
            logger,
            "[%s] reason=%s",
            DispatchEventType.RUN_SKIPPED,
            reason,
        )

    def log_job_triggered(self, *, repository_url: str, job_name: str) -> None:
        """Log a binding invoked for a matching job."""
        log_info(
            logger,
            "[%s] repository_url=%s job=%s",
            DispatchEventType.JOB_TRIGGERED,
            repository_url,
            job_name,
        )

    def log_job_extraction_failed(self, *, job_name: str, error: BaseException) -> None:
        """Log a job skipped because its remote URLs could not be read."""
        log_debug(
            logger,
            "[%s] job=%s error_type=%s error_message=%s",
            DispatchEventType.JOB_EXTRACTION_FAILED,
            job_name,
            type(error).__name__,
            str(error),
        )

    def log_run_completed(
        self,
        *,
        repository_url: str,
        candidates_scanned: int,
        jobs_triggered: int,
    ) -> None:
        """Log a finished pass with its counters."""
        log_info(
            logger,
            "[%s] repository_url=%s candidates_scanned=%d jobs_triggered=%d",
            DispatchEventType.RUN_COMPLETED,
            repository_url,
            candidates_scanned,
            jobs_triggered,
        )

    def log_run_failed(
        self,
        *,
        repository_url: str,
        job_name: str,
        error: BaseException,
    ) -> None:
        """Log a pass aborted by a failing trigger binding."""
        message = format_log_message(
            "[%s] repository_url=%s job=%s error_type=%s error_message=%s",
            DispatchEventType.RUN_FAILED,
            repository_url,
            job_name,
            type(error).__name__,
            str(error),
        )
        log_exception(logger, message, error)


__all__ = ["DispatchEventLogger", "DispatchEventType"]
