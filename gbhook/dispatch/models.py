"""Outcome of handling one push notification."""

from __future__ import annotations

import dataclasses as dc
import enum


class DispatchStatus(enum.StrEnum):
    """How far a notification got through the receiver and dispatcher."""

    IGNORED = "ignored"
    MALFORMED_PAYLOAD = "malformed_payload"
    NO_REPOSITORY_URL = "no_repository_url"
    DISPATCHED = "dispatched"


@dc.dataclass(frozen=True, slots=True)
class DispatchResult:
    """Summary returned to the caller after a notification is handled.

    Attributes
    ----------
    status
        Outcome category.
    repository_url
        Normalized repository URL that jobs were matched against, when one
        was found.
    triggered
        Names of the jobs whose bindings were invoked, in invocation order.

    """

    status: DispatchStatus
    repository_url: str | None = None
    triggered: tuple[str, ...] = ()

    @classmethod
    def ignored(cls) -> DispatchResult:
        """Return the result for a notification that is not a push."""
        return cls(DispatchStatus.IGNORED)

    @classmethod
    def malformed_payload(cls) -> DispatchResult:
        """Return the result for a payload that could not be decoded."""
        return cls(DispatchStatus.MALFORMED_PAYLOAD)

    @classmethod
    def no_repository_url(cls) -> DispatchResult:
        """Return the result for a push without a usable repository URL."""
        return cls(DispatchStatus.NO_REPOSITORY_URL)
