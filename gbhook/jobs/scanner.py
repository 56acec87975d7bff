"""Enumerate jobs that carry a GitBucket push binding.

Hosts expose triggers in different ways, so :func:`find_push_trigger` tries
three lookup conventions in order:

1. a direct ``push_trigger`` accessor;
2. a ``get_trigger(type)`` lookup;
3. a ``triggers`` mapping searched for the first :class:`PushTrigger` value.

A job for which no convention yields a binding is not a candidate.
"""

from __future__ import annotations

import typing as typ

from gbhook.logging import get_logger, log_debug
from gbhook.scm.extraction import describe_job

from .protocol import HasPushTrigger, HasTriggerLookup, HasTriggerMap
from .triggers import PushTrigger

if typ.TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .protocol import JobRegistry

logger = get_logger(__name__)


class Candidate(typ.NamedTuple):
    """Job paired with the binding that will receive matching pushes."""

    job: object
    binding: PushTrigger


def _direct_accessor(job: object) -> object | None:
    if isinstance(job, HasPushTrigger):
        return job.push_trigger
    return None


def _typed_lookup(job: object) -> object | None:
    if isinstance(job, HasTriggerLookup):
        return job.get_trigger(PushTrigger)
    return None


def _trigger_map(job: object) -> object | None:
    if not isinstance(job, HasTriggerMap):
        return None
    for trigger in job.triggers.values():
        if isinstance(trigger, PushTrigger):
            return trigger
    return None


_LOOKUPS: tuple[tuple[str, Callable[[object], object | None]], ...] = (
    ("push_trigger", _direct_accessor),
    ("get_trigger", _typed_lookup),
    ("triggers", _trigger_map),
)


def find_push_trigger(job: object) -> PushTrigger | None:
    """Return the push binding of ``job``, or ``None`` when it has none.

    A lookup convention that raises is logged at DEBUG and treated as
    absent.
    """
    for name, lookup in _LOOKUPS:
        try:
            trigger = lookup(job)
        except Exception as exc:  # noqa: BLE001 - a broken accessor means "no binding"
            log_debug(
                logger,
                "Trigger lookup via %s failed for %s: %s",
                name,
                describe_job(job),
                exc,
            )
            continue
        if isinstance(trigger, PushTrigger):
            return trigger
    return None


class JobRegistryScanner:
    """Pair every registry job with its push binding, skipping unbound jobs.

    Parameters
    ----------
    registry
        Registry collaborator listing all known jobs.

    """

    def __init__(self, registry: JobRegistry) -> None:
        """Initialise the scanner with the registry to enumerate."""
        self._registry = registry

    def candidates(self) -> Iterator[Candidate]:
        """Yield ``(job, binding)`` for every job bound to push events.

        The registry is listed lazily, when iteration starts.
        """
        for job in self._registry.list_all_jobs():
            binding = find_push_trigger(job)
            if binding is not None:
                yield Candidate(job, binding)


__all__ = ["Candidate", "JobRegistryScanner", "find_push_trigger"]
