"""Concrete job shapes for hosts that keep their jobs in memory.

The matching core treats jobs as opaque handles and only probes the
capability protocols in :mod:`gbhook.scm.protocol` and
:mod:`gbhook.jobs.protocol`. These dataclasses are the shapes the bundled
registry and the snapshot loader produce.
"""

from __future__ import annotations

import dataclasses as dc

from .triggers import PushTrigger


@dc.dataclass(slots=True)
class FreestyleJob:
    """Project with a single, directly configured SCM.

    Attributes
    ----------
    full_name
        Slash-separated path of the job in the registry.
    scm
        Configured SCM: ``GitScm``, ``MultiScm``, another SCM, or ``None``.
    push_trigger
        Binding for GitBucket pushes, or ``None`` when the job does not
        listen for them.
    last_build
        Most recent build. Never consulted for matching; freestyle jobs
        declare their SCM directly.

    """

    full_name: str
    scm: object | None = None
    push_trigger: PushTrigger | None = None
    last_build: object | None = None


@dc.dataclass(slots=True)
class BranchProject:
    """Container that derives pipeline jobs from declared branch sources."""

    full_name: str
    sources: tuple[object, ...] = ()


@dc.dataclass(slots=True)
class PipelineJob:
    """Pipeline job, standalone or generated by a :class:`BranchProject`.

    Triggers are held in a mapping keyed by trigger name, mirroring hosts
    that store one trigger per descriptor.
    """

    full_name: str
    definition: object | None = None
    parent: object | None = None
    last_build: object | None = None
    triggers: dict[str, object] = dc.field(default_factory=dict)

    def get_trigger(self, trigger_type: type) -> object | None:
        """Return the first trigger that is an instance of ``trigger_type``."""
        for trigger in self.triggers.values():
            if isinstance(trigger, trigger_type):
                return trigger
        return None


__all__ = ["BranchProject", "FreestyleJob", "PipelineJob"]
