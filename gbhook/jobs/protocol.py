"""Interfaces of the job registry collaborator."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ


@typ.runtime_checkable
class JobRegistry(typ.Protocol):
    """Read-only view of every job known to the build host.

    The registry is owned and persisted elsewhere. Implementations must be
    safe for concurrent reads; the matching core never mutates it.
    """

    def list_all_jobs(self) -> cabc.Sequence[object]:
        """Return every job, including jobs nested in folders."""
        ...


@typ.runtime_checkable
class HasPushTrigger(typ.Protocol):
    """Job exposing its push binding through a direct accessor."""

    @property
    def push_trigger(self) -> object | None: ...


@typ.runtime_checkable
class HasTriggerLookup(typ.Protocol):
    """Job that looks up triggers by type."""

    def get_trigger(self, trigger_type: type) -> object | None: ...


@typ.runtime_checkable
class HasTriggerMap(typ.Protocol):
    """Job exposing its triggers as a mapping keyed by descriptor name."""

    @property
    def triggers(self) -> cabc.Mapping[object, object]: ...
