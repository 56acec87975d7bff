"""In-memory job registry."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    from collections.abc import Iterable


class InMemoryJobRegistry:
    """Registry backed by an immutable tuple of job handles.

    The tuple is built once, so concurrent readers always observe the same
    snapshot.
    """

    __slots__ = ("_jobs",)

    def __init__(self, jobs: Iterable[object] = ()) -> None:
        """Initialise with the jobs to expose, in listing order."""
        self._jobs = tuple(jobs)

    def list_all_jobs(self) -> tuple[object, ...]:
        """Return every job in the snapshot."""
        return self._jobs

    def __len__(self) -> int:
        """Return the number of jobs in the snapshot."""
        return len(self._jobs)
