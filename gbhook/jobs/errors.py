"""Errors raised while loading job registry snapshots."""

from __future__ import annotations


class JobSnapshotError(Exception):
    """Raised when a YAML job snapshot cannot be loaded.

    Attributes
    ----------
    issues
        Human-readable problems found in the snapshot.

    """

    def __init__(self, issues: list[str]) -> None:
        """Initialise with the list of problems found."""
        self.issues = issues
        super().__init__("; ".join(issues))

    @classmethod
    def unknown_parent(cls, job: str, parent: str) -> JobSnapshotError:
        """Return an error for a pipeline whose parent is not declared."""
        return cls([f"job {job!r} references unknown branch project {parent!r}"])

    @classmethod
    def duplicate_names(cls, names: list[str]) -> JobSnapshotError:
        """Return an error listing job names declared more than once."""
        return cls([f"duplicate job name {name!r}" for name in names])
