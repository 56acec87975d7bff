"""Named adapters that collect raw remote URLs from one job shape each.

Each adapter answers two questions about a job: whether its shape applies
(:meth:`ScmAdapter.applies_to`) and which remote URLs it declares
(:meth:`ScmAdapter.collect`). Adapters return raw URLs; normalization is the
extractor's responsibility.
"""

from __future__ import annotations

import abc
import collections.abc as cabc
import typing as typ

from .models import GitScm
from .protocol import (
    HasBranchSources,
    HasBuildHistory,
    HasBuildScm,
    HasDefinitionScm,
    HasMultiScm,
    HasParent,
    HasPipelineDefinition,
    HasRemote,
    HasRepo,
    HasScmCollection,
    HasSingleScm,
    WrapsSource,
)

if typ.TYPE_CHECKING:
    from collections.abc import Iterator


def git_remote_uris(scm: object | None) -> Iterator[str]:
    """Yield every remote URI of ``scm`` when it is a Git configuration."""
    if not isinstance(scm, GitScm):
        return
    for remote in scm.repositories:
        yield from remote.uris


class ScmAdapter(abc.ABC):
    """Strategy for one category of job shape.

    Attributes
    ----------
    name
        Stable identifier used in log events.
    exclusive
        When ``True`` and the adapter applies, later adapters are not
        consulted for the job even if this one collected nothing.

    """

    name: typ.ClassVar[str]
    exclusive: typ.ClassVar[bool] = False

    @abc.abstractmethod
    def applies_to(self, job: object) -> bool:
        """Return whether ``job`` has the shape this adapter understands."""

    @abc.abstractmethod
    def collect(self, job: object) -> cabc.Iterable[str]:
        """Yield raw remote URLs declared by ``job``."""


class ProjectScmAdapter(ScmAdapter):
    """Freestyle projects with a direct Git or multi-SCM configuration."""

    name = "scm"
    exclusive = True

    def applies_to(self, job: object) -> bool:
        return isinstance(job, HasSingleScm)

    def collect(self, job: object) -> Iterator[str]:
        scm = typ.cast("HasSingleScm", job).scm
        if isinstance(scm, GitScm):
            yield from git_remote_uris(scm)
        elif isinstance(scm, HasMultiScm):
            for inner in scm.configured_scms:
                yield from git_remote_uris(inner)


class PipelineDefinitionAdapter(ScmAdapter):
    """Pipelines whose definition is loaded from a Git repository."""

    name = "pipeline-definition"

    def applies_to(self, job: object) -> bool:
        return isinstance(job, HasPipelineDefinition)

    def collect(self, job: object) -> Iterator[str]:
        definition = typ.cast("HasPipelineDefinition", job).definition
        if isinstance(definition, HasDefinitionScm):
            yield from git_remote_uris(definition.scm)


class BranchSourceAdapter(ScmAdapter):
    """Pipelines generated by a branch-source project.

    Sources may be wrapped once in a binding object exposing ``source``. The
    unwrapped source is probed for ``remote`` first and ``repo`` second.
    """

    name = "branch-sources"

    def applies_to(self, job: object) -> bool:
        return (
            isinstance(job, HasPipelineDefinition)
            and isinstance(job, HasParent)
            and isinstance(job.parent, HasBranchSources)
        )

    def collect(self, job: object) -> Iterator[str]:
        parent = typ.cast("HasBranchSources", typ.cast("HasParent", job).parent)
        for entry in parent.sources or ():
            if entry is None:
                continue
            value = _source_location(_unwrap(entry))
            if value is not None:
                yield value


def _unwrap(entry: object) -> object:
    if isinstance(entry, WrapsSource) and entry.source is not None:
        return entry.source
    return entry


def _source_location(source: object) -> str | None:
    if isinstance(source, HasRemote) and source.remote:
        return str(source.remote)
    if isinstance(source, HasRepo) and source.repo:
        return str(source.repo)
    return None


class BuildHistoryAdapter(ScmAdapter):
    """Fallback reading the SCMs recorded by the most recent build.

    Inline pipeline scripts keep no SCM configuration on the job itself; the
    checkouts performed by their last build are the only record of the
    repositories they use.
    """

    name = "build-history"

    def applies_to(self, job: object) -> bool:
        return isinstance(job, HasBuildHistory) and job.last_build is not None

    def collect(self, job: object) -> Iterator[str]:
        build = typ.cast("HasBuildHistory", job).last_build
        if isinstance(build, HasScmCollection) and build.scms is not None:
            for scm in build.scms:
                yield from git_remote_uris(scm)
            return
        if isinstance(build, HasBuildScm):
            yield from git_remote_uris(build.scm)


DEFAULT_ADAPTERS: tuple[ScmAdapter, ...] = (
    ProjectScmAdapter(),
    PipelineDefinitionAdapter(),
    BranchSourceAdapter(),
    BuildHistoryAdapter(),
)

__all__ = [
    "DEFAULT_ADAPTERS",
    "BranchSourceAdapter",
    "BuildHistoryAdapter",
    "PipelineDefinitionAdapter",
    "ProjectScmAdapter",
    "ScmAdapter",
    "git_remote_uris",
]
