"""Source-control configuration values attached to jobs."""

from __future__ import annotations

import dataclasses as dc


@dc.dataclass(frozen=True, slots=True)
class RemoteConfig:
    """Named Git remote with one or more fetch URIs."""

    name: str
    uris: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class GitScm:
    """Git configuration; the only SCM type whose remotes are matched."""

    repositories: tuple[RemoteConfig, ...] = ()

    @classmethod
    def single(cls, uri: str, *, name: str = "origin") -> GitScm:
        """Return a configuration with a single ``origin`` remote."""
        return cls(repositories=(RemoteConfig(name=name, uris=(uri,)),))


@dc.dataclass(frozen=True, slots=True)
class MultiScm:
    """Composite configuration aggregating several SCMs under one job."""

    scms: tuple[object, ...] = ()

    @property
    def configured_scms(self) -> tuple[object, ...]:
        """Return the contained configurations in declaration order."""
        return self.scms


@dc.dataclass(frozen=True, slots=True)
class SubversionScm:
    """Non-Git configuration. Never contributes remote URLs."""

    url: str


@dc.dataclass(frozen=True, slots=True)
class PipelineDefinition:
    """Pipeline loaded from a script stored in source control."""

    scm: object | None = None
    script_path: str = "Jenkinsfile"


@dc.dataclass(frozen=True, slots=True)
class ScriptDefinition:
    """Inline pipeline script with no persisted SCM configuration."""

    script: str = ""


@dc.dataclass(frozen=True, slots=True)
class GitSource:
    """Branch source declared by remote URL."""

    remote: str | None = None


@dc.dataclass(frozen=True, slots=True)
class RepoSource:
    """Branch source declared by hosting-service owner and repository."""

    repo: str | None = None
    repo_owner: str | None = None


@dc.dataclass(frozen=True, slots=True)
class SourceBinding:
    """Wrapper holding a branch source alongside its strategy settings."""

    source: object | None = None


@dc.dataclass(frozen=True, slots=True)
class BuildRecord:
    """Most recent build of a job and the SCMs it checked out.

    ``scms`` is ``None`` when the build type does not track a collection of
    checkouts; an empty tuple means the build tracked none.
    """

    number: int
    scms: tuple[object, ...] | None = None
    scm: object | None = None
