"""Load a YAML snapshot of jobs into an :class:`InMemoryJobRegistry`.

Snapshots describe the jobs of a build host in enough detail to answer
"which jobs would this push trigger?" without talking to the host::

    jobs:
      - kind: freestyle
        name: alice/app
        trigger: true
        scm:
          type: git
          url: https://gb.example.com/alice/app.git
      - kind: branch-project
        name: carol
        sources:
          - remote: https://gb.example.com/carol/site.git
            wrapped: true
      - kind: pipeline
        name: carol/main
        parent: carol
        trigger: true
        definition:
          script: "node { checkout scm }"

"""

from __future__ import annotations

import collections
import typing as typ
from pathlib import Path

import msgspec
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from gbhook.scm.models import (
    BuildRecord,
    GitScm,
    GitSource,
    MultiScm,
    PipelineDefinition,
    RemoteConfig,
    RepoSource,
    ScriptDefinition,
    SourceBinding,
    SubversionScm,
)

from .errors import JobSnapshotError
from .memory import InMemoryJobRegistry
from .models import BranchProject, FreestyleJob, PipelineJob

if typ.TYPE_CHECKING:
    from .triggers import PushTrigger

YAML_VERSION = (1, 2)
PUSH_TRIGGER_KEY = "gitbucket-push"

TriggerFactory = typ.Callable[[str], "PushTrigger"]


class RemoteSpec(msgspec.Struct, kw_only=True):
    """Named remote with its fetch URLs."""

    urls: list[str]
    name: str = "origin"


class GitScmSpec(msgspec.Struct, kw_only=True, tag="git", tag_field="type"):
    """Git SCM; ``url`` is shorthand for a single ``origin`` remote."""

    url: str | None = None
    remotes: list[RemoteSpec] = msgspec.field(default_factory=list)


class SvnScmSpec(msgspec.Struct, kw_only=True, tag="svn", tag_field="type"):
    """Subversion SCM."""

    url: str


class MultiScmSpec(msgspec.Struct, kw_only=True, tag="multi", tag_field="type"):
    """Composite of several SCMs."""

    scms: list[GitScmSpec | SvnScmSpec] = msgspec.field(default_factory=list)


ScmSpec = GitScmSpec | SvnScmSpec | MultiScmSpec


class DefinitionSpec(msgspec.Struct, kw_only=True):
    """Pipeline definition: an SCM-hosted script or an inline one."""

    scm: ScmSpec | None = None
    script: str | None = None
    script_path: str = "Jenkinsfile"


class SourceSpec(msgspec.Struct, kw_only=True):
    """Branch source declared by ``remote`` or by ``owner``/``repo``."""

    remote: str | None = None
    repo: str | None = None
    owner: str | None = None
    wrapped: bool = False


class BuildSpec(msgspec.Struct, kw_only=True):
    """Most recent build and the SCMs it recorded."""

    number: int
    scms: list[ScmSpec] | None = None
    scm: ScmSpec | None = None


class FreestyleSpec(msgspec.Struct, kw_only=True, tag="freestyle", tag_field="kind"):
    """Freestyle project."""

    name: str
    scm: ScmSpec | None = None
    trigger: bool = False
    last_build: BuildSpec | None = None


class PipelineSpec(msgspec.Struct, kw_only=True, tag="pipeline", tag_field="kind"):
    """Pipeline job, optionally generated by a branch project."""

    name: str
    definition: DefinitionSpec | None = None
    parent: str | None = None
    trigger: bool = False
    last_build: BuildSpec | None = None


class BranchProjectSpec(
    msgspec.Struct, kw_only=True, tag="branch-project", tag_field="kind"
):
    """Container deriving pipeline jobs from branch sources."""

    name: str
    sources: list[SourceSpec] = msgspec.field(default_factory=list)


JobSpec = FreestyleSpec | PipelineSpec | BranchProjectSpec


class JobSnapshot(msgspec.Struct, kw_only=True):
    """Top-level snapshot document."""

    jobs: list[JobSpec] = msgspec.field(default_factory=list)


def _build_scm(spec: ScmSpec | None) -> object | None:
    match spec:
        case None:
            return None
        case GitScmSpec(url=url, remotes=remotes):
            repositories = [RemoteConfig(r.name, tuple(r.urls)) for r in remotes]
            if url is not None:
                repositories.insert(0, RemoteConfig("origin", (url,)))
            return GitScm(tuple(repositories))
        case SvnScmSpec(url=url):
            return SubversionScm(url)
        case MultiScmSpec(scms=scms):
            return MultiScm(tuple(_build_scm(inner) for inner in scms))
    return None


def _build_definition(spec: DefinitionSpec | None) -> object | None:
    if spec is None:
        return None
    if spec.script is not None:
        return ScriptDefinition(spec.script)
    return PipelineDefinition(scm=_build_scm(spec.scm), script_path=spec.script_path)


def _build_source(spec: SourceSpec) -> object:
    source: object = (
        GitSource(spec.remote)
        if spec.remote is not None
        else RepoSource(repo=spec.repo, repo_owner=spec.owner)
    )
    return SourceBinding(source) if spec.wrapped else source


def _build_last_build(spec: BuildSpec | None) -> BuildRecord | None:
    if spec is None:
        return None
    scms = None if spec.scms is None else tuple(_build_scm(s) for s in spec.scms)
    return BuildRecord(number=spec.number, scms=scms, scm=_build_scm(spec.scm))


def build_job_registry(
    snapshot: JobSnapshot,
    trigger_factory: TriggerFactory,
) -> InMemoryJobRegistry:
    """Materialize a decoded snapshot into job handles.

    Parameters
    ----------
    snapshot
        Decoded snapshot document.
    trigger_factory
        Called with a job name for every job declared with ``trigger: true``;
        returns the binding attached to that job.

    Raises
    ------
    JobSnapshotError
        If names are duplicated or a pipeline names an unknown parent.

    """
    counts = collections.Counter(spec.name for spec in snapshot.jobs)
    duplicates = sorted(name for name, count in counts.items() if count > 1)
    if duplicates:
        raise JobSnapshotError.duplicate_names(duplicates)

    projects = {
        spec.name: BranchProject(spec.name, tuple(_build_source(s) for s in spec.sources))
        for spec in snapshot.jobs
        if isinstance(spec, BranchProjectSpec)
    }

    jobs: list[object] = []
    for spec in snapshot.jobs:
        match spec:
            case BranchProjectSpec(name=name):
                jobs.append(projects[name])
            case FreestyleSpec():
                jobs.append(
                    FreestyleJob(
                        spec.name,
                        scm=_build_scm(spec.scm),
                        push_trigger=trigger_factory(spec.name) if spec.trigger else None,
                        last_build=_build_last_build(spec.last_build),
                    )
                )
            case PipelineSpec():
                parent = None
                if spec.parent is not None:
                    if spec.parent not in projects:
                        raise JobSnapshotError.unknown_parent(spec.name, spec.parent)
                    parent = projects[spec.parent]
                triggers: dict[str, object] = {}
                if spec.trigger:
                    triggers[PUSH_TRIGGER_KEY] = trigger_factory(spec.name)
                jobs.append(
                    PipelineJob(
                        spec.name,
                        definition=_build_definition(spec.definition),
                        parent=parent,
                        last_build=_build_last_build(spec.last_build),
                        triggers=triggers,
                    )
                )
    return InMemoryJobRegistry(jobs)


def load_job_registry(
    path: Path | str,
    trigger_factory: TriggerFactory,
) -> InMemoryJobRegistry:
    """Parse a YAML snapshot file and build an in-memory registry.

    Raises
    ------
    JobSnapshotError
        If the file cannot be read, is not YAML 1.2, does not match the
        snapshot schema, or fails cross-reference checks.

    """
    yaml = _yaml()
    try:
        loaded = yaml.load(Path(path).read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        raise JobSnapshotError([f"failed to parse YAML: {exc}"]) from exc

    if loaded is None:
        raise JobSnapshotError(["job snapshot is empty"])

    try:
        snapshot = msgspec.convert(loaded, type=JobSnapshot)
    except msgspec.ValidationError as exc:
        raise JobSnapshotError([f"schema validation failed: {exc}"]) from exc

    return build_job_registry(snapshot, trigger_factory)


def _yaml() -> YAML:
    yaml = YAML(typ="safe")
    yaml.version = YAML_VERSION
    yaml.allow_duplicate_keys = False
    return yaml


__all__ = [
    "PUSH_TRIGGER_KEY",
    "JobSnapshot",
    "TriggerFactory",
    "build_job_registry",
    "load_job_registry",
]
