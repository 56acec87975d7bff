"""SCM shapes and remote URL extraction for build jobs.

Jobs come in several incompatible shapes: freestyle projects with one SCM,
projects with a multi-SCM composite, pipelines defined from a Git
repository, pipelines generated by a branch-source project, and inline
pipelines whose only SCM record is their last build. This package is the one
place that understands all of them.

Usage
-----
Extract remote URLs for a job::

    from gbhook.scm import extract_remote_urls

    urls = extract_remote_urls(job)
    if "https://git.example.com/org/repo.git" in urls:
        ...

"""

from __future__ import annotations

from .adapters import (
    DEFAULT_ADAPTERS,
    BranchSourceAdapter,
    BuildHistoryAdapter,
    PipelineDefinitionAdapter,
    ProjectScmAdapter,
    ScmAdapter,
)
from .extraction import RemoteUrlExtractor, describe_job, extract_remote_urls
from .models import (
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

__all__ = [
    "DEFAULT_ADAPTERS",
    "BranchSourceAdapter",
    "BuildHistoryAdapter",
    "BuildRecord",
    "GitScm",
    "GitSource",
    "MultiScm",
    "PipelineDefinition",
    "PipelineDefinitionAdapter",
    "ProjectScmAdapter",
    "RemoteConfig",
    "RemoteUrlExtractor",
    "RepoSource",
    "ScmAdapter",
    "ScriptDefinition",
    "SourceBinding",
    "SubversionScm",
    "describe_job",
    "extract_remote_urls",
]
