"""Capability protocols probed by the SCM extractor.

A job handle may implement any subset of these protocols, including none.
They are ``runtime_checkable`` so that adapters can test for a capability
with ``isinstance`` instead of reaching into attributes by name.
"""

from __future__ import annotations

import collections.abc as cabc
import typing as typ


@typ.runtime_checkable
class HasSingleScm(typ.Protocol):
    """Job with one directly configured SCM (freestyle projects)."""

    @property
    def scm(self) -> object | None: ...


@typ.runtime_checkable
class HasMultiScm(typ.Protocol):
    """SCM value that aggregates several configurations."""

    @property
    def configured_scms(self) -> cabc.Sequence[object]: ...


@typ.runtime_checkable
class HasPipelineDefinition(typ.Protocol):
    """Job whose build is described by a pipeline definition."""

    @property
    def definition(self) -> object | None: ...


@typ.runtime_checkable
class HasDefinitionScm(typ.Protocol):
    """Pipeline definition that embeds an SCM."""

    @property
    def scm(self) -> object | None: ...


@typ.runtime_checkable
class HasParent(typ.Protocol):
    """Job that lives inside a container item."""

    @property
    def parent(self) -> object | None: ...


@typ.runtime_checkable
class HasBranchSources(typ.Protocol):
    """Branch-source project that derives jobs from declared sources."""

    @property
    def sources(self) -> cabc.Iterable[object]: ...


@typ.runtime_checkable
class WrapsSource(typ.Protocol):
    """Source binding that wraps the actual branch source."""

    @property
    def source(self) -> object | None: ...


@typ.runtime_checkable
class HasRemote(typ.Protocol):
    """Branch source declared by remote URL."""

    @property
    def remote(self) -> str | None: ...


@typ.runtime_checkable
class HasRepo(typ.Protocol):
    """Branch source declared by repository name."""

    @property
    def repo(self) -> str | None: ...


@typ.runtime_checkable
class HasBuildHistory(typ.Protocol):
    """Job that keeps a record of its most recent build."""

    @property
    def last_build(self) -> object | None: ...


@typ.runtime_checkable
class HasScmCollection(typ.Protocol):
    """Build record that tracks every SCM checked out during the build."""

    @property
    def scms(self) -> cabc.Iterable[object] | None: ...


@typ.runtime_checkable
class HasBuildScm(typ.Protocol):
    """Build record that tracks a single SCM."""

    @property
    def scm(self) -> object | None: ...
