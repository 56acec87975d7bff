"""Unit tests for remote URL extraction across job shapes."""

from __future__ import annotations

import dataclasses

import pytest

from gbhook.jobs import BranchProject, FreestyleJob, PipelineJob
from gbhook.scm import (
    BuildRecord,
    GitScm,
    GitSource,
    MultiScm,
    PipelineDefinition,
    RemoteConfig,
    RemoteUrlExtractor,
    RepoSource,
    ScmAdapter,
    ScriptDefinition,
    SourceBinding,
    SubversionScm,
    extract_remote_urls,
)
from tests.helpers.fake_logger import FakeLogger

APP = "https://gb.example.com/alice/app.git"
LIB = "https://gb.example.com/bob/lib.git"
SITE = "https://gb.example.com/carol/site.git"


class TestProjectShapes:
    """Freestyle projects with direct or multi-SCM configuration."""

    def test_single_git_scm_collects_every_remote_uri(self) -> None:
        """All URIs of all remotes are collected and normalized."""
        scm = GitScm(
            (
                RemoteConfig("origin", (APP, "git@gb.example.com:alice/app.git")),
                RemoteConfig("upstream", ("https://USER@gb.example.com/Up/App.git",)),
            )
        )
        urls = extract_remote_urls(FreestyleJob("app", scm=scm))
        assert urls == {
            APP,
            "gb.example.com:alice/app.git",
            "https://gb.example.com/up/app.git",
        }

    def test_multi_scm_collects_only_git_members(self) -> None:
        """Non-Git members of a multi-SCM are ignored."""
        scm = MultiScm((GitScm.single(APP), SubversionScm("svn://x/y"), GitScm.single(LIB)))
        assert extract_remote_urls(FreestyleJob("multi", scm=scm)) == {APP, LIB}

    def test_non_git_scm_yields_nothing(self) -> None:
        """A Subversion project has no Git remotes."""
        job = FreestyleJob("svn", scm=SubversionScm("svn://example/repo"))
        assert extract_remote_urls(job) == frozenset()

    def test_project_never_consults_build_history(self) -> None:
        """Freestyle jobs stop at their own SCM even when it is empty."""
        job = FreestyleJob(
            "empty",
            scm=None,
            last_build=BuildRecord(number=3, scms=(GitScm.single(APP),)),
        )
        assert extract_remote_urls(job) == frozenset()

    def test_duplicates_collapse(self) -> None:
        """URLs equal after normalization appear once."""
        scm = MultiScm((GitScm.single(APP), GitScm.single(APP.upper())))
        assert extract_remote_urls(FreestyleJob("dup", scm=scm)) == {APP}


class TestPipelineShapes:
    """Pipeline jobs, branch-source children and build-history fallback."""

    def test_definition_scm(self) -> None:
        """A pipeline loaded from Git contributes its definition's remotes."""
        job = PipelineJob("pipe", definition=PipelineDefinition(scm=GitScm.single(APP)))
        assert extract_remote_urls(job) == {APP}

    def test_inline_script_without_history_yields_nothing(self) -> None:
        """An inline pipeline that has never run declares no remotes."""
        job = PipelineJob("inline", definition=ScriptDefinition("node {}"))
        assert extract_remote_urls(job) == frozenset()

    def test_branch_sources_unwrap_and_probe_remote_then_repo(self) -> None:
        """Wrapped sources are unwrapped once; remote wins over repo."""
        project = BranchProject(
            "carol",
            sources=(
                SourceBinding(GitSource(SITE)),
                GitSource(" HTTPS://gb.example.com/Carol/Docs.git "),
                RepoSource(repo="Widgets", repo_owner="carol"),
                SourceBinding(None),
                None,
            ),
        )
        job = PipelineJob("carol/main", definition=ScriptDefinition(), parent=project)
        assert extract_remote_urls(job) == {
            SITE,
            "https://gb.example.com/carol/docs.git",
            "widgets",
        }

    @pytest.mark.parametrize("remote", [None, ""], ids=["null", "empty"])
    def test_branch_source_without_remote_falls_back_to_repo(
        self, remote: str | None
    ) -> None:
        """A source whose remote is unset or empty is probed for repo."""

        @dataclasses.dataclass
        class HybridSource:
            remote: str | None
            repo: str | None

        project = BranchProject("p", sources=(HybridSource(remote=remote, repo="lib"),))
        job = PipelineJob("p/main", parent=project)
        assert extract_remote_urls(job) == {"lib"}

    def test_parent_that_is_not_a_branch_project_is_ignored(self) -> None:
        """Folders without sources contribute nothing."""
        job = PipelineJob("folder/job", parent=object())
        assert extract_remote_urls(job) == frozenset()

    def test_build_history_collection_is_used(self) -> None:
        """Inline pipelines fall back to the SCMs of their last build."""
        build = BuildRecord(number=7, scms=(GitScm.single(APP), SubversionScm("svn://x")))
        job = PipelineJob("inline", definition=ScriptDefinition(), last_build=build)
        assert extract_remote_urls(job) == {APP}

    def test_build_history_collection_wins_over_single_scm(self) -> None:
        """A present collection, even empty, stops the single-SCM probe."""
        build = BuildRecord(number=2, scms=(), scm=GitScm.single(LIB))
        job = PipelineJob("inline", last_build=build)
        assert extract_remote_urls(job) == frozenset()

    def test_build_history_single_scm(self) -> None:
        """Builds without a collection are probed for a single SCM."""
        build = BuildRecord(number=2, scms=None, scm=GitScm.single(LIB))
        job = PipelineJob("inline", last_build=build)
        assert extract_remote_urls(job) == {LIB}

    def test_pipeline_steps_are_unioned(self) -> None:
        """Definition, branch sources and build history all contribute."""
        job = PipelineJob(
            "carol/main",
            definition=PipelineDefinition(scm=GitScm.single(APP)),
            parent=BranchProject("carol", sources=(GitSource(SITE),)),
            last_build=BuildRecord(number=1, scms=(GitScm.single(LIB),)),
        )
        assert extract_remote_urls(job) == {APP, LIB, SITE}


class TestUnrecognisedShapes:
    """Jobs matching no capability yield nothing and never raise."""

    @pytest.mark.parametrize(
        "job",
        [
            pytest.param(object(), id="bare_object"),
            pytest.param("not-a-job", id="string"),
            pytest.param(None, id="none"),
            pytest.param(BranchProject("container"), id="branch_project_itself"),
        ],
    )
    def test_unknown_shapes_yield_empty_set(self, job: object) -> None:
        """No adapter applies, so the URL set is empty."""
        assert extract_remote_urls(job) == frozenset()

    def test_failing_accessor_drops_only_that_adapter(
        self, extraction_logger: FakeLogger
    ) -> None:
        """A raising capability is skipped; other adapters still contribute."""

        class BrokenDefinitionJob:
            full_name = "broken"
            last_build = BuildRecord(number=1, scms=(GitScm.single(APP),))

            @property
            def definition(self) -> object:
                raise RuntimeError("definition unavailable")

        assert extract_remote_urls(BrokenDefinitionJob()) == {APP}
        assert extraction_logger.messages("DEBUG") == [
            "Failed to collect SCM URLs via pipeline-definition for broken: "
            "definition unavailable"
        ]

    def test_failing_project_scm_still_ends_the_walk(
        self, extraction_logger: FakeLogger
    ) -> None:
        """A freestyle job whose SCM raises never falls back to build history."""

        class BrokenFreestyle:
            full_name = "broken-freestyle"
            last_build = BuildRecord(number=1, scms=(GitScm.single(APP),))

            @property
            def scm(self) -> object:
                raise RuntimeError("scm unavailable")

        assert extract_remote_urls(BrokenFreestyle()) == frozenset()
        assert extraction_logger.messages("DEBUG") == [
            "Failed to collect SCM URLs via scm for broken-freestyle: scm unavailable"
        ]


class TestRemoteUrlExtractor:
    """Adapter registry behaviour."""

    def test_default_adapter_order(self) -> None:
        """Adapters are consulted in the documented order."""
        assert RemoteUrlExtractor().adapter_names == (
            "scm",
            "pipeline-definition",
            "branch-sources",
            "build-history",
        )

    def test_custom_adapters_replace_defaults(self) -> None:
        """Injected adapters are the only ones consulted."""

        class FixedAdapter(ScmAdapter):
            name = "fixed"

            def applies_to(self, job: object) -> bool:
                return True

            def collect(self, job: object) -> list[str]:
                return [" HTTPS://Fixed.example/Repo.git "]

        extractor = RemoteUrlExtractor([FixedAdapter()])
        assert extractor.extract(object()) == {"https://fixed.example/repo.git"}
