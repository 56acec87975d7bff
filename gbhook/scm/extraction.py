"""Collect the normalized remote URLs a job is configured against."""

from __future__ import annotations

import typing as typ

from gbhook.common.url import normalize_remote_url
from gbhook.logging import get_logger, log_debug

from .adapters import DEFAULT_ADAPTERS

if typ.TYPE_CHECKING:
    from collections.abc import Sequence

    from .adapters import ScmAdapter

logger = get_logger(__name__)


def describe_job(job: object) -> str:
    """Return a human-readable name for ``job`` for logs and results."""
    full_name = getattr(job, "full_name", None)
    return full_name if isinstance(full_name, str) and full_name else repr(job)


class RemoteUrlExtractor:
    """Run the named SCM adapters over a job and union their URLs.

    Adapters run in declaration order. An adapter marked ``exclusive`` ends
    the walk once it applies. A failure inside one adapter drops only that
    adapter's contribution.

    Examples
    --------
    >>> from gbhook.jobs.models import FreestyleJob
    >>> from gbhook.scm.models import GitScm
    >>> job = FreestyleJob("app", scm=GitScm.single("https://Example.com/App.git"))
    >>> sorted(RemoteUrlExtractor().extract(job))
    ['https://example.com/app.git']

    """

    def __init__(self, adapters: Sequence[ScmAdapter] = DEFAULT_ADAPTERS) -> None:
        """Initialise with the adapters to consult, in priority order."""
        self._adapters = tuple(adapters)

    @property
    def adapter_names(self) -> tuple[str, ...]:
        """Return the adapter names in the order they are consulted."""
        return tuple(adapter.name for adapter in self._adapters)

    def extract(self, job: object) -> frozenset[str]:
        """Return the normalized remote URLs configured for ``job``."""
        urls: set[str] = set()
        for adapter in self._adapters:
            applied = False
            try:
                if not adapter.applies_to(job):
                    continue
                applied = True
                urls.update(normalize_remote_url(url) for url in adapter.collect(job))
            except Exception as exc:  # noqa: BLE001 - one job shape must not stop the pass
                log_debug(
                    logger,
                    "Failed to collect SCM URLs via %s for %s: %s",
                    adapter.name,
                    describe_job(job),
                    exc,
                )
            # An exclusive adapter ends the walk once it applies, even on failure.
            if applied and adapter.exclusive:
                break
        return frozenset(urls)


_DEFAULT_EXTRACTOR = RemoteUrlExtractor()


def extract_remote_urls(job: object) -> frozenset[str]:
    """Return the normalized remote URLs of ``job`` using the default adapters."""
    return _DEFAULT_EXTRACTOR.extract(job)


__all__ = ["RemoteUrlExtractor", "describe_job", "extract_remote_urls"]
