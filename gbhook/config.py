"""Environment configuration for the webhook core.

Usage
-----
Load configuration from the environment:

>>> import os
>>> os.environ["GBHOOK_SYSTEM_IDENTITY"] = "jenkins-system"
>>> WebhookConfig.from_env().system_identity
'jenkins-system'

"""

from __future__ import annotations

import dataclasses as dc
import os
from pathlib import Path

_DEFAULT_LOG_LEVEL = "INFO"
_DEFAULT_SYSTEM_IDENTITY = "SYSTEM"


class ConfigError(ValueError):
    """Raised when a ``GBHOOK_*`` environment variable is invalid."""

    @classmethod
    def empty_system_identity(cls) -> ConfigError:
        """Return an error for a blank system identity name."""
        return cls("GBHOOK_SYSTEM_IDENTITY must be non-empty")

    @classmethod
    def missing_jobs_file(cls, path: Path) -> ConfigError:
        """Return an error when the configured snapshot does not exist."""
        return cls(f"GBHOOK_JOBS_FILE does not exist: {path}")


@dc.dataclass(frozen=True, slots=True)
class WebhookConfig:
    """Runtime settings for receiving GitBucket push events.

    Attributes
    ----------
    log_level
        Raw log level passed to :func:`gbhook.logging.configure_logging`.
    system_identity
        Name of the identity the scan-and-dispatch pass runs under.
    jobs_file
        Optional YAML job snapshot used by the ``gbhook-match`` CLI.

    """

    log_level: str = _DEFAULT_LOG_LEVEL
    system_identity: str = _DEFAULT_SYSTEM_IDENTITY
    jobs_file: Path | None = None

    @classmethod
    def from_env(cls) -> WebhookConfig:
        """Build configuration from environment variables.

        Reads the following environment variables:

        - ``GBHOOK_LOG_LEVEL``: Optional log level (default ``INFO``)
        - ``GBHOOK_SYSTEM_IDENTITY``: Optional system identity name
          (default ``SYSTEM``)
        - ``GBHOOK_JOBS_FILE``: Optional path to a YAML job snapshot

        Raises
        ------
        ConfigError
            If the identity is blank or the jobs file does not exist.

        """
        log_level = os.environ.get("GBHOOK_LOG_LEVEL", _DEFAULT_LOG_LEVEL)

        raw_identity = os.environ.get("GBHOOK_SYSTEM_IDENTITY")
        if raw_identity is None:
            system_identity = _DEFAULT_SYSTEM_IDENTITY
        else:
            system_identity = raw_identity.strip()
            if not system_identity:
                raise ConfigError.empty_system_identity()

        jobs_file: Path | None = None
        raw_jobs_file = os.environ.get("GBHOOK_JOBS_FILE", "")
        if raw_jobs_file.strip():
            jobs_file = Path(raw_jobs_file.strip())
            if not jobs_file.is_file():
                raise ConfigError.missing_jobs_file(jobs_file)

        return cls(
            log_level=log_level,
            system_identity=system_identity,
            jobs_file=jobs_file,
        )


__all__ = ["ConfigError", "WebhookConfig"]
