"""Dry-run matcher: report which jobs a push payload would trigger."""

from __future__ import annotations

import argparse
from pathlib import Path

from gbhook.config import ConfigError, WebhookConfig
from gbhook.events import PUSH_EVENT
from gbhook.jobs import CallbackPushTrigger, JobSnapshotError, load_job_registry
from gbhook.logging import configure_logging, get_logger, log_debug, log_warning
from gbhook.security import Identity, PrivilegeScopeGuard
from gbhook.webhook import GitBucketWebhookReceiver

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_SNAPSHOT_ERROR = 1
EXIT_USAGE_ERROR = 2


def _recording_trigger(job_name: str) -> CallbackPushTrigger:
    return CallbackPushTrigger(
        lambda event: log_debug(
            logger,
            "Would trigger %s for %s",
            job_name,
            event.repository_url,
        )
    )


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "payload",
        type=Path,
        help="File holding the JSON body of a GitBucket push webhook",
    )
    parser.add_argument(
        "--jobs",
        type=Path,
        default=None,
        help="YAML job snapshot (defaults to GBHOOK_JOBS_FILE)",
    )
    parser.add_argument(
        "--event",
        default=PUSH_EVENT,
        help="Value of the X-Github-Event header (default: push)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Match a payload file against a job snapshot and print triggered jobs.

    Parameters
    ----------
    argv : list[str] | None, optional
        Command-line arguments. ``None`` defaults to ``sys.argv``.

    Returns
    -------
    int
        0 on success, 1 when the snapshot is invalid, 2 for usage errors
        such as missing files or invalid ``GBHOOK_*`` settings.

    """
    args = _parser().parse_args(argv)

    try:
        config = WebhookConfig.from_env()
    except ConfigError as exc:
        print(f"Invalid configuration: {exc}")
        return EXIT_USAGE_ERROR

    normalized_level, invalid_level = configure_logging(config.log_level)
    if invalid_level:
        log_warning(
            logger,
            "Invalid GBHOOK_LOG_LEVEL %r, falling back to %s",
            config.log_level,
            normalized_level,
        )

    jobs_path: Path | None = args.jobs or config.jobs_file
    if jobs_path is None:
        print("No job snapshot given: pass --jobs or set GBHOOK_JOBS_FILE")
        return EXIT_USAGE_ERROR

    payload_path: Path = args.payload
    if not payload_path.is_file():
        print(f"Payload file not found: {payload_path}")
        return EXIT_USAGE_ERROR

    try:
        registry = load_job_registry(jobs_path, _recording_trigger)
    except JobSnapshotError as exc:
        print(f"Job snapshot {jobs_path} is invalid:")
        for issue in exc.issues:
            print(f"  - {issue}")
        return EXIT_SNAPSHOT_ERROR

    guard = PrivilegeScopeGuard(
        system_identity=Identity(config.system_identity, is_system=True)
    )
    receiver = GitBucketWebhookReceiver(registry, guard=guard)
    result = receiver.receive(args.event, payload_path.read_bytes())

    print(f"status: {result.status}")
    if result.repository_url is not None:
        print(f"repository: {result.repository_url}")
    for job_name in result.triggered:
        print(f"triggered: {job_name}")
    print(f"{len(result.triggered)} of {len(registry)} jobs triggered")
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
