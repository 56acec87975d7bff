"""Entry point the HTTP front door calls for each GitBucket notification.

The front door owns routing and request parsing. It passes the value of the
``X-Github-Event`` header and the raw ``payload`` parameter to
:meth:`GitBucketWebhookReceiver.receive`, which filters, decodes and
dispatches the event as the system identity.
"""

from __future__ import annotations

import typing as typ

from gbhook.dispatch import DispatchResult, PushDispatcher
from gbhook.events import PUSH_EVENT, PayloadDecodeError, PushEvent, parse_push_payload
from gbhook.jobs.scanner import JobRegistryScanner
from gbhook.logging import get_logger, log_debug, log_warning
from gbhook.security import PrivilegeScopeGuard

from .errors import MissingPayloadError

if typ.TYPE_CHECKING:
    from gbhook.jobs.protocol import JobRegistry

WEBHOOK_URL = "gitbucket-webhook"
EVENT_HEADER = "X-Github-Event"

logger = get_logger(__name__)


class GitBucketWebhookReceiver:
    """Handle GitBucket notifications for every job in a registry.

    Parameters
    ----------
    registry
        Job registry scanned for candidates on each push.
    dispatcher
        Matcher and dispatcher; defaults to :class:`PushDispatcher`.
    guard
        Privilege guard wrapping the scan-and-dispatch pass; defaults to a
        guard elevating to :data:`gbhook.security.SYSTEM`.

    """

    def __init__(
        self,
        registry: JobRegistry,
        *,
        dispatcher: PushDispatcher | None = None,
        guard: PrivilegeScopeGuard | None = None,
    ) -> None:
        """Initialise the receiver with its collaborators."""
        self._scanner = JobRegistryScanner(registry)
        self._dispatcher = dispatcher or PushDispatcher()
        self._guard = guard or PrivilegeScopeGuard()

    def receive(
        self,
        event_type: str | None,
        payload: str | bytes | typ.Mapping[str, typ.Any] | None,
    ) -> DispatchResult:
        """Process one notification.

        Parameters
        ----------
        event_type
            ``X-Github-Event`` header value. Only ``push`` is processed.
        payload
            Raw ``payload`` request parameter: JSON text or a parsed mapping.

        Returns
        -------
        DispatchResult
            Outcome of the notification, including triggered job names.

        Raises
        ------
        MissingPayloadError
            If a push notification carries no payload.

        """
        log_debug(logger, "WebHook called. event: %s", event_type)
        if event_type != PUSH_EVENT:
            log_debug(logger, "Only push event can be accepted.")
            return DispatchResult.ignored()

        if payload is None:
            raise MissingPayloadError

        try:
            decoded = parse_push_payload(payload)
        except PayloadDecodeError as exc:
            log_warning(logger, "Ignoring undecodable push payload: %s", exc)
            return DispatchResult.malformed_payload()

        event = PushEvent.from_payload(decoded, event_type=event_type)
        return self._guard.run_elevated(
            lambda: self._dispatcher.dispatch(
                event,
                self._scanner.candidates(),
                identity=self._guard.system_identity,
            )
        )


__all__ = ["EVENT_HEADER", "WEBHOOK_URL", "GitBucketWebhookReceiver"]
