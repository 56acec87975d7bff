"""GitBucket webhook receiver used by HTTP front doors."""

from __future__ import annotations

from .errors import MissingPayloadError
from .receiver import EVENT_HEADER, WEBHOOK_URL, GitBucketWebhookReceiver

__all__ = [
    "EVENT_HEADER",
    "WEBHOOK_URL",
    "GitBucketWebhookReceiver",
    "MissingPayloadError",
]
