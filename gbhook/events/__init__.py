"""GitBucket push payload model and decoding."""

from __future__ import annotations

from .errors import PayloadDecodeError
from .models import (
    PUSH_EVENT,
    GitBucketCommit,
    GitBucketPushPayload,
    GitBucketRepository,
    GitBucketUser,
    PushEvent,
)
from .parsing import parse_push_payload

__all__ = [
    "PUSH_EVENT",
    "GitBucketCommit",
    "GitBucketPushPayload",
    "GitBucketRepository",
    "GitBucketUser",
    "PayloadDecodeError",
    "PushEvent",
    "parse_push_payload",
]
