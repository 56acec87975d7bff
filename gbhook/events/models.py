"""Typed structures for GitBucket push notifications."""

from __future__ import annotations

import dataclasses as dc

import msgspec

PUSH_EVENT = "push"


class GitBucketUser(msgspec.Struct, kw_only=True):
    """Pusher or commit author as reported by GitBucket."""

    name: str | None = None
    email: str | None = None
    login: str | None = None


class GitBucketCommit(msgspec.Struct, kw_only=True):
    """Single commit included in a push notification."""

    id: str | None = None
    message: str | None = None
    timestamp: str | None = None
    url: str | None = None
    author: GitBucketUser | None = None
    added: list[str] = msgspec.field(default_factory=list)
    removed: list[str] = msgspec.field(default_factory=list)
    modified: list[str] = msgspec.field(default_factory=list)


class GitBucketRepository(msgspec.Struct, kw_only=True):
    """Repository descriptor embedded in a push notification.

    Attributes
    ----------
    name : str, optional
        Repository name.
    full_name : str, optional
        ``owner/name`` slug.
    url : str, optional
        Clone URL as sent by GitBucket releases older than 3.1. Newer releases
        use this field for the API URL instead.
    clone_url : str, optional
        Clone URL sent by GitBucket 3.1 and later.
    html_url : str, optional
        Browser URL of the repository.
    private : bool
        Whether the repository is private.

    """

    name: str | None = None
    full_name: str | None = None
    url: str | None = None
    clone_url: str | None = None
    html_url: str | None = None
    private: bool = False

    @property
    def repository_url(self) -> str | None:
        """Return the clone URL, preferring ``clone_url`` over ``url``."""
        return self.clone_url if self.clone_url is not None else self.url


class GitBucketPushPayload(msgspec.Struct, kw_only=True):
    """Body of a GitBucket ``push`` webhook.

    Every field has a default and most accept ``null`` so that truncated
    payloads still decode; the dispatcher decides separately whether a usable
    repository URL exists.
    """

    ref: str | None = None
    before: str | None = None
    after: str | None = None
    repository: GitBucketRepository | None = None
    pusher: GitBucketUser | None = None
    commits: list[GitBucketCommit] = msgspec.field(default_factory=list)


@dc.dataclass(frozen=True, slots=True)
class PushEvent:
    """Push notification handed to matching jobs.

    Attributes
    ----------
    event_type
        Value of the ``X-Github-Event`` header, always ``push`` once the
        receiver has accepted the request.
    repository_url
        Raw repository URL taken from the payload, or ``None`` when the
        payload carries neither ``clone_url`` nor ``url``.
    payload
        Decoded payload, available to trigger bindings.

    """

    event_type: str
    repository_url: str | None
    payload: GitBucketPushPayload

    @classmethod
    def from_payload(
        cls,
        payload: GitBucketPushPayload,
        *,
        event_type: str = PUSH_EVENT,
    ) -> PushEvent:
        """Build an event from a decoded payload."""
        return cls(
            event_type=event_type,
            repository_url=(
                payload.repository.repository_url
                if payload.repository is not None
                else None
            ),
            payload=payload,
        )
