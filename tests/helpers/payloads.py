"""GitBucket push payload builders for tests."""

from __future__ import annotations

import json
import typing as typ


def push_payload(
    *,
    clone_url: str | None = None,
    url: str | None = None,
    full_name: str = "alice/app",
) -> dict[str, typ.Any]:
    """Return a push payload dict with the given repository URL fields.

    Fields passed as ``None`` are omitted, matching GitBucket releases that
    do not send them.
    """
    repository: dict[str, typ.Any] = {
        "name": full_name.rpartition("/")[2],
        "full_name": full_name,
        "html_url": f"https://gb.example.com/{full_name}",
        "private": False,
    }
    if url is not None:
        repository["url"] = url
    if clone_url is not None:
        repository["clone_url"] = clone_url
    return {
        "ref": "refs/heads/main",
        "before": "0" * 40,
        "after": "7fd1a60b01f91b314f59955a4e4d4e80d8edf11d",
        "repository": repository,
        "pusher": {"name": "alice", "email": "alice@example.com"},
        "commits": [
            {
                "id": "7fd1a60b01f91b314f59955a4e4d4e80d8edf11d",
                "message": "Update README.md",
                "timestamp": "2024-01-01T00:00:00Z",
                "url": f"https://gb.example.com/{full_name}/commit/7fd1a60",
                "author": {"name": "alice", "email": "alice@example.com"},
                "added": [],
                "removed": [],
                "modified": ["README.md"],
            }
        ],
    }


def push_payload_json(**kwargs: typ.Any) -> str:
    """Return :func:`push_payload` serialised as JSON text."""
    return json.dumps(push_payload(**kwargs))
