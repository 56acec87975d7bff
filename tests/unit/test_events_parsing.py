"""Unit tests for GitBucket push payload decoding."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gbhook.events import (
    GitBucketPushPayload,
    PayloadDecodeError,
    PushEvent,
    parse_push_payload,
)
from tests.helpers.payloads import push_payload, push_payload_json


def test_decodes_recorded_payload(push_payload_path: Path) -> None:
    """A recorded GitBucket body decodes into typed structures."""
    payload = parse_push_payload(push_payload_path.read_bytes())

    assert isinstance(payload, GitBucketPushPayload)
    assert payload.ref == "refs/heads/main"
    assert payload.repository.full_name == "alice/app"
    assert payload.commits[0].modified == ["README.md"]
    assert payload.pusher is not None
    assert payload.pusher.name == "alice"


@pytest.mark.parametrize(
    "raw",
    [
        pytest.param(push_payload_json(clone_url="https://x/a.git"), id="text"),
        pytest.param(
            push_payload_json(clone_url="https://x/a.git").encode(), id="bytes"
        ),
        pytest.param(push_payload(clone_url="https://x/a.git"), id="mapping"),
    ],
)
def test_accepts_text_bytes_and_mappings(raw: object) -> None:
    """Every supported input form decodes to the same repository URL."""
    assert parse_push_payload(raw).repository.clone_url == "https://x/a.git"


def test_unknown_fields_are_ignored() -> None:
    """Extra keys sent by newer GitBucket releases do not break decoding."""
    body = push_payload(clone_url="https://x/a.git")
    body["repository"]["watchers"] = 3
    body["sender"] = {"login": "alice"}

    assert parse_push_payload(body).repository.clone_url == "https://x/a.git"


def test_minimal_payload_decodes() -> None:
    """All fields are optional; an empty object still decodes."""
    payload = parse_push_payload("{}")
    assert payload.repository is None
    assert payload.commits == []
    assert PushEvent.from_payload(payload).repository_url is None


def test_null_repository_decodes() -> None:
    """``"repository": null`` decodes to an event without repository URL."""
    body = push_payload()
    body["repository"] = None

    event = PushEvent.from_payload(parse_push_payload(body))

    assert event.repository_url is None


def test_sparse_commits_decode() -> None:
    """Commits without id or with a null message do not reject the push."""
    body = push_payload(clone_url="https://x/a.git")
    body["commits"] = [{"message": None}, {"modified": ["README.md"]}]

    payload = parse_push_payload(body)

    assert [commit.id for commit in payload.commits] == [None, None]
    assert payload.repository is not None
    assert payload.repository.clone_url == "https://x/a.git"


class TestRepositoryUrl:
    """Choice between ``clone_url`` and the legacy ``url`` field."""

    def test_clone_url_preferred(self) -> None:
        """``clone_url`` wins when both fields are present."""
        payload = parse_push_payload(
            push_payload(clone_url="https://x/new.git", url="https://x/api")
        )
        event = PushEvent.from_payload(payload)
        assert event.repository_url == "https://x/new.git"
        assert event.event_type == "push"

    def test_legacy_url_used_when_clone_url_absent(self) -> None:
        """Releases before 3.1 only send ``url``."""
        event = PushEvent.from_payload(
            parse_push_payload(push_payload(url="https://x/old.git"))
        )
        assert event.repository_url == "https://x/old.git"


@pytest.mark.parametrize(
    ("raw", "fragment"),
    [
        pytest.param("{not json", "not valid JSON", id="invalid_json"),
        pytest.param(b"", "not valid JSON", id="empty_body"),
        pytest.param('["push"]', "push schema", id="wrong_top_level"),
        pytest.param(
            json.dumps({"repository": {"clone_url": 42}}),
            "push schema",
            id="wrong_field_type",
        ),
        pytest.param({"commits": "none"}, "push schema", id="mapping_wrong_type"),
    ],
)
def test_rejects_malformed_payloads(raw: object, fragment: str) -> None:
    """Undecodable payloads raise ``PayloadDecodeError``."""
    with pytest.raises(PayloadDecodeError, match=fragment):
        parse_push_payload(raw)
