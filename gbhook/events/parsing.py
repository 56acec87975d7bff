"""Decode webhook payloads into :class:`GitBucketPushPayload`."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec

from .errors import PayloadDecodeError
from .models import GitBucketPushPayload

_DECODER = msgspec.json.Decoder(GitBucketPushPayload)


def parse_push_payload(
    raw: str | bytes | typ.Mapping[str, typ.Any],
) -> GitBucketPushPayload:
    """Decode a push payload from JSON text or an already parsed mapping.

    Raises
    ------
    PayloadDecodeError
        If the payload is not JSON or does not fit the push schema.

    """
    if isinstance(raw, cabc.Mapping):
        try:
            return msgspec.convert(raw, type=GitBucketPushPayload)
        except msgspec.ValidationError as exc:
            raise PayloadDecodeError.invalid_shape(exc) from exc

    try:
        return _DECODER.decode(raw)
    except msgspec.ValidationError as exc:
        raise PayloadDecodeError.invalid_shape(exc) from exc
    except msgspec.DecodeError as exc:
        raise PayloadDecodeError.invalid_json(exc) from exc
