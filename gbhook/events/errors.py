"""Errors raised while decoding GitBucket payloads."""

from __future__ import annotations


class PayloadDecodeError(ValueError):
    """Raised when a webhook payload is not a decodable push payload."""

    @classmethod
    def invalid_json(cls, detail: object) -> PayloadDecodeError:
        """Return an error for payload text that is not valid JSON."""
        return cls(f"Webhook payload is not valid JSON: {detail}")

    @classmethod
    def invalid_shape(cls, detail: object) -> PayloadDecodeError:
        """Return an error for JSON that does not match the push schema."""
        return cls(f"Webhook payload does not match the push schema: {detail}")
