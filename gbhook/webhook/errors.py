"""Caller-facing errors raised by the webhook receiver."""

from __future__ import annotations


class MissingPayloadError(ValueError):
    """Raised when a push notification arrives without a ``payload``.

    GitBucket always sends the parameter; a request without it is almost
    always someone opening the webhook URL in a browser. Front doors should
    surface the message as a client error.
    """

    def __init__(self, parameter: str = "payload") -> None:
        """Initialise with the name of the missing request parameter."""
        self.parameter = parameter
        super().__init__(
            "Not intended to be browsed interactively "
            f"(must specify {parameter} parameter)"
        )
