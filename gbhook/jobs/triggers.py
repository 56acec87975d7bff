"""Trigger bindings that react to matching push events."""

from __future__ import annotations

import abc
import typing as typ

if typ.TYPE_CHECKING:
    from gbhook.events import PushEvent

PushCallback = typ.Callable[["PushEvent"], object]


class PushTrigger(abc.ABC):
    """Job-scoped handler for GitBucket push events.

    A job carries at most one binding of this type. ``on_push`` is
    fire-and-forget: implementations schedule the build and return without
    waiting for it, and the dispatcher ignores any return value.
    """

    @abc.abstractmethod
    def on_push(self, event: PushEvent) -> None:
        """Schedule a build of the owning job for ``event``."""


class CallbackPushTrigger(PushTrigger):
    """Binding that forwards events to a plain callable."""

    def __init__(self, callback: PushCallback) -> None:
        """Initialise with the callable invoked for each matching push."""
        self._callback = callback

    def on_push(self, event: PushEvent) -> None:
        """Forward ``event`` to the callback, discarding its result."""
        self._callback(event)


__all__ = ["CallbackPushTrigger", "PushCallback", "PushTrigger"]
