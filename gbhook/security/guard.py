"""Scoped elevation to the system identity.

Webhook senders are unauthenticated, yet scanning every job and firing their
triggers needs read access to the whole registry. :class:`PrivilegeScopeGuard`
runs that pass as the system identity and puts the caller's identity back
afterwards, whether the pass returns or raises.

Usage
-----
::

    guard = PrivilegeScopeGuard()
    result = guard.run_elevated(lambda: dispatcher.dispatch(event, candidates))

    with guard.elevated():
        ...

"""

from __future__ import annotations

import contextlib
import typing as typ

from .identity import SYSTEM, ContextVarIdentityContext

if typ.TYPE_CHECKING:
    from collections.abc import Callable, Iterator

    from .identity import Identity, IdentityContext


class PrivilegeScopeGuard:
    """Run callables as a fixed system identity.

    Parameters
    ----------
    context
        Identity store to read and restore. Defaults to the call-scoped
        :class:`ContextVarIdentityContext`.
    system_identity
        Identity installed for the duration of the elevated call.

    """

    def __init__(
        self,
        context: IdentityContext | None = None,
        system_identity: Identity = SYSTEM,
    ) -> None:
        """Initialise with the identity store and system identity."""
        self._context = context if context is not None else ContextVarIdentityContext()
        self._system_identity = system_identity

    @property
    def system_identity(self) -> Identity:
        """Return the identity installed while elevated."""
        return self._system_identity

    @contextlib.contextmanager
    def elevated(self) -> Iterator[Identity]:
        """Install the system identity for the body of a ``with`` block."""
        previous = self._context.get_current_identity()
        self._context.set_current_identity(self._system_identity)
        try:
            yield self._system_identity
        finally:
            self._context.set_current_identity(previous)

    def run_elevated[T](self, fn: Callable[[], T]) -> T:
        """Call ``fn`` as the system identity and return its result."""
        with self.elevated():
            return fn()


__all__ = ["PrivilegeScopeGuard"]
