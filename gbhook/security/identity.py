"""Identities the matching core can act as.

The current identity lives in a :class:`contextvars.ContextVar`, so each
thread and each asyncio task sees its own value. Elevating one request never
changes the identity observed by another request handled concurrently.
"""

from __future__ import annotations

import contextvars
import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Identity:
    """Principal on whose behalf registry reads and triggers run."""

    name: str
    is_system: bool = False


SYSTEM = Identity("SYSTEM", is_system=True)
ANONYMOUS = Identity("anonymous")

_CURRENT_IDENTITY: contextvars.ContextVar[Identity] = contextvars.ContextVar(
    "gbhook_current_identity", default=ANONYMOUS
)


@typ.runtime_checkable
class IdentityContext(typ.Protocol):
    """Read and replace the identity of the current call."""

    def get_current_identity(self) -> Identity:
        """Return the identity in effect for the caller."""
        ...

    def set_current_identity(self, identity: Identity) -> None:
        """Make ``identity`` the identity in effect for the caller."""
        ...


class ContextVarIdentityContext:
    """:class:`IdentityContext` backed by a module-level ``ContextVar``."""

    def get_current_identity(self) -> Identity:
        """Return the identity for the current thread or task."""
        return _CURRENT_IDENTITY.get()

    def set_current_identity(self, identity: Identity) -> None:
        """Replace the identity for the current thread or task only."""
        _CURRENT_IDENTITY.set(identity)


def get_current_identity() -> Identity:
    """Return the identity for the current thread or task."""
    return _CURRENT_IDENTITY.get()


__all__ = [
    "ANONYMOUS",
    "SYSTEM",
    "ContextVarIdentityContext",
    "Identity",
    "IdentityContext",
    "get_current_identity",
]
