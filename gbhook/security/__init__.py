"""Identity model and scoped privilege elevation."""

from __future__ import annotations

from .guard import PrivilegeScopeGuard
from .identity import (
    ANONYMOUS,
    SYSTEM,
    ContextVarIdentityContext,
    Identity,
    IdentityContext,
    get_current_identity,
)

__all__ = [
    "ANONYMOUS",
    "SYSTEM",
    "ContextVarIdentityContext",
    "Identity",
    "IdentityContext",
    "PrivilegeScopeGuard",
    "get_current_identity",
]
