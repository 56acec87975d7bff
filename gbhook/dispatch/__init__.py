"""Matching and dispatch of push events to job bindings."""

from __future__ import annotations

from .models import DispatchResult, DispatchStatus
from .observability import DispatchEventLogger, DispatchEventType
from .service import PushDispatcher, target_repository_url

__all__ = [
    "DispatchEventLogger",
    "DispatchEventType",
    "DispatchResult",
    "DispatchStatus",
    "PushDispatcher",
    "target_repository_url",
]
