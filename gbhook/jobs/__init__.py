"""Job registry access and push trigger bindings.

Usage
-----
List the jobs that should hear about GitBucket pushes::

    from gbhook.jobs import InMemoryJobRegistry, JobRegistryScanner

    scanner = JobRegistryScanner(InMemoryJobRegistry(jobs))
    for job, binding in scanner.candidates():
        ...

"""

from __future__ import annotations

from .errors import JobSnapshotError
from .loader import build_job_registry, load_job_registry
from .memory import InMemoryJobRegistry
from .models import BranchProject, FreestyleJob, PipelineJob
from .protocol import JobRegistry
from .scanner import Candidate, JobRegistryScanner, find_push_trigger
from .triggers import CallbackPushTrigger, PushCallback, PushTrigger

__all__ = [
    "BranchProject",
    "CallbackPushTrigger",
    "Candidate",
    "FreestyleJob",
    "InMemoryJobRegistry",
    "JobRegistry",
    "JobRegistryScanner",
    "JobSnapshotError",
    "PipelineJob",
    "PushCallback",
    "PushTrigger",
    "build_job_registry",
    "find_push_trigger",
    "load_job_registry",
]
