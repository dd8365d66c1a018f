"""Generate synthetic OpenLineage run events for load and fixture testing."""

from __future__ import annotations

__version__ = "0.1.0"

from .config import MetadataConfig
from .errors import GenerationCancelled, MetadataConfigError, MetadataGenError, MetadataWriteError
from .generator import MetadataGenerator, generate
from .models import Dataset, EventType, Job, Run, RunEvent, RunEvents, SchemaField

__all__ = [
    "Dataset",
    "EventType",
    "GenerationCancelled",
    "Job",
    "MetadataConfig",
    "MetadataConfigError",
    "MetadataGenError",
    "MetadataGenerator",
    "MetadataWriteError",
    "Run",
    "RunEvent",
    "RunEvents",
    "SchemaField",
    "generate",
    "__version__",
]
