"""Writer utilities for exporting generated lineage events."""

from __future__ import annotations

from pathlib import Path

from ..errors import MetadataConfigError
from .base import BaseWriter
from .json_writer import JSONWriter
from .jsonl_writer import JSONLWriter
from .parquet_writer import ParquetWriter

WRITERS = {
    "json": JSONWriter,
    "jsonl": JSONLWriter,
    "parquet": ParquetWriter,
}


def get_writer(output_format: str, path: str | Path) -> BaseWriter:
    fmt = (output_format or "json").lower()
    try:
        writer_cls = WRITERS[fmt]
    except KeyError:
        raise MetadataConfigError(f"Unsupported output format: {output_format}") from None
    return writer_cls(path)


__all__ = ["BaseWriter", "JSONWriter", "JSONLWriter", "ParquetWriter", "get_writer"]
