# vidmeta/domain/dataclasses/items.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.enums.source_kind import SourceKind


@dataclass(frozen=True)
class BinaryPayload:
    """File content attached to a pipeline item (or downloaded for it)."""
    data: bytes
    file_name: Optional[str] = None
    file_extension: Optional[str] = None  # with or without the leading dot
    mime_type: Optional[str] = None

    def suffix(self, default: str = ".mp4") -> str:
        ext = (self.file_extension or "").strip()
        if not ext:
            return default
        return ext if ext.startswith(".") else f".{ext}"


@dataclass
class PipelineItem:
    json: Dict[str, Any] = field(default_factory=dict)
    binary: Dict[str, BinaryPayload] = field(default_factory=dict)


@dataclass(frozen=True)
class ExtractOptions:
    operation: Operation = Operation.extract_metadata
    binary_property: str = "data"
    output_property: str = "metadata"
    include_raw: bool = False  # extractMetadata only
    source: SourceKind = SourceKind.binary
    url_property: str = "url"
    continue_on_fail: bool = False
