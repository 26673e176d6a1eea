# vidmeta/services/schemas/metadata.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import Base64Bytes, BaseModel, Field

from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.enums.source_kind import SourceKind


class BinaryPayloadIn(BaseModel):
    data: Base64Bytes = Field(..., description="Base64-encoded file content")
    file_name: Optional[str] = Field(None, examples=["clip.mp4"])
    file_extension: Optional[str] = Field(None, examples=["mp4", ".mov"])
    mime_type: Optional[str] = Field(None, examples=["video/mp4"])


class BinaryPayloadOut(BaseModel):
    data: str = Field(..., description="Base64-encoded file content")
    file_name: Optional[str] = None
    file_extension: Optional[str] = None
    mime_type: Optional[str] = None


class PipelineItemIn(BaseModel):
    json_: Dict[str, Any] = Field(default_factory=dict, alias="json")
    binary: Dict[str, BinaryPayloadIn] = Field(default_factory=dict)

    model_config = {"populate_by_name": True}


class ExtractRunRequest(BaseModel):
    operation: Operation = Operation.extract_metadata
    items: List[PipelineItemIn] = Field(default_factory=list)
    source: SourceKind = SourceKind.binary
    include_raw: bool = Field(False, description="extractMetadata only: attach the untouched ffprobe report")
    # None -> configured pipeline defaults
    binary_property: Optional[str] = Field(None, examples=["data"])
    output_property: Optional[str] = Field(None, examples=["metadata"])
    url_property: Optional[str] = Field(None, examples=["url"])
    continue_on_fail: Optional[bool] = None


class ExtractRunResponse(BaseModel):
    ok: bool
    started_at: Optional[datetime] = None
    finished_at: Optional[datetime] = None
    error_details: List[str] = Field(default_factory=list)
    items: List[dict] = Field(default_factory=list)


class NormalizeRequest(BaseModel):
    operation: Operation = Operation.extract_metadata
    raw: Optional[Dict[str, Any]] = Field(None, description="ffprobe JSON report (extractMetadata)")
    text: Optional[str] = Field(None, description="ffprobe text line (getDuration / getResolution)",
                                examples=["7325.5", "1920x1080"])
    include_raw: bool = False
