from vidmeta.services.schemas.metadata import (
    BinaryPayloadIn,
    BinaryPayloadOut,
    PipelineItemIn,
    ExtractRunRequest,
    ExtractRunResponse,
    NormalizeRequest,
)
__all__ = [
    "BinaryPayloadIn",
    "BinaryPayloadOut",
    "PipelineItemIn",
    "ExtractRunRequest",
    "ExtractRunResponse",
    "NormalizeRequest",
]
