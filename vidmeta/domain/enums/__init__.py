from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.enums.quality_tier import QualityTier
from vidmeta.domain.enums.source_kind import SourceKind
__all__ = [
    "Operation",
    "QualityTier",
    "SourceKind",
]
