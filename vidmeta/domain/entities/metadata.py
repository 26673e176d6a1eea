# vidmeta/domain/entities/metadata.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from vidmeta.domain.enums.quality_tier import QualityTier


@dataclass(frozen=True)
class VideoSummary:
    """Facts about the first video stream of a probe report."""
    codec: Optional[str] = None
    codec_long: Optional[str] = None
    profile: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    resolution: Optional[str] = None
    aspect_ratio: str = "N/A"
    fps: Optional[float] = None
    bitrate: Optional[int] = None
    bitrate_kbps: Optional[str] = None
    pixel_format: Optional[str] = None
    level: Optional[int] = None
    color_space: Optional[str] = None
    color_range: Optional[str] = None


@dataclass(frozen=True)
class AudioSummary:
    """Facts about the first audio stream of a probe report."""
    codec: Optional[str] = None
    codec_long: Optional[str] = None
    sample_rate: Optional[int] = None
    sample_rate_khz: Optional[str] = None
    channels: Optional[int] = None
    channel_layout: Optional[str] = None
    bitrate: Optional[int] = None
    bitrate_kbps: Optional[str] = None


@dataclass(frozen=True)
class StreamsCount:
    total: int = 0
    video: int = 0
    audio: int = 0
    subtitle: int = 0


@dataclass(frozen=True)
class DerivedMetadata:
    """
    Normalized result of a full probe. Top-level numbers always have a value
    (0 when ffprobe left them out); `video`/`audio` are None when the container
    has no such stream. `raw` holds the untouched probe report only when the
    caller asked for it, and is left out of `as_dict()` otherwise.
    """
    filename: Optional[str] = None
    format: Optional[str] = None
    format_long: Optional[str] = None
    duration: float = 0.0
    duration_formatted: str = "00:00:00"
    size: int = 0
    size_mb: str = "0.00"
    bitrate: int = 0
    bitrate_kbps: str = "0"
    video: Optional[VideoSummary] = None
    audio: Optional[AudioSummary] = None
    streams_count: StreamsCount = field(default_factory=StreamsCount)
    raw: Optional[Dict[str, Any]] = None

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        if self.raw is None:
            out.pop("raw")
        return out


@dataclass(frozen=True)
class DurationResult:
    duration_seconds: float
    duration_formatted: str
    hours: float
    minutes: float
    seconds: float

    def as_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ResolutionResult:
    width: Optional[int]
    height: Optional[int]
    resolution: Optional[str]
    quality: QualityTier
    aspect_ratio: Optional[str]

    def as_dict(self) -> Dict[str, Any]:
        out = asdict(self)
        out["quality"] = str(self.quality)
        return out
