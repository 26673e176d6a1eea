# vidmeta/domain/policies/metadata_normalizer.py
"""
Turns ffprobe output into the records in vidmeta.domain.entities.metadata.

Pure functions only: no I/O, no shared state. Missing fields fall back to the
defaults of the numeric helpers; nothing here raises for an absent key.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Mapping, Optional

from vidmeta.domain.entities.metadata import (
    AudioSummary,
    DerivedMetadata,
    DurationResult,
    ResolutionResult,
    StreamsCount,
    VideoSummary,
)
from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.policies.numeric import (
    classify_quality,
    format_hms,
    kbps_text,
    khz_text,
    mb_text,
    parse_float,
    parse_frame_rate,
    parse_int,
    split_hms,
    to_fixed,
)


def _streams(raw: Mapping[str, Any]) -> List[Mapping[str, Any]]:
    streams = raw.get("streams") or []
    return [s for s in streams if isinstance(s, Mapping)]


def _first_of(streams: List[Mapping[str, Any]], codec_type: str) -> Optional[Mapping[str, Any]]:
    return next((s for s in streams if s.get("codec_type") == codec_type), None)


def _count_of(streams: List[Mapping[str, Any]], codec_type: str) -> int:
    return sum(1 for s in streams if s.get("codec_type") == codec_type)


def _stream_bitrate(stream: Mapping[str, Any]) -> tuple[Optional[int], Optional[str]]:
    # Per-stream bitrate is None when absent (and 0 counts as absent); the
    # kbps text follows presence of the raw field, not the parsed value.
    raw_rate = stream.get("bit_rate")
    bitrate = parse_int(raw_rate) or None
    kbps = kbps_text(parse_int(raw_rate) or 0) if raw_rate else None
    return bitrate, kbps


def _video_summary(stream: Mapping[str, Any]) -> VideoSummary:
    width = stream.get("width")
    height = stream.get("height")
    bitrate, kbps = _stream_bitrate(stream)
    return VideoSummary(
        codec=stream.get("codec_name"),
        codec_long=stream.get("codec_long_name"),
        profile=stream.get("profile"),
        width=width,
        height=height,
        resolution=f"{width}x{height}" if width is not None and height is not None else None,
        aspect_ratio=stream.get("display_aspect_ratio") or "N/A",
        fps=parse_frame_rate(stream.get("r_frame_rate")),
        bitrate=bitrate,
        bitrate_kbps=kbps,
        pixel_format=stream.get("pix_fmt"),
        level=stream.get("level"),
        color_space=stream.get("color_space"),
        color_range=stream.get("color_range"),
    )


def _audio_summary(stream: Mapping[str, Any]) -> AudioSummary:
    raw_rate = stream.get("sample_rate")
    bitrate, kbps = _stream_bitrate(stream)
    return AudioSummary(
        codec=stream.get("codec_name"),
        codec_long=stream.get("codec_long_name"),
        sample_rate=parse_int(raw_rate) or None,
        sample_rate_khz=khz_text(parse_int(raw_rate) or 0) if raw_rate else None,
        channels=stream.get("channels"),
        channel_layout=stream.get("channel_layout"),
        bitrate=bitrate,
        bitrate_kbps=kbps,
    )


def extract_metadata(raw: Mapping[str, Any], include_raw: bool = False) -> DerivedMetadata:
    """
    Full extraction from an `ffprobe -show_format -show_streams` JSON report.

    Only the first video and first audio stream are summarized; every stream
    is counted. Overall bitrate/size/duration default to 0 when absent, while
    per-stream bitrates default to None.
    """
    fmt: Mapping[str, Any] = raw.get("format") or {}
    streams = _streams(raw)
    video = _first_of(streams, "video")
    audio = _first_of(streams, "audio")

    duration = parse_float(fmt.get("duration")) or 0.0
    size = parse_int(fmt.get("size")) or 0
    bitrate = parse_int(fmt.get("bit_rate")) or 0

    return DerivedMetadata(
        filename=fmt.get("filename"),
        format=fmt.get("format_name"),
        format_long=fmt.get("format_long_name"),
        duration=duration,
        duration_formatted=format_hms(*split_hms(duration)),
        size=size,
        size_mb=mb_text(size),
        bitrate=bitrate,
        bitrate_kbps=kbps_text(bitrate),
        video=_video_summary(video) if video is not None else None,
        audio=_audio_summary(audio) if audio is not None else None,
        streams_count=StreamsCount(
            total=len(streams),
            video=_count_of(streams, "video"),
            audio=_count_of(streams, "audio"),
            subtitle=_count_of(streams, "subtitle"),
        ),
        raw=raw if include_raw else None,  # type: ignore[arg-type]
    )


def _seconds_or_nan(text: Any) -> float:
    try:
        return float(str(text).strip())
    except ValueError:
        return math.nan


def extract_duration(text: str) -> DurationResult:
    """
    Duration-only extraction from ffprobe's bare `format=duration` line.

    Unlike extract_metadata(), an unparsable value is not defaulted to 0: the
    result carries NaN in every numeric field and "NaN:NaN:NaN".
    """
    seconds_total = _seconds_or_nan(text)
    hours, minutes, seconds = split_hms(seconds_total)
    return DurationResult(
        duration_seconds=seconds_total,
        duration_formatted=format_hms(hours, minutes, seconds),
        hours=hours,
        minutes=minutes,
        seconds=seconds,
    )


def extract_resolution(text: str) -> ResolutionResult:
    """
    Resolution-only extraction from ffprobe's `csv=s=x:p=0` line ("1920x1080").

    An empty line (no video stream) gives None dimensions and the Low tier.
    """
    parts = (text or "").strip().split("x")
    width = parse_int(parts[0]) if parts else None
    height = parse_int(parts[1]) if len(parts) > 1 else None

    have_both = width is not None and height is not None
    return ResolutionResult(
        width=width,
        height=height,
        resolution=f"{width}x{height}" if have_both else None,
        quality=classify_quality(height),
        aspect_ratio=to_fixed(width / height, 2) if have_both and height else None,
    )


def normalize(operation: str, payload: Any, *, include_raw: bool = False) -> Dict[str, Any]:
    """
    Dispatch on the operation name and return the JSON-ready dict.
    `payload` is the parsed report for extractMetadata and the probe's text
    line for the other two.
    """
    op = Operation(operation)
    if op is Operation.extract_metadata:
        return extract_metadata(payload or {}, include_raw=include_raw).as_dict()
    if op is Operation.get_duration:
        return extract_duration(payload).as_dict()
    return extract_resolution(payload).as_dict()
