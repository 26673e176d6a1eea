# vidmeta/domain/policies/numeric.py
"""
Parsing and rendering rules for the numbers ffprobe emits as text.

Every derived field (full metadata, duration-only, resolution-only) goes
through these helpers so that padding, decimal places and defaults stay the
same across the three operation modes.
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional, Tuple

from vidmeta.domain.enums.quality_tier import QualityTier

# (min height, tier), evaluated top-down; first match wins.
QUALITY_THRESHOLDS: Tuple[Tuple[int, QualityTier], ...] = (
    (2160, QualityTier.uhd),
    (1440, QualityTier.qhd),
    (1080, QualityTier.full_hd),
    (720, QualityTier.hd),
    (480, QualityTier.sd),
)

BYTES_PER_MB = 1024 * 1024


def parse_float(x: Any) -> Optional[float]:
    """Decimal text (or number) -> float; None when absent or unparsable."""
    if x is None or isinstance(x, bool):
        return None
    try:
        v = float(x)
    except (TypeError, ValueError):
        return None
    return v if math.isfinite(v) else None


def parse_int(x: Any) -> Optional[int]:
    """
    Integer text (or number) -> int; None when absent or unparsable.
    "123.9" truncates to 123, matching how ffprobe counters are usually read.
    """
    if x is None or isinstance(x, bool):
        return None
    if isinstance(x, int):
        return x
    try:
        return int(str(x).strip())
    except ValueError:
        pass
    f = parse_float(x)
    return None if f is None else int(f)


def to_fixed(value: float, digits: int) -> str:
    """
    Render with exactly `digits` decimals. Ties round away from zero on the
    exact binary value (128.5 -> "129"), NaN renders as "NaN".
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def parse_frame_rate(rate: Any) -> Optional[float]:
    """
    "30000/1001" -> 29.97, "30" -> 30.0, "30/" -> 30.0.
    A zero denominator ("0/0" on some data streams) or unparsable parts -> None.
    """
    if rate is None or rate == "":
        return None
    text = str(rate).strip()
    if "/" not in text:
        return parse_float(text)
    num_s, den_s = text.split("/", 1)
    if not den_s.strip():
        return parse_float(num_s)
    num, den = parse_float(num_s), parse_float(den_s)
    if num is None or not den:
        return None
    return float(to_fixed(num / den, 2))


def split_hms(total_seconds: float) -> Tuple[float, float, float]:
    """
    Whole hours, minutes and seconds of a duration. NaN in, NaN out for every
    component (the duration-only mode relies on this).
    """
    if not math.isfinite(total_seconds):
        return math.nan, math.nan, math.nan
    hours = math.floor(total_seconds / 3600)
    minutes = math.floor((total_seconds % 3600) / 60)
    seconds = math.floor(total_seconds % 60)
    return hours, minutes, seconds


def _pad2(v: float) -> str:
    if isinstance(v, float) and math.isnan(v):
        return "NaN"
    return f"{int(v):02d}"


def format_hms(hours: float, minutes: float, seconds: float) -> str:
    """HH:MM:SS, each part at least two digits; 100+ hours keep all digits."""
    return f"{_pad2(hours)}:{_pad2(minutes)}:{_pad2(seconds)}"


def kbps_text(bits_per_sec: int) -> str:
    return to_fixed(bits_per_sec / 1000, 0)


def khz_text(hz: int) -> str:
    return to_fixed(hz / 1000, 1)


def mb_text(size_bytes: int) -> str:
    return to_fixed(size_bytes / BYTES_PER_MB, 2)


def classify_quality(height: Optional[int]) -> QualityTier:
    """Coarse tier by vertical resolution; unknown height is Low."""
    if height is None:
        return QualityTier.low
    for floor_, tier in QUALITY_THRESHOLDS:
        if height >= floor_:
            return tier
    return QualityTier.low
