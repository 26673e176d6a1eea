from __future__ import annotations
from enum import StrEnum

class Operation(StrEnum):
    extract_metadata = "extractMetadata"
    get_duration = "getDuration"
    get_resolution = "getResolution"
