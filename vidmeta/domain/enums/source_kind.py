from __future__ import annotations
from enum import StrEnum

class SourceKind(StrEnum):
    binary = "binary"
    url = "url"
