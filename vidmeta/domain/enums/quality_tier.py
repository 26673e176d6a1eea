from __future__ import annotations
from enum import StrEnum

class QualityTier(StrEnum):
    uhd = "4K"
    qhd = "2K"
    full_hd = "Full HD"
    hd = "HD"
    sd = "SD"
    low = "Low"
