# vidmeta/services/api/deps.py
from __future__ import annotations

from vidmeta.services.extract.service import ExtractService


def get_extract_service() -> ExtractService:
    """
    Provide the pipeline service via DI. Its worker builds the ffprobe adapter
    and HTTP fetcher lazily, so requests that never probe need no ffprobe.
    """
    return ExtractService()
