# vidmeta/services/filesystem/scratch.py
from __future__ import annotations

import secrets
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

from vidmeta.common.logging import get_logger
from vidmeta.common.settings import get_settings

logger = get_logger()


def scratch_name(suffix: str = ".mp4") -> str:
    """video_<epoch-ms>_<random><suffix>, unique enough for one process tree."""
    return f"video_{int(time.time() * 1000)}_{secrets.token_hex(4)}{suffix}"


@contextmanager
def scratch_file(data: bytes, suffix: str = ".mp4", *, root: Optional[Path] = None) -> Iterator[Path]:
    """
    Write `data` to a fresh file under the scratch dir and yield its path.
    The file is removed on exit, including when the body raises; a failed
    removal is logged and never masks the body's own exception.
    """
    base = Path(root) if root is not None else get_settings().scratch_dir
    base.mkdir(parents=True, exist_ok=True)
    path = base / scratch_name(suffix)
    try:
        path.write_bytes(data)
        yield path
    finally:
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Could not remove scratch file %s: %s", path, e)
