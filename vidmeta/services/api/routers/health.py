# vidmeta/services/api/routers/health.py
from __future__ import annotations

import shutil
from pathlib import Path

from fastapi import APIRouter

from vidmeta.common.settings import get_settings

router = APIRouter(tags=["health"])


@router.get("/healthz")
def healthz():
    """Liveness plus whether the configured ffprobe can be found."""
    s = get_settings()
    probe_bin = s.ffprobe.bin
    return {
        "ok": True,
        "app": s.app_name,
        "env": s.app_env,
        "ffprobe_available": Path(probe_bin).is_file() or shutil.which(probe_bin) is not None,
    }
