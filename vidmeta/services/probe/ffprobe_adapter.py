# vidmeta/services/probe/ffprobe_adapter.py
from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from vidmeta.common.logging import get_logger
from vidmeta.common.probe.ffprobe_helpers import build_ffprobe_cmd, parse_ffprobe_json, run_ffprobe
from vidmeta.common.settings import get_settings
from vidmeta.domain.enums.operation import Operation
from vidmeta.domain.ports.probe import MediaProbePort

logger = get_logger()


@dataclass(eq=False)
class FFprobeError(RuntimeError):
    """Adapter-level error for probe failures."""
    message: str
    stderr: Optional[str] = None
    rc: Optional[int] = None

    def __str__(self) -> str:
        return self.message


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    Returns ffprobe's output as-is (parsed JSON or a stripped text line);
    normalization happens in vidmeta.domain.policies.metadata_normalizer.
    """

    def __init__(
        self,
        ffprobe_bin: Optional[str] = None,
        timeout_sec: Optional[int] = None,
        log_level: Optional[str] = None,
    ):
        cfg = get_settings()
        candidate = ffprobe_bin or cfg.ffprobe.bin
        if not Path(candidate).is_file():
            # bare name: resolve on PATH for nicer errors
            resolved = shutil.which(candidate)
            if not resolved:
                raise FFprobeError(f"ffprobe not found ({candidate!r}); set FFPROBE__BIN or install ffmpeg.")
            candidate = resolved

        self.ffprobe_bin = candidate
        self.timeout_sec = int(timeout_sec or cfg.ffprobe.timeout_sec or 30)
        self.log_level = log_level or cfg.ffprobe.log_level

    # ---- Port API -------------------------------------------------------------
    def probe_full(self, path: Path) -> Dict[str, Any]:
        stdout = self._run(path, Operation.extract_metadata)
        try:
            return parse_ffprobe_json(stdout)
        except ValueError as e:
            raise FFprobeError(str(e), stderr=stdout) from e

    def probe_duration(self, path: Path) -> str:
        return self._run(path, Operation.get_duration)

    def probe_resolution(self, path: Path) -> str:
        return self._run(path, Operation.get_resolution)

    # ---- Internals ------------------------------------------------------------
    def _run(self, path: Path, mode: Operation) -> str:
        if not path:
            raise FFprobeError("No path provided to probe.")
        if not Path(path).is_file():
            raise FFprobeError(f"File not found: {path}")

        cmd = build_ffprobe_cmd(path, mode, ffprobe_bin=self.ffprobe_bin, log_level=self.log_level)
        try:
            return run_ffprobe(cmd, timeout=self.timeout_sec)
        except subprocess.TimeoutExpired as e:
            raise FFprobeError(f"ffprobe timed out after {self.timeout_sec}s", stderr=str(e)) from e
        except subprocess.CalledProcessError as e:
            raise FFprobeError("ffprobe returned non-zero exit code", stderr=e.stderr, rc=e.returncode) from e
        except OSError as e:
            raise FFprobeError("Failed to execute ffprobe (OS error).", stderr=str(e)) from e
