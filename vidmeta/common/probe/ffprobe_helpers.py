# vidmeta/common/probe/ffprobe_helpers.py
from __future__ import annotations

import json
import shlex
import subprocess
from pathlib import Path
from typing import Any, Dict, List, Optional

from vidmeta.common.logging import get_logger
from vidmeta.domain.enums.operation import Operation

logger = get_logger()

# Query-specific arguments placed between the log level and the input path.
_MODE_ARGS: Dict[Operation, List[str]] = {
    Operation.extract_metadata: [
        "-print_format", "json",
        "-show_format",
        "-show_streams",
    ],
    Operation.get_duration: [
        "-show_entries", "format=duration",
        "-of", "default=noprint_wrappers=1:nokey=1",
    ],
    Operation.get_resolution: [
        "-select_streams", "v:0",
        "-show_entries", "stream=width,height",
        "-of", "csv=s=x:p=0",
    ],
}


def build_ffprobe_cmd(
    input_path: str | Path,
    mode: Operation | str = Operation.extract_metadata,
    *,
    ffprobe_bin: str = "ffprobe",
    log_level: str = "quiet",
) -> List[str]:
    """
    Build the ffprobe argv for one of the three query modes:
    full JSON dump, duration only, or first video stream's "WxH".
    """
    op = Operation(mode)
    return [
        ffprobe_bin,
        "-v", log_level,
        *_MODE_ARGS[op],
        str(input_path),
    ]


def run_ffprobe(cmd: List[str], *, timeout: Optional[float] = None) -> str:
    """
    Execute ffprobe and return stripped stdout.
    Raises CalledProcessError / TimeoutExpired / OSError on failure.
    """
    logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
    cp = subprocess.run(cmd, capture_output=True, text=True, check=True, timeout=timeout)
    return (cp.stdout or "").strip()


def parse_ffprobe_json(stdout: str) -> Dict[str, Any]:
    """Parse the JSON dump; an empty stdout is an empty report."""
    try:
        data = json.loads(stdout or "{}")
    except json.JSONDecodeError as e:
        logger.exception("Failed to parse ffprobe JSON")
        raise ValueError("ffprobe produced invalid JSON") from e
    if not isinstance(data, dict):
        raise ValueError(f"ffprobe JSON root is {type(data).__name__}, expected object")
    return data
