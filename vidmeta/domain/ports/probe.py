from __future__ import annotations
from pathlib import Path
from typing import Any, Dict, Protocol

class MediaProbePort(Protocol):
    def probe_full(self, path: Path) -> Dict[str, Any]: ...
    def probe_duration(self, path: Path) -> str: ...
    def probe_resolution(self, path: Path) -> str: ...
