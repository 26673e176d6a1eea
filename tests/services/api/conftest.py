# tests/services/api/conftest.py
from __future__ import annotations

from typing import Any, Dict, List

import pytest
from starlette.testclient import TestClient

from vidmeta.services.api.app import create_app
from vidmeta.services.api.deps import get_extract_service
from vidmeta.services.extract.service import ExtractService
from vidmeta.services.extract.worker import ExtractWorker


class StubProber:
    def __init__(self, report: Dict[str, Any]):
        self.report = report
        self.calls: List[str] = []

    def probe_full(self, path):
        self.calls.append("full")
        if path.read_bytes() == b"broken":
            raise RuntimeError("ffprobe returned non-zero exit code")
        return self.report

    def probe_duration(self, path):
        self.calls.append("duration")
        return "3725.9"

    def probe_resolution(self, path):
        self.calls.append("resolution")
        return "3840x2160"


@pytest.fixture()
def stub_prober(sample_report):
    return StubProber(sample_report)


@pytest.fixture()
def api_client(stub_prober, tmp_path):
    """
    TestClient whose ExtractService dependency is overridden to use a stub
    prober, so no ffprobe binary is needed.
    """
    app = create_app()

    def _override() -> ExtractService:
        return ExtractService(worker=ExtractWorker(prober=lambda: stub_prober, scratch_root=tmp_path))

    app.dependency_overrides[get_extract_service] = _override
    try:
        with TestClient(app) as client:
            yield client
    finally:
        app.dependency_overrides.clear()
