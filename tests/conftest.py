# tests/conftest.py
from __future__ import annotations

import copy

import pytest

from vidmeta.common.settings import get_settings

SAMPLE_REPORT = {
    "streams": [
        {
            "index": 0,
            "codec_name": "h264",
            "codec_long_name": "H.264 / AVC / MPEG-4 AVC / MPEG-4 part 10",
            "profile": "High",
            "codec_type": "video",
            "width": 1920,
            "height": 1080,
            "display_aspect_ratio": "16:9",
            "pix_fmt": "yuv420p",
            "level": 40,
            "color_range": "tv",
            "color_space": "bt709",
            "r_frame_rate": "30000/1001",
            "bit_rate": "4500000",
        },
        {
            "index": 1,
            "codec_name": "aac",
            "codec_long_name": "AAC (Advanced Audio Coding)",
            "codec_type": "audio",
            "sample_rate": "48000",
            "channels": 2,
            "channel_layout": "stereo",
            "bit_rate": "128500",
        },
        {"index": 2, "codec_name": "mov_text", "codec_type": "subtitle"},
        {"index": 3, "codec_name": "h264", "codec_type": "video", "width": 320, "height": 180},
    ],
    "format": {
        "filename": "/tmp/video_1_abc.mp4",
        "format_name": "mov,mp4,m4a,3gp,3g2,mj2",
        "format_long_name": "QuickTime / MOV",
        "duration": "7325.500000",
        "size": "52428800",
        "bit_rate": "4628500",
    },
}


@pytest.fixture(autouse=True)
def _isolated_settings(tmp_path, monkeypatch):
    """Fresh settings per test, scratch files under the test's tmp dir."""
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("SCRATCH_DIR", str(tmp_path / "scratch"))
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def sample_report():
    return copy.deepcopy(SAMPLE_REPORT)
