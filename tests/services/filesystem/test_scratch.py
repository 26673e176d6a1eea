import re

import pytest

from vidmeta.common.settings import get_settings
from vidmeta.services.filesystem.scratch import scratch_file, scratch_name


def test_scratch_name_shape():
    n = scratch_name(".mkv")
    assert re.fullmatch(r"video_\d+_[0-9a-f]{8}\.mkv", n)
    assert scratch_name() != scratch_name()


def test_scratch_file_written_then_removed(tmp_path):
    with scratch_file(b"payload", ".mov", root=tmp_path) as p:
        assert p.parent == tmp_path
        assert p.suffix == ".mov"
        assert p.read_bytes() == b"payload"
    assert not p.exists()


def test_scratch_file_removed_when_body_raises(tmp_path):
    seen = []
    with pytest.raises(RuntimeError, match="probe failed"):
        with scratch_file(b"x", root=tmp_path) as p:
            seen.append(p)
            raise RuntimeError("probe failed")
    assert seen and not seen[0].exists()
    assert list(tmp_path.iterdir()) == []


def test_scratch_file_defaults_to_configured_dir():
    with scratch_file(b"x") as p:
        assert p.parent == get_settings().scratch_dir
        assert p.exists()
    assert not p.exists()


def test_scratch_file_tolerates_body_deleting_it(tmp_path):
    with scratch_file(b"x", root=tmp_path) as p:
        p.unlink()
    assert not p.exists()
