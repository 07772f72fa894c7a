"""Pytest configuration to expose the backend package and tile fixtures."""

from __future__ import annotations

import pathlib
import sys

import pytest

BACKEND_ROOT = pathlib.Path(__file__).resolve().parent

if str(BACKEND_ROOT) not in sys.path:
    sys.path.insert(0, str(BACKEND_ROOT))

# 1x1 transparent PNG.
PNG_BYTES = bytes.fromhex(
    "89504e470d0a1a0a0000000d4948445200000001000000010806000000"
    "1f15c4890000000d49444154789c6360000002000001e221bc330000000049454e44ae426082"
)


@pytest.fixture
def service_root(tmp_path: pathlib.Path) -> pathlib.Path:
    """Service root with empty ``tiles`` and ``public`` directories."""
    (tmp_path / "tiles").mkdir()
    (tmp_path / "public").mkdir()
    return tmp_path


@pytest.fixture
def png_bytes() -> bytes:
    """Bytes of a 1x1 transparent PNG tile."""
    return PNG_BYTES
