"""Shared test configuration, pytest markers and fixtures."""

import io

import pytest
from PIL import Image


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: needs external binaries such as tesseract"
    )


@pytest.fixture
def make_png():
    """Build an in-memory PNG of the requested size."""

    def _make(width: int, height: int) -> bytes:
        buf = io.BytesIO()
        Image.new("RGB", (width, height), color="white").save(buf, format="PNG")
        return buf.getvalue()

    return _make


@pytest.fixture(scope="session")
def huge_png() -> bytes:
    """A small file whose declared size is past Pillow's decompression bomb limit."""
    buf = io.BytesIO()
    Image.new("1", (20000, 20000)).save(buf, format="PNG")
    return buf.getvalue()
