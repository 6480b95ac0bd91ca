"""
Pytest configuration and fixtures.
"""

import os
import struct
import zlib

import pytest
from PIL import Image


@pytest.fixture
def make_image(tmp_path):
    """Factory writing a solid-colour image of the given size and returning its path."""
    def _make(name="page.png", size=(200, 100), color=(200, 30, 30)):
        path = tmp_path / name
        Image.new('RGB', size, color).save(path)
        return path
    return _make


@pytest.fixture
def sample_images(make_image):
    """Five landscape images, which pad to an 8-page booklet."""
    return [make_image(f"page{i:02d}.png", size=(200, 100)) for i in range(1, 6)]


@pytest.fixture
def sample_items():
    """Letters standing in for opaque page contents."""
    return ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H']


@pytest.fixture
def truncated_png(tmp_path):
    """A PNG with an intact header whose pixel data is cut off halfway."""
    path = tmp_path / "truncated.png"
    Image.frombytes('RGB', (64, 64), os.urandom(64 * 64 * 3)).save(path)
    data = path.read_bytes()
    path.write_bytes(data[:len(data) // 2])
    return path


def _png_chunk(kind, payload):
    return (struct.pack('>I', len(payload)) + kind + payload
            + struct.pack('>I', zlib.crc32(kind + payload) & 0xFFFFFFFF))


@pytest.fixture
def oversized_png(tmp_path):
    """A PNG header declaring 30000x30000 pixels, beyond Pillow's safety limit."""
    path = tmp_path / "oversized.png"
    header = struct.pack('>IIBBBBB', 30000, 30000, 8, 2, 0, 0, 0)
    path.write_bytes(
        b'\x89PNG\r\n\x1a\n'
        + _png_chunk(b'IHDR', header)
        + _png_chunk(b'IDAT', zlib.compress(b''))
        + _png_chunk(b'IEND', b'')
    )
    return path
