"""Shared pytest fixtures and helpers for spvbin tests."""

import importlib.util
import struct

import pytest

MAGIC = 0x07230203


# ---------------------------------------------------------------------------
#  Helpers
# ---------------------------------------------------------------------------

def spv_bytes(words, byteorder="<"):
    """Pack *words* as a SPIR-V byte stream (``<`` little, ``>`` big)."""
    return struct.pack(f"{byteorder}{len(words)}I", *words)


def write_spv(path, words=(MAGIC, 0x00010000), byteorder="<"):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(spv_bytes(list(words), byteorder))
    return path


def load_generated(path, name="generated_spv"):
    """Import a generated Python module from *path*."""
    spec = importlib.util.spec_from_file_location(name, path)
    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    return mod


# ---------------------------------------------------------------------------
#  Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def shader_dir(tmp_path):
    """A directory holding two shaders, a non-shader and a nested directory."""
    d = tmp_path / "shaders"
    write_spv(d / "basic.vert.spv", [MAGIC, 0x00010000, 1, 2])
    write_spv(d / "basic.frag.spv", [MAGIC, 0x00010300, 3], byteorder=">")
    (d / "notes.txt").write_text("not a shader")
    write_spv(d / "nested" / "deep.spv")
    return d
