"""SPIR-V word decoding.

A module is read as a stream of 32-bit words.  The byte order is taken from
the leading magic number ``0x07230203``: when the first byte of the file is
``0x07`` the magic is stored big-endian, otherwise the file is treated as
little-endian.  Detection is per file.
"""

from __future__ import annotations

import enum
import warnings
from typing import NamedTuple

import numpy as np

from .errors import FileIOError, InvalidInputError

SPIRV_MAGIC = 0x07230203
WORD_SIZE = 4


class TruncatedModuleWarning(UserWarning):
    """A module's length is not a multiple of 4; trailing bytes were dropped."""


class ByteOrder(enum.Enum):
    LITTLE = "little"
    BIG = "big"

    @property
    def dtype(self) -> np.dtype:
        return np.dtype("<u4" if self is ByteOrder.LITTLE else ">u4")


class DecodedModule(NamedTuple):
    """Words of one input file, in file order."""

    path: str
    words: np.ndarray       # read-only, native uint32
    byte_order: ByteOrder
    dropped: int = 0        # trailing bytes that did not fill a word

    def to_bytes(self) -> bytes:
        """Re-encode the words under the detected byte order."""
        return self.words.astype(self.byte_order.dtype).tobytes()


def detect_byte_order(head: bytes) -> ByteOrder:
    """Return the byte order of a module from its first bytes."""
    if not head:
        raise ValueError("Cannot detect byte order of an empty buffer")
    # 0x07 is the most significant byte of the magic number
    if head[0] == SPIRV_MAGIC >> 24:
        return ByteOrder.BIG
    return ByteOrder.LITTLE


def decode_words(data: bytes, path: str = "<bytes>") -> DecodedModule:
    """Decode *data* into 32-bit words.

    A trailing partial word is dropped and reported with
    :class:`TruncatedModuleWarning`.
    """
    if len(data) < WORD_SIZE:
        raise InvalidInputError(
            f"File {path} is too short to be a SPIR-V module "
            f"({len(data)} bytes)"
        )

    order = detect_byte_order(data[:WORD_SIZE])
    count, dropped = divmod(len(data), WORD_SIZE)
    if dropped:
        warnings.warn(
            f"{path}: length {len(data)} is not a multiple of {WORD_SIZE}, "
            f"dropping {dropped} trailing byte(s)",
            TruncatedModuleWarning,
            stacklevel=2,
        )

    words = np.frombuffer(data, dtype=order.dtype, count=count).astype(np.uint32)
    words.setflags(write=False)
    return DecodedModule(path, words, order, dropped)


def read_module(path: str) -> DecodedModule:
    """Read and decode the module stored at *path*."""
    try:
        with open(path, "rb") as f:
            data = f.read()
    except OSError as exc:
        raise FileIOError("reading file", path, exc) from exc
    return decode_words(data, path)
