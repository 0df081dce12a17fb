"""Huffman compression of float32 weight lists into a self-describing binary file."""

from __future__ import annotations

import heapq
import itertools
import struct
from collections import Counter
from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Optional, Union

StrPath = Union[str, PathLike]

_TABLE_SIZE = struct.Struct("<I")
_VALUE = struct.Struct("<f")
_CODE_LEN = struct.Struct("<B")
_BITS_TOTAL = struct.Struct("<Q")
_MAX_CODE_LEN = 255


@dataclass
class HuffmanNode:
    """A node of a Huffman tree; ``value`` is meaningful only on leaves."""

    value: float
    freq: int
    left: Optional["HuffmanNode"] = None
    right: Optional["HuffmanNode"] = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def _to_float32(value: float) -> float:
    return _VALUE.unpack(_VALUE.pack(value))[0]


def build_huffman_tree(frequencies: Mapping[float, int]) -> HuffmanNode:
    """Build a Huffman tree by repeatedly joining the two least frequent nodes."""
    if not frequencies:
        raise ValueError("cannot build a Huffman tree from no values")
    order = itertools.count()
    heap = [(freq, next(order), HuffmanNode(value, freq)) for value, freq in frequencies.items()]
    heapq.heapify(heap)
    while len(heap) > 1:
        _, _, left = heapq.heappop(heap)
        _, _, right = heapq.heappop(heap)
        parent = HuffmanNode(0.0, left.freq + right.freq, left, right)
        heapq.heappush(heap, (parent.freq, next(order), parent))
    return heap[0][2]


def _walk(node: HuffmanNode, code: str) -> Iterator[tuple[float, str]]:
    if node.is_leaf():
        yield node.value, code
        return
    if node.left is not None:
        yield from _walk(node.left, code + "0")
    if node.right is not None:
        yield from _walk(node.right, code + "1")


def generate_codebook(node: Optional[HuffmanNode]) -> dict[float, str]:
    """Map every leaf value to its path of '0' (left) and '1' (right) bits.

    A tree with a single leaf gives that value the empty code.
    """
    if node is None:
        return {}
    return dict(_walk(node, ""))


def format_codebook(codebook: Mapping[float, str]) -> str:
    """Render one ``Value: v -> Code: c`` line per entry."""
    return "\n".join(f"Value: {value:.6f} -> Code: {code}" for value, code in codebook.items())


def _pack_bits(bits: str) -> bytes:
    padded = bits + "0" * (-len(bits) % 8)
    return bytes(int(padded[i : i + 8], 2) for i in range(0, len(padded), 8))


def encode(codebook: Mapping[float, str], data: Iterable[float]) -> bytes:
    """Serialise the codebook and the Huffman-coded data.

    Layout (little-endian): uint32 entry count; per entry a float32 value,
    a uint8 code length and the code as ASCII '0'/'1'; a uint64 bit count;
    the bits packed most significant first, the last byte zero-padded.
    """
    parts = [_TABLE_SIZE.pack(len(codebook))]
    for value, code in codebook.items():
        if len(code) > _MAX_CODE_LEN:
            raise ValueError(f"code for {value} is longer than {_MAX_CODE_LEN} bits")
        parts.append(_VALUE.pack(value))
        parts.append(_CODE_LEN.pack(len(code)))
        parts.append(code.encode("ascii"))
    try:
        bits = "".join(codebook[value] for value in data)
    except KeyError as exc:
        raise KeyError(f"value {exc.args[0]!r} has no code in the codebook") from None
    parts.append(_BITS_TOTAL.pack(len(bits)))
    parts.append(_pack_bits(bits))
    return b"".join(parts)


class _Reader:
    def __init__(self, payload: bytes) -> None:
        self._data = memoryview(payload)
        self._pos = 0

    def take(self, count: int) -> bytes:
        end = self._pos + count
        if end > len(self._data):
            raise ValueError("compressed data is truncated")
        chunk = bytes(self._data[self._pos : end])
        self._pos = end
        return chunk

    def unpack(self, fmt: struct.Struct) -> int | float:
        return fmt.unpack(self.take(fmt.size))[0]


def _read_table(reader: _Reader) -> dict[str, float]:
    table: dict[str, float] = {}
    for _ in range(int(reader.unpack(_TABLE_SIZE))):
        value = float(reader.unpack(_VALUE))
        length = int(reader.unpack(_CODE_LEN))
        table[reader.take(length).decode("ascii")] = value
    return table


def _read_bits(reader: _Reader) -> tuple[int, bytes]:
    bits_total = int(reader.unpack(_BITS_TOTAL))
    return bits_total, reader.take((bits_total + 7) // 8)


def read_bitstream(payload: bytes) -> bytes:
    """Return the packed bitstream bytes of a compressed payload."""
    reader = _Reader(payload)
    _read_table(reader)
    return _read_bits(reader)[1]


def decode(payload: bytes) -> list[float]:
    """Restore the values of a payload produced by :func:`encode`."""
    reader = _Reader(payload)
    table = _read_table(reader)
    bits_total, packed = _read_bits(reader)
    bits = "".join(f"{byte:08b}" for byte in packed)[:bits_total]
    restored: list[float] = []
    current = ""
    for bit in bits:
        current += bit
        if current in table:
            restored.append(table[current])
            current = ""
    return restored


def save_compressed_file(path: StrPath, codebook: Mapping[float, str], data: Iterable[float]) -> None:
    """Write the encoded codebook and data to ``path``."""
    Path(path).write_bytes(encode(codebook, data))


def decompress_file(path: StrPath) -> list[float]:
    """Read and decode a compressed file."""
    return decode(Path(path).read_bytes())


def compress_weights(weights: Sequence[float], path: StrPath) -> dict[float, str]:
    """Huffman-compress ``weights`` (as float32) into ``path`` and return the codebook."""
    if not weights:
        raise ValueError("no weights to compress")
    values = [_to_float32(w) for w in weights]
    codebook = generate_codebook(build_huffman_tree(Counter(values)))
    save_compressed_file(path, codebook, values)
    return codebook


def decompress_weights(path: StrPath) -> list[float]:
    """Restore the weights stored in ``path``."""
    return decompress_file(path)