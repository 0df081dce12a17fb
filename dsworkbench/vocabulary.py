"""A word vocabulary that assigns ids in order of first appearance."""

from __future__ import annotations

import re
from os import PathLike
from pathlib import Path
from typing import Union

from dsworkbench.hashtable import HashTable

StrPath = Union[str, PathLike]

_WORD = re.compile(r"\b\w+\b", re.ASCII)
UNKNOWN_ID = -1


def tokenize(text: str) -> list[str]:
    """Split text into lower-cased ASCII word tokens."""
    return [match.group().lower() for match in _WORD.finditer(text)]


class Vocabulary:
    """Assigns consecutive ids from 0 to words as they are first seen."""

    def __init__(self) -> None:
        self._table = HashTable()
        self._next_id = 0

    def add_text(self, text: str) -> None:
        """Add every new word of ``text`` to the vocabulary."""
        for word in tokenize(text):
            if word not in self._table:
                self._table.insert(word, self._next_id)
                self._next_id += 1

    def build_from_corpus(self, path: StrPath) -> None:
        """Add the words of a text file, line by line."""
        with open(path, encoding="utf-8") as corpus:
            for line in corpus:
                self.add_text(line)

    def encode_sentence(self, sentence: str) -> list[int]:
        """Return the id of each word, with -1 for words not in the vocabulary."""
        return [self._table.get(word, UNKNOWN_ID) for word in tokenize(sentence)]

    def save_vocab(self, path: StrPath) -> None:
        """Write the vocabulary size as a small YAML document."""
        Path(path).write_text(f"%YAML:1.0\n---\nvocab_size: {self._next_id}\n", encoding="utf-8")

    def entries(self) -> list[tuple[str, int]]:
        """Return ``(word, id)`` pairs in table order."""
        return list(self._table)

    def __len__(self) -> int:
        return self._next_id