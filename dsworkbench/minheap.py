"""A binary heap of processes that reports every step it takes."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Process:
    """A named task with an integer priority."""

    priority: int
    name: str

    def __str__(self) -> str:
        return f"({self.name}, {self.priority})"


def _before(a: Process, b: Process) -> bool:
    # The ordering puts the larger priority value nearer the root.
    return a.priority > b.priority


class MinHeap:
    """Array-backed heap of :class:`Process` values.

    The process with the largest priority value sits at the root and is the
    one :meth:`extract_min` returns. Every swap and state change is passed to
    ``log`` as a line of text when a logger is given.
    """

    def __init__(self, log: Optional[Callable[[str], None]] = None) -> None:
        self._items: list[Process] = []
        self._log = log

    def _emit(self, message: str) -> None:
        if self._log is not None:
            self._log(message)

    def _state(self) -> str:
        return "堆的当前状态：" + " ".join(str(p) for p in self._items)

    def _emit_state(self) -> None:
        self._emit(self._state())

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while 2 * index + 1 < size:
            child = 2 * index + 1
            if child + 1 < size and _before(items[child + 1], items[child]):
                child += 1
            if not _before(items[child], items[index]):
                break
            self._emit(f"下沉操作: 交换 {items[index]} 和 {items[child]}")
            items[child], items[index] = items[index], items[child]
            self._emit_state()
            index = child

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not _before(items[index], items[parent]):
                break
            self._emit(f"上浮操作: 交换 {items[index]} 和 {items[parent]}")
            items[index], items[parent] = items[parent], items[index]
            self._emit_state()
            index = parent

    def insert(self, process: Process) -> None:
        """Add a process and restore the heap order."""
        self._items.append(process)
        self._emit(f"插入: {process}")
        self._emit_state()
        self._sift_up(len(self._items) - 1)

    def extract_min(self) -> Process:
        """Remove and return the process at the root."""
        if not self._items:
            raise IndexError("Heap is empty")
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._emit("提取最小值并重新调整堆: " + self._state())
            self._sift_down(0)
        return top

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def heap_sort(self) -> list[Process]:
        """Heapify, then repeatedly swap the root to the back and sift down.

        Each sift covers the whole array. Returns the resulting arrangement.
        """
        items = self._items
        for index in range(len(items) // 2 - 1, -1, -1):
            self._sift_down(index)
        for index in range(len(items) - 1, 0, -1):
            items[0], items[index] = items[index], items[0]
            self._emit(f"交换根节点 {items[index]} 和 {items[0]}")
            self._emit_state()
            self._sift_down(0)
        return self.snapshot()

    def insert_without_heapify(self, process: Process) -> None:
        """Append a process without restoring the heap order."""
        self._items.append(process)
        self._emit(f"已添加任务: {process}")
        self._emit_state()

    def build_heap(self) -> None:
        """Restore the heap order over all stored processes at once."""
        for index in range(len(self._items) // 2 - 1, -1, -1):
            self._sift_down(index)
        self._emit("已完成堆化")
        self._emit_state()

    def snapshot(self) -> list[Process]:
        """Return the stored processes in array order."""
        return list(self._items)