import pytest

from dsworkbench.minheap import MinHeap, Process


def _is_heap(items):
    return all(
        items[(i - 1) // 2].priority >= items[i].priority for i in range(1, len(items))
    )


def _drain(heap):
    out = []
    while not heap.is_empty():
        out.append(heap.extract_min())
    return out


def test_extract_from_empty_raises():
    with pytest.raises(IndexError, match="Heap is empty"):
        MinHeap().extract_min()


def test_insert_keeps_heap_order_and_size():
    heap = MinHeap()
    for priority, name in [(1, "a"), (5, "b"), (3, "c"), (4, "d"), (2, "e")]:
        heap.insert(Process(priority, name))
    assert len(heap) == 5
    assert _is_heap(heap.snapshot())


def test_extract_order_is_by_descending_priority_value():
    heap = MinHeap()
    for priority, name in [(1, "a"), (5, "b"), (3, "c")]:
        heap.insert(Process(priority, name))
    assert [p.name for p in _drain(heap)] == ["b", "c", "a"]
    assert heap.is_empty()


def test_build_heap_matches_incremental_insert_order():
    data = [(7, "g"), (2, "b"), (9, "i"), (4, "d"), (6, "f"), (1, "a")]
    bulk = MinHeap()
    for priority, name in data:
        bulk.insert_without_heapify(Process(priority, name))
    bulk.build_heap()
    assert _is_heap(bulk.snapshot())
    priorities = [p.priority for p in _drain(bulk)]
    assert priorities == sorted((p for p, _ in data), reverse=True)


def test_insert_without_heapify_keeps_arrival_order():
    heap = MinHeap()
    heap.insert_without_heapify(Process(1, "x"))
    heap.insert_without_heapify(Process(9, "y"))
    assert heap.snapshot() == [Process(1, "x"), Process(9, "y")]


def test_log_receives_insert_message_first():
    messages = []
    heap = MinHeap(log=messages.append)
    heap.insert(Process(1, "a"))
    assert messages[0] == "插入: (a, 1)"
    assert messages[1].startswith("堆的当前状态：")


def test_log_reports_sift_up_swap():
    messages = []
    heap = MinHeap(log=messages.append)
    heap.insert(Process(1, "a"))
    heap.insert(Process(5, "b"))
    assert any(m.startswith("上浮操作") for m in messages)
    assert heap.snapshot()[0] == Process(5, "b")


def test_build_heap_logs_completion():
    messages = []
    heap = MinHeap(log=messages.append)
    heap.insert_without_heapify(Process(3, "c"))
    heap.build_heap()
    assert "已完成堆化" in messages


def test_heap_sort_preserves_contents():
    messages = []
    heap = MinHeap(log=messages.append)
    data = [Process(p, n) for p, n in [(4, "d"), (1, "a"), (3, "c"), (2, "b")]]
    for process in data:
        heap.insert_without_heapify(process)
    result = heap.heap_sort()
    assert sorted(result, key=lambda p: p.priority) == sorted(data, key=lambda p: p.priority)
    assert result == heap.snapshot()
    assert any(m.startswith("交换根节点") for m in messages)


def test_process_str():
    assert str(Process(2, "job")) == "(job, 2)"