import pytest

from algokit.heap import MinHeap


def drain(heap):
    return [heap.pop_min() for _ in range(len(heap))]


def test_pop_order_is_ascending():
    heap = MinHeap()
    for value in [5, 3, 9, 1, 7, 3]:
        heap.push(value)
    assert drain(heap) == sorted([5, 3, 9, 1, 7, 3])


def test_length_tracks_pushes_and_pops():
    heap = MinHeap()
    heap.push(4)
    heap.push(2)
    assert len(heap) == 2
    assert heap.pop_min() == 2
    assert len(heap) == 1


def test_constructor_heapifies():
    values = [8, -2, 6, 0, 11]
    assert drain(MinHeap(values)) == sorted(values)


def test_pop_from_empty_raises():
    with pytest.raises(IndexError):
        MinHeap().pop_min()


def test_interleaved_operations_return_current_minimum():
    heap = MinHeap([10, 20])
    assert heap.pop_min() == 10
    heap.push(5)
    assert heap.pop_min() == 5
    assert heap.pop_min() == 20
    assert len(heap) == 0