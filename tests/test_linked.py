import pytest

from algonotes.linked import CircularLinkedList, LinkedQueue


def test_queue_is_first_in_first_out():
    queue = LinkedQueue()
    for value in (4, 8, 15):
        queue.enqueue(value)
    assert [queue.dequeue() for _ in range(3)] == [4, 8, 15]
    assert len(queue) == 0


def test_queue_iterates_front_to_rear():
    queue = LinkedQueue([1, 2, 3])
    queue.dequeue()
    queue.enqueue(9)
    assert list(queue) == [2, 3, 9]
    assert len(queue) == 3


def test_queue_underflow_raises():
    queue = LinkedQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_queue_reusable_after_emptying():
    queue = LinkedQueue([5])
    assert queue.dequeue() == 5
    queue.enqueue(6)
    assert list(queue) == [6]


def test_circular_list_sequence_from_source_driver():
    items = CircularLinkedList()
    for value in (1, 2, 3, 4):
        items.insert_at_tail(value)
    assert list(items) == [1, 2, 3, 4]
    items.insert_at_head(5)
    assert list(items) == [5, 1, 2, 3, 4]
    assert items.delete(5) == 4
    assert list(items) == [5, 1, 2, 3]


def test_delete_at_head_moves_head():
    items = CircularLinkedList([1, 2, 3])
    assert items.delete_at_head() == 1
    assert list(items) == [2, 3]
    items.insert_at_tail(7)
    assert list(items) == [2, 3, 7]


def test_delete_last_then_append_keeps_order():
    items = CircularLinkedList([1, 2, 3])
    items.delete(3)
    items.insert_at_tail(4)
    assert list(items) == [1, 2, 4]


def test_single_element_delete_empties_list():
    items = CircularLinkedList([42])
    assert items.delete_at_head() == 42
    assert list(items) == []
    assert len(items) == 0


@pytest.mark.parametrize("position", [0, 4, -1])
def test_delete_out_of_range_raises(position):
    items = CircularLinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        items.delete(position)


def test_delete_from_empty_raises():
    with pytest.raises(IndexError):
        CircularLinkedList().delete_at_head()