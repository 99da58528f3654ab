"""
Test suite for PriorityQueue.

Tests cover:
- Ordering by priority
- Insertion-order tie-breaking
- Membership
- Priority updates (decrease and increase)
- Empty-queue errors
- Read-only iteration
"""

import pytest

from tick_navgraph import EmptyQueueError, PriorityQueue


class TestPriorityQueueOrdering:
    """Test dequeue order."""

    def test_dequeues_lowest_priority_first(self):
        q = PriorityQueue()
        q.enqueue("c", 3.0)
        q.enqueue("a", 1.0)
        q.enqueue("b", 2.0)

        assert [q.dequeue(), q.dequeue(), q.dequeue()] == ["a", "b", "c"]

    def test_equal_priorities_are_fifo(self):
        q = PriorityQueue()
        for item in ["first", "second", "third"]:
            q.enqueue(item, 1.0)

        assert q.dequeue() == "first"
        assert q.dequeue() == "second"
        assert q.dequeue() == "third"

    def test_tuple_priorities_compare_lexicographically(self):
        q = PriorityQueue()
        q.enqueue("far", (5.0, 4.0))
        q.enqueue("near", (5.0, 1.0))
        q.enqueue("best", (4.0, 9.0))

        assert q.dequeue() == "best"
        assert q.dequeue() == "near"
        assert q.dequeue() == "far"

    def test_len_tracks_items(self):
        q = PriorityQueue()
        assert len(q) == 0
        assert not q
        q.enqueue((0, 0), 1.0)
        q.enqueue((0, 1), 2.0)
        assert len(q) == 2
        assert q
        q.dequeue()
        assert len(q) == 1


class TestPriorityQueueMembership:
    def test_contains_after_enqueue(self):
        q = PriorityQueue()
        q.enqueue((1, 2), 0.5)

        assert (1, 2) in q
        assert q.contains((1, 2))
        assert (2, 1) not in q

    def test_not_contained_after_dequeue(self):
        q = PriorityQueue()
        q.enqueue("x", 1.0)
        q.dequeue()

        assert "x" not in q

    def test_re_enqueue_replaces_entry(self):
        q = PriorityQueue()
        q.enqueue("x", 5.0)
        q.enqueue("x", 1.0)

        assert len(q) == 1
        assert q.priority_of("x") == 1.0


class TestPriorityQueueUpdate:
    def test_decrease_moves_item_forward(self):
        q = PriorityQueue()
        q.enqueue("a", 1.0)
        q.enqueue("b", 5.0)
        q.enqueue_or_update("b", 0.5)

        assert q.dequeue() == "b"
        assert q.dequeue() == "a"
        assert len(q) == 0

    def test_increase_moves_item_back(self):
        q = PriorityQueue()
        q.enqueue("a", 1.0)
        q.enqueue("b", 2.0)
        q.enqueue_or_update("a", 3.0)

        assert q.dequeue() == "b"
        assert q.dequeue() == "a"

    def test_update_absent_inserts(self):
        q = PriorityQueue()
        q.enqueue_or_update("new", 2.0)

        assert "new" in q
        assert q.priority_of("new") == 2.0

    def test_update_keeps_size(self):
        q = PriorityQueue()
        q.enqueue("a", 4.0)
        q.enqueue("b", 4.0)
        q.enqueue_or_update("a", 1.0)
        q.enqueue_or_update("a", 0.5)

        assert len(q) == 2
        assert q.dequeue() == "a"
        assert q.dequeue() == "b"
        with pytest.raises(EmptyQueueError):
            q.dequeue()

    def test_same_priority_update_keeps_position(self):
        q = PriorityQueue()
        q.enqueue("a", 1.0)
        q.enqueue("b", 1.0)
        q.enqueue_or_update("a", 1.0)

        assert q.dequeue() == "a"

    def test_priority_of_missing_raises(self):
        q = PriorityQueue()
        with pytest.raises(KeyError):
            q.priority_of("missing")


class TestPriorityQueueEmpty:
    def test_dequeue_empty_raises(self):
        q = PriorityQueue()
        with pytest.raises(EmptyQueueError):
            q.dequeue()

    def test_empty_error_is_index_error(self):
        q = PriorityQueue()
        with pytest.raises(IndexError):
            q.dequeue()

    def test_peek_empty_raises(self):
        q = PriorityQueue()
        with pytest.raises(EmptyQueueError):
            q.peek()

    def test_clear(self):
        q = PriorityQueue()
        q.enqueue("a", 1.0)
        q.enqueue("b", 2.0)
        q.clear()

        assert len(q) == 0
        assert "a" not in q


class TestPriorityQueueIteration:
    def test_iterates_in_priority_order(self):
        q = PriorityQueue()
        q.enqueue("c", 3.0)
        q.enqueue("a", 1.0)
        q.enqueue("b", 2.0)
        q.enqueue_or_update("c", 0.0)

        assert list(q) == ["c", "a", "b"]

    def test_iteration_does_not_consume(self):
        q = PriorityQueue()
        q.enqueue("a", 1.0)
        q.enqueue("b", 2.0)

        list(q)
        list(q)

        assert len(q) == 2
        assert q.dequeue() == "a"

    def test_peek_does_not_remove(self):
        q = PriorityQueue()
        q.enqueue("a", 2.0)
        q.enqueue("b", 1.0)
        q.enqueue_or_update("b", 3.0)

        assert q.peek() == "a"
        assert len(q) == 2
