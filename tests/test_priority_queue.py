"""
Unit tests for the sorted-list PriorityQueue.
"""

import random

import pytest

from graphkit.exceptions import EmptyQueueError
from graphkit.structures import PriorityQueue


class Task:
    """Mutable item with a priority, for change() tests."""

    def __init__(self, label: str, cost: float) -> None:
        self.label = label
        self.cost = cost


def by_cost(a: Task, b: Task) -> float:
    return a.cost - b.cost


def drain(queue: PriorityQueue) -> list:
    return [queue.pop() for _ in range(queue.length)]


class TestOrdering:
    """Items come out best-first."""

    def test_default_comparator_example(self):
        """Adding [5,2,3,4,0,7,1] then popping 7 times gives sorted order."""
        queue = PriorityQueue()
        for value in [5, 2, 3, 4, 0, 7, 1]:
            queue.add(value)
        assert [queue.pop() for _ in range(7)] == [0, 1, 2, 3, 4, 5, 7]

    def test_random_sequences_pop_sorted(self):
        """Any sequence of adds drains in ascending order."""
        rng = random.Random(1234)
        for _ in range(50):
            values = [rng.randint(-20, 20) for _ in range(rng.randint(0, 40))]
            queue = PriorityQueue()
            for value in values:
                queue.add(value)
            assert drain(queue) == sorted(values)

    def test_custom_comparator_reverses_order(self):
        """A reversed comparator pops the largest first."""
        queue = PriorityQueue(lambda a, b: b - a)
        for value in [3, 9, 1, 4]:
            queue.add(value)
        assert drain(queue) == [9, 4, 3, 1]

    def test_ties_pop_in_insertion_order(self):
        """Equal-priority items come out first-in, first-out."""
        queue = PriorityQueue(by_cost)
        first = Task("first", 1.0)
        second = Task("second", 1.0)
        cheaper = Task("cheaper", 0.5)
        queue.add(first)
        queue.add(second)
        queue.add(cheaper)
        assert [queue.pop().label for _ in range(3)] == ["cheaper", "first", "second"]

    def test_iteration_is_best_first_and_non_destructive(self):
        """Iterating shows the pop order but leaves the queue intact."""
        queue = PriorityQueue()
        for value in [2, 8, 5]:
            queue.add(value)
        assert list(queue) == [2, 5, 8]
        assert queue.length == 3


class TestLength:
    """The running count tracks adds and pops."""

    def test_length_and_len_agree(self):
        """length property and len() report the same count."""
        queue = PriorityQueue()
        for value in range(4):
            queue.add(value)
        assert queue.length == len(queue) == 4
        queue.pop()
        assert queue.length == len(queue) == 3

    def test_empty_queue_is_falsy(self):
        """An empty queue is falsy, a non-empty one truthy."""
        queue = PriorityQueue()
        assert not queue
        queue.add(1)
        assert queue


class TestEmptyQueue:
    """Empty queue access raises EmptyQueueError."""

    def test_pop_empty_raises(self):
        """pop() on an empty queue raises."""
        with pytest.raises(EmptyQueueError):
            PriorityQueue().pop()

    def test_peek_empty_raises(self):
        """peek() on an empty queue raises."""
        with pytest.raises(EmptyQueueError):
            PriorityQueue().peek()

    def test_pop_after_drain_raises(self):
        """Draining leaves a queue that raises on the next pop."""
        queue = PriorityQueue()
        queue.add(1)
        queue.pop()
        with pytest.raises(EmptyQueueError):
            queue.pop()

    def test_error_is_an_index_error(self):
        """Callers catching IndexError also catch the empty-queue case."""
        with pytest.raises(IndexError):
            PriorityQueue().pop()

    def test_peek_does_not_remove(self):
        """peek() returns the best item and keeps it queued."""
        queue = PriorityQueue()
        queue.add(3)
        queue.add(1)
        assert queue.peek() == 1
        assert queue.length == 2

    def test_best_empty_raises(self):
        """best() on an empty queue raises like peek()."""
        with pytest.raises(EmptyQueueError):
            PriorityQueue().best()

    def test_best_returns_best_item(self):
        """best() returns the top item without removing it."""
        queue = PriorityQueue()
        for value in (5, 2, 8):
            queue.add(value)
        assert queue.best() == 2
        assert queue.length == 3


class TestChange:
    """change() re-ranks an item already queued."""

    def test_change_absent_item_is_noop(self):
        """Changing an item that is not queued leaves the queue untouched."""
        queue = PriorityQueue(by_cost)
        queued = Task("queued", 2.0)
        queue.add(queued)
        assert queue.change(Task("stranger", 1.0)) is False
        assert queue.length == 1
        assert queue.pop() is queued

    def test_change_reflects_decreased_priority(self):
        """Lowering an item's cost moves it to the front."""
        queue = PriorityQueue(by_cost)
        tasks = [Task(label, cost) for label, cost in [("a", 1.0), ("b", 2.0), ("c", 3.0)]]
        for task in tasks:
            queue.add(task)
        tasks[2].cost = 0.5
        assert queue.change(tasks[2]) is True
        assert queue.length == 3
        assert [queue.pop().label for _ in range(3)] == ["c", "a", "b"]

    def test_change_reflects_increased_priority(self):
        """Raising an item's cost moves it to the back."""
        queue = PriorityQueue(by_cost)
        tasks = [Task(label, cost) for label, cost in [("a", 1.0), ("b", 2.0), ("c", 3.0)]]
        for task in tasks:
            queue.add(task)
        tasks[0].cost = 10.0
        queue.change(tasks[0])
        assert [queue.pop().label for _ in range(3)] == ["b", "c", "a"]

    def test_change_unmutated_item_keeps_length(self):
        """Changing without mutating keeps every item queued."""
        queue = PriorityQueue()
        for value in [4, 1, 3]:
            queue.add(value)
        assert queue.change(3) is True
        assert drain(queue) == [1, 3, 4]

    def test_contains(self):
        """Membership finds queued items only."""
        queue = PriorityQueue()
        queue.add(7)
        assert 7 in queue
        assert 8 not in queue
