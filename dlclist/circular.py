"""Doubly linked circular list of integers with a movable current element."""

from __future__ import annotations

from typing import Iterator


class EmptyListError(LookupError):
    """Raised when an operation needs an element but the list is empty."""


class _Node:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: int) -> None:
        self.value = value
        self.next: _Node = self
        self.prev: _Node = self


class CircularList:
    """A circular doubly linked list with a cursor pointing at the current element."""

    def __init__(self, list_id: int = 0) -> None:
        self.id = list_id
        self._current: _Node | None = None
        self._count = 0

    def __repr__(self) -> str:
        return f"CircularList(id={self.id!r}, values={self.values()!r})"

    def _require_current(self) -> _Node:
        if self._current is None:
            raise EmptyListError(f"list {self.id} is empty")
        return self._current

    @property
    def current(self) -> int:
        """Value of the current element."""
        return self._require_current().value

    def insert_after(self, value: int) -> None:
        """Insert a value right after the current element.

        In an empty list the new element becomes current.
        """
        node = _Node(value)
        self._count += 1
        if self._current is None:
            self._current = node
            return
        cur = self._current
        following = cur.next
        cur.next = node
        node.prev = cur
        node.next = following
        following.prev = node

    def insert_before(self, value: int) -> None:
        """Insert a value right before the current element.

        In an empty list the new element becomes current.
        """
        node = _Node(value)
        self._count += 1
        if self._current is None:
            self._current = node
            return
        cur = self._current
        preceding = cur.prev
        node.next = cur
        node.prev = preceding
        preceding.next = node
        cur.prev = node

    def delete_current(self) -> int:
        """Remove the current element and return its value.

        The element after it becomes current.
        """
        node = self._require_current()
        if node.next is node:
            self._current = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            self._current = node.next
        node.next = node.prev = node
        self._count -= 1
        return node.value

    def move_forward(self) -> None:
        """Make the next element current."""
        self._current = self._require_current().next

    def move_backward(self) -> None:
        """Make the previous element current."""
        self._current = self._require_current().prev

    def copy(self) -> CircularList:
        """Return an independent copy with the same order and current element."""
        duplicate = CircularList(self.id)
        for value in self:
            duplicate.insert_before(value)
        return duplicate

    def _walk(self, forward: bool) -> Iterator[int]:
        node = self._current
        for _ in range(self._count):
            assert node is not None
            yield node.value
            node = node.next if forward else node.prev

    def values(self, forward: bool = True) -> list[int]:
        """Values starting at the current element, in the given direction."""
        return list(self._walk(forward))

    def format(self, forward: bool = True) -> str:
        """Human-readable description of the list, current element marked."""
        lines = [f"DLC list | Id : {self.id}", f"Elements count: {self._count}"]
        if self._count:
            values = self.values(forward)
            lines.append(f"value: {values[0]} <- current")
            lines.extend(f"value: {value}" for value in values[1:])
        else:
            lines.append("List is empty...")
        return "\n".join(lines) + "\n\n"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[int]:
        return self._walk(True)