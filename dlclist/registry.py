"""Fixed-capacity registry of circular lists addressed by id."""

from __future__ import annotations

from typing import Iterator

from dlclist.circular import CircularList


class DuplicateListIdError(ValueError):
    """Raised when a list with the given id is already registered."""


class RegistryFullError(Exception):
    """Raised when every slot of the registry is taken."""


class ListNotFoundError(LookupError):
    """Raised when no list with the given id is registered."""


class ListRegistry:
    """Holds up to ``capacity`` circular lists in numbered slots."""

    def __init__(self, capacity: int = 20) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.capacity = capacity
        self._slots: list[CircularList | None] = [None] * capacity

    def add(self, list_id: int, lst: CircularList | None = None) -> CircularList:
        """Register a list under ``list_id`` in the first free slot.

        A new empty list is created when ``lst`` is not given.
        """
        if any(existing.id == list_id for existing in self):
            raise DuplicateListIdError(f"list id {list_id} already exists")
        try:
            slot = self._slots.index(None)
        except ValueError:
            raise RegistryFullError("list of lists is full") from None
        if lst is None:
            lst = CircularList(list_id)
        else:
            lst.id = list_id
        self._slots[slot] = lst
        return lst

    def _index_of(self, list_id: int) -> int:
        for index, lst in enumerate(self._slots):
            if lst is not None and lst.id == list_id:
                return index
        raise ListNotFoundError(f"no list with id {list_id}")

    def find(self, list_id: int) -> CircularList:
        """Return the list registered under ``list_id``."""
        lst = self._slots[self._index_of(list_id)]
        assert lst is not None
        return lst

    def delete(self, list_id: int) -> None:
        """Remove the list registered under ``list_id``."""
        self._slots[self._index_of(list_id)] = None

    def copy(self, list_id: int, new_id: int) -> CircularList:
        """Register a copy of list ``list_id`` under ``new_id`` and return it."""
        return self.add(new_id, self.find(list_id).copy())

    def format_all(self) -> str:
        """Descriptions of all registered lists in slot order."""
        return "".join(lst.format(True) for lst in self)

    def clear(self) -> None:
        """Remove every list."""
        self._slots = [None] * self.capacity

    def __iter__(self) -> Iterator[CircularList]:
        return (lst for lst in self._slots if lst is not None)

    def __len__(self) -> int:
        return sum(1 for _ in self)