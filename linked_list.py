"""
Singly linked list with head and tail pointers.

Used to hold the vertices of a discovered path: the path builders prepend
while walking predecessor links, so both ends need O(1) insertion.
"""

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class _Node(Generic[T]):
    __slots__ = ("value", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Optional["_Node[T]"] = None


class SinglyLinkedList(Generic[T]):
    """
    Append-only sequence supporting add-to-front, add-to-back, indexed read,
    length and forward iteration.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node[T]] = None
        self._tail: Optional[_Node[T]] = None
        self._size = 0

    def add(self, item: T) -> None:
        """Append item at the end."""
        node = _Node(item)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def add_first(self, item: T) -> None:
        """Insert item at the front."""
        node = _Node(item)
        node.next = self._head
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def get(self, index: int) -> T:
        """
        Return the item at index (0-based), walking from the head.

        Raises IndexError if index is outside [0, len).
        """
        if index < 0 or index >= self._size:
            raise IndexError(f"index {index} out of range for size {self._size}")
        current = self._head
        for _ in range(index):
            current = current.next
        return current.value

    def __getitem__(self, index: int) -> T:
        return self.get(index)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        current = self._head
        while current is not None:
            yield current.value
            current = current.next

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"
