"""
Array-backed binary heap ordered by a caller-supplied comparator.

The comparator follows the classic cmp convention: negative if a sorts
before b, zero if equal, positive otherwise. The root is always the element
that sorts first, so the natural comparator gives a min-heap and the
inverted one a max-heap. Equal elements come out in no particular order.
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from errors import EmptyHeapError

T = TypeVar("T")

Comparator = Callable[[Any, Any], int]


def natural_order(a: Any, b: Any) -> int:
    """cmp-style comparison using the values' own ordering."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


def reverse_order(a: Any, b: Any) -> int:
    return natural_order(b, a)


class BinaryHeap(Generic[T]):
    """
    Priority queue over a complete binary tree stored in a list.

    Children of index i live at 2i+1 and 2i+2; the parent of i is (i-1)//2.
    Every node compares less than or equal to its children.

    Complexity:
        insert / extract_root: O(log n); peek: O(1); heapify: O(n).
    """

    def __init__(
        self,
        comparator: Optional[Comparator] = None,
        key: Optional[Callable[[T], Any]] = None,
    ) -> None:
        if comparator is None:
            comparator = natural_order
        if key is not None:
            base = comparator
            comparator = lambda a, b: base(key(a), key(b))  # noqa: E731
        self._compare: Comparator = comparator
        self._data: List[T] = []

    @classmethod
    def min_heap(cls, key: Optional[Callable[[T], Any]] = None) -> "BinaryHeap[T]":
        return cls(natural_order, key=key)

    @classmethod
    def max_heap(cls, key: Optional[Callable[[T], Any]] = None) -> "BinaryHeap[T]":
        return cls(reverse_order, key=key)

    # --- Core operations ---------------------------------------------------

    def insert(self, value: T) -> None:
        self._data.append(value)
        self._sift_up(len(self._data) - 1)

    def extract_root(self) -> T:
        """
        Remove and return the root.

        The last element is moved to the root and sifted down, so the tree
        stays complete after every extraction.
        """
        if not self._data:
            raise EmptyHeapError("Heap is empty")
        root = self._data[0]
        last = self._data.pop()
        if self._data:
            self._data[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> T:
        if not self._data:
            raise EmptyHeapError("Heap is empty")
        return self._data[0]

    def drain(self) -> Iterator[T]:
        """Yield elements in priority order, emptying the heap as it goes."""
        while self._data:
            yield self.extract_root()

    # --- Queries -----------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._data

    def to_list(self) -> List[T]:
        """Snapshot of the backing array in heap (not sorted) order."""
        return list(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:
        return bool(self._data)

    def __repr__(self) -> str:
        return f"BinaryHeap(size={len(self._data)})"

    # --- Internal helpers --------------------------------------------------

    def _sift_up(self, index: int) -> None:
        data = self._data
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(data[index], data[parent]) >= 0:
                break
            data[index], data[parent] = data[parent], data[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        data = self._data
        size = len(data)
        while True:
            smallest = index
            left = 2 * index + 1
            right = left + 1
            if left < size and self._compare(data[left], data[smallest]) < 0:
                smallest = left
            if right < size and self._compare(data[right], data[smallest]) < 0:
                smallest = right
            if smallest == index:
                return
            data[index], data[smallest] = data[smallest], data[index]
            index = smallest


def heapify(items: Iterable[T], comparator: Optional[Comparator] = None) -> BinaryHeap[T]:
    """
    Build a heap from an arbitrary iterable in linear time.

    Floyd's method: copy the items in, then sift down from the last non-leaf
    to the root. No element is ever sifted up, which is what keeps bulk
    construction at O(n) rather than O(n log n).
    """
    heap: BinaryHeap[T] = BinaryHeap(comparator)
    heap._data = list(items)
    for index in range(len(heap._data) // 2 - 1, -1, -1):
        heap._sift_down(index)
    return heap
