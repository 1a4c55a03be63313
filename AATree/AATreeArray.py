import logging
import numpy as np
from numba import njit
from typing import Any, Iterable, Iterator, MutableSet, Optional, Tuple, TypeVar, Generic



# Arena layout:
#     links[capacity + 1, 4]: [left | right | parent | level]   (int64)
#     values[capacity + 1]  : element stored at the same row     (Python objects)
#
#     Row 0 is the shared sentinel ("bottom"): level 0, every link pointing
#     back at row 0. It stands in for every missing child or parent and is
#     never written to.



LEFT   = 0
RIGHT  = 1
PARENT = 2
LEVEL  = 3
BOTTOM = 0

# Iterator positions
BEFORE_BEGIN = -1
AT           = 0
END          = 1

DEFAULT_CAPACITY = 16

T = TypeVar("T")

logger = logging.getLogger(__name__)



# ---------- Errors ----------
class AATreeError(Exception):
    """Base class for every error raised by the AA-tree set."""


class IteratorRangeError(AATreeError, IndexError):
    """An iterator was dereferenced or stepped outside [begin, end]."""


class InvalidatedIteratorError(AATreeError, RuntimeError):
    """An iterator (or a running iteration) outlived a mutation of its set."""


class CapacityError(AATreeError, MemoryError):
    """The arena is full and may not grow any further."""


class IntegrityError(AATreeError, AssertionError):
    """The tree violates an AA-tree, ordering or bookkeeping invariant."""



# ---------- JIT-Compiled Rebalancing Primitives ----------
@njit(inline="always")
def rotate_right(
    links: np.ndarray,
    v:     np.int64

) -> np.int64:

    """
    Promote the left child of `v` above `v`.

    Re-parents the promoted node, `v` itself and the subtree that changes
    sides, then points the grandparent's child link at the new subtree
    root.

    :param links: Arena of [left, right, parent, level] rows
    :type links: np.ndarray
    :param v: Row of the subtree root to rotate
    :type v: np.int64
    :return: Row of the new subtree root
    :rtype: np.int64
    """

    parent = links[v, PARENT]
    new_v  = links[v, LEFT]

    links[v, LEFT] = links[new_v, RIGHT]
    if links[v, LEFT] != BOTTOM:
        links[links[v, LEFT], PARENT] = v

    links[new_v, RIGHT]  = v
    links[v, PARENT]     = new_v
    links[new_v, PARENT] = parent

    if parent != BOTTOM:
        if links[parent, LEFT] == v:
            links[parent, LEFT] = new_v
        elif links[parent, RIGHT] == v:
            links[parent, RIGHT] = new_v

    return new_v

@njit(inline="always")
def rotate_left(
    links: np.ndarray,
    v:     np.int64

) -> np.int64:

    """
    Mirror of `rotate_right`: promote the right child of `v` above `v`.
    """

    parent = links[v, PARENT]
    new_v  = links[v, RIGHT]

    links[v, RIGHT] = links[new_v, LEFT]
    if links[v, RIGHT] != BOTTOM:
        links[links[v, RIGHT], PARENT] = v

    links[new_v, LEFT]   = v
    links[v, PARENT]     = new_v
    links[new_v, PARENT] = parent

    if parent != BOTTOM:
        if links[parent, LEFT] == v:
            links[parent, LEFT] = new_v
        elif links[parent, RIGHT] == v:
            links[parent, RIGHT] = new_v

    return new_v

@njit(inline="always")
def skew(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Remove a left horizontal link (left child on the same level) by
    rotating right. Returns the root of the repaired subtree.
    """

    if node == BOTTOM:
        return node

    if links[node, LEVEL] == links[links[node, LEFT], LEVEL]:
        return rotate_right(links, node)

    return node

@njit(inline="always")
def split(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Break up two consecutive right horizontal links by rotating left and
    lifting the middle node one level. Returns the root of the repaired
    subtree.
    """

    if node == BOTTOM:
        return node

    level = links[node, LEVEL]
    right = links[node, RIGHT]

    if level == links[right, LEVEL] and level == links[links[right, RIGHT], LEVEL]:
        links[right, LEVEL] += 1
        return rotate_left(links, node)

    return node

@njit
def fix_after_insert(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """Rebalance a node on the way back up from an insertion."""

    node = skew(links, node)
    node = split(links, node)

    return node

@njit
def fix_after_erase(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Rebalance a node on the way back up from an erase.

    If one of the children sits more than one level below `node`, the node
    (and a right child that would now be above it) drops a level. The drop
    can leave left horizontal links at `node`, `node.right` and
    `node.right.right`, and a double right horizontal link at `node` and
    `node.right`, so all five are repaired in that order. Rotations relink
    parents through the back-links, which is why the results for the
    children are not stored.

    Args:
        links (np.ndarray): Arena of [left, right, parent, level] rows.
        node (np.int64): Row whose subtree just lost a node (may be bottom).

    Returns:
        np.int64: Row of the repaired subtree root.
    """

    level = links[node, LEVEL]

    if links[links[node, LEFT], LEVEL] + 1 < level or links[links[node, RIGHT], LEVEL] + 1 < level:
        level -= 1
        links[node, LEVEL] = level

        right = links[node, RIGHT]
        if links[right, LEVEL] > level:
            links[right, LEVEL] = level

        node = skew(links, node)
        skew(links, links[node, RIGHT])
        skew(links, links[links[node, RIGHT], RIGHT])
        node = split(links, node)
        split(links, links[node, RIGHT])

    return node



# ---------- JIT-Compiled Traversal ----------
@njit(inline="always")
def go_left(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Leftmost (minimum) row of the subtree rooted at `node`.
    Returns `node` unchanged when it is bottom.
    """

    result = node
    while links[links[result, LEFT], LEVEL] > 0:
        result = links[result, LEFT]

    return result

@njit(inline="always")
def go_right(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Rightmost (maximum) row of the subtree rooted at `node`.
    Returns `node` unchanged when it is bottom.
    """

    result = node
    while links[links[result, RIGHT], LEVEL] > 0:
        result = links[result, RIGHT]

    return result

@njit
def get_next(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Locates the in-order successor of a node using parent back-links only.

    If the node has a right subtree, the successor is that subtree's
    leftmost node. Otherwise the walk climbs until it leaves a subtree
    through a left-child edge; the parent reached that way is the
    successor.

    Args:
        links (np.ndarray): Arena of [left, right, parent, level] rows.
        node (np.int64): Row of a real node.

    Returns:
        np.int64: Row of the successor, or bottom for the maximum.
    """

    right = links[node, RIGHT]
    if links[right, LEVEL] > 0:
        return go_left(links, right)

    current = node
    while links[current, LEVEL] > 0:
        parent = links[current, PARENT]
        if links[parent, LEFT] == current:
            return parent
        current = parent

    return current

@njit
def get_previous(
    links: np.ndarray,
    node:  np.int64

) -> np.int64:

    """
    Mirror of `get_next`: in-order predecessor, or bottom for the minimum.
    """

    left = links[node, LEFT]
    if links[left, LEVEL] > 0:
        return go_right(links, left)

    current = node
    while links[current, LEVEL] > 0:
        parent = links[current, PARENT]
        if links[parent, RIGHT] == current:
            return parent
        current = parent

    return current

@njit
def find_violation(
    links: np.ndarray,
    root:  np.int64

) -> Tuple[np.int64, np.int64]:

    """
    Walk the whole tree and report the first structural violation.

    Checks, for every reachable node: leaves are on level 1, the left child
    is exactly one level down, the right child is on the same level or one
    down, there are no two right horizontal links in a row, and every
    child's parent link points back at the node. Uses an explicit stack
    sized to the arena, so a cycle is reported instead of looping forever.

    Returns:
        Tuple[np.int64, np.int64]:
            - row of the offending node, or -1 when the tree is sound.
            - number of reachable nodes visited.
    """

    rows  = links.shape[0]
    stack = np.empty(rows + 1, dtype=np.int64)
    top   = 0
    count = 0

    if root != BOTTOM:
        if links[root, PARENT] != BOTTOM:
            return root, count
        stack[0] = root
        top      = 1

    while top > 0:
        top -= 1
        node = stack[top]

        count += 1
        if count >= rows:
            return node, count

        left        = links[node, LEFT]
        right       = links[node, RIGHT]
        level       = links[node, LEVEL]
        left_level  = links[left, LEVEL]
        right_level = links[right, LEVEL]

        if level < 1:
            return node, count
        if left == BOTTOM and right == BOTTOM and level != 1:
            return node, count
        if left_level != level - 1:
            return node, count
        if right_level != level and right_level != level - 1:
            return node, count
        if right_level == level and links[links[right, RIGHT], LEVEL] >= level:
            return node, count

        if left != BOTTOM:
            if links[left, PARENT] != node:
                return left, count
            stack[top] = left
            top += 1

        if right != BOTTOM:
            if links[right, PARENT] != node:
                return right, count
            stack[top] = right
            top += 1

    return -1, count



# ---------- Iterator ----------
class AATreeIterator(Generic[T]):
    """
    Bidirectional position inside an `AATreeSet`.

    A position is a (node, state) pair where the state is one of
    BEFORE_BEGIN, AT or END. The end position is backed by the rightmost
    node and the before-begin position by the leftmost one, so stepping
    back from either boundary lands on a real element without moving.

    Only `begin()`, `end()`, `find()` and `lower_bound()` create iterators,
    and `increment()` / `decrement()` are the only transitions.

    Any insertion that adds an element, any erase that removes one,
    `clear()` and `assign()` invalidate every outstanding iterator of the
    set. Dereferencing or stepping an invalidated iterator raises
    `InvalidatedIteratorError`; comparing it does not.
    """

    __slots__ = ("_tree", "_node", "_position", "_generation")

    def __init__(
        self,
        tree:     "AATreeSet[T]",
        node:     int,
        position: int = AT

    ) -> None:

        if tree._links[node, LEVEL] == 0:
            position = END

        self._tree       = tree
        self._node       = int(node)
        self._position   = position
        self._generation = tree._generation

    def _check_valid(self) -> None:
        if self._generation != self._tree._generation:
            raise InvalidatedIteratorError(
                "iterator used after its set was modified"
            )

    @property
    def value(self) -> T:
        """The element at this position (precondition: not end / before-begin)."""

        self._check_valid()

        if self._position == END:
            raise IteratorRangeError("cannot dereference the end position")
        if self._position == BEFORE_BEGIN:
            raise IteratorRangeError("cannot dereference the before-begin position")

        return self._tree._values[self._node]

    @property
    def is_end(self) -> bool:
        return self._position == END

    @property
    def is_before_begin(self) -> bool:
        return self._position == BEFORE_BEGIN

    def increment(self) -> "AATreeIterator[T]":
        """Step to the next element, or to the end position after the last one."""

        self._check_valid()

        if self._position == END:
            raise IteratorRangeError("cannot advance past the end position")

        if self._position == BEFORE_BEGIN:
            self._position = AT
            return self

        following = get_next(self._tree._links, self._node)
        if following == BOTTOM:
            self._position = END
        else:
            self._node = int(following)

        return self

    def decrement(self) -> "AATreeIterator[T]":
        """Step to the previous element, or to before-begin from the first one."""

        self._check_valid()

        if self._position == BEFORE_BEGIN:
            raise IteratorRangeError("cannot retreat before the before-begin position")

        if self._position == END:
            if self._node == BOTTOM:
                raise IteratorRangeError("cannot retreat from the end of an empty set")
            self._position = AT
            return self

        preceding = get_previous(self._tree._links, self._node)
        if preceding == BOTTOM:
            self._position = BEFORE_BEGIN
        else:
            self._node = int(preceding)

        return self

    def copy(self) -> "AATreeIterator[T]":
        clone = AATreeIterator.__new__(AATreeIterator)

        clone._tree       = self._tree
        clone._node       = self._node
        clone._position   = self._position
        clone._generation = self._generation

        return clone

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AATreeIterator):
            return NotImplemented

        return (
            self._tree is other._tree
            and self._node == other._node
            and self._position == other._position
        )

    def __repr__(self) -> str:
        if self._generation != self._tree._generation:
            return "AATreeIterator(invalidated)"
        if self._position == END:
            return "AATreeIterator(end)"
        if self._position == BEFORE_BEGIN:
            return "AATreeIterator(before-begin)"
        return "AATreeIterator(" + repr(self._tree._values[self._node]) + ")"



# --------- AATreeSet API ---------
class AATreeSet(MutableSet[T]):
    """
    Ordered set backed by an arena-allocated AA tree.

    Nodes are rows of an int64 array [capacity + 1, 4] holding
    (left, right, parent, level); row 0 is the shared bottom sentinel.
    Elements are arbitrary Python objects kept in a parallel list and
    compared with `<` only: two elements are equal when neither is less
    than the other. Structural work (rotations, skew, split, rebalancing,
    stepping) runs in numba-compiled kernels; comparisons run in Python.

    The arena starts with `capacity` node slots, reuses freed slots from a
    free-list and doubles when full. With `max_capacity` set, inserting a
    new element into a full arena raises `CapacityError`.

    Not thread-safe: mutation requires exclusive access.

    Attributes:
        capacity (int): Number of node slots currently allocated.
        level (int): Level of the root node (0 if empty).
    """

    def __init__(
        self,
        iterable:     Optional[Iterable[T]] = None,
        *,
        capacity:     int = DEFAULT_CAPACITY,
        max_capacity: Optional[int] = None

    ) -> None:

        if capacity < 1:
            raise ValueError(
                f"The capacity value must be at least 1, not {capacity}"
            )

        if max_capacity is not None and max_capacity < capacity:
            raise ValueError(
                f"The max_capacity value must be at least capacity ({capacity}), not {max_capacity}"
            )

        self._initial_capacity = capacity
        self._max_capacity     = max_capacity
        self._links            = np.zeros((capacity + 1, 4), dtype=np.int64)
        self._values           = [None] * (capacity + 1)
        self._root             = BOTTOM
        self._count            = 0
        self._free             = 1
        self._free_list        = np.zeros(capacity + 1, dtype=np.int64)
        self._free_list_top    = 0
        self._generation       = 0

        if iterable is not None:
            for value in iterable:
                self.insert(value)

    @classmethod
    def from_range(
        cls,
        first: AATreeIterator[T],
        last:  AATreeIterator[T],
        **kwargs: Any

    ) -> "AATreeSet[T]":

        """
        Build a set from the half-open iterator range [first, last).

        :param first: Position of the first element to copy
        :type first: AATreeIterator
        :param last: Position one past the last element to copy
        :type last: AATreeIterator
        :return: A new set holding every element of the range
        :rtype: AATreeSet
        """

        tree    = cls(**kwargs)
        current = first.copy()

        while current != last:
            tree.insert(current.value)
            current.increment()

        return tree

    # --------- Arena management ---------
    @property
    def capacity(self) -> int:
        return len(self._values) - 1

    def _grow(
        self,
        new_capacity: int

    ) -> None:

        rows     = new_capacity + 1
        old_rows = self._links.shape[0]

        links = np.zeros((rows, 4), dtype=np.int64)
        links[:old_rows] = self._links

        free_list = np.zeros(rows, dtype=np.int64)
        free_list[:old_rows] = self._free_list

        self._links     = links
        self._free_list = free_list
        self._values.extend([None] * (rows - old_rows))

        logger.debug("Grew arena from %d to %d node slots", old_rows - 1, new_capacity)

    def _allocate(
        self,
        value: T

    ) -> int:

        """
        Take a node slot for `value`: a freed one first, then the next unused
        one, growing the arena (which replaces `self._links`) when both run out.
        """

        if self._free_list_top > 0:
            self._free_list_top -= 1
            index = int(self._free_list[self._free_list_top])
        else:
            if self._free >= len(self._values):
                capacity = self.capacity

                if self._max_capacity is None:
                    self._grow(capacity * 2)
                elif capacity < self._max_capacity:
                    self._grow(min(capacity * 2, self._max_capacity))
                else:
                    logger.warning("Arena is full at max_capacity=%d", self._max_capacity)
                    raise CapacityError(
                        f"cannot hold more than {self._max_capacity} elements"
                    )

            index = self._free
            self._free += 1

        self._links[index, LEFT]   = BOTTOM
        self._links[index, RIGHT]  = BOTTOM
        self._links[index, PARENT] = BOTTOM
        self._links[index, LEVEL]  = 1
        self._values[index]        = value

        return index

    def _release(
        self,
        index: int

    ) -> None:

        self._links[index] = 0
        self._values[index] = None

        self._free_list[self._free_list_top] = index
        self._free_list_top += 1

    # --------- Lookup ---------
    def _internal_find(
        self,
        value: T

    ) -> int:

        """
        Binary search from the root.

        Returns the row holding an element equal to `value` if there is
        one, otherwise the row of the smallest element greater than
        `value`, otherwise bottom.
        """

        links   = self._links
        values  = self._values
        current = self._root
        last    = BOTTOM

        while current != BOTTOM:
            stored = values[current]

            if value < stored:
                last    = current
                current = int(links[current, LEFT])
            elif stored < value:
                current = int(links[current, RIGHT])
            else:
                return current

        return last

    def find(
        self,
        value: T

    ) -> AATreeIterator[T]:

        """Iterator at the element equal to `value`, or `end()` if absent."""

        node = self._internal_find(value)

        if node == BOTTOM or value < self._values[node]:
            return self.end()

        return AATreeIterator(self, node)

    def lower_bound(
        self,
        value: T

    ) -> AATreeIterator[T]:

        """Iterator at the first element not less than `value`, or `end()`."""

        node = self._internal_find(value)

        if node == BOTTOM:
            return self.end()

        return AATreeIterator(self, node)

    def begin(self) -> AATreeIterator[T]:
        return AATreeIterator(self, go_left(self._links, self._root))

    def end(self) -> AATreeIterator[T]:
        return AATreeIterator(self, go_right(self._links, self._root), END)

    def __contains__(self, value: object) -> bool:
        node = self._internal_find(value)
        return node != BOTTOM and not (value < self._values[node])

    # --------- Insertion ---------
    def _insert(
        self,
        node:  int,
        value: T

    ) -> Tuple[int, bool]:

        """
        Insert `value` into the subtree rooted at `node`.

        Returns the (possibly new) subtree root and whether a node was
        added. Only a subtree that actually grew is rebalanced. The arena
        may be reallocated at the bottom of the descent, so `self._links`
        is read again after every recursive call.
        """

        if node == BOTTOM:
            return self._allocate(value), True

        stored = self._values[node]

        if value < stored:
            child, inserted = self._insert(int(self._links[node, LEFT]), value)
            if not inserted:
                return node, False
            links = self._links
            links[node, LEFT]    = child
            links[child, PARENT] = node

        elif stored < value:
            child, inserted = self._insert(int(self._links[node, RIGHT]), value)
            if not inserted:
                return node, False
            links = self._links
            links[node, RIGHT]   = child
            links[child, PARENT] = node

        else:
            return node, False

        return int(fix_after_insert(links, node)), True

    def insert(
        self,
        value: T

    ) -> None:

        """Insert `value`; a value already present is left untouched."""

        root, inserted = self._insert(self._root, value)

        self._root = root
        self._links[root, PARENT] = BOTTOM

        if inserted:
            self._count += 1
            self._generation += 1

    def add(self, value: T) -> None:
        self.insert(value)

    # --------- Deletion ---------
    def _erase(
        self,
        node:     int,
        value:    T,
        to_erase: int

    ) -> Tuple[int, bool, int]:

        """
        Erase `value` from the subtree rooted at `node`.

        The descent goes right whenever `value` is not less than the
        current element and remembers that node in `to_erase`; the deepest
        node visited is `last`. If `to_erase` holds `value` once the
        descent bottoms out, `last` carries the neighbouring value: it is
        copied into `to_erase` and `last` is spliced out in favour of its
        only possibly-real child. Every node on the path is rebalanced on
        the way back up.

        Args:
            node (int): Root row of the subtree to search.
            value: Element to erase.
            to_erase (int): Row of the deepest ancestor reached by moving right.

        Returns:
            Tuple[int, bool, int]:
                - the (possibly new) subtree root.
                - whether a node was removed.
                - the deepest row visited (bottom when `node` is bottom).
        """

        if node == BOTTOM:
            return BOTTOM, False, BOTTOM

        links  = self._links
        values = self._values

        if value < values[node]:
            child, erased, last = self._erase(int(links[node, LEFT]), value, to_erase)
            links[node, LEFT] = child
            if child != BOTTOM:
                links[child, PARENT] = node

        else:
            to_erase = node
            child, erased, last = self._erase(int(links[node, RIGHT]), value, to_erase)
            links[node, RIGHT] = child
            if child != BOTTOM:
                links[child, PARENT] = node

        if last == BOTTOM:
            last = node

            if (
                to_erase != BOTTOM
                and not (values[to_erase] < value)
                and not (value < values[to_erase])
            ):
                if node == to_erase:
                    replacement = int(links[node, LEFT])
                else:
                    replacement = int(links[node, RIGHT])

                values[to_erase] = values[node]
                self._release(node)

                node   = replacement
                erased = True

        return int(fix_after_erase(links, node)), erased, last

    def erase(
        self,
        value: T

    ) -> None:

        """Erase `value`; a value that is not present is ignored."""

        root, erased, _ = self._erase(self._root, value, BOTTOM)

        self._root = root
        if root != BOTTOM:
            self._links[root, PARENT] = BOTTOM

        if erased:
            self._count -= 1
            self._generation += 1

    def discard(self, value: T) -> None:
        self.erase(value)

    # --------- Whole-set operations ---------
    def clear(self) -> None:
        """Drop every element and every node slot's contents."""

        dropped = self._count

        self._links.fill(0)
        self._values        = [None] * len(self._values)
        self._root          = BOTTOM
        self._count         = 0
        self._free          = 1
        self._free_list_top = 0
        self._generation   += 1

        logger.debug("Cleared %d elements", dropped)

    def assign(
        self,
        other: Iterable[T]

    ) -> "AATreeSet[T]":

        """Replace the contents with the elements of `other`, in its iteration order."""

        if other is self:
            return self

        # `other` may be derived from this set, so read it before clearing
        values = list(other)

        self.clear()
        for value in values:
            self.insert(value)

        return self

    def copy(self) -> "AATreeSet[T]":
        """Independent set rebuilt by inserting this set's elements in order."""

        return type(self)(
            self,
            capacity=max(self._initial_capacity, self._count),
            max_capacity=self._max_capacity
        )

    __copy__ = copy

    # --------- Size & iteration ---------
    def size(self) -> int:
        return self._count

    def empty(self) -> bool:
        return self._count == 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count > 0

    def __iter__(self) -> Iterator[T]:
        generation = self._generation
        node       = go_left(self._links, self._root)

        while node != BOTTOM:
            yield self._values[node]

            if generation != self._generation:
                raise InvalidatedIteratorError("AATreeSet changed during iteration")

            node = get_next(self._links, node)

    def __reversed__(self) -> Iterator[T]:
        generation = self._generation
        node       = go_right(self._links, self._root)

        while node != BOTTOM:
            yield self._values[node]

            if generation != self._generation:
                raise InvalidatedIteratorError("AATreeSet changed during iteration")

            node = get_previous(self._links, node)

    # --------- Introspection ---------
    @property
    def level(self) -> int:
        return int(self._links[self._root, LEVEL])

    @property
    def root_info(self) -> Tuple[Any, int, int, int]:
        """(value, left, right, level) of the root row."""

        root = self._root
        return (
            self._values[root],
            int(self._links[root, LEFT]),
            int(self._links[root, RIGHT]),
            int(self._links[root, LEVEL]),
        )

    def verify_integrity(self) -> None:
        """
        Full-tree check of every invariant the set relies on.

        Intended for tests and debugging: it visits every node. Raises
        `IntegrityError` on the first violation found.
        """

        node, reachable = find_violation(self._links, self._root)

        if node >= 0:
            raise IntegrityError(
                f"AA-tree invariant violated at node {node} "
                f"(level {int(self._links[node, LEVEL])})"
            )

        if reachable != self._count:
            raise IntegrityError(
                f"{reachable} nodes reachable from the root, but size() is {self._count}"
            )

        previous = None
        for index, value in enumerate(self):
            if index > 0 and not (previous < value):
                raise IntegrityError(
                    f"in-order traversal is not strictly increasing at {value!r}"
                )
            previous = value

    def __repr__(self) -> str:
        return "AATreeSet(" + repr(list(self)) + ")"

    def __str__(self) -> str:
        return (
            "AATreeSet(size=" + str(self._count)
            + ", root=" + str(self._root)
            + ", level=" + str(self.level) + ")"
        )



# --------- Utils ---------
def warmup(capacity: int = DEFAULT_CAPACITY) -> bool:
    """
    Triggers JIT compilation of every kernel on a throwaway set.
    """

    tree = AATreeSet(capacity=capacity)
    for x in (30, 20, 10, 40, 50, 25):
        tree.insert(x)

    tree.find(20)
    tree.lower_bound(26)
    list(reversed(tree))

    tree.erase(10)
    tree.verify_integrity()

    logger.debug("AA-tree kernels compiled")

    return True
