"""Persistent binary search tree with path copying and no rebalancing"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generator, Iterable, List, Optional, Tuple, Type, override

from twig.common import Box, Impossible, Iterating, Ordering, Sized, compare

__all__ = ["PTree", "PTreeBranch", "PTreeEmpty", "PTreeLeaf"]


# sealed
class PTree[T](Sized, Iterating[T]):
    """An immutable binary search tree.

    Values smaller than a node go left; values equal or greater go right, so
    duplicates are kept. Every update rebuilds only the nodes on the path it
    walks and shares the rest with the previous version.

    A childless node is always a ``PTreeLeaf``; no operation returns a
    ``PTreeBranch`` whose children are both empty. Equality is structural.
    """

    @staticmethod
    def empty(_ty: Optional[Type[T]] = None) -> PTree[T]:
        """Create an empty tree.

        Args:
            _ty: Optional type hint (unused).

        Returns:
            The shared empty tree instance.
        """
        return _PTREE_EMPTY

    @staticmethod
    def new() -> PTree[Any]:
        """Alias for ``empty()``."""
        return _PTREE_EMPTY

    @staticmethod
    def singleton(value: T) -> PTree[T]:
        """Create a tree holding a single value.

        Args:
            value: The only value in the tree.

        Returns:
            A leaf holding the value.
        """
        return PTreeLeaf(value)

    @staticmethod
    def mk(values: Iterable[T]) -> PTree[T]:
        """Create a tree by inserting values in iteration order.

        The shape depends on the order: sorted input yields a chain.

        Args:
            values: Iterable of values to insert.

        Returns:
            A tree containing every given value, duplicates included.
        """
        box: Box[PTree[T]] = Box(PTree.empty())
        for value in values:
            box.value = box.value.insert(value)
        return box.value

    @override
    def null(self) -> bool:
        match self:
            case PTreeEmpty():
                return True
            case PTreeLeaf() | PTreeBranch():
                return False
            case _:
                raise Impossible

    @override
    def size(self) -> int:
        """Count the values in the tree.

        Time Complexity: O(n), sizes are not cached on nodes.
        """
        return _ptree_size(self)

    def depth(self) -> int:
        """Number of nodes on the longest path from the root to a leaf."""
        return _ptree_depth(self)

    @override
    def iter(self) -> Generator[T]:
        """Yield values in order (non-decreasing)."""
        match self:
            case PTreeEmpty():
                return
            case PTreeLeaf(value):
                yield value
            case PTreeBranch(value, left, right):
                yield from left.iter()
                yield value
                yield from right.iter()

    def pre_order(self) -> Generator[T]:
        """Yield each node's value before the values of its children."""
        match self:
            case PTreeEmpty():
                return
            case PTreeLeaf(value):
                yield value
            case PTreeBranch(value, left, right):
                yield value
                yield from left.pre_order()
                yield from right.pre_order()

    def post_order(self) -> Generator[T]:
        """Yield each node's value after the values of its children."""
        match self:
            case PTreeEmpty():
                return
            case PTreeLeaf(value):
                yield value
            case PTreeBranch(value, left, right):
                yield from left.post_order()
                yield from right.post_order()
                yield value

    def insert(self, value: T) -> PTree[T]:
        """Insert a value into the tree.

        Values comparing equal to an existing node are placed in its right
        subtree; nothing is replaced or deduplicated.

        Time Complexity: O(depth)
        Space Complexity: O(depth) for path copying

        Args:
            value: The value to insert.

        Returns:
            A new tree containing the inserted value.
        """
        return _ptree_insert(self, value)

    def get(self, key: T) -> Optional[T]:
        """Look up the stored value equal to a key.

        Time Complexity: O(depth)

        Args:
            key: The value to search for.

        Returns:
            The first stored value comparing equal to ``key`` on the search
            path, or None if there is none.
        """
        return _ptree_get(self, key)

    def contains(self, key: T) -> bool:
        """Check if a value equal to the key is present.

        Args:
            key: The value to search for.

        Returns:
            True if the value is in the tree, False otherwise.
        """
        return _ptree_contains(self, key)

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def min(self) -> Optional[T]:
        """Return the leftmost value, or None if the tree is empty."""
        return _ptree_min(self)

    def max(self) -> Optional[T]:
        """Return the rightmost value, or None if the tree is empty."""
        return _ptree_max(self)

    def find_min(self) -> Optional[Tuple[T, PTree[T]]]:
        """Find the minimum value and remove it.

        Time Complexity: O(depth)
        Space Complexity: O(depth) for path copying

        Returns:
            None if the tree is empty, otherwise a tuple containing:
            - The minimum value
            - A new tree with the leftmost node removed
        """
        return _ptree_find_min(self)

    def delete_min(self) -> Optional[PTree[T]]:
        """Remove the minimum value.

        Returns:
            None if the tree is empty, otherwise a new tree with the
            leftmost node removed.
        """
        result = self.find_min()
        return None if result is None else result[1]

    def find_max(self) -> Optional[Tuple[PTree[T], T]]:
        """Find the maximum value and remove it.

        Time Complexity: O(depth)
        Space Complexity: O(depth) for path copying

        Returns:
            None if the tree is empty, otherwise a tuple containing:
            - A new tree with the rightmost node removed
            - The maximum value
        """
        return _ptree_find_max(self)

    def delete_max(self) -> Optional[PTree[T]]:
        """Remove the maximum value.

        Returns:
            None if the tree is empty, otherwise a new tree with the
            rightmost node removed.
        """
        result = self.find_max()
        return None if result is None else result[0]

    def delete(self, key: T) -> PTree[T]:
        """Remove one node whose value equals the key.

        If the key occurs more than once, the node met first on the search
        path is removed. A node with two children is replaced by its in-order
        successor. Deleting an absent key returns this same tree.

        Time Complexity: O(depth)
        Space Complexity: O(depth) for path copying

        Args:
            key: The value to remove.

        Returns:
            A new tree without the removed node.
        """
        return _ptree_delete(self, key)

    def valid(self) -> bool:
        """Check the ordering invariant and that childless nodes are leaves."""
        return _ptree_valid(self, None, None)

    def render(self) -> str:
        """Render the variant shape on one line.

        Example:
            >>> PTree.mk([10, 5, 3]).render()
            'Branch(10, Branch(5, Leaf(3), Empty), Empty)'
        """
        return _ptree_render(self)

    def pretty(self, indent: int = 2) -> str:
        """Render the tree as an indented diagram, one node per line.

        Args:
            indent: Spaces added per level of depth.

        Returns:
            The diagram, children prefixed with ``L:`` and ``R:``.
        """
        lines: List[str] = []
        _ptree_pretty(self, indent, 0, "", lines)
        return "\n".join(lines)

    def __repr__(self) -> str:
        return self.render()

    def __rshift__(self, value: T) -> PTree[T]:
        """Insert using the >> operator (value on right)."""
        return self.insert(value)

    def __rlshift__(self, value: T) -> PTree[T]:
        """Insert using the << operator (value on left)."""
        return self.insert(value)


@dataclass(frozen=True, repr=False)
class PTreeEmpty[T](PTree[T]):
    pass


_PTREE_EMPTY: PTree[Any] = PTreeEmpty()


@dataclass(frozen=True, repr=False)
class PTreeLeaf[T](PTree[T]):
    _value: T


@dataclass(frozen=True, repr=False)
class PTreeBranch[T](PTree[T]):
    _value: T
    _left: PTree[T]
    _right: PTree[T]


def _ptree_insert[T](tree: PTree[T], value: T) -> PTree[T]:
    match tree:
        case PTreeEmpty():
            return PTreeLeaf(value)
        case PTreeLeaf(existing):
            if compare(value, existing) == Ordering.Lt:
                return PTreeBranch(existing, PTreeLeaf(value), _PTREE_EMPTY)
            else:
                return PTreeBranch(existing, _PTREE_EMPTY, PTreeLeaf(value))
        case PTreeBranch(existing, left, right):
            if compare(value, existing) == Ordering.Lt:
                return PTreeBranch(existing, _ptree_insert(left, value), right)
            else:
                return PTreeBranch(existing, left, _ptree_insert(right, value))
        case _:
            raise Impossible


def _ptree_get[T](tree: PTree[T], key: T) -> Optional[T]:
    match tree:
        case PTreeEmpty():
            return None
        case PTreeLeaf(value):
            return value if compare(key, value) == Ordering.Eq else None
        case PTreeBranch(value, left, right):
            cmp = compare(key, value)
            if cmp == Ordering.Eq:
                return value
            elif cmp == Ordering.Lt:
                return _ptree_get(left, key)
            else:
                return _ptree_get(right, key)
        case _:
            raise Impossible


def _ptree_contains[T](tree: PTree[T], key: T) -> bool:
    match tree:
        case PTreeEmpty():
            return False
        case PTreeLeaf(value):
            return compare(key, value) == Ordering.Eq
        case PTreeBranch(value, left, right):
            cmp = compare(key, value)
            if cmp == Ordering.Eq:
                return True
            elif cmp == Ordering.Lt:
                return _ptree_contains(left, key)
            else:
                return _ptree_contains(right, key)
        case _:
            raise Impossible


def _ptree_min[T](tree: PTree[T]) -> Optional[T]:
    match tree:
        case PTreeEmpty():
            return None
        case PTreeLeaf(value):
            return value
        case PTreeBranch(value, left, _):
            return value if left.null() else _ptree_min(left)
        case _:
            raise Impossible


def _ptree_max[T](tree: PTree[T]) -> Optional[T]:
    match tree:
        case PTreeEmpty():
            return None
        case PTreeLeaf(value):
            return value
        case PTreeBranch(value, _, right):
            return value if right.null() else _ptree_max(right)
        case _:
            raise Impossible


def _ptree_find_min[T](tree: PTree[T]) -> Optional[Tuple[T, PTree[T]]]:
    match tree:
        case PTreeEmpty():
            return None
        case PTreeLeaf(value):
            return (value, _PTREE_EMPTY)
        case PTreeBranch(value, left, right):
            if left.null():
                # This node holds the minimum
                return (value, right)
            else:
                min_result = _ptree_find_min(left)
                if min_result is None:
                    raise Impossible
                min_value, new_left = min_result
                new_tree = _ptree_downgrade(PTreeBranch(value, new_left, right))
                return (min_value, new_tree)
        case _:
            raise Impossible


def _ptree_find_max[T](tree: PTree[T]) -> Optional[Tuple[PTree[T], T]]:
    match tree:
        case PTreeEmpty():
            return None
        case PTreeLeaf(value):
            return (_PTREE_EMPTY, value)
        case PTreeBranch(value, left, right):
            if right.null():
                # This node holds the maximum
                return (left, value)
            else:
                max_result = _ptree_find_max(right)
                if max_result is None:
                    raise Impossible
                new_right, max_value = max_result
                new_tree = _ptree_downgrade(PTreeBranch(value, left, new_right))
                return (new_tree, max_value)
        case _:
            raise Impossible


def _ptree_delete[T](tree: PTree[T], key: T) -> PTree[T]:
    match tree:
        case PTreeEmpty():
            return tree
        case PTreeLeaf(value):
            return _PTREE_EMPTY if compare(key, value) == Ordering.Eq else tree
        case PTreeBranch(value, left, right):
            cmp = compare(key, value)
            if cmp == Ordering.Lt:
                new_left = _ptree_delete(left, key)
                if new_left is left:
                    return tree
                return _ptree_downgrade(PTreeBranch(value, new_left, right))
            elif cmp == Ordering.Gt:
                new_right = _ptree_delete(right, key)
                if new_right is right:
                    return tree
                return _ptree_downgrade(PTreeBranch(value, left, new_right))
            else:
                return _ptree_remove_root(left, right)
        case _:
            raise Impossible


def _ptree_remove_root[T](left: PTree[T], right: PTree[T]) -> PTree[T]:
    """Join the children of a removed node."""
    if left.null():
        return right
    elif right.null():
        return left
    else:
        min_result = _ptree_find_min(right)
        if min_result is None:
            raise Impossible
        successor, new_right = min_result
        return PTreeBranch(successor, left, new_right)


def _ptree_downgrade[T](tree: PTree[T]) -> PTree[T]:
    match tree:
        case PTreeBranch(value, PTreeEmpty(), PTreeEmpty()):
            return PTreeLeaf(value)
        case _:
            return tree


def _ptree_size[T](tree: PTree[T]) -> int:
    match tree:
        case PTreeEmpty():
            return 0
        case PTreeLeaf():
            return 1
        case PTreeBranch(_, left, right):
            return 1 + _ptree_size(left) + _ptree_size(right)
        case _:
            raise Impossible


def _ptree_depth[T](tree: PTree[T]) -> int:
    match tree:
        case PTreeEmpty():
            return 0
        case PTreeLeaf():
            return 1
        case PTreeBranch(_, left, right):
            return 1 + max(_ptree_depth(left), _ptree_depth(right))
        case _:
            raise Impossible


def _ptree_within[T](
    value: T, lower: Optional[Box[T]], upper: Optional[Box[T]]
) -> bool:
    # lower is inclusive, upper is exclusive
    if lower is not None and compare(value, lower.value) == Ordering.Lt:
        return False
    if upper is not None and compare(value, upper.value) != Ordering.Lt:
        return False
    return True


def _ptree_valid[T](
    tree: PTree[T], lower: Optional[Box[T]], upper: Optional[Box[T]]
) -> bool:
    match tree:
        case PTreeEmpty():
            return True
        case PTreeLeaf(value):
            return _ptree_within(value, lower, upper)
        case PTreeBranch(value, left, right):
            if left.null() and right.null():
                return False
            return (
                _ptree_within(value, lower, upper)
                and _ptree_valid(left, lower, Box(value))
                and _ptree_valid(right, Box(value), upper)
            )
        case _:
            raise Impossible


def _ptree_render[T](tree: PTree[T]) -> str:
    match tree:
        case PTreeEmpty():
            return "Empty"
        case PTreeLeaf(value):
            return f"Leaf({value!r})"
        case PTreeBranch(value, left, right):
            return f"Branch({value!r}, {_ptree_render(left)}, {_ptree_render(right)})"
        case _:
            raise Impossible


def _ptree_pretty[T](
    tree: PTree[T], indent: int, level: int, label: str, lines: List[str]
) -> None:
    pad = " " * (indent * level)
    match tree:
        case PTreeEmpty():
            lines.append(f"{pad}{label}Empty")
        case PTreeLeaf(value):
            lines.append(f"{pad}{label}Leaf({value!r})")
        case PTreeBranch(value, left, right):
            lines.append(f"{pad}{label}Branch({value!r})")
            _ptree_pretty(left, indent, level + 1, "L: ", lines)
            _ptree_pretty(right, indent, level + 1, "R: ", lines)
        case _:
            raise Impossible
