"""A red-black tree of integers with insertion, lookup and traversal strings."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from typing import Optional


class Color(enum.IntEnum):
    """Colour of a tree node."""

    RED = 0
    BLACK = 1
    DOUBLE_BLACK = 2

    @property
    def symbol(self) -> str:
        """One-letter tag used in the traversal strings."""
        return "R" if self is Color.RED else "B"


class DuplicateValueError(ValueError):
    """Raised when a value already in the tree is inserted again."""


class EmptyTreeError(RuntimeError):
    """Raised when the minimum or maximum of an empty tree is asked for."""


class _Node:
    __slots__ = ("value", "color", "left", "right", "parent")

    def __init__(
        self,
        value: int,
        color: Color,
        parent: Optional["_Node"] = None,
    ) -> None:
        self.value = value
        self.color = color
        self.left: Optional[_Node] = None
        self.right: Optional[_Node] = None
        self.parent = parent

    @property
    def label(self) -> str:
        return f" {self.color.symbol}{self.value} "


def _infix(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield from _infix(node.left)
    yield node
    yield from _infix(node.right)


def _prefix(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield node
    yield from _prefix(node.left)
    yield from _prefix(node.right)


def _postfix(node: Optional[_Node]) -> Iterator[_Node]:
    if node is None:
        return
    yield from _postfix(node.left)
    yield from _postfix(node.right)
    yield node


def _copy_subtree(node: Optional[_Node], parent: Optional[_Node]) -> Optional[_Node]:
    if node is None:
        return None
    clone = _Node(node.value, node.color, parent)
    clone.left = _copy_subtree(node.left, clone)
    clone.right = _copy_subtree(node.right, clone)
    return clone


class RedBlackTree:
    """A self-balancing binary search tree holding distinct integers."""

    def __init__(self, value: Optional[int] = None) -> None:
        self._root: Optional[_Node] = None
        self._size = 0
        if value is not None:
            self.insert(value)

    def insert(self, value: int) -> None:
        """Insert a value; raise DuplicateValueError if it is already present."""
        if self._root is None:
            self._root = _Node(value, Color.BLACK)
            self._size += 1
            self._fix_after_insert(self._root)
            return

        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = _Node(value, Color.RED, current)
                    new_node = current.left
                    break
                current = current.left
            elif value > current.value:
                if current.right is None:
                    current.right = _Node(value, Color.RED, current)
                    new_node = current.right
                    break
                current = current.right
            else:
                raise DuplicateValueError(
                    "Duplicate value insertion is not allowed."
                )
        self._size += 1
        self._fix_after_insert(new_node)

    def _fix_after_insert(self, node: _Node) -> None:
        while node is not self._root and node.parent.color is Color.RED:
            parent = node.parent
            grandparent = parent.parent
            if parent is grandparent.left:
                uncle = grandparent.right
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is parent.right:
                        node = parent
                        self._rotate_left(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_right(node.parent.parent)
            else:
                uncle = grandparent.left
                if uncle is not None and uncle.color is Color.RED:
                    parent.color = Color.BLACK
                    uncle.color = Color.BLACK
                    grandparent.color = Color.RED
                    node = grandparent
                else:
                    if node is parent.left:
                        node = parent
                        self._rotate_right(node)
                    node.parent.color = Color.BLACK
                    node.parent.parent.color = Color.RED
                    self._rotate_left(node.parent.parent)
        self._root.color = Color.BLACK

    def _replace_child(self, old: _Node, new: _Node) -> None:
        parent = old.parent
        new.parent = parent
        if parent is None:
            self._root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def _rotate_left(self, node: _Node) -> None:
        pivot = node.right
        node.right = pivot.left
        if pivot.left is not None:
            pivot.left.parent = node
        self._replace_child(node, pivot)
        pivot.left = node
        node.parent = pivot

    def _rotate_right(self, node: _Node) -> None:
        pivot = node.left
        node.left = pivot.right
        if pivot.right is not None:
            pivot.right.parent = node
        self._replace_child(node, pivot)
        pivot.right = node
        node.parent = pivot

    def contains(self, value: int) -> bool:
        """Return True if the value is in the tree."""
        current = self._root
        while current is not None:
            if value == current.value:
                return True
            current = current.left if value < current.value else current.right
        return False

    def __contains__(self, value: object) -> bool:
        return isinstance(value, int) and self.contains(value)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        return (node.value for node in _infix(self._root))

    def copy(self) -> "RedBlackTree":
        """Return an independent deep copy of the tree."""
        clone = RedBlackTree()
        clone._root = _copy_subtree(self._root, None)
        clone._size = self._size
        return clone

    def __copy__(self) -> "RedBlackTree":
        return self.copy()

    def min(self) -> int:
        """Return the smallest value; raise EmptyTreeError on an empty tree."""
        current = self._root
        if current is None:
            raise EmptyTreeError("Tree is empty!")
        while current.left is not None:
            current = current.left
        return current.value

    def max(self) -> int:
        """Return the largest value; raise EmptyTreeError on an empty tree."""
        current = self._root
        if current is None:
            raise EmptyTreeError("Tree is empty!")
        while current.right is not None:
            current = current.right
        return current.value

    def to_infix_string(self) -> str:
        """Nodes in order, each written as ' <colour><value> '."""
        return "".join(node.label for node in _infix(self._root))

    def to_prefix_string(self) -> str:
        """Nodes in pre-order, each written as ' <colour><value> '."""
        return "".join(node.label for node in _prefix(self._root))

    def to_postfix_string(self) -> str:
        """Nodes in post-order, each written as ' <colour><value> '."""
        return "".join(node.label for node in _postfix(self._root))

    def __repr__(self) -> str:
        return f"RedBlackTree([{', '.join(map(str, self))}])"