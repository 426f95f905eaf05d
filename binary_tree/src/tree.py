import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Self

from binary_tree.src.node import Node
from binary_tree.src.utils import Compare, goes_left, natural_compare


type Visit[T] = Callable[[T], None]


class EmptySubtreeError(ValueError):
    pass


def lookup_from[T](head: Node[T] | None, value: T, compare: Compare[T]) -> bool:
    if head is None:
        return False
    if compare(value, head.value) == 0:
        return True
    if goes_left(compare, value, head.value):
        return lookup_from(head.left, value, compare)
    return lookup_from(head.right, value, compare)


def insert_into[T](head: Node[T] | None, value: T, compare: Compare[T]) -> Node[T]:
    # bottom level makes the leaf so the caller just reattaches whatever comes back
    if head is None:
        return Node(value)

    if goes_left(compare, value, head.value):
        if head.left is None:
            logging.debug(f"attaching {value!r} left of {head.value!r}")
        head.left = insert_into(head.left, value, compare)
    else:
        if head.right is None:
            logging.debug(f"attaching {value!r} right of {head.value!r}")
        head.right = insert_into(head.right, value, compare)

    return head


def size_of(head: Node | None) -> int:
    if head is None:
        return 0
    return 1 + size_of(head.left) + size_of(head.right)


def max_depth_of(head: Node | None) -> int:
    if head is None:
        return 0
    return 1 + max(max_depth_of(head.left), max_depth_of(head.right))


def traverse_in_order[T](head: Node[T] | None, visit: Visit[T]) -> None:
    if head is None:
        return
    traverse_in_order(head.left, visit)
    visit(head.value)
    traverse_in_order(head.right, visit)


def traverse_pre_order[T](head: Node[T] | None, visit: Visit[T]) -> None:
    if head is None:
        return
    visit(head.value)
    traverse_pre_order(head.left, visit)
    traverse_pre_order(head.right, visit)


def traverse_post_order[T](head: Node[T] | None, visit: Visit[T]) -> None:
    if head is None:
        return
    traverse_post_order(head.left, visit)
    traverse_post_order(head.right, visit)
    visit(head.value)


def find_min_from[T](head: Node[T] | None) -> T:
    if head is None:
        raise EmptySubtreeError("Cannot find the minimum of an empty subtree")
    while head.left is not None:
        head = head.left
    return head.value


class BinaryTree[T]:
    """
    Unbalanced binary search tree.

    Values comparing equal to a node go to its left subtree, so duplicates
    are kept and show up next to each other in an in-order walk. Lookup
    follows the same direction rule as insert.

    Every operation recurses once per level, so a tree built from sorted
    input is a chain as tall as it is long and can hit the interpreter's
    recursion limit (RecursionError). IterativeBinaryTree has the same
    behaviour without the recursion.
    """

    def __init__(self, compare: Compare[T] | None = None) -> None:
        self.root: Node[T] | None = None
        self.compare: Compare[T] = compare or natural_compare

    @classmethod
    def from_values(cls, values: Iterable[T], compare: Compare[T] | None = None) -> Self:
        tree = cls(compare)
        tree.insert_all(values)
        return tree

    def is_empty(self) -> bool:
        return self.root is None

    def lookup(self, value: T) -> bool:
        return lookup_from(self.root, value, self.compare)

    def insert(self, value: T) -> None:
        if self.root is None:
            logging.debug(f"{value!r} becomes the root")
            self.root = Node(value)
            return
        insert_into(self.root, value, self.compare)

    def insert_all(self, values: Iterable[T]) -> None:
        for value in values:
            self.insert(value)

    def size(self) -> int:
        return size_of(self.root)

    def max_depth(self) -> int:
        return max_depth_of(self.root)

    def traverse_in_order(self, visit: Visit[T]) -> None:
        traverse_in_order(self.root, visit)

    def traverse_pre_order(self, visit: Visit[T]) -> None:
        traverse_pre_order(self.root, visit)

    def traverse_post_order(self, visit: Visit[T]) -> None:
        traverse_post_order(self.root, visit)

    def find_min(self, node: Node[T] | None) -> T:
        """Value of the left-most node under `node`. Raises EmptySubtreeError for None."""
        return find_min_from(node)

    def min(self) -> T:
        return self.find_min(self.root)

    # lazy variants, same order as the traverse_* methods
    def in_order(self) -> Iterator[T]:
        yield from _walk_in_order(self.root)

    def pre_order(self) -> Iterator[T]:
        yield from _walk_pre_order(self.root)

    def post_order(self) -> Iterator[T]:
        yield from _walk_post_order(self.root)

    def __iter__(self) -> Iterator[T]:
        return self.in_order()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, value: T) -> bool:
        return self.lookup(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.in_order())!r})"


def _walk_in_order[T](head: Node[T] | None) -> Iterator[T]:
    if head is None:
        return
    yield from _walk_in_order(head.left)
    yield head.value
    yield from _walk_in_order(head.right)


def _walk_pre_order[T](head: Node[T] | None) -> Iterator[T]:
    if head is None:
        return
    yield head.value
    yield from _walk_pre_order(head.left)
    yield from _walk_pre_order(head.right)


def _walk_post_order[T](head: Node[T] | None) -> Iterator[T]:
    if head is None:
        return
    yield from _walk_post_order(head.left)
    yield from _walk_post_order(head.right)
    yield head.value
