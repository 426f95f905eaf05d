import logging
from collections.abc import Iterator
from typing import override

from binary_tree.src.node import Node
from binary_tree.src.tree import BinaryTree, Visit
from binary_tree.src.utils import goes_left


def _in_order_nodes[T](head: Node[T] | None) -> Iterator[Node[T]]:
    stack: list[Node[T]] = []
    while stack or head is not None:
        while head is not None:
            stack.append(head)
            head = head.left
        head = stack.pop()
        yield head
        head = head.right


def _pre_order_nodes[T](head: Node[T] | None) -> Iterator[Node[T]]:
    stack = [head] if head is not None else []
    while stack:
        curr = stack.pop()
        yield curr
        # right goes on first so left comes off first
        if curr.right is not None:
            stack.append(curr.right)
        if curr.left is not None:
            stack.append(curr.left)


def _post_order_nodes[T](head: Node[T] | None) -> Iterator[Node[T]]:
    # (node, children_done) pairs, a node is emitted the second time it is popped
    stack: list[tuple[Node[T], bool]] = [(head, False)] if head is not None else []
    while stack:
        curr, children_done = stack.pop()
        if children_done:
            yield curr
            continue
        stack.append((curr, True))
        if curr.right is not None:
            stack.append((curr.right, False))
        if curr.left is not None:
            stack.append((curr.left, False))


class IterativeBinaryTree[T](BinaryTree[T]):
    """BinaryTree that walks with an explicit stack instead of the call stack."""

    @override
    def lookup(self, value: T) -> bool:
        head = self.root
        while head is not None:
            if self.compare(value, head.value) == 0:
                return True
            head = head.left if goes_left(self.compare, value, head.value) else head.right
        return False

    @override
    def insert(self, value: T) -> None:
        if self.root is None:
            logging.debug(f"{value!r} becomes the root")
            self.root = Node(value)
            return

        head = self.root
        while True:
            if goes_left(self.compare, value, head.value):
                if head.left is None:
                    logging.debug(f"attaching {value!r} left of {head.value!r}")
                    head.left = Node(value)
                    return
                head = head.left
            else:
                if head.right is None:
                    logging.debug(f"attaching {value!r} right of {head.value!r}")
                    head.right = Node(value)
                    return
                head = head.right

    @override
    def size(self) -> int:
        return sum(1 for _ in _pre_order_nodes(self.root))

    @override
    def max_depth(self) -> int:
        deepest = 0
        stack = [(self.root, 1)] if self.root is not None else []
        while stack:
            curr, depth = stack.pop()
            if curr.is_leaf():
                deepest = max(deepest, depth)
                continue
            for child in (curr.left, curr.right):
                if child is not None:
                    stack.append((child, depth + 1))
        return deepest

    @override
    def traverse_in_order(self, visit: Visit[T]) -> None:
        for node in _in_order_nodes(self.root):
            visit(node.value)

    @override
    def traverse_pre_order(self, visit: Visit[T]) -> None:
        for node in _pre_order_nodes(self.root):
            visit(node.value)

    @override
    def traverse_post_order(self, visit: Visit[T]) -> None:
        for node in _post_order_nodes(self.root):
            visit(node.value)

    @override
    def in_order(self) -> Iterator[T]:
        return (node.value for node in _in_order_nodes(self.root))

    @override
    def pre_order(self) -> Iterator[T]:
        return (node.value for node in _pre_order_nodes(self.root))

    @override
    def post_order(self) -> Iterator[T]:
        return (node.value for node in _post_order_nodes(self.root))
