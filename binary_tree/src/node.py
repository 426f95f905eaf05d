from dataclasses import dataclass


@dataclass(eq=False, repr=False)
class Node[T]:
    value: T
    left: "Node[T] | None" = None
    right: "Node[T] | None" = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

    def __eq__(self, other: object) -> bool:
        # explicit stack, trees may be deeper than the recursion limit
        if not isinstance(other, Node):
            return NotImplemented
        pairs: list[tuple[Node | None, Node | None]] = [(self, other)]
        while pairs:
            a, b = pairs.pop()
            if a is None or b is None:
                if a is not b:
                    return False
                continue
            if a.value != b.value:
                return False
            pairs.append((a.left, b.left))
            pairs.append((a.right, b.right))
        return True

    def __repr__(self) -> str:
        # children shown one level deep only
        def short(child: "Node[T] | None") -> str:
            return "None" if child is None else f"Node({child.value!r}, ...)"

        return f"Node(value={self.value!r}, left={short(self.left)}, right={short(self.right)})"
