import sys

from binary_tree.src.base.config_loader import get_values_from_config
from binary_tree.src.tree import BinaryTree
from binary_tree.src.utils import join_values


def render_traversals(tree: BinaryTree) -> str:
    # in, post, pre, each on its own line with a "--" line between them
    sections = []
    for traverse in (
        tree.traverse_in_order,
        tree.traverse_post_order,
        tree.traverse_pre_order,
    ):
        seen = []
        traverse(seen.append)
        sections.append(join_values(seen))
    return "\n--\n".join(sections)


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else None
    tree = BinaryTree.from_values(get_values_from_config(config_path))
    print(render_traversals(tree))


if __name__ == "__main__":
    main()
