from typing import TypeVar, Generic, List, Optional

from .bounds import validate_bound
from .exceptions import EmptyTreeError

T = TypeVar('T')


class AVLGTree(Generic[T]):
    """
    AVL tree with a relaxed balance condition.

    Every node keeps |height(left) - height(right)| <= G, where G is the
    imbalance bound fixed at construction. G = 1 is the classic AVL tree;
    larger bounds trade taller trees for fewer rotations.
    """

    class Node:
        def __init__(self, key: T) -> None:
            self.key: T = key
            self.left: Optional['AVLGTree.Node'] = None
            self.right: Optional['AVLGTree.Node'] = None
            self.height: int = 0

    def __init__(self, imbalance_bound: int) -> None:
        validate_bound(imbalance_bound)
        self._imbalance_bound: int = imbalance_bound
        self._root: Optional[AVLGTree.Node] = None
        self._size: int = 0
        self._rotations: int = 0

    # heights and balance

    def _height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> None:
        node.height = 1 + max(self._height(node.left), self._height(node.right))

    def _balance(self, node: Node) -> int:
        return self._height(node.left) - self._height(node.right)

    def _violates(self, node: Node) -> bool:
        return abs(self._balance(node)) > self._imbalance_bound

    def _subtree_height(self, node: Optional[Node]) -> int:
        if node is None:
            return -1
        return 1 + max(self._subtree_height(node.left), self._subtree_height(node.right))

    # rotations

    def _rotate_left(self, x: Node) -> Node:
        y = x.right
        assert y is not None
        x.right = y.left
        y.left = x

        self._update_height(x)
        self._update_height(y)
        self._rotations += 1

        return y

    def _rotate_right(self, y: Node) -> Node:
        x = y.left
        assert x is not None
        y.left = x.right
        x.right = y

        self._update_height(y)
        self._update_height(x)
        self._rotations += 1

        return x

    def _rotate_left_right(self, node: Node) -> Node:
        assert node.left is not None
        node.left = self._rotate_left(node.left)
        return self._rotate_right(node)

    def _rotate_right_left(self, node: Node) -> Node:
        assert node.right is not None
        node.right = self._rotate_right(node.right)
        return self._rotate_left(node)

    # insertion

    def _rebalance_after_insert(self, node: Node, key: T) -> Node:
        self._update_height(node)
        if not self._violates(node):
            return node

        # the new key sits on the heavy side, its position relative to the
        # heavy child tells a straight path from a zig-zag
        if self._balance(node) > 0:
            assert node.left is not None
            if key < node.left.key:
                return self._rotate_right(node)
            return self._rotate_left_right(node)

        assert node.right is not None
        if key > node.right.key:
            return self._rotate_left(node)
        return self._rotate_right_left(node)

    def _insert(self, node: Optional[Node], key: T) -> Node:
        if node is None:
            self._size += 1
            return AVLGTree.Node(key)

        if key < node.key:
            node.left = self._insert(node.left, key)
        elif key > node.key:
            node.right = self._insert(node.right, key)
        else:
            return node

        return self._rebalance_after_insert(node, key)

    def insert(self, key: T) -> None:
        self._root = self._insert(self._root, key)

    # deletion

    def _rebalance_after_remove(self, node: Node) -> Node:
        self._update_height(node)
        if not self._violates(node):
            return node

        # either grandchild of the heavy side may be the tall one, so the
        # choice is made on heights rather than on the removed key
        if self._balance(node) > 0:
            heavy = node.left
            assert heavy is not None
            if self._height(heavy.left) >= self._height(heavy.right):
                return self._rotate_right(node)
            return self._rotate_left_right(node)

        heavy = node.right
        assert heavy is not None
        if self._height(heavy.right) >= self._height(heavy.left):
            return self._rotate_left(node)
        return self._rotate_right_left(node)

    def _find_min_node(self, node: Node) -> Node:
        while node.left is not None:
            node = node.left
        return node

    def _remove_min(self, node: Node) -> Optional[Node]:
        # the leftmost node has at most a right child, which takes its place
        if node.left is None:
            return node.right
        node.left = self._remove_min(node.left)
        return self._rebalance_after_remove(node)

    def _remove(self, node: Optional[Node], key: T) -> Optional[Node]:
        assert node is not None

        if key < node.key:
            node.left = self._remove(node.left, key)
        elif key > node.key:
            node.right = self._remove(node.right, key)
        elif node.right is None:
            return node.left
        else:
            # the node object stays where it is and takes over its successor's
            # key, so a root with a right subtree keeps its identity
            successor = self._find_min_node(node.right)
            node.key = successor.key
            node.right = self._remove_min(node.right)

        return self._rebalance_after_remove(node)

    def delete(self, key: T) -> Optional[T]:
        """
        Remove `key` from the tree.

        Returns the stored key that was removed, or None if no equal key is
        present. Raises EmptyTreeError on an empty tree.
        """
        if self._root is None:
            raise EmptyTreeError("delete from empty tree")

        target = self._search_node(key)
        if target is None:
            return None

        removed = target.key
        self._root = self._remove(self._root, key)
        self._size -= 1
        return removed

    # lookup

    def _search_node(self, key: T) -> Optional[Node]:
        node = self._root
        while node is not None:
            if key < node.key:
                node = node.left
            elif key > node.key:
                node = node.right
            else:
                return node
        return None

    def search(self, key: T) -> Optional[T]:
        if self._root is None:
            raise EmptyTreeError("search in empty tree")
        node = self._search_node(key)
        if node is None:
            return None
        return node.key

    def contains(self, key: T) -> bool:
        return self._search_node(key) is not None

    # accessors

    def count(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def height(self) -> int:
        return self._height(self._root)

    def root_key(self) -> T:
        if self._root is None:
            raise EmptyTreeError("root of empty tree")
        return self._root.key

    def imbalance_bound(self) -> int:
        return self._imbalance_bound

    def rotation_count(self) -> int:
        """Single pivots performed since construction; a double rotation counts twice."""
        return self._rotations

    def clear(self) -> None:
        self._root = None
        self._size = 0

    # verification

    def _is_bst(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if node.left is not None and not node.left.key < node.key:
            return False
        if node.right is not None and not node.right.key > node.key:
            return False
        return self._is_bst(node.left) and self._is_bst(node.right)

    def is_bst(self) -> bool:
        """
        Check every parent against its immediate children.

        This is a local check: a key deeper in a subtree is only compared with
        its own parent, not with bounds inherited from further up the tree.
        """
        return self._is_bst(self._root)

    def _checked_height(self, node: Optional[Node]) -> Optional[int]:
        # recomputed height of a G-balanced subtree, None once a violation is seen
        if node is None:
            return -1
        left = self._checked_height(node.left)
        if left is None:
            return None
        right = self._checked_height(node.right)
        if right is None:
            return None
        if abs(left - right) > self._imbalance_bound:
            return None
        return 1 + max(left, right)

    def is_balanced(self) -> bool:
        return self._checked_height(self._root) is not None

    def _heights_consistent(self, node: Optional[Node]) -> bool:
        if node is None:
            return True
        if node.height != self._subtree_height(node):
            return False
        return self._heights_consistent(node.left) and self._heights_consistent(node.right)

    def heights_consistent(self) -> bool:
        """True when every cached node height matches the subtree's actual shape."""
        return self._heights_consistent(self._root)

    # debugging

    def dump(self) -> str:
        lines: List[str] = []
        if self._root is None:
            return ""
        stack: List[AVLGTree.Node] = [self._root]
        while stack:
            node = stack.pop()
            left = node.left.key if node.left is not None else None
            right = node.right.key if node.right is not None else None
            lines.append(f"{node.key} => Left : {left} Right : {right}")
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return "\n".join(lines)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: T) -> bool:
        return self.contains(key)

    def __repr__(self) -> str:
        return f"AVLGTree(G={self._imbalance_bound}, size={self._size}, height={self.height()})"

    def __str__(self) -> str:
        return self.__repr__()
