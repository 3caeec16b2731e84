"""
Unbalanced binary search tree ordered by a caller-supplied less-than predicate.

Nodes double as location handles: ``insert`` and ``search`` return the node
holding a key, and the node can later be asked for its key (``get``) or for
its in-order neighbours (``get_before`` / ``get_after``) by walking parent
links. Heights are cached on every node and refreshed along the parent chain
after every structural change, so ``height()`` is O(1).

No operation recurses, so a degenerate tree built from sorted input is only
slow, never too deep for the interpreter stack.

Removing a key whose node has two children copies the in-order successor's
key into that node and unlinks the successor's node instead. A handle that
pointed at the removed key therefore reads the successor's key afterwards.
"""

from typing import TypeVar, Generic, Callable, List, Iterator, Optional, Tuple, Union

K = TypeVar('K')


class BinarySearchTree(Generic[K]):
    class Node:
        def __init__(self, key: K, parent: Optional['BinarySearchTree.Node'] = None) -> None:
            self.key: K = key
            self.left: Optional['BinarySearchTree.Node'] = None
            self.right: Optional['BinarySearchTree.Node'] = None
            self.parent: Optional['BinarySearchTree.Node'] = parent
            self.height: int = 0

        def get(self) -> K:
            return self.key

        def is_leaf(self) -> bool:
            return self.left is None and self.right is None

        def get_after(self) -> Optional['BinarySearchTree.Node']:
            """Node holding the next larger key, or None if this is the maximum."""
            if self.right is not None:
                return self.right._smallest()
            node = self
            ancestor = self.parent
            while ancestor is not None and node is ancestor.right:
                node = ancestor
                ancestor = ancestor.parent
            return ancestor

        def get_before(self) -> Optional['BinarySearchTree.Node']:
            """Node holding the next smaller key, or None if this is the minimum."""
            if self.left is not None:
                return self.left._largest()
            node = self
            ancestor = self.parent
            while ancestor is not None and node is ancestor.left:
                node = ancestor
                ancestor = ancestor.parent
            return ancestor

        def _smallest(self) -> 'BinarySearchTree.Node':
            node = self
            while node.left is not None:
                node = node.left
            return node

        def _largest(self) -> 'BinarySearchTree.Node':
            node = self
            while node.right is not None:
                node = node.right
            return node

        def __repr__(self) -> str:
            return f"Node({self.key!r}, height={self.height})"

        def __str__(self) -> str:
            return BinarySearchTree._dump(self)

    def __init__(self, less_than: Callable[[K, K], bool]) -> None:
        if not callable(less_than):
            raise TypeError("less_than must be callable")
        self._less_than: Callable[[K, K], bool] = less_than
        self._root: Optional[BinarySearchTree.Node] = None
        self._size: int = 0

    @staticmethod
    def _get_height(node: Optional[Node]) -> int:
        if node is None:
            return -1
        return node.height

    def _update_height(self, node: Node) -> bool:
        height = 1 + max(self._get_height(node.left), self._get_height(node.right))
        if node.height == height:
            return False
        node.height = height
        return True

    def _refresh_heights(self, node: Optional[Node]) -> None:
        # Ancestors only depend on their children's heights, so stop at the
        # first node whose height did not move.
        while node is not None and self._update_height(node):
            node = node.parent

    def search(self, key: K) -> Optional[Node]:
        node = self._root
        while node is not None:
            if self._less_than(key, node.key):
                node = node.left
            elif self._less_than(node.key, key):
                node = node.right
            else:
                return node
        return None

    def contains(self, key: K) -> bool:
        return self.search(key) is not None

    def insert(self, key: K) -> Node:
        if self._root is None:
            self._root = BinarySearchTree.Node(key)
            self._size += 1
            return self._root

        node = self._root
        while True:
            if self._less_than(key, node.key):
                if node.left is None:
                    node.left = BinarySearchTree.Node(key, node)
                    leaf = node.left
                    break
                node = node.left
            elif self._less_than(node.key, key):
                if node.right is None:
                    node.right = BinarySearchTree.Node(key, node)
                    leaf = node.right
                    break
                node = node.right
            else:
                return node

        self._size += 1
        self._refresh_heights(node)
        return leaf

    def _splice(self, node: Node) -> None:
        """Unlink a node with at most one child, lifting the child into its place."""
        child = node.left if node.left is not None else node.right
        parent = node.parent
        if child is not None:
            child.parent = parent
        if parent is None:
            self._root = child
        elif parent.left is node:
            parent.left = child
        else:
            parent.right = child
        node.parent = node.left = node.right = None
        self._size -= 1
        self._refresh_heights(parent)

    def remove(self, key: K) -> None:
        node = self.search(key)
        if node is None:
            return

        if node.left is not None and node.right is not None:
            successor = node.right._smallest()
            node.key = successor.key
            node = successor

        self._splice(node)

    def height(self) -> int:
        return self._get_height(self._root)

    def size(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        return self._size == 0

    def clear(self) -> None:
        self._root = None
        self._size = 0

    def first(self) -> Optional[Node]:
        if self._root is None:
            return None
        return self._root._smallest()

    def last(self) -> Optional[Node]:
        if self._root is None:
            return None
        return self._root._largest()

    def min(self) -> K:
        node = self.first()
        if node is None:
            raise ValueError("min from empty tree")
        return node.key

    def max(self) -> K:
        node = self.last()
        if node is None:
            raise ValueError("max from empty tree")
        return node.key

    def keys(self) -> List[K]:
        result: List[K] = []
        stack: List[BinarySearchTree.Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.key)
            node = node.right
        return result

    def copy(self) -> 'BinarySearchTree[K]':
        """Same comparator, same shape and cached heights, fresh nodes."""
        clone: BinarySearchTree[K] = BinarySearchTree(self._less_than)
        clone._size = self._size
        if self._root is None:
            return clone

        clone._root = BinarySearchTree.Node(self._root.key)
        clone._root.height = self._root.height
        pairs: List[Tuple[BinarySearchTree.Node, BinarySearchTree.Node]] = [(self._root, clone._root)]
        while pairs:
            source, target = pairs.pop()
            for side in ("left", "right"):
                child = getattr(source, side)
                if child is None:
                    continue
                twin = BinarySearchTree.Node(child.key, target)
                twin.height = child.height
                setattr(target, side, twin)
                pairs.append((child, twin))
        return clone

    def is_valid(self) -> bool:
        """
        Check ordering, parent links, cached heights and size.

        Each node is visited with the nearest ancestors it hangs to the right
        and left of, and its key must fall strictly between theirs. A height
        that matches its children's cached heights at every node is the true
        height everywhere, since leaves anchor the induction.
        """
        if self._root is None:
            return self._size == 0
        if self._root.parent is not None:
            return False

        count = 0
        stack: List[Tuple[BinarySearchTree.Node, Optional[BinarySearchTree.Node],
                          Optional[BinarySearchTree.Node]]] = [(self._root, None, None)]
        while stack:
            node, low, high = stack.pop()
            count += 1
            if low is not None and not self._less_than(low.key, node.key):
                return False
            if high is not None and not self._less_than(node.key, high.key):
                return False
            if node.height != 1 + max(self._get_height(node.left), self._get_height(node.right)):
                return False
            if node.left is not None:
                if node.left.parent is not node:
                    return False
                stack.append((node.left, low, node))
            if node.right is not None:
                if node.right.parent is not node:
                    return False
                stack.append((node.right, node, high))
        return count == self._size

    @staticmethod
    def _dump(node: Optional[Node]) -> str:
        parts: List[str] = []
        stack: List[Union[str, BinarySearchTree.Node, None]] = [node]
        while stack:
            item = stack.pop()
            if item is None:
                parts.append(".")
            elif isinstance(item, str):
                parts.append(item)
            else:
                parts.append(f"({item.key}[{item.height}] ")
                stack.extend((")", item.right, " ", item.left))
        return "".join(parts)

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: K) -> bool:
        return self.contains(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    def __repr__(self) -> str:
        return f"BinarySearchTree({self.keys()})"

    def __str__(self) -> str:
        return self._dump(self._root)
