"""Binary trees, search trees, a right-threaded search tree and n-ary trees."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int = 0
    left: TreeNode | None = None
    right: TreeNode | None = None


def has_path_sum(root, target):
    """Tell whether some root-to-leaf path has values adding up to ``target``."""
    if root is None:
        return False
    pending = [(root, target)]
    while pending:
        node, remaining = pending.pop()
        remaining -= node.val
        if node.left is None and node.right is None:
            if remaining == 0:
                return True
            continue
        for child in (node.right, node.left):
            if child is not None:
                pending.append((child, remaining))
    return False


def _balanced_height(node):
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root):
    """Tell whether every node's subtrees differ in height by at most one."""
    return _balanced_height(root) is not None


class BinarySearchTree:
    """A binary search tree; equal items go to the right."""

    def __init__(self, items=()):
        self.root = None
        for item in items:
            self.insert(item)

    def insert(self, item):
        """Add ``item`` as a new leaf."""
        node = TreeNode(item)
        if self.root is None:
            self.root = node
            return
        current = self.root
        while True:
            if item < current.val:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def inorder(self):
        """Return the items in left, node, right order."""
        result = []
        stack = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.val)
            node = node.right
        return result

    def preorder(self):
        """Return the items in node, left, right order."""
        result = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.val)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def postorder(self):
        """Return the items in left, right, node order."""
        reversed_order = []
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            reversed_order.append(node.val)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        return reversed_order[::-1]


class _ThreadedNode:
    __slots__ = ("info", "left", "right", "rthread")

    def __init__(self, info):
        self.info = info
        self.left = None
        self.right = None
        self.rthread = True


class ThreadedBST:
    """A binary search tree whose empty right links point to the inorder successor."""

    def __init__(self, items=()):
        self.root = None
        for item in items:
            self.insert(item)

    def insert(self, item):
        """Add ``item`` as a new leaf, keeping the successor threads correct."""
        node = _ThreadedNode(item)
        if self.root is None:
            node.rthread = False
            self.root = node
            return
        parent = None
        current = self.root
        while current is not None:
            parent = current
            if item < current.info:
                current = current.left
            else:
                current = None if current.rthread else current.right
        if item < parent.info:
            parent.left = node
            node.right = parent
            node.rthread = True
        elif parent.rthread:
            parent.rthread = False
            node.rthread = True
            node.right = parent.right
            parent.right = node
        else:
            node.rthread = False
            parent.right = node

    def _walk(self):
        current = self.root
        while True:
            parent = None
            while current is not None:
                parent = current
                current = current.left
            if parent is not None:
                yield parent.info
                current = parent.right
                while parent.rthread and current is not None:
                    yield current.info
                    parent = current
                    current = current.right
            if current is None:
                return

    def inorder(self):
        """Return the items in sorted order, following the threads without a stack."""
        return list(self._walk())


@dataclass
class NaryNode:
    """A tree node with any number of ordered children."""

    data: int
    children: list = field(default_factory=list)


def parse_level_order(tokens):
    """Build an n-ary tree from integers given level by level.

    The first value is the root; then, for each node in breadth-first order,
    its number of children followed by their values.
    """
    stream = iter(tokens)

    def take():
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("the token stream ended before the tree was complete") from None

    root = NaryNode(take())
    pending = deque([root])
    while pending:
        node = pending.popleft()
        count = take()
        if count < 0:
            raise ValueError("a child count must not be negative")
        for _ in range(count):
            child = NaryNode(take())
            node.children.append(child)
            pending.append(child)
    return root


def are_identical(a, b):
    """Tell whether two n-ary trees have the same values in the same shape."""
    pending = [(a, b)]
    while pending:
        left, right = pending.pop()
        if left is None or right is None:
            if left is not right:
                return False
            continue
        if left.data != right.data or len(left.children) != len(right.children):
            return False
        pending.extend(zip(left.children, right.children))
    return True