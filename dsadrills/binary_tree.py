"""Binary trees: building, traversing and comparing."""

from collections import deque
from dataclasses import dataclass
from typing import Optional

_EMPTY = -1
_EMPTY_TOKEN = "N"


@dataclass(eq=False)
class Node:
    """A binary tree node."""

    data: int
    left: Optional["Node"] = None
    right: Optional["Node"] = None


def _take(values):
    try:
        return next(values)
    except StopIteration:
        raise ValueError("ran out of values while building the tree") from None


def build_preorder(values):
    """Build a tree from values in pre-order, where -1 marks an empty subtree."""
    values = iter(values)

    def build():
        data = _take(values)
        if data == _EMPTY:
            return None
        node = Node(data)
        node.left = build()
        node.right = build()
        return node

    return build()


def build_level_order(values):
    """Build a tree level by level: the root, then the left and right child
    of each node in turn, where -1 marks a missing child."""
    values = iter(values)
    root = Node(_take(values))
    queue = deque([root])
    while queue:
        node = queue.popleft()
        left = _take(values)
        if left != _EMPTY:
            node.left = Node(left)
            queue.append(node.left)
        right = _take(values)
        if right != _EMPTY:
            node.right = Node(right)
            queue.append(node.right)
    return root


def parse_level_order(text):
    """Build a tree from space-separated values in level order, where ``N``
    marks a missing child; missing trailing values leave children empty."""
    tokens = text.split()
    if not tokens or text[0] == _EMPTY_TOKEN:
        return None
    root = Node(int(tokens[0]))
    queue = deque([root])
    rest = iter(tokens[1:])
    while queue:
        node = queue.popleft()
        left = next(rest, None)
        if left is None:
            break
        if left != _EMPTY_TOKEN:
            node.left = Node(int(left))
            queue.append(node.left)
        right = next(rest, None)
        if right is None:
            break
        if right != _EMPTY_TOKEN:
            node.right = Node(int(right))
            queue.append(node.right)
    return root


def level_order(root):
    """Return the values of the tree grouped by level, top level first."""
    levels = []
    current = [root] if root is not None else []
    while current:
        levels.append([node.data for node in current])
        current = [
            child
            for node in current
            for child in (node.left, node.right)
            if child is not None
        ]
    return levels


def inorder(root):
    """Return the values in left, node, right order."""
    if root is None:
        return []
    return inorder(root.left) + [root.data] + inorder(root.right)


def preorder(root):
    """Return the values in node, left, right order."""
    if root is None:
        return []
    return [root.data] + preorder(root.left) + preorder(root.right)


def postorder(root):
    """Return the values in left, right, node order."""
    if root is None:
        return []
    return postorder(root.left) + postorder(root.right) + [root.data]


def is_identical(first, second):
    """Tell whether two trees have the same shape and the same values."""
    if first is None or second is None:
        return first is second
    return (
        is_identical(first.left, second.left)
        and is_identical(first.right, second.right)
        and first.data == second.data
    )