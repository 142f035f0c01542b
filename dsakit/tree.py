"""Binary tree nodes and the four classic traversals."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

__all__ = ["TreeNode", "inorder", "preorder", "postorder", "level_order"]


@dataclass
class TreeNode:
    """A binary tree node holding *data* and optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def inorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data left subtree, root, right subtree."""
    if root is not None:
        yield from inorder(root.left)
        yield root.data
        yield from inorder(root.right)


def preorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data root, left subtree, right subtree."""
    if root is not None:
        yield root.data
        yield from preorder(root.left)
        yield from preorder(root.right)


def postorder(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data left subtree, right subtree, root."""
    if root is not None:
        yield from postorder(root.left)
        yield from postorder(root.right)
        yield root.data


def level_order(root: TreeNode | None) -> Iterator[Any]:
    """Yield node data breadth first, left to right within each level."""
    if root is None:
        return
    queue = deque([root])
    while queue:
        node = queue.popleft()
        yield node.data
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)