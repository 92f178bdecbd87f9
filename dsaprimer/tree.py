"""Binary trees: recursive and iterative traversals, height, balance and diameter."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass(eq=False, slots=True)
class TreeNode:
    """A binary tree node holding ``data`` and optional children."""

    data: Any
    left: TreeNode | None = None
    right: TreeNode | None = None


def preorder(root: TreeNode | None) -> list[Any]:
    """Return node data in root, left, right order."""
    result: list[Any] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            return
        result.append(node.data)
        visit(node.left)
        visit(node.right)

    visit(root)
    return result


def inorder(root: TreeNode | None) -> list[Any]:
    """Return node data in left, root, right order."""
    result: list[Any] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            return
        visit(node.left)
        result.append(node.data)
        visit(node.right)

    visit(root)
    return result


def postorder(root: TreeNode | None) -> list[Any]:
    """Return node data in left, right, root order."""
    result: list[Any] = []

    def visit(node: TreeNode | None) -> None:
        if node is None:
            return
        visit(node.left)
        visit(node.right)
        result.append(node.data)

    visit(root)
    return result


def level_order(root: TreeNode | None) -> list[Any]:
    """Return node data level by level, left to right."""
    if root is None:
        return []
    result: list[Any] = []
    queue = deque([root])
    while queue:
        node = queue.popleft()
        result.append(node.data)
        if node.left is not None:
            queue.append(node.left)
        if node.right is not None:
            queue.append(node.right)
    return result


def iterative_preorder(root: TreeNode | None) -> list[Any]:
    """Preorder traversal with an explicit stack."""
    if root is None:
        return []
    result: list[Any] = []
    stack = [root]
    while stack:
        node = stack.pop()
        result.append(node.data)
        if node.right is not None:
            stack.append(node.right)
        if node.left is not None:
            stack.append(node.left)
    return result


def iterative_inorder(root: TreeNode | None) -> list[Any]:
    """Inorder traversal with an explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
        else:
            current = stack.pop()
            result.append(current.data)
            current = current.right
    return result


def postorder_two_stacks(root: TreeNode | None) -> list[Any]:
    """Postorder traversal using two explicit stacks."""
    if root is None:
        return []
    pending = [root]
    visited: list[TreeNode] = []
    while pending:
        node = pending.pop()
        visited.append(node)
        if node.left is not None:
            pending.append(node.left)
        if node.right is not None:
            pending.append(node.right)
    return [node.data for node in reversed(visited)]


def postorder_one_stack(root: TreeNode | None) -> list[Any]:
    """Postorder traversal using a single explicit stack."""
    result: list[Any] = []
    stack: list[TreeNode] = []
    current = root
    while current is not None or stack:
        if current is not None:
            stack.append(current)
            current = current.left
            continue
        right = stack[-1].right
        if right is not None:
            current = right
            continue
        node = stack.pop()
        result.append(node.data)
        while stack and node is stack[-1].right:
            node = stack.pop()
            result.append(node.data)
    return result


def all_orders(root: TreeNode | None) -> tuple[list[Any], list[Any], list[Any]]:
    """Return the preorder, postorder and inorder traversals from one stack pass."""
    pre: list[Any] = []
    post: list[Any] = []
    ino: list[Any] = []
    if root is None:
        return pre, post, ino
    stack: list[tuple[TreeNode, int]] = [(root, 1)]
    while stack:
        node, state = stack.pop()
        if state == 1:
            pre.append(node.data)
            stack.append((node, 2))
            if node.left is not None:
                stack.append((node.left, 1))
        elif state == 2:
            ino.append(node.data)
            stack.append((node, 3))
            if node.right is not None:
                stack.append((node.right, 1))
        else:
            post.append(node.data)
    return pre, post, ino


def height(root: TreeNode | None) -> int:
    """Number of nodes on the longest root-to-leaf path, computed recursively."""
    if root is None:
        return 0
    return 1 + max(height(root.left), height(root.right))


def max_depth(root: TreeNode | None) -> int:
    """Number of levels in the tree, counted with a level-order walk."""
    if root is None:
        return 0
    depth = 0
    queue = deque([root])
    while queue:
        depth += 1
        for _ in range(len(queue)):
            node = queue.popleft()
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)
    return depth


def is_balanced_naive(root: TreeNode | None) -> bool:
    """Tell whether every node's subtree heights differ by at most one (quadratic)."""
    if root is None:
        return True
    return (
        abs(height(root.left) - height(root.right)) <= 1
        and is_balanced_naive(root.left)
        and is_balanced_naive(root.right)
    )


def _balanced_height(node: TreeNode | None) -> int | None:
    if node is None:
        return 0
    left = _balanced_height(node.left)
    if left is None:
        return None
    right = _balanced_height(node.right)
    if right is None or abs(left - right) > 1:
        return None
    return 1 + max(left, right)


def is_balanced(root: TreeNode | None) -> bool:
    """Tell whether the tree is height-balanced, in a single pass."""
    return _balanced_height(root) is not None


def diameter(root: TreeNode | None) -> int:
    """Number of edges on the longest path between any two nodes."""
    best = 0

    def measure(node: TreeNode | None) -> int:
        nonlocal best
        if node is None:
            return 0
        left = measure(node.left)
        right = measure(node.right)
        best = max(best, left + right)
        return 1 + max(left, right)

    measure(root)
    return best