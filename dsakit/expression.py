"""Expression trees built from prefix notation."""

from __future__ import annotations

from dataclasses import dataclass

OPERATORS = frozenset("+-*/")


@dataclass
class ExprNode:
    """An operand letter or an operator with its two operands."""

    data: str
    left: ExprNode | None = None
    right: ExprNode | None = None


def build_prefix_tree(prefix: str) -> ExprNode:
    """Build the tree of a prefix expression of single-letter operands.

    Characters that are neither letters nor ``+ - * /`` are ignored.
    """
    stack: list[ExprNode] = []
    for char in reversed(prefix):
        if char.isascii() and char.isalpha():
            stack.append(ExprNode(char))
        elif char in OPERATORS:
            if len(stack) < 2:
                raise ValueError(f"operator {char!r} lacks operands in {prefix!r}")
            first = stack.pop()
            second = stack.pop()
            stack.append(ExprNode(char, first, second))
    if len(stack) != 1:
        raise ValueError(f"malformed prefix expression: {prefix!r}")
    return stack[0]


def preorder(node: ExprNode | None) -> str:
    """The tree written back in prefix order."""
    if node is None:
        return ""
    return node.data + preorder(node.left) + preorder(node.right)


def postorder(node: ExprNode | None) -> str:
    """The tree in postfix order, walked without recursion using two stacks."""
    if node is None:
        return ""
    pending = [node]
    collected: list[ExprNode] = []
    while pending:
        current = pending.pop()
        collected.append(current)
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)
    return "".join(n.data for n in reversed(collected))


def deletion_order(node: ExprNode | None) -> list[str]:
    """The order nodes are released in when the tree is torn down."""
    if node is None:
        return []
    return deletion_order(node.left) + deletion_order(node.right) + [node.data]