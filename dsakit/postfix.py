"""Infix to postfix conversion by the shunting-yard method."""

from __future__ import annotations

__all__ = ["precedence", "is_operator", "infix_to_postfix"]

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "^": 3}


def precedence(operator: str) -> int:
    """Return the binding strength of *operator*, or -1 for anything else."""
    return _PRECEDENCE.get(operator, -1)


def is_operator(char: str) -> bool:
    """Return True for the operators + - * / ^."""
    return char in _PRECEDENCE


def _is_operand(char: str) -> bool:
    return char.isascii() and char.isalnum()


def infix_to_postfix(infix: str) -> str:
    """Convert *infix* to postfix notation.

    Operands are single ASCII letters or digits. All operators, ``^``
    included, group left to right. Characters that are neither operands,
    operators nor parentheses are skipped.
    """
    output: list[str] = []
    stack: list[str] = []
    for token in infix:
        if _is_operand(token):
            output.append(token)
        elif token == "(":
            stack.append(token)
        elif token == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif is_operator(token):
            while stack and precedence(stack[-1]) >= precedence(token):
                output.append(stack.pop())
            stack.append(token)
    output.extend(reversed(stack))
    return "".join(output)