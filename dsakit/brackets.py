"""Checking that brackets in an expression are balanced."""

from __future__ import annotations

__all__ = ["is_balanced"]

_PAIRS = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_PAIRS.values())


def is_balanced(expression: str) -> bool:
    """Return True if every (), [] and {} in *expression* is properly matched.

    Characters other than brackets are ignored.
    """
    stack: list[str] = []
    for char in expression:
        if char in _OPENING:
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack