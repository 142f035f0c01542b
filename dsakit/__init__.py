"""Classic data structures and algorithms in plain Python."""

__version__ = "0.1.0"

__all__ = [
    "brackets",
    "doubly_linked_list",
    "hashtable",
    "linked_list",
    "postfix",
    "searching",
    "sorting",
    "stack",
    "tree",
]