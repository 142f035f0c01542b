# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies. It covers searching, sorting, a bounded stack, bracket
checking, a chained hash table, singly and doubly linked lists,
infix-to-postfix conversion and binary tree traversals.

## Installation

```
pip install dsakit
```

To run the test suite, install the test extra and run pytest:

```
pip install "dsakit[test]"
pytest
```

## Searching

Both searches return an index, or `None` when the target is not there.

```python
from dsakit.searching import linear_search, binary_search

linear_search([5, 3, 8, 6, 7, 2, 4], 7)   # 4
linear_search([5, 3, 8, 6, 7, 2, 4], 9)   # None
binary_search([2, 3, 4, 10, 40], 10)      # 3  (input must be sorted ascending)
binary_search([2, 3, 4, 10, 40], 5)       # None
```

## Sorting

Each sort accepts any iterable, returns a new ascending list and leaves its
input unchanged. `merge_sort` is stable.

```python
from dsakit.sorting import selection_sort, heap_sort, quick_sort, merge_sort

selection_sort([64, 25, 12, 22, 11])       # [11, 12, 22, 25, 64]
heap_sort([12, 11, 13, 5, 6, 7])           # [5, 6, 7, 11, 12, 13]
quick_sort([10, 7, 8, 9, 1, 5])            # [1, 5, 7, 8, 9, 10]
merge_sort([38, 27, 43, 3, 9, 82, 10])     # [3, 9, 10, 27, 38, 43, 82]
```

## Stack and brackets

`BoundedStack` holds at most `capacity` items (5 by default). Iterating goes
from the bottom of the stack to the top.

```python
from dsakit.stack import BoundedStack, StackOverflowError, StackUnderflowError
from dsakit.brackets import is_balanced

stack = BoundedStack(5)
for value in (10, 20, 30, 40, 50):
    stack.push(value)
stack.is_full()      # True
stack.pop()          # 50
stack.peek()         # 40
len(stack)           # 4
print(stack)         # Stack elements: 10 20 30 40

is_balanced("{[()]}")   # True
is_balanced("([)]")     # False
is_balanced("(a+b")     # False
```

Pushing onto a full stack raises `StackOverflowError` (a subclass of
`OverflowError`); popping or peeking an empty one raises
`StackUnderflowError` (a subclass of `IndexError`). An empty stack prints as
`Stack is empty.`. A negative capacity raises `ValueError`.

`is_balanced` checks `()`, `[]` and `{}` and ignores every other character.

## Hash table

`ChainedHashTable` has a fixed number of buckets (10 by default) and resolves
collisions by separate chaining; a key's bucket is its hash modulo the table
size. A new entry goes to the front of its bucket, so when a key is inserted
twice the most recent value is the one found.

```python
from dsakit.hashtable import ChainedHashTable

table = ChainedHashTable(10)
table.insert(1, 100)
table.insert(11, 200)
table.search(11)     # 200
7 in table           # False
len(table)           # 2
table.search(7)      # raises KeyError
```

A table size that is not positive raises `ValueError`.

## Linked lists

Both lists can be built from an iterable, support `append`, `prepend`,
`remove`, `position`, `len()` and iteration. `position` counts from 1 and
returns `None` when the value is absent; `remove` unlinks the first matching
node and raises `ValueError` if there is none.

```python
from dsakit.linked_list import SinglyLinkedList
from dsakit.doubly_linked_list import DoublyLinkedList

items = SinglyLinkedList([10, 20, 30])
items.prepend(5)
items.position(20)   # 3
items.remove(20)
print(items)         # Linked List: 5 -> 10 -> 30 -> NULL

both = DoublyLinkedList([10, 20, 30])
both.prepend(5)
both.remove(20)
both.format_forward()    # "Doubly Linked List (Forward): 5 <-> 10 <-> 30 <-> NULL"
both.format_backward()   # "Doubly Linked List (Backward): 30 <-> 10 <-> 5 <-> NULL"
list(reversed(both))     # [30, 10, 5]
```

An empty list of either kind renders as `List is empty.`.

## Infix to postfix

Operands are single ASCII letters or digits; the operators are `+ - * / ^`,
all grouping left to right. Any other character is skipped.

```python
from dsakit.postfix import infix_to_postfix, precedence, is_operator

infix_to_postfix("a+b*(c^d-e)")   # "abcd^e-*+"
precedence("*")                    # 2
precedence("x")                    # -1
is_operator("^")                   # True
```

## Binary tree traversals

Each traversal is a generator over the nodes' data.

```python
from dsakit.tree import TreeNode, inorder, preorder, postorder, level_order

root = TreeNode(1,
    TreeNode(2, TreeNode(4), TreeNode(5)),
    TreeNode(3, TreeNode(6), TreeNode(7)),
)
list(inorder(root))      # [4, 2, 5, 1, 6, 3, 7]
list(preorder(root))     # [1, 2, 4, 5, 3, 6, 7]
list(postorder(root))    # [4, 5, 2, 6, 7, 3, 1]
list(level_order(root))  # [1, 2, 3, 4, 5, 6, 7]
```

## What it does not do

dsakit is a library only. It has no command-line program and does not read
input from the terminal; call its functions and classes from your own code.