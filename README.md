# dsaprimer

A small collection of classic data structures and algorithms in plain
Python, with no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

- `dsaprimer.sorting`: `bubble_sort`, `recursive_bubble_sort`,
  `selection_sort`, `insertion_sort`, `merge_sort` and `quick_sort`. Each
  takes any iterable and returns a new sorted list; the input is left alone.
- `dsaprimer.recursion`: small exercises: `count_up`, `repeat_name`,
  `one_to_n`, `n_to_one`, `one_to_n_backtracking`, `n_to_one_backtracking`,
  `sum_to`, `factorial`, `fibonacci`, `fibonacci_sequence`, `reverse`,
  `is_palindrome`, `count_digits`, and the subsequence helpers
  `subsequences` (a generator that takes each item before leaving it out),
  `subsequences_with_sum`, `first_subsequence_with_sum` (returns `None` when
  nothing matches) and `count_subsequences_with_sum`. `sum_to`, `factorial`,
  `fibonacci` and `fibonacci_sequence` raise `ValueError` for negative input.
- `dsaprimer.linkedlist`: a `LinkedList` class with `add_at_begin`, `append`,
  `insert_at`, `remove_first`, `remove_last` and `remove_nth` (positions are
  1-based); it supports `len()`, iteration and `str()` (items joined by
  spaces). Removing from an empty list, or `remove_nth` with a position out
  of range, raises `IndexError`. `insert_at(value, position)` inserts after
  the `position`-th item, inserts at the front for a position below 1, and
  raises `IndexError` for a position of `len(list)` or more.
- `dsaprimer.nodes`: a bare `Node` type (`data`, `next`) with functions that
  work on a chain of nodes and return the new head: `from_list`, `to_list`,
  `length`, `contains`, `insert_head`, `insert_last`, `insert_kth`,
  `insert_before_value`, `remove_head`, `remove_tail`, `remove_kth` and
  `remove_value`.
- `dsaprimer.stack`: `ArrayStack(capacity=20)` and the unbounded
  `LinkedStack`, both with `push`, `pop`, `peek` and `len()`. Pushing onto a
  full `ArrayStack` raises `StackFullError`; popping or peeking an empty stack
  raises `StackEmptyError` (a subclass of `IndexError`).
- `dsaprimer.tree`: a `TreeNode` type (`data`, `left`, `right`) with
  traversals (`preorder`, `inorder`, `postorder`, `level_order`,
  `iterative_preorder`, `iterative_inorder`, `postorder_two_stacks`,
  `postorder_one_stack`, and `all_orders`, which returns the preorder,
  postorder and inorder lists in that order) and measures (`height`,
  `max_depth`, `is_balanced_naive`, `is_balanced`, and `diameter`, counted in
  edges).

## Example

```python
from dsaprimer.sorting import merge_sort
from dsaprimer.tree import TreeNode, inorder, height

print(merge_sort([2, 5, 1, 8, 3]))   # [1, 2, 3, 5, 8]

root = TreeNode(5)
root.left = TreeNode(6)
root.right = TreeNode(10)
print(inorder(root), height(root))   # [6, 5, 10] 2
```

## Command line

`dsaprimer-sort` sorts integers with bubble sort. Give the integers as
arguments, or give none and it reads a count followed by that many integers
from standard input. It prints a `Bubble Sort` header line and then the
sorted values, each followed by a space:

```
dsaprimer-sort 5 2 4 1 9
echo "5 5 2 4 1 9" | dsaprimer-sort
```

This is the only command; the other modules are used as a library.