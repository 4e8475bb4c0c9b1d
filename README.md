# dsakit

Compact implementations of classic data structures and algorithms:
fixed-capacity stacks and queues, stack-based "nearest element"
problems, simple sequence helpers, grid utilities, bit tricks, merge
sort, greedy algorithms and binary tree traversals.

The package has no runtime dependencies.

## Installation

```
pip install dsakit
```

To run the test suite:

```
pip install "dsakit[test]"
pytest
```

## Modules

| Module             | What it offers |
|--------------------|----------------|
| `dsakit.stacks`    | `BoundedStack`, `TwoStack` (two stacks sharing one capacity), `middle_element`, `insert_sorted`, `monotonic_increasing`, `next_smaller`, `previous_greater`, `previous_smaller` |
| `dsakit.queues`    | `ArrayQueue`, `CircularQueue`, `insert_after_first` |
| `dsakit.recursion` | `doubled`, `linear_search`, `maximum`, `odd_elements`, `digits`, `is_sorted` |
| `dsakit.grid`      | `rows`, `columns`, `contains`, `grid_max`, `grid_min`, `row_sums`, `column_sums`, `diagonal_sum` |
| `dsakit.bits`      | `bit_operations`, `is_bit_set`, and the `main` entry point of `dsakit-setbit` |
| `dsakit.sorting`   | `merge_sort` (stable, returns a new list) |
| `dsakit.greedy`    | `fractional_knapsack`, `largest_free_area`, `min_rope_cost`, `max_affordable_items`, `heap_order` |
| `dsakit.trees`     | `Node` and the traversals `preorder`, `inorder`, `postorder`, `level_order`, `levels`, `zigzag`, `left_view`, `right_view`, `top_view` |

Fixed-capacity containers raise exceptions instead of silently ignoring
bad operations: `StackOverflowError` / `StackUnderflowError` for
`BoundedStack` and `TwoStack`, and `QueueFullError` / `QueueEmptyError`
for `ArrayQueue` and `CircularQueue`. A capacity below zero (stacks) or
below one (queues) raises `ValueError`.

`CircularQueue` reuses freed slots as soon as the front advances;
`ArrayQueue` only starts again from the first slot once it has been
emptied. Both expose `slots()`, the underlying storage with `None` in
empty places.

`next_smaller`, `previous_greater` and `previous_smaller` return `-1`
for elements that have no such neighbour.

## Examples

```python
from dsakit.stacks import BoundedStack, next_smaller
from dsakit.sorting import merge_sort
from dsakit.greedy import min_rope_cost
from dsakit.recursion import is_sorted

stack = BoundedStack(5)
stack.push(3)
stack.push(2)
stack.push(9)
stack.pop()
print(stack.peek())                     # 2

print(next_smaller([5, 6, 2, 1]))       # [2, 2, 1, -1]
print(merge_sort([2, 1, 5, 9, 4, 5]))   # [1, 2, 4, 5, 5, 9]
print(min_rope_cost([2, 3, 4, 6]))      # 29
print(is_sorted([1, 2, 3, 4, 5]))       # True
```

Binary trees are built from `Node` objects and walked with the
traversal functions:

```python
from dsakit.trees import Node, inorder, levels

root = Node(1, Node(2), Node(3))

print(inorder(root))   # [2, 1, 3]
print(levels(root))    # [[1], [2, 3]]
```

## Command line

`dsakit-setbit` reports whether bit K (counted from 1 at the least
significant bit) of an integer N is set. N and K are taken from the
arguments, or read from standard input when fewer than two are given:

```
dsakit-setbit 5 1
echo "5 2" | dsakit-setbit
```

It prints `set haiii` when the bit is set and `not set` otherwise. If
the input is not two integers, or K is below 1, it prints an error to
standard error and exits with status 1.

The other modules are libraries only; they have no command-line front end.