# algokit

A collection of classic algorithms and data structures, written as plain
Python for reading, experimenting and teaching. It has no dependencies
outside the standard library.

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

| Module | Contents |
| --- | --- |
| `algokit.numbers` | Armstrong, perfect, strong, prime and palindrome checks, factorials (including exact digits of large ones), Fibonacci, leap years, Floyd's triangle, Gray code |
| `algokit.calculator` | Integer calculator operations and Celsius/Fahrenheit conversion |
| `algokit.hanoi` | Towers of Hanoi move sequences |
| `algokit.text` | Longest common subsequence, balanced brackets, case toggling, shift encryption, word break, keyword file helpers |
| `algokit.suffix` | Suffix array and Kasai's LCP array |
| `algokit.sorting` | Bubble, merge, quick, insertion, counting, radix and heap sort |
| `algokit.arrays` | Binary search, last-occurrence search, Kadane's maximum subarray, rotation, reversing, totals |
| `algokit.optimize` | 0/1 knapsack and minimum partition difference |
| `algokit.heap` | `MinHeap` |
| `algokit.stack` | `LinkedStack` and `QueueStack` |
| `algokit.linked` | `LinkedList` and `CircularList` |
| `algokit.polynomial` | `Polynomial` addition with ordered `Term`s |
| `algokit.avl` | Self-balancing `AVLTree` |
| `algokit.bst` | `BinarySearchTree` and tree traversals |
| `algokit.graphs` | `Graph` with BFS and topological sort, DFS over adjacency matrices, Kruskal's minimum spanning tree |
| `algokit.extras` | A number guessing game, upper-triangle matrix copy, first-come-first-served scheduling, process ids |

## Examples

```python
from algokit.numbers import factorial, gray_code, is_leap_year
from algokit.text import lcs_length, is_balanced
from algokit.suffix import suffix_array, lcp_array
from algokit.heap import MinHeap

factorial(5)                      # 120
gray_code(2)                      # [0, 1, 3, 2]
is_leap_year(2000)                # True

lcs_length("AGGTAB", "GXTXAYB")   # 4
is_balanced("[()]{}{[()()]()}")   # True
is_balanced("[(])")               # False

suffixes = suffix_array("banana") # [5, 3, 1, 0, 4, 2]
lcp_array("banana", suffixes)     # [1, 3, 0, 0, 2, 0]

heap = MinHeap()
for value in (5, 1, 4):
    heap.push(value)
heap.pop_min()                    # 1
len(heap)                         # 2
```

Popping an empty `LinkedStack` or `QueueStack` raises `StackEmptyError`;
popping an empty `MinHeap` raises `IndexError`.

## Command-line tools

Two small programs are installed with the package:

```
algokit-calc calc + 2 3       # prints "2 + 3 = 5"
algokit-calc temp C 100       # prints the value converted to Fahrenheit
algokit-hanoi 3               # prints the moves for three disks
algokit-hanoi 3 --source X --spare Y --target Z
```

## What it does not do

The tools take their input as command-line arguments; there are no
interactive prompts or menus. There is no postfix (reverse Polish)
expression evaluator.