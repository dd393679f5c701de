# algokit

A small collection of classic algorithms and data structures written in plain
Python. It has no runtime dependencies and is used as a library: there is no
command-line program.

## Installation

```
pip install algokit
```

For the test suite:

```
pip install "algokit[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `algokit.linked_list` | `LinkedList`: a singly linked list with positional `add`, `get` and `delete`, plus `len()`, iteration and `str()` |
| `algokit.stack` | `Stack` (`push`, `pop`, `peek`, `is_empty`), `EmptyStackError` |
| `algokit.queue` | `Queue` made from two stacks (`enqueue`, `dequeue`, `peek`, `is_empty`), `EmptyQueueError` |
| `algokit.priority_queue` | `PriorityQueue` (`push`, `pop`, `get`), `NodeQueueItem` |
| `algokit.union_find` | `UnionFindTree` (`merge`, `root`, `is_same`) |
| `algokit.opeval` | `evaluate` for infix arithmetic, `EvaluationError` |
| `algokit.searches` | `binary_search`, `linear_search` |
| `algokit.bst` | `Node`: a binary search tree (`search`, `insert`, `delete`, `min`, `max`) |
| `algokit.dijkstra` | `Graph.shortest_path` on a weighted directed graph |
| `algokit.breadth_first_search` | `Node`: a tree searched breadth first |
| `algokit.tsp` | `Graph.tsp`: travelling salesman by bitmask dynamic programming |
| `algokit.numeric` | `fibonacci`, `gcd`, `is_leap_year` |
| `algokit.text` | `is_anagram`, `top_words`, `morse_encode`, `morse_decode`, `is_palindrome`, `count_vowels`, `MorseError` |
| `algokit.sorting` | `bubble_sort`, `bucket_sort`, `cycle_sort`, `dutch_flag`, `gnome_sort`, `insertion_sort`, `linear_sort`, `merge_sort`, `merge`, `quick_sort`, `shell_sort` |

## Examples

Evaluating an expression:

```python
from algokit.opeval import evaluate, EvaluationError

evaluate("(1500+(127*(900-(1))))")   # 115673.0

try:
    evaluate("1 / 0")
except EvaluationError as exc:
    print(exc)                        # opeval - division by 0
```

`evaluate` understands `+`, `-`, `*`, `/` and parentheses. Spaces are
ignored and do not separate numbers. Unbalanced parentheses, unknown
characters, malformed numbers and missing operands raise `EvaluationError`.

Shortest path:

```python
from algokit.dijkstra import Graph

graph = Graph(5)
graph.append_edge(0, 1, 3)
graph.append_edge(1, 3, 2)
graph.append_edge(3, 4, 9)
graph.append_edge(0, 2, 8)
graph.append_edge(2, 4, 3)
graph.append_edge(1, 2, 3)
graph.shortest_path(0, 4)             # 9
```

Stacks and queues:

```python
from algokit.queue import Queue

queue = Queue()
for value in range(3):
    queue.enqueue(value)
queue.dequeue()                       # 0
str(queue)                            # "[1, 2]"
```

Strings:

```python
from algokit.text import morse_encode, morse_decode, top_words

morse_encode("TEST")                  # "- . ... -"
morse_decode("- . ... -")             # "test"
top_words("i love algorithm and i love coding", 2)   # ["i", "love"]
```

Sorting:

```python
from algokit.sorting import merge_sort, quick_sort

merge_sort([12, 11, 13, 5, 6, 7])     # [5, 6, 7, 11, 12, 13]
quick_sort([46, 24, 33, 10, 2, 81, 50])
```

All sorting functions return a new list and leave their input alone, except
`dutch_flag`, which partitions a list in place into its 0s, then 1s, then
everything else.

## Errors

Errors are raised as exceptions:

- an index out of range in `LinkedList` raises `IndexError`;
- an empty `Stack` or `Queue` raises `EmptyStackError` or `EmptyQueueError`
  (both subclasses of `IndexError`);
- popping an empty `PriorityQueue` raises `IndexError`;
- deleting a key that is not in a `bst.Node` tree raises `KeyError`;
- unknown Morse characters or codes raise `MorseError`.

## Behaviour worth knowing

- `Graph.shortest_path` returns 0 when the target cannot be reached.
- `tsp.Graph.tsp(start)` finds the cheapest tour that visits every node and
  ends at node 0; it returns 10000 when no such tour exists.
- `gcd(x, y)` returns `x` when the arguments are equal or `y` is zero, `y`
  when `x` is zero, and otherwise `y` divided by the largest power of two that
  divides both arguments. It is not a general greatest common divisor.
- `bucket_sort` keeps one entry per distinct value and pads the result with
  zeros to the input's length; negative values raise `ValueError`.
- `fibonacci()` is an endless generator: 0, 1, 1, 2, 3, ...
- `top_words` keeps first-appearance order among words of equal frequency.