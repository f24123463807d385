# dsakit

A small collection of classic data structures and algorithms in plain Python,
with no dependencies outside the standard library.

## What is inside

| Module              | Provides                                                                   |
|---------------------|----------------------------------------------------------------------------|
| `dsakit.dynarray`   | `DynamicArray`: a growable array that doubles its capacity when full       |
| `dsakit.linkedlist` | `LinkedList`: a singly linked list that inserts at the head                |
| `dsakit.stack`      | `Stack`: a last-in, first-out stack built on `LinkedList`                  |
| `dsakit.arrayqueue` | `ArrayQueue`: a first-in, first-out queue built on `DynamicArray`          |
| `dsakit.stackqueue` | `StackQueue`: a first-in, first-out queue built from two stacks            |
| `dsakit.palindrome` | `is_palindrome`, `describe` and an interactive checker                     |
| `dsakit.bst`        | `BinarySearchTree` with an in-order `InOrderIterator`                      |
| `dsakit.pq`         | `PriorityQueue`: a binary min-heap (lowest priority value first)           |
| `dsakit.dijkstra`   | `Graph`, `parse_graph`, `load_graph`, `shortest_paths`, `format_paths`     |
| `dsakit.benchmark`  | `InsertTiming`, `generate_random_data`, `time_inserts`                     |

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

### Dynamic array and linked list

```python
from dsakit.dynarray import DynamicArray
from dsakit.linkedlist import LinkedList

array = DynamicArray()      # starts with room for 2 values
for n in (10, 20, 30):
    array.insert(n)         # appends at the end
array.capacity()            # 4
array[1]                    # 20
array.remove(0)             # 10, later values shift forward
list(array)                 # [20, 30]

items = LinkedList()
for n in (3, 2, 1):
    items.insert(n)         # inserts at the head
list(items)                 # [1, 2, 3]
items.position(2)           # 1
items.position(9)           # -1
items.reverse()
list(items)                 # [3, 2, 1]
items.remove(2)             # True
```

Indexing a `DynamicArray` outside `0 <= index < len(array)` raises
`IndexError`. `LinkedList.remove` and `LinkedList.position` take an optional
`eq(value, item)` function that decides equality; it defaults to `==`.

### Stacks and queues

```python
from dsakit.stack import Stack
from dsakit.stackqueue import StackQueue

stack = Stack()
for n in (1, 2, 3):
    stack.push(n)
stack.top()   # 3
stack.pop()   # 3

queue = StackQueue()
for n in (1, 2, 3):
    queue.enqueue(n)
queue.front()    # 1
queue.dequeue()  # 1
len(queue)       # 2
```

`ArrayQueue` offers the same `enqueue`, `front`, `dequeue`, `is_empty` and
`len()` operations on top of a `DynamicArray`. Taking the top of an empty
stack or the front of an empty queue raises `IndexError`.

### Binary search tree

```python
from dsakit.bst import BinarySearchTree

tree = BinarySearchTree()
for key in (64, 32, 96, 16, 48, 80, 112, 8, 24, 56, 88, 104, 120):
    tree.insert(key, str(key))

len(tree)                 # 13
tree.height()             # 3
48 in tree                # True
tree.get(48)              # "48"
tree.get(50)              # None
tree.range_sum(8, 120)    # 848
tree.range_sum(30, 90)    # 368
tree.path_sum(120)        # True  (64 + 32 + 16 + 8)
tree.remove(64)
64 in tree                # False
```

Inserting a key that is already present replaces its value. Iterating over a
tree, directly or with `InOrderIterator`, yields `(key, value)` pairs in
ascending key order; `InOrderIterator.has_next()` tells whether any remain.

### Priority queue

```python
from dsakit.pq import PriorityQueue

pq = PriorityQueue()
pq.insert("write report", 3)
pq.insert("fix outage", 1)
pq.insert("lunch", 2)

pq.first()            # "fix outage"
pq.first_priority()   # 1
pq.remove_first()     # "fix outage"
len(pq)               # 2
```

The element with the **lowest** priority value always comes out first.
Inserting the value `None` does nothing, and reading from an empty queue
raises `IndexError`.

### Palindromes

```python
from dsakit.palindrome import describe, is_palindrome

is_palindrome("Madam, I'm Adam")   # True
is_palindrome("ABCBA")             # True
is_palindrome("hello")             # False
describe("ABCBA")                  # 'The string "ABCBA" is a palindrome.'
```

Only ASCII letters are compared, and case is ignored.

### Shortest paths

```python
from dsakit.dijkstra import format_paths, parse_graph, shortest_paths

graph = parse_graph("4 4  0 1 5  0 2 9  1 2 2  2 3 1")
distances, previous = shortest_paths(graph, 0)
distances   # [0, 5, 7, 8]
previous    # [0, 0, 1, 2]
print(format_paths(distances, previous, 0))
```

Nodes that cannot be reached keep the distance `9999999` and the previous
node `-1`; the start node is its own previous node. `parse_graph` raises
`ValueError` for malformed data or edges naming unknown nodes.

## Command-line tools

### `dsakit-palindrome`

Prompts for lines of text on standard input and reports for each one whether
it is a palindrome. Press Ctrl-D to finish.

```
dsakit-palindrome
```

### `dsakit-dijkstra`

Reads a weighted directed graph and prints the cheapest cost from the start
node (0 unless `--start` says otherwise) to every node, together with the
previous node on that path. The file defaults to `airports.dat` in the current
directory.

```
dsakit-dijkstra airports.dat
dsakit-dijkstra graph.txt --start 2
```

The graph file starts with the number of nodes and the number of edges,
followed by one `from to cost` triple per edge, all separated by whitespace.
A cost of 0 means there is no edge.

```
4 4
0 1 5
0 2 9
1 2 2
2 3 1
```

For this file the output is:

```
Shortest path costs from node 0:
To node 0: 0, Previous node: 0
To node 1: 5, Previous node: 0
To node 2: 7, Previous node: 1
To node 3: 8, Previous node: 2
```

### `dsakit-benchmark`

Inserts random integers into a `DynamicArray` and into a `LinkedList`, timing
every insert in CPU time, and prints the total insertion time and the slowest
single insertion for each. `--size` sets how many values are inserted
(default 1,000,000) and `--seed` makes the data repeatable.

```
dsakit-benchmark
dsakit-benchmark --size 100000 --seed 1
```

## What it does not do

No graph data file comes with the package: `dsakit-dijkstra` needs one to be
supplied in the format above.