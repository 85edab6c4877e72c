# dsakit

A small collection of classic data structures and algorithms, written as
plain Python objects that return values instead of printing. Several of
them also offer a `render()` method that returns a text table of their
contents.

No third-party libraries are needed.

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
| `dsakit.graphs` | `Graph`: undirected graph over nodes `0 .. size - 1` with recursive and iterative depth-first search and breadth-first search |
| `dsakit.flights` | `FlightNetwork`: travel times in minutes between named cities, kept as a matrix |
| `dsakit.hashing` | `LinearProbingTable`, `QuadraticProbingTable`, `TableFullError`: open addressing that counts comparisons |
| `dsakit.chained` | `ProbeChainedTable`, `HomeChainedTable`, `Record`: a phone book in an open addressing table whose colliding records are linked into chains |
| `dsakit.dictionary` | `ChainedDict`: separate-chaining map of integer keys |
| `dsakit.obst` | `optimal_bst`, `OptimalBST`: optimal binary search tree by dynamic programming |
| `dsakit.avl` | `AVLDictionary`, `SearchResult`: self-balancing word dictionary that counts comparisons |
| `dsakit.heapsort` | `heap_sort`, `mark_range`, `MarkRange` |
| `dsakit.students` | `Student`, `StudentFile`: fixed-size binary student records in a file |
| `dsakit.book` | `Book`, `Chapter`, `Section`: a book outline |
| `dsakit.expression` | `ExprNode`, `build_prefix_tree`, `preorder`, `postorder`, `deletion_order` |
| `dsakit.bst` | `BinarySearchTree`: insertion, traversals, height, minimum, search, mirror |

## Examples

### Graph traversal

```python
from dsakit.graphs import Graph

g = Graph(4)
for u, v in [(0, 1), (0, 2), (1, 3), (2, 3)]:
    g.add_edge(u, v)

g.dfs_recursive(0)   # [0, 1, 3, 2]
g.dfs_iterative(0)   # [0, 1, 3, 2]
g.bfs(0)             # [0, 1, 2, 3]
g.bfs_recursive(0)   # [0, 1, 2, 3]
```

`bfs` visits neighbours in the order their edges were added; the other
traversals visit them in ascending order. Nodes outside the graph raise
`ValueError`.

### Flight times

```python
from dsakit.flights import FlightNetwork

net = FlightNetwork(["Pune", "Delhi"])
net.set_time("Pune", "Delhi", 120)
net.time("Pune", "Delhi")   # 120
net.time("Delhi", "Pune")   # 0: no direct path
print(net.render())
```

Unknown city names raise `KeyError`; duplicate names raise `ValueError`.

### Open addressing with comparison counts

```python
from dsakit.hashing import LinearProbingTable, QuadraticProbingTable

table = LinearProbingTable(10)
table.insert(12)             # 1 comparison, slot 2
table.insert(22)             # 2 comparisons, slot 3
table.comparisons()          # [(12, 1), (22, 2)]
table.total_comparisons()    # 3
print(table.render())        # "0 ------> NULL" ... one line per slot
```

`QuadraticProbingTable` probes `home + i * i`. Both raise `TableFullError`
when `size` probes find no free slot.

### Phone book with chained records

```python
from dsakit.chained import HomeChainedTable

book = HomeChainedTable(10)
book.insert("asha", 11)   # slot 1
book.insert("ravi", 21)   # collides, goes to slot 2, chained from slot 1
book.search(21)           # 2
book.delete(11)           # returns the removed Record
print(book.render())
```

`ProbeChainedTable` links a new record from the chain running through the
slot just before the one it lands in; `HomeChainedTable` links it from its
home slot. `search` returns `None` when the number is absent; `delete`
raises `KeyError`.

### Separate chaining

```python
from dsakit.dictionary import ChainedDict

d = ChainedDict(10)
d.insert(4, 65)
d.find(4)      # 65
4 in d         # True
d.delete(4)    # 65
```

Missing keys raise `KeyError`. New keys go to the front of their bucket.

### Search trees

```python
from dsakit.bst import BinarySearchTree
from dsakit.avl import AVLDictionary

bst = BinarySearchTree()
for value in (50, 30, 70, 20):
    bst.insert(value)
bst.inorder()    # [20, 30, 50, 70]
bst.minimum()    # 20
bst.height()     # 3
bst.search(70)   # True
bst.mirror()
bst.inorder()    # [70, 50, 30, 20]

words = AVLDictionary()
words.insert("apple", "a fruit")
words.insert("book", "something to read")
words.search("book")   # SearchResult(found=True, comparisons=2, meaning='something to read')
words.items()          # [('apple', 'a fruit'), ('book', 'something to read')]
words.height()         # 2
```

### Optimal BST and heap sort

```python
from dsakit.obst import optimal_bst
from dsakit.heapsort import heap_sort, mark_range

tree = optimal_bst([10, 20, 30], [0.2, 0.5, 0.3])
tree.cost          # 1.5
tree.root_order()  # [20, 10, 30]

heap_sort([5, 1, 4, 2])     # [1, 2, 4, 5]
mark_range([67, 88, 45])    # MarkRange(highest=88, lowest=45)
```

`mark_range` raises `ValueError` for no marks.

### Prefix expressions

```python
from dsakit.expression import build_prefix_tree, preorder, postorder, deletion_order

root = build_prefix_tree("+a*bc")
preorder(root)         # '+a*bc'
postorder(root)        # 'abc*+'
deletion_order(root)   # ['a', 'b', 'c', '*', '+']
```

Operands are single letters; characters other than letters and `+ - * /`
are ignored, and a malformed expression raises `ValueError`.

### Student records

```python
from dsakit.students import Student, StudentFile

records = StudentFile("student.txt")
records.write_all([Student("asha", 1, "A"), Student("ravi", 2, "B")])
records.append([Student("meera", 3, "A")])
records.search(2)    # [Student(name='ravi', roll=2, div='B')]
records.delete(1)    # removes and returns the matching records
records.read_all()
```

Each record is a fixed-size binary entry: names up to 9 bytes of UTF-8 and
a one-character ASCII division. `search` and `delete` raise `KeyError`
when no record has the roll number.

## What the package does not do

There is no command-line program and no interactive menu: every structure
is used from Python code. Apart from `StudentFile`, nothing is saved to
disk; graphs, tables, trees and outlines live in memory only.