# algokit

A compact collection of classic data structures and algorithms, together with
a set of small command-line programs that solve algorithmic puzzles. It uses
the standard library only.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Library overview

### Data structures

- `algokit.bst`: `Node`, `BinarySearchTree` and `min_value`. The tree supports
  iterative and recursive insertion (`insert`, `r_insert`), lookup (`contains`,
  `r_contains`, and the `in` operator), `delete`, `min_value`, breadth-first
  traversal (`bfs`) and the three depth-first orders (`dfs_pre_order`,
  `dfs_in_order`, `dfs_post_order`), each returned as a list. `insert` returns
  `False` for a value that is already present; `r_insert` ignores it.
  `min_value` raises `ValueError` on an empty tree.
- `algokit.linked_list`: `LinkedList` with `insert_at_beginning`,
  `insert_at_end`, `delete_first`, `search`, `reverse` and `has_cycle`.
  Iterating over it yields its values from the head.
- `algokit.hash_table`: `HashTable`, a fixed seven-bucket table of string keys
  and integer values with separate chaining (`set`, `get`, `keys`,
  `format_table`). `get` of a missing key gives `0`. The module also has
  `find_duplicates` and `item_in_common` for lists of integers.
- `algokit.graph`: `Graph`, an undirected graph kept as an adjacency list
  (`add_vertex`, `add_edge`, `remove_edge`, `remove_vertex`, `neighbours`,
  `format_graph`). The mutating methods return `False` when a named vertex is
  missing (or, for `add_vertex`, already there).
- `algokit.heaps`: `MaxHeap` and `MinHeap`, array-backed binary heaps with
  `insert`, `remove`, `sink_down` and `items`. `remove` on an empty heap
  raises `IndexError`.
- `algokit.stack`: a generic `Stack` with `push`, `pop`, `top` and `empty`;
  iterating goes from the top down. `pop` and `top` on an empty stack raise
  `IndexError`.

```python
from algokit.bst import BinarySearchTree

tree = BinarySearchTree()
for value in (47, 21, 76, 18, 27, 52, 82):
    tree.insert(value)

print(27 in tree)            # True
print(tree.dfs_in_order())   # [18, 21, 27, 47, 52, 76, 82]
```

### Sorting

`algokit.sorting` provides `bubble_sort`, `insertion_sort`, `selection_sort`,
`heap_sort` and `quick_sort`, each returning a sorted copy of its input, plus
`merge_sorted` to merge two sorted sequences and `kth_smallest` (1-based) for
order statistics.

```python
from algokit.sorting import merge_sorted, quick_sort

print(quick_sort([8, 4, 7, 3, 1, 9, 10, 2, 1]))
print(merge_sorted([1, 3, 5], [2, 4, 6]))
```

### Algorithms

- `algokit.tree_report`: `build_tree`, `pre_order`, `in_order`, `post_order`,
  `level_order`, `level_rows`, `height`, `count_nodes_at_level` and
  `read_numbers`: build a search tree from numbers and report its traversals,
  with `"X"` marking missing children in the level rows.
- `algokit.kruskal`: `Edge`, `UnionFind`, `kruskal_mst` and `read_matrix`;
  the weight of a minimum spanning tree of a graph given as an adjacency
  matrix, where zero means no edge.
- `algokit.subset`: `count_subsets`, the number of subsets of positive numbers
  that add up to a target, and `parse_numbers`.
- `algokit.tunnels`: `QuantumTunnelSolver`, shortest paths with Dijkstra's
  algorithm on nodes numbered from 1, through every mandatory checkpoint.
- `algokit.repeats`: `find_repeated` and `longest_repeated`, the longest
  substring that appears at least *k* times.
- `algokit.superstring`: `find_overlap`, `shortest_superstring`,
  `greedy_superstring` and `assemble`, which tries every ordering for up to
  ten fragments and merges greedily beyond that.
- `algokit.cipher`: `apply_transformation`, pattern replacement in which
  adjacent matches collapse into a single replacement.
- `algokit.crystals`: `sort_digits` and `real_crystals`, counting and summing
  signatures whose digit-sorted form differs from the original by a multiple
  of *k*.
- `algokit.production`: `can_complete_in_time` and `minimum_time`, the least
  time in which production lines can finish all orders.
- `algokit.fibonacci` (`fibonacci`, `generate_fibonacci`, `even_fibonacci`),
  `algokit.string_order` (`contains_digit`, `order_strings`),
  `algokit.grades` (`average`, `median`, `parse_grade`, `Gradebook`),
  `algokit.people` (`PeopleRegistry`) and `algokit.calculator` (`calculate`).

## Command-line programs

Programs that work on a file take its path as an argument:

```
algokit-tree numbers.txt            # every number in the file
algokit-tree-levels numbers.txt     # numbers on the first line only
algokit-kruskal matrix.txt          # one matrix row per line
algokit-subset numbers.txt 10       # file of numbers and a positive target
```

Puzzle programs read their input from standard input:

```
algokit-crystals < input.txt
algokit-tunnels < input.txt
algokit-repeats < input.txt
algokit-superstring < input.txt
algokit-cipher < input.txt
algokit-production < input.txt
```

Interactive programs prompt (in Slovak) for what they need and stop at the end
of input:

```
algokit-calculator
algokit-fibonacci
algokit-sort-strings
algokit-people
algokit-grades
algokit-stack
```

`algokit-people` keeps its records as `name age` lines in `people.txt` in the
current working directory.

## Limitations

- `HashTable` never grows beyond its seven buckets, and setting a key twice
  adds a second entry instead of replacing the first; `get` returns the first.
- The people registry is a plain text file with no locking; there is no
  database behind it.
- The grade book and the stack live only for the length of one run; nothing is
  saved.