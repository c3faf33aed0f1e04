# algobox

A collection of classic algorithms and data structures in plain Python, with
no third-party dependencies.

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

- `algobox.searching`: `binary_search(item, arr)`,
  `binary_search_rec(items, target, left=0, right=None)` and
  `linear_search(item, arr)`. Each returns the index found, or `None`.
- `algobox.ciphers`
  - `rotation`: `caesar(text, shift)`, `rot13(text)` (upper-cases the text
    first) and `another_rot13(text)` (keeps case). Only ASCII letters are
    rotated.
  - `vigenere`: `vigenere(plain_text, key)`. Only the ASCII letters of the key
    count; with none, the text comes back unchanged.
  - `morse`: `encode(message)` and `decode(code)`. Unknown characters encode
    as `........`; unknown Morse tokens decode as `_`; `decode` raises
    `ValueError` on anything besides dots, dashes, spaces and slashes.
- `algobox.data_structures`
  - `avl_tree.AVLTree`: a self-balancing set with `insert`, `remove`, `in`,
    `len()`, sorted iteration and `is_balanced()`.
  - `binary_search_tree.BinarySearchTree`: `insert`, `search`, `minimum`,
    `maximum`, `floor`, `ceil` and in-order iteration.
  - `heap`: `Heap(comparator)`, `MinHeap()` and `MaxHeap()`. A heap is its own
    iterator: iterating pops its values in order.
  - `trie.Trie`: maps sequences (strings, lists, ...) to values with `insert`
    and `get`.
- `algobox.graph`: `bellman_ford.bellman_ford`, `dijkstra.dijkstra`,
  `prim.prim` and `prim.prim_with_start`, each working on graphs given as
  `{vertex: {neighbour: weight}}`. The shortest-path functions return
  `{vertex: (predecessor, distance)}` with the start mapped to `None`;
  `bellman_ford` returns `None` when it finds a negative cycle.
- `algobox.dynamic_programming`
  - `coin_change.coin_change(coins, amount)`
  - `fibonacci.fibonacci(n)` and `fibonacci.recursive_fibonacci(n)`, with
    F(0) = F(1) = 1
  - `knapsack.knapsack(capacity, weights, values)`, returning
    `(best value, total weight, item numbers counted from 1)`
  - `subsequences.longest_common_subsequence(a, b)` and
    `subsequences.longest_continuous_increasing_subsequence(items)`
  - `maximum_subarray.maximum_subarray(array)`
- `algobox.strings`
  - `matching.knuth_morris_pratt(text, pattern)` and
    `matching.rabin_karp(target, pattern)`, which report the UTF-8 byte
    offsets of every match, overlaps included; `matching.rolling_hash(s)` is
    the hash used by `rabin_karp`.
  - `manacher.manacher(s)`: the longest palindromic substring.
- `algobox.general`: `hanoi.hanoi(n, source, target, via)` returns the list
  of moves; `convex_hull.convex_hull_graham(points)` returns the hull
  counter-clockwise.

## Examples

```python
from algobox.searching import binary_search
from algobox.ciphers.rotation import caesar
from algobox.ciphers.morse import encode
from algobox.data_structures.avl_tree import AVLTree
from algobox.data_structures.heap import MinHeap
from algobox.graph.dijkstra import dijkstra
from algobox.dynamic_programming.coin_change import coin_change
from algobox.dynamic_programming.knapsack import knapsack
from algobox.strings.matching import knuth_morris_pratt

print(binary_search(4, [1, 2, 3, 4]))   # 3
print(caesar("rust", 13))               # ehfg
print(encode("Hello Morse"))            # .... . .-.. .-.. --- / -- --- .-. ... .

tree = AVLTree(range(1, 8))
print(4 in tree, len(tree))             # True 7

heap = MinHeap()
for value in (4, 2, 9):
    heap.add(value)
print(list(heap))                       # [2, 4, 9]

graph = {"a": {"b": 1}, "b": {}}
print(dijkstra(graph, "a"))             # {'a': None, 'b': ('a', 1)}

print(coin_change([1, 2, 5], 11))       # 3
print(knapsack(26, [12, 7, 11, 8, 9], [24, 13, 23, 15, 16]))  # (51, 26, [2, 3, 4])
print(knuth_morris_pratt("abababa", "ab"))                    # [0, 2, 4]
```

## What the package does not do

The package has no sorting routines, no general adjacency-list graph class
(the graph algorithms take plain nested dictionaries instead), and no edit
distance. It is a library only and installs no command.