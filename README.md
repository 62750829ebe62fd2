# dsakit

A small library of classic data structures and algorithms, written in plain
Python with no third-party dependencies.

## What is inside

Hashing
- `dsakit.hashtable`: `OpenAddressingTable`, a fixed-size table of integer
  keys with `key % size` hashing and linear probing. `insert` returns the slot
  used and raises `TableFullError` when no slot is left; `search` returns
  `(index, value)` or `None`; `remove` raises `KeyError` for a missing key;
  `display` renders one line per slot.
- `dsakit.telephone`: telephone directories keyed by number, in two flavours:
  `LinearProbingDirectory` and `ChainedDirectory`. Both keep a running
  `comparisons` count across their searches. `hash_number` gives the home slot.

Lists and queues
- `dsakit.skiplist`: `SkipList` with `insert`, iteration in sorted order, and
  `find_closest`, which returns the nearest stored value (ties go to the
  smaller one, `None` for an empty list). An `rng` can be passed for
  reproducible levels.
- `dsakit.hospital_queue`: `HospitalQueue`, a priority queue of `Patient`
  records. A lower number is served first, and patients of equal priority are
  served in the order they arrived. `serve_patient` raises `IndexError` when
  the queue is empty.

Trees
- `dsakit.bst`: functions over `TreeNode` binary search trees: `insert`,
  `search`, `height`, `minimum`, `mirror`, `bfs`, `dfs`, `inorder` and
  `preorder`.
- `dsakit.keyword_bst`: `KeywordDictionary`, a BST from integer keys to
  meanings, with insert, update, delete, membership, and ascending or preorder
  listings.
- `dsakit.string_dictionary`: `StringDictionary`, a BST of string pairs;
  `search` raises `KeyError` for a missing key.
- `dsakit.avl`: `AVLDictionary`, a self-balancing dictionary of keywords.
  `search` returns the meaning together with the number of comparisons made;
  `ascending` and `descending` list the entries; `max_comparisons` gives the
  tree height. Re-inserting a keyword replaces its meaning unless the
  dictionary was created with `update_duplicates=False`.
- `dsakit.threaded`: threaded binary trees of `ThreadedNode` (`make_threaded`,
  `threaded_inorder`) and a stackless preorder walk (`morris_preorder`).

Parsing and coding
- `dsakit.expression_tree`: builds `ExprNode` trees from prefix text
  (`from_prefix`) or postfix text (`from_postfix`), converts infix to postfix
  (`infix_to_postfix`), and walks the trees (`inorder`, `parenthesized`,
  non-recursive `postorder`).
- `dsakit.propositional`: `parse_formula` and `to_infix` for simple
  propositional formulas such as `p|q&r`.
- `dsakit.huffman`: `build_tree`, `build_codes`, `encode` and `decode` for
  the ASCII letters of a text; other characters are skipped.

Graphs and optimisation
- `dsakit.graph`: `Graph` (BFS, DFS, connectivity) and `WeightedGraph`, both
  buildable from an adjacency matrix with `from_matrix`.
- `dsakit.paths`: `dijkstra` single-source shortest distances; unreachable
  vertices get `math.inf`.
- `dsakit.mst`: Prim's minimum spanning tree, on an adjacency matrix
  (`prim_dense`, which raises `ValueError` for a disconnected graph) or on a
  `WeightedGraph` with a heap (`prim`).
- `dsakit.obst`: optimal binary search tree cost and root tables
  (`optimal_bst` returning an `ObstResult`, and `min_search_cost`).
- `dsakit.schedule`: `min_total_time`, greedy shortest-job-first scheduling.
- `dsakit.primes`: `is_prime`, `next_prime` and `pair_sequence`.

Files of fixed-size records
- `dsakit.employees`: `EmployeeFile`, an indexed sequential file of
  `Employee` records kept in `employee_data.dat` with an id-to-offset index in
  `employee_index.dat`, inside the directory you give it.
- `dsakit.students`: `StudentFile`, a sequential file of `Student` records in
  `students.txt`.

In both, `find` and `delete` raise `KeyError` when no record matches.

## Examples

Greedy scheduling: run the shortest task first.

```python
from dsakit.schedule import min_total_time

min_total_time([3, 1, 2])  # 10
```

An AVL keyword dictionary:

```python
from dsakit.avl import AVLDictionary

words = AVLDictionary()
words.insert("apple", "A fruit")
words.insert("car", "A vehicle")
words.search("car")     # ("A vehicle", <comparisons>)
words.ascending()       # [("apple", "A fruit"), ("car", "A vehicle")]
```

Huffman coding round trip:

```python
from dsakit.huffman import build_tree, build_codes, encode, decode

text = "abracadabra"
root = build_tree(text)
codes = build_codes(root)
bits = encode(text, codes)
decode(bits, root) == text  # True
```

## What it does not do

dsakit is a library only. It has no command-line program and no interactive
menus; the record files are read and written through `EmployeeFile` and
`StudentFile` from your own code. It offers no general set type and no
n-ary tree for documents; use Python's built-in `set` and your own structures
for those.

## Running the tests

The test suite uses pytest and is listed in the `test` extra.