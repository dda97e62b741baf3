# cpnotebook

A collection of algorithms and data structures for contest-style problems,
written as plain Python with no third-party dependencies.

## What is inside

| Module | Contents |
| --- | --- |
| `cpnotebook.bits` | `popcount`, `ctz`, `clz`, `floor_log2`, `bit`, `remove_duplicates` |
| `cpnotebook.modular` | `Modular`: arithmetic modulo a fixed modulus, with `inverse` and `pow` |
| `cpnotebook.matrix` | `Matrix`: modular matrices with `@` multiplication and fast `power` |
| `cpnotebook.dsu` | `DisjointSet`: union–find with `find`, `join`, `same_set`, `size` |
| `cpnotebook.fenwick` | `FenwickTree`: point updates and prefix sums |
| `cpnotebook.segment_tree` | `SegmentTree` (point update, range sum) and `LazySegmentTree` (range add, range sum) |
| `cpnotebook.mod_sqrt` | `mod_sqrt`: square roots modulo a prime (Tonelli–Shanks) |
| `cpnotebook.fft` | `fft` and `multiply` for integer polynomial multiplication |
| `cpnotebook.cartesian_tree` | `CartesianTree` and `build_cartesian_tree` |
| `cpnotebook.fastset` | `FastSet`: a 64-ary bit-set over `[0, 2**18)` with successor and predecessor search |
| `cpnotebook.geometry` | `Point`, `Line`, orientation tests, segment intersection and distances |
| `cpnotebook.convex_hull` | `convex_hull` (keeps collinear boundary points) and `polygon_area` |
| `cpnotebook.manhattan_mst` | `manhattan_edges`: candidate edges for a Manhattan minimum spanning tree |
| `cpnotebook.convex_hull_trick` | `ConvexHullTrick`: minimum of lines added with non-increasing slopes |
| `cpnotebook.lichao_tree` | `LiChaoTree`: minimum of arbitrary lines over an integer range |
| `cpnotebook.aho_corasick` | `AhoCorasick`: counts occurrences of a set of string patterns in a text |
| `cpnotebook.suffix_array` | `SuffixArray`: suffix array, rank and LCP array |
| `cpnotebook.gauss` | `gf2_eliminate`, `solve_gf3`, `InconsistentSystemError` |
| `cpnotebook.bipartite_matching` | `BipartiteMatching`: Hopcroft–Karp, vertex cover, independent set |
| `cpnotebook.hungarian` | `hungarian`: minimum-cost assignment for a cost matrix |
| `cpnotebook.max_flow` | `MaxFlow` (Dinic) with `FlowEdge`, `max_flow` and `min_cut` |
| `cpnotebook.two_sat` | `TwoSat`: 2-SAT via strongly connected components |
| `cpnotebook.persistent_hld` | `PersistentSegmentTree`, `PathTree` and the `cpnotebook-pathtree` command |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Examples

Modular arithmetic:

```python
from cpnotebook.modular import Modular

x = Modular(3, 7)
print(int(x.inverse()))      # 5, since 3 * 5 = 15 = 1 (mod 7)
print(int(x.pow(2)))         # 2
```

Fibonacci numbers by matrix power:

```python
from cpnotebook.matrix import Matrix

step = Matrix([[1, 1], [1, 0]], 10**9 + 7)
print(step.power(10).to_lists()[0][1])   # 55
```

Polynomial multiplication:

```python
from cpnotebook.fft import multiply

print(multiply([1, 2], [3, 4]))   # [3, 10, 8]
```

Square roots modulo a prime:

```python
from cpnotebook.mod_sqrt import mod_sqrt

r = mod_sqrt(4, 7)
assert r * r % 7 == 4
```

`mod_sqrt` raises `ValueError` when the number is not a quadratic residue.

Union–find:

```python
from cpnotebook.dsu import DisjointSet

dsu = DisjointSet(5)
dsu.join(1, 2)
dsu.join(2, 3)
print(dsu.same_set(1, 3), dsu.size(1))   # True 3
```

Maximum flow:

```python
from cpnotebook.max_flow import MaxFlow

flow = MaxFlow(4, 1, 4)
flow.add_edge(1, 2, 3)
flow.add_edge(1, 3, 2)
flow.add_edge(2, 4, 2)
flow.add_edge(3, 4, 3)
print(flow.max_flow())   # 4
print(flow.min_cut())
```

2-SAT, where variable `x` is literal `x` and its negation is `negate(x)`;
`solve` returns one bool per variable, or `None` when unsatisfiable:

```python
from cpnotebook.two_sat import TwoSat

sat = TwoSat(2)
sat.add_or(0, 1)
sat.add_or(sat.negate(0), sat.negate(1))
print(sat.solve())
```

## Path updates on a tree with version history

`PathTree` maintains values on the vertices of a tree numbered `1..n` and
rooted at 1. `update_path(u, v, a, b)` adds `a, a + b, a + 2b, ...` to the
vertices along the path from `u` to `v`, in path order, and returns the index
of the new version; `query_path(u, v)` returns the sum along a path in the
current version. `checkout(version)` makes an earlier version current, and
later updates build on it. `version_count()` reports how many versions exist
(version 0 is the all-zero tree).

The `cpnotebook-pathtree` command runs this as a stream processor on
standard input:

```
cpnotebook-pathtree < input.txt
```

The input starts with `n m`, then `n - 1` tree edges `u v`, then `m`
operations. Operation arguments are offset by the previous query answer
(`last`, initially 0):

* `c u v A B` – add the progression starting at `A` with step `B` along the
  path between vertices `(u + last) % n + 1` and `(v + last) % n + 1`;
* `q u v` – print the sum along the path between the same shifted vertices,
  and make it the new `last`;
* `l x` – switch to version `(x + last) % version_count`.