# juez

A collection of classic data structures together with solvers for a series
of judge-style exercises built on top of them. It has no dependencies beyond
the Python standard library.

## Data structures

| Module              | Contents                                                        |
|---------------------|-----------------------------------------------------------------|
| `juez.linked`       | `LinkedList`, `DoublyLinkedList`                                |
| `juez.deque`        | `Deque`, and `List` with positional `Cursor` insert/erase       |
| `juez.fifo`         | `Queue`                                                         |
| `juez.stack`        | `Stack`                                                         |
| `juez.bintree`      | `BinTree` with pre/in/post/level-order traversals, `read_tree`  |
| `juez.search_set`   | `SearchSet`, an ordered set on a binary search tree             |
| `juez.hashmap`      | `HashMap` (chained hashing), `HashMapCursor`, `next_prime`      |
| `juez.horas`        | `Hora`, a time of day with parsing, ordering and addition       |

Operations on empty containers raise exceptions (`IndexError` for the linear
containers, `ValueError` for an empty `BinTree`) instead of returning
sentinels:

```python
from juez.deque import Deque

d = Deque([1, 2, 3])
d.push_front(0)
print(d.front(), d.back(), len(d))   # 0 3 4
```

```python
from juez.bintree import BinTree

tree = BinTree(BinTree(1), 2, BinTree(3))
print(tree.inorder())     # [1, 2, 3]
print(tree.levelorder())  # [2, 1, 3]
```

`Hora` validates its fields, prints as `hh:mm:ss` and raises
`OverflowError` when a sum reaches a full day:

```python
from juez.horas import Hora

print(Hora.parse("10:30:00") + Hora(1, 15, 5))   # 11:45:05
```

## Exercise solvers

Each exercise module offers a `solve(text)` function that takes the whole
input as a string and returns the expected output, plus the functions or
classes it is built on:

| Module              | Building blocks                                                  |
|---------------------|------------------------------------------------------------------|
| `juez.referencias`  | `index_words`, `format_index`                                    |
| `juez.pillo_toro`   | `tally_corrections`                                              |
| `juez.ocurrencias`  | `build_index`, `kth_occurrence`                                  |
| `juez.diccionario`  | `parse_dictionary`, `diff_dictionaries`, `format_diff`           |
| `juez.deportes`     | `rank_sports`                                                    |
| `juez.capitulos`    | `longest_unique_run`                                             |
| `juez.ranking`      | `rank_teams`, `TeamResult`                                       |
| `juez.bingo`        | `bingo_winners`                                                  |
| `juez.autoescuela`  | `DrivingSchool`, `NotEnrolledError`                              |
| `juez.torres`       | `Desert`, `Direction`, `parse_direction`, `DesertError`          |
| `juez.elecciones`   | `VoteCount`, `ElectionError`                                     |
| `juez.oficina`      | `EmploymentOffice`, `OfficeError`                                |
| `juez.restaurante`  | `Restaurant`, `RestaurantError`                                  |

```python
from juez import capitulos

print(capitulos.solve("1\n5\n1 2 1 3 4\n"), end="")   # 4
```

## Command-line use

Every exercise is also installed as a command. It reads its test cases from
the file named as its first argument, or from standard input when no file is
given, and writes the answers to standard output:

```
juez-referencias < cases.txt
juez-pillo-toro < cases.txt
juez-ocurrencias < cases.txt
juez-diccionario < cases.txt
juez-deportes < cases.txt
juez-capitulos < cases.txt
juez-ranking < cases.txt
juez-bingo < cases.txt
juez-autoescuela < cases.txt
juez-torres < cases.txt
juez-elecciones < cases.txt
juez-oficina < cases.txt
juez-restaurante < cases.txt
```

## Running the tests

```
pip install -e ".[test]"
pytest
```