# algobox

Classic algorithms and data structures in plain Python, with no
third-party dependencies.

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
| `algobox.dynamic_programming` | `binomial_coefficient`, `nth_fibonacci`, `knapsack`, `longest_common_subsequence`, `lps_recursive`, `lps_dp`, `matrix_chain_recursive`, `matrix_chain_dp`, `cut_rod_recursive`, `cut_rod_dp` |
| `algobox.caesar` | `encrypt`, `decrypt`: shift ASCII letters by a key, leaving other characters alone |
| `algobox.rot13` | `rot13` |
| `algobox.xor_cipher` | `encrypt`, `decrypt`: XOR bytes with a one-byte key (0 to 255) |
| `algobox.diffie_hellman` | `modular_exponentiation`, `generate_share_key`, `generate_mutual_key` over the prime 6700417 with generator 3 |
| `algobox.polybius` | `Polybius` square cipher; bad squares and unknown characters raise `PolybiusError` (a `ValueError`) |
| `algobox.rsa` | textbook RSA over small integers: `small_primes`, `generate_prime`, `gcd`, `lcm`, `modular_multiplicative_inverse`, `modular_exponentiation`, `encrypt`, `decrypt`, `to_ascii`, `join_numbers`, `parse_numbers` |
| `algobox.roman` | `roman_to_integer` for standard-form numerals |
| `algobox.genetic` | `genetic_string`, `PopulationItem` and the `main` command |
| `algobox.trie` | `Trie` with `insert` and `find` |
| `algobox.graphs` | `breadth_first_search`, `depth_first_search` on adjacency matrices, `floyd_warshall` |
| `algobox.binary_tree` | `Node`, `BinaryTree.depth`, `insert`, `bst_delete`, `in_order_successor`, and the generators `in_order`, `pre_order`, `post_order`, `level_order` |
| `algobox.dynamic_array` | `DynamicArray`, whose capacity starts at 10 and doubles |
| `algobox.hashmap` | `HashMap` hashing keys with 64-bit FNV-1a over their text form |
| `algobox.hashset` | `HashSet` with subset/superset tests, union, intersection, difference and symmetric difference |
| `algobox.queues` | `ArrayQueue`, `LinkedQueue`, `DequeQueue`; reading an empty queue raises `EmptyQueueError` |
| `algobox.stacks` | `ArrayStack`, `LinkedStack`, `DequeStack`; reading an empty stack raises `EmptyStackError` |
| `algobox.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList` with their nodes `SinglyNode`, `DoublyNode` |

## Examples

```python
from algobox import caesar, rot13
from algobox.dynamic_programming import nth_fibonacci, knapsack
from algobox.polybius import Polybius
from algobox.trie import Trie

caesar.encrypt("hello", 3)            # 'khoor'
rot13.rot13("hello world")            # 'uryyb jbeyq'
nth_fibonacci(10)                     # 55
knapsack(50, [10, 20, 30], [60, 100, 120])   # 220

square = Polybius("abcdefghijklmnopqrstuvwxy", 5, "HogeF")
square.encrypt("HogeFugaPiyoSpam")    # 'OGGFOOHFOHFHOOHHEHOEFFGFEEEHHHGG'

trie = Trie()
trie.insert("nikola")
trie.find("nikola")                   # True
```

Tree traversals are generators:

```python
from algobox.binary_tree import insert, in_order

root = None
for value in (30, 20, 15, 10):
    root = insert(root, value)
list(in_order(root))                  # [10, 15, 20, 30]
```

## Command line

`algobox-genetic` evolves random strings until one equals the target, then
prints the number of generations, the number of strings analyzed and the
result:

```
algobox-genetic
algobox-genetic "hello world" --charmap " abcdefghijklmnopqrstuvwxyz"
```

With no target it evolves a built-in sentence. If the target holds a
character that is not in the charmap, it prints an error and exits with
status 1. Progress every ten generations is sent to the `algobox.genetic`
logger at INFO level; the command itself does not configure logging, so
this is not shown by default.

## Limits

- `nth_fibonacci` wraps around like an unsigned 64-bit integer.
- `HashMap` keeps one entry per slot and doubles its table on a collision;
  two keys whose hashes are identical cannot both be stored and raise
  `ValueError`.
- The RSA and Diffie-Hellman helpers work with small numbers and are meant
  for study, not for protecting data.