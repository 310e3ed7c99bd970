# dsadrills

Classic data-structure and algorithm exercises, written as plain Python
functions and classes. The package is a library only. Every function takes
its input as arguments and returns a value. Nothing reads from standard input
or prints.

## Installation

```
pip install dsadrills
```

To run the tests:

```
pip install "dsadrills[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `dsadrills.numbers` | `count_dividing_digits`, `count_digits`, `grade`, `day_name`, `factorial`, `ncr`, `is_prime`, `power`, `count_notes`, `counting`, `ap_term`, `set_bits`, `fibonacci` |
| `dsadrills.bits` | `bit_operations`, `bitwise_complement`, `decimal_to_binary`, `binary_to_decimal`, `reverse_integer`, `signed_binary` |
| `dsadrills.hashing` | `char_frequencies`, `frequencies`, `distinct_in_windows` |
| `dsadrills.arrays` | `linear_search`, `reverse_array`, `swap_alternate`, `find_duplicate`, `get_min`, `get_max`, `sort_zeros_ones`, `merge_sorted` |
| `dsadrills.sorting` | `bubble_sort`, `insertion_sort`, `insertion_sort_steps`, `selection_sort`, `merge_sort` |
| `dsadrills.strings` | `reverse_words` |
| `dsadrills.recursion` | `binary_search`, `climb_stairs`, `array_sum`, `is_sorted`, `contains`, `power_of_two`, `count_up`, `reach_home`, `say_digits` |
| `dsadrills.patterns` | `v_pattern` |
| `dsadrills.binary_tree` | `Node`, `build_preorder`, `build_level_order`, `parse_level_order`, `level_order`, `inorder`, `preorder`, `postorder`, `is_identical` |
| `dsadrills.singly_linked_list` | `Node`, `SinglyLinkedList`, `is_circular`, `detect_loop`, `floyd_detect_loop`, `loop_start`, `remove_loop`, `remove_duplicates_sorted`, `remove_duplicates` |
| `dsadrills.doubly_linked_list` | `Node`, `DoublyLinkedList` |
| `dsadrills.circular_linked_list` | `Node`, `CircularLinkedList` |

### Behaviour to be aware of

- Invalid input raises `ValueError`:
  - `grade` for marks above 100
  - `day_name` outside 1 to 7
  - `ncr` unless `0 <= r <= n`
  - `fibonacci` below 1
- `is_prime` reports numbers below 2 as prime.
- Positions in the linked lists count from 1. A position that does not exist raises `IndexError`.
- `reverse_integer` returns 0 when the reversed value would overflow a 32-bit signed integer.
- `signed_binary` shows a negative number as its lowest ten two's-complement bits.
- `reverse_words` ends every word with a space, so `"hello world"` becomes `"olleh dlrow "`.
- The sorting functions return a new list and leave their input unchanged. `insertion_sort_steps` yields the list after each insertion.

## Examples

```python
from dsadrills.numbers import ncr, fibonacci, count_notes
from dsadrills.bits import decimal_to_binary, binary_to_decimal
from dsadrills.sorting import merge_sort
from dsadrills.strings import reverse_words

ncr(5, 2)                    # 10
fibonacci(7)                 # 8
count_notes(275)             # {100: 2, 50: 1, 20: 1, 1: 5}
decimal_to_binary(6)         # "110"
binary_to_decimal("110")     # 6
merge_sort([3, 7, 0, 1, 5])  # [0, 1, 3, 5, 7]
reverse_words("hello world") # "olleh dlrow "
```

Trees:

```python
from dsadrills.binary_tree import parse_level_order, inorder, level_order, is_identical

root = parse_level_order("1 2 3")
inorder(root)                                  # [2, 1, 3]
level_order(root)                              # [[1], [2, 3]]
is_identical(root, parse_level_order("1 2 3")) # True
```

Linked lists:

```python
from dsadrills.doubly_linked_list import DoublyLinkedList
from dsadrills.circular_linked_list import CircularLinkedList

items = DoublyLinkedList()
items.insert_at_tail(11)
items.insert_at_head(8)
items.reverse()
list(items)                  # [11, 8]

ring = CircularLinkedList()
ring.insert_after(None, 3)   # an empty list takes the value as its only node
ring.insert_after(3, 5)
ring.insert_after(5, 7)
second = ring.split()
list(ring), list(second)     # ([3, 5], [7])
```

## What it does not do

The package has no command-line program and no interactive prompts. To use
the drills, import them from Python.