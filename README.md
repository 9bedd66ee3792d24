# algodrills

Compact solutions to well-known algorithm problems. They have no dependencies and are grouped by technique. Every solution is a plain function or a small class. Import it and call it directly.

## Installation

From a checkout of the project:

```
pip install .
```

Python 3.10 or newer is required.

## Modules

| Module | Contents |
| --- | --- |
| `algodrills.arrays_and_hashing` | `has_duplicate`, `two_sum`, `is_anagram`, `group_anagrams`, `top_k_frequent`, `encode`, `decode`, `product_except_self`, `is_valid_sudoku`, `longest_consecutive` |
| `algodrills.two_pointers` | `is_palindrome`, `two_sum_sorted`, `three_sum`, `max_area`, `trap` |
| `algodrills.stack` | `MinStack`, `is_valid_parentheses`, `eval_rpn`, `generate_parenthesis`, `daily_temperatures`, `car_fleet`, `largest_rectangle_area` |
| `algodrills.binary_search` | `search`, `search_matrix`, `min_eating_speed`, `find_min`, `search_rotated`, `find_median_sorted_arrays`, `TimeMap` |
| `algodrills.sliding_window` | `max_profit`, `length_of_longest_substring`, `character_replacement` |

## Examples

```python
from algodrills.arrays_and_hashing import two_sum, encode, decode
from algodrills.two_pointers import trap
from algodrills.stack import MinStack, eval_rpn
from algodrills.binary_search import TimeMap, search
from algodrills.sliding_window import length_of_longest_substring

two_sum([3, 4, 5, 6], 7)                       # [0, 1]
decode(encode(["neet", "co#de", ""]))          # ['neet', 'co#de', '']
trap([0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1])     # 6
eval_rpn(["1", "2", "+", "3", "*", "4", "-"])  # 5
search([-1, 0, 3, 5, 9, 12], 9)                # 4
length_of_longest_substring("zxyzxyz")         # 3

stack = MinStack()
stack.push(1)
stack.push(0)
stack.get_min()                                # 0
len(stack)                                     # 2

store = TimeMap()
store.set("alice", "happy", 1)
store.get("alice", 2)                          # 'happy'
store.get("alice", 0)                          # ''
```

## Behaviour worth knowing

- Values that are absent are reported in these ways:
  - The search functions `search` and `search_rotated` return `-1`.
  - `two_sum` and `two_sum_sorted` return `[]`. `two_sum_sorted` gives 1-based indices.
  - `TimeMap.get` returns `''`.
- `top_k_frequent` orders values by frequency, highest first. Ties come out in ascending order.
- `generate_parenthesis` returns its strings in lexical order.
- `encode` writes each string as `<length>#<text>`. `decode` raises `ValueError` on text that is not such an encoding.
- `group_anagrams` accepts only lowercase ASCII letters and raises `ValueError` otherwise.
- `is_valid_sudoku` expects `'.'` for empty cells. Any other cell must hold a digit from 1 to 9, or the board is invalid.
- `eval_rpn` divides by truncating toward zero. It raises these errors:
  - `ValueError` for malformed expressions.
  - `ZeroDivisionError` on division by zero.
- `MinStack.pop`, `top` and `get_min` raise `IndexError` on an empty stack.
- `car_fleet` raises `ValueError` when `position` and `speed` differ in length. A car with speed 0 never arrives.
- These functions raise `ValueError` on empty input:
  - `min_eating_speed` and `find_min`.
  - `find_median_sorted_arrays`, when both arrays are empty.
- `character_replacement` raises `ValueError` for a negative `k`.

## What it does not include

This is a library of functions and classes only. It has no command-line program, and nothing is stored beyond the objects you create.

## Running the tests

```
pip install -e ".[test]"
pytest
```