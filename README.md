# pushswap

Sorts a list of distinct integers using only two stacks, `a` and `b`, and a
small fixed set of operations. It prints the operations it used, one per
line, to standard output.

## Installation

```
pip install .
```

## Usage

Give the numbers as separate arguments, or all together as one
space-separated argument:

```
push_swap 3 2 1
push_swap "4 67 3 87 23"
```

Example:

```
$ push_swap 2 1 3
sa
```

The first number is the top of stack `a`. If the input is already sorted,
nothing is printed. If any argument is not a valid integer (an optional sign
followed by digits), falls outside the 32-bit signed range, is empty, or
appears more than once, `Error` is written to standard error and the exit
status is 1. Running with no arguments, or with one argument holding only
spaces, also gives an error.

### Operations

| Name  | Effect                                         |
|-------|------------------------------------------------|
| `sa`  | swap the top two elements of `a`               |
| `sb`  | swap the top two elements of `b`               |
| `ss`  | `sa` and `sb` together                         |
| `pa`  | move the top of `b` onto `a`                   |
| `pb`  | move the top of `a` onto `b`                   |
| `ra`  | rotate `a` up, so the top goes to the bottom   |
| `rb`  | rotate `b` up                                  |
| `rr`  | `ra` and `rb` together                         |
| `rra` | rotate `a` down, so the bottom goes to the top |
| `rrb` | rotate `b` down                                |
| `rrr` | `rra` and `rrb` together                       |

A move that changes nothing (swapping a stack of fewer than two, pushing
from an empty stack) is not recorded; `rr` and `rrr` always are.

### Strategy

Every value is first given its rank, 0 for the smallest. Three elements get
a fixed sequence of at most two moves. Four or five elements are handled by
pushing ranks 0 and 1 to `b`, sorting the remaining three, and pushing the
two back. Larger inputs get a binary radix sort on the ranks.

For two elements, `sa` is only made when the top ranks below the second
one, which an unsorted pair never does; so two numbers in descending order
print no moves.

## Library use

```python
from pushswap.sorting import solve
from pushswap.stacks import Stacks

moves = solve([3, 1, 2]).operations   # ['ra']

stacks = Stacks.from_values([5, 9, 1])
stacks.pb()
stacks.ra()
print(stacks.a_values(), stacks.b_values())   # [1, 9] [5]
```

- `pushswap.stacks`: `Stacks` (the two stacks as deques of `Node`, the
  eleven moves as methods, and the `operations` made so far) and
  `assign_indices`.
- `pushswap.sorting`: `solve`, `radix`, `sort_two`, `sort_three`,
  `sort_up_to_five`, `is_sorted`, `push_back_to_a`, `get_max_bits`.
- `pushswap.parsing`: `parse_arguments` checks and converts the
  command-line arguments and raises `InputError` when they are invalid;
  also `is_number`, `exceeds_limit`, `correct_format`, `to_int`,
  `check_duplicates`.
- `pushswap.cli`: `main(argv=None)`, the `push_swap` command, and
  `describe_stack`, which lists a stack's entries as `Entry <rank>: <value>`
  lines.

The package also carries small helper modules:

- `pushswap.printf`: `render` and `printf`, a formatter supporting
  `%c %s %p %d %i %u %x %X %%`, with `to_hex`, `hex_len`, `format_int`,
  `format_unsigned` and `format_pointer`.
- `pushswap.output`: `put_char`, `put_str`, `put_endl`, `put_nbr`.
- `pushswap.strings`: `atoi`, `itoa`, `split`, `count_words`, `str_chr`,
  `str_rchr`, `str_dup`, `str_join`, `str_lcpy`, `str_lcat`, `str_len`,
  `str_mapi`, `str_iteri`, `str_ncmp`, `str_nstr`, `str_trim`, `substr`.
- `pushswap.charclass`: ASCII `is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`, `to_lower`, `to_upper`.
- `pushswap.memory`: byte-buffer `mem_set`, `bzero`, `calloc`, `mem_chr`,
  `mem_cmp`, `mem_cpy`, `mem_move`.
- `pushswap.linkedlist`: `LinkedList` of `ListNode` links, with
  `add_front`, `add_back`, `last`, `pop_front`, `clear`, `apply`, `map`.

## What it does not do

There is no checker command: the package prints moves but does not read a
list of moves back and verify that it sorts a given input.

## Tests

```
pip install .[test]
pytest
```