# pushswap

Sorts a list of integers using two stacks, `a` and `b`, and a fixed set of
operations. It prints each operation it performs, one per line. The numbers
start on stack `a` and end there in ascending order.

## Installation

```
pip install .
```

## Command line

Give the numbers as separate arguments:

```
push_swap 3 2 1
```

or as one space-separated argument:

```
push_swap "5 4 3 2 1"
```

The output is the list of operations, for example:

```
sa
rra
```

Possible operations:

| op    | effect                                   |
|-------|------------------------------------------|
| `sa`  | swap the top two elements of `a`         |
| `ra`  | rotate `a` up (top goes to the bottom)   |
| `rra` | rotate `a` down (bottom goes to the top) |
| `pa`  | move the top of `b` onto `a`             |
| `rb`  | rotate `b` up                            |
| `pb`  | move the top of `a` onto `b`             |

Exit status:

- `0` when operations were printed;
- `1` with `Error` on standard error when the input is empty, is not made of
  integers (an optional sign followed by digits), holds a value outside the
  32-bit signed range, or holds a duplicate value;
- `1` with no output when the input is already sorted.

Up to five numbers are sorted with dedicated routines. Larger inputs are
first replaced by their ranks and then sorted with a binary radix sort.

## Library use

```python
from pushswap.cli import solve
from pushswap.parsing import InputError, parse_arguments, to_indices
from pushswap.sorting import radix_sort, sort_small
from pushswap.stacks import Stacks

print(solve(["3", "2", "1"]))        # ['sa', 'rra']

values = parse_arguments(["4", "-1", "7"])
stacks = Stacks(to_indices(values))
sort_small(stacks)
print(stacks.a, stacks.operations)

try:
    parse_arguments(["1", "1"])
except InputError:
    print("duplicate")
```

`Stacks` holds the lists `a` and `b` (index 0 is the top) and records every
applied operation in `operations`. An operation that cannot be applied
returns `False` and records nothing.

The package also has small helpers:

- `pushswap.chars`: ASCII character tests and case conversion;
- `pushswap.memory`: byte-buffer operations on `bytearray` objects;
- `pushswap.convert`: `atoi`, `itoa`, `split`, `strtrim`, `substr`, `strjoin`;
- `pushswap.strings`: bounded copy and concatenation, comparison, search and
  per-character mapping;
- `pushswap.linked_list`: a singly linked list, `LinkedList`, of `Node` cells;
- `pushswap.lines`: `LineReader`, which reads lines from a stream a fixed
  number of characters or bytes at a time.

## Not included

The package has no formatted-output helpers of its own; the command writes
its operations with plain `sys.stdout` writes.

## Tests

```
pip install ".[test]"
pytest
```