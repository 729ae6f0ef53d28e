# pushswap

pushswap sorts a list of distinct integers. It uses two stacks, **a** and **b**, and five operations. It prints the operations it used, one per line:

| Operation | Effect |
|-----------|--------|
| `sa`  | swap the top two elements of stack a |
| `ra`  | rotate stack a: the top element goes to the bottom |
| `rra` | reverse rotate stack a: the bottom element goes to the top |
| `pb`  | move the top of a onto b |
| `pa`  | move the top of b onto a |

Lists of two to six numbers are sorted with fixed move sequences. For four, five and six numbers, the minimum is brought to the top and parked on b. The rest is then sorted, and the minimum is pushed back. Longer lists are replaced by their ranks and sorted with a binary radix sort. The radix sort makes one full pass per bit of the largest rank.

## Installing

```
pip install .
```

## Command line

Give the numbers as separate arguments. The first number is the top of the stack:

```
push_swap 3 1 2
```

prints

```
ra
```

You can also pass the numbers as one space-separated argument:

```
push_swap "4 67 3 87 23"
```

If the first argument contains a space, only that argument is read and split on spaces, and any further arguments are ignored.

Output depends on the input:

- **Already sorted input:** nothing is printed. This includes a single number.
- **Invalid input:** `Error` is written to standard error and nothing else is printed. Input is invalid if any value:
  - contains anything other than digits and `-`,
  - has leading zeros or a `+`,
  - does not fit in a 32-bit signed integer,
  - or appears twice.
- **No arguments:** nothing happens.

The command always exits with status 0.

## Library

```python
from pushswap.parsing import read_arguments, InputError
from pushswap.sorting import solve

values = read_arguments(["5", "2", "9", "1"])
moves = solve(values)          # ["rra", "pb", "sa", "pa"]
```

### `pushswap.parsing`

- `read_arguments(args)` turns the command-line arguments, without the program name, into a list of integers. It raises `InputError` (a `ValueError`) for input that makes the command print `Error`.
- `parse_values(tokens)` checks and converts a sequence of tokens.
- `split_words(text)` splits text on spaces and drops empty words.
- `has_valid_characters(text)` and `is_canonical(text)` are the two per-token checks.
- `atoi(text)` converts leading decimal text to a 32-bit signed integer.

### `pushswap.stacks`

- `PushSwap(values)` holds the stacks `a` and `b`. Both are deques with their top at the left.
  - It has the methods `sa`, `ra`, `rra`, `pb` and `pa`.
  - Each call is recorded by name in the `operations` list.
  - An operation with too few elements to act on raises `IndexError`.
- `ranks(values)` replaces each value with the number of values smaller than it.

### `pushswap.sorting`

- `solve(values)` returns the list of operation names that sorts the values. It returns an empty list if they are already sorted.
- `is_sorted(values)` reports whether the values are in ascending order.
- `sort_three`, `sort_four`, `sort_five` and `sort_six` act directly on a `PushSwap`. Each needs exactly that many elements on stack a and raises `ValueError` otherwise.
- `radix_sort` acts directly on a `PushSwap` of any size.
- `highest_bit(num)` gives the position of the most significant set bit of a positive number.

### `pushswap.cli`

- `main(argv=None)` is the `push_swap` command.

## What it does not do

Only the five operations above are used. There are no operations that act on stack b alone, such as swapping or rotating b, and no operations that act on both stacks at once.

The package has no checker: it does not read a list of operations and verify that they sort a given input.

## Tests

```
pip install .[test]
pytest
```