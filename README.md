# arraybench

Small timing benchmarks over arrays of random floating-point numbers. Each
benchmark runs either on a pool of worker threads (the default) or on a
single thread.

## Installation

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Commands

`arraybench-sum`, `arraybench-sort` and `arraybench-ops` share these options:

- `-n array_size`: how many values to generate.
- `-t num_threads`: how many worker threads to use. The default is the number
  of CPUs.
- `-s`, `--sequential`: run on one thread instead. This cannot be combined
  with `-t`.

`-n` and `-t` take a positive integer. Only the leading digits are read, so
`12abc` counts as 12. A value that is not positive prints an error message to
standard error, and the command exits with status 1.

Parallel runs are timed in wall-clock seconds and also print
`Threads used: N`. Sequential runs are timed in process CPU seconds.

### `arraybench-sum`

Fills an array with random values in `[0, 1]` and sums it. It prints the sum
to six decimal places, then the time. The default size is 100,000.

```
arraybench-sum -n 100000 -t 4     # 4 worker threads
arraybench-sum -n 100000 -s       # one thread
```

### `arraybench-sort`

Fills an array with random values in `[0, 1000]` and sorts it in place with a
Lomuto-partition quicksort. The default size is 100,000.

```
arraybench-sort -n 50000 -t 4
arraybench-sort -n 50000 --sequential
```

### `arraybench-ops`

Builds two arrays of random values in `[1, 101]`. It computes their
element-wise sums, differences, products and quotients. A quotient with a
divisor of zero is `0.0`. The default size is 10,000,000.

```
arraybench-ops -n 1000000 -t 4
arraybench-ops -n 1000000 -s
```

### `arraybench-grid`

Lays `-n` elements out as a near-square grid. It then times addition,
subtraction, multiplication and division of two random grids, one operation
at a time. For each operation it prints `Operation: <name>` followed by the
time.

- `-n number_of_elements`: the default and the minimum are both 100,000. A
  smaller or unreadable value is replaced by 100,000, and a note says so.
- `-s`, `--sequential`: run on one thread. Without it, the command uses as
  many worker threads as there are CPUs. This command has no `-t` option.

```
arraybench-grid -n 250000
arraybench-grid -n 250000 -s
```

## Library use

```python
import random
from arraybench.data import random_values, positive_int
from arraybench.summation import sequential_sum, parallel_sum
from arraybench.quicksort import partition, quicksort, parallel_quicksort
from arraybench.elementwise import array_operations, parallel_array_operations
from arraybench.grid import (
    Operation, grid_shape, random_grid, apply_operation, parallel_apply_operation,
)

rng = random.Random(1)
values = random_values(1000, 1.0, 0.0, rng)   # n, scale, offset, rng
total = sequential_sum(values)
also_total = parallel_sum(values, 4)          # equal up to float rounding

data = random_values(1000, 1000.0, 0.0, rng)
quicksort(data)                               # sorts in place
parallel_quicksort(data, 4)                   # sorts in place on 4 threads

results = array_operations([1.0, 2.0], [2.0, 0.0])
results.sums                                  # [3.0, 2.0]
results.quotients                             # [0.5, 0.0]

rows, cols = grid_shape(100000)               # (316, 317)
a = random_grid(rows, cols, rng)
b = random_grid(rows, cols, rng)
summed = apply_operation(a, b, Operation.ADD)
halved = parallel_apply_operation(a, b, "/", 4)   # an Operation or its symbol
Operation.DIVIDE.apply(1.0, 0.0)              # 0.0
```

Functions raise `ValueError` for a thread count below 1, for arrays or grids
of different lengths or shapes, and for a negative count in `random_values`.
`positive_int` raises `ValueError` for text whose leading integer is not
positive.

## What it does not do

The "parallel" variants run on Python threads. Python's interpreter lock lets
only one thread run Python code at a time, so these variants show the cost of
splitting the work rather than a speed-up. The package does not use worker
processes or native vector code. It keeps no record of results beyond what
each command prints.