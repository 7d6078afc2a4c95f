import random

import pytest

from arraybench.grid import (
    Operation,
    apply_operation,
    grid_shape,
    main,
    parallel_apply_operation,
    random_grid,
)


@pytest.fixture
def grids():
    rng = random.Random(9)
    return random_grid(13, 17, rng), random_grid(13, 17, rng)


def test_operation_from_symbol():
    assert Operation("+") is Operation.ADD
    assert Operation("/") is Operation.DIVIDE


@pytest.mark.parametrize(
    "symbol, label, expected",
    [
        ("+", "Addition", 8.0),
        ("-", "Subtraction", 4.0),
        ("*", "Multiplication", 12.0),
        ("/", "Division", 3.0),
    ],
)
def test_operation_label_and_result(symbol, label, expected):
    op = Operation(symbol)
    assert op.label == label
    assert op.apply(6.0, 2.0) == expected


@pytest.mark.parametrize("x", [1.5, 42.0, 100.25])
def test_operation_identities(x):
    assert Operation.ADD.apply(x, 0.0) == x
    assert Operation.SUBTRACT.apply(x, x) == 0.0
    assert Operation.MULTIPLY.apply(x, 1.0) == x
    assert Operation.DIVIDE.apply(x, x) == 1.0


def test_divide_by_zero_gives_zero():
    assert Operation.DIVIDE.apply(5.0, 0.0) == 0.0


def test_grid_shape_default_size():
    assert grid_shape(100000) == (316, 317)


@pytest.mark.parametrize("n", [1, 2, 3, 10, 99, 100, 101, 12345])
def test_grid_shape_covers_n_tightly(n):
    rows, cols = grid_shape(n)
    assert rows * cols >= n
    assert rows * (cols - 1) < n
    assert rows <= cols


def test_grid_shape_rejects_zero():
    with pytest.raises(ValueError):
        grid_shape(0)


def test_random_grid_shape_and_range():
    grid = random_grid(4, 6, random.Random(1))
    assert len(grid) == 4
    assert all(len(row) == 6 for row in grid)
    assert all(1.0 <= v <= 101.0 for row in grid for v in row)


def test_apply_operation_preserves_shape_and_invariants(grids):
    a, b = grids
    sums = apply_operation(a, b, Operation.ADD)
    diffs = apply_operation(a, b, "-")
    assert len(sums) == len(a)
    for ra, rs, rd in zip(a, sums, diffs):
        assert len(rs) == len(ra)
        for x, s, d in zip(ra, rs, rd):
            assert s + d == pytest.approx(2 * x)


def test_apply_operation_division_by_zero_grid():
    a = [[1.0, 2.0], [3.0, 4.0]]
    zeros = [[0.0, 0.0], [0.0, 0.0]]
    assert apply_operation(a, zeros, Operation.DIVIDE) == zeros


def test_apply_operation_shape_mismatch():
    with pytest.raises(ValueError):
        apply_operation([[1.0, 2.0]], [[1.0]], Operation.ADD)


def test_apply_operation_unknown_symbol():
    with pytest.raises(ValueError):
        apply_operation([[1.0]], [[1.0]], "%")


@pytest.mark.parametrize("op", list(Operation))
@pytest.mark.parametrize("threads", [1, 3, 50])
def test_parallel_matches_sequential(grids, op, threads):
    a, b = grids
    assert parallel_apply_operation(a, b, op, threads) == apply_operation(a, b, op)


def test_parallel_rejects_zero_threads(grids):
    a, b = grids
    with pytest.raises(ValueError):
        parallel_apply_operation(a, b, Operation.ADD, 0)


def test_main_small_size_falls_back_to_default(capsys):
    assert main(["-n", "5", "-s"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Array size must be at least 100000. Using default 100000.\n")
    assert out.count("Sequential time: ") == 4
    assert "\nOperation: Division\n" in out


def test_main_parallel_lists_all_operations(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    operations = [line for line in lines if line.startswith("Operation: ")]
    assert operations == [f"Operation: {op.label}" for op in Operation]
    assert sum(line.startswith("Parallel time: ") for line in lines) == 4