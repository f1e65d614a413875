"""Small array and matrix exercises: fills, sums, means and random matrices."""

from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional, Sequence, Tuple

Matrix = List[List[int]]


def multiples_of_ten(n: int) -> List[int]:
    """Return ``[0, 10, 20, ...]`` with ``n`` elements."""
    if n < 0:
        raise ValueError("La dimensione non può essere negativa.")
    return [i * 10 for i in range(n)]


def index_matrix(rows: int, columns: int) -> Matrix:
    """Return a matrix whose cells hold their row-major position."""
    if rows < 0 or columns < 0:
        raise ValueError("Le dimensioni non possono essere negative.")
    return [[r * columns + c for c in range(columns)] for r in range(rows)]


def sum_and_mean(values: Sequence[int]) -> Tuple[int, float]:
    """Return the sum and the mean of ``values``; raise ValueError if empty."""
    if not values:
        raise ValueError("Il numero deve essere positivo.")
    total = sum(values)
    return total, total / len(values)


def random_matrix(
    rows: int, columns: int, rng: Optional[random.Random] = None
) -> Matrix:
    """Return a ``rows`` x ``columns`` matrix of random integers from 1 to 100."""
    if rows <= 0 or columns <= 0:
        raise ValueError("Le dimensioni devono essere positive.")
    rng = rng if rng is not None else random.Random()
    return [[rng.randint(1, 100) for _ in range(columns)] for _ in range(rows)]


def row_sums(matrix: Matrix) -> List[int]:
    """Return the sum of each row."""
    return [sum(row) for row in matrix]


def column_sums(matrix: Matrix) -> List[int]:
    """Return the sum of each column."""
    return [sum(column) for column in zip(*matrix)]


def format_matrix(matrix: Matrix) -> str:
    """Return the matrix with each cell right-aligned in three characters."""
    return "\n".join("".join(f"{value:3d} " for value in row) for row in matrix)


def _ask_int(prompt: str) -> int:
    print(prompt, end="", flush=True)
    line = sys.stdin.readline()
    if line == "":
        raise EOFError("input terminated")
    return int(line.split()[0])


def _value(given: Optional[int], prompt: str) -> int:
    return given if given is not None else _ask_int(prompt)


def _run_array(args: argparse.Namespace) -> None:
    n = _value(args.size, "Inserisci la dimensione dell'array: ")
    print("Elementi dell'array:")
    print("".join(f"{value} " for value in multiples_of_ten(n)))


def _run_matrix(args: argparse.Namespace) -> None:
    rows = _value(args.rows, "Inserisci il numero di righe: ")
    columns = _value(args.columns, "Inserisci il numero di colonne: ")
    print("Elementi della matrice:")
    print(format_matrix(index_matrix(rows, columns)))


def _run_stats(args: argparse.Namespace) -> None:
    values = list(args.values)
    if not values:
        n = _ask_int("Quanti numeri vuoi inserire? ")
        if n <= 0:
            raise ValueError("Il numero deve essere positivo.")
        print(f"Inserisci {n} numeri:")
        values = [_ask_int(f"Numero {i}: ") for i in range(1, n + 1)]
    total, mean = sum_and_mean(values)
    print("\nNumeri inseriti: " + "".join(f"{value} " for value in values))
    print(f"Somma: {total}")
    print(f"Media: {mean:.2f}")


def _run_random(args: argparse.Namespace) -> None:
    rows = _value(args.rows, "Inserisci il numero di righe: ")
    columns = _value(args.columns, "Inserisci il numero di colonne: ")
    matrix = random_matrix(rows, columns, random.Random(args.seed))
    print("\nMatrice generata:")
    print(format_matrix(matrix))
    print("\nSomma delle righe:")
    for number, total in enumerate(row_sums(matrix), start=1):
        print(f"Riga {number}: {total}")
    print("\nSomma delle colonne:")
    for number, total in enumerate(column_sums(matrix), start=1):
        print(f"Colonna {number}: {total}")


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="simulab-arrays")
    commands = parser.add_subparsers(dest="command", required=True)
    array = commands.add_parser("array", help="array of multiples of ten")
    array.add_argument("size", type=int, nargs="?")
    array.set_defaults(run=_run_array)
    matrix = commands.add_parser("matrix", help="matrix of positions")
    matrix.add_argument("rows", type=int, nargs="?")
    matrix.add_argument("columns", type=int, nargs="?")
    matrix.set_defaults(run=_run_matrix)
    stats = commands.add_parser("stats", help="sum and mean of numbers")
    stats.add_argument("values", type=int, nargs="*")
    stats.set_defaults(run=_run_stats)
    rand = commands.add_parser("random", help="random matrix with row and column sums")
    rand.add_argument("rows", type=int, nargs="?")
    rand.add_argument("columns", type=int, nargs="?")
    rand.add_argument("--seed", type=int, default=None)
    rand.set_defaults(run=_run_random)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one of the array exercises chosen on the command line."""
    args = _parser().parse_args(argv)
    try:
        args.run(args)
    except ValueError as error:
        print(error)
        return 1
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())