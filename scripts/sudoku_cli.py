"""Command line front end: solve, generate, deduce, list candidates, explain."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, TextIO

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from sudoku_engine.config import config_from_env
from sudoku_engine.errors import SudokuError, UnsolvableSudoku
from sudoku_engine.generation.generator import Generator
from sudoku_engine.grid import Grid
from sudoku_engine.solver.backtracking import Solver, deduce_singles
from sudoku_engine.solver.canvas import Canvas
from sudoku_engine.solver.explain import explain_solution
from sudoku_engine.textio import format_one_liner, format_pretty, parse_grid

LOGGER = logging.getLogger("sudoku_cli")


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def _read_grid(args: argparse.Namespace, stdin: TextIO) -> Grid:
    text = args.grid if args.grid is not None else stdin.read()
    return parse_grid(text)


def cmd_solve(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    grid = _read_grid(args, stdin)
    try:
        solutions = Solver().solve(grid)
    except UnsolvableSudoku as exc:
        LOGGER.error("The sudoku cannot be solved: %s", exc)
        return 1

    found = 0
    for solution in solutions:
        print(format_pretty(solution), file=out)
        print(format_one_liner(solution), file=out)
        print(file=out)
        found += 1
        if args.limit and found >= args.limit:
            break

    print(f"Found {found} solution(s)", file=out)
    return 0 if found else 1


def cmd_generate(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    config = config_from_env().merged(
        min_prefilled=args.min, max_prefilled=args.max, seed=args.seed
    )
    generator = Generator(config=config)
    LOGGER.info("Generator seed: %x", generator.seed)

    for _ in range(args.count):
        LOGGER.info("Generating sudoku...")
        start = time.perf_counter()
        puzzle = generator.generate()
        LOGGER.info(
            "Generated one sudoku, took %.0f milliseconds",
            (time.perf_counter() - start) * 1000.0,
        )
        print(format_one_liner(puzzle), file=out)
    return 0


def cmd_deduce(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    grid = _read_grid(args, stdin)
    try:
        deduced, assigned = deduce_singles(grid)
    except UnsolvableSudoku:
        print("That input contains contradictions.", file=out)
        return 1

    print(f"Was able to deduce {assigned} cells. Here is what i found:", file=out)
    print(file=out)
    print(format_pretty(deduced), file=out)
    print(format_one_liner(deduced), file=out)
    return 0


def cmd_candidates(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    canvas = Canvas(_read_grid(args, stdin))
    for cell in canvas.unset_cells():
        print(f"{cell}: {cell.candidates}", file=out)
    print(file=out)
    print("Render string:", file=out)
    print(canvas.render_candidates(), file=out)
    return 0


def cmd_explain(args: argparse.Namespace, stdin: TextIO, out: TextIO) -> int:
    for line in explain_solution(_read_grid(args, stdin)):
        print(line, file=out)
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve and generate 9x9 Sudoku puzzles")
    parser.add_argument("--debug", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    def with_grid(name: str, help_text: str) -> argparse.ArgumentParser:
        command = sub.add_parser(name, help=help_text)
        command.add_argument(
            "--grid",
            default=None,
            help="Grid as '5,3,-,...;6,-,...' (read from stdin when omitted)",
        )
        return command

    solve = with_grid("solve", "List the solutions of a puzzle")
    solve.add_argument("--limit", type=int, default=0, help="Stop after N solutions")
    solve.set_defaults(handler=cmd_solve)

    with_grid("deduce", "Fill only forced cells").set_defaults(handler=cmd_deduce)
    with_grid("candidates", "Print candidates of unset cells").set_defaults(
        handler=cmd_candidates
    )
    with_grid("explain", "Trace the search tree").set_defaults(handler=cmd_explain)

    generate = sub.add_parser("generate", help="Generate puzzles with a unique solution")
    generate.add_argument("--count", type=int, default=1)
    generate.add_argument("--min", type=int, default=None, help="Minimum prefilled cells")
    generate.add_argument("--max", type=int, default=None, help="Maximum prefilled cells")
    generate.add_argument("--seed", type=int, default=None)
    generate.set_defaults(handler=cmd_generate)

    return parser


def main(
    argv: Optional[list[str]] = None,
    stdin: TextIO = sys.stdin,
    out: TextIO = sys.stdout,
) -> int:
    args = _build_parser().parse_args(argv)
    _configure_logging(args.debug)
    try:
        return args.handler(args, stdin, out)
    except SudokuError as exc:
        LOGGER.error("%s", exc)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
