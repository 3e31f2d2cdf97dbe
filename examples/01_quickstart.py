#!/usr/bin/env python3
"""Example: Quickstart — aoc2020

Minimal working example: solve every built-in day on its example
input, then survey the day 3 map slope by slope.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install aoc2020
"""
from __future__ import annotations

import aoc2020
from aoc2020 import samples
from aoc2020.toboggan import TobogganMap, survey


def main() -> None:
    print(f"aoc2020 version: {aoc2020.__version__}")

    # Step 1: Solve each day on its published example
    for day in aoc2020.available_days():
        print(aoc2020.solve(day))

    # Step 2: Look at the individual day 3 sweeps
    forest = TobogganMap.from_text(samples.DAY_03)
    report = survey(forest)
    for result in report.results:
        print(f"  {result.slope}: {result.trees} trees in {result.moves} moves")
    print(f"  product: {report.product}")


if __name__ == "__main__":
    main()
