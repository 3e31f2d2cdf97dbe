"""Published example inputs for each puzzle day.

These are the examples from the puzzle descriptions, which may be shared
freely.  Continuation lines are indented; every parser in this package
trims each line before reading it.
"""
from __future__ import annotations

from typing import Final

DAY_01: Final[str] = """1721
    979
    366
    299
    675
    1456"""

DAY_02: Final[str] = """1-3 a: abcde
    1-3 b: cdefg
    2-9 c: ccccccccc"""

DAY_03: Final[str] = """..##.......
    #...#...#..
    .#....#..#.
    ..#.#...#.#
    .#...##..#.
    ..#.##.....
    .#.#.#....#
    .#........#
    #.##...#...
    #...##....#
    .#..#...#.#"""

DAY_04: Final[str] = """ecl:gry pid:860033327 eyr:2020 hcl:#fffffd
    byr:1937 iyr:2017 cid:147 hgt:183cm

    iyr:2013 ecl:amb cid:350 eyr:2023 pid:028048884
    hcl:#cfa07d byr:1929

    hcl:#ae17e1 iyr:2013
    eyr:2024
    ecl:brn pid:760753108 byr:1931
    hgt:179cm

    hcl:#cfa07d eyr:2025 pid:166559648
    iyr:2011 ecl:brn hgt:59in"""

DAY_05: Final[str] = """FBFBBFFRLR
    BFFFBBFRRR
    FFFBBBFRRR
    BBFFBBFRLL"""

SAMPLES: Final[dict[int, str]] = {
    1: DAY_01,
    2: DAY_02,
    3: DAY_03,
    4: DAY_04,
    5: DAY_05,
}
