"""Simulate the inheritance of blood type across generations."""

from __future__ import annotations

import argparse
import random
import sys
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

GENERATIONS = 3
INDENT_LENGTH = 4
ALLELES = ("A", "B", "O")


@dataclass
class Person:
    """A person with two blood-type alleles and, optionally, two parents."""

    alleles: tuple[str, str]
    parents: tuple[Person, Person] | None = None

    @property
    def blood_type(self) -> str:
        return "".join(self.alleles)


def random_allele(rng: random.Random | None = None) -> str:
    """Pick one of the alleles A, B and O at random."""
    rng = rng or random.Random()
    return ALLELES[rng.randrange(3)]


def create_family(generations: int, rng: random.Random | None = None) -> Person:
    """Build a person with `generations` generations of ancestry."""
    rng = rng or random.Random()
    if generations > 1:
        parent0 = create_family(generations - 1, rng)
        parent1 = create_family(generations - 1, rng)
        alleles = (
            parent0.alleles[rng.randrange(2)],
            parent1.alleles[rng.randrange(2)],
        )
        return Person(alleles, (parent0, parent1))
    return Person((random_allele(rng), random_allele(rng)))


def _label(generation: int) -> str:
    if generation == 0:
        return "Child"
    if generation == 1:
        return "Parent"
    return "Great-" * (generation - 2) + "Grandparent"


def _lines(person: Person, generation: int) -> Iterator[str]:
    indent = " " * (generation * INDENT_LENGTH)
    yield (
        f"{indent}{_label(generation)} (Generation {generation}): "
        f"blood type {person.blood_type}"
    )
    if person.parents is not None:
        for parent in person.parents:
            yield from _lines(parent, generation + 1)


def format_family(person: Person | None, generation: int = 0) -> str:
    """Render a family tree, one person per line, ancestors indented."""
    if person is None:
        return ""
    return "".join(line + "\n" for line in _lines(person, generation))


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simulate the inheritance of blood type."
    )
    parser.add_argument(
        "--generations",
        type=int,
        default=GENERATIONS,
        help="number of generations to simulate (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="seed for the random number generator",
    )
    return parser.parse_args(list(argv) if argv is not None else None)


def main(argv: Sequence[str] | None = None) -> int:
    """Create a family (three generations by default) and print its blood types."""
    args = _parse_args(argv)
    rng = random.Random(args.seed)
    family = create_family(args.generations, rng)
    sys.stdout.write(format_family(family))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())