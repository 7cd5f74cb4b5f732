"""A basic genetic algorithm that evolves random strings toward a target."""

from __future__ import annotations

import argparse
import logging
import math
import random
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from operator import attrgetter

logger = logging.getLogger(__name__)

POPULATION_SIZE = 200
SELECTION_SIZE = 50
MUTATION_PROBABILITY = 0.4
MAX_CHILDREN_PER_PARENT = 10

DEFAULT_TARGET = (
    "This is a genetic algorithm to evaluate, combine, evolve and mutate a string!"
)
DEFAULT_CHARMAP = (
    " ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz.,;!?+-*#@^'èéòà€ù=)(&%$£/\\"
)


@dataclass
class PopulationItem:
    """One candidate string and its fitness, the share of positions matching the target."""

    key: str
    value: float = 0.0


def _fitness(key: str, target: str) -> float:
    if not target:
        return 1.0
    matches = sum(1 for got, wanted in zip(key, target) if got == wanted)
    return matches / len(target)


def _mutate(child: list[str], genes: Sequence[str], rng: random.Random) -> str:
    if rng.random() < MUTATION_PROBABILITY:
        child[rng.randrange(len(child))] = rng.choice(genes)
    return "".join(child)


def _breed(
    population: list[PopulationItem],
    genes: Sequence[str],
    length: int,
    rng: random.Random,
) -> list[PopulationItem]:
    children = population[: SELECTION_SIZE // 3]
    for parent in population[:SELECTION_SIZE]:
        child_count = min(parent.value * 100 + 1, MAX_CHILDREN_PER_PARENT)
        for _ in range(math.ceil(child_count)):
            partner = population[rng.randrange(SELECTION_SIZE)]
            split = rng.randrange(length)
            for first, second in ((parent, partner), (partner, parent)):
                child = list(first.key[:split] + second.key[split:])
                children.append(PopulationItem(_mutate(child, genes, rng)))
            if len(children) >= SELECTION_SIZE:
                break
    return children


def genetic_string(
    target: str, charmap: Sequence[str], rng: random.Random | None = None
) -> tuple[int, int, str]:
    """Evolve strings of characters from ``charmap`` until one equals ``target``.

    Returns the number of generations, the number of strings evaluated, and the best string.
    """
    rng = rng if rng is not None else random.Random()
    genes = list(charmap)
    for position, char in enumerate(target):
        if char not in genes:
            raise ValueError(f'Character not available in charmap: {position} "{char}"')

    population = [
        PopulationItem("".join(rng.choice(genes) for _ in target))
        for _ in range(POPULATION_SIZE)
    ]
    generation = evaluated = 0
    while True:
        generation += 1
        evaluated += len(population)
        for item in population:
            item.value = _fitness(item.key, target)
        population.sort(key=attrgetter("value"), reverse=True)

        best = population[0]
        if best.key == target:
            return generation, evaluated, best.key
        if generation % 10 == 0:
            logger.info(
                "Generation: %d Analyzed: %d Best: %s %s",
                generation,
                evaluated,
                best.key,
                best.value,
            )
        population = _breed(population, genes, len(target), rng)


def main(argv: Sequence[str] | None = None) -> int:
    """Evolve a target string and print the generation count, strings analyzed and result."""
    parser = argparse.ArgumentParser(description="Evolve a string with a genetic algorithm.")
    parser.add_argument("target", nargs="?", default=DEFAULT_TARGET)
    parser.add_argument("--charmap", default=DEFAULT_CHARMAP)
    args = parser.parse_args(argv)
    try:
        generation, evaluated, best = genetic_string(args.target, args.charmap)
    except ValueError as err:
        print(err, file=sys.stderr)
        return 1
    print("Generation:", generation, "Analyzed:", evaluated, "Best:", best)
    return 0