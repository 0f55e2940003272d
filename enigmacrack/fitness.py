"""Scoring functions that rate how much a text looks like plain English."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import Counter
from pathlib import Path

GRAM_FILES = (
    "english/letters.txt",
    "english/bigrams.txt",
    "english/trigrams.txt",
    "english/quadgrams.txt",
)

# The lowest log-probability found in the English data.
MISSING_GRAM_SCORE = -7.5


class FitnessFunction(ABC):
    """A callable that gives higher scores to more plausible texts."""

    @abstractmethod
    def __call__(self, text: str) -> float:
        """Score a text of uppercase letters."""


class IoC(FitnessFunction):
    """Index of coincidence."""

    def __call__(self, text: str) -> float:
        size = len(text)
        numerator = sum(n * (n - 1) for n in Counter(text).values())
        denominator = size * (size - 1)
        if denominator == 0:
            return float("nan")
        return numerator / denominator


class Known(FitnessFunction):
    """Counts the positions at which a text agrees with known plaintext."""

    def __init__(self, plaintext: str) -> None:
        self.plaintext = plaintext

    def __call__(self, text: str) -> float:
        return float(sum(a == b for a, b in zip(text, self.plaintext)))


def initialize_gram(length: int) -> dict[str, float]:
    """Load the English n-gram table for n = length from the working directory.

    Each line holds an n-gram, one separator character and a score. A missing
    file is reported on standard error and gives an empty table.
    """
    path = Path(GRAM_FILES[length - 1])
    try:
        content = path.read_text()
    except OSError:
        print("Unable to locate english data.", file=sys.stderr)
        return {}
    table: dict[str, float] = {}
    for line in content.splitlines():
        if not line.strip():
            continue
        table[line[:length]] = float(line[length + 1 :])
    return table


class GramFitness(FitnessFunction):
    """Sums the English log-probabilities of every n-gram in a text."""

    length = 1

    def __init__(self, length: int | None = None, data: dict[str, float] | None = None) -> None:
        if length is not None:
            self.length = length
        self.data = initialize_gram(self.length) if data is None else dict(data)

    def score(self, text: str, length: int) -> float:
        if len(text) < length:
            return 0.0
        return sum(
            self.data.get(text[i : i + length], MISSING_GRAM_SCORE)
            for i in range(len(text) - length + 1)
        )

    def __call__(self, text: str) -> float:
        return self.score(text, self.length)


class Letters(GramFitness):
    """Single-letter frequencies."""

    def __init__(self, data: dict[str, float] | None = None) -> None:
        super().__init__(1, data)


class Bigrams(GramFitness):
    """Two-letter frequencies."""

    def __init__(self, data: dict[str, float] | None = None) -> None:
        super().__init__(2, data)


class Trigrams(GramFitness):
    """Three-letter frequencies."""

    def __init__(self, data: dict[str, float] | None = None) -> None:
        super().__init__(3, data)


class Quadgrams(GramFitness):
    """Four-letter frequencies."""

    def __init__(self, data: dict[str, float] | None = None) -> None:
        super().__init__(4, data)