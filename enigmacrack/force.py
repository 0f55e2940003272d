"""Brute-force searches for the key of an Enigma ciphertext."""

from __future__ import annotations

import bisect
from itertools import product

from .fitness import IoC
from .key import Key
from .machine import LETTERS, Machine
from .scored import ScoredKey, ScoredPlugboard, ScoredRotors

DEFAULT_ROTOR_CHOICES = (0, 1, 2, 3, 4)
_WORST_SCORE = -1000000000.0


def _offer(ranked: list, item) -> None:
    """Insert item into a best-first list of fixed length if it beats the last."""
    if ranked[-1].score > item.score:
        return
    index = bisect.bisect_left(ranked, -item.score, key=lambda entry: -entry.score)
    ranked.insert(index, item)
    ranked.pop()


def _rotor_orders(possible_rotors):
    for left, middle, right in product(possible_rotors, repeat=3):
        if middle != left and right != middle and right != left:
            yield left, middle, right


def force_ciphertext(
    ciphertext,
    possible_rotors=DEFAULT_ROTOR_CHOICES,
    fitness0=None,
    fitness1=None,
    fitness2=None,
) -> Key:
    """Run the rotor, ring and plugboard searches one after another."""
    named = force_rotor_name(ciphertext, possible_rotors, 1, fitness0)[0].key
    key = force_rotor_notch(ciphertext, named, 1, fitness1)[0].key
    plugs = force_plugboard(ciphertext, key, fitness2)[0].plugs
    return Key(key.rotors, plugs)


def force_rotor_name(
    ciphertext,
    possible_rotors=DEFAULT_ROTOR_CHOICES,
    amount=1,
    fitness=None,
    plugboard_key=(),
) -> list[ScoredKey]:
    """Find the best rotor choices, orders and positions, best first."""
    if amount <= 0:
        return []
    fitness = IoC() if fitness is None else fitness
    ranked = [ScoredKey(_WORST_SCORE, Key()) for _ in range(amount)]
    for names in _rotor_orders(possible_rotors):
        best = force_rotor_pos(ciphertext, names, 1, fitness, plugboard_key)[0]
        _offer(ranked, ScoredKey.from_rotors(best, plugboard_key))
    return ranked


def force_rotor_pos(
    ciphertext, rotor_names, amount=1, fitness=None, plugboard_key=()
) -> list[ScoredRotors]:
    """Find the best starting positions for the given rotors, best first."""
    if amount <= 0:
        return []
    fitness = IoC() if fitness is None else fitness
    left, middle, right = rotor_names
    start = ((left, 0, 0), (middle, 0, 0), (right, 0, 0))
    ranked = [ScoredRotors(_WORST_SCORE, start) for _ in range(amount)]
    enigma = Machine(start, plugboard_key)
    for positions in product(range(LETTERS), repeat=3):
        score = fitness(enigma.set_rotors_pos(positions).fast_encrypt(ciphertext))
        lp, mp, rp = positions
        _offer(ranked, ScoredRotors(score, ((left, lp, 0), (middle, mp, 0), (right, rp, 0))))
    return ranked


def force_rotor_notch(ciphertext, key: Key, amount=1, fitness=None) -> list[ScoredKey]:
    """Find the best ring settings of the middle and right rotors, best first.

    Each ring change is matched by a position change so the wiring stays
    where it was; only the point at which the notches turn the next rotor moves.
    """
    if amount <= 0:
        return []
    fitness = IoC() if fitness is None else fitness
    ranked = [ScoredKey(_WORST_SCORE, Key()) for _ in range(amount)]
    enigma = Machine.from_key(key)
    left, middle, right = key.rotors
    for i, j in product(range(LETTERS), repeat=2):
        rotors = (
            left,
            (middle[0], (middle[1] + i) % LETTERS, i),
            (right[0], (right[1] + j) % LETTERS, j),
        )
        score = fitness(enigma.set_rotors(rotors).fast_encrypt(ciphertext))
        _offer(ranked, ScoredKey(score, Key(rotors, list(key.plugs))))
    return ranked


def force_plugboard(ciphertext, key: Key, fitness) -> list[ScoredPlugboard]:
    """Add the best plug one at a time while the score keeps improving.

    The result starts with the unplugged baseline, then each of the key's own
    plugs in turn, then every plug found, each entry extending the one before.
    """
    enigma = Machine.from_key(key)
    free = list(range(LETTERS))

    results = [ScoredPlugboard(fitness(enigma.set_plugs([]).fast_encrypt(ciphertext)), [])]

    plugs: list[tuple[int, int]] = []
    for plug in key.plugs:
        plugs.append(plug)
        score = fitness(enigma.set_plugs(plugs).fast_encrypt(ciphertext))
        results.append(ScoredPlugboard(score, list(plugs)))
        free.remove(plug[0])
        free.remove(plug[1])

    best_plug = (0, 0)
    best_score = _WORST_SCORE
    while len(free) > 1:
        for a_index, first in enumerate(free):
            for second in free[a_index + 1 :]:
                plug = (first, second)
                score = fitness(enigma.set_plugs([*plugs, plug]).fast_encrypt(ciphertext))
                if best_score < score:
                    best_score = score
                    best_plug = plug
        if best_score <= results[-1].score:
            break
        plugs.append(best_plug)
        results.append(ScoredPlugboard(best_score, list(plugs)))
        free.remove(best_plug[0])
        free.remove(best_plug[1])
    return results