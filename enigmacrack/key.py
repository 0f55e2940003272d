"""Enigma machine keys: rotor choice, positions, ring settings and plugboard."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field

ROTOR_NAMES = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII")

RotorSetting = tuple[int, int, int]
RotorsKey = tuple[RotorSetting, RotorSetting, RotorSetting]
Plug = tuple[int, int]

DEFAULT_ROTORS: RotorsKey = ((0, 0, 0), (1, 0, 0), (2, 0, 0))

_ROTOR_ARGS = 9
_MAX_PLUG_ARGS = 13


class KeyWarning(UserWarning):
    """Issued when part of a key is unusable and a default is used instead."""


def _letter_index(char: str) -> int:
    return ord(char.upper()) - ord("A")


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


def validate_plugs(plugs) -> list[Plug]:
    """Return the plugs normalised and sorted, or no plugs if any letter repeats."""
    used: set[int] = set()
    normalised: list[Plug] = []
    for first, second in plugs:
        if first in used or second in used or first == second:
            warnings.warn("Invalid plugs, defaulting to no plugs.", KeyWarning, stacklevel=2)
            return []
        used.update((first, second))
        normalised.append((min(first, second), max(first, second)))
    return sorted(normalised, key=lambda plug: plug[0])


def _parse_rotor_name(arg: str) -> int:
    if arg in ROTOR_NAMES:
        return ROTOR_NAMES.index(arg)
    name = int(arg) % 26
    if name >= len(ROTOR_NAMES):
        raise ValueError(f"unknown rotor: {arg!r}")
    return name


def _parse_letter_setting(arg: str) -> int:
    head = arg[:1]
    if _is_letter(head):
        return _letter_index(head)
    return int(arg) % 26


@dataclass
class Key:
    """A complete machine setting: three rotors (name, position, ring) and plugs."""

    rotors: RotorsKey = DEFAULT_ROTORS
    plugs: list[Plug] = field(default_factory=list)

    @classmethod
    def from_args(cls, args) -> Key:
        """Build a key from words such as ``IV U F III T K V D Z AZ GR HK``."""
        args = list(args)
        rotors = DEFAULT_ROTORS
        if len(args) < _ROTOR_ARGS:
            warnings.warn(
                "Too few rotor settings, using default rotors.", KeyWarning, stacklevel=2
            )
        else:
            groups = (args[0:3], args[3:6], args[6:9])
            rotors = tuple(
                (
                    _parse_rotor_name(name),
                    _parse_letter_setting(position),
                    _parse_letter_setting(ring),
                )
                for name, position, ring in groups
            )

        plugs: list[Plug] = []
        for arg in args[_ROTOR_ARGS : _ROTOR_ARGS + _MAX_PLUG_ARGS]:
            if len(arg) != 2:
                break
            if _is_letter(arg[0]) and _is_letter(arg[1]):
                plugs.append((_letter_index(arg[0]), _letter_index(arg[1])))
        return cls(rotors, validate_plugs(plugs))

    def __str__(self) -> str:
        parts = [
            f"{ROTOR_NAMES[name]} pos:{chr(pos + 65)} ring:{chr(ring + 65)}"
            for name, pos, ring in self.rotors
        ]
        parts.extend(f"{chr(a + 65)}-{chr(b + 65)}" for a, b in self.plugs)
        return " ".join(parts)