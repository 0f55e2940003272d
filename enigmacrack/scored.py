"""Keys and partial keys paired with the score they earned."""

from __future__ import annotations

from dataclasses import dataclass, field

from .key import DEFAULT_ROTORS, Key, Plug, RotorsKey


@dataclass
class ScoredRotors:
    """A rotor setting and its score."""

    score: float = 0.0
    rotors: RotorsKey = DEFAULT_ROTORS


@dataclass
class ScoredPlugboard:
    """A set of plugs and its score."""

    score: float = 0.0
    plugs: list[Plug] = field(default_factory=list)


@dataclass
class ScoredKey:
    """A whole key and its score."""

    score: float = 0.0
    key: Key = field(default_factory=Key)

    @classmethod
    def from_rotors(cls, scored_rotors: ScoredRotors, plugs) -> ScoredKey:
        return cls(scored_rotors.score, Key(scored_rotors.rotors, list(plugs)))

    @classmethod
    def from_plugboard(cls, rotors, scored_plugs: ScoredPlugboard) -> ScoredKey:
        return cls(scored_plugs.score, Key(rotors, list(scored_plugs.plugs)))

    def __str__(self) -> str:
        return f"{self.key}\t{self.score:f}"