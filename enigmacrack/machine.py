"""A virtual three-rotor Enigma machine with reflector B."""

from __future__ import annotations

from .key import DEFAULT_ROTORS, Key

LETTERS = 26

# ROTOR_WIRING[name][letter] is the output with position 0 and ring 0.
ROTOR_WIRING = (
    (4, 10, 12, 5, 11, 6, 3, 16, 21, 25, 13, 19, 14, 22, 24, 7, 23, 20, 18, 15, 0, 8, 1, 17, 2, 9),
    (0, 9, 3, 10, 18, 8, 17, 20, 23, 1, 11, 7, 22, 19, 12, 2, 16, 6, 25, 13, 15, 24, 5, 21, 14, 4),
    (1, 3, 5, 7, 9, 11, 2, 15, 17, 19, 23, 21, 25, 13, 24, 4, 8, 22, 6, 0, 10, 12, 20, 18, 16, 14),
    (4, 18, 14, 21, 15, 25, 9, 0, 24, 16, 20, 8, 17, 7, 23, 11, 13, 5, 19, 6, 10, 3, 2, 12, 22, 1),
    (21, 25, 1, 17, 6, 8, 19, 24, 20, 15, 18, 3, 13, 7, 11, 23, 0, 22, 12, 9, 16, 14, 5, 4, 2, 10),
    (9, 15, 6, 21, 14, 20, 12, 5, 24, 16, 1, 4, 13, 7, 25, 17, 3, 10, 0, 18, 23, 11, 8, 2, 19, 22),
    (13, 25, 9, 7, 6, 17, 2, 23, 12, 24, 18, 22, 1, 14, 20, 5, 0, 8, 21, 11, 15, 4, 10, 16, 3, 19),
    (5, 10, 16, 7, 19, 11, 23, 14, 2, 1, 9, 18, 15, 3, 25, 17, 0, 12, 4, 22, 13, 8, 20, 24, 6, 21),
)

# REVERSE_ROTOR_WIRING[name][ROTOR_WIRING[name][letter]] == letter
REVERSE_ROTOR_WIRING = (
    (20, 22, 24, 6, 0, 3, 5, 15, 21, 25, 1, 4, 2, 10, 12, 19, 7, 23, 18, 11, 17, 8, 13, 16, 14, 9),
    (0, 9, 15, 2, 25, 22, 17, 11, 5, 1, 3, 10, 14, 19, 24, 20, 16, 6, 4, 13, 7, 23, 12, 8, 21, 18),
    (19, 0, 6, 1, 15, 2, 18, 3, 16, 4, 20, 5, 21, 13, 25, 7, 24, 8, 23, 9, 22, 11, 17, 10, 14, 12),
    (7, 25, 22, 21, 0, 17, 19, 13, 11, 6, 20, 15, 23, 16, 2, 4, 9, 12, 1, 18, 10, 3, 24, 14, 8, 5),
    (16, 2, 24, 11, 23, 22, 4, 13, 5, 19, 25, 14, 18, 12, 21, 9, 20, 3, 10, 6, 8, 0, 17, 15, 7, 1),
    (18, 10, 23, 16, 11, 7, 2, 13, 22, 0, 17, 21, 6, 12, 4, 1, 9, 15, 19, 24, 5, 3, 25, 20, 8, 14),
    (16, 12, 6, 24, 21, 15, 4, 3, 17, 2, 22, 19, 8, 0, 13, 20, 23, 5, 10, 25, 14, 18, 11, 7, 9, 1),
    (16, 9, 8, 13, 18, 0, 24, 3, 21, 10, 1, 5, 17, 20, 7, 12, 2, 15, 11, 4, 22, 25, 19, 6, 23, 14),
)

# Reflector B.
REFLECTOR = (24, 17, 20, 7, 16, 18, 11, 3, 15, 23, 13, 6, 14, 10, 12, 8, 4, 1, 5, 25, 2, 22, 21, 9, 0, 19)

# Positions at which each rotor exposes its left neighbour to the pawl.
NOTCHES = (
    frozenset({16}),      # I    Q > R
    frozenset({4}),       # II   E > F
    frozenset({21}),      # III  V > W
    frozenset({9}),       # IV   J > K
    frozenset({25}),      # V    Z > A
    frozenset({12, 25}),  # VI
    frozenset({12, 25}),  # VII
    frozenset({12, 25}),  # VIII
)


def translate_plugs(plugs) -> list[int]:
    """Return the plugboard permutation for the given letter pairs."""
    board = list(range(LETTERS))
    for first, second in plugs:
        board[first], board[second] = board[second], board[first]
    return board


class _Rotor:
    __slots__ = ("name", "pos", "forward", "reverse")

    def __init__(self, setting) -> None:
        self.set_key(setting)

    def set_key(self, setting) -> None:
        name, pos, ring = setting
        if not 0 <= name < len(ROTOR_WIRING):
            raise ValueError(f"unknown rotor: {name}")
        ring %= LETTERS
        self.name = name
        self.pos = pos % LETTERS
        # Bake the ring setting into the tables: table[d] = wiring[d - ring] + ring.
        self.forward = self._with_ring(ROTOR_WIRING[name], ring)
        self.reverse = self._with_ring(REVERSE_ROTOR_WIRING[name], ring)

    @staticmethod
    def _with_ring(wiring, ring: int) -> list[int]:
        rotated = wiring[LETTERS - ring :] + wiring[: LETTERS - ring]
        return [(d + ring) % LETTERS for d in rotated]


class Machine:
    """An Enigma machine with three rotors, reflector B and a plugboard."""

    def __init__(self, rotors=DEFAULT_ROTORS, plugs=()) -> None:
        left, middle, right = rotors
        self._left = _Rotor(left)
        self._middle = _Rotor(middle)
        self._right = _Rotor(right)
        self._plugboard = translate_plugs(plugs)

    @classmethod
    def from_key(cls, key: Key) -> Machine:
        return cls(key.rotors, key.plugs)

    def set_key(self, rotors, plugs) -> Machine:
        self.set_rotors(rotors)
        self.set_plugs(plugs)
        return self

    def set_rotors(self, rotors) -> Machine:
        left, middle, right = rotors
        self._left.set_key(left)
        self._middle.set_key(middle)
        self._right.set_key(right)
        return self

    def set_plugs(self, plugs) -> Machine:
        self._plugboard = translate_plugs(plugs)
        return self

    def set_rotors_pos(self, positions) -> Machine:
        """Move the rotors without changing their wiring or ring settings."""
        self._left.pos, self._middle.pos, self._right.pos = positions
        return self

    def rotor_positions(self) -> tuple[int, int, int]:
        return (self._left.pos, self._middle.pos, self._right.pos)

    def _step(self) -> None:
        left, middle, right = self._left, self._middle, self._right
        if middle.pos in NOTCHES[middle.name]:
            left.pos = (left.pos + 1) % LETTERS
            middle.pos = (middle.pos + 1) % LETTERS  # double stepping
        if right.pos in NOTCHES[right.name]:
            middle.pos = (middle.pos + 1) % LETTERS
        right.pos = (right.pos + 1) % LETTERS

    def _encipher(self, d: int) -> int:
        self._step()
        left, middle, right = self._left, self._middle, self._right
        lp, mp, rp = left.pos, middle.pos, right.pos
        board = self._plugboard
        d = board[d]
        d = right.forward[(d + rp) % LETTERS]
        d = middle.forward[(d - rp + mp) % LETTERS]
        d = left.forward[(d - mp + lp) % LETTERS]
        d = REFLECTOR[(d - lp) % LETTERS]
        d = left.reverse[(d + lp) % LETTERS]
        d = middle.reverse[(d - lp + mp) % LETTERS]
        d = right.reverse[(d - mp + rp) % LETTERS]
        return board[(d - rp) % LETTERS]

    def encrypt_index(self, d: int) -> int:
        """Encrypt one letter given as 0-25 (other values are taken mod 26)."""
        return self._encipher(d % LETTERS)

    def encrypt_char(self, c: str) -> str:
        """Encrypt one letter; any other character is returned unchanged."""
        if c.isascii() and c.isalpha():
            return chr(self._encipher(ord(c.upper()) - 65) + 65)
        return c

    def fast_encrypt(self, text: str) -> str:
        """Encrypt text that holds only uppercase letters A-Z."""
        return "".join(chr(self._encipher(ord(c) - 65) + 65) for c in text)

    def encrypt(self, text: str) -> str:
        """Encrypt the letters of any text, dropping everything else."""
        return "".join(self.encrypt_char(c) for c in text if c.isascii() and c.isalpha())