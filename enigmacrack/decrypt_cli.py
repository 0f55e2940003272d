"""Command that searches for the Enigma key of a ciphertext, or parts of it."""

from __future__ import annotations

import sys
from pathlib import Path

from .cli_args import get_block_arguments
from .fitness import Bigrams, IoC, Known, Letters, Quadgrams, Trigrams
from .force import (
    DEFAULT_ROTOR_CHOICES,
    force_ciphertext,
    force_plugboard,
    force_rotor_name,
    force_rotor_notch,
    force_rotor_pos,
)
from .key import ROTOR_NAMES, Key
from .machine import Machine
from .scored import ScoredKey

FLAGS = (
    "--ciphertext",
    "--key",
    "--possible_rotors",
    "--amount",
    "--fitness",
    "--known_plaintext",
)

FITNESS_NAMES = ("ioc", "letters", "bigrams", "trigrams", "quadgrams", "known")
DEFAULT_FITNESS = [0, 0, 3]

HELP_TEXT = """\
This is a terminal utility to decrypt enigma enciphered text.

All modes require "--ciphertext [filepath]" CLI arguments to point to the text file containing the ciphertext.

Modes:
\tWithout specifying a mode in the first CLI argument, the program will run the below functions start to finish and return the best key it finds.

\t"--rotors" or "--names":
The program will brute-force which rotors are used, in what order, and in which positions.

\t"--pos" or "--positions":
The program will brute-force the best positions for the rotors given in the input enigma key.

\t"--rings" or "--notches":
The program will brute-force the best ring-settings of the given rotors, while keeping the internal wiring as is by moving the position to cancel out the effect on the internals of the rotor. In short, brute-forces the best notch position.

"--plugs" or "--plugboard":
The program will brute-force additional plugs for the plugboard.

"--encrypt" or "--enigma":
Returns the given ciphertext after encrypting it with the given key.

Optional Arguments:

\t"--key [Engima Key]"
should be followed by an Enigma key formatted as a Roman numeral followed by two capital letters, three times, followed by pairs of capital letters.
"--key IV U F III T K V D Z AZ GR HK"
The left rotor is IV, its position visible atop the machine is U, and the dot identifying the ring setting is over F. The middle rotor is III, position T, ring setting K. The right rotor is V, position D, ring setting Z. The plugboard has connected A to Z, G to R, and H to K.

\t"--amount [int]"
should be followed by an integer value specifying how many results you want printed.

\t"--fitness"
should be followed by one (or three if ran in default mode) of the following:
"ioc", "letters", "bigrams", "trigrams", "quadgrams", "known"
The second to the fifth require that the program be executed next to (in the same directory as) the folder that contains english data. The last requires another CLI argument "--known_plaintext".

\t"--known_plaintext [filepath]"
should be followed by a filepath to a text file containing whatever of the ciphertext is known. For example if the first three letters are known, as well as the 12th through 15th, then the file should contain:
"THE________ARE"

\t"--possible_rotors [numerals]"
should be followed by one to eight Roman numerals to specify which rotors should be attempted.
"""


def sanitize_ciphertext(text: str) -> str:
    """Keep only the ASCII letters of the text, in upper case."""
    return "".join(c.upper() for c in text if c.isascii() and c.isalpha())


def sanitize_possible_rotors(args) -> list[int]:
    """Read Roman numerals or integers as rotor indexes 0 to 7."""
    return [ROTOR_NAMES.index(arg) if arg in ROTOR_NAMES else int(arg) % 8 for arg in args]


def _fitness_index(name: str) -> int | None:
    return FITNESS_NAMES.index(name) if name in FITNESS_NAMES else None


def get_fitness_functions(args) -> list[int]:
    """Turn fitness names into indexes for the three search stages.

    One name is used for every stage; three names set each stage. Any
    unknown name gives the default choice.
    """
    args = list(args)
    if not args:
        return list(DEFAULT_FITNESS)
    if len(args) < 3:
        index = _fitness_index(args[0])
        if index is not None:
            return [index, index, index]
    else:
        indexes = [_fitness_index(name) for name in args[:3]]
        if None not in indexes:
            return indexes
    return list(DEFAULT_FITNESS)


def print_help() -> None:
    print(HELP_TEXT, end="")


def _read_file(block) -> str | None:
    if not block:
        return None
    try:
        return Path(block[0]).read_text()
    except OSError:
        return None


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    mode = args[0] if args else ""

    if mode in ("-h", "--help"):
        print_help()
        return 0

    inputs = get_block_arguments(args, FLAGS)

    if "--ciphertext" not in inputs:
        print("Please specify a filepath to the ciphertext.")
        return 1
    raw = _read_file(inputs["--ciphertext"])
    if raw is None:
        print("Invalid filepath to ciphertext.", file=sys.stderr)
        return 1
    ciphertext = sanitize_ciphertext(raw)

    known_plaintext = ""
    if "--known_plaintext" in inputs:
        known = _read_file(inputs["--known_plaintext"])
        if known is None:
            print("Invalid filepath to known plaintext.", file=sys.stderr)
            return 1
        known_plaintext = known

    fitness_functions = [
        IoC(),
        Letters(),
        Bigrams(),
        Trigrams(),
        Quadgrams(),
        Known(known_plaintext),
    ]

    key = Key.from_args(inputs["--key"]) if "--key" in inputs else Key()
    possible_rotors = (
        sanitize_possible_rotors(inputs["--possible_rotors"])
        if "--possible_rotors" in inputs
        else list(DEFAULT_ROTOR_CHOICES)
    )
    amount = int(inputs["--amount"][0]) if "--amount" in inputs else 1
    ff = get_fitness_functions(inputs["--fitness"]) if "--fitness" in inputs else [0, 0, 0]

    if mode in ("--rotors", "--names"):
        for scored in force_rotor_name(
            ciphertext, possible_rotors, amount, fitness_functions[ff[0]], key.plugs
        ):
            print(scored)
    elif mode in ("--pos", "--positions"):
        names = tuple(rotor[0] for rotor in key.rotors)
        for scored in force_rotor_pos(
            ciphertext, names, amount, fitness_functions[ff[0]], key.plugs
        ):
            print(ScoredKey.from_rotors(scored, key.plugs))
    elif mode in ("--rings", "--notches"):
        for scored in force_rotor_notch(ciphertext, key, amount, fitness_functions[ff[1]]):
            print(scored)
    elif mode in ("--plugs", "--plugboard"):
        for scored in force_plugboard(ciphertext, key, fitness_functions[ff[2]]):
            print(ScoredKey.from_plugboard(key.rotors, scored))
    elif mode in ("--encrypt", "--enigma"):
        print(Machine.from_key(key).fast_encrypt(ciphertext))
    else:
        print(
            force_ciphertext(
                ciphertext,
                possible_rotors,
                fitness_functions[ff[1]],
                fitness_functions[ff[1]],
                fitness_functions[ff[2]],
            )
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())