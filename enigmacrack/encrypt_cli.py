"""Command that encrypts standard input with an Enigma key given as arguments."""

from __future__ import annotations

import sys

from .key import Key
from .machine import Machine


def main(argv=None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    key = Key.from_args(args)
    enigma = Machine(key.rotors, key.plugs)

    plaintext = sys.stdin.read()
    if plaintext:
        plaintext = plaintext[:-1]  # drop the final character, normally the newline

    print(f"\n\n{key}\n{enigma.encrypt(plaintext)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())