"""Helpers that sort command-line words into flags and their values."""

from __future__ import annotations


def yes_no(c: str) -> bool:
    """Return False for 'n', 'N' or '0' and True for any other character."""
    return c not in ("n", "N", "0")


def get_arguments(args) -> dict[str, str]:
    """Pair single-letter flags with the non-flag words.

    The first word is the program name and is skipped. Every word starting
    with '-' is a run of one-letter flags. The other words are values. When
    there are more flags than values, the leading flags get empty strings,
    so that they can be treated as switches. The first value for a flag wins.
    """
    flags: list[str] = []
    values: list[str] = []
    for arg in list(args)[1:]:
        if arg.startswith("-"):
            flags.extend(arg[1:])
        else:
            values.append(arg)

    if len(values) < len(flags):
        values = [""] * (len(flags) - len(values)) + values

    result: dict[str, str] = {}
    for flag, value in zip(flags, values):
        result.setdefault(flag, value)
    return dict(sorted(result.items()))


def get_block_arguments(args, flags) -> dict[str, list[str]]:
    """Group words into blocks, each started by one of the given flags.

    Words before the first flag go under the empty string, which is always
    present. A flag given twice keeps only its last block.
    """
    known = list(flags)
    result: dict[str, list[str]] = {}
    flag = ""
    block: list[str] = []
    for arg in args:
        if arg in known:
            result[flag] = block
            flag = arg
            block = []
        else:
            block.append(arg)
    result[flag] = block
    return dict(sorted(result.items()))