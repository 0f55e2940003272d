import io

import pytest

from enigmacrack.encrypt_cli import main
from enigmacrack.key import DEFAULT_ROTORS, Key, KeyWarning
from enigmacrack.machine import Machine

ARGS = "IV U F III T K V D Z AZ GR HK".split()


def _run(monkeypatch, capsys, args, stdin):
    monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
    code = main(args)
    return code, capsys.readouterr().out


def test_output_layout(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ARGS, "Hello World\n")
    key = Key.from_args(ARGS)
    expected = Machine.from_key(key).encrypt("Hello World")
    assert code == 0
    assert out == f"\n\n{key}\n{expected}\n"


def test_output_decrypts_back(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ARGS, "attack at dawn\n")
    ciphertext = out.splitlines()[-1]
    assert Machine.from_key(Key.from_args(ARGS)).fast_encrypt(ciphertext) == "ATTACKATDAWN"


def test_last_character_is_dropped(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, ARGS, "ABC")
    assert len(out.splitlines()[-1]) == 2


def test_empty_input(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, ARGS, "")
    assert code == 0
    assert out.splitlines()[-1] == ""


def test_no_arguments_uses_default_key(monkeypatch, capsys):
    with pytest.warns(KeyWarning):
        _, out = _run(monkeypatch, capsys, [], "AAAAA\n")
    lines = out.splitlines()
    assert lines[2] == str(Key(DEFAULT_ROTORS))
    assert lines[3] == Machine().fast_encrypt("AAAAA")