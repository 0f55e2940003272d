import pytest

from enigmacrack.decrypt_cli import (
    get_fitness_functions,
    main,
    print_help,
    sanitize_ciphertext,
    sanitize_possible_rotors,
)
from enigmacrack.key import Key
from enigmacrack.machine import Machine


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_sanitize_ciphertext_keeps_letters_uppercased():
    assert sanitize_ciphertext("Hello, World! 123") == "HELLOWORLD"


def test_sanitize_ciphertext_drops_non_ascii_letters():
    assert sanitize_ciphertext("\u00e9a\u00dfb") == "AB"


def test_sanitize_possible_rotors_reads_numerals_and_integers():
    assert sanitize_possible_rotors(["I", "IV", "VIII", "9", "2"]) == [0, 3, 7, 1, 2]


def test_sanitize_possible_rotors_rejects_garbage():
    with pytest.raises(ValueError):
        sanitize_possible_rotors(["XI"])


@pytest.mark.parametrize(
    "args, expected",
    [
        (["ioc"], [0, 0, 0]),
        (["bigrams"], [2, 2, 2]),
        (["known", "ioc"], [5, 5, 5]),
        (["ioc", "known", "quadgrams"], [0, 5, 4]),
        (["nope"], [0, 0, 3]),
        (["ioc", "nope", "ioc"], [0, 0, 3]),
        ([], [0, 0, 3]),
    ],
)
def test_get_fitness_functions(args, expected):
    assert get_fitness_functions(args) == expected


def test_print_help_mentions_modes(capsys):
    print_help()
    out = capsys.readouterr().out
    assert "--ciphertext [filepath]" in out
    assert '"--plugs" or "--plugboard"' in out


def test_main_help_returns_zero(capsys):
    assert main(["--help"]) == 0
    assert "terminal utility to decrypt" in capsys.readouterr().out


def test_main_without_ciphertext_fails(workdir, capsys):
    assert main(["--encrypt"]) == 1
    assert "Please specify a filepath to the ciphertext." in capsys.readouterr().out


def test_main_with_missing_ciphertext_file_fails(workdir, capsys):
    assert main(["--encrypt", "--ciphertext", str(workdir / "absent.txt")]) == 1
    assert "Invalid filepath to ciphertext." in capsys.readouterr().err


def test_main_with_missing_known_plaintext_fails(workdir, capsys):
    (workdir / "ct.txt").write_text("ABC")
    code = main(
        ["--encrypt", "--ciphertext", "ct.txt", "--known_plaintext", "absent.txt"]
    )
    assert code == 1
    assert "Invalid filepath to known plaintext." in capsys.readouterr().err


def test_main_encrypt_round_trip(workdir, capsys):
    key_words = ["IV", "U", "F", "III", "T", "K", "V", "D", "Z", "AZ", "GR", "HK"]
    (workdir / "pt.txt").write_text("Attack at dawn, hold the bridge.\n")
    assert main(["--encrypt", "--ciphertext", "pt.txt", "--key", *key_words]) == 0
    captured = capsys.readouterr()
    ciphertext = captured.out.strip()
    assert ciphertext == Machine.from_key(Key.from_args(key_words)).fast_encrypt(
        "ATTACKATDAWNHOLDTHEBRIDGE"
    )

    (workdir / "ct.txt").write_text(ciphertext)
    assert main(["--enigma", "--ciphertext", "ct.txt", "--key", *key_words]) == 0
    assert capsys.readouterr().out.strip() == "ATTACKATDAWNHOLDTHEBRIDGE"


def test_main_positions_finds_known_plaintext(workdir, capsys):
    plaintext = "WEATHERREPORTTODAY"
    rotors = ((0, 3, 0), (1, 7, 0), (2, 11, 0))
    ciphertext = Machine(rotors).fast_encrypt(plaintext)
    (workdir / "ct.txt").write_text(ciphertext)
    (workdir / "kp.txt").write_text(plaintext)
    code = main(
        [
            "--pos",
            "--ciphertext", "ct.txt",
            "--known_plaintext", "kp.txt",
            "--fitness", "known",
            "--amount", "2",
        ]
    )
    assert code == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 2
    best_score = float(lines[0].split("\t")[1])
    second_score = float(lines[1].split("\t")[1])
    assert best_score == len(plaintext)
    assert second_score <= best_score