from enigmacrack.key import DEFAULT_ROTORS, Key
from enigmacrack.scored import ScoredKey, ScoredPlugboard, ScoredRotors


def test_str_of_default_key():
    assert str(ScoredKey(0.5, Key())) == (
        "I pos:A ring:A II pos:A ring:A III pos:A ring:A\t0.500000"
    )


def test_str_contains_key_text():
    key = Key(((3, 1, 2), (4, 0, 0), (0, 5, 6)), [(0, 25)])
    text = str(ScoredKey(-2.0, key))
    assert text.split("\t")[0] == str(key)


def test_defaults():
    scored = ScoredKey()
    assert (scored.score, scored.key) == (0.0, Key())
    assert ScoredRotors().rotors == DEFAULT_ROTORS
    assert ScoredPlugboard().plugs == []


def test_from_rotors():
    rotors = ((1, 2, 0), (3, 4, 0), (5, 6, 0))
    scored = ScoredKey.from_rotors(ScoredRotors(7.0, rotors), [(1, 2)])
    assert scored.score == 7.0
    assert scored.key == Key(rotors, [(1, 2)])


def test_from_plugboard():
    rotors = ((0, 1, 2), (1, 3, 4), (2, 5, 6))
    scored = ScoredKey.from_plugboard(rotors, ScoredPlugboard(3.5, [(4, 9)]))
    assert scored.score == 3.5
    assert scored.key == Key(rotors, [(4, 9)])


def test_from_plugboard_copies_plugs():
    plugs = [(4, 9)]
    scored = ScoredKey.from_plugboard(DEFAULT_ROTORS, ScoredPlugboard(1.0, plugs))
    plugs.append((1, 2))
    assert scored.key.plugs == [(4, 9)]