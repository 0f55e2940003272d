# enigmacrack

A simulator of the three-rotor Enigma machine (rotors I–VIII, reflector B,
plugboard, double stepping) together with brute-force searches that recover a
key from ciphertext, ranked by a choice of fitness functions.

## Installation

```
pip install .
```

## Keys

A key is written as three rotors, each a rotor name followed by its position
and its ring setting, then plugboard pairs:

```
IV U F III T K V D Z AZ GR HK
```

Here the left rotor is IV at position U with ring setting F, the middle rotor
III at T with ring K, the right rotor V at D with ring Z, and the plugboard
connects A–Z, G–R and H–K.

- A rotor name is a Roman numeral `I`–`VIII` or an integer (taken mod 26; a
  result above 7 raises `ValueError`).
- A position or ring setting is a letter or an integer (taken mod 26).
- Up to thirteen plugs are read; reading stops at the first word that is not
  two characters long, and words that are not two letters are skipped. Lower
  case letters are accepted.
- With fewer than nine rotor fields the default rotors (I, II, III, all at
  position A, ring A) are used and a `KeyWarning` is issued.
- If a letter is plugged twice, or to itself, a `KeyWarning` is issued and no
  plugs are used. Valid plugs are stored with the lower letter first, sorted.

## Encrypting

`enigma-encrypt` reads standard input, drops its final character (normally
the trailing newline), encrypts the letters with the key given on the command
line, discarding everything else, and prints two blank lines, the key and the
result:

```
echo "Hello world" | enigma-encrypt I A A II A A III A A
```

Enigma is its own inverse, so running the ciphertext through the same key
restores the plaintext (in upper case, without spaces or punctuation).

## Breaking a ciphertext

`enigma-decrypt` works on a text file; non-letters are discarded and letters
upper-cased.

```
enigma-decrypt --ciphertext message.txt
```

With no mode given it searches rotor order and positions, then ring settings
of the middle and right rotors, then plugs, and prints the best key found. The
first argument may instead pick one stage:

- `--rotors` / `--names` — which rotors, in which order and positions
- `--pos` / `--positions` — positions for the rotors named in `--key`
- `--rings` / `--notches` — ring settings (notch positions) for `--key`
- `--plugs` / `--plugboard` — plugboard pairs added one at a time to `--key`;
  prints the unplugged baseline, then each step while the score improves
- `--encrypt` / `--enigma` — just run the text through `--key`

Ranked results are printed best first, as the key followed by a tab and its
score.

Options:

- `--key <key>` — a key as described above (default: the default rotors, no plugs)
- `--amount <n>` — how many ranked results to print (default 1)
- `--possible_rotors <names>` — rotors to try, as Roman numerals or integers
  (taken mod 8); default `I II III IV V`
- `--fitness <name> [<name> <name>]` — one of `ioc`, `letters`, `bigrams`,
  `trigrams`, `quadgrams`, `known`
- `--known_plaintext <file>` — known text for the `known` fitness, with
  unknown letters replaced by any non-matching character, e.g. `THE________ARE`
- `-h` / `--help` as the first argument prints the full description

Without `--fitness` every stage uses `ioc`. One name (or two, of which only
the first counts) sets all three stages; three names set stages one, two and
three. An unknown name gives `ioc`, `ioc`, `quadgrams`. The rotor and position
searches use the first stage's function, the ring search the second, the
plugboard search the third. In the default full run, the rotor search and the
ring search both use the second function and the plugboard search the third.

If the ciphertext or known-plaintext file cannot be read, or `--ciphertext`
is missing, the command prints a message and exits with status 1.

## Fitness functions

`enigmacrack.fitness` provides `IoC` (index of coincidence), `Known`
(number of positions matching known plaintext) and the n-gram scorers
`Letters`, `Bigrams`, `Trigrams` and `Quadgrams`, which sum log scores and
count −7.5 for any gram not in their table. By default the n-gram scorers read
`english/letters.txt`, `english/bigrams.txt`, `english/trigrams.txt` and
`english/quadgrams.txt` from the working directory; each line holds the gram,
one separator character and its score. A table may also be passed directly as
a dict.

## Library use

```python
from enigmacrack.key import Key
from enigmacrack.machine import Machine
from enigmacrack.force import force_rotor_pos
from enigmacrack.fitness import IoC

key = Key.from_args("II B C IV D E I F G AB CD".split())
ciphertext = Machine.from_key(key).encrypt("attack at dawn")
best = force_rotor_pos(ciphertext, (1, 3, 0), 3, IoC(), key.plugs)
```

`enigmacrack.force` also offers `force_rotor_name`, `force_rotor_notch`,
`force_plugboard` and `force_ciphertext`; `enigmacrack.scored` holds the
`ScoredKey`, `ScoredRotors` and `ScoredPlugboard` results.

## Limitations

- Only the three-rotor machine with reflector B is simulated; there is no
  four-rotor machine and no choice of reflector.
- The ring search leaves the left rotor's ring setting unchanged.
- No English frequency tables are included; the n-gram fitness functions
  need them supplied in `english/`. Without them a message is printed on
  standard error and every gram scores −7.5.