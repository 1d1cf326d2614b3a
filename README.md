# spellkit

A small spell checker built on a hash-table dictionary, plus a few companion
tools: a FIFO queue, two stack implementations and a blood-type inheritance
simulator. It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

## Spell checking

```
speller [DICTIONARY] text
```

`speller` loads the dictionary, reads the text and prints every word not
found in the dictionary, then a summary: how many words were misspelled, how
many the dictionary holds, how many the text held, and the CPU seconds spent
loading, checking, sizing and unloading. With the wrong number of arguments
it prints a usage line and exits with status 1; it also exits with status 1
when the dictionary or the text cannot be opened.

The dictionary file holds words separated by whitespace; a token longer than
45 characters is split into 45-character pieces. Lookup ignores ASCII case.

In the text, a word is a run of ASCII letters, which may contain apostrophes
after its first letter, ended by any other character. Runs longer than 45
characters and runs containing digits are skipped, and a word still open at
the very end of the file (with nothing after it) is not counted.

### What it does not include

No word list comes with the package. When `DICTIONARY` is left out, `speller`
looks for `dictionaries/large` relative to the current directory, so that file
must be supplied by you.

### From Python

```python
from spellkit.dictionary import Dictionary
from spellkit.speller import spell_check

with Dictionary() as dictionary:
    dictionary.load("words.txt")
    with open("essay.txt") as stream:
        report = spell_check(dictionary, stream)

print(report.misspelled, report.words_in_text, report.words_in_dictionary)
```

- `Dictionary.load(path)` reads a word file and raises `OSError` if it cannot;
  `check(word)` tells whether a word is known (also `word in dictionary`);
  `size()` and `len()` give the number of words loaded; `unload()` empties it,
  as does leaving a `with` block.
- `hash_word(word)` gives the bucket (0 to 25) a word falls into, ignoring case.
- `iter_words(stream)` yields the words of a text or binary stream the way the
  checker sees them.
- `spell_check(dictionary, stream)` returns a `SpellReport` with `misspelled`,
  `words_in_text`, `words_in_dictionary` and the timing fields `time_load`,
  `time_check`, `time_size` and `time_unload` (only checking and sizing are
  timed by `spell_check` itself).

## Blood-type inheritance

```
inheritance [--generations N] [--seed SEED]
```

Builds a random family (three generations by default) and prints each
member's blood type, indented four spaces per generation, labelled Child,
Parent, Grandparent, Great-Grandparent and so on. `--seed` makes the result
repeatable.

In Python, `create_family(generations, rng)` returns a `Person` tree (with
`alleles`, `parents` and `blood_type`), `format_family(person, generation)`
renders it as text, and `random_allele(rng)` picks one of `A`, `B` or `O`.

## Queue and stacks

```
queue-demo
stack-demo
stack-array-demo
```

`spellkit.fifo.Queue` offers `enqueue`, `dequeue` (raises `IndexError` when
empty), `is_empty`, `clear` and `drain`, which yields values until the queue
is empty; it also supports `len()` and iteration.

`spellkit.stacks` provides `ArrayStack`, which holds at most a fixed number of
items (100 by default) and raises `StackOverflowError` when full, and
`LinkedStack`, which has no limit and also offers `clear`. Both have `push`,
`pop`, `peek`, `is_empty` and `len()`, and raise `StackEmptyError` when
popping or peeking an empty stack.

## Running the tests

```
pip install ".[test]"
pytest
```