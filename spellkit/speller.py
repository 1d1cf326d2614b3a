"""Spell-check a text file against a dictionary and report timings."""

from __future__ import annotations

import string
import sys
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import IO, AnyStr

from spellkit.dictionary import LENGTH, Dictionary

DICTIONARY = "dictionaries/large"
"""Dictionary used when none is named on the command line."""

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_ALNUM = _ALPHA | _DIGITS
_CHUNK = 8192


@dataclass
class SpellReport:
    """Outcome of a spell-check run, with CPU seconds spent in each phase."""

    misspelled: list[str] = field(default_factory=list)
    words_in_text: int = 0
    words_in_dictionary: int = 0
    time_load: float = 0.0
    time_check: float = 0.0
    time_size: float = 0.0
    time_unload: float = 0.0


def _chars(stream: IO[AnyStr]) -> Iterator[str]:
    """Yield the characters of a text or binary stream one at a time."""
    while chunk := stream.read(_CHUNK):
        if isinstance(chunk, bytes):
            yield from map(chr, chunk)
        else:
            yield from chunk


def iter_words(stream: IO[AnyStr]) -> Iterator[str]:
    """Yield the words of a stream.

    A word is a run of ASCII letters, possibly with apostrophes after its
    first letter, ended by any other character. Runs longer than LENGTH and
    runs that contain digits are skipped; a word still open at the end of
    the stream is not reported.
    """
    chars = _chars(stream)
    buffer: list[str] = []
    for ch in chars:
        if ch in _ALPHA or (ch == "'" and buffer):
            buffer.append(ch)
            if len(buffer) > LENGTH:
                for rest in chars:
                    if rest not in _ALPHA:
                        break
                buffer = []
        elif ch in _DIGITS:
            for rest in chars:
                if rest not in _ALNUM:
                    break
            buffer = []
        elif buffer:
            yield "".join(buffer)
            buffer = []


def spell_check(dictionary: Dictionary, stream: IO[AnyStr]) -> SpellReport:
    """Check every word of a stream against a loaded dictionary."""
    report = SpellReport()
    for word in iter_words(stream):
        report.words_in_text += 1
        before = time.process_time()
        misspelled = not dictionary.check(word)
        report.time_check += time.process_time() - before
        if misspelled:
            report.misspelled.append(word)

    before = time.process_time()
    report.words_in_dictionary = dictionary.size()
    report.time_size = time.process_time() - before
    return report


def _format_summary(report: SpellReport) -> str:
    total = (
        report.time_load + report.time_check + report.time_size + report.time_unload
    )
    return (
        f"\nWORDS MISSPELLED:     {len(report.misspelled)}\n"
        f"WORDS IN DICTIONARY:  {report.words_in_dictionary}\n"
        f"WORDS IN TEXT:        {report.words_in_text}\n"
        f"TIME IN load:         {report.time_load:.2f}\n"
        f"TIME IN check:        {report.time_check:.2f}\n"
        f"TIME IN size:         {report.time_size:.2f}\n"
        f"TIME IN unload:       {report.time_unload:.2f}\n"
        f"TIME IN TOTAL:        {total:.2f}\n\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run the spell-checker: speller [DICTIONARY] text."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (1, 2):
        print("Usage: ./speller [DICTIONARY] text")
        return 1

    dictionary_path = args[0] if len(args) == 2 else DICTIONARY
    text_path = args[-1]

    dictionary = Dictionary()
    before = time.process_time()
    try:
        dictionary.load(dictionary_path)
    except OSError:
        print(f"could not read {dictionary_path}", file=sys.stderr)
        print(f"Could not load {dictionary_path}.")
        return 1
    time_load = time.process_time() - before

    try:
        handle = open(text_path, "rb")
    except OSError:
        print(f"Could not open {text_path}.")
        dictionary.unload()
        return 1

    print("\nMISSPELLED WORDS\n")
    with handle:
        try:
            report = spell_check(dictionary, handle)
        except OSError:
            print(f"Error reading {text_path}.")
            dictionary.unload()
            return 1
    for word in report.misspelled:
        print(word)

    report.time_load = time_load
    before = time.process_time()
    unloaded = dictionary.unload()
    report.time_unload = time.process_time() - before
    if not unloaded:
        print(f"Could not unload {dictionary_path}.")
        return 1

    print(_format_summary(report), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())