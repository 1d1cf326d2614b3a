import io

import pytest

from spellkit.dictionary import LENGTH, Dictionary
from spellkit.speller import SpellReport, iter_words, main, spell_check


def words_of(text):
    return list(iter_words(io.StringIO(text)))


@pytest.fixture
def dictionary(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("cat\ndog\nbird\n", encoding="utf-8")
    loaded = Dictionary()
    loaded.load(path)
    return loaded


def test_words_split_on_punctuation():
    assert words_of("Hello, world!\n") == ["Hello", "world"]


def test_word_open_at_end_is_not_reported():
    assert words_of("alpha beta") == ["alpha"]


def test_apostrophe_only_inside_word():
    assert words_of("'tis don't ") == ["tis", "don't"]


def test_words_with_digits_are_skipped():
    assert words_of("abc1def ghi ") == ["ghi"]
    assert words_of("42 cat ") == ["cat"]


def test_longest_word_is_kept():
    word = "a" * LENGTH
    assert words_of(word + " ") == [word]


def test_too_long_run_is_skipped():
    assert words_of("b" * (LENGTH + 1) + " ok ") == ["ok"]


def test_binary_stream_matches_text_stream():
    text = "The quick brown fox, it's 3rd time.\n"
    assert list(iter_words(io.BytesIO(text.encode("ascii")))) == words_of(text)


def test_non_ascii_letters_end_words():
    assert words_of("caf\u00e9 ") == ["caf"]


def test_spell_check_counts(dictionary):
    report = spell_check(dictionary, io.StringIO("Cat dgo BIRD fish.\n"))
    assert isinstance(report, SpellReport)
    assert report.misspelled == ["dgo", "fish"]
    assert report.words_in_text == 4
    assert report.words_in_dictionary == 3
    assert report.time_check >= 0.0


def test_spell_check_empty_text(dictionary):
    report = spell_check(dictionary, io.StringIO(""))
    assert report.misspelled == []
    assert report.words_in_text == 0


def test_main_reports(tmp_path, capsys):
    dict_path = tmp_path / "dict.txt"
    dict_path.write_text("cat\ndog\n", encoding="utf-8")
    text_path = tmp_path / "text.txt"
    text_path.write_text("cat dgo dog\n", encoding="utf-8")

    assert main([str(dict_path), str(text_path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("\nMISSPELLED WORDS\n\ndgo\n")
    assert "WORDS MISSPELLED:     1\n" in out
    assert "WORDS IN DICTIONARY:  2\n" in out
    assert "WORDS IN TEXT:        3\n" in out
    assert "TIME IN TOTAL:" in out


@pytest.mark.parametrize("args", [[], ["a", "b", "c"]])
def test_main_usage(args, capsys):
    assert main(args) == 1
    assert capsys.readouterr().out == "Usage: ./speller [DICTIONARY] text\n"


def test_main_missing_dictionary(tmp_path, capsys):
    missing = tmp_path / "nope"
    text_path = tmp_path / "text.txt"
    text_path.write_text("cat\n", encoding="utf-8")
    assert main([str(missing), str(text_path)]) == 1
    assert capsys.readouterr().out == f"Could not load {missing}.\n"


def test_main_missing_text(tmp_path, capsys):
    dict_path = tmp_path / "dict.txt"
    dict_path.write_text("cat\n", encoding="utf-8")
    missing = tmp_path / "absent.txt"
    assert main([str(dict_path), str(missing)]) == 1
    assert capsys.readouterr().out == f"Could not open {missing}.\n"