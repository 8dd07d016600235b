import pytest

from wordpoints import CONSONANT_POINTS, VOWEL_POINTS, InvalidWordError, LetterKind, classify


@pytest.mark.parametrize("ch", list("aeiouAEIOU"))
def test_vowels(ch):
    assert classify(ch) is LetterKind.VOWEL
    assert classify(ch).points == VOWEL_POINTS == 1


@pytest.mark.parametrize("ch", ["b", "Z", "y", "Y", "1", " ", "-", "\n", "é"])
def test_everything_else_is_consonant(ch):
    assert classify(ch) is LetterKind.CONSONANT
    assert classify(ch).points == CONSONANT_POINTS == 2


@pytest.mark.parametrize("bad", ["", "ab", None, 1])
def test_classify_rejects_non_single_chars(bad):
    with pytest.raises(InvalidWordError):
        classify(bad)


def test_letter_kind_is_str_enum():
    assert LetterKind("vowel") is LetterKind.VOWEL
    assert LetterKind.CONSONANT == "consonant"
