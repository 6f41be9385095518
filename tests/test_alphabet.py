import pytest

from toystore_clients.alphabet import ALL_LETTERS_PRESENT, alphabet_letters, first_missing_letter


@pytest.mark.parametrize(
    "text, expected",
    [
        ("Ana Beatriz", "c"),
        ("Carlos Eduardo", "b"),
        ("", "a"),
        ("123!@#", "a"),
        ("abcdefghijklmnopqrstuvwxyz", "-"),
    ],
)
def test_first_missing_letter(text, expected):
    assert first_missing_letter(text) == expected


def test_first_missing_letter_is_case_insensitive():
    assert first_missing_letter("ABC") == "d"
    assert first_missing_letter("abc") == "d"
    assert first_missing_letter("ZYXWVUTSRQPONMLKJIHGFEDCBA") == ALL_LETTERS_PRESENT


def test_first_missing_letter_ignores_order_and_repeats():
    name = "Ana Beatriz"
    assert first_missing_letter(name[::-1]) == first_missing_letter(name)
    assert first_missing_letter(name * 3) == first_missing_letter(name)


def test_accented_letters_are_stripped_not_folded():
    assert alphabet_letters("JoÃO SiLvA") == "joosilva"
    assert first_missing_letter("José-Maria d'Ávila") == "b"
    assert first_missing_letter("the quick brown fox jumps over the lãzy dog") == "a"


def test_none_is_treated_as_empty():
    assert first_missing_letter(None) == "a"
