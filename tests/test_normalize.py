import pytest

from palindromo.normalize import is_palindrome, normalize_word

SAMPLES = [
    "",
    "   ",
    "Radar",
    "Anita lava la tina",
    "Sé verlas al revés",
    "¡Ñandú!",
    "Straße",
    "İstanbul",
    "a1b2 -- 2B1A",
    "日本語",
]


@pytest.mark.parametrize("text", SAMPLES)
def test_normalize_is_idempotent(text):
    once = normalize_word(text)
    assert normalize_word(once) == once


def test_normalize_strips_accents_case_and_punctuation():
    assert normalize_word("Sé verlas al revés") == "severlasalreves"
    assert normalize_word("¡Ñandú!") == "nandu"
    assert normalize_word(None) == ""


def test_normalize_drops_non_latin_letters():
    assert normalize_word("日本語") == ""


@pytest.mark.parametrize("text", ["", "   ", "¡¿?!", "...", None])
def test_empty_after_normalization_is_not_palindrome(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize(
    "text",
    ["radar", "Radar", "Anita lava la tina", "Sé verlas al revés", "reconocer", "12321"],
)
def test_palindromes(text):
    assert is_palindrome(text) is True


@pytest.mark.parametrize("text", ["hola", "palíndromo", "12"])
def test_not_palindromes(text):
    assert is_palindrome(text) is False


@pytest.mark.parametrize("char", list("azAZ09") + ["é", "Ñ"])
def test_single_alphanumeric_is_palindrome(char):
    assert is_palindrome(char) is True
