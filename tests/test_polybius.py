import re

import pytest

from algobox.polybius import Polybius, PolybiusError

SIZE = 5
CHARACTERS = "HogeF"
KEY = "abcdefghijklmnopqrstuvwxy"


@pytest.fixture
def square():
    return Polybius(KEY, SIZE, CHARACTERS)


def test_example_round_trip(square):
    encrypted = square.encrypt("HogeFugaPiyoSpam")
    assert encrypted == "OGGFOOHFOHFHOOHHEHOEFFGFEEEHHHGG"
    assert square.decrypt(encrypted) == "HOGEFUGAPIYOSPAM"


def test_correct_initialization():
    square = Polybius(KEY, SIZE, "HogeF")
    assert square.characters == "HOGEF"
    assert square.key == KEY.upper()


def test_truncates_characters():
    square = Polybius(KEY, SIZE, "HogeFuga")
    assert square.characters == "HOGEF"


def test_invalid_key():
    with pytest.raises(
        PolybiusError, match=re.escape("len(key): 9 must be as long as size squared: 25")
    ):
        Polybius("abcdefghi", SIZE, "HogeFuga")


def test_invalid_characters():
    with pytest.raises(
        PolybiusError, match=re.escape('"chars" contains same character: H')
    ):
        Polybius(KEY, SIZE, "HogeH")


def test_too_few_characters():
    with pytest.raises(PolybiusError):
        Polybius(KEY, SIZE, "Hog")


def test_encrypt(square):
    assert square.encrypt("HogeFugaPiyoSpam") == "OGGFOOHFOHFHOOHHEHOEFFGFEEEHHHGG"


def test_encrypt_invalid(square):
    with pytest.raises(
        PolybiusError, match=re.escape("failed encipher: Z does not exist in keys")
    ):
        square.encrypt("hogz")


def test_decrypt(square):
    assert square.decrypt("OGGFOOHFOHFHOOHHEHOEFFGFEEEHHHGG") == "HOGEFUGAPIYOSPAM"


@pytest.mark.parametrize(
    "text, message",
    [
        ("hogz", "failed decipher: Z does not exist in characters"),
        ("hode", "failed decipher: D does not exist in characters"),
        ("hog", 'failed decipher: the size of "chars" must be even'),
    ],
)
def test_decrypt_invalid(square, text, message):
    with pytest.raises(PolybiusError, match=re.escape(message)):
        square.decrypt(text)


def test_error_is_value_error(square):
    with pytest.raises(ValueError):
        square.decrypt("h")