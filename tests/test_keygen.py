import random
import string

import pytest

from errs import InvalidKeyLength
from keygen import KeyGenerator, KEY_SIZE, check_key, is_valid_key

def test_generated_key_is_32_alphanumeric_chars():
    key = KeyGenerator().generate()
    assert len(key) == KEY_SIZE
    assert set(key) <= set(string.ascii_letters + string.digits)

def test_generator_differs_per_call():
    gen = KeyGenerator()
    assert len({gen.generate() for _ in range(20)}) == 20

def test_seeded_generator_is_repeatable():
    a = KeyGenerator(random.Random(7))
    b = KeyGenerator(random.Random(7))
    assert [a.generate() for _ in range(3)] == [b.generate() for _ in range(3)]

def test_check_key_accepts_str_and_bytes():
    assert check_key("x" * 32) == b"x" * 32
    assert check_key(b"y" * 32) == b"y" * 32

@pytest.mark.parametrize("key", ["", "short", "x" * 31, "x" * 33, b"z" * 16])
def test_check_key_rejects_wrong_length(key):
    with pytest.raises(InvalidKeyLength):
        check_key(key, "Top-level key")
    assert not is_valid_key(key)

def test_length_is_counted_in_bytes():
    ## 16 two-byte characters are 32 bytes
    assert is_valid_key("é" * 16)
    assert not is_valid_key("é" * 32)
