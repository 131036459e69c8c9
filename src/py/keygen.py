## keygen.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
import string
import secrets
from errs import InvalidKeyLength

KEY_SIZE = 32
IV_SIZE = 16
KEY_ALPHABET = string.ascii_letters + string.digits

class KeyGenerator:
    ## rng only needs .choice(); pass random.Random(seed) for repeatable keys
    def __init__(self, rng=None):
        self.rng = rng if rng is not None else secrets.SystemRandom()

    def generate(self):
        return "".join(self.rng.choice(KEY_ALPHABET) for _ in range(KEY_SIZE))

def key_bytes(key):
    if isinstance(key, str):
        return key.encode("utf-8")
    return bytes(key)

def check_key(key, what="Key"):
    data = key_bytes(key)
    if len(data) != KEY_SIZE:
        raise InvalidKeyLength(what, len(data), KEY_SIZE)
    return data

def is_valid_key(key):
    return len(key_bytes(key)) == KEY_SIZE

## end
