## cfb.py
## last updated: 19/10/2026 <d/m/y>
## m-c-r-p
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms
try:
    from cryptography.hazmat.decrepit.ciphers.modes import CFB8
except ImportError:
    from cryptography.hazmat.primitives.ciphers.modes import CFB8

from keygen import check_key, IV_SIZE

## AES-256-CFB8, key doubles as IV source (first 16 bytes)
def _cipher(key):
    key_data = check_key(key)
    return Cipher(algorithms.AES(key_data), CFB8(key_data[:IV_SIZE]))

def encrypt_bytes(key, data):
    encryptor = _cipher(key).encryptor()
    return encryptor.update(bytes(data)) + encryptor.finalize()

def decrypt_bytes(key, data):
    decryptor = _cipher(key).decryptor()
    return decryptor.update(bytes(data)) + decryptor.finalize()

## end
