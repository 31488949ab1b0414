import os
import base64

from dotenv import load_dotenv
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

load_dotenv()

HEADER = b"v1"
NONCE_SIZE = 12


class CryptoUtils:
    @staticmethod
    def load_key() -> bytes:
        key_b64 = os.getenv("ENCRYPTION_KEY")
        if not key_b64:
            raise RuntimeError("ENCRYPTION_KEY missing in .env")

        key = base64.b64decode(key_b64)
        if len(key) != 32:
            raise RuntimeError(
                f"ENCRYPTION_KEY must decode to 32 bytes for AES-256. Got {len(key)} bytes."
            )
        return key

    @staticmethod
    def should_encrypt(key: str, encrypt_keys: set[str]) -> bool:
        return key in encrypt_keys

    @classmethod
    def encrypt_bytes(cls, plaintext: bytes, aad: bytes) -> str:
        aesgcm = AESGCM(cls.load_key())
        nonce = os.urandom(NONCE_SIZE)
        ct = aesgcm.encrypt(nonce, plaintext, aad)
        payload = HEADER + nonce + ct
        return base64.b64encode(payload).decode("utf-8")

    @classmethod
    def decrypt_bytes(cls, payload_b64: str, aad: bytes) -> bytes:
        raw = base64.b64decode(payload_b64.encode("utf-8"))
        if raw[: len(HEADER)] != HEADER:
            raise ValueError("Not encrypted with expected format/version header")
        nonce = raw[len(HEADER) : len(HEADER) + NONCE_SIZE]
        ct = raw[len(HEADER) + NONCE_SIZE :]
        aesgcm = AESGCM(cls.load_key())
        return aesgcm.decrypt(nonce, ct, aad)
