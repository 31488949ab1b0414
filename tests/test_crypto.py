# tests/test_crypto.py

import base64

import pytest
from persistence.crypto import CryptoUtils


def test_encrypt_decrypt_roundtrip():
    aad = b"thread|ns|channel_values|values"
    plaintext = b"secret1"

    ct = CryptoUtils.encrypt_bytes(plaintext, aad)
    out = CryptoUtils.decrypt_bytes(ct, aad)

    assert out == plaintext


def test_decrypt_fails_with_wrong_aad():
    aad = b"correct"
    ct = CryptoUtils.encrypt_bytes(b"secret", aad)

    with pytest.raises(Exception):
        CryptoUtils.decrypt_bytes(ct, b"wrong")


def test_ciphertext_tamper_fails():
    aad = b"aad"
    raw = bytearray(base64.b64decode(CryptoUtils.encrypt_bytes(b"secret", aad)))

    # flip a bit in the ciphertext, past the header and nonce
    raw[-1] ^= 0x01
    tampered = base64.b64encode(bytes(raw)).decode("utf-8")

    with pytest.raises(Exception):
        CryptoUtils.decrypt_bytes(tampered, aad)


def test_missing_header_rejected():
    payload = base64.b64encode(b"v2" + b"\x00" * 40).decode("utf-8")

    with pytest.raises(ValueError):
        CryptoUtils.decrypt_bytes(payload, b"aad")


def test_missing_key(monkeypatch):
    monkeypatch.delenv("ENCRYPTION_KEY")

    with pytest.raises(RuntimeError, match="missing"):
        CryptoUtils.encrypt_bytes(b"secret", b"aad")


def test_short_key(monkeypatch):
    monkeypatch.setenv("ENCRYPTION_KEY", base64.b64encode(b"k" * 16).decode("utf-8"))

    with pytest.raises(RuntimeError, match="32 bytes"):
        CryptoUtils.encrypt_bytes(b"secret", b"aad")


def test_should_encrypt():
    assert CryptoUtils.should_encrypt("values", {"values", "event"})
    assert not CryptoUtils.should_encrypt("errors", {"values", "event"})
