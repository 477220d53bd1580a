"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from sigaba.core.config import Settings, get_settings
from sigaba.main import create_app


class TestCipherApi:
    """Test suite for the /ciphers, /encrypt and /decrypt endpoints."""

    @pytest.fixture
    def client(self):
        return TestClient(create_app())

    def test_list_ciphers(self, client):
        response = client.get("/api/v1/ciphers")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 11
        types = {item["cipher_type"] for item in body["ciphers"]}
        assert {"caesar", "autokey", "transpose", "columnar"} <= types

    def test_encrypt_with_custom_alphabet(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={
                "plaintext": "THE die IS CAST.",
                "cipher_type": "caesar",
                "key": {"shift": 2},
                "alphabet": "ABCDEFGHIJKLMNOPQRSTUVXYZ",
            },
        )

        assert response.status_code == 200
        assert response.json() == {
            "ciphertext": "VJG die KU ECUV.",
            "cipher_type": "caesar",
            "alphabet": "ABCDEFGHIJKLMNOPQRSTUVXYZ",
        }

    def test_decrypt_autokey(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={
                "ciphertext": "QNXEPV YT WTWP",
                "cipher_type": "autokey",
                "key": {"primer": "QUEENLY"},
            },
        )

        assert response.status_code == 200
        assert response.json()["plaintext"] == "ATTACK AT DAWN"

    def test_non_invertible_factor(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "HELLO", "cipher_type": "affine", "key": {"factor": 2, "offset": 1}},
        )

        assert response.status_code == 400
        assert "inverse" in response.json()["detail"]

    def test_unknown_key_field(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "HELLO", "cipher_type": "transpose", "key": {"rows": 3}},
        )

        assert response.status_code == 400

    def test_duplicate_alphabet(self, client):
        response = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "ABC", "cipher_type": "atbash", "alphabet": "ABCA"},
        )

        assert response.status_code == 400

    def test_unknown_cipher_type(self, client):
        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "HELLO", "cipher_type": "enigma"},
        )

        assert response.status_code == 422

    def test_text_too_long(self):
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=5)
        client = TestClient(app)

        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "TOO LONG", "cipher_type": "rot13"},
        )

        assert response.status_code == 400
        assert "maximum length" in response.json()["detail"]

    def test_text_too_long_at_default_limit(self, client):
        limit = Settings().max_text_length

        encrypt = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "A" * (limit + 1), "cipher_type": "rot13"},
        )
        decrypt = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "A" * (limit + 1), "cipher_type": "rot13"},
        )

        assert encrypt.status_code == 400
        assert decrypt.status_code == 400
        assert "maximum length" in encrypt.json()["detail"]

    def test_raised_limit_accepts_longer_text(self):
        app = create_app()
        app.dependency_overrides[get_settings] = lambda: Settings(max_text_length=200_000)
        client = TestClient(app)

        response = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "A" * 150_000, "cipher_type": "rot13"},
        )

        assert response.status_code == 200
        assert response.json()["ciphertext"] == "N" * 150_000

    def test_empty_text(self, client):
        encrypt = client.post(
            "/api/v1/encrypt",
            json={"plaintext": "", "cipher_type": "vigenere", "key": {"keyword": "LEMON"}},
        )
        decrypt = client.post(
            "/api/v1/decrypt",
            json={"ciphertext": "", "cipher_type": "columnar", "key": {"keyword": "ZEBRAS"}},
        )

        assert encrypt.status_code == 200
        assert encrypt.json()["ciphertext"] == ""
        assert decrypt.status_code == 200
        assert decrypt.json()["plaintext"] == ""
