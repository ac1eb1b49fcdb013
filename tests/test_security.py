from datetime import timedelta

import pytest

from devconnector.core.security import create_access_token, get_password_hash, verify_password, verify_token


def test_password_hash_verifies():
    hashed = get_password_hash("secret123")

    assert hashed != "secret123"
    assert verify_password("secret123", hashed)
    assert not verify_password("secret124", hashed)


def test_token_carries_user_id():
    assert verify_token(create_access_token("5d7a514b5d2c12c7449be042")) == "5d7a514b5d2c12c7449be042"


def test_expired_token():
    token = create_access_token("abc", expires_delta=timedelta(seconds=-1))

    with pytest.raises(ValueError):
        verify_token(token)


def test_tampered_token():
    token = create_access_token("abc")
    header, payload, signature = token.split(".")

    with pytest.raises(ValueError):
        verify_token(f"{header}.{payload}.{signature[::-1]}")
