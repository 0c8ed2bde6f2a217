from app.core.security import hash_password, verify_password
from app.core.settings import settings


def test_password_hashing():
    """Test password hashing and verification."""
    password = "TestPass123!"
    hashed = hash_password(password)

    assert hashed != password
    assert verify_password(password, hashed) is True
    assert verify_password("WrongPassword", hashed) is False


def test_hash_uses_configured_salt_rounds(monkeypatch):
    monkeypatch.setattr(settings, "BCRYPT_SALT_ROUNDS", 5)

    assert hash_password("pw").startswith("$2b$05$")


def test_hash_accepts_explicit_rounds():
    assert hash_password("pw", rounds=6).startswith("$2b$06$")


def test_same_password_gets_a_fresh_salt():
    assert hash_password("pw") != hash_password("pw")
