from __future__ import annotations

from passlib.context import CryptContext

from app.core.settings import settings

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str, rounds: int | None = None) -> str:
    """Salted bcrypt hash; cost comes from settings unless given."""
    if rounds is None:
        rounds = settings.BCRYPT_SALT_ROUNDS
    hasher = pwd_context.copy(bcrypt__rounds=int(rounds))
    return hasher.hash(password)


def verify_password(plain_password: str, password_hash: str) -> bool:
    return pwd_context.verify(plain_password, password_hash)
