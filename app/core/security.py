"""Password hashing utilities."""

from passlib.context import CryptContext

from app.config import settings

# Cost factor is read once at startup and applies to every new hash
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a password against a stored bcrypt hash.

    Raises:
        ValueError: If the stored hash is not a recognized bcrypt hash
    """
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    return pwd_context.hash(password)
