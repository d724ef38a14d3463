from passlib.context import CryptContext
import hashlib

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bcrypt has a maximum password length of 72 bytes
MAX_PASSWORD_BYTES = 72


def _bcrypt_input(password: str) -> str:
    """Return what is actually fed to bcrypt.

    Passwords longer than 72 bytes are SHA256 hashed first so bcrypt never
    silently truncates them.
    """
    password_bytes = password.encode("utf-8")
    if len(password_bytes) <= MAX_PASSWORD_BYTES:
        return password
    return hashlib.sha256(password_bytes).hexdigest()


def hash_password(password: str) -> str:
    """Hash a plaintext password for storage."""
    return pwd_context.hash(_bcrypt_input(password))


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plaintext password against a stored hash."""
    return pwd_context.verify(_bcrypt_input(plain_password), hashed_password)
