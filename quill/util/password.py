"""Password hashing with passlib's CryptContext.

Argon2id is the primary scheme; pbkdf2_sha256 is accepted for verification
and marked deprecated so old hashes can be upgraded.
"""

from passlib.context import CryptContext

from quill.config import PasswordSettings


class PasswordHasher:
    """Hash and verify passwords."""

    def __init__(self, settings: PasswordSettings) -> None:
        self.context = CryptContext(
            schemes=["argon2", "pbkdf2_sha256"],
            deprecated="pbkdf2_sha256",
            argon2__time_cost=settings.argon2_time_cost,
            argon2__memory_cost=settings.argon2_memory_cost,
            argon2__parallelism=settings.argon2_parallelism,
        )

    def hash(self, password: str) -> str:
        return self.context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Check ``password`` against a stored hash.

        Unrecognised hash formats count as a mismatch.
        """
        try:
            return self.context.verify(password, password_hash)
        except ValueError:
            return False
