"""bcrypt password hashing."""

import re
import secrets

import bcrypt

# $2b$<cost>$ followed by 22 salt and 31 hash characters
BCRYPT_HASH_PATTERN = re.compile(r"^\$2[abxy]\$\d{2}\$[./A-Za-z0-9]{53}$")


class PasswordService:
    """Hashes and checks API account passwords."""

    MIN_LENGTH = 8
    # bcrypt refuses input beyond this length
    MAX_BYTES = 72
    BCRYPT_ROUNDS = 12

    _dummy_hash: str | None = None

    def hash_password(self, password: str) -> str:
        """Hash a plain text password with a fresh salt."""
        digest = bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.BCRYPT_ROUNDS))
        return digest.decode()

    def verify_password(self, password: str, hashed: str) -> bool:
        """Check a plain text password against a stored hash.

        Malformed hashes and over-long passwords never match.
        """
        try:
            return bcrypt.checkpw(password.encode(), hashed.encode())
        except ValueError:
            return False

    def is_valid_hash(self, hashed: str) -> bool:
        return bool(hashed) and BCRYPT_HASH_PATTERN.fullmatch(hashed) is not None

    def consume_check(self, password: str) -> None:
        """Run one bcrypt check against a throwaway hash.

        Used when no account matches, so a failed login costs the same
        whether or not the email is registered.
        """
        if self._dummy_hash is None:
            self._dummy_hash = self.hash_password(secrets.token_urlsafe(16))
        self.verify_password(password, self._dummy_hash)


_password_service: PasswordService | None = None


def get_password_service() -> PasswordService:
    """Shared PasswordService instance."""
    global _password_service
    if _password_service is None:
        _password_service = PasswordService()
    return _password_service
