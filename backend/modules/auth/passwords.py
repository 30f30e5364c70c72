"""
Password hashing with bcrypt.
"""

import bcrypt

# bcrypt only considers the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _encode(plaintext: str) -> bytes:
    return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]


class PasswordHasher:
    """Hashes and verifies passwords; the digest embeds its own salt."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds

    def hash(self, plaintext: str) -> str:
        digest = bcrypt.hashpw(_encode(plaintext), bcrypt.gensalt(rounds=self._rounds))
        return digest.decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Return True if plaintext matches the stored digest."""
        if not plaintext or not digest:
            return False
        try:
            return bcrypt.checkpw(_encode(plaintext), digest.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt digest
            return False
