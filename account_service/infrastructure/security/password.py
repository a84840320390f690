"""
Password hashing using bcrypt.
"""

import bcrypt

DEFAULT_ROUNDS = 10
MIN_ROUNDS = 4
MAX_ROUNDS = 31


class BcryptPasswordHasher:
    """Password hashing service with a configurable cost factor."""

    def __init__(self, rounds: int = DEFAULT_ROUNDS) -> None:
        if not MIN_ROUNDS <= rounds <= MAX_ROUNDS:
            raise ValueError(f"bcrypt rounds must be between {MIN_ROUNDS} and {MAX_ROUNDS}")
        self._rounds = rounds

    @staticmethod
    def _encode(password: str) -> bytes:
        """Encode and truncate to the 72 bytes bcrypt actually uses."""
        return password.encode("utf-8")[:72]

    def hash(self, plaintext: str) -> str:
        salt = bcrypt.gensalt(rounds=self._rounds)
        return bcrypt.hashpw(self._encode(plaintext), salt).decode("utf-8")

    def compare(self, plaintext: str, digest: str) -> bool:
        try:
            return bcrypt.checkpw(self._encode(plaintext), digest.encode("utf-8"))
        except ValueError:
            # Malformed or non-bcrypt digest
            return False
