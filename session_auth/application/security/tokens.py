import session_auth.application.exceptions as appexc
import secrets
import string
import typing as t

HEX_DIGITS = frozenset(string.hexdigits)


def generate_random_bytes(n: int) -> bytes:
    """n bytes from the OS CSPRNG. Raises TokenGenerationError if it is unavailable."""
    try:
        return secrets.token_bytes(n)
    except (NotImplementedError, OSError) as e:
        raise appexc.TokenGenerationError("Secure randomness source is unavailable") from e


class SessionTokenGenerator:
    """Produces opaque session tokens: `n_bytes` of randomness, hex encoded, upper-cased.

    Case carries no meaning, it is only canonicalized so that stored keys are stable.
    """

    def __init__(self, n_bytes: int = 16, random_bytes: t.Callable[[int], bytes] = generate_random_bytes):
        self.n_bytes = n_bytes
        self._random_bytes = random_bytes

    def generate(self) -> str:
        return self._random_bytes(self.n_bytes).hex().upper()

    def canonicalize(self, token: str) -> str | None:
        """Returns the canonical form of `token` or None if it cannot be one of ours"""
        if not token or len(token) != self.n_bytes * 2:
            return None
        if not set(token) <= HEX_DIGITS:
            return None
        return token.upper()
