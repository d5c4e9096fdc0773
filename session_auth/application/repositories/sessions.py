from abc import abstractmethod, ABC
import session_auth.application.models as m


class SessionStore(ABC):
    """Key-value backend behind the session and user indices.

    Every method raises `CustomStorageException` when the backend fails. Implementations must fail
    fast on connectivity loss instead of blocking.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Returns the value or None when the key is absent or expired"""

    @abstractmethod
    async def set(self, key: str, value: str) -> None: ...

    @abstractmethod
    async def set_with_expiration(self, key: str, value: str, ttl_seconds: int) -> None: ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Idempotent. Deleting an absent key is not an error"""

    @abstractmethod
    async def exists(self, key: str) -> bool: ...

    @abstractmethod
    async def execute_atomic(self, commands: list[m.StoreCommand]) -> list:
        """Applies all commands as one unit. Concurrent readers see either none or all of them."""
