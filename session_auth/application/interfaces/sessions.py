from abc import ABC, abstractmethod
import pydantic as p


class Credentials(p.BaseModel):
    email: str
    password: str


class ISessionManager(ABC):
    @abstractmethod
    async def create_session(self, credentials: Credentials) -> str:
        """Validates credentials, revokes the user's previous session and issues a new token."""

    @abstractmethod
    async def refresh_session(self, user_id: str, current_token: str) -> str:
        """Rotates the token of an already authenticated user and resets its TTL."""

    @abstractmethod
    async def delete_session(self, user_id: str, current_token: str) -> None:
        """Revokes the session. Idempotent."""

    @abstractmethod
    async def resolve_session(self, token: str) -> str | None:
        """Returns the user id the token belongs to, None if unknown or expired."""
