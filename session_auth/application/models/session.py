import pydantic as p
import typing as t

SESSION_PREFIX = "session"
SESSION_USER_ID_SUFFIX = "userID"
USER_PREFIX = "user"
USER_SESSION_SUFFIX = "session"


def session_key(token: str) -> str:
    """`session:<token>:userID` -> UserID. Expires with the session."""
    return f"{SESSION_PREFIX}:{token}:{SESSION_USER_ID_SUFFIX}"

def user_key(user_id: str) -> str:
    """`user:<userID>:session` -> current token. No TTL, maintained by the session manager."""
    return f"{USER_PREFIX}:{user_id}:{USER_SESSION_SUFFIX}"


class SessionSettings(p.BaseModel):
    model_config = p.ConfigDict(frozen=True)

    token_expiration_minutes: int = p.Field(default=30, gt=0)
    token_bytes: int = p.Field(default=16, ge=16)
    cookie_name: str = p.Field(default="session", min_length=1)

    @property
    def ttl_seconds(self) -> int:
        return self.token_expiration_minutes * 60


class StoreCommand(p.BaseModel):
    """One step of an atomic batch, see `SessionStore.execute_atomic`."""
    model_config = p.ConfigDict(frozen=True)

    command: t.Literal["SET", "SETEX", "DEL"]
    key: str
    value: str | None = None
    ttl: int | None = None

    @p.model_validator(mode='after')
    def check_arguments(self):
        if self.command == "SETEX" and (self.ttl is None or self.ttl <= 0):
            raise ValueError("SETEX requires a positive ttl")
        if self.command in ("SET", "SETEX") and self.value is None:
            raise ValueError(f"{self.command} requires a value")
        return self

    @classmethod
    def set(cls, key: str, value: str) -> "StoreCommand":
        return cls(command="SET", key=key, value=value)

    @classmethod
    def set_with_expiration(cls, key: str, value: str, ttl: int) -> "StoreCommand":
        return cls(command="SETEX", key=key, value=value, ttl=ttl)

    @classmethod
    def delete(cls, key: str) -> "StoreCommand":
        return cls(command="DEL", key=key)
