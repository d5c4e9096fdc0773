import session_auth.application.repositories as apprepo
import session_auth.application.models as m
import session_auth.common.exceptions as exc
from session_auth.infrastructure.telemetry.traces import TracerType
from redis.asyncio import Redis
from redis.exceptions import RedisError
import contextlib


@contextlib.contextmanager
def _storage_errors(operation: str, key: str = ""):
    try:
        yield
    except RedisError as e:
        raise exc.CustomStorageException(f"Redis {operation} failed for key '{key}'") from e


class RedisSessionStore(apprepo.SessionStore):
    """Session store on top of a `decode_responses=True` Redis client."""

    def __init__(self, redis: Redis):
        self.redis = redis

    async def get(self, key: str) -> str | None:
        with _storage_errors("GET", key):
            return await self.redis.get(key)

    async def set(self, key: str, value: str) -> None:
        with _storage_errors("SET", key):
            await self.redis.set(key, value)

    async def set_with_expiration(self, key: str, value: str, ttl_seconds: int) -> None:
        with _storage_errors("SETEX", key):
            await self.redis.setex(key, ttl_seconds, value)

    async def delete(self, key: str) -> None:
        with _storage_errors("DEL", key):
            await self.redis.delete(key)

    async def exists(self, key: str) -> bool:
        with _storage_errors("EXISTS", key):
            return bool(await self.redis.exists(key))

    @TracerType.traced
    async def execute_atomic(self, commands: list[m.StoreCommand]) -> list:
        #MULTI/EXEC on a single pipeline connection, nothing else interleaves with the batch
        with _storage_errors("MULTI", ",".join(c.key for c in commands)):
            async with self.redis.pipeline(transaction=True) as pipe:
                for cmd in commands:
                    if cmd.command == "SETEX":
                        pipe.setex(cmd.key, cmd.ttl, cmd.value)
                    elif cmd.command == "SET":
                        pipe.set(cmd.key, cmd.value)
                    else:
                        pipe.delete(cmd.key)
                return await pipe.execute()
