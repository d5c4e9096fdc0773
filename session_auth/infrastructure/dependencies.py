from fastapi import Depends
import typing as t

from session_auth.infrastructure.cache.redis_manager import RedisConnectionManager
import session_auth.infrastructure.repositories as repos
import session_auth.infrastructure.security as security
import session_auth.infrastructure.adapters as adap
from session_auth.common.config import Config

from redis.asyncio import Redis


_PasswordHasherType = security.BCryptHasher
PasswordHasherType = lambda: adap.AsyncHasher(_PasswordHasherType())



#####################################
#               Cache               #
#####################################

CacheManagerType = RedisConnectionManager
CacheConnectionType = Redis
cache_args = dict(
    host=Config.REDIS_HOST,
    port=Config.REDIS_PORT,
    password=Config.REDIS_PASS,
    decode_responses=True,
    db=Config.REDIS_DB,
    socket_timeout=Config.REDIS_SOCKET_TIMEOUT_SECONDS,
    socket_connect_timeout=Config.REDIS_SOCKET_TIMEOUT_SECONDS,
)
CacheManager = CacheManagerType(**cache_args)

async def get_cache():
    async with CacheManager.connect() as connection:
        yield connection

CacheDependency = t.Annotated[CacheConnectionType, Depends(get_cache)]


#####################################
#            Repositories           #
#####################################

SessionStoreType = repos.RedisSessionStore
UserRepositoryType = repos.InMemoryUserRepository
UserRepository = UserRepositoryType() #Replace through dependency_overrides[get_user_repo] with the host's repository

async def get_session_store(cache: CacheDependency):
    return SessionStoreType(cache)

async def get_user_repo():
    return UserRepository

SessionStoreDependency = t.Annotated[repos.RedisSessionStore, Depends(get_session_store)]
UserRepoDependency = t.Annotated[repos.InMemoryUserRepository, Depends(get_user_repo)]
