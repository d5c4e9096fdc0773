import pytest, typing as t
import pytest_asyncio as pytestaio
import session_auth.infrastructure.dependencies as ideps
import session_auth.infrastructure.repositories as irepos
from session_auth.common.exceptions import CustomStorageException


import logging
logger = logging.getLogger('session_auth')


def pytest_collection_modifyitems(items):
    for item in items:
        item.add_marker(pytest.mark.integration)


@pytestaio.fixture(scope='function')
async def cache_manager() -> t.AsyncIterator[ideps.CacheManagerType]:
    mgr = ideps.CacheManagerType(**ideps.cache_args)
    try:
        async with mgr.connect() as client:
            await client.ping()
    except CustomStorageException:
        await mgr.close()
        pytest.skip(f'Redis is not reachable at {ideps.cache_args["host"]}:{ideps.cache_args["port"]}')
    yield mgr
    await mgr.close()

@pytestaio.fixture(scope='function')
async def cache_client(cache_manager: ideps.CacheManagerType) -> t.AsyncIterator[ideps.CacheConnectionType]:
    async with cache_manager.connect() as client:
        yield client
        await cache_manager.flush_data(client)

@pytestaio.fixture(scope='function')
async def redis_store(cache_client: ideps.CacheConnectionType) -> irepos.RedisSessionStore:
    return irepos.RedisSessionStore(cache_client)
