import pytest, typing as t, httpx
import pytest_asyncio as pytestaio
import session_auth.infrastructure.repositories as irepos
import session_auth.application.dependencies as adeps
import session_auth.application.models as amod
import session_auth.application.services as svc
import session_auth.domain.models as dmod
import session_auth.main as main
from tests.mocks import FakeHasher, AsyncHasherAdapter, InMemorySessionStore

import logging
logger = logging.getLogger('session_auth')

from tests.helpers import USER_EMAIL, USER_PASSWORD, OTHER_EMAIL, OTHER_PASSWORD


@pytest.fixture
def hasher() -> AsyncHasherAdapter:
    return AsyncHasherAdapter(FakeHasher())

@pytest.fixture
def settings() -> amod.SessionSettings:
    return amod.SessionSettings()

@pytest.fixture
def store() -> InMemorySessionStore:
    return InMemorySessionStore()

@pytest.fixture
def user() -> dmod.User:
    return dmod.User(email=USER_EMAIL, password_hash=FakeHasher().hash(USER_PASSWORD))

@pytest.fixture
def other_user() -> dmod.User:
    return dmod.User(email=OTHER_EMAIL, password_hash=FakeHasher().hash(OTHER_PASSWORD))

@pytest.fixture
def user_repo(user, other_user) -> irepos.InMemoryUserRepository:
    return irepos.InMemoryUserRepository([user, other_user])

@pytest.fixture
def manager(store, user_repo, hasher, settings) -> svc.SessionManager:
    return svc.SessionManager(store, user_repo, hasher, settings=settings)


@pytestaio.fixture
async def async_client(manager: svc.SessionManager, settings: amod.SessionSettings) -> t.AsyncIterator[httpx.AsyncClient]:

    async def override_get_session_manager():
        return manager

    def override_get_session_settings():
        return settings

    main.app.dependency_overrides[adeps.get_session_manager] = override_get_session_manager
    main.app.dependency_overrides[adeps.get_session_settings] = override_get_session_settings

    transport = httpx.ASGITransport(app=main.app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client

    del main.app.dependency_overrides[adeps.get_session_manager]
    del main.app.dependency_overrides[adeps.get_session_settings]
