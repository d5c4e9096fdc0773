import pytest
import session_auth.domain.models as dmod
from session_auth.infrastructure.security.passwords import BCryptHasher
from session_auth.infrastructure.adapters.passwords import AsyncHasher
from tests.helpers import USER_EMAIL, USER_PASSWORD

SESSION_URL = '/v1/auth/session'
BAD_CREDENTIALS = {'successful': False, 'code': 'BadCredentials', 'detail': 'Invalid email or password'}


@pytest.fixture
def bcrypt_hasher() -> BCryptHasher:
    return BCryptHasher(rounds=4)

@pytest.fixture
def hasher(bcrypt_hasher) -> AsyncHasher:
    return AsyncHasher(bcrypt_hasher)

@pytest.fixture
def user(bcrypt_hasher) -> dmod.User:
    return dmod.User(email=USER_EMAIL, password_hash=bcrypt_hasher.hash(USER_PASSWORD))


async def login(client, email, password):
    response = await client.post(SESSION_URL, json={'email': email, 'password': password})
    client.cookies.clear()
    return response


@pytest.mark.asyncio
async def test_login_with_bcrypt_user(async_client, user):
    response = await login(async_client, USER_EMAIL, USER_PASSWORD)
    assert response.status_code == 200
    assert len(response.json()['session']) == 32


@pytest.mark.asyncio
async def test_multibyte_password_over_bcrypt_limit_looks_like_bad_credentials(async_client):
    #40 characters pass the schema but encode to 80 bytes
    password = 'é' * 40
    known = await login(async_client, USER_EMAIL, password)
    unknown = await login(async_client, 'nobody@x.com', password)

    assert known.status_code == unknown.status_code == 401
    assert known.json() == unknown.json() == BAD_CREDENTIALS


@pytest.mark.asyncio
async def test_overlong_password_rejected_alike_for_any_email(async_client):
    password = 'x' * 100
    known = await login(async_client, USER_EMAIL, password)
    unknown = await login(async_client, 'nobody@x.com', password)

    assert known.status_code == unknown.status_code == 422
