import session_auth.domain.repositories as repo
import session_auth.domain.models as domain
import session_auth.domain.exceptions as domexc
import session_auth.domain.services as domsvc
from session_auth.common.config import Config
import asyncio
import logging

logger = logging.getLogger('session_auth')


class InMemoryUserRepository(repo.IUserRepository):
    """Process-local account registry.

    Accounts live in the host system's database; this registry is what the service falls back to
    when no host repository is plugged in through `dependency_overrides`. It is also the registry
    the tests populate.
    """

    def __init__(self, users: list[domain.User] | None = None):
        self._by_id: dict[str, domain.User] = {}
        self._lock = asyncio.Lock()
        for user in users or []:
            self._by_id[user.id] = user

    async def get_by_id(self, user_id: str) -> domain.User | None:
        return self._by_id.get(user_id)

    async def get_by_email(self, email: str) -> domain.User | None:
        email = email.lower()
        return next((u for u in self._by_id.values() if u.email == email), None)

    async def create(self, user: domain.User) -> domain.User:
        async with self._lock:
            if user.id in self._by_id or await self.get_by_email(user.email):
                raise domexc.UserAlreadyExists("Another user with this id or email already exists")
            self._by_id[user.id] = user
        return user

    async def ensure_admin_exists(self, hasher: domsvc.IPasswordHasherAsync) -> None:
        if not Config.DEFAULT_ADMIN_PASSWORD:
            logger.info('[USERS] DEFAULT_ADMIN_PASSWORD is not set, admin account is not seeded')
            return
        if await self.get_by_email(Config.DEFAULT_ADMIN_EMAIL):
            return
        admin = await domain.User.create(
            email=Config.DEFAULT_ADMIN_EMAIL,
            password=Config.DEFAULT_ADMIN_PASSWORD,
            hasher=hasher,
            role=domain.Role.ADMIN,
        )
        await self.create(admin)
        logger.info(f'[USERS] Default admin {admin.email} created')
