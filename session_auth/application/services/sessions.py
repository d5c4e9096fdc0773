import session_auth.application.exceptions as appexc
import session_auth.application.interfaces as iapp
import session_auth.application.models as m
import session_auth.application.repositories as apprepo
import session_auth.application.security as security
import session_auth.common.exceptions as exc
import session_auth.domain.repositories as repos
import session_auth.domain.services as domsvc
import contextlib


@contextlib.contextmanager
def _internal_errors():
    try:
        yield
    except (exc.CustomStorageException, appexc.TokenGenerationError) as e:
        raise appexc.InternalError() from e


class SessionManager(iapp.ISessionManager):
    """Owns the two session indices in the store:

    * `session:<token>:userID` -> user id, with TTL
    * `user:<userID>:session`  -> current token, no TTL

    Both are always written together in one atomic batch. A user has at most one live token:
    login revokes the previous one before installing the new one. Two logins of the same user
    racing each other may both read "no previous token" and leave two live tokens until the
    older one expires; that window is accepted and no locking is done here.

    Raises typed errors only, no logging and no user-facing formatting.
    """

    def __init__(
        self,
        store: apprepo.SessionStore,
        user_repo: repos.IUserRepository,
        password_hasher: domsvc.IPasswordHasherAsync,
        *,
        settings: m.SessionSettings,
        token_generator: security.SessionTokenGenerator | None = None,
    ):
        self.store = store
        self.user_repo = user_repo
        self._hasher = password_hasher
        self.settings = settings
        self.token_generator = token_generator or security.SessionTokenGenerator(settings.token_bytes)

    async def create_session(self, credentials: iapp.Credentials) -> str:
        with _internal_errors():
            user = await self.user_repo.get_by_email(credentials.email)
        if user is None:
            raise appexc.BadCredentials()

        if not await self._hasher.verify(credentials.password, user.password_hash):
            raise appexc.BadCredentials()

        with _internal_errors():
            await self._revoke_previous(user.id)
            return await self._install_new_token(user.id)

    async def refresh_session(self, user_id: str, current_token: str) -> str:
        current_token = self.token_generator.canonicalize(current_token)
        with _internal_errors():
            if current_token:
                await self.store.delete(m.session_key(current_token))
            return await self._install_new_token(user_id)

    async def delete_session(self, user_id: str, current_token: str) -> None:
        current_token = self.token_generator.canonicalize(current_token)
        if current_token is None:
            return

        commands = []
        with _internal_errors():
            #Only this user's own session record is removed
            if await self.store.get(m.session_key(current_token)) == user_id:
                commands.append(m.StoreCommand.delete(m.session_key(current_token)))
            #The pointer is only cleared while it still names this token, otherwise the live session would be orphaned
            if await self.store.get(m.user_key(user_id)) == current_token:
                #Cleared to the empty value, readers treat empty and missing alike
                commands.append(m.StoreCommand.set(m.user_key(user_id), ""))
            if commands:
                await self.store.execute_atomic(commands)

    async def resolve_session(self, token: str) -> str | None:
        token = self.token_generator.canonicalize(token)
        if token is None:
            return None
        with _internal_errors():
            user_id = await self.store.get(m.session_key(token))
        return user_id or None

    async def _revoke_previous(self, user_id: str) -> None:
        previous = await self.store.get(m.user_key(user_id))
        if previous:
            await self.store.delete(m.session_key(previous))

    async def _install_new_token(self, user_id: str) -> str:
        token = self.token_generator.generate()
        await self.store.execute_atomic([
            m.StoreCommand.set_with_expiration(m.session_key(token), user_id, self.settings.ttl_seconds),
            m.StoreCommand.set(m.user_key(user_id), token),
        ])
        return token
