import session_auth.application.exceptions as appexc
import session_auth.application.interfaces as iapp


class AuthService:
    def __init__(self, session_manager: iapp.ISessionManager):
        self.session_manager = session_manager

    async def authenticate(self, token: str) -> str:
        """Resolves a session token to the user id or raises InvalidSession."""
        user_id = await self.session_manager.resolve_session(token)
        if not user_id:
            raise appexc.InvalidSession()
        return user_id


class LoginLogoutMixin:
    async def login(self, credentials: iapp.Credentials) -> str:
        return await self.session_manager.create_session(credentials)

    async def logout(self, user_id: str, token: str) -> None:
        await self.session_manager.delete_session(user_id, token)


class SessionRefreshMixin:
    async def refresh(self, user_id: str, token: str) -> str:
        return await self.session_manager.refresh_session(user_id, token)


class SessionAuthService(
    AuthService,
    LoginLogoutMixin,
    SessionRefreshMixin,
):
    """Login, refresh, logout and token resolution on top of cookie sessions."""
