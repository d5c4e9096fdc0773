from fastapi import Depends, Request
import typing as t

import session_auth.infrastructure.dependencies as ideps
import session_auth.application.exceptions as appexc
import session_auth.application.models as amod
import session_auth.application.security as security
import session_auth.application.services as services
from session_auth.presentation.auth_gate import AuthGate
from session_auth.common.config import Config


def get_session_settings() -> amod.SessionSettings:
    return amod.SessionSettings(
        token_expiration_minutes=Config.TOKEN_EXPIRATION_MINUTES,
        token_bytes=Config.SESSION_TOKEN_BYTES,
        cookie_name=Config.SESSION_COOKIE_NAME,
    )

SessionSettingsDependency = t.Annotated[amod.SessionSettings, Depends(get_session_settings)]

async def get_session_manager(store: ideps.SessionStoreDependency, user_repo: ideps.UserRepoDependency, settings: SessionSettingsDependency):
    return services.SessionManager(store, user_repo, ideps.PasswordHasherType(), settings=settings)

SessionManagerDependency = t.Annotated[services.SessionManager, Depends(get_session_manager)]

async def get_auth_service(session_manager: SessionManagerDependency):
    return services.SessionAuthService(session_manager)

AuthServiceDependency = t.Annotated[services.SessionAuthService, Depends(get_auth_service)]


#####################################
#             Auth gate             #
#####################################

#Built once at import, never mutated afterwards
PublicRouteClassifier = security.RouteClassifier(security.PUBLIC_ROUTES)

async def get_auth_gate(settings: SessionSettingsDependency) -> AuthGate:
    return AuthGate(PublicRouteClassifier, cookie_name=settings.cookie_name)

AuthGateDependency = t.Annotated[AuthGate, Depends(get_auth_gate)]

async def authenticate_request(request: Request, gate: AuthGateDependency, auth_service: AuthServiceDependency) -> str | None:
    """App-wide dependency: returns the principal, None on public routes, raises on rejection"""
    return await gate.authenticate(request, auth_service)

PrincipalDependency = t.Annotated[str | None, Depends(authenticate_request)]

async def get_current_user_id(principal: PrincipalDependency) -> str:
    if principal is None:
        #Public route asking for a principal
        raise appexc.NoCredential()
    return principal

CurrentUserIdDependency = t.Annotated[str, Depends(get_current_user_id)]

async def get_session_token(request: Request, _: CurrentUserIdDependency) -> str:
    return request.state.session_token

SessionTokenDependency = t.Annotated[str, Depends(get_session_token)]
