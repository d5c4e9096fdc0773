#Fastapi
from fastapi import APIRouter, Response

#Project files
import session_auth.presentation.schemas as schemas
import session_auth.application.dependencies as appdeps
import session_auth.application.interfaces as iapp
import session_auth.application.models as amod
from session_auth.common.config import Config

import logging

logger = logging.getLogger('session_auth')
router = APIRouter(
    prefix="/v1/auth",
    tags = ["auth"],
    )


def set_session_cookie(response: Response, token: str, settings: amod.SessionSettings) -> None:
    response.set_cookie(
        key=settings.cookie_name,
        value=token,
        max_age=settings.ttl_seconds,
        path="/",
        httponly=True,
        samesite="strict",
        secure=Config.SESSION_COOKIE_SECURE,
    )


@router.post("/session", responses={
    401: {"description": "Bad credentials", "model": schemas.ErrorResponse},
    422: {"description": "Body has bad format (PydanticValidation)"},
    },
    description='Logs in. Revokes any previous session of the user and sets the session cookie')
async def create_session(
        credentials: schemas.CredentialsModel,
        response: Response,
        auth_service: appdeps.AuthServiceDependency,
        settings: appdeps.SessionSettingsDependency,
    ) -> schemas.SessionResponse:
    token = await auth_service.login(iapp.Credentials(email=credentials.email, password=credentials.password))
    set_session_cookie(response, token, settings)
    return schemas.SessionResponse(session=token)


@router.put("/session", responses={401: {"description": "Missing, expired or revoked session", "model": schemas.ErrorResponse}},
    description='Rotates the session token and resets its lifetime')
async def refresh_session(
        response: Response,
        user_id: appdeps.CurrentUserIdDependency,
        token: appdeps.SessionTokenDependency,
        auth_service: appdeps.AuthServiceDependency,
        settings: appdeps.SessionSettingsDependency,
    ) -> schemas.SessionResponse:
    new_token = await auth_service.refresh(user_id, token)
    set_session_cookie(response, new_token, settings)
    return schemas.SessionResponse(session=new_token)


@router.delete("/session", responses={401: {"description": "Missing, expired or revoked session", "model": schemas.ErrorResponse}},
    description='Logs out, the session token stops resolving')
async def delete_session(
        response: Response,
        user_id: appdeps.CurrentUserIdDependency,
        token: appdeps.SessionTokenDependency,
        auth_service: appdeps.AuthServiceDependency,
        settings: appdeps.SessionSettingsDependency,
    ) -> dict:
    await auth_service.logout(user_id, token)
    response.delete_cookie(settings.cookie_name, path="/", httponly=True, samesite="strict")
    logger.info(f'[AUTH] User {user_id} logged out')
    return {"msg": "Logged out successfully!"}
