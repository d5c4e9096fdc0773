import session_auth.application.exceptions as appexc
import session_auth.presentation.schemas as schemas
from session_auth.common.exceptions import format_exception_string
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import logging

logger = logging.getLogger('session_auth')

STATUS_BY_EXCEPTION = {
    appexc.BadCredentials: 401,
    appexc.NoCredential: 401,
    appexc.InvalidSession: 401,
    appexc.InternalError: 500,
}


def error_response(exc: appexc.AuthBaseException, status: int) -> JSONResponse:
    body = schemas.ErrorResponse(code=exc.code, detail=str(exc))
    return JSONResponse(body.model_dump(), status_code=status)


def register_exception_handlers(app: FastAPI):

    @app.exception_handler(appexc.AuthBaseException)
    async def auth_exception_handler(request: Request, exc: appexc.AuthBaseException):
        status = STATUS_BY_EXCEPTION.get(type(exc), 500)
        if status >= 500:
            logger.error(format_exception_string(exc, source='AUTH', comment=f'{request.method} {request.url.path}'))
            exc = appexc.InternalError()
        else:
            logger.info(f'[AUTH] {request.method} {request.url.path} rejected: {exc.code}')
        return error_response(exc, status)
