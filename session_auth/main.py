#Fastapi/Asyncio
from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager

#Project files
from session_auth.common.config import Config
import session_auth.infrastructure.telemetry.logs as logs
import session_auth.infrastructure.dependencies as ideps
import session_auth.application.dependencies as adeps
import session_auth.presentation.routers as routers
import session_auth.presentation.schemas as schemas
from session_auth.presentation.exception_handlers import register_exception_handlers

#Logging
import logging
import loguru # type: ignore


###################
#       App       #
###################

@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f'[APP: Startup] Startup began...')

    #Cache
    await ideps.CacheManager.wait_for_startup(attempts=Config.REDIS_WAIT_MAX_RETRIES, interval_sec=Config.REDIS_WAIT_INTERVAL_SECONDS)
    await ideps.CacheManager.initialize_data_structures()

    #Default admin for the built-in user registry
    await ideps.UserRepository.ensure_admin_exists(ideps.PasswordHasherType())

    logger.info(f'[APP: Startup] Startup finished!')
    yield
    await ideps.CacheManager.close()


logs.init_loggers()
logger = logging.getLogger('session_auth')

app = FastAPI(
    title = f'{Config.APP_NAME} commit {Config.GIT_COMMIT}',
    swagger_ui_parameters={
        "defaultModelsExpandDepth": -1,
        "docExpansion": None,
        "displayRequestDuration":True
    },
    lifespan=lifespan,
    dependencies=[Depends(adeps.authenticate_request)],
)

app.include_router(routers.SessionRouter)
register_exception_handlers(app)


@app.middleware("http")
async def unhandled_exceptions_middleware(request: Request, call_next):
    try:
        return await call_next(request)
    except Exception as e:
        loguru.logger.exception(e)
        return JSONResponse(
            status_code=500,
            content={'successful':False, 'code':'InternalError', 'detail':'Unhandled error'}
        )


########################################
#        GETTING CURRENT PRINCIPAL     #
########################################

@app.get("/me")
async def whoami(user_id: adeps.CurrentUserIdDependency) -> schemas.PrincipalResponse:
    return schemas.PrincipalResponse(user_id=user_id)


########################
#        Health        #
########################

@app.get("/health")
async def read_root():
    """Indicates if the server is alive"""
    return {"status": "ok"}


def run():
    import uvicorn
    uvicorn.run(app, host=Config.UVICORN_HOST, port=Config.UVICORN_PORT)
