import session_auth.application.exceptions as appexc
import session_auth.application.security as security
import session_auth.application.services as services
from session_auth.infrastructure.telemetry.traces import TracerType
from fastapi import Request
from enum import Enum
import logging

logger = logging.getLogger('session_auth')


class GateState(str, Enum):
    UNCHECKED = "unchecked"
    BYPASSED = "bypassed"
    AUTHENTICATED = "authenticated"
    REJECTED = "rejected"


class AuthGate:
    """Runs in front of every routed handler.

    Public (path, method) pairs are forwarded with no principal. Everything else must carry a
    session cookie that resolves to a user id, which is then stored on `request.state.user_id`.
    A rejection raises, so no handler runs and the exception handler writes the error body.
    """

    def __init__(self, classifier: security.RouteClassifier, cookie_name: str = "session"):
        self.classifier = classifier
        self.cookie_name = cookie_name

    @TracerType.traced
    async def authenticate(self, request: Request, auth_service: services.AuthService) -> str | None:
        request.state.auth_state = GateState.UNCHECKED

        if self.classifier.bypasses(request.url.path, request.method):
            request.state.auth_state = GateState.BYPASSED
            return None

        token = request.cookies.get(self.cookie_name)
        if not token:
            request.state.auth_state = GateState.REJECTED
            raise appexc.NoCredential()

        try:
            user_id = await auth_service.authenticate(token)
        except appexc.InternalError as e:
            logger.warning(f'[AUTH GATE] Session lookup failed, rejecting request: {e.__cause__!r}')
            request.state.auth_state = GateState.REJECTED
            raise appexc.InvalidSession() from e
        except appexc.InvalidSession:
            request.state.auth_state = GateState.REJECTED
            raise

        request.state.auth_state = GateState.AUTHENTICATED
        request.state.user_id = user_id
        request.state.session_token = token
        return user_id
