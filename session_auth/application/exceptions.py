from session_auth.common.exceptions import AppBaseException


class AuthBaseException(AppBaseException):
    """Base for everything the auth layer reports to the outside world.

    `code` is stable and ends up in the response body; the message is generic
    and never carries storage details or hints about which part of the credentials was wrong.
    """
    code: str = "AuthError"
    default_detail: str = "Authentication failed"

    def __init__(self, detail: str | None = None):
        super().__init__(detail or self.default_detail)


class BadCredentials(AuthBaseException):
    '''Unknown email or wrong password. Both look the same from outside'''
    code = "BadCredentials"
    default_detail = "Invalid email or password"

class NoCredential(AuthBaseException):
    '''Protected route hit without a session cookie'''
    code = "NoCredential"
    default_detail = "Session cookie is missing"

class InvalidSession(AuthBaseException):
    '''Session token does not resolve to a user (unknown, expired or revoked)'''
    code = "InvalidSession"
    default_detail = "Session is invalid or expired"

class InternalError(AuthBaseException):
    '''Store unreachable, entropy source failure or a failed atomic write'''
    code = "InternalError"
    default_detail = "Internal error"


class TokenGenerationError(AppBaseException):
    '''Cryptographically secure randomness is unavailable'''
