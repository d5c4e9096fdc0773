from session_auth.common.exceptions import AppBaseException

class DomainLayerException(AppBaseException):
    '''Base for domain layer'''


####### Users

class BaseUserException(DomainLayerException):
    '''Base for user Exceptions'''

class UserValueError(BaseUserException):
    '''Use within User Domain model methods as ValueError'''

class UserAlreadyExists(BaseUserException):
    '''Raised when user with such ID/Email already exists'''
