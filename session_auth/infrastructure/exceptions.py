from session_auth.common.exceptions import CustomStorageException

### Startup
class StorageBootError(CustomStorageException):
    '''Storage service failed to boot within given time'''

class StorageNotInitialized(CustomStorageException):
    '''Storage service has been booted successfully, yet seems not to be initialized entirely'''
