from .hasher import *
from .traces import *
from .store import *
