from .sessions import *
from .auth import *
