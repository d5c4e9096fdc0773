from .sessions import *
from .users import *
