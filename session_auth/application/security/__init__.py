from .tokens import *
from .routes import *
