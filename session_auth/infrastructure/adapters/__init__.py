from .passwords import *
