from .redis_manager import *
