from .sessions import router as SessionRouter
