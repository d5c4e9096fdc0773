from session_auth.domain.services import IPasswordHasher
from session_auth.common.config import Config
import bcrypt


class BCryptHasher(IPasswordHasher):
    def __init__(self, rounds: int | None = None):
        self.rounds = rounds or Config.BCRYPT_ROUNDS

    def hash(self, password: str) -> str:
        return bcrypt.hashpw(password.encode(), bcrypt.gensalt(rounds=self.rounds)).decode()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode(), password_hash.encode())
        except ValueError:
            #Over-long input or a malformed hash never matches
            return False
