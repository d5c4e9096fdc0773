import pydantic as p
import uuid
from enum import Enum
from session_auth.domain.services import IPasswordHasherAsync
import session_auth.domain.exceptions as domexc

MAX_PASSWORD_BYTES = 72 #bcrypt input limit

class Role(str, Enum):
    ADMIN = "admin"
    MEMBER = "member"

class User(p.BaseModel):
    """Account as handed out by the user-lookup collaborator. Only the fields sessions need."""
    model_config = p.ConfigDict(validate_assignment=True)

    id: str = p.Field(default_factory=lambda: str(uuid.uuid4()))
    email: str
    password_hash: str
    role: Role = Role.MEMBER

    @p.field_validator('email')
    def email_must_look_like_email(cls, v: str):
        if '@' not in v:
            raise domexc.UserValueError("Email must contain '@'")
        return v.lower()

    @staticmethod
    async def _hash_password(password: str, hasher: IPasswordHasherAsync):
        if len(password) < 8:
            raise domexc.UserValueError(f"Minimal password length is 8 symbols. Your length: {len(password)}")
        if len(password.encode()) > MAX_PASSWORD_BYTES:
            raise domexc.UserValueError(f"Maximal password length is {MAX_PASSWORD_BYTES} bytes")
        return await hasher.hash(password)

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    @staticmethod
    async def create(email: str, password: str, hasher: IPasswordHasherAsync, role: Role = Role.MEMBER):
        password_hash = await User._hash_password(password, hasher)
        return User(
            email=email,
            password_hash=password_hash,
            role=role,
        )
