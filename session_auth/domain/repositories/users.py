from abc import abstractmethod, ABC
import session_auth.domain.models.users as domain

class IUserRepository(ABC):
    """User lookup as consumed by the session subsystem. The host system owns the implementation."""

    @abstractmethod
    async def get_by_id(self, user_id: str) -> domain.User | None: ...

    @abstractmethod
    async def get_by_email(self, email: str) -> domain.User | None: ...
