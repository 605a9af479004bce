from abc import ABC, abstractmethod

from debate_engine.models import Debate, InsertDebate, InsertUser, User


class DuplicateUsernameError(ValueError):
    """Raised when creating a user whose username is already taken."""


class DebateStorage(ABC):
    """Abstract base class for debate and user repositories.

    Every operation is a coroutine so a database-backed implementation can
    suspend on I/O without changing callers.
    """

    # User methods

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        pass

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        pass

    @abstractmethod
    async def create_user(self, user: InsertUser) -> User:
        pass

    # Debate methods

    @abstractmethod
    async def get_debate(self, debate_id: int) -> Debate | None:
        pass

    @abstractmethod
    async def get_debates_by_user_id(self, user_id: int | None) -> list[Debate]:
        """Return debates owned by user_id, or every debate when user_id is None."""
        pass

    @abstractmethod
    async def create_debate(self, debate: InsertDebate) -> Debate:
        pass

    @abstractmethod
    async def delete_debate(self, debate_id: int) -> bool:
        """Delete a debate. Returns True only if a record was removed."""
        pass

    @abstractmethod
    async def get_all_debates(self) -> list[Debate]:
        pass

    @abstractmethod
    async def search_debates(self, query: str) -> list[Debate]:
        """Case-insensitive substring match against debate topics."""
        pass

    async def find_debate_by_topic(self, topic: str) -> Debate | None:
        """Return the first saved debate whose topic equals topic, ignoring case."""
        wanted = topic.lower()
        for debate in await self.get_all_debates():
            if debate.topic.lower() == wanted:
                return debate
        return None
