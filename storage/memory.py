"""In-process storage backed by dictionaries. Contents are lost on restart."""

import logging
from datetime import datetime, timezone

from debate_engine.models import Debate, InsertDebate, InsertUser, User

from .base import DebateStorage, DuplicateUsernameError

logger = logging.getLogger(__name__)


class MemoryStorage(DebateStorage):
    """Dictionary-backed implementation of DebateStorage."""

    def __init__(self):
        self._users: dict[int, User] = {}
        self._debates: dict[int, Debate] = {}
        self._user_id_counter = 1
        self._debate_id_counter = 1

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, user: InsertUser) -> User:
        if await self.get_user_by_username(user.username) is not None:
            raise DuplicateUsernameError(f"Username already exists: {user.username}")

        new_user = User(
            id=self._user_id_counter,
            username=user.username,
            password=user.password,
            preferences={},
            created_at=datetime.now(timezone.utc),
        )
        self._user_id_counter += 1
        self._users[new_user.id] = new_user
        logger.debug(f"Created user {new_user.id}")
        return new_user

    async def get_debate(self, debate_id: int) -> Debate | None:
        return self._debates.get(debate_id)

    async def get_debates_by_user_id(self, user_id: int | None) -> list[Debate]:
        if user_id is None:
            return await self.get_all_debates()
        return [debate for debate in self._debates.values() if debate.user_id == user_id]

    async def create_debate(self, debate: InsertDebate) -> Debate:
        new_debate = Debate(
            id=self._debate_id_counter,
            topic=debate.topic,
            points=debate.points,
            user_id=debate.user_id,
            language=debate.language if debate.language is not None else "english",
            format=debate.format,
            created_at=datetime.now(timezone.utc),
        )
        self._debate_id_counter += 1
        self._debates[new_debate.id] = new_debate
        logger.info(f"Saved debate {new_debate.id}: {new_debate.topic[:60]}")
        return new_debate

    async def delete_debate(self, debate_id: int) -> bool:
        removed = self._debates.pop(debate_id, None)
        if removed is not None:
            logger.info(f"Deleted debate {debate_id}")
        return removed is not None

    async def get_all_debates(self) -> list[Debate]:
        return list(self._debates.values())

    async def search_debates(self, query: str) -> list[Debate]:
        lowercase_query = query.lower()
        return [
            debate
            for debate in self._debates.values()
            if lowercase_query in debate.topic.lower()
        ]

    def clear(self) -> None:
        """Drop every record. Id counters keep counting so ids are never reused."""
        self._users.clear()
        self._debates.clear()
