"""SessionStore 内存实现

过期会话不会被后台清理，而是在下一次查询时惰性删除。
"""

from datetime import timedelta

import structlog
from ulid import ULID

from ..models.session import Session
from .protocols import Clock, utc_now

log = structlog.get_logger()


class InMemorySessionStore:
    """SessionStore 的内存实现"""

    def __init__(self, ttl: timedelta, clock: Clock = utc_now) -> None:
        self._sessions: dict[str, Session] = {}
        self._ttl = ttl
        self._clock = clock

    @property
    def ttl(self) -> timedelta:
        return self._ttl

    async def create_session(self, user_id: str) -> Session:
        now = self._clock()
        session = Session(
            session_id=str(ULID()),
            user_id=user_id,
            created_at=now,
            expires_at=now + self._ttl,
        )
        self._sessions[session.session_id] = session
        return session

    async def get_session(self, session_id: str) -> Session | None:
        session = self._sessions.get(session_id)
        if session is None:
            return None

        if session.is_expired(self._clock()):
            del self._sessions[session_id]
            log.info("session_expired_pruned", user_id=session.user_id)
            return None

        return session

    async def delete_session(self, session_id: str) -> bool:
        return self._sessions.pop(session_id, None) is not None

    def clear(self) -> None:
        self._sessions.clear()
