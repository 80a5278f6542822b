"""AuthService -- 会话认证与登录/登出

每个受保护请求都重新执行 authenticate，不跨请求缓存身份。
"""

import structlog
from voicetodo.core.exceptions import (
    InvalidCredentialsError,
    SessionExpiredError,
    UnauthenticatedError,
    UserNotFoundError,
)
from voicetodo.core.models import Session, User
from voicetodo.core.store import StoreGroup

log = structlog.get_logger()


class AuthService:
    """会话认证服务"""

    def __init__(self, store_group: StoreGroup) -> None:
        self._stores = store_group

    async def authenticate(self, session_id: str | None) -> str:
        """校验会话令牌，返回所属用户 ID

        Raises:
            UnauthenticatedError: 未携带令牌
            SessionExpiredError: 会话不存在或已过期
            UserNotFoundError: 会话指向的用户不存在
        """
        user = await self.current_user(session_id)
        return user.user_id

    async def current_user(self, session_id: str | None) -> User:
        """解析令牌对应的用户，失败规则同 authenticate"""
        if not session_id:
            raise UnauthenticatedError()

        session = await self._stores.session_store.get_session(session_id)
        if session is None:
            raise SessionExpiredError()

        user = await self._stores.user_store.get_user(session.user_id)
        if user is None:
            log.warning("session_user_missing", user_id=session.user_id)
            raise UserNotFoundError()

        return user

    async def login(self, username: str, password: str) -> tuple[User, Session]:
        """校验凭据并创建新会话

        用户名不存在与密码错误返回同一错误。
        """
        user = await self._stores.user_store.get_user_by_username(username)
        if user is None or not user.check_password(password):
            log.info("login_failed", username=username)
            raise InvalidCredentialsError()

        session = await self._stores.session_store.create_session(user.user_id)
        log.info("login_succeeded", user_id=user.user_id)
        return user, session

    async def logout(self, session_id: str | None) -> None:
        """删除会话（令牌缺失或会话已不存在时为空操作）"""
        if not session_id:
            return
        if await self._stores.session_store.delete_session(session_id):
            log.info("logout_succeeded")
