"""UserStore 内存实现"""

from pydantic import SecretStr
from ulid import ULID

from ..exceptions import UserExistsError
from ..models.user import User


class InMemoryUserStore:
    """UserStore 的内存实现"""

    def __init__(self) -> None:
        self._users: dict[str, User] = {}

    async def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        # 用户量极小，线性扫描即可
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, username: str, password: str) -> User:
        if await self.get_user_by_username(username) is not None:
            raise UserExistsError()
        user = User(user_id=str(ULID()), username=username, password=SecretStr(password))
        self._users[user.user_id] = user
        return user

    def count(self) -> int:
        return len(self._users)

    def clear(self) -> None:
        self._users.clear()
