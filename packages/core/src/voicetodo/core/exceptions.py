"""VoiceTodo 异常体系

消息文本直接返回给客户端，保持简短可读；
HTTP 状态码的映射由 gateway 负责。
"""


class VoiceTodoError(Exception):
    """VoiceTodo 基础异常"""

    default_message = "Request failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class ValidationError(VoiceTodoError):
    """请求数据不合法（缺少必填字段、标题为空等）"""

    default_message = "Invalid task data"


class NotFoundError(VoiceTodoError):
    """任务不存在，或不属于当前用户

    两种情况对调用方不可区分，避免泄露其他用户任务的存在性。
    """

    default_message = "Task not found"


class AuthenticationError(VoiceTodoError):
    """认证失败基类 -- 统一映射为 401"""

    default_message = "Not authenticated"


class UnauthenticatedError(AuthenticationError):
    """请求未携带会话令牌"""

    default_message = "Not authenticated"


class SessionExpiredError(AuthenticationError):
    """会话不存在或已过期（过期会话在查询时被清理，两者不作区分）"""

    default_message = "Session expired"


class UserNotFoundError(AuthenticationError):
    """会话指向的用户已不存在"""

    default_message = "User not found"


class InvalidCredentialsError(AuthenticationError):
    """用户名或密码错误"""

    default_message = "Invalid credentials"


class UserExistsError(VoiceTodoError):
    """用户名已被占用（用户名全局唯一）"""

    default_message = "Username already exists"
