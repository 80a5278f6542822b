"""VoiceTodo Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import DEFAULT_PRIORITY, TaskPriority
from .session import Session
from .task import NULLABLE_UPDATE_FIELDS, Task, TaskCreate, TaskUpdate
from .user import User

__all__ = [
    # 枚举
    "TaskPriority",
    "DEFAULT_PRIORITY",
    # Task
    "Task",
    "TaskCreate",
    "TaskUpdate",
    "NULLABLE_UPDATE_FIELDS",
    # User / Session
    "User",
    "Session",
]
