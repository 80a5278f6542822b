"""枚举定义

TaskPriority 仅用于存储和展示，服务端不按优先级排序或筛选。
"""

from enum import StrEnum


class TaskPriority(StrEnum):
    """任务优先级"""

    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


DEFAULT_PRIORITY: TaskPriority = TaskPriority.NORMAL
