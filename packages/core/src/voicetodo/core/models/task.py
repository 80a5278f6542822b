"""Task Domain Model

Task 归属于创建它的用户（user_id），之后不会被转移给其他用户。
JSON 字段使用 camelCase（reminderDate、voiceNoteData 等），与前端保持一致。
"""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .enums import DEFAULT_PRIORITY, TaskPriority


def _ensure_aware(value: datetime | None) -> datetime | None:
    """无时区的时间按 UTC 解释"""
    if value is not None and value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class Task(BaseModel):
    """Task 数据模型"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    task_id: str = Field(alias="id", description="唯一标识，ULID 格式")
    title: str = Field(description="任务标题")
    completed: bool = Field(default=False, description="是否已完成")
    priority: TaskPriority = Field(default=DEFAULT_PRIORITY, description="优先级")
    reminder_date: datetime | None = Field(default=None, description="提醒时间")
    voice_note_data: str | None = Field(
        default=None, description="语音备注（data URI 形式的 base64 音频）"
    )
    voice_note_duration: str | None = Field(
        default=None, description="语音时长展示文本，如 0:15"
    )
    user_id: str = Field(description="所属用户 ID")
    created_at: datetime = Field(description="创建时间")
    updated_at: datetime = Field(description="更新时间")

    def to_json(self) -> dict:
        """序列化为对外 JSON（camelCase，时间为 ISO-8601）"""
        return self.model_dump(mode="json", by_alias=True)


class TaskCreate(BaseModel):
    """创建任务请求体"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str
    priority: TaskPriority = DEFAULT_PRIORITY
    reminder_date: datetime | None = None
    voice_note_data: str | None = None
    voice_note_duration: str | None = None

    @field_validator("reminder_date")
    @classmethod
    def _normalize_reminder(cls, value: datetime | None) -> datetime | None:
        return _ensure_aware(value)


# 允许显式置 null 的字段（清除提醒/语音备注）
NULLABLE_UPDATE_FIELDS = frozenset(
    {"reminder_date", "voice_note_data", "voice_note_duration"}
)


class TaskUpdate(BaseModel):
    """部分更新请求体 -- 仅包含客户端实际传入的字段

    id、userId、createdAt、updatedAt 不可由客户端修改（未知字段被忽略）。
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    title: str | None = None
    completed: bool | None = None
    priority: TaskPriority | None = None
    reminder_date: datetime | None = None
    voice_note_data: str | None = None
    voice_note_duration: str | None = None

    @field_validator("reminder_date")
    @classmethod
    def _normalize_reminder(cls, value: datetime | None) -> datetime | None:
        return _ensure_aware(value)

    @model_validator(mode="after")
    def _reject_null_required(self) -> "TaskUpdate":
        for name in self.model_fields_set - NULLABLE_UPDATE_FIELDS:
            if getattr(self, name) is None:
                raise ValueError(f"{name} cannot be null")
        return self

    def changes(self) -> dict:
        """返回待合并的字段（按属性名）"""
        return self.model_dump(exclude_unset=True)
