"""Session Domain Model"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Session(BaseModel):
    """登录会话 -- expires_at 之后视为不存在"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    session_id: str = Field(alias="id", description="不透明会话令牌")
    user_id: str = Field(description="所属用户 ID")
    created_at: datetime = Field(description="创建时间")
    expires_at: datetime = Field(description="过期时间")

    def is_expired(self, now: datetime) -> bool:
        return self.expires_at < now
