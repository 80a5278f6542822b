"""User Domain Model

密码以明文保存（单管理员账号，沿用既有凭据），
SecretStr 仅用于避免密码出现在日志和 repr 中。
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class User(BaseModel):
    """用户数据模型"""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="id", description="唯一标识，ULID 格式")
    username: str = Field(description="用户名，全局唯一")
    password: SecretStr = Field(description="明文密码")

    def check_password(self, password: str) -> bool:
        return self.password.get_secret_value() == password

    def public_view(self) -> dict[str, str]:
        """对外暴露的用户信息（不含密码）"""
        return {"id": self.user_id, "username": self.username}
