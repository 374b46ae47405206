from typing import Annotated, Optional
from uuid import UUID
from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, StringConstraints, model_validator

# ==========================
# 💡 通用类型定义
# ==========================
UsernameStr = Annotated[str, StringConstraints(min_length=1, max_length=64, strip_whitespace=True)]
PasswordStr = Annotated[str, StringConstraints(min_length=1)]
# 登录标识与注册时一样去掉首尾空格，邮箱大小写由查询层忽略
IdentifierStr = Annotated[str, StringConstraints(strip_whitespace=True)]


# ==========================
# 🧾 用户注册模型
# ==========================
class UserCreate(BaseModel):
    username: UsernameStr = Field(..., description="用户名（去空格）")
    email: EmailStr = Field(..., description="邮箱地址")
    password: PasswordStr = Field(..., description="密码")


# ==========================
# 📤 用户读取模型（不含密码哈希）
# ==========================
class UserRead(BaseModel):
    id: UUID
    username: str
    email: str
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }


# ==========================
# 🔐 登录模型
# ==========================
class CredentialsRequest(BaseModel):
    username: Optional[IdentifierStr] = Field(default=None, description="用户名，也可以直接填邮箱")
    email: Optional[IdentifierStr] = Field(default=None, description="邮箱，username 为空时使用")
    password: PasswordStr = Field(..., description="密码")

    @property
    def identifier(self) -> Optional[str]:
        return self.username if self.username is not None else self.email

    @model_validator(mode="after")
    def validate_identifier(self):
        if not self.identifier:
            raise ValueError("username 或 email 至少填写一个")
        return self


class LoginResponse(BaseModel):
    user: UserRead
    token: str
