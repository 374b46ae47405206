# 专门用于接口上下文中注入当前用户的身份信息（全部来自 token 声明，不查库）
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class UserContext(BaseModel):
    id: UUID
    username: Optional[str] = None
    email: Optional[str] = None
    jti: Optional[str] = None
