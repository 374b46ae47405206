from sqlmodel import Field

from recipe_api.models.base.base_model import BaseModel


class User(BaseModel, table=True):
    __tablename__ = "users"

    username: str = Field(index=True, nullable=False, unique=True)
    email: str = Field(index=True, nullable=False, unique=True)
    # 只在服务内部使用，任何响应都不能带出这个字段
    hashed_password: str = Field(nullable=False)
