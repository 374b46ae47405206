import uuid
from typing import List, Optional

from sqlalchemy import JSON, Text
from sqlmodel import Field

from recipe_api.models.base.base_model import BaseModel


class Recipe(BaseModel, table=True):
    __tablename__ = "recipes"

    title: str = Field(nullable=False)
    description: str = Field(nullable=False, sa_type=Text)
    # 有序的配料字符串列表
    ingredients: List[str] = Field(default_factory=list, sa_type=JSON, nullable=False)
    instructions: str = Field(nullable=False, sa_type=Text)

    # 创建后不可修改；不设外键，owner 可以是已删除的账号
    owner_id: uuid.UUID = Field(index=True, nullable=False)
    # 冗余保存的作者用户名，来自签发 token 时的声明
    owner_username: Optional[str] = Field(default=None)
