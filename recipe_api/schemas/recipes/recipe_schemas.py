from typing import Annotated, List, Optional
from uuid import UUID
from datetime import datetime

from pydantic import BaseModel, Field, StringConstraints, field_validator

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

# PATCH 允许修改的字段，owner_id / owner_username 不在其中
UPDATABLE_FIELDS = ("title", "description", "ingredients", "instructions")


# === Recipe ===

class RecipeCreate(BaseModel):
    title: NonEmptyStr
    description: NonEmptyStr
    ingredients: List[str] = Field(..., json_schema_extra={"example": ["flour", "milk", "egg"]})
    instructions: NonEmptyStr


class RecipeUpdate(BaseModel):
    """部分更新，未出现的字段保持不变；显式传 null 视为参数错误。"""
    title: Optional[NonEmptyStr] = None
    description: Optional[NonEmptyStr] = None
    ingredients: Optional[List[str]] = None
    instructions: Optional[NonEmptyStr] = None

    @field_validator(*UPDATABLE_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("字段不能为 null")
        return value

    def to_update_dict(self) -> dict:
        return self.model_dump(include=set(UPDATABLE_FIELDS), exclude_unset=True)


class RecipeRead(BaseModel):
    id: UUID
    title: str
    description: str
    ingredients: List[str]
    instructions: str
    owner_id: UUID
    owner_username: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    model_config = {
        "from_attributes": True
    }
