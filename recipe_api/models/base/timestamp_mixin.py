# recipe_api/models/base/timestamp_mixin.py
from datetime import datetime

from sqlalchemy import DateTime
from sqlmodel import SQLModel, Field

from recipe_api.models._model_utils.datetime import utcnow


class TimestampMixin(SQLModel):
    created_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
    )
    updated_at: datetime = Field(
        default_factory=utcnow,
        sa_type=DateTime(timezone=True),
        sa_column_kwargs={"onupdate": utcnow},
    )
