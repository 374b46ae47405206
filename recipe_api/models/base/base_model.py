import uuid

from sqlmodel import Field

from recipe_api.models.base.timestamp_mixin import TimestampMixin


class BaseModel(TimestampMixin):
    """
    所有表模型的基类：UUID 主键 + 创建/更新时间。
    子类通过 table=True 成为真正的表，并显式声明 __tablename__（即集合名）。
    """
    id: uuid.UUID = Field(default_factory=uuid.uuid4, primary_key=True, index=True)
