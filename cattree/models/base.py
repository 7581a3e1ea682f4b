from typing import Optional
from pydantic import BaseModel, ConfigDict, Field
from ..constants import NAME_MAX_LENGTH

class CategoryRecord(BaseModel):
    """Base model with the adjacency list columns"""
    category_id: int = Field(gt=0)
    name: str = Field(min_length=1, max_length=NAME_MAX_LENGTH)
    parent_id: Optional[int] = None
    level: int = Field(ge=0)

    model_config = ConfigDict(from_attributes=True, frozen=True)

    @property
    def key(self):
        return (self.category_id, self.name, self.parent_id, self.level)
