from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel


class LikeType(str, Enum):
    LIKE = "like"
    SUPERLIKE = "superlike"
    PASS = "pass"

    @property
    def is_positive(self) -> bool:
        return self in (LikeType.LIKE, LikeType.SUPERLIKE)


class Like(BaseModel):
    from_user_id: int
    to_user_id: int
    type: LikeType = LikeType.LIKE
    id: Optional[int] = None
    created_at: Optional[datetime] = None
