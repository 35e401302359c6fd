from datetime import datetime
from typing import List, Optional

from chill_match.applications.interfaces.dtos.camel import CamelModel
from chill_match.domain.models.like import Like, LikeType


class LikeSchema(CamelModel):
    from_user_id: int
    to_user_id: int
    type: LikeType = LikeType.LIKE


class LikePublic(CamelModel):
    id: int
    from_user_id: int
    to_user_id: int
    type: LikeType
    created_at: Optional[datetime] = None

    @classmethod
    def from_domain(cls, like: Like) -> "LikePublic":
        return cls.model_validate(like.model_dump())


class LikeResult(CamelModel):
    like: LikePublic
    is_mutual: bool


class LikeList(CamelModel):
    user_id: int
    count: int
    likes: List[LikePublic]
