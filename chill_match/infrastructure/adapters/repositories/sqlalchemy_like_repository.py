from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chill_match.domain.exceptions import ConflictError, RepositoryError
from chill_match.domain.models.like import Like as DomainLike
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.infrastructure.persistence.models import Like as SQLLike


class SQLAlchemyLikeRepository(LikeRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, row: SQLLike) -> DomainLike:
        return DomainLike(
            id=row.id,
            from_user_id=row.from_user_id,
            to_user_id=row.to_user_id,
            type=row.type,
            created_at=row.created_at,
        )

    async def create(self, like: DomainLike) -> DomainLike:
        sql_like = SQLLike(from_user_id=like.from_user_id, to_user_id=like.to_user_id, type=like.type.value)
        try:
            self.session.add(sql_like)
            await self.session.commit()
            await self.session.refresh(sql_like)
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"User {like.from_user_id} already reacted to user {like.to_user_id}") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError("Failed to store like") from e
        return self._to_domain(sql_like)

    async def get(self, from_user_id: int, to_user_id: int) -> Optional[DomainLike]:
        try:
            row = await self.session.scalar(
                select(SQLLike).where((SQLLike.from_user_id == from_user_id) & (SQLLike.to_user_id == to_user_id))
            )
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to load like") from e
        return self._to_domain(row) if row else None

    async def get_by_from_user(self, user_id: int) -> List[DomainLike]:
        return await self._list(select(SQLLike).where(SQLLike.from_user_id == user_id).order_by(SQLLike.id))

    async def get_by_to_user(self, user_id: int) -> List[DomainLike]:
        return await self._list(select(SQLLike).where(SQLLike.to_user_id == user_id).order_by(SQLLike.id))

    async def _list(self, statement) -> List[DomainLike]:
        try:
            rows = (await self.session.scalars(statement)).all()
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to list likes") from e
        return [self._to_domain(row) for row in rows]
