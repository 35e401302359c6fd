from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from chill_match.domain.exceptions import ConflictError, NotFoundError, RepositoryError
from chill_match.domain.models.user import User as DomainUser
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.infrastructure.logging.logger import Logger
from chill_match.infrastructure.persistence.models import User as SQLUser

logger = Logger.get_logger(__name__)


class SQLAlchemyUserRepository(UserRepository):
    def __init__(self, session: AsyncSession):
        self.session = session

    def _to_domain(self, sql_user: SQLUser) -> DomainUser:
        # validation normalizes whatever shape the stored documents have
        return DomainUser.model_validate(
            {
                "id": sql_user.id,
                "username": sql_user.username,
                "email": sql_user.email,
                "age": sql_user.age,
                "location": sql_user.location,
                "bio": sql_user.bio,
                "created_at": sql_user.created_at,
                "streaming_services": sql_user.streaming_services,
                "preferences": sql_user.preferences,
                "watch_history": sql_user.watch_history,
                "favorite_movies": sql_user.favorite_movies,
            }
        )

    def _apply(self, sql_user: SQLUser, user: DomainUser) -> None:
        sql_user.username = user.username
        sql_user.email = user.email
        sql_user.age = user.age
        sql_user.location = user.location
        sql_user.bio = user.bio
        sql_user.streaming_services = [service.model_dump(mode="json") for service in user.streaming_services]
        sql_user.preferences = user.preferences.model_dump(mode="json")
        sql_user.watch_history = [item.model_dump(mode="json") for item in user.watch_history]
        sql_user.favorite_movies = [movie.model_dump(mode="json") for movie in user.favorite_movies]

    async def create(self, user: DomainUser) -> DomainUser:
        sql_user = SQLUser(username=user.username, email=user.email)
        self._apply(sql_user, user)
        try:
            self.session.add(sql_user)
            await self.session.commit()
            await self.session.refresh(sql_user)
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"User with email {user.email} already exists") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception("Failed to create user")
            raise RepositoryError("Failed to create user") from e
        return self._to_domain(sql_user)

    async def get_user(self, user_id: int) -> Optional[DomainUser]:
        try:
            sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
        except SQLAlchemyError as e:
            raise RepositoryError(f"Failed to load user {user_id}") from e
        return self._to_domain(sql_user) if sql_user else None

    async def get_by_email(self, email: str) -> Optional[DomainUser]:
        try:
            sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.email == email.lower()))
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to look up user by email") from e
        return self._to_domain(sql_user) if sql_user else None

    async def list_users(self) -> List[DomainUser]:
        try:
            query = await self.session.scalars(select(SQLUser).order_by(SQLUser.id))
            sql_users = query.all()
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to list users") from e
        return [self._to_domain(sql_user) for sql_user in sql_users]

    async def get_all(self, offset: int = 0, limit: int = 100) -> List[DomainUser]:
        try:
            query = await self.session.scalars(select(SQLUser).order_by(SQLUser.id).offset(offset).limit(limit))
            sql_users = query.all()
        except SQLAlchemyError as e:
            raise RepositoryError("Failed to list users") from e
        return [self._to_domain(sql_user) for sql_user in sql_users]

    async def update(self, user: DomainUser) -> DomainUser:
        try:
            sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user.id))
            if not sql_user:
                raise NotFoundError(f"User with ID {user.id} not found")

            self._apply(sql_user, user)
            await self.session.commit()
            await self.session.refresh(sql_user)
        except IntegrityError as e:
            await self.session.rollback()
            raise ConflictError(f"User with email {user.email} already exists") from e
        except SQLAlchemyError as e:
            await self.session.rollback()
            logger.exception(f"Failed to update user {user.id}")
            raise RepositoryError(f"Failed to update user {user.id}") from e
        return self._to_domain(sql_user)

    async def delete(self, user_id: int) -> bool:
        try:
            sql_user = await self.session.scalar(select(SQLUser).where(SQLUser.id == user_id))
            if not sql_user:
                return False

            await self.session.delete(sql_user)
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise RepositoryError(f"Failed to delete user {user_id}") from e
        return True
