from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends

from chill_match.applications.interfaces.dtos.like import LikeList, LikeResult, LikeSchema
from chill_match.applications.use_cases.like.create_like import CreateLikeUseCase
from chill_match.applications.use_cases.like.list_likes import ListLikesUseCase
from chill_match.domain.exceptions import DomainError
from chill_match.domain.ports.repositories.like_repository import LikeRepository
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.infrastructure.config.dependencies import get_like_repository, get_user_repository
from chill_match.presentation.errors import to_http_exception

router = APIRouter(prefix="/likes", tags=["likes"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
LikeRepositoryDep = Annotated[LikeRepository, Depends(get_like_repository)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=LikeResult)
async def create_like(payload: LikeSchema, user_repository: UserRepositoryDep, like_repository: LikeRepositoryDep):
    try:
        return await CreateLikeUseCase(user_repository, like_repository).execute(payload)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{user_id}", response_model=LikeList)
async def list_sent_likes(user_id: int, user_repository: UserRepositoryDep, like_repository: LikeRepositoryDep):
    try:
        return await ListLikesUseCase(user_repository, like_repository).sent(user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{user_id}/received", response_model=LikeList)
async def list_received_likes(user_id: int, user_repository: UserRepositoryDep, like_repository: LikeRepositoryDep):
    try:
        return await ListLikesUseCase(user_repository, like_repository).received(user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{user_id}/mutual", response_model=LikeList)
async def list_mutual_likes(user_id: int, user_repository: UserRepositoryDep, like_repository: LikeRepositoryDep):
    try:
        return await ListLikesUseCase(user_repository, like_repository).mutual(user_id)
    except DomainError as e:
        raise to_http_exception(e)
