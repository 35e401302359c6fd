from http import HTTPStatus
from typing import Annotated

from fastapi import APIRouter, Depends, Query

from chill_match.applications.interfaces.dtos.filter_page import FilterPage
from chill_match.applications.interfaces.dtos.message import Message
from chill_match.applications.interfaces.dtos.user import (
    BioUpdate,
    FavoriteMovieSchema,
    PreferencesUpdate,
    StreamingServiceSchema,
    StreamingServicesUpdate,
    UserList,
    UserPublic,
    UserSchema,
    WatchHistorySchema,
)
from chill_match.applications.use_cases.user.add_favorite_movie import AddFavoriteMovieUseCase
from chill_match.applications.use_cases.user.add_streaming_service import AddStreamingServiceUseCase
from chill_match.applications.use_cases.user.add_watch_history import AddWatchHistoryUseCase
from chill_match.applications.use_cases.user.create_user import CreateUserUseCase
from chill_match.applications.use_cases.user.delete_user import DeleteUserUseCase
from chill_match.applications.use_cases.user.get_user import GetUserUseCase
from chill_match.applications.use_cases.user.get_users import GetUsersUseCase
from chill_match.applications.use_cases.user.replace_streaming_services import ReplaceStreamingServicesUseCase
from chill_match.applications.use_cases.user.update_bio import UpdateBioUseCase
from chill_match.applications.use_cases.user.update_preferences import UpdatePreferencesUseCase
from chill_match.domain.exceptions import DomainError
from chill_match.domain.ports.repositories.user_repository import UserRepository
from chill_match.infrastructure.config.dependencies import get_user_repository
from chill_match.presentation.errors import to_http_exception

router = APIRouter(prefix="/users", tags=["users"])

UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]


@router.post("/", status_code=HTTPStatus.CREATED, response_model=UserPublic)
async def create_user(user: UserSchema, user_repository: UserRepositoryDep):
    try:
        return await CreateUserUseCase(user_repository).execute(user)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/", response_model=UserList)
async def read_users(filter_users: Annotated[FilterPage, Query()], user_repository: UserRepositoryDep):
    try:
        return await GetUsersUseCase(user_repository).execute(filter_users)
    except DomainError as e:
        raise to_http_exception(e)


@router.get("/{user_id}", response_model=UserPublic)
async def read_user(user_id: int, user_repository: UserRepositoryDep):
    try:
        return await GetUserUseCase(user_repository).execute(user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.delete("/{user_id}", response_model=Message)
async def delete_user(user_id: int, user_repository: UserRepositoryDep):
    try:
        return await DeleteUserUseCase(user_repository).execute(user_id)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{user_id}/bio", response_model=UserPublic)
async def update_bio(user_id: int, payload: BioUpdate, user_repository: UserRepositoryDep):
    try:
        return await UpdateBioUseCase(user_repository).execute(user_id, payload)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{user_id}/streaming-services", response_model=UserPublic)
async def add_streaming_service(user_id: int, payload: StreamingServiceSchema, user_repository: UserRepositoryDep):
    try:
        return await AddStreamingServiceUseCase(user_repository).execute(user_id, payload)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{user_id}/streaming-services", response_model=UserPublic)
async def replace_streaming_services(
    user_id: int, payload: StreamingServicesUpdate, user_repository: UserRepositoryDep
):
    try:
        return await ReplaceStreamingServicesUseCase(user_repository).execute(user_id, payload)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{user_id}/watch-history", response_model=UserPublic)
async def add_watch_history(user_id: int, payload: WatchHistorySchema, user_repository: UserRepositoryDep):
    try:
        return await AddWatchHistoryUseCase(user_repository).execute(user_id, payload)
    except DomainError as e:
        raise to_http_exception(e)


@router.put("/{user_id}/preferences", response_model=UserPublic)
async def update_preferences(user_id: int, payload: PreferencesUpdate, user_repository: UserRepositoryDep):
    try:
        return await UpdatePreferencesUseCase(user_repository).execute(user_id, payload)
    except DomainError as e:
        raise to_http_exception(e)


@router.post("/{user_id}/favorite-movies", response_model=UserPublic)
async def add_favorite_movie(user_id: int, payload: FavoriteMovieSchema, user_repository: UserRepositoryDep):
    try:
        return await AddFavoriteMovieUseCase(user_repository).execute(user_id, payload)
    except DomainError as e:
        raise to_http_exception(e)
