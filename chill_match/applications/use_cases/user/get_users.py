from chill_match.applications.interfaces.dtos.filter_page import FilterPage
from chill_match.applications.interfaces.dtos.user import UserList, UserPublic
from chill_match.domain.ports.repositories.user_repository import UserRepository


class GetUsersUseCase:
    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, filter_page: FilterPage) -> UserList:
        users = await self.user_repository.get_all(offset=filter_page.offset, limit=filter_page.limit)
        return UserList(users=[UserPublic.from_domain(user) for user in users if user.id is not None])
