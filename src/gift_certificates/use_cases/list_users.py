from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.order import User
from gift_certificates.domain.paging import PageRequest
from gift_certificates.ports.user_repository import UserRepository


@dataclass(frozen=True, slots=True)
class ListUsersRequest:
    page: PageRequest


@dataclass(frozen=True, slots=True)
class ListUsersResponse:
    users: list[User]


class ListUsers:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        request.page.validate()
        return ListUsersResponse(users=self._user_repository.find_all(request.page))
