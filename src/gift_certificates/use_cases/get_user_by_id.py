from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.domain.order import User
from gift_certificates.ports.user_repository import UserRepository


@dataclass(frozen=True, slots=True)
class GetUserByIdRequest:
    user_id: int


@dataclass(frozen=True, slots=True)
class GetUserByIdResponse:
    user: User


class GetUserById:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    def execute(self, request: GetUserByIdRequest) -> GetUserByIdResponse:
        validate_identifier("user_id", request.user_id)

        user = self._user_repository.find(request.user_id)
        if user is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        return GetUserByIdResponse(user=user)
