from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.domain.order import OrderSummary
from gift_certificates.domain.paging import PageRequest
from gift_certificates.ports.order_repository import OrderRepository
from gift_certificates.ports.user_repository import UserRepository


@dataclass(frozen=True, slots=True)
class GetUserOrdersRequest:
    user_id: int
    page: PageRequest


@dataclass(frozen=True, slots=True)
class GetUserOrdersResponse:
    orders: list[OrderSummary]


class GetUserOrders:
    """List one page of a user's orders; an unknown user is NotFound, no orders is an empty page."""

    def __init__(self, user_repository: UserRepository, order_repository: OrderRepository) -> None:
        self._user_repository = user_repository
        self._order_repository = order_repository

    def execute(self, request: GetUserOrdersRequest) -> GetUserOrdersResponse:
        validate_identifier("user_id", request.user_id)
        request.page.validate()

        if self._user_repository.find(request.user_id) is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        return GetUserOrdersResponse(
            orders=self._order_repository.find_by_user(request.user_id, request.page)
        )
