from __future__ import annotations

from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.domain.order import OrderSummary
from gift_certificates.ports.order_repository import OrderRepository


@dataclass(frozen=True, slots=True)
class GetOrderDetailsRequest:
    user_id: int
    order_id: int


@dataclass(frozen=True, slots=True)
class GetOrderDetailsResponse:
    order: OrderSummary


class GetOrderDetails:
    """
    Return one order of a user.

    An order owned by someone else is reported exactly like a missing one.
    """

    def __init__(self, order_repository: OrderRepository) -> None:
        self._order_repository = order_repository

    def execute(self, request: GetOrderDetailsRequest) -> GetOrderDetailsResponse:
        validate_identifier("user_id", request.user_id)
        validate_identifier("order_id", request.order_id)

        order = self._order_repository.find_for_user(request.user_id, request.order_id)
        if order is None:
            raise NotFoundError(resource="Order", identifier=request.order_id)

        return GetOrderDetailsResponse(order=order)
