from __future__ import annotations

from gift_certificates.domain.order import Order, OrderSummary, User
from gift_certificates.entrypoints.http.dtos.orders import (
    OrderListResponseDTO,
    OrderResponseDTO,
    OrderSummaryDTO,
    UserListResponseDTO,
    UserResponseDTO,
)


class OrderMapper:
    """Maps users and orders to REST DTOs (Decimal → str at the boundary)."""

    @staticmethod
    def to_user_response(user: User) -> UserResponseDTO:
        return UserResponseDTO(id=user.id, name=user.name)

    @staticmethod
    def to_user_list_response(users: list[User], page: int, page_size: int) -> UserListResponseDTO:
        return UserListResponseDTO(
            users=[OrderMapper.to_user_response(user) for user in users],
            page=page,
            page_size=page_size,
        )

    @staticmethod
    def to_order_response(order: Order) -> OrderResponseDTO:
        return OrderResponseDTO(
            id=order.id,
            user_id=order.user_id,
            certificate_id=order.certificate_id,
            cost=str(order.cost),
            order_date=order.order_date,
        )

    @staticmethod
    def to_summary_response(order: OrderSummary) -> OrderSummaryDTO:
        return OrderSummaryDTO(
            id=order.id,
            purchase_cost=str(order.purchase_cost),
            purchase_time=order.purchase_time,
        )

    @staticmethod
    def to_order_list_response(
        orders: list[OrderSummary], page: int, page_size: int
    ) -> OrderListResponseDTO:
        return OrderListResponseDTO(
            orders=[OrderMapper.to_summary_response(order) for order in orders],
            page=page,
            page_size=page_size,
        )
