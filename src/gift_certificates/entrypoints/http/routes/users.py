from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from gift_certificates.domain.paging import PageRequest
from gift_certificates.entrypoints.http.dependencies import (
    get_get_order_details_use_case,
    get_get_user_by_id_use_case,
    get_get_user_orders_use_case,
    get_list_users_use_case,
    get_purchase_certificate_use_case,
)
from gift_certificates.entrypoints.http.dtos.orders import (
    OrderListResponseDTO,
    OrderResponseDTO,
    OrderSummaryDTO,
    PurchaseRequestDTO,
    UserListResponseDTO,
    UserResponseDTO,
)
from gift_certificates.entrypoints.http.dtos.paging import PageQueryDTO
from gift_certificates.entrypoints.http.error_responses import error_responses
from gift_certificates.entrypoints.http.mappers.order_mapper import OrderMapper
from gift_certificates.use_cases.get_order_details import (
    GetOrderDetails,
    GetOrderDetailsRequest,
)
from gift_certificates.use_cases.get_user_by_id import GetUserById, GetUserByIdRequest
from gift_certificates.use_cases.get_user_orders import GetUserOrders, GetUserOrdersRequest
from gift_certificates.use_cases.list_users import ListUsers, ListUsersRequest
from gift_certificates.use_cases.purchase_certificate import (
    PurchaseCertificate,
    PurchaseCertificateRequest,
)

router = APIRouter(tags=["Users"])


@router.get(
    "/users",
    response_model=UserListResponseDTO,
    summary="List users",
    responses=error_responses(422, 500),
)
def list_users(
    query: Annotated[PageQueryDTO, Query()],
    use_case: ListUsers = Depends(get_list_users_use_case),
) -> UserListResponseDTO:
    page = PageRequest(page=query.page, page_size=query.page_size)
    result = use_case.execute(ListUsersRequest(page=page))
    return OrderMapper.to_user_list_response(
        result.users, page=query.page, page_size=query.page_size
    )


@router.get(
    "/users/{user_id}",
    response_model=UserResponseDTO,
    summary="Get a user",
    responses=error_responses(400, 404, 500),
)
def get_user(
    user_id: int,
    use_case: GetUserById = Depends(get_get_user_by_id_use_case),
) -> UserResponseDTO:
    result = use_case.execute(GetUserByIdRequest(user_id=user_id))
    return OrderMapper.to_user_response(result.user)


@router.get(
    "/users/{user_id}/orders",
    response_model=OrderListResponseDTO,
    summary="List a user's orders",
    responses=error_responses(400, 404, 422, 500),
)
def get_user_orders(
    user_id: int,
    query: Annotated[PageQueryDTO, Query()],
    use_case: GetUserOrders = Depends(get_get_user_orders_use_case),
) -> OrderListResponseDTO:
    page = PageRequest(page=query.page, page_size=query.page_size)
    result = use_case.execute(GetUserOrdersRequest(user_id=user_id, page=page))
    return OrderMapper.to_order_list_response(
        result.orders, page=query.page, page_size=query.page_size
    )


@router.post(
    "/users/{user_id}/orders",
    response_model=OrderResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Buy a gift certificate",
    description="Place an order for a certificate. The cost is the certificate's current price.",
    responses=error_responses(400, 404, 422, 500),
)
def purchase_certificate(
    user_id: int,
    payload: PurchaseRequestDTO,
    use_case: PurchaseCertificate = Depends(get_purchase_certificate_use_case),
) -> OrderResponseDTO:
    request = PurchaseCertificateRequest(user_id=user_id, certificate_id=payload.certificate_id)
    result = use_case.execute(request)
    return OrderMapper.to_order_response(result.order)


@router.get(
    "/users/{user_id}/orders/{order_id}",
    response_model=OrderSummaryDTO,
    summary="Get a user's order",
    responses=error_responses(400, 404, 500),
)
def get_order(
    user_id: int,
    order_id: int,
    use_case: GetOrderDetails = Depends(get_get_order_details_use_case),
) -> OrderSummaryDTO:
    result = use_case.execute(GetOrderDetailsRequest(user_id=user_id, order_id=order_id))
    return OrderMapper.to_summary_response(result.order)
