from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class UserResponseDTO(BaseModel):
    id: int
    name: str


class UserListResponseDTO(BaseModel):
    users: list[UserResponseDTO]
    page: int
    page_size: int


class PurchaseRequestDTO(BaseModel):
    """Request payload for buying a certificate."""

    certificate_id: int = Field(description="Certificate to buy", examples=[1], ge=1)

    model_config = ConfigDict(extra="forbid")


class OrderResponseDTO(BaseModel):
    id: int
    user_id: int
    certificate_id: int | None
    cost: str
    order_date: datetime | None = None


class OrderSummaryDTO(BaseModel):
    id: int
    purchase_cost: str
    purchase_time: datetime | None = None


class OrderListResponseDTO(BaseModel):
    orders: list[OrderSummaryDTO]
    page: int
    page_size: int
