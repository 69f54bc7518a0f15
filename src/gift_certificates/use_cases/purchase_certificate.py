from __future__ import annotations

import logging
from dataclasses import dataclass

from gift_certificates.domain.errors import NotFoundError
from gift_certificates.domain.identifiers import validate_identifier
from gift_certificates.domain.order import Order
from gift_certificates.ports.certificate_repository import CertificateRepository
from gift_certificates.ports.order_repository import OrderRepository
from gift_certificates.ports.user_repository import UserRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PurchaseCertificateRequest:
    user_id: int
    certificate_id: int


@dataclass(frozen=True, slots=True)
class PurchaseCertificateResponse:
    order: Order


class PurchaseCertificate:
    """
    Place an order for a certificate on behalf of an (already authenticated) user.

    The order cost is the certificate price at purchase time.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        certificate_repository: CertificateRepository,
        order_repository: OrderRepository,
    ) -> None:
        self._user_repository = user_repository
        self._certificate_repository = certificate_repository
        self._order_repository = order_repository

    def execute(self, request: PurchaseCertificateRequest) -> PurchaseCertificateResponse:
        """
        Raises:
            ValidationError: If an identifier is not a positive integer
            NotFoundError: If the user or the certificate doesn't exist
        """
        validate_identifier("user_id", request.user_id)
        validate_identifier("certificate_id", request.certificate_id)

        if self._user_repository.find(request.user_id) is None:
            raise NotFoundError(resource="User", identifier=request.user_id)

        certificate = self._certificate_repository.find(request.certificate_id)
        if certificate is None:
            raise NotFoundError(resource="Certificate", identifier=request.certificate_id)

        order = self._order_repository.save(
            Order(
                user_id=request.user_id,
                certificate_id=request.certificate_id,
                cost=certificate.price,
            )
        )

        logger.info(
            "Order placed",
            extra={
                "order_id": order.id,
                "user_id": request.user_id,
                "certificate_id": request.certificate_id,
            },
        )

        return PurchaseCertificateResponse(order=order)
