from gift_certificates.infra.db.models.base import Base
from gift_certificates.infra.db.models.certificate import CertificateRow, TagRow, certificate_tags
from gift_certificates.infra.db.models.order import OrderRow
from gift_certificates.infra.db.models.user import UserRow

__all__ = [
    "Base",
    "CertificateRow",
    "OrderRow",
    "TagRow",
    "UserRow",
    "certificate_tags",
]
