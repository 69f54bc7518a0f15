from __future__ import annotations

from abc import ABC, abstractmethod

from gift_certificates.domain.order import User
from gift_certificates.domain.paging import PageRequest


class UserRepository(ABC):
    @abstractmethod
    def find(self, user_id: int) -> User | None: ...

    @abstractmethod
    def find_all(self, page: PageRequest) -> list[User]: ...
