from abc import ABC, abstractmethod


class IOwnershipChecker(ABC):
    @abstractmethod
    def is_owner(self, *, user_id: str, organizer_id: str) -> bool:
        pass
