from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    """Port to the external seat booking service. Only a seat count is reserved."""

    @abstractmethod
    def reserve_seat(self, *, account_id: int, seats: int) -> None:
        pass
