"""The registry of planned bookings, indexed by title."""

from __future__ import annotations

from voyageplan.reservation import Reservation


class BDPlanification:
    """Bookings stored under their title."""

    _instance: BDPlanification | None = None

    def __init__(self) -> None:
        self._reservations: dict[str, Reservation] = {}

    @classmethod
    def obtenir_instance(cls) -> BDPlanification:
        """Return the shared registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @property
    def reservations(self) -> dict[str, Reservation]:
        """A copy of the bookings by title."""
        return dict(self._reservations)

    def ajouter_reservation(self, reservation: Reservation) -> None:
        """Store a booking, replacing any other with the same title."""
        self._reservations[reservation.titre] = reservation

    def rechercher_reservation(self, titre: str) -> Reservation | None:
        return self._reservations.get(titre)

    def supprimer_reservation(self, reservation: Reservation) -> None:
        """Remove the booking stored under this booking's title, if any."""
        self._reservations.pop(reservation.titre, None)