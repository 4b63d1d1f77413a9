"""The common base of bookings, single or grouped."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Reservation(ABC):
    """A booking held by someone, sold by a vendor, possibly inside a group."""

    def __init__(self, nom: str, date: str, contact: str, email: str) -> None:
        self._titre = ""
        self._date = date
        self._contact = contact
        self._email = email
        self.titulaire = nom
        self._parent: Reservation | None = None
        self.a_parent = False

    def _copier_depuis(self, autre: Reservation) -> None:
        """Take over the booking fields of ``autre``, parent excluded."""
        self._titre = autre._titre
        self._date = autre._date
        self._contact = autre._contact
        self._email = autre._email
        self.titulaire = autre.titulaire
        self.a_parent = autre.a_parent

    @property
    def titre(self) -> str:
        return self._titre

    @titre.setter
    def titre(self, valeur: str) -> None:
        self._titre = valeur

    @property
    def date(self) -> str:
        return self._date

    @property
    def contact(self) -> str:
        return self._contact

    @property
    def email(self) -> str:
        return self._email

    @property
    def parent(self) -> Reservation | None:
        """The enclosing group, only when the booking is flagged as having one."""
        return self._parent if self.a_parent else None

    def definir_parent(self, groupe: Reservation | None) -> None:
        self._parent = groupe

    @abstractmethod
    def enfants(self) -> list[Reservation]:
        """Direct sub-bookings."""

    @abstractmethod
    def couts(self, autre_devise: str = "CAD", taxe: float = 1.0) -> float:
        """Total cost with tax, in ``autre_devise``."""

    @abstractmethod
    def details(self) -> str:
        """Human-readable description."""

    @abstractmethod
    def ajouter(self, reservation: Reservation) -> None:
        """Add a sub-booking."""

    @abstractmethod
    def supprimer(self, titre: str) -> None:
        """Remove a sub-booking by title."""

    @abstractmethod
    def enfant(self, index: int) -> Reservation | None:
        """Sub-booking at ``index``."""

    @abstractmethod
    def clone(self, nouv_nom: str) -> Reservation:
        """Copy of this booking held by ``nouv_nom``."""

    @abstractmethod
    def est_groupe(self) -> bool:
        """True for a group of bookings."""