"""Offers that can be booked, and the read-only proxy handed out on booking."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from types import MappingProxyType

from voyageplan.devise import Devise
from voyageplan.rabais import ObservateurRabais

_log = logging.getLogger(__name__)


class OffreAbstraite(ABC):
    """Common read interface of offers and their proxies."""

    @property
    @abstractmethod
    def nom(self) -> str: ...

    @property
    @abstractmethod
    def type(self) -> str: ...

    @property
    @abstractmethod
    def commentaire(self) -> str: ...

    @property
    @abstractmethod
    def devise(self) -> Devise: ...

    @property
    @abstractmethod
    def prix(self) -> float: ...

    @abstractmethod
    def calculer_prix_total(self, autre_devise: str = "CAD", taxe: float = 1.0) -> float:
        """Price with tax applied, converted into ``autre_devise``."""


class Offre(OffreAbstraite):
    """A bookable offer with a price, a category and optional discounts."""

    def __init__(self, devise: Devise, id: str, nom: str, prix: float, type: str) -> None:
        self._devise = devise
        self._id = id
        self._nom = nom
        self._prix = float(prix)
        self._prix_original = float(prix)
        self._type = type
        self._commentaire = ""
        self._rabais: dict[str, ObservateurRabais] = {}
        _log.info("Entree %s rattachee a la categorie %s cree!", nom, type)

    @property
    def id(self) -> str:
        return self._id

    @property
    def nom(self) -> str:
        return self._nom

    @property
    def type(self) -> str:
        return self._type

    @property
    def devise(self) -> Devise:
        return self._devise

    @property
    def prix_original(self) -> float:
        return self._prix_original

    @property
    def prix(self) -> float:
        return self._prix

    @prix.setter
    def prix(self, valeur: float) -> None:
        self._prix = float(valeur)

    @property
    def commentaire(self) -> str:
        return self._commentaire

    @commentaire.setter
    def commentaire(self, valeur: str) -> None:
        self._commentaire = valeur

    @property
    def rabais(self) -> Mapping[str, ObservateurRabais]:
        """Discounts currently attached, by name."""
        return MappingProxyType(self._rabais)

    @abstractmethod
    def details(self) -> str:
        """One-line description of the offer."""

    def calculer_prix_total(self, autre_devise: str = "CAD", taxe: float = 1.0) -> float:
        cible = Devise(autre_devise.upper())
        return self._devise.convertir(self._prix * taxe, cible)

    def ajouter_rabais(self, rabais: ObservateurRabais) -> None:
        """Attach a discount and lower the price by its amount."""
        self._rabais.setdefault(rabais.nom, rabais)
        self._prix -= rabais.montant

    def retirer_rabais(self, nom: str) -> None:
        """Detach a discount by name and give its amount back to the price."""
        rabais = self._rabais.pop(nom, None)
        if rabais is not None:
            self._prix += rabais.montant

    def reserver(self) -> ProxyOffreReservation:
        """Drop expired discounts and return a proxy for booking."""
        for nom, rabais in list(self._rabais.items()):
            if not rabais.est_actif():
                self._prix += rabais.montant
                del self._rabais[nom]
        return ProxyOffreReservation(self)


class ProxyOffreReservation(OffreAbstraite):
    """Read-only view on a booked offer."""

    def __init__(self, offre: Offre) -> None:
        self._offre = offre

    @property
    def nom(self) -> str:
        return self._offre.nom

    @property
    def type(self) -> str:
        return self._offre.type

    @property
    def commentaire(self) -> str:
        return self._offre.commentaire

    @property
    def devise(self) -> Devise:
        return self._offre.devise

    @property
    def prix(self) -> float:
        return self._offre.prix

    def calculer_prix_total(self, autre_devise: str = "CAD", taxe: float = 1.0) -> float:
        return self._offre.calculer_prix_total(autre_devise, taxe)