"""Concrete offers: flights, lodging and excursions."""

from __future__ import annotations

from voyageplan.devise import Devise
from voyageplan.offre import Offre


class OffreVol(Offre):
    """A flight from an origin to a destination on a given date."""

    def __init__(
        self,
        devise: Devise,
        id: str,
        nom: str,
        prix: float,
        date: str,
        origine: str = "",
        destination: str = "",
    ) -> None:
        super().__init__(devise, id, nom, prix, "Transport")
        self.date = date
        self.origine = origine
        self.destination = destination

    def details(self) -> str:
        return f"{self.nom}, {self.origine} --> {self.destination} : {self.prix:f}"


class OffreHebergement(Offre):
    """Lodging in a city, with a rating."""

    def __init__(
        self, devise: Devise, id: str, nom: str, prix: float, ville: str, cote: float
    ) -> None:
        super().__init__(devise, id, nom, prix, "Hebergement")
        self.ville = ville
        self._cote = float(cote)

    @property
    def cote(self) -> float:
        return self._cote

    @cote.setter
    def cote(self, valeur: float) -> None:
        # A new rating is stored as a whole number.
        self._cote = float(int(valeur))

    def details(self) -> str:
        return f"{self.nom}, {self.ville}, {self._cote:f} : {self.prix:f}"


class OffreExcursion(Offre):
    """An excursion in a city, rated in stars."""

    def __init__(
        self, devise: Devise, id: str, nom: str, prix: float, ville: str, nb_etoiles: int
    ) -> None:
        super().__init__(devise, id, nom, prix, "Excursion")
        self.ville = ville
        self.nb_etoiles = int(nb_etoiles)

    def details(self) -> str:
        return f"{self.nom}, {self.ville} : {self.prix:f}"