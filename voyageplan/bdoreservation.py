"""The catalogue of offers, grouped by category."""

from __future__ import annotations

import logging

from voyageplan.offre import Offre

_log = logging.getLogger(__name__)

_CATEGORIES_PAR_DEFAUT = ("Transport", "Hebergement", "Excursion")


class BDOReservation:
    """Offers indexed by category, then by id."""

    _instance: BDOReservation | None = None

    def __init__(self) -> None:
        self._bd: dict[str, dict[str, Offre]] = {}
        self._nb_offres = 0

    @classmethod
    def obtenir_instance(cls) -> BDOReservation:
        """Return the shared catalogue, created with the default categories."""
        if cls._instance is None:
            instance = cls()
            _log.info("Objet BDOR cree!")
            for categorie in _CATEGORIES_PAR_DEFAUT:
                instance.ajouter_categorie(categorie)
            cls._instance = instance
        return cls._instance

    @property
    def nb_offres(self) -> int:
        """Number of offers added so far."""
        return self._nb_offres

    @property
    def categories(self) -> list[str]:
        return list(self._bd)

    def afficher_offres(self, categorie: str = "") -> None:
        """Print ``nom : prix`` for every offer, or for one category."""
        if categorie == "":
            offres = self.tous_offres()
        else:
            offres = self.offres_de_categorie(categorie)
        for offre in offres:
            print(f"{offre.nom} : {offre.prix:g}")

    def ajouter_offre(self, offre: Offre) -> None:
        """Store an offer under its type, creating the category if needed."""
        self.ajouter_categorie(offre.type)
        self._bd[offre.type][offre.id] = offre
        self._nb_offres += 1

    def ajouter_categorie(self, categorie: str) -> None:
        if categorie not in self._bd:
            self._bd[categorie] = {}
            _log.info("Categorie %s creee!", categorie)

    def trouver_offre_par_nom(self, nom: str) -> Offre | None:
        """First offer whose name contains ``nom``, or None."""
        return next((o for o in self.tous_offres() if nom in o.nom), None)

    def trouver_offre_par_id(self, id: str) -> Offre | None:
        for offres in self._bd.values():
            if id in offres:
                return offres[id]
        return None

    def tous_offres(self) -> list[Offre]:
        return [offre for offres in self._bd.values() for offre in offres.values()]

    def offres_de_categorie(self, categorie: str) -> list[Offre]:
        """Offers of one category; empty if the category is unknown."""
        return list(self._bd.get(categorie, {}).values())