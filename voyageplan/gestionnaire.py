"""Administrative operations on the catalogue of offers."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime, timedelta

from voyageplan.bdoreservation import BDOReservation
from voyageplan.rabais import ObservateurRabais


class GestionnaireBDOR:
    """Manages comments, discounts and prices of the offers in a catalogue."""

    def __init__(self, bdor: BDOReservation) -> None:
        self._bdor = bdor

    @property
    def nb_offres(self) -> int:
        """Number of offers added to the managed catalogue."""
        return self._bdor.nb_offres

    def attribuer_commentaire(self, nom_offre: str, commentaire: str) -> None:
        """Set the comment of the first offer whose name contains ``nom_offre``."""
        offre = self._bdor.trouver_offre_par_nom(nom_offre)
        if offre is not None:
            offre.commentaire = commentaire

    def retirer_commentaire(self, nom_offre: str) -> None:
        """Clear the comment of the first offer whose name contains ``nom_offre``."""
        offre = self._bdor.trouver_offre_par_nom(nom_offre)
        if offre is not None:
            offre.commentaire = ""

    def appliquer_rabais(
        self, nom_offre: str, nom_rabais: str, rabais: float, nb_jours: int
    ) -> None:
        """Attach a discount lasting ``nb_jours`` days from now to an offer."""
        offre = self._bdor.trouver_offre_par_nom(nom_offre)
        if offre is not None:
            date_fin = datetime.now() + timedelta(days=nb_jours)
            offre.ajouter_rabais(ObservateurRabais(nom_rabais, rabais, date_fin))

    def retirer_rabais(self, nom_offre: str, nom_rabais: str) -> None:
        """Detach a named discount from an offer."""
        offre = self._bdor.trouver_offre_par_nom(nom_offre)
        if offre is not None:
            offre.retirer_rabais(nom_rabais)

    def ajuster_prix_de_types(self, facteur: float, types: Iterable[str]) -> None:
        """Multiply the price of every offer in the given categories."""
        for categorie in set(types):
            for offre in self._bdor.offres_de_categorie(categorie):
                offre.prix = offre.prix * facteur

    def ajuster_prix_sauf_types(self, facteur: float, types: Iterable[str] = ()) -> None:
        """Multiply the price of every offer outside the given categories."""
        exclus = set(types)
        for categorie in self._bdor.categories:
            if categorie in exclus:
                continue
            for offre in self._bdor.offres_de_categorie(categorie):
                offre.prix = offre.prix * facteur