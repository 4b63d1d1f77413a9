"""Build offers from string parameters."""

from __future__ import annotations

from collections.abc import Mapping

from voyageplan.devise import Devise
from voyageplan.offres import OffreExcursion, OffreHebergement, OffreVol


def creer_offre_vol(id: str, params: Mapping[str, str]) -> OffreVol:
    """Create a flight offer; raises KeyError for a missing parameter."""
    return OffreVol(
        Devise(params["devise"]),
        id,
        params["nom"],
        float(params["prix"]),
        params["date"],
        params["origine"],
        params["destination"],
    )


def creer_offre_hebergement(id: str, params: Mapping[str, str]) -> OffreHebergement:
    """Create a lodging offer; raises KeyError for a missing parameter."""
    return OffreHebergement(
        Devise(params["devise"]),
        id,
        params["nom"],
        float(params["prix"]),
        params["ville"],
        float(params["cote"]),
    )


def creer_offre_excursion(id: str, params: Mapping[str, str]) -> OffreExcursion:
    """Create an excursion offer; raises KeyError for a missing parameter."""
    return OffreExcursion(
        Devise(params["devise"]),
        id,
        params["nom"],
        float(params["prix"]),
        params["ville"],
        int(params["nbEtoiles"]),
    )