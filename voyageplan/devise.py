"""Currencies and conversion between them."""

from __future__ import annotations


class Devise:
    """A currency identified by its code, with an exchange rate."""

    def __init__(self, code: str, taux_change: float = 1.0) -> None:
        self.code = "CAD" if code == "CDN" else code
        self._taux_change = 1.5 if code == "EURO" else float(taux_change)

    @property
    def taux_change(self) -> float:
        return self._taux_change

    def convertir(self, montant: float, autre_devise: Devise) -> float:
        """Convert an amount in this currency into ``autre_devise``."""
        return (montant * self._taux_change) / autre_devise.taux_change

    def changer_taux_change(self, nouveau_taux: float) -> None:
        """Set a new exchange rate; non-positive rates are ignored."""
        if nouveau_taux > 0.0:
            self._taux_change = float(nouveau_taux)

    def __repr__(self) -> str:
        return f"Devise({self.code!r}, {self._taux_change!r})"