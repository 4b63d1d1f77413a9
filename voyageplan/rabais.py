"""Time-limited discounts attached to offers."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ObservateurRabais:
    """A named discount amount that stays active until ``date_fin``."""

    nom: str
    montant: float
    date_fin: datetime

    def est_actif(self) -> bool:
        """Return True while the end date lies in the future."""
        return self.date_fin > datetime.now(self.date_fin.tzinfo)