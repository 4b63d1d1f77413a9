# voyageplan

A small library that keeps an in-memory catalogue of travel offers (flights,
lodging, excursions) with comments, time-limited discounts and currency
conversion, plus a registry of reservations keyed by title.

## Modules

### `voyageplan.devise`

`Devise(code, taux_change=1.0)` is a currency with a code and an exchange
rate.

- The code `"CDN"` is stored as `"CAD"`.
- The code `"EURO"` always gets the rate `1.5`, whatever rate is passed.
- `convertir(montant, autre_devise)` returns
  `montant * self.taux_change / autre_devise.taux_change`.
- `changer_taux_change(nouveau_taux)` sets a new rate; a rate of zero or less
  is ignored.
- `taux_change` is a read-only property; `code` is an attribute.

### `voyageplan.rabais`

`ObservateurRabais(nom, montant, date_fin)` is a frozen dataclass describing a
named discount amount. `est_actif()` is true while `date_fin` (a `datetime`)
lies in the future.

### `voyageplan.offre`

- `OffreAbstraite`: the abstract read interface shared by offers and their
  proxies (`nom`, `type`, `commentaire`, `devise`, `prix`,
  `calculer_prix_total(autre_devise="CAD", taxe=1.0)`).
- `Offre(devise, id, nom, prix, type)`: the abstract base of all offers.
  Subclasses implement `details()`.
  - `prix` and `commentaire` can be set; `id`, `nom`, `type`, `devise` and
    `prix_original` are read-only. `rabais` is a read-only mapping of the
    attached discounts by name.
  - `calculer_prix_total(autre_devise="CAD", taxe=1.0)` multiplies the price
    by `taxe` and converts it into `Devise(autre_devise.upper())`.
  - `ajouter_rabais(rabais)` subtracts the discount amount from the price. The
    discount is registered under its name only if no discount of that name is
    attached yet, but the price is lowered either way.
  - `retirer_rabais(nom)` detaches the named discount and adds its amount back
    to the price; an unknown name does nothing.
  - `reserver()` detaches every discount that is no longer active, adding its
    amount back to the price, and returns a `ProxyOffreReservation`.
- `ProxyOffreReservation(offre)`: a read-only view that forwards the
  `OffreAbstraite` interface to the wrapped offer.

Creating an offer logs an `INFO` message through the standard `logging`
module.

### `voyageplan.offres`

- `OffreVol(devise, id, nom, prix, date, origine="", destination="")`,
  category `"Transport"`.
- `OffreHebergement(devise, id, nom, prix, ville, cote)`, category
  `"Hebergement"`. Setting `cote` afterwards stores it truncated to a whole
  number.
- `OffreExcursion(devise, id, nom, prix, ville, nb_etoiles)`, category
  `"Excursion"`.

Each has `details()` returning a one-line description ending with the price,
for example `"Hotel du Port, Quebec, 4.500000 : 120.000000"`.

### `voyageplan.fabriques`

`creer_offre_vol(id, params)`, `creer_offre_hebergement(id, params)` and
`creer_offre_excursion(id, params)` build offers from a mapping of strings.
The keys read are:

| function | keys |
| --- | --- |
| `creer_offre_vol` | `devise`, `nom`, `prix`, `date`, `origine`, `destination` |
| `creer_offre_hebergement` | `devise`, `nom`, `prix`, `ville`, `cote` |
| `creer_offre_excursion` | `devise`, `nom`, `prix`, `ville`, `nbEtoiles` |

A missing key raises `KeyError`; a number that cannot be parsed raises
`ValueError`. The currency is built as `Devise(params["devise"])`.

### `voyageplan.bdoreservation`

`BDOReservation` stores offers by category, then by id.

- `BDOReservation.obtenir_instance()` returns a shared catalogue, created on
  first use with the categories `Transport`, `Hebergement` and `Excursion`.
  `BDOReservation()` makes an independent, empty one.
- `ajouter_offre(offre)` stores an offer under its type (creating the category
  if needed) and counts it in `nb_offres`.
- `ajouter_categorie(categorie)`, `categories`.
- `trouver_offre_par_nom(nom)` returns the first offer whose name *contains*
  `nom`, or `None`; `trouver_offre_par_id(id)` returns the offer with that id,
  or `None`.
- `tous_offres()` and `offres_de_categorie(categorie)` return lists (empty for
  an unknown category).
- `afficher_offres(categorie="")` prints `nom : prix` for every offer, or for
  one category.

### `voyageplan.gestionnaire`

`GestionnaireBDOR(bdor)` works on a catalogue. Offers are found with
`trouver_offre_par_nom`, and an operation on a name that matches nothing does
nothing.

- `attribuer_commentaire(nom_offre, commentaire)`, `retirer_commentaire(nom_offre)`
- `appliquer_rabais(nom_offre, nom_rabais, rabais, nb_jours)` attaches a
  discount that stays active for `nb_jours` days from now.
- `retirer_rabais(nom_offre, nom_rabais)`
- `ajuster_prix_de_types(facteur, types)` multiplies the price of every offer
  in the given categories; `ajuster_prix_sauf_types(facteur, types=())` does
  so for every offer outside them.
- `nb_offres` gives the catalogue's offer count.

### `voyageplan.reservation`

`Reservation(nom, date, contact, email)` is the abstract base of a booking. It
holds `titre` (settable, empty at first), `date`, `contact`, `email`,
`titulaire`, `a_parent` and `parent` (set with `definir_parent(groupe)`, and
only returned while `a_parent` is true). Subclasses implement `enfants()`,
`couts(autre_devise="CAD", taxe=1.0)`, `details()`, `ajouter(reservation)`,
`supprimer(titre)`, `enfant(index)`, `clone(nouv_nom)` and `est_groupe()`.

### `voyageplan.planification`

`BDPlanification` stores reservations under their title.
`BDPlanification.obtenir_instance()` returns a shared registry.
`ajouter_reservation(reservation)` replaces any reservation with the same
title, `rechercher_reservation(titre)` returns it or `None`,
`supprimer_reservation(reservation)` removes the one stored under its title,
and `reservations` returns a copy of the mapping.

### `voyageplan.iterateur`

`Iterateur(elements)` iterates over a copy of the elements, with `has_next()`
and `reset()` to start over.

## Example

```python
from voyageplan.bdoreservation import BDOReservation
from voyageplan.fabriques import creer_offre_hebergement
from voyageplan.gestionnaire import GestionnaireBDOR

bd = BDOReservation.obtenir_instance()
hotel = creer_offre_hebergement(
    "H1",
    {"devise": "CAD", "nom": "Hotel du Port", "prix": "120", "ville": "Quebec", "cote": "4.5"},
)
bd.ajouter_offre(hotel)

gestionnaire = GestionnaireBDOR(bd)
gestionnaire.appliquer_rabais("Hotel du Port", "hiver", 20.0, 30)

proxy = hotel.reserver()
print(proxy.prix)                              # 100.0
print(proxy.calculer_prix_total("CAD", 1.15))  # about 115.0
```

## What the package does not do

- `Reservation` is abstract and the package ships no concrete reservation
  types: there is no single-offer booking and no group of bookings. To store
  reservations in `BDPlanification`, subclass `Reservation` yourself.
- Everything is kept in memory; nothing is saved to disk.
- There is no command-line program.

## Installation

```
pip install .
```

## Running the tests

```
pip install .[test]
pytest
```