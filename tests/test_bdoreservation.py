import pytest

from voyageplan.bdoreservation import BDOReservation
from voyageplan.devise import Devise
from voyageplan.offres import OffreExcursion, OffreHebergement, OffreVol


@pytest.fixture
def bd():
    base = BDOReservation()
    base.ajouter_offre(OffreVol(Devise("CAD"), "v1", "Vol Paris", 500.0, "d", "YUL", "CDG"))
    base.ajouter_offre(OffreHebergement(Devise("CAD"), "h1", "Hotel Lune", 123.5, "Paris", 4))
    base.ajouter_offre(OffreExcursion(Devise("CAD"), "e1", "Musee", 30.0, "Paris", 5))
    return base


def test_instance_is_shared_and_has_default_categories():
    premiere = BDOReservation.obtenir_instance()
    seconde = BDOReservation.obtenir_instance()
    assert premiere is seconde
    assert {"Transport", "Hebergement", "Excursion"} <= set(premiere.categories)


def test_add_creates_category_and_counts(bd):
    assert bd.nb_offres == 3
    assert set(bd.categories) == {"Transport", "Hebergement", "Excursion"}


def test_add_counts_replacement_too(bd):
    bd.ajouter_offre(OffreVol(Devise("CAD"), "v1", "Vol Rome", 600.0, "d"))
    assert bd.nb_offres == 4
    assert len(bd.offres_de_categorie("Transport")) == 1
    assert bd.trouver_offre_par_id("v1").nom == "Vol Rome"


def test_add_category_is_idempotent(bd):
    bd.ajouter_categorie("Croisiere")
    bd.ajouter_categorie("Croisiere")
    assert bd.categories.count("Croisiere") == 1
    assert bd.offres_de_categorie("Croisiere") == []


def test_find_by_name_substring(bd):
    assert bd.trouver_offre_par_nom("Lune").id == "h1"
    assert bd.trouver_offre_par_nom("inexistant") is None


def test_find_by_id(bd):
    assert bd.trouver_offre_par_id("e1").nom == "Musee"
    assert bd.trouver_offre_par_id("zzz") is None


def test_all_offers(bd):
    assert sorted(o.id for o in bd.tous_offres()) == ["e1", "h1", "v1"]


def test_unknown_category_is_empty(bd):
    assert bd.offres_de_categorie("Inconnue") == []


def test_print_one_category(bd, capsys):
    bd.afficher_offres("Hebergement")
    assert capsys.readouterr().out == "Hotel Lune : 123.5\n"


def test_print_all(bd, capsys):
    bd.afficher_offres()
    lignes = capsys.readouterr().out.splitlines()
    assert len(lignes) == 3
    assert "Vol Paris : 500" in lignes


def test_print_unknown_category_prints_nothing(bd, capsys):
    bd.afficher_offres("Inconnue")
    assert capsys.readouterr().out == ""