import pytest

from voyageplan.bdoreservation import BDOReservation
from voyageplan.devise import Devise
from voyageplan.gestionnaire import GestionnaireBDOR
from voyageplan.offres import OffreExcursion, OffreHebergement, OffreVol


@pytest.fixture
def catalogue():
    bd = BDOReservation()
    vol = OffreVol(Devise("CAD"), "V1", "Vol Montreal-Paris", 800.0, "2024-12-01", "YUL", "CDG")
    hotel = OffreHebergement(Devise("CAD"), "H1", "Hotel Lumiere", 150.0, "Paris", 4.0)
    excursion = OffreExcursion(Devise("CAD"), "E1", "Tour Eiffel", 40.0, "Paris", 5)
    for offre in (vol, hotel, excursion):
        bd.ajouter_offre(offre)
    return bd, vol, hotel, excursion


def test_nb_offres(catalogue):
    bd, *_ = catalogue
    assert GestionnaireBDOR(bd).nb_offres == bd.nb_offres == 3


def test_attribuer_commentaire_par_sous_chaine(catalogue):
    bd, _, hotel, _ = catalogue
    GestionnaireBDOR(bd).attribuer_commentaire("Lumiere", "Vue sur la Seine")
    assert hotel.commentaire == "Vue sur la Seine"


def test_retirer_commentaire(catalogue):
    bd, vol, _, _ = catalogue
    gestionnaire = GestionnaireBDOR(bd)
    gestionnaire.attribuer_commentaire("Vol", "Hublot")
    gestionnaire.retirer_commentaire("Vol")
    assert vol.commentaire == ""


def test_commentaire_offre_inconnue_sans_effet(catalogue):
    bd, vol, hotel, excursion = catalogue
    GestionnaireBDOR(bd).attribuer_commentaire("Inexistant", "rien")
    assert [o.commentaire for o in (vol, hotel, excursion)] == ["", "", ""]


def test_appliquer_rabais_baisse_le_prix(catalogue):
    bd, _, hotel, _ = catalogue
    GestionnaireBDOR(bd).appliquer_rabais("Hotel", "Hiver", 30.0, 10)
    assert hotel.prix == pytest.approx(hotel.prix_original - 30.0)
    assert hotel.rabais["Hiver"].est_actif()


def test_retirer_rabais_restaure_le_prix(catalogue):
    bd, _, hotel, _ = catalogue
    gestionnaire = GestionnaireBDOR(bd)
    gestionnaire.appliquer_rabais("Hotel", "Hiver", 30.0, 10)
    gestionnaire.retirer_rabais("Hotel", "Hiver")
    assert hotel.prix == pytest.approx(hotel.prix_original)
    assert "Hiver" not in hotel.rabais


def test_rabais_expire_retire_a_la_reservation(catalogue):
    bd, _, _, excursion = catalogue
    GestionnaireBDOR(bd).appliquer_rabais("Tour", "Flash", 10.0, -1)
    assert not excursion.rabais["Flash"].est_actif()
    proxy = excursion.reserver()
    assert proxy.prix == pytest.approx(excursion.prix_original)
    assert "Flash" not in excursion.rabais


def test_ajuster_prix_de_types(catalogue):
    bd, vol, hotel, excursion = catalogue
    GestionnaireBDOR(bd).ajuster_prix_de_types(2.0, {"Transport", "Inconnue"})
    assert vol.prix == pytest.approx(vol.prix_original * 2.0)
    assert hotel.prix == hotel.prix_original
    assert excursion.prix == excursion.prix_original


def test_ajuster_prix_sauf_types(catalogue):
    bd, vol, hotel, excursion = catalogue
    GestionnaireBDOR(bd).ajuster_prix_sauf_types(0.5, {"Hebergement"})
    assert vol.prix == pytest.approx(vol.prix_original * 0.5)
    assert excursion.prix == pytest.approx(excursion.prix_original * 0.5)
    assert hotel.prix == hotel.prix_original


def test_ajuster_prix_sauf_aucun_type(catalogue):
    bd, vol, hotel, excursion = catalogue
    GestionnaireBDOR(bd).ajuster_prix_sauf_types(3.0)
    for offre in (vol, hotel, excursion):
        assert offre.prix == pytest.approx(offre.prix_original * 3.0)