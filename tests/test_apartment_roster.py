"""Tests for the apartment roster."""

import pytest

from scheduling.apartment_roster import Apartment, ApartmentRoster


class TestApartment:
    """Tests for Apartment."""

    def test_defaults_to_selected(self) -> None:
        assert Apartment(301).is_selected

    def test_toggle(self) -> None:
        apartment = Apartment(301)
        apartment.toggle_selection()
        assert not apartment.is_selected

    def test_display_name(self) -> None:
        assert Apartment(301).get_display_name() == "Apartamento 301"


class TestApartmentRoster:
    """Tests for ordering and selection."""

    def test_all_selected_by_default(self, apartments) -> None:
        roster = ApartmentRoster(apartments)
        assert roster.selected_apartments() == apartments

    def test_initial_selection(self, apartments) -> None:
        roster = ApartmentRoster(apartments, selected=[202, 301])
        assert roster.selected_apartments() == [301, 202]

    def test_move_up(self, apartments) -> None:
        roster = ApartmentRoster(apartments)

        assert roster.move(2, "up")
        assert roster.order() == [301, 201, 302, 202]

    def test_move_down(self, apartments) -> None:
        roster = ApartmentRoster(apartments)

        assert roster.move(0, "down")
        assert roster.order() == [302, 301, 201, 202]

    def test_move_past_ends_is_ignored(self, apartments) -> None:
        roster = ApartmentRoster(apartments)

        assert not roster.move(0, "up")
        assert not roster.move(3, "down")
        assert not roster.move(10, "up")
        assert roster.order() == apartments

    def test_invalid_direction(self, apartments) -> None:
        with pytest.raises(ValueError):
            ApartmentRoster(apartments).move(1, "left")

    def test_move_to(self, apartments) -> None:
        roster = ApartmentRoster(apartments)

        assert roster.move_to(3, 0)
        assert roster.order() == [202, 301, 302, 201]
        assert not roster.move_to(1, 1)

    def test_toggle(self, apartments) -> None:
        roster = ApartmentRoster(apartments)

        assert roster.toggle(302) is False
        assert roster.selected_apartments() == [301, 201, 202]
        assert roster.toggle(302) is True

    def test_toggle_unknown(self, apartments) -> None:
        with pytest.raises(KeyError):
            ApartmentRoster(apartments).toggle(999)

    def test_selection_follows_order(self, apartments) -> None:
        roster = ApartmentRoster(apartments)
        roster.toggle(301)
        roster.move(3, "up")

        assert roster.selected_apartments() == [302, 202, 201]

    def test_positions(self, apartments) -> None:
        assert ApartmentRoster(apartments).positions() == [1, 2, 3, 4]
