"""Unit tests for query-string encoding (Civilization, SortBy, Query)."""

import pytest
from pydantic import ValidationError

from orda.query import Civilization, Query, SortBy

EXPECTED_CODES = {
    Civilization.ABB: "ABB",
    Civilization.AYY: "AYY",
    Civilization.BYZ: "BYZ",
    Civilization.CHI: "CHI",
    Civilization.DEL: "DEL",
    Civilization.ENG: "ENG",
    Civilization.FRE: "FRE",
    Civilization.GOL: "GOL",
    Civilization.HOL: "HOL",
    Civilization.HRE: "HRE",
    Civilization.JAP: "JAP",
    Civilization.JDA: "JDA",
    Civilization.KTE: "KTE",
    Civilization.MAC: "MAC",
    Civilization.MAL: "MAL",
    Civilization.MON: "MON",
    Civilization.DRA: "DRA",
    Civilization.OTT: "OTT",
    Civilization.RUS: "RUS",
    Civilization.SEN: "SEN",
    Civilization.TUG: "TUG",
    Civilization.ZXL: "ZXL",
}


class TestCivilization:
    """Tests for the civilization code table."""

    def test_table_covers_every_member_except_any(self):
        assert set(EXPECTED_CODES) == set(Civilization) - {Civilization.ANY}

    @pytest.mark.parametrize("civ,code", list(EXPECTED_CODES.items()))
    def test_code_is_documented_string(self, civ, code):
        assert civ.code == code
        assert Query.from_parts(civ).to_params() == {"civ": code}

    def test_any_has_no_code(self):
        assert Civilization.ANY.code is None

    def test_every_member_has_display_name(self):
        for civ in Civilization:
            assert civ.display_name
        assert Civilization.ABB.display_name == "Abbasid Dynasty"
        assert Civilization.DRA.display_name == "Order of the Dragon"

    def test_from_code(self):
        assert Civilization.from_code("MON") is Civilization.MON
        assert Civilization.from_code("mon") is Civilization.MON
        assert Civilization.from_code(None) is None
        assert Civilization.from_code("") is None
        assert Civilization.from_code("XYZ") is None


class TestSortBy:
    """Tests for sort token fidelity."""

    @pytest.mark.parametrize(
        "sort,token",
        [
            (SortBy.SCORE, "score"),
            (SortBy.TIME_CREATED, "timeCreated"),
            (SortBy.VIEWS, "views"),
            (SortBy.LIKES, "likes"),
        ],
    )
    def test_token(self, sort, token):
        assert sort.value == token
        assert Query.from_parts(order_by=sort).to_params() == {"orderBy": token}

    def test_exactly_four_criteria(self):
        assert len(SortBy) == 4


class TestQuery:
    """Tests for parameter omission rules."""

    def test_all_defaults_encode_to_nothing(self):
        assert Query.from_parts(Civilization.ANY, None, False).to_params() == {}

    def test_any_with_sort_and_overlay(self):
        params = Query.from_parts(Civilization.ANY, SortBy.SCORE, True).to_params()
        assert params == {"orderBy": "score", "overlay": "true"}
        assert "civ" not in params

    def test_overlay_false_never_emitted(self):
        params = Query.from_parts(Civilization.FRE, SortBy.VIEWS, False).to_params()
        assert "overlay" not in params
        assert "false" not in params.values()

    def test_declaration_order_is_stable(self):
        params = Query.from_parts(Civilization.HRE, SortBy.LIKES, True).to_params()
        assert list(params) == ["civ", "orderBy", "overlay"]
        assert params == {"civ": "HRE", "orderBy": "likes", "overlay": "true"}

    def test_query_fields(self):
        query = Query.from_parts(Civilization.MON, SortBy.TIME_CREATED)
        assert query.civ == "MON"
        assert query.order_by == "timeCreated"
        assert query.overlay is False

    def test_query_is_frozen(self):
        query = Query.from_parts(Civilization.MON)
        with pytest.raises(ValidationError):
            query.civ = "FRE"
