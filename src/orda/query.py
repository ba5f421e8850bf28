"""Query-string encoding for the build list endpoints.

``Query.from_parts()`` turns the high-level filter values into the three
optional URL parameters the API understands. A parameter whose value is
its default (Civilization.ANY, no sort criterion, overlay off) is left
out of the query string entirely.

Usage::

    from orda.query import Civilization, Query, SortBy

    Query.from_parts(Civilization.FRE, SortBy.SCORE).to_params()
    # => {"civ": "FRE", "orderBy": "score"}
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Civilization(str, Enum):
    """Civilizations recognised by the API, keyed by their 3-letter code.

    ``ANY`` means "no civilization filter" and is never sent.
    """

    ANY = "ANY"
    ABB = "ABB"
    AYY = "AYY"
    BYZ = "BYZ"
    CHI = "CHI"
    DEL = "DEL"
    ENG = "ENG"
    FRE = "FRE"
    GOL = "GOL"
    HOL = "HOL"
    HRE = "HRE"
    JAP = "JAP"
    JDA = "JDA"
    KTE = "KTE"
    MAC = "MAC"
    MAL = "MAL"
    MON = "MON"
    DRA = "DRA"
    OTT = "OTT"
    RUS = "RUS"
    SEN = "SEN"
    TUG = "TUG"
    ZXL = "ZXL"

    @property
    def code(self) -> str | None:
        """Wire value for the ``civ`` parameter, or None for ANY."""
        if self is Civilization.ANY:
            return None
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def from_code(cls, code: str | None) -> "Civilization | None":
        """Resolve a civ code from a build order; None if absent or unknown."""
        if not code:
            return None
        try:
            return cls(code.upper())
        except ValueError:
            return None


_DISPLAY_NAMES: dict[Civilization, str] = {
    Civilization.ANY: "Any civilization",
    Civilization.ABB: "Abbasid Dynasty",
    Civilization.AYY: "Ayyubids",
    Civilization.BYZ: "Byzantines",
    Civilization.CHI: "Chinese",
    Civilization.DEL: "Delhi Sultanate",
    Civilization.ENG: "English",
    Civilization.FRE: "French",
    Civilization.GOL: "Golden Horde",
    Civilization.HOL: "House of Lancaster",
    Civilization.HRE: "Holy Roman Empire",
    Civilization.JAP: "Japanese",
    Civilization.JDA: "Jeanne d'Arc",
    Civilization.KTE: "Knights Templar",
    Civilization.MAC: "Macedonian Dynasty",
    Civilization.MAL: "Malians",
    Civilization.MON: "Mongols",
    Civilization.DRA: "Order of the Dragon",
    Civilization.OTT: "Ottomans",
    Civilization.RUS: "Rus",
    Civilization.SEN: "Sengoku Daimyo",
    Civilization.TUG: "Tughlaq Dynasty",
    Civilization.ZXL: "Zhu Xi's Legacy",
}


class SortBy(str, Enum):
    """Sort criteria for build order listings.

    Passing no criterion at all lets the server pick its default order.
    """

    SCORE = "score"
    TIME_CREATED = "timeCreated"  # newest first
    VIEWS = "views"
    LIKES = "likes"


class Query(BaseModel):
    """Encoded filter values for one request. Built fresh per call."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    civ: str | None = None
    order_by: str | None = Field(default=None, alias="orderBy")
    overlay: bool = False

    @classmethod
    def from_parts(
        cls,
        civ: Civilization = Civilization.ANY,
        order_by: SortBy | None = None,
        overlay: bool = False,
    ) -> "Query":
        return cls(
            civ=Civilization(civ).code,
            order_by=SortBy(order_by).value if order_by is not None else None,
            overlay=overlay,
        )

    def to_params(self) -> dict[str, str]:
        """Return the query parameters in declaration order.

        ``overlay`` is only ever emitted as ``"true"``; false is the
        server's implicit default.
        """
        params: dict[str, str] = {}
        if self.civ is not None:
            params["civ"] = self.civ
        if self.order_by is not None:
            params["orderBy"] = self.order_by
        if self.overlay:
            params["overlay"] = "true"
        return params
