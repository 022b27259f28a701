"""Country domain model - records parsed from the countries directory."""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from country_lookup import slugify


@dataclass(frozen=True)
class Currency:
    code: str
    name: str
    symbol: str = ""


@dataclass(frozen=True)
class Language:
    code: str
    name: str


@dataclass(frozen=True)
class Flags:
    png: Optional[str] = None
    svg: Optional[str] = None
    alt: Optional[str] = None


@dataclass(frozen=True)
class CountryRecord:
    """
    One country from the directory. Immutable once loaded.

    Identity is the (common name, official name) pair; nothing else in the
    dataset is guaranteed unique.
    """
    common_name: str
    official_name: str
    currencies: Tuple[Currency, ...] = ()
    languages: Tuple[Language, ...] = ()
    capitals: Tuple[str, ...] = ()
    population: int = 0
    flags: Flags = field(default_factory=Flags)
    region: str = ""
    subregion: str = ""
    area: Optional[float] = None
    timezones: Tuple[str, ...] = ()

    @property
    def key(self) -> Tuple[str, str]:
        return (self.common_name, self.official_name)

    @property
    def primary_capital(self) -> Optional[str]:
        """First capital listed, or None when the country has none."""
        if self.capitals and self.capitals[0].strip():
            return self.capitals[0].strip()
        return None

    @property
    def slug(self) -> str:
        return slugify(self.common_name)

    def currency_summary(self) -> str:
        if not self.currencies:
            return "N/A"
        return ", ".join(f"{c.name} ({c.symbol})" for c in self.currencies)

    def language_summary(self) -> str:
        if not self.languages:
            return "N/A"
        return ", ".join(language.name for language in self.languages)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serializable snapshot in the directory API's shape."""
        return {
            "name": {"common": self.common_name, "official": self.official_name},
            "currencies": {c.code: {"name": c.name, "symbol": c.symbol} for c in self.currencies},
            "languages": {lang.code: lang.name for lang in self.languages},
            "capital": list(self.capitals),
            "population": self.population,
            "flags": {k: v for k, v in (("png", self.flags.png), ("svg", self.flags.svg), ("alt", self.flags.alt)) if v},
            "region": self.region,
            "subregion": self.subregion,
            "area": self.area,
            "timezones": list(self.timezones),
        }

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> "CountryRecord":
        """
        Build a record from one REST Countries object.

        Raises:
            ValueError: If the name block is missing or has no common name
        """
        name = data.get("name")
        if not isinstance(name, Mapping) or not name.get("common"):
            raise ValueError("Country object missing 'name.common'")
        common = str(name["common"])
        official = str(name.get("official") or common)

        currencies = tuple(
            Currency(code=code, name=(info or {}).get("name", code), symbol=(info or {}).get("symbol", ""))
            for code, info in (data.get("currencies") or {}).items()
        )
        languages = tuple(
            Language(code=code, name=str(lang_name))
            for code, lang_name in (data.get("languages") or {}).items()
        )
        flags_data = data.get("flags") or {}
        flags = Flags(png=flags_data.get("png"), svg=flags_data.get("svg"), alt=flags_data.get("alt"))

        area = data.get("area")
        return cls(
            common_name=common,
            official_name=official,
            currencies=currencies,
            languages=languages,
            capitals=tuple(str(c) for c in (data.get("capital") or [])),
            population=int(data.get("population") or 0),
            flags=flags,
            region=data.get("region") or "",
            subregion=data.get("subregion") or "",
            area=float(area) if area is not None else None,
            timezones=tuple(data.get("timezones") or []),
        )
