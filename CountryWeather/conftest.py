"""Shared fixtures: a small country directory shaped like the REST Countries response."""
import pytest
from country_data import CountryRecord


def country_json(common, official=None, capital=None, currencies=None, population=1000):
    return {
        "name": {"common": common, "official": official or common},
        "capital": capital if capital is not None else [],
        "currencies": currencies or {},
        "languages": {},
        "population": population,
        "flags": {"png": f"https://flagcdn.com/w320/{common[:2].lower()}.png"},
        "region": "Europe",
        "subregion": "",
        "area": 1.0,
        "timezones": ["UTC"],
    }


@pytest.fixture
def france_json():
    return {
        "name": {"common": "France", "official": "French Republic"},
        "flags": {
            "png": "https://flagcdn.com/w320/fr.png",
            "svg": "https://flagcdn.com/fr.svg",
            "alt": "The flag of France is composed of three equal vertical bands of blue, white and red.",
        },
        "population": 67391582,
        "currencies": {"EUR": {"name": "Euro", "symbol": "€"}},
        "capital": ["Paris"],
        "languages": {"fra": "French"},
        "region": "Europe",
        "subregion": "Western Europe",
        "area": 551695.0,
        "timezones": ["UTC-10:00", "UTC+01:00"],
    }


@pytest.fixture
def directory_json(france_json):
    return [
        france_json,
        country_json("Germany", "Federal Republic of Germany", ["Berlin"],
                     {"EUR": {"name": "Euro", "symbol": "€"}}),
        country_json("United States", "United States of America", ["Washington, D.C."],
                     {"USD": {"name": "United States dollar", "symbol": "$"}}),
        country_json("Guinea-Bissau", "Republic of Guinea-Bissau", ["Bissau"]),
        country_json("Antarctica", "Antarctica", []),
    ]


@pytest.fixture
def countries(directory_json):
    return [CountryRecord.from_api(item) for item in directory_json]
