"""Tests for country_data module."""
import json
import pytest
from country_data import CountryRecord, Currency


def test_country_record_from_api(france_json):
    """Test parsing a full REST Countries object."""
    record = CountryRecord.from_api(france_json)

    assert record.common_name == "France"
    assert record.official_name == "French Republic"
    assert record.key == ("France", "French Republic")
    assert record.capitals == ("Paris",)
    assert record.primary_capital == "Paris"
    assert record.population == 67391582
    assert record.currencies == (Currency(code="EUR", name="Euro", symbol="€"),)
    assert record.languages[0].name == "French"
    assert record.flags.svg == "https://flagcdn.com/fr.svg"
    assert record.region == "Europe"
    assert record.subregion == "Western Europe"
    assert record.area == 551695.0
    assert record.slug == "france"


def test_country_record_is_immutable(france_json):
    record = CountryRecord.from_api(france_json)
    with pytest.raises(Exception):
        record.population = 0


def test_primary_capital_empty():
    """Countries without a capital have no primary capital."""
    record = CountryRecord.from_api({"name": {"common": "Antarctica"}, "capital": []})
    assert record.primary_capital is None
    assert record.official_name == "Antarctica"


def test_primary_capital_is_first_entry():
    record = CountryRecord.from_api({
        "name": {"common": "South Africa", "official": "Republic of South Africa"},
        "capital": ["Pretoria", "Bloemfontein", "Cape Town"],
    })
    assert record.primary_capital == "Pretoria"


def test_currency_summary(france_json):
    record = CountryRecord.from_api(france_json)
    assert record.currency_summary() == "Euro (€)"

    no_currency = CountryRecord.from_api({"name": {"common": "Antarctica"}})
    assert no_currency.currency_summary() == "N/A"
    assert no_currency.language_summary() == "N/A"


def test_currency_summary_multiple():
    record = CountryRecord.from_api({
        "name": {"common": "Panama", "official": "Republic of Panama"},
        "currencies": {
            "PAB": {"name": "Panamanian balboa", "symbol": "B/."},
            "USD": {"name": "United States dollar", "symbol": "$"},
        },
    })
    assert record.currency_summary() == "Panamanian balboa (B/.), United States dollar ($)"


def test_to_dict_is_json_serializable(france_json):
    record = CountryRecord.from_api(france_json)
    snapshot = json.loads(json.dumps(record.to_dict()))

    assert snapshot["name"] == {"common": "France", "official": "French Republic"}
    assert snapshot["capital"] == ["Paris"]
    assert CountryRecord.from_api(snapshot) == record


def test_from_api_missing_name():
    with pytest.raises(ValueError):
        CountryRecord.from_api({"population": 10})
    with pytest.raises(ValueError):
        CountryRecord.from_api({"name": {"official": "Nameless"}})
