"""Integration tests - can optionally hit the real APIs (disabled by default)."""
import asyncio
import os
import pytest
from country_directory import DirectoryCache
from country_view import CountryDetailView
from openweather_provider import OpenWeatherProvider
from restcountries_provider import RestCountriesProvider
from selection_state import SelectionStatus
from weather_fetch import WeatherStatus


@pytest.mark.skipif(
    not os.environ.get("RUN_NETWORK_TESTS"),
    reason="RUN_NETWORK_TESTS not set - skipping REST Countries integration test"
)
def test_restcountries_integration():
    """Integration test that loads the real country directory."""
    records = RestCountriesProvider().load_all()

    assert len(records) > 200
    assert any(record.common_name == "France" for record in records)


@pytest.mark.skipif(
    not os.environ.get("OPENWEATHER_API_KEY"),
    reason="OPENWEATHER_API_KEY not set - skipping integration test"
)
def test_openweather_integration():
    """
    Integration test that hits the real OpenWeather API.

    Set OPENWEATHER_API_KEY environment variable to run this test.
    """
    provider = OpenWeatherProvider(api_key=os.environ["OPENWEATHER_API_KEY"], units="metric")

    weather = provider.get_current("Paris")

    assert weather.temp is not None
    assert weather.condition
    assert weather.icon_url.startswith("https://openweathermap.org/img/wn/")


@pytest.mark.skipif(
    not (os.environ.get("OPENWEATHER_API_KEY") and os.environ.get("RUN_NETWORK_TESTS")),
    reason="OPENWEATHER_API_KEY and RUN_NETWORK_TESTS needed - skipping end-to-end test"
)
def test_country_view_integration():
    """Slug to country to capital weather against both live APIs."""
    directory = DirectoryCache(RestCountriesProvider())
    view = CountryDetailView(directory, OpenWeatherProvider(api_key=os.environ["OPENWEATHER_API_KEY"]))

    async def scenario():
        status = await view.enter("united-kingdom")
        await view.settle()
        return status

    assert asyncio.run(scenario()) is SelectionStatus.FOUND
    assert view.weather.status is WeatherStatus.READY
    assert view.weather.snapshot.location == "London"
