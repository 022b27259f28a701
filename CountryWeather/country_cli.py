"""Command line front end: country list and country detail pages with weather."""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional, Tuple

from app_config import ConfigError, is_allowed_image_url, load_config
from country_data import CountryRecord
from country_directory import DirectoryCache
from country_lookup import resolve
from country_view import CountryDetailView
from directory_provider import DirectoryLoadError
from favourites_store import FavouritesStore
from openweather_provider import OpenWeatherProvider
from restcountries_provider import RestCountriesProvider
from selection_state import SelectionStatus
from weather_fetch import WeatherFetch, WeatherStatus
from weather_provider import WeatherProviderBase

EXIT_OK = 0
EXIT_NOT_FOUND = 1
EXIT_DIRECTORY_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser("country-weather")
    parser.add_argument("--log-file", default=None)
    parser.add_argument("--verbose", action="store_true")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List every country with its slug")

    show = sub.add_parser("show", help="Show one country and the weather in its capital")
    show.add_argument("slug", help='e.g. "france" or "united-states"')

    fav = sub.add_parser("favourites", help="Manage a user's favourite countries")
    fav.add_argument("action", choices=["list", "add", "remove"])
    fav.add_argument("slug", nargs="?")
    fav.add_argument("--user", required=True)
    return parser.parse_args(argv)


def setup_logging(log_file: Optional[str], verbose: bool) -> None:
    log_level = logging.DEBUG if verbose else logging.INFO
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def format_country_lines(record: CountryRecord) -> List[str]:
    lines = [
        record.common_name,
        f"Official name: {record.official_name}",
        f"Capital: {record.primary_capital or 'N/A'}",
        f"Population: {record.population:,}",
        f"Currencies: {record.currency_summary()}",
        f"Languages: {record.language_summary()}",
    ]
    if record.region:
        region = f"{record.region} ({record.subregion})" if record.subregion else record.region
        lines.append(f"Region: {region}")
    flag = record.flags.svg or record.flags.png
    if flag:
        lines.append(f"Flag: {flag}")
    return lines


def format_weather_lines(weather: WeatherFetch) -> List[str]:
    if weather.status is WeatherStatus.IDLE:
        return []
    if weather.status is WeatherStatus.PENDING:
        return ["Loading weather..."]
    if weather.status is WeatherStatus.FAILED:
        return [weather.error or "Weather data not available"]

    snapshot = weather.snapshot
    lines = [
        f"Weather in {snapshot.location}: {snapshot.condition}"
        + (f" ({snapshot.description})" if snapshot.description else ""),
        f"Temp {snapshot.temp:.1f}°C  Feels {snapshot.feels_like:.1f}°C",
        f"Hum {int(snapshot.humidity)}%  Wind {snapshot.wind_speed:.1f}m/s",
    ]
    if is_allowed_image_url(snapshot.icon_url):
        lines.append(f"Icon: {snapshot.icon_url}")
    return lines


def render_detail(view: CountryDetailView) -> Tuple[int, List[str]]:
    status = view.selection.status
    if status is SelectionStatus.LOADING:
        return EXIT_OK, ["Loading..."]
    if status is SelectionStatus.NOT_FOUND or view.selection.record is None:
        return EXIT_NOT_FOUND, [
            f"Country not found: {view.selection.slug}",
            "Run 'country-weather list' to see available countries.",
        ]
    lines = format_country_lines(view.selection.record)
    weather_lines = format_weather_lines(view.weather)
    if weather_lines:
        lines.append("")
        lines.extend(weather_lines)
    return EXIT_OK, lines


async def list_countries(directory: DirectoryCache) -> Tuple[int, List[str]]:
    try:
        records = await directory.ensure_loaded()
    except DirectoryLoadError as err:
        return EXIT_DIRECTORY_ERROR, [f"Could not load countries: {err}"]
    lines = [
        f"{record.slug:<40} {record.common_name} - pop {record.population:,} - {record.currency_summary()}"
        for record in sorted(records, key=lambda r: r.common_name)
    ]
    return EXIT_OK, lines


async def show_country(
    directory: DirectoryCache, weather_provider: WeatherProviderBase, slug: str
) -> Tuple[int, List[str]]:
    view = CountryDetailView(directory, weather_provider)
    try:
        try:
            await view.enter(slug)
        except DirectoryLoadError as err:
            return EXIT_DIRECTORY_ERROR, [f"Could not load countries: {err}", "Reload to try again."]
        await view.settle()
        return render_detail(view)
    finally:
        view.leave()


async def manage_favourites(
    directory: DirectoryCache, store: FavouritesStore, user: str, action: str, slug: Optional[str]
) -> Tuple[int, List[str]]:
    if action == "list":
        favourites = store.list(user)
        if not favourites:
            return EXIT_OK, ["No favourites yet."]
        return EXIT_OK, [f"{fav.country_name} (saved {fav.updated_at})" for fav in favourites]

    if not slug:
        return EXIT_NOT_FOUND, [f"'favourites {action}' needs a country slug"]
    try:
        records = await directory.ensure_loaded()
    except DirectoryLoadError as err:
        return EXIT_DIRECTORY_ERROR, [f"Could not load countries: {err}"]
    record = resolve(slug, records)
    if record is None:
        return EXIT_NOT_FOUND, [f"Country not found: {slug}"]

    if action == "add":
        store.add(user, record)
        return EXIT_OK, [f"Added {record.common_name} to favourites"]
    if store.remove(user, record.common_name):
        return EXIT_OK, [f"Removed {record.common_name} from favourites"]
    return EXIT_NOT_FOUND, [f"{record.common_name} is not in your favourites"]


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)
    try:
        config = load_config(require_weather_key=args.command == "show")
    except ConfigError as err:
        raise SystemExit(str(err))

    directory = DirectoryCache(
        RestCountriesProvider(base_url=config.countries_api_url, timeout=config.http_timeout)
    )

    if args.command == "list":
        code, lines = asyncio.run(list_countries(directory))
    elif args.command == "show":
        provider = OpenWeatherProvider(
            api_key=config.weather_api_key,
            units="metric",
            lang=config.weather_lang,
            timeout=config.http_timeout,
        )
        code, lines = asyncio.run(show_country(directory, provider, args.slug))
    else:
        store = FavouritesStore(config.favourites_file)
        try:
            code, lines = asyncio.run(manage_favourites(directory, store, args.user, args.action, args.slug))
        except PermissionError as err:
            code, lines = EXIT_NOT_FOUND, [str(err)]

    for line in lines:
        print(line)
    return code


if __name__ == "__main__":
    sys.exit(main())
