"""Launch site, surface weather and live weather retrieval."""

from __future__ import annotations

import enum
import math
import os
import urllib.error
import urllib.request
from dataclasses import dataclass, field

_WHITESPACE = " \t\n\v\f\r"
_NUMBER_CHARS = frozenset("0123456789-+.eE")
_USER_AGENT = "RocketLab/1.0"
_HTTP_TIMEOUT_S = 30.0


class WeatherError(Exception):
    """Raised when weather data cannot be obtained or understood."""


class WeatherDataSource(enum.Enum):
    MANUAL = "manual"
    OPEN_METEO_READY = "open_meteo"
    OPEN_WEATHER_MAP_READY = "open_weather_map"


@dataclass
class LaunchSite:
    latitude_deg: float = 0.0
    longitude_deg: float = 0.0
    elevation_m: float = 0.0


@dataclass
class SurfaceWeather:
    pressure_hpa: float = 1013.25
    temperature_c: float = 15.0
    humidity_percent: float = 50.0
    wind_speed_mps: float = 0.0
    wind_direction_deg: float = 0.0
    wind_gust_mps: float = 0.0


@dataclass
class Environment:
    """The launch site together with the weather that applies to it."""

    launch_site: LaunchSite = field(default_factory=LaunchSite)
    surface_weather: SurfaceWeather = field(default_factory=SurfaceWeather)
    weather_data_source: WeatherDataSource = WeatherDataSource.MANUAL


@dataclass(frozen=True)
class WeatherFetchInfo:
    weather: SurfaceWeather
    provider_name: str
    query_url: str


def extract_object(json_text: str, key: str) -> str | None:
    """Return the brace-delimited object that follows ``"key"``, if any."""
    pattern = f'"{key}"'
    key_pos = json_text.find(pattern)
    if key_pos < 0:
        return None
    open_pos = json_text.find("{", key_pos + len(pattern))
    if open_pos < 0:
        return None

    depth = 0
    for index, char in enumerate(json_text[open_pos:], start=open_pos):
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return json_text[open_pos:index + 1]
    return None


def extract_number(json_text: str, key: str) -> float | None:
    """Return the numeric value that follows ``"key":``, if it parses."""
    pattern = f'"{key}"'
    key_pos = json_text.find(pattern)
    if key_pos < 0:
        return None
    colon_pos = json_text.find(":", key_pos + len(pattern))
    if colon_pos < 0:
        return None

    rest = json_text[colon_pos + 1:].lstrip(_WHITESPACE)
    length = 0
    for char in rest:
        if char not in _NUMBER_CHARS:
            break
        length += 1
    if length == 0:
        return None

    try:
        return float(rest[:length])
    except ValueError:
        return None


def _wrap_direction(direction_deg: float) -> float:
    return math.fmod(direction_deg + 360.0, 360.0)


def parse_open_meteo_weather(json_text: str) -> SurfaceWeather:
    """Read surface weather from an Open-Meteo ``current`` response."""
    current = extract_object(json_text, "current")
    if current is None:
        raise WeatherError("Open-Meteo response does not contain a 'current' object.")

    temperature = extract_number(current, "temperature_2m")
    humidity = extract_number(current, "relative_humidity_2m")
    pressure = extract_number(current, "surface_pressure")
    wind_speed = extract_number(current, "wind_speed_10m")
    wind_direction = extract_number(current, "wind_direction_10m")
    wind_gust = extract_number(current, "wind_gusts_10m")
    if None in (temperature, humidity, pressure, wind_speed, wind_direction):
        raise WeatherError("Open-Meteo response is missing one or more required weather fields.")

    wind_speed_mps = max(wind_speed / 3.6, 0.0)
    return SurfaceWeather(
        pressure_hpa=pressure,
        temperature_c=temperature,
        humidity_percent=min(max(humidity, 0.0), 100.0),
        wind_speed_mps=wind_speed_mps,
        wind_direction_deg=_wrap_direction(wind_direction),
        wind_gust_mps=max(wind_gust / 3.6, 0.0) if wind_gust is not None else wind_speed_mps,
    )


def parse_open_weather_map_weather(json_text: str) -> SurfaceWeather:
    """Read surface weather from an OpenWeatherMap one-call response."""
    current = extract_object(json_text, "current")
    if current is None:
        raise WeatherError("OpenWeatherMap response does not contain a 'current' object.")

    temperature = extract_number(current, "temp")
    humidity = extract_number(current, "humidity")
    pressure = extract_number(current, "pressure")
    wind_speed = extract_number(current, "wind_speed")
    wind_direction = extract_number(current, "wind_deg")
    wind_gust = extract_number(current, "gust")
    if None in (temperature, humidity, pressure, wind_speed, wind_direction):
        raise WeatherError("OpenWeatherMap response is missing one or more required weather fields.")

    wind_speed_mps = max(wind_speed, 0.0)
    return SurfaceWeather(
        pressure_hpa=pressure,
        temperature_c=temperature,
        humidity_percent=min(max(humidity, 0.0), 100.0),
        wind_speed_mps=wind_speed_mps,
        wind_direction_deg=_wrap_direction(wind_direction),
        wind_gust_mps=max(wind_gust, 0.0) if wind_gust is not None else wind_speed_mps,
    )


def weather_query_url(site: LaunchSite, source: WeatherDataSource) -> str:
    """Build the request URL for ``source`` at ``site``."""
    if source is WeatherDataSource.OPEN_METEO_READY:
        return (
            "https://api.open-meteo.com/v1/forecast"
            f"?latitude={site.latitude_deg:.6f}&longitude={site.longitude_deg:.6f}"
            "&current=temperature_2m,relative_humidity_2m,surface_pressure,"
            "wind_speed_10m,wind_direction_10m,wind_gusts_10m"
        )
    if source is WeatherDataSource.OPEN_WEATHER_MAP_READY:
        api_key = os.environ.get("OPENWEATHERMAP_API_KEY", "")
        if not api_key:
            raise WeatherError("OpenWeatherMap requires env var OPENWEATHERMAP_API_KEY.")
        return (
            "https://api.openweathermap.org/data/3.0/onecall"
            f"?lat={site.latitude_deg:.6f}&lon={site.longitude_deg:.6f}"
            f"&units=metric&exclude=minutely,hourly,daily,alerts&appid={api_key}"
        )
    if source is WeatherDataSource.MANUAL:
        raise WeatherError("Manual weather source does not support remote fetch.")
    raise WeatherError("Unsupported weather source.")


def http_get(url: str) -> str:
    """Fetch ``url`` and return its body; raise on transport or non-2xx status."""
    request = urllib.request.Request(url, headers={"User-Agent": _USER_AGENT}, method="GET")
    try:
        with urllib.request.urlopen(request, timeout=_HTTP_TIMEOUT_S) as response:
            status = response.status
            body = response.read()
    except urllib.error.HTTPError as error:
        raise WeatherError(f"HTTP request returned status {error.code}.") from error
    except (urllib.error.URLError, OSError) as error:
        raise WeatherError(f"HTTP request failed: {error}.") from error

    if status < 200 or status >= 300:
        raise WeatherError(f"HTTP request returned status {status}.")
    return body.decode("utf-8", errors="replace")


def weather_source_label(source: WeatherDataSource) -> str:
    if source is WeatherDataSource.OPEN_METEO_READY:
        return "Open-Meteo Live"
    if source is WeatherDataSource.OPEN_WEATHER_MAP_READY:
        return "OpenWeatherMap Live"
    return "Manual"


def fetch_surface_weather(site: LaunchSite, source: WeatherDataSource) -> WeatherFetchInfo:
    """Download and parse the current surface weather for ``site``."""
    query_url = weather_query_url(site, source)
    body = http_get(query_url)

    if source is WeatherDataSource.OPEN_METEO_READY:
        weather = parse_open_meteo_weather(body)
    elif source is WeatherDataSource.OPEN_WEATHER_MAP_READY:
        weather = parse_open_weather_map_weather(body)
    elif source is WeatherDataSource.MANUAL:
        raise WeatherError("Manual weather source does not support remote fetch.")
    else:
        raise WeatherError("Unsupported weather source.")

    return WeatherFetchInfo(
        weather=weather,
        provider_name=weather_source_label(source),
        query_url=query_url,
    )


def refresh_environment_weather(environment: Environment) -> WeatherFetchInfo:
    """Fetch live weather and store it on ``environment``."""
    fetched = fetch_surface_weather(environment.launch_site, environment.weather_data_source)
    environment.surface_weather = fetched.weather
    return fetched