#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
OpenWeather "current weather by ZIP" client.

The provider reports success through the `cod` field of its JSON body
rather than the HTTP status, so the body is always parsed and `cod`
decides the outcome.
"""

import json
import asyncio
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlencode

import requests

from weather_config import WeatherConfig

OPENWEATHER_URL = "https://api.openweathermap.org/data/2.5/weather"


class WeatherServiceError(Exception):
    """Base class for failures while resolving a weather report."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ConfigurationError(WeatherServiceError):
    pass


class UpstreamRejection(WeatherServiceError):
    """The provider answered but with a non-success `cod`."""

    def __init__(self, message: str, cod=None):
        super().__init__(message)
        self.cod = cod


class TransportFault(WeatherServiceError):
    pass


class DecodeFault(WeatherServiceError):
    def __init__(self, message: str = "Failed to parse weather data"):
        super().__init__(message)


@dataclass(frozen=True)
class WeatherQueryResult:
    city: str
    country: str
    temperature: float
    humidity: int
    description: str
    condition_code: Optional[int]
    main: str

    @classmethod
    def from_payload(cls, payload: dict) -> "WeatherQueryResult":
        weather = payload['weather'][0]
        return cls(
            city=payload['name'],
            country=payload['sys']['country'],
            temperature=payload['main']['temp'],
            humidity=payload['main']['humidity'],
            description=weather['description'],
            condition_code=weather.get('id'),
            main=weather['main'],
        )


def build_weather_url(config: WeatherConfig) -> str:
    params = urlencode(
        {
            'zip': f"{config.zip_code},{config.country_code}",
            'appid': config.api_key or '',
            'units': 'metric',
        },
        safe=',',
    )
    return f"{OPENWEATHER_URL}?{params}"


def _decode(body: str) -> dict:
    try:
        data = json.loads(body)
    except ValueError:
        raise DecodeFault()
    if data is None:
        raise DecodeFault()
    if not isinstance(data, dict):
        raise UpstreamRejection("Weather API error")

    if data.get('cod') != 200:
        raise UpstreamRejection(data.get('message') or "Weather API error", cod=data.get('cod'))
    return data


async def fetch_weather_data(url: str) -> dict:
    """GET the provider URL and return the decoded payload.

    Raises TransportFault, DecodeFault or UpstreamRejection. No timeout is
    set here; the Lambda timeout bounds the call.
    """
    try:
        response = await asyncio.to_thread(requests.get, url)
    except requests.exceptions.RequestException as e:
        raise TransportFault(str(e)) from e

    return _decode(response.text)


async def get_current_weather(config: WeatherConfig, fetch=fetch_weather_data) -> WeatherQueryResult:
    if not config.is_configured:
        raise ConfigurationError("OpenWeather API key not configured")

    payload = await fetch(build_weather_url(config))
    return WeatherQueryResult.from_payload(payload)
