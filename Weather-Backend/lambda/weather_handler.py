#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
API Gateway Lambda function returning the current weather for the
configured ZIP code.

Expected event format from API Gateway (fields are accepted but unused):
{
    "httpMethod": "GET",
    "path": "/weather",
    "headers": {},
    "queryStringParameters": null,
    "body": null
}

Success body:
{
    "location": "New York, US",
    "condition": "☀️ Clear Sky",
    "temperature": "17°C",
    "description": "clear sky",
    "humidity": "63%",
    "timestamp": "2024-05-01T12:00:00.000Z"
}
"""

import json
import math
import asyncio
import logging
from datetime import datetime, timezone

from weather_config import WeatherConfig
from weather_client import (
    ConfigurationError,
    WeatherQueryResult,
    fetch_weather_data,
    get_current_weather,
)
from weather_conditions import format_condition

logger = logging.getLogger()
logger.setLevel(logging.INFO)

RESPONSE_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type"
}


def build_response(status_code: int, body: dict) -> dict:
    return {
        "statusCode": status_code,
        "headers": dict(RESPONSE_HEADERS),
        "body": json.dumps(body, ensure_ascii=False)
    }


def format_temperature(celsius: float) -> str:
    # half-up rounding, 16.5 -> 17 and -2.5 -> -2
    return f"{math.floor(celsius + 0.5)}°C"


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def build_weather_body(result: WeatherQueryResult) -> dict:
    return {
        "location": f"{result.city}, {result.country}",
        "condition": format_condition(result.condition_code, result.main),
        "temperature": format_temperature(result.temperature),
        "description": result.description,
        "humidity": f"{result.humidity}%",
        "timestamp": utc_timestamp()
    }


def error_response(message: str) -> dict:
    return build_response(500, {
        "error": "Failed to fetch weather data",
        "message": message
    })


async def handle(event, config: WeatherConfig, fetch=fetch_weather_data) -> dict:
    """
    Resolve the weather for `config` and wrap it in an API Gateway response.

    Never raises: every failure becomes a 500 with a JSON error body.
    `fetch` takes the provider URL and returns the decoded payload.
    """
    logger.debug("Event: %s", event)

    try:
        logger.info(f"Fetching weather for {config.zip_code},{config.country_code}")
        result = await get_current_weather(config, fetch=fetch)
        return build_response(200, build_weather_body(result))

    except ConfigurationError as e:
        logger.error(f"Configuration error: {e}")
        return build_response(500, {"error": str(e)})

    except Exception as e:
        message = str(e)
        logger.error(f"Error fetching weather data: {message}")
        return error_response(message)


def lambda_handler(event, context):
    """
    Lambda entry point. Configuration is read from the environment once per
    invocation and handed to `handle`.
    """
    try:
        config = WeatherConfig.from_env()
    except Exception as e:
        logger.error(f"Error reading configuration: {e}")
        return error_response(str(e))

    return asyncio.run(handle(event, config))
