#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Maps OpenWeather condition codes to display categories.

See https://openweathermap.org/weather-conditions for the code groups.
"""

from typing import Optional, Tuple

# (matches, label, icon), checked in order, first match wins
CONDITION_TABLE = (
    (lambda code: 200 <= code < 300, 'Thunderstorm', '⛈️'),
    (lambda code: 300 <= code < 400, 'Drizzle', '🌦️'),
    (lambda code: 500 <= code < 600, 'Raining', '🌧️'),
    (lambda code: 600 <= code < 700, 'Snowing', '❄️'),
    (lambda code: 700 <= code < 800, 'Foggy/Misty', '🌫️'),
    (lambda code: code == 800, 'Clear Sky', '☀️'),
    (lambda code: code > 800, 'Cloudy', '☁️'),
)

FALLBACK_ICON = '🌤️'


def _lookup(code) -> Optional[Tuple[str, str]]:
    # missing or non-numeric ids are unmapped
    if isinstance(code, bool) or not isinstance(code, (int, float)):
        return None
    for matches, label, icon in CONDITION_TABLE:
        if matches(code):
            return label, icon
    return None


def classify_condition(code, main: str) -> str:
    """Return the category label for a condition code.

    Codes outside every named range (4xx, negatives, ...) fall back to the
    provider's own main category, lowercased.
    """
    match = _lookup(code)
    if match is None:
        return (main or '').lower()
    return match[0]


def condition_icon(code) -> str:
    match = _lookup(code)
    return match[1] if match else FALLBACK_ICON


def format_condition(code, main: str) -> str:
    """Icon plus label, as shown in the API response."""
    return f"{condition_icon(code)} {classify_condition(code, main)}"
