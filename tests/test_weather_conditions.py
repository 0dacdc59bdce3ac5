import pytest

from weather_conditions import classify_condition, condition_icon, format_condition


@pytest.mark.parametrize("code,label", [
    (200, "Thunderstorm"),
    (232, "Thunderstorm"),
    (299, "Thunderstorm"),
    (300, "Drizzle"),
    (321, "Drizzle"),
    (399, "Drizzle"),
    (500, "Raining"),
    (531, "Raining"),
    (600, "Snowing"),
    (699, "Snowing"),
    (700, "Foggy/Misty"),
    (781, "Foggy/Misty"),
    (799, "Foggy/Misty"),
    (800, "Clear Sky"),
    (801, "Cloudy"),
    (804, "Cloudy"),
    (950, "Cloudy"),
])
def test_named_ranges(code, label):
    assert classify_condition(code, "Whatever") == label


@pytest.mark.parametrize("code", [400, 450, 499, 199, 0, -1])
def test_unmapped_codes_fall_back_to_provider_category(code):
    assert classify_condition(code, "Squall") == "squall"
    assert classify_condition(code, "CLOUDS") == "clouds"


def test_icons_follow_the_same_table():
    assert condition_icon(800) == "☀️"
    assert condition_icon(803) == "☁️"
    assert condition_icon(211) == "⛈️"
    assert condition_icon(450) == "🌤️"


def test_format_condition_contains_label():
    assert format_condition(800, "Clear") == "☀️ Clear Sky"
    assert format_condition(502, "Rain") == "🌧️ Raining"
    assert format_condition(-5, "Haze") == "🌤️ haze"


@pytest.mark.parametrize("code", [None, "800", True])
def test_non_numeric_codes_fall_back_to_provider_category(code):
    assert classify_condition(code, "Clear") == "clear"
    assert condition_icon(code) == "🌤️"
