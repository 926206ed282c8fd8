import pytest

from weather_widget.utils.units import convert_temperature, other_unit


@pytest.mark.parametrize(
    "value, src, dst, expected",
    [
        (0, "C", "F", 32),
        (100, "C", "F", 212),
        (22, "C", "F", 71),      # 71.6 floored
        (-40, "C", "F", -40),
        (-1, "C", "F", 30),      # 30.2 floored
        (32, "F", "C", 0),
        (212, "F", "C", 100),
        (33, "F", "C", 0),       # 0.55 floored
        (31, "F", "C", -1),      # -0.55 floored toward -inf
        (22.7, "C", "C", 22),
    ],
)
def test_convert_temperature_floors(value, src, dst, expected):
    assert convert_temperature(value, src, dst) == expected


def test_convert_returns_int():
    assert isinstance(convert_temperature(21.5, "C", "F"), int)


def test_unknown_unit_rejected():
    with pytest.raises(ValueError):
        convert_temperature(10, "K", "C")


def test_celsius_round_trip_drifts_at_most_one_degree():
    for c in range(-60, 61):
        back = convert_temperature(convert_temperature(c, "C", "F"), "F", "C")
        assert 0 <= c - back <= 1


def test_fahrenheit_round_trip_is_bounded():
    for f in range(-76, 141):
        back = convert_temperature(convert_temperature(f, "F", "C"), "C", "F")
        assert 0 <= f - back <= 2
    # both legs floor: 39°F -> 3°C -> 37°F
    assert convert_temperature(convert_temperature(39, "F", "C"), "C", "F") == 37


def test_other_unit():
    assert other_unit("C") == "F"
    assert other_unit("F") == "C"
