import pytest

from natal_points.services.houses import locate_house

EQUAL = [i * 30.0 for i in range(12)]
# ASC kurz vor 0°: Haus 1 beginnt bei 350°, Haus 12 (320°) liegt roh unter Haus 1
WRAPPING = [(350.0 + i * 30.0) % 360.0 for i in range(12)]
# ungleiche Placidus-artige Kuspiden, Haus 10 über 0° Widder
PLACIDUS_LIKE = [
    95.2, 118.4, 144.9, 177.3, 213.0, 247.8,
    275.2, 298.4, 324.9, 357.3, 33.0, 67.8,
]


def test_equal_cusps():
    assert locate_house(15.0, EQUAL) == 1
    assert locate_house(359.0, EQUAL) == 12
    assert locate_house(30.0, EQUAL) == 2  # halboffen: Kuspe gehört zum folgenden Haus
    assert locate_house(-15.0, EQUAL) == 12


def test_wrapping_cusps():
    assert WRAPPING[:3] == [350.0, 20.0, 50.0]
    assert locate_house(355.0, WRAPPING) == 1
    assert locate_house(5.0, WRAPPING) == 1
    assert locate_house(349.9, WRAPPING) == 12
    assert locate_house(20.0, WRAPPING) == 2


def test_placidus_like_cusps():
    assert locate_house(100.0, PLACIDUS_LIKE) == 1
    assert locate_house(359.0, PLACIDUS_LIKE) == 10
    assert locate_house(10.0, PLACIDUS_LIKE) == 10
    assert locate_house(80.0, PLACIDUS_LIKE) == 12


@pytest.mark.parametrize("cusps", [EQUAL, WRAPPING, PLACIDUS_LIKE])
def test_every_longitude_has_exactly_one_house(cusps):
    for tenth in range(3600):
        lon = tenth / 10.0
        house = locate_house(lon, cusps)
        assert house is not None
        i = house - 1
        start, end = cusps[i], cusps[(i + 1) % 12]
        span = (end - start) % 360.0
        assert (lon - start) % 360.0 < span


def test_nan_is_undetermined():
    assert locate_house(float("nan"), EQUAL) is None
    assert locate_house(42.0, [float("nan")] * 12) is None


def test_wrong_number_of_cusps():
    with pytest.raises(ValueError):
        locate_house(10.0, EQUAL[:11])
