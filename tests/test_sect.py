import pytest

from natal_points.services.sect import compute_sect

EQUAL = [i * 30.0 for i in range(12)]


@pytest.mark.parametrize("sun,is_day", [
    (15.0, False),    # Haus 1
    (175.0, False),   # Haus 6
    (180.0, True),    # Haus 7
    (250.0, True),    # Haus 9
    (359.0, True),    # Haus 12
])
def test_day_chart_follows_sun_house(sun, is_day):
    assert compute_sect(sun, 0.0, 0.0, EQUAL).is_day_chart is is_day


def test_day_formula():
    # Sonne in Haus 7 relativ zu ASC 100
    cusps = [(100.0 + i * 30.0) % 360.0 for i in range(12)]
    res = compute_sect(sun=290.0, moon=50.0, ascendant=100.0, cusps=cusps)
    assert res.is_day_chart
    assert res.sect == "day"
    assert res.fortune_longitude == pytest.approx((100 + 50 - 290) % 360)


def test_literal_day_inputs():
    # Sonne 10° liegt bei ASC 100 genau auf Kuspide 10 -> Haus 10
    cusps = [(100.0 + i * 30.0) % 360.0 for i in range(12)]
    res = compute_sect(sun=10.0, moon=50.0, ascendant=100.0, cusps=cusps)
    assert res.is_day_chart
    assert res.fortune_longitude == pytest.approx(140.0)


def test_night_formula():
    res = compute_sect(sun=100.0, moon=200.0, ascendant=0.0, cusps=EQUAL)
    assert not res.is_day_chart
    assert res.sect == "night"
    assert res.fortune_longitude == pytest.approx(260.0)


def test_branch_uses_sun_house_not_fortune_house():
    # Glückspunkt landet in Haus 10, die Sonne steht in Haus 2 -> Nacht
    res = compute_sect(sun=40.0, moon=10.0, ascendant=250.0, cusps=EQUAL)
    assert not res.is_day_chart
    assert res.fortune_longitude == pytest.approx(280.0)


def test_undetermined_sun_house_is_night():
    res = compute_sect(float("nan"), 10.0, 0.0, EQUAL)
    assert not res.is_day_chart
