import math

import pytest

from events.distance import EARTH_RADIUS_KM, distance_between, haversine_km
from events.schemas import Location

DUBLIN = (53.3498, -6.2603)
LONDON = (51.5074, -0.1278)
SYDNEY = (-33.8688, 151.2093)


def test_same_point_is_zero():
    assert haversine_km(*DUBLIN, *DUBLIN) == 0.0


@pytest.mark.parametrize("a, b", [(DUBLIN, LONDON), (LONDON, SYDNEY), (DUBLIN, SYDNEY)])
def test_distance_is_symmetric(a, b):
    assert haversine_km(*a, *b) == pytest.approx(haversine_km(*b, *a))


def test_dublin_to_london():
    # roughly 464 km as the crow flies
    assert haversine_km(*DUBLIN, *LONDON) == pytest.approx(464, abs=5)


def test_one_degree_of_latitude():
    expected = EARTH_RADIUS_KM * math.pi / 180
    assert haversine_km(0, 0, 1, 0) == pytest.approx(expected)


def test_antipodes_are_half_circumference():
    assert haversine_km(0, 0, 0, 180) == pytest.approx(EARTH_RADIUS_KM * math.pi)


def test_grows_with_separation():
    distances = [haversine_km(0, 0, 0, lng) for lng in (1, 10, 45, 90, 179)]
    assert distances == sorted(distances)


def test_nan_propagates():
    assert math.isnan(haversine_km(float("nan"), 0, 0, 0))


def test_distance_between_locations():
    a = Location(name="Dublin", lat=DUBLIN[0], lng=DUBLIN[1])
    b = Location(name="London", lat=LONDON[0], lng=LONDON[1])
    assert distance_between(a, b) == haversine_km(*DUBLIN, *LONDON)
