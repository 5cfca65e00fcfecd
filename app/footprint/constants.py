"""
Transport modes, emission factors and campus vocabulary.
"""
from enum import Enum


class TransportMode(str, Enum):
    CAR = "Car"
    BIKE = "Bike"  # motorcycle
    BUS = "Bus"
    WALKING = "Walking"
    BICYCLE = "Bicycle"
    EV = "EV"


# kg CO2 per km travelled
EMISSION_FACTORS = {
    TransportMode.CAR: 0.23,
    TransportMode.BIKE: 0.11,
    TransportMode.BUS: 0.05,
    TransportMode.EV: 0.05,
    TransportMode.WALKING: 0.0,
    TransportMode.BICYCLE: 0.0,
}

# Points curve: points = 50 / (emissions + 0.1)
POINTS_SCALE = 50
EMISSIONS_OFFSET = 0.1

DEPARTMENTS = ["Computer Science", "Business", "Arts & Humanities", "Engineering", "Medicine"]
CAMPUSES = ["Main Campus", "South Campus", "Online", "North Campus"]

# Upper bounds accepted by the transport forms
MAX_DISTANCE_KM = 1000.0
MAX_TRIPS = 50
MAX_ROUND_TRIPS = 25
