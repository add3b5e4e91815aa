"""Shared test fixtures."""

import matplotlib
matplotlib.use("Agg")

import pytest

from ecofleet_calculator.models import FuelType, Vehicle, VehicleType
from ecofleet_calculator.parameters import CalculatorConfig, EMISSION_FACTORS
from ecofleet_calculator.store import FleetStore


@pytest.fixture
def factors():
    return dict(EMISSION_FACTORS)


@pytest.fixture
def reference_fleet():
    return [
        Vehicle(id="A", type=VehicleType.CAEX_TRUCK, fuel_type=FuelType.DIESEL, consumption=25000),
        Vehicle(id="B", type=VehicleType.EXCAVATOR, fuel_type=FuelType.DIESEL, consumption=12000),
        Vehicle(id="C", type=VehicleType.PICKUP_4X4, fuel_type=FuelType.GASOLINE, consumption=1500),
    ]


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def store(config):
    return FleetStore(config)
