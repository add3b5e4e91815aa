"""
EcoFleet Calculator - Parameters
Reference emission factors, carbon price settings and the starting fleet.
"""

import math
from dataclasses import dataclass, field
from typing import Dict, Tuple
from .models import FuelType, Vehicle, VehicleType


# Emission factors in kg CO2e per liter (EPA / GHG Protocol, approximate)
EMISSION_FACTORS: Dict[FuelType, float] = {
    FuelType.DIESEL: 2.68,
    FuelType.GASOLINE: 2.31,
    FuelType.BIODIESEL: 0.45,
}

TARGET_REDUCTION_RATIO = 0.20  # 20% below current total

# Internal carbon price (USD/tCO2e) and the slider bounds offered to users
DEFAULT_CARBON_PRICE = 50
CARBON_PRICE_RANGE = (10, 250)
CARBON_PRICE_STEP = 5

# Future carbon price scenarios for the sensitivity chart
SENSITIVITY_PRICES = (100, 150)

RISK_ALERT_THRESHOLD = 50000  # USD

DEFAULT_VEHICLE_TYPE = VehicleType.MINING_TRUCK
DEFAULT_FUEL_TYPE = FuelType.DIESEL
DEFAULT_CONSUMPTION = 1000.0  # L/month

INITIAL_VEHICLES: Tuple[Vehicle, ...] = (
    Vehicle(id='1', type=VehicleType.CAEX_TRUCK, fuel_type=FuelType.DIESEL, consumption=25000),
    Vehicle(id='2', type=VehicleType.EXCAVATOR, fuel_type=FuelType.DIESEL, consumption=12000),
    Vehicle(id='3', type=VehicleType.PICKUP_4X4, fuel_type=FuelType.GASOLINE, consumption=1500),
)


@dataclass
class CalculatorConfig:
    """All parameters needed for fleet emission calculations"""

    emission_factors: Dict[FuelType, float] = field(
        default_factory=lambda: dict(EMISSION_FACTORS)
    )
    target_reduction_ratio: float = TARGET_REDUCTION_RATIO

    # Carbon price
    default_carbon_price: float = DEFAULT_CARBON_PRICE
    carbon_price_range: Tuple[float, float] = CARBON_PRICE_RANGE
    carbon_price_step: float = CARBON_PRICE_STEP
    sensitivity_prices: Tuple[float, ...] = SENSITIVITY_PRICES
    risk_alert_threshold: float = RISK_ALERT_THRESHOLD

    # New vehicle defaults
    default_vehicle_type: VehicleType = DEFAULT_VEHICLE_TYPE
    default_fuel_type: FuelType = DEFAULT_FUEL_TYPE
    default_consumption: float = DEFAULT_CONSUMPTION

    initial_vehicles: Tuple[Vehicle, ...] = INITIAL_VEHICLES


def validate_parameters(config: CalculatorConfig) -> list[str]:
    """
    Validate that configuration values are usable

    Returns:
        List of validation errors (empty if all OK)
    """
    errors = []

    for fuel_type, factor in config.emission_factors.items():
        if not math.isfinite(factor) or factor <= 0:
            errors.append(f"Emission factor for {fuel_type.value} must be positive: {factor}")
    if config.default_fuel_type not in config.emission_factors:
        errors.append(f"No emission factor for default fuel {config.default_fuel_type.value}")

    if not 0 <= config.target_reduction_ratio <= 1:
        errors.append(f"Target reduction ratio must be within [0, 1]: {config.target_reduction_ratio}")

    if not math.isfinite(config.default_carbon_price) or config.default_carbon_price < 0:
        errors.append(f"Default carbon price must be non-negative: {config.default_carbon_price}")
    low, high = config.carbon_price_range
    if low > high:
        errors.append(f"Carbon price range is inverted: {low} > {high}")
    if config.carbon_price_step <= 0:
        errors.append("Carbon price step must be positive")

    if config.default_consumption <= 0:
        errors.append("Default consumption must be positive")

    ids = [v.id for v in config.initial_vehicles]
    if len(ids) != len(set(ids)):
        errors.append("Initial vehicle ids must be unique")

    return errors
