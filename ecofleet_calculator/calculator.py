"""
EcoFleet Calculator - Core calculation engine.
Turns a fleet and a carbon price into emission and financial figures.
"""

import logging
import math
import numpy as np
from typing import Dict, Iterable, List, Mapping, Optional
from .models import DerivedMetrics, FuelType, SensitivityPoint, Vehicle
from .parameters import CalculatorConfig

logger = logging.getLogger(__name__)

KG_PER_TON = 1000.0


class UnknownFuelType(ValueError):
    """A vehicle uses a fuel missing from the emission factor table."""

    def __init__(self, fuel_type, vehicle_id: Optional[str] = None):
        self.fuel_type = fuel_type
        self.vehicle_id = vehicle_id
        name = fuel_type.value if isinstance(fuel_type, FuelType) else fuel_type
        message = f"No emission factor for fuel type '{name}'"
        if vehicle_id is not None:
            message += f" (vehicle '{vehicle_id}')"
        super().__init__(message)


def compute_metrics(
    fleet: Iterable[Vehicle],
    carbon_price: float,
    factors: Mapping[FuelType, float],
    target_reduction_ratio: float,
) -> DerivedMetrics:
    """
    Calculate fleet emissions, financial risk and the ESG target.

    Args:
        fleet: Vehicles to include
        carbon_price: Internal carbon price in USD per tCO2e
        factors: Emission factor (kg CO2e per liter) for each fuel type
        target_reduction_ratio: Fraction of current emissions to cut

    Returns:
        DerivedMetrics for the fleet

    Raises:
        UnknownFuelType: If a vehicle's fuel has no entry in ``factors``
    """
    if not math.isfinite(carbon_price):
        raise ValueError(f"Carbon price must be finite, got {carbon_price}")
    if not math.isfinite(target_reduction_ratio):
        raise ValueError(f"Target reduction ratio must be finite, got {target_reduction_ratio}")

    total_kg = 0.0
    by_type_kg: Dict[str, float] = {}  # first-seen order

    for vehicle in fleet:
        try:
            factor = factors[vehicle.fuel_type]
        except KeyError:
            raise UnknownFuelType(vehicle.fuel_type, vehicle.id) from None

        co2e_kg = vehicle.consumption * factor
        total_kg += co2e_kg

        key = vehicle.type.value
        by_type_kg[key] = by_type_kg.get(key, 0.0) + co2e_kg

    total_tons = total_kg / KG_PER_TON
    emissions_by_type = {
        name: round(kg / KG_PER_TON, 2) for name, kg in by_type_kg.items()
    }

    metrics = DerivedMetrics(
        total_emissions_tons=total_tons,
        emissions_by_type=emissions_by_type,
        financial_risk=total_tons * carbon_price,
        target_emissions=total_tons * (1 - target_reduction_ratio),
    )
    logger.debug(
        "Computed metrics for %d vehicle types: %.3f tCO2e, risk %.2f USD",
        len(emissions_by_type), metrics.total_emissions_tons, metrics.financial_risk,
    )
    return metrics


def format_price(price: float) -> str:
    """Plain price text: 50 -> "50", 42.5 -> "42.5", never exponent form."""
    price = float(price)
    if price.is_integer():
        return str(int(price))
    return repr(price)


def sensitivity_analysis(
    metrics: DerivedMetrics,
    carbon_price: float,
    prices: Iterable[float],
) -> List[SensitivityPoint]:
    """
    Financial risk of the same emissions under other carbon prices.

    The first point is always the current price.
    """
    scenario_prices = [float(p) for p in prices]
    all_prices = np.array([carbon_price] + scenario_prices, dtype=float)
    risks = metrics.total_emissions_tons * all_prices

    labels = [f"Actual (${format_price(carbon_price)})"]
    labels += [f"Futuro (${format_price(p)})" for p in scenario_prices]

    return [
        SensitivityPoint(label=label, carbon_price=float(price), risk=float(risk))
        for label, price, risk in zip(labels, all_prices, risks)
    ]


class EmissionsCalculator:
    """Calculate fleet emissions with a fixed configuration."""

    def __init__(self, config: Optional[CalculatorConfig] = None):
        """
        Initialize calculator with parameters.

        Args:
            config: Emission factors and targets; reference values if omitted
        """
        self.config = config or CalculatorConfig()

    def calculate(self, fleet: Iterable[Vehicle], carbon_price: float) -> DerivedMetrics:
        return compute_metrics(
            fleet,
            carbon_price,
            self.config.emission_factors,
            self.config.target_reduction_ratio,
        )

    def sensitivity(self, fleet: Iterable[Vehicle], carbon_price: float) -> List[SensitivityPoint]:
        metrics = self.calculate(fleet, carbon_price)
        return sensitivity_analysis(metrics, carbon_price, self.config.sensitivity_prices)
