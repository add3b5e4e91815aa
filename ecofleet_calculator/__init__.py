"""
EcoFleet Calculator - Scope 1 emissions and carbon price risk for vehicle fleets.

A Python package for estimating the monthly CO2e emissions of a fleet of
mining vehicles, the financial risk implied by an internal carbon price,
and progress against an ESG reduction target.
"""

from .calculator import EmissionsCalculator, UnknownFuelType, compute_metrics, sensitivity_analysis
from .models import DerivedMetrics, FleetState, FuelType, SensitivityPoint, Vehicle, VehicleType
from .parameters import CalculatorConfig, validate_parameters
from .store import FleetStore, parse_number

__version__ = "0.1.0"
__all__ = [
    "EmissionsCalculator",
    "UnknownFuelType",
    "compute_metrics",
    "sensitivity_analysis",
    "DerivedMetrics",
    "FleetState",
    "FuelType",
    "SensitivityPoint",
    "Vehicle",
    "VehicleType",
    "CalculatorConfig",
    "validate_parameters",
    "FleetStore",
    "parse_number",
]
