"""
Data models for fleet emissions calculations.
"""

import dataclasses
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple
import pandas as pd


class FuelType(str, Enum):
    """Fuels with a known emission factor."""

    DIESEL = "Diesel"
    GASOLINE = "Gasoline (Nafta)"
    BIODIESEL = "Biodiesel"


class VehicleType(str, Enum):
    """Fleet asset categories. Only used as a grouping key."""

    CAEX_TRUCK = "Camión CAEX (Minería)"
    EXCAVATOR = "Excavadora Hidráulica"
    BULLDOZER = "Bulldozer / Tractor de Oruga"
    DRILLER = "Perforadora de Gran Diámetro"
    LOADER = "Cargador Frontal"
    PICKUP_4X4 = "Camioneta 4x4 de Apoyo"
    DIESEL_GENERATOR = "Generador Diésel Estacionario"
    MINING_TRUCK = "Camión Articulado"


@dataclass(frozen=True)
class Vehicle:
    """A single fleet asset."""

    id: str
    type: VehicleType
    fuel_type: FuelType
    consumption: float  # Liters per month


# Fields a caller may change through FleetState.with_vehicle_updated
UPDATABLE_FIELDS = ("type", "fuel_type", "consumption")


@dataclass(frozen=True)
class FleetState:
    """Fleet list plus the internal carbon price (USD/tCO2e).

    Never mutated: every update returns a new state.
    """

    vehicles: Tuple[Vehicle, ...] = ()
    carbon_price: float = 0.0

    def __post_init__(self):
        # Accept any sequence but always store a tuple
        object.__setattr__(self, "vehicles", tuple(self.vehicles))
        seen = set()
        for vehicle in self.vehicles:
            if vehicle.id in seen:
                raise ValueError(f"Vehicle id '{vehicle.id}' already in fleet")
            seen.add(vehicle.id)

    def find(self, vehicle_id: str) -> Optional[Vehicle]:
        for vehicle in self.vehicles:
            if vehicle.id == vehicle_id:
                return vehicle
        return None

    def with_vehicle_added(self, vehicle: Vehicle) -> "FleetState":
        if self.find(vehicle.id) is not None:
            raise ValueError(f"Vehicle id '{vehicle.id}' already in fleet")
        return dataclasses.replace(self, vehicles=self.vehicles + (vehicle,))

    def without_vehicle(self, vehicle_id: str) -> "FleetState":
        """Drop the matching vehicle. Unknown ids leave the state as is."""
        if self.find(vehicle_id) is None:
            return self
        return dataclasses.replace(
            self, vehicles=tuple(v for v in self.vehicles if v.id != vehicle_id)
        )

    def with_vehicle_updated(self, vehicle_id: str, **changes) -> "FleetState":
        """
        Replace the given fields of the matching vehicle.

        Args:
            vehicle_id: Id of the vehicle to update
            **changes: Any of ``type``, ``fuel_type``, ``consumption``

        Returns:
            New FleetState, or this one if no vehicle matches
        """
        unknown = set(changes) - set(UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Cannot update vehicle fields: {sorted(unknown)}")
        if self.find(vehicle_id) is None:
            return self
        return dataclasses.replace(self, vehicles=tuple(
            dataclasses.replace(v, **changes) if v.id == vehicle_id else v
            for v in self.vehicles
        ))

    def with_carbon_price(self, price: float) -> "FleetState":
        return dataclasses.replace(self, carbon_price=price)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert fleet to pandas DataFrame."""
        return pd.DataFrame(
            [{
                'ID': v.id,
                'Vehicle Type': v.type.value,
                'Fuel Type': v.fuel_type.value,
                'Consumption (L/month)': v.consumption,
            } for v in self.vehicles],
            columns=['ID', 'Vehicle Type', 'Fuel Type', 'Consumption (L/month)'],
        )


@dataclass(frozen=True)
class DerivedMetrics:
    """Emission and financial figures derived from a fleet."""

    total_emissions_tons: float
    emissions_by_type: Mapping[str, float] = field(default_factory=dict)
    financial_risk: float = 0.0
    target_emissions: float = 0.0

    def __post_init__(self):
        # Read-only view over a private copy
        object.__setattr__(
            self, "emissions_by_type", MappingProxyType(dict(self.emissions_by_type))
        )

    def target_comparison(self) -> List[Tuple[str, float]]:
        """Actual vs. ESG target pairs, in display order."""
        return [
            ('Actual', self.total_emissions_tons),
            ('Objetivo ESG', self.target_emissions),
        ]

    def breakdown_dataframe(self) -> pd.DataFrame:
        """Convert per-type subtotals to pandas DataFrame."""
        return pd.DataFrame(
            list(self.emissions_by_type.items()),
            columns=['Vehicle Type', 'Emissions (tCO2e)'],
        )

    def summary(self) -> Dict:
        """Return summary of the fleet metrics."""
        return {
            'Total Emissions (tCO2e)': self.total_emissions_tons,
            'Target Emissions (tCO2e)': self.target_emissions,
            'Financial Risk (USD)': self.financial_risk,
            'Vehicle Types': len(self.emissions_by_type),
        }


@dataclass(frozen=True)
class SensitivityPoint:
    """Financial risk under one carbon price scenario."""

    label: str
    carbon_price: float
    risk: float
