"""
Fleet store: owns the current FleetState and applies edits to it.
"""

import logging
import math
import uuid
from typing import List, Optional, Tuple
from .calculator import EmissionsCalculator
from .models import (
    UPDATABLE_FIELDS, DerivedMetrics, FleetState, FuelType, SensitivityPoint, Vehicle, VehicleType,
)
from .parameters import CalculatorConfig

logger = logging.getLogger(__name__)


def parse_number(value, default: float = 0.0) -> float:
    """Convert form input to a finite float, falling back to ``default``.

    Empty values, non-numeric strings, NaN and infinities all yield the
    default instead of propagating into the calculator.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return default
    if isinstance(value, bool):
        logger.warning("Rejected boolean numeric input %r, using %s", value, default)
        return default
    try:
        number = float(value)
    except (ValueError, TypeError):
        logger.warning("Could not parse numeric input %r, using %s", value, default)
        return default
    if not math.isfinite(number):
        logger.warning("Non-finite numeric input %r, using %s", value, default)
        return default
    return number


def _new_vehicle_id() -> str:
    return uuid.uuid4().hex[:9]


class FleetStore:
    """Hold the fleet being edited and recompute metrics on demand."""

    def __init__(self, config: Optional[CalculatorConfig] = None, vehicles=None,
                 carbon_price: Optional[float] = None):
        """
        Initialize the store.

        Args:
            config: Calculator configuration; reference values if omitted
            vehicles: Starting fleet; ``config.initial_vehicles`` if omitted
            carbon_price: Starting price; ``config.default_carbon_price`` if omitted
        """
        self.config = config or CalculatorConfig()
        self.calculator = EmissionsCalculator(self.config)
        self._state = self._initial_state(vehicles, carbon_price)

    def _initial_state(self, vehicles, carbon_price) -> FleetState:
        if vehicles is None:
            vehicles = self.config.initial_vehicles
        if carbon_price is None:
            carbon_price = self.config.default_carbon_price
        return FleetState(vehicles=tuple(vehicles), carbon_price=parse_number(carbon_price))

    @property
    def state(self) -> FleetState:
        return self._state

    @property
    def vehicles(self) -> Tuple[Vehicle, ...]:
        return self._state.vehicles

    @property
    def carbon_price(self) -> float:
        return self._state.carbon_price

    def add_vehicle(self) -> Vehicle:
        """Append a vehicle with default settings and return it."""
        vehicle_id = _new_vehicle_id()
        while self._state.find(vehicle_id) is not None:
            vehicle_id = _new_vehicle_id()

        vehicle = Vehicle(
            id=vehicle_id,
            type=self.config.default_vehicle_type,
            fuel_type=self.config.default_fuel_type,
            consumption=self.config.default_consumption,
        )
        self._state = self._state.with_vehicle_added(vehicle)
        logger.info("Added vehicle %s (%s)", vehicle.id, vehicle.type.value)
        return vehicle

    def remove_vehicle(self, vehicle_id: str) -> None:
        """Remove the vehicle with ``vehicle_id``; unknown ids are ignored."""
        before = self._state
        self._state = self._state.without_vehicle(vehicle_id)
        if self._state is before:
            logger.debug("No vehicle %s to remove", vehicle_id)
        else:
            logger.info("Removed vehicle %s", vehicle_id)

    def update_vehicle(self, vehicle_id: str, **fields) -> None:
        """
        Change some fields of a vehicle.

        Args:
            vehicle_id: Vehicle to update; unknown ids are a no-op
            **fields: Any of ``type``, ``fuel_type``, ``consumption``.
                Enum fields accept members or their string values.
                ``consumption`` goes through parse_number.

        Raises:
            TypeError: If an unsupported field is given, even for unknown ids
            ValueError: If a type or fuel string is not a known value
                (only checked once ``vehicle_id`` matches a vehicle)
        """
        if 'id' in fields:
            logger.warning("Ignoring attempt to change id of vehicle %s", vehicle_id)
            fields.pop('id')

        unknown = set(fields) - set(UPDATABLE_FIELDS)
        if unknown:
            raise TypeError(f"Cannot update vehicle fields: {sorted(unknown)}")
        if self._state.find(vehicle_id) is None:
            logger.debug("No vehicle %s to update", vehicle_id)
            return

        changes = dict(fields)
        if 'type' in changes:
            changes['type'] = VehicleType(changes['type'])
        if 'fuel_type' in changes:
            changes['fuel_type'] = FuelType(changes['fuel_type'])
        if 'consumption' in changes:
            changes['consumption'] = parse_number(changes['consumption'])
            if changes['consumption'] < 0:
                # Accepted as-is: yields negative emissions downstream
                logger.warning(
                    "Vehicle %s set to negative consumption %s",
                    vehicle_id, changes['consumption'],
                )

        self._state = self._state.with_vehicle_updated(vehicle_id, **changes)

    def set_carbon_price(self, price) -> None:
        """Replace the carbon price. No range check; the slider bounds are advisory."""
        value = parse_number(price)
        low, high = self.config.carbon_price_range
        if not low <= value <= high:
            logger.debug("Carbon price %s outside slider range %s-%s", value, low, high)
        self._state = self._state.with_carbon_price(value)

    def reset(self) -> None:
        self._state = self._initial_state(None, None)

    def metrics(self) -> DerivedMetrics:
        """Recompute metrics for the current state."""
        return self.calculator.calculate(self._state.vehicles, self._state.carbon_price)

    def sensitivity(self) -> List[SensitivityPoint]:
        return self.calculator.sensitivity(self._state.vehicles, self._state.carbon_price)
