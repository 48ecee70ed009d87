"""Fuel type and density resolution for aircraft types."""

from __future__ import annotations

from skyfleet.config import FlightRulesConfig, config
from skyfleet.contracts.aircraft_type import AircraftType
from skyfleet.contracts.enums import EngineType, FuelType

# lbs per US gallon
_AVGAS_WEIGHT_PER_GALLON = 6.0
_JETFUEL_WEIGHT_PER_GALLON = 6.7

_ENGINE_FUEL = {
    EngineType.PISTON: FuelType.AVGAS,
    EngineType.TURBOPROP: FuelType.JET_FUEL,
    EngineType.JET: FuelType.JET_FUEL,
    EngineType.HELO_BELL_TURBINE: FuelType.JET_FUEL,
    EngineType.NONE: FuelType.NONE,
    EngineType.UNSUPPORTED: FuelType.NONE,
}


def resolve_fuel_type(aircraft_type: AircraftType) -> FuelType:
    """Fuel burned by the type: explicit override, else by engine type."""
    if aircraft_type.override_fuel_type != FuelType.NOT_USED:
        return FuelType(aircraft_type.override_fuel_type)
    try:
        engine = EngineType(aircraft_type.engine_type)
    except ValueError:
        return FuelType.NONE
    return _ENGINE_FUEL.get(engine, FuelType.NONE)


def resolve_fuel_weight_per_gallon(aircraft_type: AircraftType) -> float:
    """Fuel density in lbs/gal: explicit value if set, else by fuel type."""
    if aircraft_type.fuel_weight_per_gallon_override >= 0:
        return aircraft_type.fuel_weight_per_gallon_override
    fuel_type = resolve_fuel_type(aircraft_type)
    if fuel_type == FuelType.AVGAS:
        return _AVGAS_WEIGHT_PER_GALLON
    if fuel_type == FuelType.JET_FUEL:
        return _JETFUEL_WEIGHT_PER_GALLON
    return 0.0


def fuel_loading_minutes(
    fuel_type: FuelType,
    current_gallons: float,
    planned_gallons: float,
    rules: FlightRulesConfig = config.flight_rules,
) -> float:
    """Minutes the fuel truck needs to bring the aircraft to the planned fuel.

    Zero when nothing has to be transferred or the type burns no fuel.
    """
    if fuel_type == FuelType.JET_FUEL:
        rate = rules.jetfuel_gallons_per_minute
    elif fuel_type == FuelType.AVGAS:
        rate = rules.avgas_gallons_per_minute
    else:
        rate = 0.0
    gallons = abs(current_gallons - planned_gallons)
    if rate <= 0 or gallons <= 0:
        return 0.0
    return rules.fuel_loading_base_minutes + gallons / rate
