"""Tests for fuel type, density and loading time resolution."""

import pytest

from skyfleet.config import FlightRulesConfig
from skyfleet.contracts.enums import EngineType, FuelType
from skyfleet.services.fuel import (
    fuel_loading_minutes,
    resolve_fuel_type,
    resolve_fuel_weight_per_gallon,
)
from tests.builders import make_type


class TestResolveFuelType:
    @pytest.mark.parametrize(
        "engine, expected",
        [
            (EngineType.PISTON, FuelType.AVGAS),
            (EngineType.TURBOPROP, FuelType.JET_FUEL),
            (EngineType.JET, FuelType.JET_FUEL),
            (EngineType.HELO_BELL_TURBINE, FuelType.JET_FUEL),
            (EngineType.NONE, FuelType.NONE),
            (EngineType.UNSUPPORTED, FuelType.NONE),
        ],
    )
    def test_by_engine(self, engine, expected):
        assert resolve_fuel_type(make_type(engine=engine)) == expected

    def test_override_wins(self):
        aircraft_type = make_type(engine=EngineType.PISTON, override_fuel_type=FuelType.JET_FUEL)
        assert resolve_fuel_type(aircraft_type) == FuelType.JET_FUEL

    def test_override_none_wins(self):
        aircraft_type = make_type(engine=EngineType.JET, override_fuel_type=FuelType.NONE)
        assert resolve_fuel_type(aircraft_type) == FuelType.NONE


class TestResolveFuelWeight:
    def test_avgas(self):
        assert resolve_fuel_weight_per_gallon(make_type(engine=EngineType.PISTON)) == 6.0

    def test_jet_fuel(self):
        assert resolve_fuel_weight_per_gallon(make_type(engine=EngineType.JET)) == 6.7

    def test_no_fuel(self):
        assert resolve_fuel_weight_per_gallon(make_type(engine=EngineType.NONE)) == 0.0

    def test_explicit_value(self):
        aircraft_type = make_type(engine=EngineType.JET, fuel_weight_per_gallon_override=6.8)
        assert resolve_fuel_weight_per_gallon(aircraft_type) == 6.8

    def test_explicit_zero_is_honoured(self):
        aircraft_type = make_type(engine=EngineType.PISTON, fuel_weight_per_gallon_override=0.0)
        assert resolve_fuel_weight_per_gallon(aircraft_type) == 0.0

    def test_follows_override_fuel_type(self):
        aircraft_type = make_type(engine=EngineType.PISTON, override_fuel_type=FuelType.JET_FUEL)
        assert resolve_fuel_weight_per_gallon(aircraft_type) == 6.7


class TestFuelLoadingMinutes:
    rules = FlightRulesConfig(
        position_report_pause_grace_seconds=60,
        avgas_gallons_per_minute=8,
        jetfuel_gallons_per_minute=500,
        fuel_loading_base_minutes=3,
    )

    def test_avgas(self):
        assert fuel_loading_minutes(FuelType.AVGAS, 10, 50, self.rules) == 3 + 40 / 8

    def test_defuel_counts_too(self):
        assert fuel_loading_minutes(FuelType.JET_FUEL, 1500, 500, self.rules) == 3 + 1000 / 500

    def test_nothing_to_transfer(self):
        assert fuel_loading_minutes(FuelType.AVGAS, 50, 50, self.rules) == 0

    def test_no_fuel_type(self):
        assert fuel_loading_minutes(FuelType.NONE, 0, 50, self.rules) == 0
