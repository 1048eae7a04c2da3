import dataclasses
import math

import pytest

from rocketlab.mathtypes import Quaternion, Vector3
from rocketlab.validation import (
    ValidationError,
    ValidationErrorCode,
    validate_environment,
    validate_flight_state,
    validate_simulation_inputs,
    validate_vehicle_model,
)
from rocketlab.vehicle import FlightState, Motor, MotorCluster, MountedMotor, VehicleModel
from rocketlab.weather import Environment, LaunchSite, SurfaceWeather


def _vehicle(**changes):
    vehicle = VehicleModel(cluster=MotorCluster([MountedMotor(Motor(180.0, 2.4, 0.24))]))
    return dataclasses.replace(vehicle, **changes)


def _state(vehicle, **changes):
    return dataclasses.replace(FlightState(mass_kg=vehicle.dry_mass_kg + 0.5), **changes)


def _code_of(call, *args):
    with pytest.raises(ValidationError) as info:
        call(*args)
    return info.value.code


def test_valid_inputs_accepted_and_vehicle_unchanged():
    vehicle = _vehicle()
    state = _state(vehicle)
    before = dataclasses.replace(vehicle)
    validate_simulation_inputs(state, vehicle, Environment(), 0.01)
    assert vehicle == before


@pytest.mark.parametrize("mass", [0.0, -1.0, math.nan, math.inf])
def test_dry_mass_rejected(mass):
    assert _code_of(validate_vehicle_model, _vehicle(dry_mass_kg=mass)) is ValidationErrorCode.INVALID_MASS


def test_dry_mass_message():
    with pytest.raises(ValidationError, match="Vehicle dry mass must be finite and > 0 kg."):
        validate_vehicle_model(_vehicle(dry_mass_kg=0.0))


@pytest.mark.parametrize("area", [0.0, math.nan])
def test_reference_area_rejected(area):
    code = _code_of(validate_vehicle_model, _vehicle(reference_area_m2=area))
    assert code is ValidationErrorCode.INVALID_REFERENCE_AREA


@pytest.mark.parametrize("inertia", [Vector3(1.0, 1.0, 0.0), Vector3(math.inf, 1.0, 1.0), Vector3(1.0, -1.0, 1.0)])
def test_inertia_rejected(inertia):
    code = _code_of(validate_vehicle_model, _vehicle(principal_inertia_kgm2=inertia))
    assert code is ValidationErrorCode.INVALID_INERTIA


@pytest.mark.parametrize(
    "mounted",
    [
        MountedMotor(Motor(-1.0, 2.0, 0.2)),
        MountedMotor(Motor(100.0, math.nan, 0.2)),
        MountedMotor(Motor(100.0, 2.0, -0.1)),
        MountedMotor(Motor(100.0, 2.0, 0.2), mount_position_m=Vector3(math.inf, 0.0, 0.0)),
        MountedMotor(Motor(100.0, 2.0, 0.2), thrust_direction_body=Vector3(0.0, math.nan, 1.0)),
    ],
)
def test_invalid_motor_rejected(mounted):
    vehicle = _vehicle(cluster=MotorCluster([mounted]))
    assert _code_of(validate_vehicle_model, vehicle) is ValidationErrorCode.INVALID_MOTOR


def test_launch_site_rejected():
    env = Environment(launch_site=LaunchSite(latitude_deg=math.nan))
    assert _code_of(validate_environment, env) is ValidationErrorCode.INVALID_LAUNCH_SITE


@pytest.mark.parametrize(
    "weather",
    [SurfaceWeather(pressure_hpa=0.0), SurfaceWeather(wind_gust_mps=math.inf), SurfaceWeather(humidity_percent=math.nan)],
)
def test_weather_rejected(weather):
    env = Environment(surface_weather=weather)
    assert _code_of(validate_environment, env) is ValidationErrorCode.INVALID_WEATHER


def test_non_finite_state_rejected():
    vehicle = _vehicle()
    state = _state(vehicle, attitude_body_to_world=Quaternion(math.nan, 0.0, 0.0, 0.0))
    assert _code_of(validate_flight_state, state, vehicle) is ValidationErrorCode.INVALID_STATE


def test_state_lighter_than_dry_mass_rejected():
    vehicle = _vehicle()
    state = _state(vehicle, mass_kg=vehicle.dry_mass_kg - 0.1)
    assert _code_of(validate_flight_state, state, vehicle) is ValidationErrorCode.INVALID_MASS


@pytest.mark.parametrize("dt", [0.0, -0.01, math.nan])
def test_time_step_checked_first(dt):
    vehicle = _vehicle(dry_mass_kg=0.0)
    code = _code_of(validate_simulation_inputs, _state(vehicle), vehicle, Environment(), dt)
    assert code is ValidationErrorCode.INVALID_TIME_STEP


def test_vehicle_checked_before_environment():
    vehicle = _vehicle(reference_area_m2=0.0)
    env = Environment(surface_weather=SurfaceWeather(pressure_hpa=0.0))
    code = _code_of(validate_simulation_inputs, _state(vehicle), vehicle, env, 0.01)
    assert code is ValidationErrorCode.INVALID_REFERENCE_AREA


def test_environment_checked_before_state():
    vehicle = _vehicle()
    env = Environment(surface_weather=SurfaceWeather(pressure_hpa=-5.0))
    state = _state(vehicle, mass_kg=0.0)
    code = _code_of(validate_simulation_inputs, state, vehicle, env, 0.01)
    assert code is ValidationErrorCode.INVALID_WEATHER


def test_error_is_value_error_with_message():
    with pytest.raises(ValueError) as info:
        validate_environment(Environment(launch_site=LaunchSite(elevation_m=math.inf)))
    assert info.value.message == "Launch site coordinates must be finite."