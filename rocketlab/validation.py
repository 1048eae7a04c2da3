"""Sanity checks on simulation inputs before integration."""

from __future__ import annotations

import enum
import math

from rocketlab.vehicle import FlightState, MountedMotor, VehicleModel
from rocketlab.weather import Environment


class ValidationErrorCode(enum.Enum):
    INVALID_MASS = "invalid_mass"
    INVALID_REFERENCE_AREA = "invalid_reference_area"
    INVALID_INERTIA = "invalid_inertia"
    INVALID_MOTOR = "invalid_motor"
    INVALID_LAUNCH_SITE = "invalid_launch_site"
    INVALID_WEATHER = "invalid_weather"
    INVALID_STATE = "invalid_state"
    INVALID_TIME_STEP = "invalid_time_step"


class ValidationError(ValueError):
    """Raised when a simulation input is unusable."""

    def __init__(self, code: ValidationErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


def _invalid_motor(mounted: MountedMotor) -> bool:
    motor = mounted.motor
    return any(
        not math.isfinite(value) or value < 0.0
        for value in (motor.max_thrust_n, motor.burn_time_s, motor.propellant_mass_kg)
    ) or not mounted.mount_position_m.is_finite() or not mounted.thrust_direction_body.is_finite()


def validate_vehicle_model(vehicle: VehicleModel) -> None:
    """Raise ``ValidationError`` if the vehicle's mass properties or motors are unusable."""
    if not math.isfinite(vehicle.dry_mass_kg) or vehicle.dry_mass_kg <= 0.0:
        raise ValidationError(
            ValidationErrorCode.INVALID_MASS,
            "Vehicle dry mass must be finite and > 0 kg.")
    if not math.isfinite(vehicle.reference_area_m2) or vehicle.reference_area_m2 <= 0.0:
        raise ValidationError(
            ValidationErrorCode.INVALID_REFERENCE_AREA,
            "Vehicle reference area must be finite and > 0 m^2.")
    inertia = vehicle.principal_inertia_kgm2
    if not inertia.is_finite() or min(inertia.x, inertia.y, inertia.z) <= 0.0:
        raise ValidationError(
            ValidationErrorCode.INVALID_INERTIA,
            "Principal inertia must be finite and strictly positive on all axes.")
    if any(_invalid_motor(mounted) for mounted in vehicle.cluster.mounted_motors):
        raise ValidationError(
            ValidationErrorCode.INVALID_MOTOR,
            "Motor cluster contains non-finite values or negative thrust/burn/mass parameters.")


def validate_environment(environment: Environment) -> None:
    """Raise ``ValidationError`` if the launch site or weather is unusable."""
    site = environment.launch_site
    if not all(math.isfinite(v) for v in (site.latitude_deg, site.longitude_deg, site.elevation_m)):
        raise ValidationError(
            ValidationErrorCode.INVALID_LAUNCH_SITE,
            "Launch site coordinates must be finite.")

    weather = environment.surface_weather
    values = (
        weather.pressure_hpa,
        weather.temperature_c,
        weather.humidity_percent,
        weather.wind_speed_mps,
        weather.wind_direction_deg,
        weather.wind_gust_mps,
    )
    if not all(math.isfinite(v) for v in values) or weather.pressure_hpa <= 0.0:
        raise ValidationError(
            ValidationErrorCode.INVALID_WEATHER,
            "Surface weather must be finite and use a positive pressure.")


def validate_flight_state(state: FlightState, vehicle: VehicleModel) -> None:
    """Raise ``ValidationError`` if the state is non-finite or lighter than the dry vehicle."""
    if not (state.position_m.is_finite()
            and state.velocity_mps.is_finite()
            and state.angular_velocity_body_radps.is_finite()
            and state.attitude_body_to_world.is_finite()):
        raise ValidationError(
            ValidationErrorCode.INVALID_STATE,
            "Flight state contains non-finite position, velocity, attitude or angular velocity.")
    if not math.isfinite(state.mass_kg) or state.mass_kg < vehicle.dry_mass_kg:
        raise ValidationError(
            ValidationErrorCode.INVALID_MASS,
            "Flight state mass must be finite and not smaller than vehicle dry mass.")


def validate_simulation_inputs(
    state: FlightState,
    vehicle: VehicleModel,
    environment: Environment,
    dt: float,
) -> None:
    """Check the time step, vehicle, environment and state, in that order."""
    if not math.isfinite(dt) or dt <= 0.0:
        raise ValidationError(
            ValidationErrorCode.INVALID_TIME_STEP,
            "Simulation time step must be finite and > 0 seconds.")
    validate_vehicle_model(vehicle)
    validate_environment(environment)
    validate_flight_state(state, vehicle)