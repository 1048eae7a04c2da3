"""Motor cluster editing: editor state, presets and cluster layout."""

from __future__ import annotations

import math
from dataclasses import dataclass

from rocketlab.mathtypes import Vector3
from rocketlab.vehicle import Motor, MotorCluster, MountedMotor

_AXIAL = Vector3(0.0, 0.0, 1.0)
_MIN_MOTORS = 1
_MAX_MOTORS = 6


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _clamp_finite(value: float, fallback: float, low: float, high: float) -> float:
    """Clamp ``value`` to ``[low, high]``, replacing non-finite values with ``fallback``."""
    if not math.isfinite(value):
        value = fallback
    return _clamp(value, low, high)


@dataclass
class MotorEditorState:
    """User-editable parameters from which the motor cluster is built."""

    motor_count: int = 2
    max_thrust_n: float = 180.0
    burn_time_s: float = 2.4
    propellant_mass_kg: float = 0.24
    mount_radius_m: float = 0.04
    cant_angle_deg: float = 0.0

    def clamp(self, body_diameter_m: float) -> None:
        """Bring every field back into its allowed range for the given body diameter."""
        self.motor_count = int(_clamp(self.motor_count, _MIN_MOTORS, _MAX_MOTORS))
        self.max_thrust_n = _clamp_finite(self.max_thrust_n, 180.0, 20.0, 2500.0)
        self.burn_time_s = _clamp_finite(self.burn_time_s, 2.4, 0.4, 20.0)
        self.propellant_mass_kg = _clamp_finite(self.propellant_mass_kg, 0.24, 0.02, 8.0)
        self.mount_radius_m = _clamp_finite(
            self.mount_radius_m, 0.04, 0.0, body_diameter_m * 0.42)
        self.cant_angle_deg = _clamp_finite(self.cant_angle_deg, 0.0, 0.0, 12.0)


@dataclass
class ProjectMotorSettings:
    """Motor parameters as stored in a project document."""

    motor_count: int = 2
    max_thrust_n: float = 180.0
    burn_time_s: float = 2.4
    propellant_mass_kg: float = 0.24
    mount_radius_m: float = 0.04
    cant_angle_deg: float = 0.0


def build_cluster_layout(editor: MotorEditorState) -> list[MountedMotor]:
    """Place identical motors evenly on a ring, each canted outwards by the cant angle."""
    count = max(editor.motor_count, 1)
    cant_rad = math.radians(editor.cant_angle_deg)
    motors = []
    for index in range(count):
        if count > 1:
            angle_rad = 2.0 * math.pi * index / count
            mount_position = Vector3(
                editor.mount_radius_m * math.cos(angle_rad),
                editor.mount_radius_m * math.sin(angle_rad),
                0.0,
            )
            radial = Vector3(math.cos(angle_rad), math.sin(angle_rad), 0.0)
        else:
            mount_position = Vector3()
            radial = Vector3(1.0, 0.0, 0.0)
        thrust_direction = (
            math.cos(cant_rad) * _AXIAL + math.sin(cant_rad) * radial).normalized()
        motors.append(MountedMotor(
            motor=Motor(
                max_thrust_n=editor.max_thrust_n,
                burn_time_s=editor.burn_time_s,
                propellant_mass_kg=editor.propellant_mass_kg,
            ),
            mount_position_m=mount_position,
            thrust_direction_body=thrust_direction,
            failed=False,
        ))
    return motors


def derive_project_motor_settings(cluster: MotorCluster) -> ProjectMotorSettings:
    """Recover editor-level settings from an existing cluster, using its first motor."""
    settings = ProjectMotorSettings(motor_count=cluster.motor_count())
    if not cluster.mounted_motors:
        return settings

    first = cluster.mounted_motors[0]
    settings.max_thrust_n = first.motor.max_thrust_n
    settings.burn_time_s = first.motor.burn_time_s
    settings.propellant_mass_kg = first.motor.propellant_mass_kg
    settings.mount_radius_m = first.mount_position_m.magnitude()
    thrust = first.thrust_direction_body.normalized()
    settings.cant_angle_deg = math.degrees(math.acos(_clamp(thrust.z, -1.0, 1.0)))
    return settings


def apply_project_motor_settings(
    editor: MotorEditorState,
    settings: ProjectMotorSettings,
) -> None:
    """Copy stored project settings into the editor."""
    editor.motor_count = settings.motor_count
    editor.max_thrust_n = settings.max_thrust_n
    editor.burn_time_s = settings.burn_time_s
    editor.propellant_mass_kg = settings.propellant_mass_kg
    editor.mount_radius_m = settings.mount_radius_m
    editor.cant_angle_deg = settings.cant_angle_deg


_MOTOR_PRESETS: dict[str, ProjectMotorSettings] = {
    "Single Sustainer": ProjectMotorSettings(
        motor_count=1, max_thrust_n=420.0, burn_time_s=2.8,
        propellant_mass_kg=0.54, mount_radius_m=0.0, cant_angle_deg=0.0),
    "Twin Booster": ProjectMotorSettings(
        motor_count=2, max_thrust_n=210.0, burn_time_s=2.2,
        propellant_mass_kg=0.20, mount_radius_m=0.026, cant_angle_deg=0.0),
    "3-Motor Cluster": ProjectMotorSettings(
        motor_count=3, max_thrust_n=220.0, burn_time_s=2.1,
        propellant_mass_kg=0.22, mount_radius_m=0.032, cant_angle_deg=0.0),
    "4-Motor Cluster": ProjectMotorSettings(
        motor_count=4, max_thrust_n=240.0, burn_time_s=2.5,
        propellant_mass_kg=0.26, mount_radius_m=0.038, cant_angle_deg=0.0),
    "5-Motor Ring": ProjectMotorSettings(
        motor_count=5, max_thrust_n=205.0, burn_time_s=2.9,
        propellant_mass_kg=0.23, mount_radius_m=0.040, cant_angle_deg=1.5),
}


def motor_preset_names() -> tuple[str, ...]:
    """Names of the built-in motor presets, in library order."""
    return tuple(_MOTOR_PRESETS)


def apply_motor_preset(editor: MotorEditorState, name: str) -> None:
    """Load the named motor preset into ``editor``."""
    try:
        preset = _MOTOR_PRESETS[name]
    except KeyError:
        raise KeyError(f"Unknown motor preset: {name!r}") from None
    apply_project_motor_settings(editor, preset)