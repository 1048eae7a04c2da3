"""Vehicle description: motors, geometry, mass properties and flight state."""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field

from rocketlab.mathtypes import Quaternion, Vector3


@dataclass
class Motor:
    """A single solid motor described by its thrust, burn time and propellant."""

    max_thrust_n: float = 0.0
    burn_time_s: float = 0.0
    propellant_mass_kg: float = 0.0


@dataclass
class MountedMotor:
    """A motor placed in the body frame with its thrust axis."""

    motor: Motor = field(default_factory=Motor)
    mount_position_m: Vector3 = field(default_factory=Vector3)
    thrust_direction_body: Vector3 = field(default_factory=lambda: Vector3(0.0, 0.0, 1.0))
    failed: bool = False


@dataclass
class MotorCluster:
    """The set of motors mounted at the aft end of the vehicle."""

    mounted_motors: list[MountedMotor] = field(default_factory=list)

    def motor_count(self) -> int:
        return len(self.mounted_motors)


class NoseConeShape(enum.Enum):
    CONICAL = "conical"
    TANGENT_OGIVE = "tangent_ogive"
    PARABOLIC = "parabolic"
    LD_HAACK = "ld_haack"


class FinShape(enum.Enum):
    TRAPEZOIDAL = "trapezoidal"
    ELLIPTICAL = "elliptical"
    AIRFOIL = "airfoil"


class TransitionShape(enum.Enum):
    CONICAL = "conical"
    CURVED = "curved"


@dataclass
class NoseControls:
    mid_radius_scale: float = 1.0
    shoulder_radius_scale: float = 1.0


@dataclass
class BodyControls:
    fore_radius_scale: float = 1.0
    mid_radius_scale: float = 1.0
    aft_radius_scale: float = 1.0


@dataclass
class TransitionControls:
    mid_radius_scale: float = 1.0


@dataclass
class FinControls:
    tip_le_offset_m: float = 0.0
    tip_te_offset_m: float = 0.0
    span_scale: float = 1.0
    thickness_scale: float = 1.0


@dataclass
class VehicleGeometry:
    """Outer mould line and internal stations, measured from the nose tip."""

    body_length_m: float = 2.5
    body_diameter_m: float = 0.1
    wall_thickness_m: float = 0.003
    nose_length_m: float = 0.4
    transition_length_m: float = 0.12
    transition_aft_diameter_m: float = 0.08
    fin_root_chord_m: float = 0.24
    fin_tip_chord_m: float = 0.10
    fin_span_m: float = 0.12
    fin_sweep_length_m: float = 0.06
    fin_front_from_nose_m: float = 1.8
    fin_count: int = 4
    fin_thickness_m: float = 0.004
    payload_length_m: float = 0.18
    payload_mass_kg: float = 0.8
    structure_cg_from_nose_m: float = 1.2
    propellant_cg_from_nose_m: float = 1.875
    nose_cone_shape: NoseConeShape = NoseConeShape.TANGENT_OGIVE
    fin_shape: FinShape = FinShape.TRAPEZOIDAL
    transition_shape: TransitionShape = TransitionShape.CONICAL
    nose_controls: NoseControls = field(default_factory=NoseControls)
    body_controls: BodyControls = field(default_factory=BodyControls)
    transition_controls: TransitionControls = field(default_factory=TransitionControls)
    fin_controls: FinControls = field(default_factory=FinControls)


def _default_reference_area() -> float:
    return math.pi * 0.05 * 0.05


@dataclass
class VehicleModel:
    """Geometry, propulsion and rigid-body mass properties of a vehicle."""

    geometry: VehicleGeometry = field(default_factory=VehicleGeometry)
    cluster: MotorCluster = field(default_factory=MotorCluster)
    dry_mass_kg: float = 3.0
    reference_area_m2: float = field(default_factory=_default_reference_area)
    principal_inertia_kgm2: Vector3 = field(default_factory=lambda: Vector3(1.0, 1.0, 0.01))


@dataclass
class FlightState:
    """Rigid-body state of the vehicle in the world frame."""

    position_m: Vector3 = field(default_factory=Vector3)
    velocity_mps: Vector3 = field(default_factory=Vector3)
    attitude_body_to_world: Quaternion = field(default_factory=Quaternion)
    angular_velocity_body_radps: Vector3 = field(default_factory=Vector3)
    mass_kg: float = 0.0