"""Component selection and the procedural preset library for each component."""

from __future__ import annotations

import enum
from typing import Callable

from rocketlab.motors import motor_preset_names
from rocketlab.vehicle import (
    BodyControls,
    FinControls,
    FinShape,
    NoseConeShape,
    NoseControls,
    TransitionShape,
    VehicleGeometry,
)

_GeometryEdit = Callable[[VehicleGeometry], None]
_MIN_TRANSITION_AFT_DIAMETER_M = 0.05


class ComponentSelection(enum.Enum):
    """The vehicle component currently selected for editing."""

    NOSE_CONE = "nose_cone"
    BODY_TUBE = "body_tube"
    TRANSITION = "transition"
    FIN_SET = "fin_set"
    MOTOR_MOUNT = "motor_mount"
    PAYLOAD = "payload"

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    ComponentSelection.NOSE_CONE: "Nose Cone",
    ComponentSelection.BODY_TUBE: "Body Tube",
    ComponentSelection.TRANSITION: "Transition",
    ComponentSelection.FIN_SET: "Fin Set",
    ComponentSelection.MOTOR_MOUNT: "Motor Mount",
    ComponentSelection.PAYLOAD: "Payload Section",
}

_LIBRARY_NOTES = {
    ComponentSelection.NOSE_CONE:
        "Ogive presets trade drag, volume and static stability using realistic slenderness choices.",
    ComponentSelection.BODY_TUBE:
        "Body presets change volume, sectional density, wall mass and inertial stiffness.",
    ComponentSelection.TRANSITION:
        "Transition presets affect base drag, aft closure efficiency and fin airflow quality.",
    ComponentSelection.FIN_SET:
        "Fin presets alter restoring force, damping and transonic drag in a physically meaningful way.",
    ComponentSelection.MOTOR_MOUNT:
        "Motor presets map to real thrust, burn time, propellant mass and cluster radius.",
    ComponentSelection.PAYLOAD:
        "Payload presets set real mass and bay length, shifting CG and inertial response.",
}


def _nose(length_m: float, shape: NoseConeShape, mid: float, shoulder: float) -> _GeometryEdit:
    def edit(geometry: VehicleGeometry) -> None:
        geometry.nose_length_m = length_m
        geometry.nose_cone_shape = shape
        geometry.nose_controls = NoseControls(mid_radius_scale=mid, shoulder_radius_scale=shoulder)
    return edit


def _body(length_m: float, diameter_m: float, wall_m: float,
          fore: float, mid: float, aft: float) -> _GeometryEdit:
    def edit(geometry: VehicleGeometry) -> None:
        geometry.body_length_m = length_m
        geometry.body_diameter_m = diameter_m
        geometry.wall_thickness_m = wall_m
        geometry.body_controls = BodyControls(
            fore_radius_scale=fore, mid_radius_scale=mid, aft_radius_scale=aft)
    return edit


def _transition(length_m: float, aft_ratio: float, shape: TransitionShape,
                mid: float) -> _GeometryEdit:
    def edit(geometry: VehicleGeometry) -> None:
        geometry.transition_length_m = length_m
        geometry.transition_aft_diameter_m = max(
            geometry.body_diameter_m * aft_ratio, _MIN_TRANSITION_AFT_DIAMETER_M)
        geometry.transition_shape = shape
        geometry.transition_controls.mid_radius_scale = mid
    return edit


def _fins(shape: FinShape, root_m: float, tip_m: float, span_m: float, sweep_m: float,
          controls: FinControls) -> _GeometryEdit:
    def edit(geometry: VehicleGeometry) -> None:
        geometry.fin_shape = shape
        geometry.fin_root_chord_m = root_m
        geometry.fin_tip_chord_m = tip_m
        geometry.fin_span_m = span_m
        geometry.fin_sweep_length_m = sweep_m
        geometry.fin_controls = FinControls(
            tip_le_offset_m=controls.tip_le_offset_m,
            tip_te_offset_m=controls.tip_te_offset_m,
            span_scale=controls.span_scale,
            thickness_scale=controls.thickness_scale,
        )
    return edit


def _payload(length_m: float, mass_kg: float) -> _GeometryEdit:
    def edit(geometry: VehicleGeometry) -> None:
        geometry.payload_length_m = length_m
        geometry.payload_mass_kg = mass_kg
    return edit


_GEOMETRY_PRESETS: dict[ComponentSelection, dict[str, _GeometryEdit]] = {
    ComponentSelection.NOSE_CONE: {
        "Conical Sprint": _nose(0.28, NoseConeShape.CONICAL, 0.88, 1.0),
        "Conical Long Range": _nose(0.42, NoseConeShape.CONICAL, 0.82, 0.98),
        "Haack Low Drag": _nose(0.52, NoseConeShape.LD_HAACK, 0.94, 1.02),
        "Ogive Stable": _nose(0.44, NoseConeShape.TANGENT_OGIVE, 1.02, 1.0),
        "Parabolic Payload": _nose(0.38, NoseConeShape.PARABOLIC, 1.08, 1.03),
    },
    ComponentSelection.BODY_TUBE: {
        "Minimum Diameter": _body(3.2, 0.092, 0.0023, 0.98, 1.0, 0.98),
        "Avionics Bay": _body(2.4, 0.104, 0.0030, 1.0, 1.02, 1.0),
        "Long Burner": _body(3.8, 0.110, 0.0032, 0.97, 1.0, 0.99),
        "Heavy Structure": _body(2.9, 0.125, 0.0038, 1.0, 1.02, 0.98),
        "Wide Lift Core": _body(3.3, 0.140, 0.0040, 1.0, 1.04, 1.0),
    },
    ComponentSelection.TRANSITION: {
        "Straight Interstage": _transition(0.08, 0.94, TransitionShape.CONICAL, 1.0),
        "Boat Tail": _transition(0.22, 0.72, TransitionShape.CURVED, 0.86),
        "Conical Coupler": _transition(0.16, 0.82, TransitionShape.CONICAL, 1.0),
        "Aggressive Tail": _transition(0.24, 0.64, TransitionShape.CURVED, 0.78),
        "Payload Shoulder": _transition(0.18, 0.90, TransitionShape.CURVED, 1.08),
    },
    ComponentSelection.FIN_SET: {
        "Sport Trapezoid": _fins(
            FinShape.TRAPEZOIDAL, 0.26, 0.13, 0.14, 0.06,
            FinControls(0.0, 0.0, 1.0, 1.0)),
        "Supersonic Airfoil": _fins(
            FinShape.AIRFOIL, 0.24, 0.09, 0.14, 0.12,
            FinControls(0.03, -0.01, 0.96, 0.88)),
        "Clipped Delta": _fins(
            FinShape.TRAPEZOIDAL, 0.30, 0.07, 0.13, 0.15,
            FinControls(0.02, -0.02, 0.95, 0.9)),
        "Stable Elliptical": _fins(
            FinShape.ELLIPTICAL, 0.34, 0.17, 0.20, 0.05,
            FinControls(0.0, 0.02, 1.04, 1.05)),
        "Heavy Lift Canards": _fins(
            FinShape.AIRFOIL, 0.38, 0.18, 0.24, 0.08,
            FinControls(-0.01, 0.03, 1.10, 1.12)),
    },
    ComponentSelection.PAYLOAD: {
        "Compact Payload": _payload(0.14, 0.45),
        "Avionics + Camera": _payload(0.26, 1.15),
        "Dual Deploy Bay": _payload(0.22, 0.72),
        "Science Probe": _payload(0.30, 1.35),
        "Heavy Recovery Stack": _payload(0.28, 1.85),
    },
}


def component_preset_names(selection: ComponentSelection) -> tuple[str, ...]:
    """Names of the presets offered for ``selection``, in library order."""
    if selection is ComponentSelection.MOTOR_MOUNT:
        return motor_preset_names()
    return tuple(_GEOMETRY_PRESETS[selection])


def apply_component_preset(
    geometry: VehicleGeometry,
    selection: ComponentSelection,
    name: str,
) -> None:
    """Apply the named geometry preset of ``selection`` to ``geometry`` in place.

    Motor mount presets change the motor editor rather than the geometry and are
    applied with ``rocketlab.motors.apply_motor_preset``.
    """
    if selection is ComponentSelection.MOTOR_MOUNT:
        raise ValueError(
            "Motor mount presets apply to the motor editor; use apply_motor_preset.")
    try:
        edit = _GEOMETRY_PRESETS[selection][name]
    except KeyError:
        raise KeyError(
            f"Unknown {selection.display_name()} preset: {name!r}") from None
    edit(geometry)


def library_note(selection: ComponentSelection) -> str:
    """Explanatory note shown under the preset list for ``selection``."""
    return _LIBRARY_NOTES[selection]


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def modeling_preview_lift_m(geometry: VehicleGeometry) -> float:
    """Height to raise the centred model so that neither body nor nozzle goes below ground."""
    body_start_z_m = -0.5 * geometry.body_length_m
    casing_length_m = _clamp(geometry.body_diameter_m * 1.1, 0.08, 0.24)
    nozzle_length_m = _clamp(geometry.body_diameter_m * 0.45, 0.03, 0.09)
    casing_fore_z_m = body_start_z_m + geometry.transition_length_m + 0.03
    casing_aft_z_m = casing_fore_z_m - casing_length_m
    nozzle_aft_z_m = casing_aft_z_m - nozzle_length_m
    lowest_point_z_m = min(body_start_z_m, nozzle_aft_z_m)
    return max(-lowest_point_z_m, 0.0)