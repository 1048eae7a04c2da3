import pytest

from rocketlab.motors import motor_preset_names
from rocketlab.presets import (
    ComponentSelection,
    apply_component_preset,
    component_preset_names,
    library_note,
    modeling_preview_lift_m,
)
from rocketlab.vehicle import (
    FinShape,
    NoseConeShape,
    TransitionShape,
    VehicleGeometry,
)


def test_display_names():
    assert ComponentSelection.NOSE_CONE.display_name() == "Nose Cone"
    assert ComponentSelection.PAYLOAD.display_name() == "Payload Section"


@pytest.mark.parametrize("selection", list(ComponentSelection))
def test_every_component_offers_five_presets(selection):
    names = component_preset_names(selection)
    assert len(names) == 5
    assert len(set(names)) == 5


def test_motor_mount_names_come_from_motor_library():
    assert component_preset_names(ComponentSelection.MOTOR_MOUNT) == motor_preset_names()


def test_nose_preset_names_in_order():
    assert component_preset_names(ComponentSelection.NOSE_CONE) == (
        "Conical Sprint",
        "Conical Long Range",
        "Haack Low Drag",
        "Ogive Stable",
        "Parabolic Payload",
    )


def test_apply_nose_preset_sets_shape_and_controls():
    geometry = VehicleGeometry()
    apply_component_preset(geometry, ComponentSelection.NOSE_CONE, "Haack Low Drag")
    assert geometry.nose_length_m == 0.52
    assert geometry.nose_cone_shape is NoseConeShape.LD_HAACK
    assert geometry.nose_controls.mid_radius_scale == 0.94
    assert geometry.nose_controls.shoulder_radius_scale == 1.02


def test_apply_body_preset_leaves_nose_alone():
    geometry = VehicleGeometry()
    nose_before = geometry.nose_length_m
    apply_component_preset(geometry, ComponentSelection.BODY_TUBE, "Minimum Diameter")
    assert geometry.body_length_m == 3.2
    assert geometry.body_diameter_m == 0.092
    assert geometry.wall_thickness_m == 0.0023
    assert geometry.body_controls.aft_radius_scale == 0.98
    assert geometry.nose_length_m == nose_before


def test_transition_aft_diameter_scales_with_body():
    geometry = VehicleGeometry(body_diameter_m=0.2)
    apply_component_preset(geometry, ComponentSelection.TRANSITION, "Boat Tail")
    assert geometry.transition_aft_diameter_m == pytest.approx(0.2 * 0.72)
    assert geometry.transition_shape is TransitionShape.CURVED
    assert geometry.transition_controls.mid_radius_scale == 0.86


def test_transition_aft_diameter_has_floor():
    geometry = VehicleGeometry(body_diameter_m=0.05)
    apply_component_preset(geometry, ComponentSelection.TRANSITION, "Aggressive Tail")
    assert geometry.transition_aft_diameter_m == 0.05


def test_fin_preset_replaces_controls():
    geometry = VehicleGeometry()
    apply_component_preset(geometry, ComponentSelection.FIN_SET, "Heavy Lift Canards")
    assert geometry.fin_shape is FinShape.AIRFOIL
    assert geometry.fin_root_chord_m == 0.38
    assert geometry.fin_controls.tip_le_offset_m == -0.01
    assert geometry.fin_controls.thickness_scale == 1.12


def test_fin_presets_do_not_share_controls():
    first = VehicleGeometry()
    second = VehicleGeometry()
    apply_component_preset(first, ComponentSelection.FIN_SET, "Sport Trapezoid")
    apply_component_preset(second, ComponentSelection.FIN_SET, "Sport Trapezoid")
    first.fin_controls.span_scale = 1.3
    assert second.fin_controls.span_scale == 1.0


def test_payload_preset():
    geometry = VehicleGeometry()
    apply_component_preset(geometry, ComponentSelection.PAYLOAD, "Science Probe")
    assert geometry.payload_length_m == 0.30
    assert geometry.payload_mass_kg == 1.35


def test_unknown_preset_raises():
    with pytest.raises(KeyError):
        apply_component_preset(VehicleGeometry(), ComponentSelection.PAYLOAD, "Nope")


def test_motor_mount_preset_on_geometry_raises():
    with pytest.raises(ValueError):
        apply_component_preset(VehicleGeometry(), ComponentSelection.MOTOR_MOUNT, "Twin Booster")


def test_library_notes_are_distinct():
    notes = {library_note(selection) for selection in ComponentSelection}
    assert len(notes) == len(ComponentSelection)
    assert library_note(ComponentSelection.BODY_TUBE).startswith("Body presets")


def test_preview_lift_never_below_half_body():
    for transition in (0.0, 0.05, 0.12, 0.4):
        geometry = VehicleGeometry(transition_length_m=transition)
        assert modeling_preview_lift_m(geometry) >= 0.5 * geometry.body_length_m


def test_preview_lift_is_half_body_with_long_transition():
    geometry = VehicleGeometry(body_length_m=2.5, transition_length_m=0.5)
    assert modeling_preview_lift_m(geometry) == pytest.approx(1.25)


def test_preview_lift_default_geometry_accounts_for_nozzle():
    assert modeling_preview_lift_m(VehicleGeometry()) == pytest.approx(1.255)