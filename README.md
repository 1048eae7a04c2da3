# rocketlab

Building blocks for a model-rocket design tool. The package describes a vehicle and checks simulation inputs. It reads live surface weather and offers a library of component presets. Only the standard library is used.

## Modules

- `rocketlab.mathtypes`: the immutable value types `Vector3` and `Quaternion`. Both offer `magnitude`, `normalized`, addition, scalar multiplication and `is_finite`. `Vector3` also supports subtraction. `rotate_vector(quaternion, vector)` rotates a vector by a quaternion.
- `rocketlab.weather`:
  - Types: `LaunchSite`, `SurfaceWeather`, `Environment`, `WeatherDataSource` (`MANUAL`, `OPEN_METEO_READY`, `OPEN_WEATHER_MAP_READY`) and `WeatherFetchInfo`.
  - Parsers: `parse_open_meteo_weather` and `parse_open_weather_map_weather`. Open-Meteo wind speeds are converted from km/h to m/s. Humidity is clamped to 0–100 and wind direction is wrapped into 0–360. A missing gust value falls back to the wind speed.
  - Fetching: `weather_query_url` builds the request URL. `http_get` fetches a URL with `urllib`. `fetch_surface_weather` fetches and parses the weather. `refresh_environment_weather` stores the fetched weather on an `Environment`.
  - Errors: every failure raises `WeatherError`.
- `rocketlab.vehicle`: dataclasses for the vehicle.
  - Propulsion: `Motor`, `MountedMotor` and `MotorCluster`, which has `motor_count()`.
  - Shape enums: `NoseConeShape`, `FinShape` and `TransitionShape`.
  - Shape controls: `NoseControls`, `BodyControls`, `TransitionControls` and `FinControls`.
  - Whole vehicle and state: `VehicleGeometry`, `VehicleModel` and `FlightState`.
- `rocketlab.validation`:
  - Checks: `validate_vehicle_model`, `validate_environment`, `validate_flight_state` and `validate_simulation_inputs`. The last one checks the time step, then the vehicle, the environment and the state, in that order.
  - Errors: a failed check raises `ValidationError`, a `ValueError` subclass. It carries a `ValidationErrorCode` in `.code` and the text in `.message`.
- `rocketlab.motors`:
  - Editor state: `MotorEditorState`. Its `clamp(body_diameter_m)` brings the fields back into range and replaces non-finite values with defaults.
  - Project settings: `ProjectMotorSettings`, with `derive_project_motor_settings` and `apply_project_motor_settings`.
  - Layout: `build_cluster_layout` places motors evenly on a ring, each canted outwards by the cant angle.
  - Presets: `motor_preset_names()` and `apply_motor_preset(editor, name)`. The presets are "Single Sustainer", "Twin Booster", "3-Motor Cluster", "4-Motor Cluster" and "5-Motor Ring".
- `rocketlab.presets`:
  - Selection: `ComponentSelection`, whose members have `display_name()`.
  - Preset library: `component_preset_names(selection)` lists the presets for a component. `apply_component_preset(geometry, selection, name)` edits a `VehicleGeometry` in place. It raises `KeyError` for an unknown name, and `ValueError` for the motor mount, whose presets go through `apply_motor_preset`. `library_note(selection)` gives the note shown under the preset list.
  - Preview: `modeling_preview_lift_m(geometry)` gives the height to raise the model so that neither body nor nozzle dips below ground.

## Install

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Example

```python
from rocketlab.weather import LaunchSite, WeatherDataSource, weather_query_url, parse_open_meteo_weather
from rocketlab.motors import MotorEditorState, apply_motor_preset, build_cluster_layout
from rocketlab.vehicle import MotorCluster, VehicleModel, FlightState
from rocketlab.validation import ValidationError, validate_flight_state

site = LaunchSite(latitude_deg=45.0, longitude_deg=9.0, elevation_m=120.0)
print(weather_query_url(site, WeatherDataSource.OPEN_METEO_READY))

weather = parse_open_meteo_weather(
    '{"current": {"temperature_2m": 12.5, "relative_humidity_2m": 60, '
    '"surface_pressure": 1010.2, "wind_speed_10m": 18.0, "wind_direction_10m": 270}}'
)
print(weather.wind_speed_mps)  # 5.0

editor = MotorEditorState()
apply_motor_preset(editor, "3-Motor Cluster")
vehicle = VehicleModel(cluster=MotorCluster(build_cluster_layout(editor)))
print(vehicle.cluster.motor_count())  # 3

try:
    validate_flight_state(FlightState(mass_kg=0.5), vehicle)
except ValidationError as error:
    print(error.code)  # ValidationErrorCode.INVALID_MASS
```

OpenWeatherMap lookups read the API key from the `OPENWEATHERMAP_API_KEY` environment variable. Without it, `weather_query_url` raises `WeatherError`.

## What this package does not do

The package contains no flight integrator. It has nothing that steps a `FlightState` forward in time, and it does not record trajectories or replay them. It has no graphical modeling or monitoring screens and no command-line program. It cannot save or load projects, and it does not export reports. It provides the data types, checks, weather access and presets that such tools would build on.