# glasscockpit

Boeing 777 style glass cockpit gauge components described as plain geometry.

Each component draws onto a `Canvas`, which records every primitive, colour,
line width, transform and piece of text rather than talking to a graphics
library. The recorded output can be inspected, tested, or handed to any
renderer you like.

## Modules

- `glasscockpit.drawing`
  - `Canvas`: keeps a modelview matrix stack (`push`, `pop`,
    `load_identity`, `translate`, `rotate`, `scale`, `transform_point`),
    the current colour, line width, font size and alignment, and records
    each `draw(primitive, vertices)` as a `DrawCall` in `canvas.calls` and
    each `text(x, y, text)` as a `TextItem` in `canvas.text_items`.
    `texts()` lists the strings drawn so far. `viewport` and `ortho` store
    the last viewport rectangle and projection.
  - `Primitive`: how vertices are assembled (`LINES`, `LINE_STRIP`,
    `LINE_LOOP`, `TRIANGLE_FAN`, `POLYGON`, `QUADS` and others).
  - `Airframe`: a dataclass holding the flight data the gauges read:
    attitude, altitude, airspeed, heading, wind, flight director set points
    and engine values.
- `glasscockpit.circle`: `CircleEvaluator` builds a vertex list along an arc
  (0 degrees up, angles clockwise), always including both ends, and holds at
  most 1024 vertices.
- `glasscockpit.component`: `GaugeComponent`, the base of every drawable
  part. It works out its pixel placement from its parent's position,
  `units_per_pixel` and `scale`, answers `click_test`, and turns a click
  inside it into physical coordinates via `handle_mouse_button`.
- `glasscockpit.gauge`: `Gauge`, a container that places and renders its
  components, forwards clicks to them, can draw a cyan outline, and can be
  configured from an XML `<Gauge>` element with `init_from_xml(element,
  preferences)`. The preferences mapping must hold `DefaultGaugeScale`,
  `Zoom` and (unless the element gives `<UnitsPerPixel>`) `UnitsPerPixel`.
  Other child elements are kept as text in `gauge.options`.
- Components:
  - `glasscockpit.altitude_ticker.AltitudeTicker`, with `tens_digits(altitude)`
    giving the rolling tens column and its shift.
  - `glasscockpit.horizon.ArtificialHorizon`
  - `glasscockpit.flight_director.FlightDirector`
  - `glasscockpit.heading.HeadingIndicator`
  - `glasscockpit.overlay.PFDOverlay`
  - `glasscockpit.bargraph.GenericBargraph`
  - `glasscockpit.dials.MarkedDial` and `glasscockpit.dials.PieDial`

  `GenericBargraph`, `MarkedDial` and `PieDial` take a `data_source`: either a
  callable taking an `Airframe` or the name of one of its attributes, such as
  `"engine_egt"`. Values are clamped to `minimum`..`maximum`, and a non-zero
  maximum above the minimum is required.

## Example

```python
from glasscockpit.drawing import Airframe, Canvas
from glasscockpit.gauge import Gauge
from glasscockpit.altitude_ticker import AltitudeTicker
from glasscockpit.dials import PieDial

gauge = Gauge(size=(200.0, 190.0))
gauge.add_component(AltitudeTicker((156.0, 90.0)))
gauge.add_component(
    PieDial((48.0, 35.0), data_source="engine_egt",
            minimum=0.0, maximum=1000.0, min_yellow=850.0, min_red=925.0)
)
gauge.set_units_per_pixel(0.2)

canvas = Canvas()
gauge.render(canvas, Airframe(altitude_msl_feet=12340.0, engine_egt=700.0))
print(canvas.texts())
print(len(canvas.calls), "primitives drawn")
```

## What it does not do

The package draws nothing on a screen: it only records geometry and text on a
`Canvas`. It opens no window, loads no fonts and reads no live flight data.
You fill in an `Airframe` yourself. It has no ready-made display assemblies
such as a full primary flight display, engine page or navigation map, and no
speed or altitude tapes. Compose those from `Gauge` and the components above.

## Installing

```
pip install .
```

Run the tests with `pip install .[test]` followed by `pytest`.