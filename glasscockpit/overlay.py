"""Text overlay on the primary flight display showing the GPS track."""

from __future__ import annotations

from .component import GaugeComponent
from .drawing import Airframe, Canvas


class PFDOverlay(GaugeComponent):
    """Transparent overlay labelling the heading rose with the GPS track."""

    def __init__(self, position: tuple[float, float] = (0.0, 0.0), *, parent=None) -> None:
        super().__init__(position, (200.0, 190.0), opaque=False, parent=parent)

    def render(self, canvas: Canvas, airframe: Airframe) -> None:
        super().render(canvas, airframe)
        canvas.color(255, 255, 255)
        canvas.set_font_size(4.0, 4.0)
        canvas.text(75, 7, "GPS")
        canvas.set_right_aligned(True)
        canvas.text(100, 7, f"{int(airframe.true_heading):3d}")
        canvas.set_right_aligned(False)