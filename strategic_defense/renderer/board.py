"""Board renderer.

Draws one filled square per cell, colored by its display classification.
Empty cells are tinted by tower pressure, predicted cells get an outline,
and predicted cells within threat range get a red corner marker.
"""

from typing import Dict, Optional, Set, Tuple

from PIL import Image, ImageDraw

from strategic_defense.components import Position
from strategic_defense.state import State
from strategic_defense.systems.battle import remaining_path
from strategic_defense.systems.difficulty import is_near_tower
from strategic_defense.types import CellType
from strategic_defense.utils.grid import all_positions, display_cell
from strategic_defense.utils.heatmap import pressure_map

DEFAULT_RESOLUTION = 640
DEFAULT_BORDER = 2

Color = Tuple[int, int, int, int]

CELL_COLORS: Dict[CellType, Color] = {
    CellType.EMPTY: (236, 240, 241, 255),
    CellType.START: (46, 204, 113, 255),
    CellType.END: (231, 76, 60, 255),
    CellType.TOWER: (52, 73, 94, 255),
    CellType.ENEMY: (155, 89, 182, 255),
}
PRESSURE_COLOR: Color = (241, 196, 15, 255)
PREDICTED_COLOR: Color = (52, 152, 219, 255)
THREAT_COLOR: Color = (192, 57, 43, 255)
GRID_COLOR: Color = (127, 140, 141, 255)


def blend(base: Color, overlay: Color, amount: float) -> Color:
    """Linear blend of two RGBA colors, ``amount`` in ``[0, 1]``."""
    amount = min(1.0, max(0.0, amount))
    r, g, b, a = (
        int(round(x + (y - x) * amount)) for x, y in zip(base, overlay)
    )
    return (r, g, b, a)


def render(
    state: State,
    resolution: int = DEFAULT_RESOLUTION,
    show_pressure: bool = True,
    predicted: Optional[Set[Position]] = None,
) -> Image.Image:
    """Render ``state`` as a PIL image.

    Args:
        state: Round to draw.
        resolution: Target image width in pixels; cells are square.
        show_pressure: Tint empty cells by tower pressure.
        predicted: Cells to outline. Defaults to the remaining predicted path.
    """
    cell_size: int = max(1, resolution // state.cols)
    img = Image.new(
        "RGBA", (state.cols * cell_size, state.rows * cell_size), GRID_COLOR
    )
    draw = ImageDraw.Draw(img)

    if predicted is None:
        predicted = set(remaining_path(state))
    pressure = pressure_map(state) if show_pressure else None
    marker = max(2, cell_size // 5)

    for pos in all_positions(state):
        x0 = pos.col * cell_size + DEFAULT_BORDER
        y0 = pos.row * cell_size + DEFAULT_BORDER
        x1 = (pos.col + 1) * cell_size - 1 - DEFAULT_BORDER
        y1 = (pos.row + 1) * cell_size - 1 - DEFAULT_BORDER
        cell_type = display_cell(state, pos)

        fill = CELL_COLORS[cell_type]
        if cell_type == CellType.EMPTY and pressure is not None:
            fill = blend(fill, PRESSURE_COLOR, float(pressure[pos.row, pos.col]) * 0.6)
        draw.rectangle([x0, y0, x1, y1], fill=fill)

        if pos in predicted:
            draw.rectangle(
                [x0, y0, x1, y1],
                outline=PREDICTED_COLOR,
                width=max(1, cell_size // 12),
            )
            # threat marker, top-right corner
            if is_near_tower(pos, state.towers):
                draw.rectangle([x1 - marker, y0, x1, y0 + marker], fill=THREAT_COLOR)

    return img


class BoardRenderer:
    resolution: int
    show_pressure: bool

    def __init__(
        self, resolution: int = DEFAULT_RESOLUTION, show_pressure: bool = True
    ):
        self.resolution = resolution
        self.show_pressure = show_pressure

    def render(self, state: State) -> Image.Image:
        return render(
            state, resolution=self.resolution, show_pressure=self.show_pressure
        )
