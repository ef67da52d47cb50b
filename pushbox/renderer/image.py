"""Flat-colour image renderer.

Draws a board into a PIL RGBA image, one square cell per tile:

1. The whole board is filled with the floor colour.
2. Entities sharing a cell are drawn bottom layer first following
   ``KIND_LAYER`` (target spots under boxes and the player).
3. Walls fill their cell; target spots, boxes and the player are inset
   by a kind-specific margin so stacked entities stay visible.
4. Once victory is announced a banner is drawn across the board.

``ImageRenderer`` implements `pushbox.renderer.bridge.RenderBridge`, so a
session can drive it directly; ``render`` draws a ``State`` without a
session.
"""

import logging
from typing import Dict, List, Optional, Sequence, Tuple

from PIL import Image, ImageDraw

from pushbox.components import EntityKind, Position
from pushbox.renderer.bridge import EntityView, state_entities
from pushbox.state import State
from pushbox.types import EntityID

logger = logging.getLogger(__name__)

DEFAULT_RESOLUTION = 640

Color = Tuple[int, int, int, int]

FLOOR_COLOR: Color = (222, 214, 196, 255)
BANNER_COLOR: Color = (20, 20, 20, 200)
BANNER_TEXT_COLOR: Color = (255, 255, 255, 255)
VICTORY_TEXT = "You win"

KIND_COLORS: Dict[EntityKind, Color] = {
    EntityKind.WALL: (84, 78, 72, 255),
    EntityKind.TARGET_SPOT: (214, 92, 72, 255),
    EntityKind.BOX: (176, 120, 58, 255),
    EntityKind.PLAYER: (52, 106, 180, 255),
}
"""Fill colour per entity kind."""

KIND_LAYER: Dict[EntityKind, int] = {
    EntityKind.WALL: 0,
    EntityKind.TARGET_SPOT: 1,
    EntityKind.BOX: 2,
    EntityKind.PLAYER: 3,
}
"""Draw order inside a cell; lower layers are drawn first."""

KIND_INSET: Dict[EntityKind, float] = {
    EntityKind.WALL: 0.0,
    EntityKind.TARGET_SPOT: 0.3,
    EntityKind.BOX: 0.12,
    EntityKind.PLAYER: 0.2,
}
"""Margin around each kind's shape, as a fraction of the cell size."""


def render_entities(
    width: int,
    height: int,
    entities: Sequence[EntityView],
    resolution: int = DEFAULT_RESOLUTION,
    victory: bool = False,
) -> Image.Image:
    """Render a list of entities into a PIL Image.

    Args:
        width (int): Board width in tiles.
        height (int): Board height in tiles.
        entities (Sequence[EntityView]): Entities to draw; those outside the
            board rectangle are skipped.
        resolution (int): Output image width in pixels (height derived from aspect ratio).
        victory (bool): Draw the victory banner.

    Returns:
        Image.Image: Composited RGBA image of the board. An empty board renders
            as a single floor tile.
    """
    cols, rows = max(width, 1), max(height, 1)
    cell_size: int = max(resolution // cols, 1)
    render_width: int = cell_size * cols
    render_height: int = cell_size * rows
    target_width: int = resolution
    target_height: int = max((resolution * rows) // cols, 1)

    img = Image.new("RGBA", (render_width, render_height), FLOOR_COLOR)
    draw = ImageDraw.Draw(img)

    ordered = sorted(entities, key=lambda entity: KIND_LAYER[entity[1]])
    for _, kind, pos in ordered:
        if not (0 <= pos.x < width and 0 <= pos.y < height):
            continue
        inset = int(cell_size * KIND_INSET[kind])
        x0, y0 = pos.x * cell_size + inset, pos.y * cell_size + inset
        x1, y1 = (pos.x + 1) * cell_size - 1 - inset, (pos.y + 1) * cell_size - 1 - inset
        if kind == EntityKind.PLAYER:
            draw.ellipse((x0, y0, x1, y1), fill=KIND_COLORS[kind])
        else:
            draw.rectangle((x0, y0, x1, y1), fill=KIND_COLORS[kind])

    if victory:
        _draw_banner(img, cell_size)

    # Resize to target resolution if needed
    if (render_width, render_height) != (target_width, target_height):
        img = img.resize((target_width, target_height), resample=Image.NEAREST)

    return img


def _draw_banner(img: Image.Image, cell_size: int) -> None:
    overlay = Image.new("RGBA", img.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)
    top = max(img.height // 2 - cell_size // 2, 0)
    bottom = min(top + cell_size, img.height)
    draw.rectangle((0, top, img.width, bottom), fill=BANNER_COLOR)
    left, upper, right, lower = draw.textbbox((0, 0), VICTORY_TEXT)
    draw.text(
        (
            (img.width - (right - left)) // 2,
            (top + bottom - (lower - upper)) // 2,
        ),
        VICTORY_TEXT,
        fill=BANNER_TEXT_COLOR,
    )
    img.alpha_composite(overlay)


def render(state: State, resolution: int = DEFAULT_RESOLUTION) -> Image.Image:
    """Render a ``State`` into a PIL Image, with a banner once it is won."""
    return render_entities(
        state.width,
        state.height,
        state_entities(state),
        resolution=resolution,
        victory=state.win,
    )


class ImageRenderer:
    """Render bridge keeping its own view of the board.

    The view is only updated through bridge notifications, so a frame shows
    exactly what the session reported.
    """

    resolution: int

    def __init__(self, resolution: int = DEFAULT_RESOLUTION):
        self.resolution = resolution
        self.width = 0
        self.height = 0
        self.kinds: Dict[EntityID, EntityKind] = {}
        self.positions: Dict[EntityID, Position] = {}
        self.victory = False
        self.victory_count = 0

    def position_entity(self, eid: EntityID, x: int, y: int) -> None:
        if eid not in self.kinds:
            logger.warning("Ignoring position update for unknown entity %s", eid)
            return
        self.positions[eid] = Position(x, y)

    def request_full_redraw(
        self, width: int, height: int, entities: Sequence[EntityView]
    ) -> None:
        self.width, self.height = width, height
        self.kinds = {eid: kind for eid, kind, _ in entities}
        self.positions = {eid: pos for eid, _, pos in entities}
        self.victory = False

    def announce_victory(self) -> None:
        self.victory = True
        self.victory_count += 1

    def clear_victory(self) -> None:
        self.victory = False

    def entities(self) -> List[EntityView]:
        return [
            (eid, self.kinds[eid], self.positions[eid]) for eid in sorted(self.kinds)
        ]

    def frame(self, resolution: Optional[int] = None) -> Image.Image:
        """Render the current view."""
        return render_entities(
            self.width,
            self.height,
            self.entities(),
            resolution=resolution or self.resolution,
            victory=self.victory,
        )
