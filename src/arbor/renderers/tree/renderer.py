from __future__ import annotations

import pygame

from arbor.renderers import StatefulBaseRenderer
from arbor.renderers.canvas import Canvas, SurfaceCanvas
from arbor.renderers.tree.forest import Forest
from arbor.renderers.tree.provider import TreeStateProvider
from arbor.renderers.tree.state import TreeState


def paint_forest(canvas: Canvas, forest: Forest, zoom: float = 1.0) -> None:
    config = forest.config
    for segment in forest.segments(zoom=zoom):
        canvas.begin_path()
        canvas.set_line_width(segment.width)
        canvas.set_stroke_color(
            config.branch_color if segment.alive else config.dead_branch_color
        )
        canvas.move_to(segment.start)
        canvas.line_to(segment.end)
        canvas.stroke()


class Tree(StatefulBaseRenderer[TreeState]):
    def __init__(self, builder: TreeStateProvider) -> None:
        super().__init__(builder=builder)

    def real_process(
        self,
        window: pygame.Surface,
        clock: pygame.time.Clock,
    ) -> None:
        paint_forest(SurfaceCanvas(window), self.state.forest, zoom=self.state.zoom)
