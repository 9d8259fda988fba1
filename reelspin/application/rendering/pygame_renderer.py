# reelspin/application/rendering/pygame_renderer.py
import logging
from typing import Dict, Any, Tuple

import pygame as pg

from reelspin.application.game.render_snapshot import RenderSnapshot
from reelspin.application.game.slot_game import SlotGame


TILE_COLOR = (46, 52, 64)
TILE_BORDER_COLOR = (216, 222, 233)
TEXT_COLOR = (236, 239, 244)
WIN_FRAME_COLOR = (235, 203, 139)
BUTTON_COLOR = (191, 97, 106)


def rgb(value: int) -> Tuple[int, int, int]:
    return (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF


class ReelLayout:
    """
    Screen placement of the reel window: centred, one tile high,
    visible_count tiles wide.
    """
    def __init__(self, width: int, height: int, tile_size: float, visible_count: int):
        self.width = width
        self.height = height
        self.tile_size = tile_size
        self.reel_x = (width - tile_size * visible_count) / 2
        self.reel_y = (height - tile_size) / 2
        self.window = pg.Rect(int(self.reel_x), int(self.reel_y),
                              int(tile_size * visible_count), int(tile_size))
        self.win_frame_center = (width / 2, self.reel_y + tile_size / 2)
        self.button = pg.Rect(int(width / 2 - 60), int(self.reel_y + tile_size + 40), 120, 60)


class PygameRenderer:
    """
    Draws RenderSnapshots with plain pygame shapes and text.
    """
    def __init__(self, surface: "pg.Surface", layout: ReelLayout, display_config: Dict[str, Any]):
        self.surface = surface
        self.layout = layout
        self.background = rgb(display_config.get("background_color", 0x111111))
        self.message_color = rgb(display_config.get("message_color", 0x176969))
        self.tile_font = pg.font.SysFont("Arial", 20)
        self.message_font = pg.font.SysFont("Arial", display_config.get("message_font_size", 50))

    def draw(self, snapshot: RenderSnapshot):
        self.surface.fill(self.background)
        self._draw_tiles(snapshot)
        self._draw_win_frame(snapshot)
        self._draw_badge(snapshot)
        self._draw_message(snapshot)
        self._draw_button(snapshot)

    def _draw_tiles(self, snapshot: RenderSnapshot):
        layout = self.layout
        size = int(snapshot.tile_size)
        self.surface.set_clip(layout.window)
        for tile in snapshot.tiles:
            rect = pg.Rect(int(layout.reel_x + tile.x), int(layout.reel_y), size, size)
            if not rect.colliderect(layout.window):
                continue
            self._draw_symbol(rect, tile.symbol)
        self.surface.set_clip(None)

    def _draw_symbol(self, rect: "pg.Rect", symbol: str):
        pg.draw.rect(self.surface, TILE_COLOR, rect)
        pg.draw.rect(self.surface, TILE_BORDER_COLOR, rect, 2)
        label = self.tile_font.render(symbol.replace("symbol_", ""), True, TEXT_COLOR)
        self.surface.blit(label, label.get_rect(center=rect.center))

    def _draw_win_frame(self, snapshot: RenderSnapshot):
        if not snapshot.win_frame_visible:
            return
        side = int(snapshot.tile_size * snapshot.win_frame_scale)
        frame = pg.Rect(0, 0, side, side)
        frame.center = (int(self.layout.win_frame_center[0]), int(self.layout.win_frame_center[1]))
        pg.draw.rect(self.surface, WIN_FRAME_COLOR, frame, 4)

    def _draw_badge(self, snapshot: RenderSnapshot):
        if not snapshot.winning_symbol_visible or snapshot.winning_symbol is None:
            return
        x, y, w, h = snapshot.winning_symbol_bounds
        self._draw_symbol(pg.Rect(int(x), int(y), int(w), int(h)), snapshot.winning_symbol)

    def _draw_message(self, snapshot: RenderSnapshot):
        if not snapshot.message_visible or not snapshot.message_text:
            return
        text = self.message_font.render(snapshot.message_text, True, self.message_color)
        self.surface.blit(text, (int(snapshot.message_position[0]), int(snapshot.message_position[1])))

    def _draw_button(self, snapshot: RenderSnapshot):
        pg.draw.ellipse(self.surface, BUTTON_COLOR, self.layout.button)
        caption = "STOP" if snapshot.state == "SPINNING" else "SPIN"
        label = self.tile_font.render(caption, True, TEXT_COLOR)
        self.surface.blit(label, label.get_rect(center=self.layout.button.center))


def run_window(game: SlotGame, display_config: Dict[str, Any]) -> int:
    """
    Open a window and play until it is closed.

    A click on the button or SPACE presses the spin control. The frame
    delta measured by pygame's clock drives the game's scheduler.

    Returns:
        Number of frames shown
    """
    logger = logging.getLogger("application.rendering.pygame")

    pg.init()
    try:
        width = display_config.get("width", 1280)
        height = display_config.get("height", 720)
        frame_rate = display_config.get("frame_rate", 60)

        screen = pg.display.set_mode((width, height))
        pg.display.set_caption("reelspin")

        layout = ReelLayout(width, height, game.config.tile_size, game.config.visible_count)
        renderer = PygameRenderer(screen, layout, display_config)
        clock = pg.time.Clock()

        frames = 0
        running = True
        while running:
            for event in pg.event.get():
                if event.type == pg.QUIT:
                    running = False
                elif event.type == pg.KEYDOWN and event.key == pg.K_ESCAPE:
                    running = False
                elif event.type == pg.KEYDOWN and event.key == pg.K_SPACE:
                    game.press_spin()
                elif event.type == pg.MOUSEBUTTONDOWN and layout.button.collidepoint(event.pos):
                    game.press_spin()

            game.advance(clock.tick(frame_rate))
            renderer.draw(game.snapshot())
            pg.display.flip()
            frames += 1

        logger.info(f"Window closed after {frames} frames")
        return frames
    finally:
        pg.quit()
