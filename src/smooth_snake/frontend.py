"""Minimal pygame renderer and host loop."""

from __future__ import annotations

import logging

import pygame  # type: ignore

from smooth_snake.config import GameConfig
from smooth_snake.controls import InputEvent
from smooth_snake.engine import GameState, Snapshot
from smooth_snake.session import GameSession

logger = logging.getLogger(__name__)

CELL_SIZE = 24
HEADER_HEIGHT = 32

BG = (20, 20, 24)
SNAKE = (80, 200, 80)
HEAD = (120, 230, 120)
FOOD = (200, 70, 70)
TEXT = (220, 220, 230)

KEY_EVENTS: dict[int, InputEvent] = {
    pygame.K_UP: InputEvent.MOVE_UP,
    pygame.K_DOWN: InputEvent.MOVE_DOWN,
    pygame.K_LEFT: InputEvent.MOVE_LEFT,
    pygame.K_RIGHT: InputEvent.MOVE_RIGHT,
    pygame.K_p: InputEvent.TOGGLE_PAUSE,
    pygame.K_r: InputEvent.RESTART,
}


def draw(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    """Render one snapshot. Reads only; never touches the session."""
    screen.fill(BG)

    if snap.food is not None:
        row, col = snap.food
        pygame.draw.rect(
            screen, FOOD,
            pygame.Rect(col * CELL_SIZE, HEADER_HEIGHT + row * CELL_SIZE, CELL_SIZE, CELL_SIZE),
        )

    for i, (row, col) in enumerate(snap.interpolated()):
        rect = pygame.Rect(
            round(col * CELL_SIZE), round(HEADER_HEIGHT + row * CELL_SIZE),
            CELL_SIZE, CELL_SIZE,
        )
        pygame.draw.rect(screen, HEAD if i == 0 else SNAKE, rect)

    status = f"Score: {snap.score}   High: {snap.high_score}"
    if snap.state == GameState.PAUSED:
        status += "   PAUSED (P)"
    elif snap.state == GameState.GAME_OVER:
        status += "   GAME OVER (R to restart)"
    screen.blit(font.render(status, True, TEXT), (8, 8))


def run(config: GameConfig | None = None) -> None:
    """Open a window and play until it is closed."""
    config = config or GameConfig()
    pygame.init()
    try:
        screen = pygame.display.set_mode(
            (config.cols * CELL_SIZE, config.rows * CELL_SIZE + HEADER_HEIGHT),
        )
        pygame.display.set_caption("Smooth Snake")
        font = pygame.font.SysFont(None, 24)
        clock = pygame.time.Clock()
        session = GameSession(config, now_ms=pygame.time.get_ticks())

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key in KEY_EVENTS:
                    session.handle(KEY_EVENTS[event.key], pygame.time.get_ticks())

            draw(screen, font, session.frame(pygame.time.get_ticks()))
            pygame.display.flip()
            clock.tick(max(1, 1000 // config.frame_ms))
    finally:
        pygame.quit()
        logger.info("Window closed.")
