"""
Snake Game Renderer - Pygame-based presenter implementing PresenterInterface.
"""

import pygame
from typing import Optional, Tuple

from ..core.presenter_interface import PresenterInterface, RenderFrame, format_score
from ..game.state import Direction, Point


# Colors
BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
BG_COLOR = (25, 25, 35)
DARK_GRAY = (30, 30, 40)
GRID_COLOR = (50, 50, 60)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
FOOD_COLOR = (220, 50, 50)
TEXT_COLOR = (220, 220, 220)
DIM_TEXT_COLOR = (150, 150, 150)
ACCENT_COLOR = (100, 200, 100)

HUD_HEIGHT = 50


class SnakeRenderer(PresenterInterface):
    """
    Draws the game with Pygame.

    ``render()`` and the other notifications only record what to show;
    ``draw()`` paints it and is called once per display frame, so the idle
    screen keeps being drawn while the clock is stopped.
    """

    def __init__(self, grid_size: int = 20, cell_size: int = 30, show_grid: bool = True):
        """
        Initialize the renderer.

        Args:
            grid_size: Board side length in cells
            cell_size: Size of each grid cell in pixels
            show_grid: Draw subtle grid lines
        """
        self._grid_size = grid_size
        self._cell_size = cell_size
        self.show_grid = show_grid
        self._offset_x = 0
        self._offset_y = HUD_HEIGHT

        self.frame: Optional[RenderFrame] = None
        self.high_score: Optional[int] = None
        self.instructions_visible = True

        self._font = None
        self._font_small = None
        self._font_large = None

    @property
    def font(self):
        if self._font is None:
            self._font = pygame.font.Font(None, 36)
        return self._font

    @property
    def font_small(self):
        if self._font_small is None:
            self._font_small = pygame.font.Font(None, 28)
        return self._font_small

    @property
    def font_large(self):
        if self._font_large is None:
            self._font_large = pygame.font.Font(None, 72)
        return self._font_large

    def get_preferred_size(self) -> Tuple[int, int]:
        """Window size needed for the board plus the score bar."""
        board = self._grid_size * self._cell_size
        return (board, board + HUD_HEIGHT)

    # PresenterInterface

    def render(self, frame: RenderFrame) -> None:
        self.frame = frame
        # A finished run sets a high score even when it ended at zero
        if frame.just_reset and self.high_score is None:
            self.high_score = frame.high_score

    def update_high_score(self, high_score: int) -> None:
        self.high_score = high_score

    def set_instructions_visible(self, visible: bool) -> None:
        self.instructions_visible = visible

    # Drawing

    def draw(self, surface: pygame.Surface) -> None:
        """
        Paint the latest frame onto a surface.

        Args:
            surface: Pygame surface to draw on
        """
        surface.fill(BG_COLOR)
        self._draw_hud(surface)
        self._draw_board(surface)

        frame = self.frame
        if frame is not None:
            # Food is only on the board while a run is in progress
            if frame.running:
                pygame.draw.rect(surface, FOOD_COLOR, self._cell_rect(frame.food, 2), border_radius=4)

            for i, segment in enumerate(frame.snake):
                color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
                border_radius = 6 if i == 0 else 3
                pygame.draw.rect(surface, color, self._cell_rect(segment, 1), border_radius=border_radius)

            self._draw_eyes(surface, frame.snake[0], frame.direction)

        if self.instructions_visible:
            self._draw_instructions(surface)

    def _cell_rect(self, point: Point, inset: int) -> pygame.Rect:
        """Pixel rectangle for a 1-indexed grid cell, shrunk by ``inset``."""
        return pygame.Rect(
            self._offset_x + (point.x - 1) * self._cell_size + inset,
            self._offset_y + (point.y - 1) * self._cell_size + inset,
            self._cell_size - 2 * inset,
            self._cell_size - 2 * inset,
        )

    def _draw_hud(self, surface: pygame.Surface):
        """Score on the left, high score on the right once there is one."""
        score = self.frame.score if self.frame is not None else 0
        score_text = self.font.render(format_score(score), True, TEXT_COLOR)
        surface.blit(score_text, score_text.get_rect(midleft=(12, HUD_HEIGHT // 2)))

        if self.high_score is not None:
            board_width = self._grid_size * self._cell_size
            high_text = self.font.render(format_score(self.high_score), True, ACCENT_COLOR)
            surface.blit(high_text, high_text.get_rect(midright=(board_width - 12, HUD_HEIGHT // 2)))

    def _draw_board(self, surface: pygame.Surface):
        board = self._grid_size * self._cell_size
        pygame.draw.rect(surface, DARK_GRAY, pygame.Rect(self._offset_x, self._offset_y, board, board))

        if not self.show_grid:
            return

        for i in range(self._grid_size + 1):
            x = self._offset_x + i * self._cell_size
            pygame.draw.line(surface, GRID_COLOR, (x, self._offset_y), (x, self._offset_y + board))
            y = self._offset_y + i * self._cell_size
            pygame.draw.line(surface, GRID_COLOR, (self._offset_x, y), (self._offset_x + board, y))

    def _draw_eyes(self, surface: pygame.Surface, head: Point, direction: Direction):
        """Draw eyes on the snake's head."""
        cx = self._offset_x + (head.x - 1) * self._cell_size + self._cell_size // 2
        cy = self._offset_y + (head.y - 1) * self._cell_size + self._cell_size // 2

        eye_radius = max(2, self._cell_size // 8)
        eye_offset = self._cell_size // 4

        # Position eyes based on direction
        if direction == Direction.RIGHT:
            positions = [(cx + 2, cy - eye_offset), (cx + 2, cy + eye_offset)]
        elif direction == Direction.DOWN:
            positions = [(cx - eye_offset, cy + 2), (cx + eye_offset, cy + 2)]
        elif direction == Direction.LEFT:
            positions = [(cx - 2, cy - eye_offset), (cx - 2, cy + eye_offset)]
        else:  # UP
            positions = [(cx - eye_offset, cy - 2), (cx + eye_offset, cy - 2)]

        for pos in positions:
            pygame.draw.circle(surface, WHITE, pos, eye_radius)
            pygame.draw.circle(surface, BLACK, pos, eye_radius // 2)

    def _draw_instructions(self, surface: pygame.Surface):
        """Title and start prompt shown while idle."""
        board = self._grid_size * self._cell_size
        center_x = self._offset_x + board // 2
        center_y = self._offset_y + board // 2

        title = self.font_large.render("SNAKE", True, ACCENT_COLOR)
        surface.blit(title, title.get_rect(center=(center_x, center_y - 60)))

        prompt = self.font_small.render("Press SPACE to start", True, DIM_TEXT_COLOR)
        surface.blit(prompt, prompt.get_rect(center=(center_x, center_y + 20)))
