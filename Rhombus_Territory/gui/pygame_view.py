"""Pygame-based board renderer and input helper."""

import math
from array import array

try:
    from Board import Occupant
    from Territorygame import Turn
    from engine.commands import PlaceAt, ResetBoard
except ImportError:
    from Rhombus_Territory.Board import Occupant
    from Rhombus_Territory.Territorygame import Turn
    from Rhombus_Territory.engine.commands import PlaceAt, ResetBoard


def cell_origin(r, c, tile, center_x, top):
    """Top-left pixel of tile (r, c); each row shifts half a tile left of the previous one."""
    return center_x + c * tile - (r + 1) * tile / 2, top + r * tile


def cell_at(x, y, tile, center_x, top):
    """Inverse of cell_origin: the (r, c) whose tile contains pixel (x, y)."""
    r = math.floor((y - top) / tile)
    c = math.floor((x - center_x + (r + 1) * tile / 2) / tile)
    return r, c


class PygameView:
    # --- Constants ---
    COLOR_BACKGROUND = (245, 240, 230)
    COLOR_GRID = (0, 0, 0)
    COLOR_PANEL = (60, 40, 20)
    COLOR_TEXT = (230, 230, 230)
    COLOR_OWNER = {
        Occupant.PLAYER_1: (238, 68, 0),
        Occupant.PLAYER_2: (0, 68, 238),
    }
    COLOR_ESTIMATE = {
        Occupant.PLAYER_1: (170, 51, 34),
        Occupant.PLAYER_2: (34, 51, 170),
    }

    PANEL_HEIGHT = 80
    BEEP_HZ = 880
    BEEP_MS = 60

    def __init__(self, board_rows, window_size=800, sound=True, logger=print):
        import pygame

        self.board_rows = board_rows
        self.logger = logger
        self._pygame = pygame

        pygame.init()
        self.screen = pygame.display.set_mode((window_size, window_size), pygame.RESIZABLE)
        pygame.display.set_caption("Rhombus Territory")

        # Fonts
        self.font_large = pygame.font.Font(None, 48)
        self.font_medium = pygame.font.Font(None, 32)

        self.beep = self._build_beep() if sound else None

    def _build_beep(self):
        pygame = self._pygame
        rate = 22050
        try:
            pygame.mixer.init(frequency=rate, size=-16, channels=1)
        except pygame.error as exc:
            self.logger(f"Sound disabled: {exc}")
            return None
        count = rate * self.BEEP_MS // 1000
        samples = array(
            "h",
            (int(8000 * math.sin(2 * math.pi * self.BEEP_HZ * i / rate)) for i in range(count)),
        )
        return pygame.mixer.Sound(buffer=samples.tobytes())

    def play_beep(self):
        if self.beep is not None:
            self.beep.play()

    # --- Layout ---
    def _layout(self):
        """Tile size, horizontal center, and top edge of the board area."""
        width, height = self.screen.get_size()
        board_height = max(1, height - self.PANEL_HEIGHT)
        tile = board_height / self.board_rows
        return tile, width / 2, self.PANEL_HEIGHT

    def to_cell(self, x, y):
        """Screen pixel to logical (r, c); None above the board."""
        tile, center_x, top = self._layout()
        if y < top:
            return None
        return cell_at(x, y, tile, center_x, top)

    # --- Drawing ---
    def _draw_text(self, text, font, color, center_pos):
        text_surface = font.render(text, True, color)
        text_rect = text_surface.get_rect(center=center_pos)
        self.screen.blit(text_surface, text_rect)

    def _draw_cells(self, cells):
        pygame = self._pygame
        tile, center_x, top = self._layout()
        for cell in cells:
            x, y = cell_origin(cell.r, cell.c, tile, center_x, top)
            pygame.draw.rect(self.screen, self.COLOR_GRID, pygame.Rect(x, y, tile, tile), 1)
            if cell.occupant is Occupant.EMPTY:
                continue
            if cell.occupant in self.COLOR_OWNER:
                center = (x + tile / 2, y + tile / 2)
                pygame.draw.circle(self.screen, self.COLOR_OWNER[cell.occupant], center, tile / 3)
            else:
                raise ValueError(f"Cannot draw occupant {cell.occupant!r}")

    def _draw_info_panel(self, snapshot):
        width, _ = self.screen.get_size()
        panel_rect = self._pygame.Rect(0, 0, width, self.PANEL_HEIGHT)
        self._pygame.draw.rect(self.screen, self.COLOR_PANEL, panel_rect)

        s = snapshot.scores
        entries = [
            (f"P1: {round(s.p1score * 100)}", self.COLOR_OWNER[Occupant.PLAYER_1]),
            (f"P1E: {s.p1estimate:.2f}", self.COLOR_ESTIMATE[Occupant.PLAYER_1]),
            (f"P2: {round(s.p2score * 100)}", self.COLOR_OWNER[Occupant.PLAYER_2]),
            (f"P2E: {s.p2estimate:.2f}", self.COLOR_ESTIMATE[Occupant.PLAYER_2]),
        ]
        for i, (text, color) in enumerate(entries):
            col_x = 16 + (i // 2) * 160
            row_y = 22 + (i % 2) * 36
            surf = self.font_medium.render(text, True, color)
            self.screen.blit(surf, (col_x, row_y - surf.get_height() / 2))

        if snapshot.current is Turn.FINISHED:
            msg = "Game Over"
        elif snapshot.current is Turn.PLAYER_1:
            msg = "Your move"
        else:
            msg = "Opponent thinking"
        self._draw_text(msg, self.font_large, self.COLOR_TEXT, (width - 180, self.PANEL_HEIGHT / 2))

    def render(self, snapshot):
        self.screen.fill(self.COLOR_BACKGROUND)
        self._draw_cells(snapshot.cells)
        self._draw_info_panel(snapshot)
        self._pygame.display.flip()

    # --- Input ---
    def poll(self):
        """Commands that arrived since the last poll, or None once the window is closed."""
        pygame = self._pygame
        commands = []
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return None
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                commands.append(PlaceAt(*event.pos))
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_r:
                commands.append(ResetBoard())
            elif event.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode(event.size, pygame.RESIZABLE)
        pygame.time.delay(10)
        return commands

    def close(self):
        self._pygame.quit()
