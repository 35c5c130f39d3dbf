import pygame
from typing import List, Optional, Tuple
from maze_carver.core.grid import Grid

Segment = Tuple[Tuple[int, int], Tuple[int, int]]

class MazeWindow:
    COLOR_BG = (10, 10, 10)
    COLOR_WALL = (200, 200, 200)
    COLOR_CARVED = (60, 100, 160)# Blue tint

    def __init__(self, grid: Grid, generator=None, seed: Optional[int] = None, width=1280, height=720):
        self.grid = grid
        self.generator = generator
        self.seed = seed
        self.screen_width = width
        self.screen_height = height

        # Camera
        self.cell_size = 20.0  # Pixels per cell
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.zoom_speed = 1.1

        # Carving steps applied per frame
        self.steps_per_frame = 5

        self.font = None
        self.running = True
        self.clock = None
        self.surface = None
        self.gen_iter = None
        self.gen_finished = generator is None

    def fit_to_screen(self):
        """Auto-adjust zoom and pan to fit the entire grid on screen with padding."""
        padding = 40
        available_w = self.screen_width - (padding * 2)
        available_h = self.screen_height - (padding * 2)

        zoom_x = available_w / self.grid.width
        zoom_y = available_h / self.grid.height

        # Taking minimum zoom to fit both dimensions
        self.cell_size = min(zoom_x, zoom_y)

        # Center
        total_maze_w = self.grid.width * self.cell_size
        total_maze_h = self.grid.height * self.cell_size

        self.offset_x = (self.screen_width - total_maze_w) / 2
        self.offset_y = (self.screen_height - total_maze_h) / 2

    def world_to_screen(self, wx, wy):
        sx = wx * self.cell_size + self.offset_x
        sy = wy * self.cell_size + self.offset_y
        return sx, sy

    def screen_to_world(self, sx, sy):
        wx = (sx - self.offset_x) / self.cell_size
        wy = (sy - self.offset_y) / self.cell_size
        return int(wx), int(wy)

    def wall_segments(self, x: int, y: int) -> List[Segment]:
        """
        Wall lines of cell (x, y) in cell units. Each cell owns its South and
        East walls; North and West are only drawn on the outer border.
        """
        cell = self.grid.get(x, y)
        segments = []
        if not cell & Grid.SOUTH:
            segments.append(((x, y + 1), (x + 1, y + 1)))
        if not cell & Grid.EAST:
            segments.append(((x + 1, y), (x + 1, y + 1)))
        if y == 0 and not cell & Grid.NORTH:
            segments.append(((x, y), (x + 1, y)))
        if x == 0 and not cell & Grid.WEST:
            segments.append(((x, y), (x, y + 1)))
        return segments

    def init_window(self):
        pygame.init()
        pygame.display.set_caption(f"Maze Carver - {self.grid.width}x{self.grid.height} (seed {self.seed})")
        self.surface = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("Consolas", 16)

        # Initial fit
        self.fit_to_screen()

    def handle_input(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_f:
                    self.fit_to_screen()

            elif event.type == pygame.VIDEORESIZE:
                self.screen_width, self.screen_height = event.w, event.h

            elif event.type == pygame.MOUSEWHEEL:
                # Zoom towards mouse
                mx, my = pygame.mouse.get_pos()
                wx = (mx - self.offset_x) / self.cell_size
                wy = (my - self.offset_y) / self.cell_size

                if event.y > 0:
                    self.cell_size *= self.zoom_speed
                else:
                    self.cell_size /= self.zoom_speed
                self.cell_size = max(1.0, min(200.0, self.cell_size))

                # Keep mouse at same world coord
                self.offset_x = mx - wx * self.cell_size
                self.offset_y = my - wy * self.cell_size

            elif event.type == pygame.MOUSEMOTION:
                if pygame.mouse.get_pressed()[0] or pygame.mouse.get_pressed()[2]: # Left or Right drag
                    self.offset_x += event.rel[0]
                    self.offset_y += event.rel[1]

    def draw_grid(self):
        self.surface.fill(self.COLOR_BG)

        # Culling: Calculate visible cell range
        start_x = max(0, int((-self.offset_x) / self.cell_size))
        start_y = max(0, int((-self.offset_y) / self.cell_size))
        end_x = min(self.grid.width, int((self.screen_width - self.offset_x) / self.cell_size) + 1)
        end_y = min(self.grid.height, int((self.screen_height - self.offset_y) / self.cell_size) + 1)

        size = int(self.cell_size) + 1
        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                if self.grid.get(x, y):
                    px, py = self.world_to_screen(x, y)
                    pygame.draw.rect(self.surface, self.COLOR_CARVED, (int(px), int(py), size, size))

        for y in range(start_y, end_y):
            for x in range(start_x, end_x):
                for a, b in self.wall_segments(x, y):
                    pygame.draw.line(self.surface, self.COLOR_WALL,
                                     self.world_to_screen(*a), self.world_to_screen(*b), 1)

    def draw_hud(self):
        fps = int(self.clock.get_fps())
        status = "Done" if self.gen_finished else "Carving"
        info = [
            f"FPS: {fps}",
            f"Size: {self.grid.width}x{self.grid.height}",
            f"Seed: {self.seed}",
            f"Zoom: {self.cell_size:.2f}",
            f"Status: {status}",
        ]

        for i, text in enumerate(info):
            lbl = self.font.render(text, True, (255, 255, 255))
            self.surface.blit(lbl, (10, 10 + i * 20))

    def step_generator(self, steps: int):
        try:
            for _ in range(steps):
                next(self.gen_iter)
        except StopIteration:
            self.gen_finished = True

    def finish_generation(self):
        """Carves whatever is left if the window was closed early."""
        if self.gen_iter is not None:
            for _ in self.gen_iter:
                pass
            self.gen_finished = True

    def run_loop(self):
        if self.generator and self.gen_iter is None:
            self.generator.progress_interval = 1
            self.gen_iter = self.generator.run()

        while self.running:
            self.handle_input()

            if self.gen_iter is not None and not self.gen_finished:
                self.step_generator(self.steps_per_frame)

            self.draw_grid()
            self.draw_hud()
            pygame.display.flip()
            self.clock.tick(60)

        pygame.quit()
