import argparse
import logging
import sys

import pygame

from .audio import AudioCues, ToneSynth
from .clock import ClockState, FrameTimer, GameClock, GameListener, Speed
from .collision import CollisionKind
from .config import (
    CANVAS_SIZE,
    DEFAULT_SPEED,
    FRAME_RATE,
    GRID_SIZE,
    HIGH_SCORE_FILE,
    HUD_BASE_SIZE,
    HUD_HEIGHT,
    SAMPLE_RATE,
    SOUND_ENABLED,
    SPEEDS,
    TILE_SIZE,
    WINDOW_HEIGHT,
    WINDOW_WIDTH,
)
from .grid import Direction, Grid
from .render import Renderer, draw_hud, draw_overlay, get_ui_font
from .storage import HighScoreStore

logger = logging.getLogger(__name__)

KEY_TO_DIRECTION = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}
KEY_TO_SPEED = {
    pygame.K_1: Speed.SLOW,
    pygame.K_2: Speed.NORMAL,
    pygame.K_3: Speed.FAST,
}
DEATH_MESSAGES = {
    CollisionKind.WALL: "You hit the wall",
    CollisionKind.SELF: "You bit yourself",
}


class ScoreBoard(GameListener):
    """UI-side mirror of the numbers shown in the HUD."""

    def __init__(self, high_score=0):
        self.score = 0
        self.high_score = high_score
        self.final_score = None
        self.collision = None

    def on_game_started(self):
        self.final_score = None
        self.collision = None

    def on_score_changed(self, score):
        self.score = score

    def on_high_score_changed(self, score):
        self.high_score = score

    def on_game_over(self, final_score, collision):
        self.final_score = final_score
        self.collision = collision


def handle_key(key, clock, audio, speed):
    """Apply one key press; returns the speed to use for the next start."""
    if key in KEY_TO_DIRECTION:
        clock.turn(KEY_TO_DIRECTION[key])
    elif key in (pygame.K_p, pygame.K_SPACE):
        clock.toggle_pause()
    elif key == pygame.K_m:
        audio.toggle_mute(clock.is_running)
    elif key in KEY_TO_SPEED and not clock.is_running:
        speed = KEY_TO_SPEED[key]
        clock.start(speed)
    elif key in (pygame.K_r, pygame.K_RETURN) and not clock.is_running:
        clock.start(speed)
    return speed


def draw_frame(screen, board, fonts, clock, scoreboard, audio, speed):
    """Compose HUD, the last rendered board and the overlay for the current state."""
    hud_rect = pygame.Rect(0, 0, WINDOW_WIDTH, HUD_HEIGHT)
    draw_hud(
        screen,
        fonts["hud"],
        hud_rect,
        scoreboard.score,
        scoreboard.high_score,
        speed.name.lower(),
        audio.muted,
    )
    screen.blit(board, (0, HUD_HEIGHT))

    area = screen.subsurface(pygame.Rect(0, HUD_HEIGHT, CANVAS_SIZE, CANVAS_SIZE))
    if clock.state is ClockState.IDLE:
        draw_overlay(
            area,
            fonts["title"],
            fonts["text"],
            "NEON SNAKE",
            [
                "1: Slow   2: Normal   3: Fast",
                "Arrows / WASD: move",
                "P: pause   M: mute   Esc: quit",
            ],
        )
    elif clock.state is ClockState.PAUSED:
        draw_overlay(area, fonts["title"], fonts["text"], "Paused", ["P: resume"], alpha=140)
    elif clock.state is ClockState.STOPPED:
        draw_overlay(
            area,
            fonts["title"],
            fonts["text"],
            "Game Over",
            [
                DEATH_MESSAGES.get(scoreboard.collision, ""),
                f"Score: {scoreboard.final_score}",
                "R: play again   1/2/3: change speed",
            ],
        )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Neon Snake arcade game")
    parser.add_argument(
        "--speed",
        choices=sorted(SPEEDS, key=SPEEDS.get, reverse=True),
        default=DEFAULT_SPEED,
        help="speed used by R/Enter before one is picked with 1/2/3",
    )
    parser.add_argument("--mute", action="store_true", help="start with sound muted")
    parser.add_argument("--scores-file", default=HIGH_SCORE_FILE, help="where the high score is kept")
    parser.add_argument("--log-level", default="WARNING", help="logging level (DEBUG, INFO, ...)")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.WARNING),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    pygame.mixer.pre_init(SAMPLE_RATE, -16, 1, 512)
    pygame.init()
    pygame.display.set_caption("Neon Snake")
    screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
    frame_clock = pygame.time.Clock()
    fonts = {
        "hud": get_ui_font(HUD_BASE_SIZE),
        "title": get_ui_font(34),
        "text": get_ui_font(18),
    }

    board = pygame.Surface((CANVAS_SIZE, CANVAS_SIZE))
    renderer = Renderer(board, TILE_SIZE)
    audio = AudioCues(ToneSynth(enabled=SOUND_ENABLED), muted=args.mute)
    store = HighScoreStore(args.scores_file)
    timer = FrameTimer()
    clock = GameClock(Grid(GRID_SIZE), timer, store=store, renderer=renderer)
    scoreboard = ScoreBoard(clock.high_score)
    clock.add_listener(scoreboard)
    clock.add_listener(audio)

    speed = Speed.parse(args.speed)
    renderer.clear()
    logger.info("Grid %dx%d, high score %d", GRID_SIZE, GRID_SIZE, clock.high_score)

    running = True
    while running:
        dt_ms = frame_clock.tick(FRAME_RATE)
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                else:
                    speed = handle_key(event.key, clock, audio, speed)

        timer.advance(dt_ms)
        draw_frame(screen, board, fonts, clock, scoreboard, audio, speed)
        pygame.display.flip()

    audio.stop_drone()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
