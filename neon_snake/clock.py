import logging
from enum import Enum

from .collision import check_collision
from .config import FOOD_REWARD, SPEEDS
from .food import FoodSpawner
from .snake import Snake

logger = logging.getLogger(__name__)


class Speed(Enum):
    """Difficulty presets as tick intervals in milliseconds."""

    SLOW = SPEEDS["slow"]
    NORMAL = SPEEDS["normal"]
    FAST = SPEEDS["fast"]

    @property
    def interval_ms(self):
        return self.value

    @classmethod
    def parse(cls, value):
        """Accept a Speed, a preset name or one of the preset intervals."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.upper()]
            except KeyError:
                raise ValueError(f"unknown speed {value!r}") from None
        return cls(value)


class ClockState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class TimerHandle:
    def __init__(self, interval_ms, callback):
        self.interval_ms = interval_ms
        self.callback = callback
        self.elapsed_ms = 0
        self.active = True

    def cancel(self):
        self.active = False


class FrameTimer:
    """Fixed-interval driver fed with elapsed time by a frame loop.

    At most one callback runs per advance() call; a backlog longer than one
    interval is dropped rather than replayed, so ticks never pile up.
    """

    def __init__(self):
        self.handles = []

    def schedule(self, interval_ms, callback):
        """Call callback every interval_ms until the returned handle is cancelled."""
        if interval_ms <= 0:
            raise ValueError("interval must be positive")
        handle = TimerHandle(interval_ms, callback)
        self.handles.append(handle)
        return handle

    def advance(self, elapsed_ms):
        """Account for elapsed_ms of wall time and fire whatever is due."""
        self.handles = [h for h in self.handles if h.active]
        for handle in list(self.handles):
            handle.elapsed_ms += elapsed_ms
            if handle.elapsed_ms < handle.interval_ms:
                continue
            handle.elapsed_ms %= handle.interval_ms
            if handle.active:
                handle.callback()


class GameListener:
    """Receives fire-and-forget notifications from a GameClock."""

    def on_game_started(self):
        pass

    def on_score_changed(self, score):
        pass

    def on_high_score_changed(self, score):
        pass

    def on_food_eaten(self):
        pass

    def on_game_over(self, final_score, collision):
        pass


class GameSession:
    """State of a single run, rebuilt by every GameClock.start()."""

    def __init__(self, grid, speed, snake, food=None):
        self.grid = grid
        self.speed = speed
        self.snake = snake
        self.food = food
        self.score = 0
        self.status = ClockState.RUNNING
        self.collision = None

    def __repr__(self):
        return (
            f"<GameSession status={self.status.value} score={self.score} "
            f"speed={self.speed.name} snake={self.snake!r} food={self.food}>"
        )


class GameClock:
    """Drives a GameSession: Idle -> Running <-> Paused -> Stopped.

    Every tick runs in a fixed order: advance the snake, check for a
    collision, then (only if the move survived) score the food, grow,
    respawn the food and finally redraw.
    """

    def __init__(self, grid, timer, store=None, renderer=None, listeners=(), spawner=None):
        self.grid = grid
        self.timer = timer
        self.store = store
        self.renderer = renderer
        self.listeners = list(listeners)
        self.spawner = spawner or FoodSpawner(grid)
        self.session = None
        self.high_score = store.load() if store is not None else 0
        self._state = ClockState.IDLE
        self._handle = None

    @property
    def state(self):
        return self._state

    @property
    def is_running(self):
        """True while a game is in progress, paused or not."""
        return self._state in (ClockState.RUNNING, ClockState.PAUSED)

    def add_listener(self, listener):
        """Register another receiver of game notifications."""
        self.listeners.append(listener)

    def _set_state(self, state):
        self._state = state
        if self.session is not None:
            self.session.status = state

    def _emit(self, event, *args):
        for listener in self.listeners:
            getattr(listener, event)(*args)

    def start(self, speed=Speed.NORMAL):
        """Begin a fresh session; ignored while one is already in progress."""
        if self.is_running:
            logger.debug("start() ignored, game already in progress")
            return False

        speed = Speed.parse(speed)
        snake = Snake.initial(self.grid)
        self.session = GameSession(self.grid, speed, snake)
        self.session.food = self.spawner.place(snake)
        self._set_state(ClockState.RUNNING)
        self._handle = self.timer.schedule(speed.interval_ms, self.tick)
        logger.info("Game started at %s speed (%d ms)", speed.name.lower(), speed.interval_ms)

        self._emit("on_score_changed", 0)
        self._emit("on_game_started")
        self._draw()
        return True

    def pause(self):
        """Suspend ticking; the timer keeps firing but ticks do nothing."""
        if self._state is ClockState.RUNNING:
            self._set_state(ClockState.PAUSED)
            logger.debug("Paused")

    def resume(self):
        """Continue a paused game."""
        if self._state is ClockState.PAUSED:
            self._set_state(ClockState.RUNNING)
            logger.debug("Resumed")

    def toggle_pause(self):
        """Pause a running game or resume a paused one."""
        if self._state is ClockState.RUNNING:
            self.pause()
        else:
            self.resume()

    def stop(self, collision=None):
        """End the session; only the first call reports game over."""
        if not self.is_running:
            return False
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self.session.collision = collision
        self._set_state(ClockState.STOPPED)
        logger.info(
            "Game over (%s) with score %d",
            collision.value if collision else "stopped",
            self.session.score,
        )
        self._emit("on_game_over", self.session.score, collision)
        return True

    def turn(self, direction):
        """Forward a directional intent to the snake while a game is on."""
        if not self.is_running:
            return False
        return self.session.snake.set_pending_direction(direction)

    def tick(self):
        """Advance the session by one step."""
        if self._state is not ClockState.RUNNING:
            return

        session = self.session
        snake = session.snake
        head = snake.advance()
        logger.debug("Tick: head %s, length %d", head, len(snake))

        collision = check_collision(self.grid, head, snake)
        if collision is not None:
            self.stop(collision)
            return

        if head == session.food:
            self._eat()

        self._draw()

    def _eat(self):
        session = self.session
        session.score += FOOD_REWARD
        logger.debug("Food eaten at %s, score %d", session.food, session.score)

        if session.score > self.high_score:
            self.high_score = session.score
            logger.info("New high score %d", self.high_score)
            if self.store is not None:
                self.store.save(self.high_score)
            self._emit("on_high_score_changed", self.high_score)

        session.snake.mark_for_growth()
        session.food = self.spawner.place(session.snake)
        self._emit("on_score_changed", session.score)
        self._emit("on_food_eaten")

    def _draw(self):
        if self.renderer is not None:
            self.renderer.draw(self.session.snake, self.session.food)
