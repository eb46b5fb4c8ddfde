"""
Game - the real-time snake simulation on a toroidal board.

The game owns the snake body, the food, the speed ramp and the state machine.
Callers drive it with a millisecond clock through update() and forward player
input through try_change_direction(), toggle_pause(), reset() and quit().
Nothing in here renders or blocks.
"""

import logging
import random
from collections import deque
from typing import Deque, Iterable, List, Optional, Tuple

from .constants import (
    DOWN,
    INITIAL_SPEED,
    LEFT,
    MAX_SPEED,
    RIGHT,
    UP,
    VALID_MOVES,
    HitTarget,
    State,
)
from .game_state import GameState
from .geometry import Direction, Position, step, unwrap_delta
from .snake import Snake

logger = logging.getLogger(__name__)

# Fallback tail slots when the tile straight behind the tail is taken
_HORIZONTAL = (LEFT, RIGHT)
_VERTICAL = (UP, DOWN)


class Game:
    """
    Manages:
      - Board (width, height), wrapping at every edge
      - The snake body, tail first
      - A single food tile
      - Pending direction requests
      - Speed (tiles per second) and the state machine
    """

    def __init__(self, width: int, height: int, seed: Optional[int] = None):
        if width <= 0 or height <= 0:
            raise ValueError(f"Board must be at least 1x1, got {width}x{height}.")
        self._width = width
        self._height = height
        self._rng = random.Random(seed)
        self._pending: Deque[Direction] = deque()

        self.reset()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def state(self) -> State:
        return self._state

    @property
    def head(self) -> Position:
        return self._snake.head

    @property
    def food(self) -> Optional[Position]:
        return self._food

    @property
    def parts(self) -> List[Position]:
        """Body tiles from tail to head."""
        return self._snake.to_list()

    @property
    def speed(self) -> int:
        return self._speed

    @property
    def direction(self) -> Direction:
        """The direction the next step will take: the oldest pending request, else the travel direction."""
        if self._pending and self._pending[0] != self._direction.opposite():
            return self._pending[0]
        return self._direction

    def snapshot(self) -> GameState:
        return GameState(
            state=self._state,
            parts=tuple(self._snake.positions),
            food=self._food,
            speed=self._speed,
            direction=self.direction,
            width=self._width,
            height=self._height,
        )

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def update(self, now_ms: int) -> None:
        """
        Advance the simulation to `now_ms`.

        Does nothing unless the game is running. Moves the snake by however
        many whole tiles the current speed covers since the last move, then
        applies whatever the head hit.

        Raises:
            ValueError: if `now_ms` is earlier than the last move time
        """
        if self._state != State.RUNNING:
            return

        hit = self._move(now_ms)
        if hit == HitTarget.SNAKE:
            self._set_state(State.LOSS)
        elif hit == HitTarget.FOOD:
            self._set_state(self._consume_food())
            if self._state == State.RUNNING:
                self._increase_speed()

    def try_change_direction(self, direction: Direction) -> None:
        """
        Queue a direction request for a later step.

        Ignored unless the game is running, or when it repeats the most
        recent request. Reversals are filtered when the request is drained.
        """
        direction = Direction(*direction)
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction {tuple(direction)}.")
        if self._state != State.RUNNING:
            return

        latest = self._pending[-1] if self._pending else self._direction
        if direction == latest:
            return
        self._pending.append(direction)

    queue_direction = try_change_direction

    def toggle_pause(self, now_ms: int) -> None:
        if self._state == State.START:
            self.reset()
            self._last_move_time_ms = now_ms
            if self._board_full():
                self._set_state(State.WIN)
                return
            self._food = self._random_free_cell()
            self._set_state(State.RUNNING)
        elif self._state == State.PAUSED:
            self._last_move_time_ms = now_ms
            self._set_state(State.RUNNING)
        elif self._state == State.RUNNING:
            self._set_state(State.PAUSED)

    def reset(self) -> None:
        self._state = State.START
        self._last_move_time_ms = 0
        self._speed = INITIAL_SPEED
        self._direction = RIGHT
        self._pending.clear()
        self._snake = Snake([self._center()])
        self._food = None

    def quit(self) -> None:
        self.reset()
        self._set_state(State.QUIT)

    def set_board(
        self,
        parts: Iterable[Tuple[int, int]],
        direction: Direction = RIGHT,
        food: Optional[Tuple[int, int]] = None,
    ) -> None:
        """
        Place an explicit snake and food on the board.

        Pending direction requests are dropped; state and speed are kept.

        Args:
            parts: Body tiles from tail to head
            direction: Travel direction of the head
            food: Food tile, or None for no food

        Raises:
            ValueError: if a tile is off the board, the body overlaps itself
                or the food, two consecutive segments are not neighbours, or
                the direction is not a unit step
        """
        positions = [Position(*p) for p in parts]
        if not positions:
            raise ValueError("Snake needs at least one segment.")
        if len(positions) > self._width * self._height:
            raise ValueError(f"Snake of length {len(positions)} does not fit on the board.")
        for p in positions:
            if not self._in_bounds(p):
                raise ValueError(f"Snake segment out of bounds at {tuple(p)}.")
        if len(set(positions)) != len(positions):
            raise ValueError("Snake segments overlap.")
        for before, after in zip(positions, positions[1:]):
            if not self._adjacent(before, after):
                raise ValueError(f"Snake segments {tuple(before)} and {tuple(after)} are not adjacent.")

        direction = Direction(*direction)
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction {tuple(direction)}.")

        if food is not None:
            food = Position(*food)
            if not self._in_bounds(food):
                raise ValueError(f"Food out of bounds at {tuple(food)}.")
            if food in positions:
                raise ValueError(f"Food at {tuple(food)} is on the snake.")

        self._snake = Snake(positions)
        self._direction = direction
        self._pending.clear()
        self._food = food

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------

    def _move(self, now_ms: int) -> HitTarget:
        tile_dt = self._tiles_since_last_move(now_ms)
        if tile_dt == 0:
            return HitTarget.NONE

        self._drain_one_direction()
        self._last_move_time_ms = now_ms

        hit = HitTarget.NONE
        for i in range(tile_dt):
            new_head = step(self._snake.head, self._direction, self._width, self._height)
            self._snake.advance(new_head)
            if hit == HitTarget.SNAKE:
                continue
            # Tiles vacated earlier in this batch are free
            if self._snake.contains(new_head, skip_tail=i + 1, skip_head=1):
                hit = HitTarget.SNAKE
            elif new_head == self._food:
                hit = HitTarget.FOOD
        self._snake.trim(tile_dt)
        return hit

    def _tiles_since_last_move(self, now_ms: int) -> int:
        if now_ms < self._last_move_time_ms:
            raise ValueError(
                f"Clock went backwards: {now_ms} ms is before the last move at "
                f"{self._last_move_time_ms} ms."
            )
        elapsed = now_ms - self._last_move_time_ms
        # Round half up
        return int((self._speed * elapsed + 500) // 1000)

    def _drain_one_direction(self) -> None:
        if not self._pending:
            return
        requested = self._pending.popleft()
        if requested == self._direction.opposite():
            logger.debug("Dropped reversal request %s", tuple(requested))
            return
        self._direction = requested

    # ------------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------------

    def _consume_food(self) -> State:
        self._food = None
        new_tail = self._find_new_tail()
        if self._snake.contains(new_tail):
            logger.debug("No free tile behind the tail at %s", tuple(self._snake.tail))
            return State.LOSS

        self._snake.grow_tail(new_tail)
        if self._board_full():
            return State.WIN

        self._food = self._random_free_cell()
        return State.RUNNING

    def _find_new_tail(self) -> Position:
        """
        Pick the tile the tail vacated, reconstructed from the last two segments.

        Falls back to the tiles beside the tail when the one straight behind it
        is taken. If all of them are taken, the blocked tile is returned anyway.
        """
        old_tail = self._snake.tail
        if len(self._snake) >= 2:
            tail_direction = self._tail_direction(self._snake.positions[1], old_tail)
        else:
            tail_direction = self._direction

        candidate = step(old_tail, tail_direction.opposite(), self._width, self._height)
        if not self._snake.contains(candidate):
            return candidate

        sideways = _HORIZONTAL if tail_direction.is_vertical else _VERTICAL
        for d in sideways:
            alternative = step(old_tail, d, self._width, self._height)
            if not self._snake.contains(alternative):
                return alternative
        return candidate

    def _tail_direction(self, before_tail: Position, tail: Position) -> Direction:
        return Direction(
            unwrap_delta(before_tail.x - tail.x, self._width),
            unwrap_delta(before_tail.y - tail.y, self._height),
        )

    def _increase_speed(self) -> None:
        if self._speed < MAX_SPEED:
            self._speed += 1

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _random_free_cell(self) -> Position:
        """
        Return a random tile not occupied by the snake.
        """
        if self._board_full():
            raise RuntimeError("No free tile left for food.")
        while True:
            cell = Position(
                self._rng.randint(0, self._width - 1),
                self._rng.randint(0, self._height - 1),
            )
            if not self._snake.contains(cell):
                return cell

    def _board_full(self) -> bool:
        return len(self._snake) >= self._width * self._height

    def _center(self) -> Position:
        return Position(self._width // 2, self._height // 2)

    def _adjacent(self, a: Position, b: Position) -> bool:
        d = self._tail_direction(b, a)
        return abs(d.dx) + abs(d.dy) == 1

    def _in_bounds(self, p: Position) -> bool:
        return 0 <= p.x < self._width and 0 <= p.y < self._height

    def _set_state(self, state: State) -> None:
        if state == self._state:
            return
        if state in (State.LOSS, State.WIN):
            logger.info("Game over (%s): length=%d speed=%d", state.value, len(self._snake), self._speed)
        else:
            logger.debug("State %s -> %s", self._state.value, state.value)
        self._state = state
