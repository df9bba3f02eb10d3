"""
Game session: run state, gravity, commands, scoring
===================================================

A ``Session`` owns everything that changes while a game is played: the grid,
the falling piece, the score, the high score and the clocks. Nothing here
touches pygame; the main loop feeds it frame times and commands, then draws
``snapshot()``.

Run states::

    idle --start--> running <--toggle_pause--> paused
    running --spawn collides--> over
    any --reset--> running

Gravity is driven purely by ``advance(elapsed_ms)``: the elapsed time goes
into an accumulator and once it passes the drop interval the piece drops one
row. Every drop, timed or soft, zeroes the accumulator.

A drop that collides locks the piece. The lock sequence is always:
step back up, merge into the grid, spawn the next piece, sweep full rows,
then report the score. If the new piece already overlaps the grid the game
is over and the score at that moment is final.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from webtris_board import COLS, ROWS, Grid, clear_grid, collide, create_grid, merge, sweep
from webtris_config import CONFIG
from webtris_piece import Piece
from webtris_rng import PieceRandomizer
from webtris_rotate import CW, rotate_with_kicks
from webtris_store import HighScoreStore

log = logging.getLogger(__name__)


class RunState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class EventKind(Enum):
    MOVE = "move"
    ROTATE = "rotate"
    DROP = "drop"
    LOCK = "lock"
    CLEAR = "clear"
    SCORE = "score"
    GAME_OVER = "game_over"
    HIGH_SCORE = "high_score"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    value: int = 0


@dataclass(frozen=True)
class Snapshot:
    """What the renderer and the HUD need for one frame."""
    grid: Grid
    piece: Piece
    score: int
    high_score: int
    elapsed_seconds: int
    state: RunState


class Session:
    def __init__(self, store: Optional[HighScoreStore] = None, rng=None,
                 drop_interval: Optional[float] = None):
        self.grid: Grid = create_grid(COLS, ROWS)
        self.rng = rng if rng is not None else PieceRandomizer(CONFIG["SEED"])
        self.store = store
        self.drop_interval = CONFIG["DROP_INTERVAL_MS"] if drop_interval is None else drop_interval
        self.high_score = store.load() if store is not None else 0
        self.score = 0
        self.final_score: Optional[int] = None
        self.elapsed_ms = 0.0
        self.drop_counter = 0.0
        self.state = RunState.IDLE
        self.piece = Piece.spawn(self.rng.next_piece(), COLS)

    # ---------- Read-outs ----------
    @property
    def running(self) -> bool:
        return self.state is RunState.RUNNING

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds spent running; paused, idle and game-over time is not counted."""
        return int(self.elapsed_ms // 1000)

    def snapshot(self) -> Snapshot:
        return Snapshot(
            grid=[row[:] for row in self.grid],
            piece=self.piece.copy(),
            score=self.score,
            high_score=self.high_score,
            elapsed_seconds=self.elapsed_seconds,
            state=self.state,
        )

    # ---------- Run state ----------
    def start(self) -> None:
        if self.state is RunState.IDLE:
            self.state = RunState.RUNNING
            log.info("game started")

    def toggle_pause(self) -> None:
        if self.state is RunState.RUNNING:
            self.state = RunState.PAUSED
        elif self.state is RunState.PAUSED:
            self.state = RunState.RUNNING
            self.drop_counter = 0.0

    def reset(self) -> List[Event]:
        events: List[Event] = []
        clear_grid(self.grid)
        self.score = 0
        self.final_score = None
        self.elapsed_ms = 0.0
        self.drop_counter = 0.0
        self.state = RunState.RUNNING
        self._spawn(events)
        log.info("game reset")
        return events

    # ---------- Gravity ----------
    def advance(self, elapsed_ms: float) -> List[Event]:
        """Account for elapsed_ms of play; drop the piece once the interval is exceeded."""
        if not self.running:
            return []
        self.elapsed_ms += elapsed_ms
        self.drop_counter += elapsed_ms
        if self.drop_counter > self.drop_interval:
            return self._drop()
        return []

    # ---------- Commands ----------
    def move_left(self) -> List[Event]:
        return self._move(-1)

    def move_right(self) -> List[Event]:
        return self._move(1)

    def soft_drop(self) -> List[Event]:
        if not self.running:
            return []
        return self._drop()

    def rotate(self, direction: int = CW) -> List[Event]:
        if not self.running:
            return []
        if rotate_with_kicks(self.grid, self.piece, direction):
            return [Event(EventKind.ROTATE, direction)]
        return []

    # ---------- Internals ----------
    def _move(self, dx: int) -> List[Event]:
        if not self.running:
            return []
        self.piece.x += dx
        if collide(self.grid, self.piece):
            self.piece.x -= dx
            return []
        return [Event(EventKind.MOVE, dx)]

    def _drop(self) -> List[Event]:
        events: List[Event] = []
        self.piece.y += 1
        if collide(self.grid, self.piece):
            self.piece.y -= 1
            merge(self.grid, self.piece)
            events.append(Event(EventKind.LOCK))
            log.debug("locked %s at row %d col %d", self.piece.t, self.piece.y, self.piece.x)
            self._spawn(events)
            cleared, points = sweep(self.grid)
            if cleared:
                events.append(Event(EventKind.CLEAR, cleared))
            # a lost game keeps the score it had when the spawn collided
            if points and self.state is not RunState.OVER:
                self.score += points
                events.append(Event(EventKind.SCORE, self.score))
        else:
            events.append(Event(EventKind.DROP))
        self.drop_counter = 0.0
        return events

    def _spawn(self, events: List[Event]) -> None:
        self.piece = Piece.spawn(self.rng.next_piece(), COLS)
        if collide(self.grid, self.piece):
            self._game_over(events)

    def _game_over(self, events: List[Event]) -> None:
        if self.state is RunState.OVER:
            return
        self.state = RunState.OVER
        self.final_score = self.score
        events.append(Event(EventKind.GAME_OVER, self.score))
        log.info("game over, final score %d", self.score)
        if self.score > self.high_score:
            self.high_score = self.score
            events.append(Event(EventKind.HIGH_SCORE, self.score))
            log.info("new high score %d", self.score)
            if self.store is not None:
                self.store.save(self.score)
