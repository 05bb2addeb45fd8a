"""
Game engine: one GameSession, a command surface and read-only snapshots.

Every state change goes through a method on GameEngine. The host feeds it
from a single event queue (key presses and drop-timer ticks alike), so no
method ever runs concurrently with another.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from tetris_config import CONFIG, ROWS
from tetris_piece import Piece, rotate_cw, spawn_position
from tetris_rng import PieceRandom
from tetris_board import Board, new_board, collide, merge, clear_full_lines, filled_cells
from tetris_scheduler import DropScheduler, interval_for_level

log = logging.getLogger(__name__)

# no kick, then sideways, then vertical
KICKS = [(0,0), (-1,0), (1,0), (0,-1), (0,1)]


class Phase(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Command(Enum):
    START = "start"
    STOP = "stop"
    PAUSE = "pause"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    SOFT_DROP = "soft_drop"
    ROTATE = "rotate"
    HARD_DROP = "hard_drop"
    TICK = "tick"


@dataclass
class GameSession:
    board: Board = field(default_factory=new_board)
    current: Optional[Piece] = None
    next: Optional[Piece] = None
    score: int = 0
    level: int = 1
    lines: int = 0
    lines_toward_level: int = 0
    drop_interval_ms: float = 1000
    is_running: bool = False
    is_over: bool = False


@dataclass
class Snapshot:
    board: List[list]
    piece: Optional[Piece]
    next: Optional[Piece]
    score: int
    level: int
    lines: int
    is_over: bool
    is_running: bool
    drop_interval_ms: float
    phase: Phase

    def composite(self) -> List[list]:
        """Settled cells with the falling piece drawn over the visible rows."""
        grid = [row[:] for row in self.board]
        if self.piece:
            for bx, by in self.piece.cells():
                if 0 <= by < ROWS:
                    grid[by][bx] = self.piece.color
        return grid


class GameEngine:
    def __init__(self, scheduler: Optional[DropScheduler] = None, rng: Optional[PieceRandom] = None):
        self.scheduler = scheduler if scheduler is not None else DropScheduler()
        self.rng = rng if rng is not None else PieceRandom(CONFIG["SEED"])
        self.session: Optional[GameSession] = None

    # ---------- state ----------
    @property
    def phase(self) -> Phase:
        s = self.session
        if s is None:
            return Phase.IDLE
        if s.is_over:
            return Phase.GAME_OVER
        return Phase.RUNNING if s.is_running else Phase.PAUSED

    @property
    def active(self) -> bool:
        s = self.session
        return s is not None and s.is_running and not s.is_over and s.current is not None

    def snapshot(self) -> Snapshot:
        s = self.session or GameSession(drop_interval_ms=CONFIG["INITIAL_DROP_MS"])
        return Snapshot(
            board=[row[:] for row in s.board],
            piece=s.current.copy() if s.current else None,
            next=s.next.copy() if s.next else None,
            score=s.score, level=s.level, lines=s.lines,
            is_over=s.is_over, is_running=s.is_running,
            drop_interval_ms=s.drop_interval_ms, phase=self.phase,
        )

    # ---------- lifecycle ----------
    def start(self):
        self.scheduler.disarm()
        self.session = GameSession(drop_interval_ms=CONFIG["INITIAL_DROP_MS"], is_running=True)
        log.info("new session")
        self.spawn_next()
        if not self.session.is_over:
            self._arm()

    def stop(self):
        if self.session is None:
            return
        self.scheduler.disarm()
        self.session.is_running = False

    pause = stop

    def resume(self):
        s = self.session
        if s is None or s.is_over or s.is_running:
            return
        s.is_running = True
        self._arm()

    def toggle_pause(self):
        if self.phase is Phase.RUNNING:
            self.pause()
        elif self.phase is Phase.PAUSED:
            self.resume()

    def _arm(self):
        self.scheduler.arm(self.session.drop_interval_ms, self.tick)

    # ---------- spawning ----------
    def spawn_next(self):
        s = self.session
        s.current = s.next or Piece.new(self.rng.next_kind())
        s.next = Piece.new(self.rng.next_kind())
        p = s.current
        p.x, p.y = spawn_position(p.shape)
        log.debug("spawn %s at (%d, %d)", p.kind, p.x, p.y)
        if self._spawn_blocked(p):
            s.is_over = True
            s.current = None
            self.scheduler.disarm()
            log.info("game over: score=%d level=%d lines=%d", s.score, s.level, s.lines)

    def _spawn_blocked(self, p: Piece) -> bool:
        # probe where the lowest occupied row first reaches row 0
        bottom = max(r for r, row in enumerate(p.shape) if any(row))
        board = self.session.board
        return collide(board, p.shape, p.x, p.y) or collide(board, p.shape, p.x, -bottom)

    # ---------- gravity & locking ----------
    def tick(self):
        if not self.active:
            return
        p = self.session.current
        if not collide(self.session.board, p.shape, p.x, p.y+1):
            p.y += 1
        else:
            self._lock()

    soft_drop = tick

    def hard_drop(self):
        if not self.active:
            return
        p = self.session.current
        while not collide(self.session.board, p.shape, p.x, p.y+1):
            p.y += 1
        self._lock()

    def _lock(self):
        s = self.session
        merge(s.board, s.current)
        cleared = clear_full_lines(s.board)
        log.debug("lock %s at (%d, %d), cleared %d, %d cells settled",
                  s.current.kind, s.current.x, s.current.y, cleared, filled_cells(s.board))
        if cleared:
            s.score += cleared * CONFIG["LINE_SCORE"] * s.level
            s.lines += cleared
            if self._level_ups(cleared):
                self._arm()
        self.spawn_next()

    def _level_ups(self, cleared: int) -> int:
        s = self.session
        per = CONFIG["LINES_PER_LEVEL"]
        rule = CONFIG["LEVEL_RULE"]
        if rule == "cumulative":
            s.lines_toward_level += cleared
            ups = s.lines_toward_level // per
            s.lines_toward_level %= per
        elif rule == "per_clear":
            ups = 1 if cleared % per == 0 else 0
        else:
            raise ValueError(f"unknown LEVEL_RULE {rule!r}")
        for _ in range(ups):
            s.level += 1
            s.drop_interval_ms = interval_for_level(s.level)
            log.info("level %d, drop interval %.1f ms", s.level, s.drop_interval_ms)
        return ups

    # ---------- movement ----------
    def move_horizontal(self, delta: int):
        if not self.active:
            return
        p = self.session.current
        if not collide(self.session.board, p.shape, p.x+delta, p.y):
            p.x += delta

    def move_left(self): self.move_horizontal(-1)
    def move_right(self): self.move_horizontal(1)

    def rotate(self):
        if not self.active:
            return
        p = self.session.current
        shape = rotate_cw(p.shape)
        for dx, dy in KICKS:
            if not collide(self.session.board, shape, p.x+dx, p.y+dy):
                p.shape = shape
                p.x += dx; p.y += dy
                return

    # ---------- command queue entry ----------
    def dispatch(self, command: Command):
        handler = {
            Command.START: self.start,
            Command.STOP: self.stop,
            Command.PAUSE: self.toggle_pause,
            Command.MOVE_LEFT: self.move_left,
            Command.MOVE_RIGHT: self.move_right,
            Command.SOFT_DROP: self.soft_drop,
            Command.ROTATE: self.rotate,
            Command.HARD_DROP: self.hard_drop,
            Command.TICK: self.tick,
        }[command]
        handler()
