"""The dining philosophers simulation: threads sharing forks, watched by a monitor."""

from __future__ import annotations

import enum
import sys
import threading
import time
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, TextIO

from ftkit.philo_args import ArgumentError, check_arguments

NC = "\x1b[0m"
YELLOW = "\x1b[33m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"

_START_STAGGER = 0.0001
_MONITOR_PAUSE = 0.0005
_LOCK_POLL = 0.01


def format_event(elapsed_ms: int, philosopher_id: int, message: str) -> str:
    """Return one coloured log line for philosopher number ``philosopher_id``."""
    return (
        f"{RED}After {elapsed_ms}{RED}ms"
        f"{YELLOW} philo number {philosopher_id}"
        f"{GREEN} {message}\n"
    )


def _now_ms() -> int:
    return int(time.monotonic() * 1000)


@dataclass(frozen=True)
class Rules:
    """Simulation settings; times are in milliseconds."""

    philosophers: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    meals: Optional[int] = None

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Rules":
        """Build rules from the command-line arguments, program name excluded."""
        values = check_arguments(args)
        meals = values[4] if len(values) == 5 else None
        return cls(values[0], values[1], values[2], values[3], meals)


class Outcome(enum.Enum):
    """How a simulation ended."""

    DIED = "died"
    FED = "fed"


@dataclass
class _Philosopher:
    index: int
    last_meal: int
    meals: int = 0
    eating: bool = False
    state: threading.Lock = field(default_factory=threading.Lock)


class Simulation:
    """Runs philosophers in threads until one starves or all have eaten enough."""

    def __init__(self, rules: Rules, stream: Optional[TextIO] = None) -> None:
        self.rules = rules
        self.stream = sys.stdout if stream is None else stream
        self.dead: Optional[int] = None
        self._stop = threading.Event()
        self._messages = threading.Lock()
        self._start = 0
        self._forks: List[threading.Lock] = []
        self._philosophers: List[_Philosopher] = []

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def _emit(self, philosopher: _Philosopher, message: str) -> None:
        with self._messages:
            if self._stop.is_set():
                return
            elapsed = _now_ms() - self._start
            self._write(format_event(elapsed, philosopher.index + 1, message))

    def _take(self, lock: threading.Lock) -> bool:
        while not self._stop.is_set():
            if lock.acquire(timeout=_LOCK_POLL):
                return True
        return False

    def _eat(self, philosopher: _Philosopher) -> bool:
        count = self.rules.philosophers
        left = self._forks[philosopher.index]
        right = self._forks[(philosopher.index + 1) % count]
        if not self._take(left):
            return False
        try:
            self._emit(philosopher, "has taken a fork")
            if not self._take(right):
                return False
            try:
                self._emit(philosopher, "has taken a fork")
                with philosopher.state:
                    philosopher.last_meal = _now_ms()
                    philosopher.eating = True
                self._emit(philosopher, "is eating")
                self._stop.wait(self.rules.time_to_eat / 1000)
                with philosopher.state:
                    philosopher.meals += 1
            finally:
                right.release()
        finally:
            left.release()
            with philosopher.state:
                philosopher.eating = False
        return True

    def _live(self, philosopher: _Philosopher) -> None:
        while not self._stop.is_set():
            if not self._eat(philosopher):
                return
            self._emit(philosopher, "is sleeping")
            self._stop.wait(self.rules.time_to_sleep / 1000)
            self._emit(philosopher, "is thinking")

    def _starved(self, philosopher: _Philosopher) -> bool:
        with philosopher.state:
            last_meal, eating = philosopher.last_meal, philosopher.eating
        return not eating and _now_ms() - last_meal > self.rules.time_to_die

    def _everyone_fed(self) -> bool:
        target = self.rules.meals
        # The first philosopher is not counted, as in the reference behaviour.
        return all(p.meals >= target for p in self._philosophers[1:])

    def _monitor(self) -> Outcome:
        count = self.rules.philosophers
        index = 1
        while True:
            philosopher = self._philosophers[index]
            if self._starved(philosopher):
                with self._messages:
                    elapsed = _now_ms() - self._start
                    self._stop.set()
                    self.dead = philosopher.index + 1
                    self._write(format_event(elapsed, self.dead, "died"))
                return Outcome.DIED
            index = (index + 1) % count
            if self.rules.meals is not None and self._everyone_fed():
                with self._messages:
                    self._stop.set()
                    self._write("Thx for this good meal :)\n")
                return Outcome.FED
            time.sleep(_MONITOR_PAUSE)

    def _run_alone(self) -> Outcome:
        self._write(f"{RED}After 0ms {YELLOW}philo number 1 {GREEN}has taken a fork\n")
        self._write(
            f"{RED}After {self.rules.time_to_die}ms {YELLOW}philo number 1 {GREEN}died\n"
        )
        self.dead = 1
        return Outcome.DIED

    def run(self) -> Outcome:
        """Run the simulation to its end and report how it ended."""
        if self.rules.philosophers == 1:
            return self._run_alone()
        self._stop.clear()
        self.dead = None
        self._start = _now_ms()
        self._forks = [threading.Lock() for _ in range(self.rules.philosophers)]
        self._philosophers = [
            _Philosopher(index=i, last_meal=self._start)
            for i in range(self.rules.philosophers)
        ]
        threads = []
        try:
            for philosopher in self._philosophers:
                thread = threading.Thread(
                    target=self._live, args=(philosopher,), daemon=True
                )
                thread.start()
                threads.append(thread)
                time.sleep(_START_STAGGER)
            return self._monitor()
        finally:
            self._stop.set()
            for thread in threads:
                thread.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        rules = Rules.from_args(args)
    except ArgumentError as error:
        sys.stderr.write(f"Error\n{error}\n")
        return 1
    Simulation(rules).run()
    return 1


if __name__ == "__main__":
    sys.exit(main())