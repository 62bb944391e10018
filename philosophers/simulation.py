"""The dining philosophers simulation."""

from __future__ import annotations

import sys
import threading
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TextIO

from philosophers.messages import Rule, display_error, messages
from philosophers.parser import ArgumentError, Settings, parse


class Clock:
    """Milliseconds elapsed since the clock was created."""

    def __init__(self, source: Callable[[], float] = time.monotonic) -> None:
        self._source = source
        self._start = source()

    def elapsed(self) -> int:
        return int((self._source() - self._start) * 1000)


@dataclass
class Philosopher:
    """State of one philosopher at the table."""

    is_alive: bool = True
    fork1: int | None = None
    fork2: int | None = None
    thinks: bool = True
    eat_start: int | None = None
    sleep_start: int | None = None
    last_meal: int = 0


class Table:
    """Philosophers, the forks between them and the shared output."""

    def __init__(
        self,
        settings: Settings,
        stream: TextIO | None = None,
        clock: Clock | None = None,
        pause: float = 0.0005,
    ) -> None:
        self.settings = settings
        self.stream = stream
        self.clock = clock if clock is not None else Clock()
        self.philosophers = [Philosopher() for _ in range(settings.philos_amount)]
        self.died = False
        self.dead_philosopher: int | None = None
        self._forks = [threading.Lock() for _ in range(settings.philos_amount)]
        self._output = threading.Lock()
        self._pause = pause

    def _log(self, philo_id: int, time_ms: int, rule: Rule) -> None:
        with self._output:
            if not self.died:
                messages(philo_id, time_ms, rule, self.stream)

    def _release_forks(self, philo: Philosopher) -> None:
        for fork in (philo.fork1, philo.fork2):
            if fork is not None:
                self._forks[fork].release()
        philo.fork1 = None
        philo.fork2 = None

    def _announce_death(self, philo_id: int) -> None:
        with self._output:
            if self.died:
                return
            messages(philo_id, self.clock.elapsed(), Rule.DIE, self.stream)
            self.died = True
            self.dead_philosopher = philo_id

    def take_fork(self, fork: int, time: int, philo_id: int) -> bool:
        """Pick up a fork if it is free; return whether it was taken."""
        if not self._forks[fork].acquire(blocking=False):
            return False
        self._log(philo_id, time, Rule.FORK)
        return True

    def need_to_eat(self, philo: Philosopher, philo_id: int) -> None:
        """Try to take both forks, lower-numbered first, and start eating."""
        now = self.clock.elapsed()
        first, second = sorted(
            (philo_id, (philo_id + 1) % self.settings.philos_amount)
        )
        if philo.fork1 is None and self.take_fork(first, now, philo_id):
            philo.fork1 = first
        if philo.fork2 is None and first != second and self.take_fork(second, now, philo_id):
            philo.fork2 = second
        if philo.fork1 is not None and philo.fork2 is not None:
            self._log(philo_id, now, Rule.EAT)
            philo.eat_start = now
            philo.last_meal = now
            philo.thinks = False

    def set_to_sleep(self, philo: Philosopher, philo_id: int) -> None:
        now = self.clock.elapsed()
        self._log(philo_id, now, Rule.SLEEP)
        philo.sleep_start = now
        philo.thinks = False

    def check_time_to_eat(self, philo: Philosopher, philo_id: int) -> None:
        """Put the forks down and go to sleep once the meal is over."""
        if philo.eat_start is None:
            return
        if self.clock.elapsed() - philo.eat_start > self.settings.time_to_eat:
            self._release_forks(philo)
            philo.eat_start = None
            self.set_to_sleep(philo, philo_id)

    def check_time_to_sleep(self, philo: Philosopher, philo_id: int) -> None:
        """Wake up and start thinking once the nap is over."""
        if philo.sleep_start is None:
            return
        now = self.clock.elapsed()
        if now - philo.sleep_start > self.settings.time_to_sleep:
            philo.sleep_start = None
            philo.thinks = True
            self._log(philo_id, now, Rule.THINK)

    def check_dead(self, philo: Philosopher) -> bool:
        """If someone has died, put down held forks and report True."""
        if not self.died:
            return False
        self._release_forks(philo)
        return True

    def routine(self, philo_id: int) -> None:
        """Life of one philosopher until it or another one dies."""
        philo = self.philosophers[philo_id]
        while philo.is_alive:
            if self.check_dead(philo):
                return
            if self.clock.elapsed() - philo.last_meal > self.settings.time_to_die:
                philo.is_alive = False
                break
            if philo.thinks:
                self.need_to_eat(philo, philo_id)
            if self.check_dead(philo):
                return
            if philo.eat_start is not None:
                self.check_time_to_eat(philo, philo_id)
            if self.check_dead(philo):
                return
            if philo.sleep_start is not None:
                self.check_time_to_sleep(philo, philo_id)
            time.sleep(self._pause)
        self._release_forks(philo)
        self._announce_death(philo_id)

    def run(self) -> int | None:
        """Run every philosopher in its own thread; return who died first."""
        threads = [
            threading.Thread(target=self.routine, args=(philo_id,), daemon=True)
            for philo_id in range(self.settings.philos_amount)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return self.dead_philosopher


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: philosophers N die eat sleep [meals]."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (4, 5):
        display_error("Missing args!" if len(args) < 4 else "Too much args!")
        return 255
    try:
        settings = parse(args)
    except ArgumentError:
        display_error("Args error!")
        return 0
    Table(settings).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())