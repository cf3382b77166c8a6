"""The dining philosophers: one thread per philosopher plus a monitor thread."""

from __future__ import annotations

import threading
from typing import TextIO

from .parse import Settings
from .timeutil import current_time_ms, precise_sleep

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "\x1b[31mis diead\x1b[0m"
ALL_FED = "\x1b[32mAll philo have eaten enough\x1b[0m"

_MONITOR_INTERVAL_MS = 1


class Philosopher:
    """One diner who alternately eats, sleeps and thinks."""

    def __init__(
        self,
        ident: int,
        table: Table,
        left_fork: threading.Lock,
        right_fork: threading.Lock,
    ) -> None:
        self.ident = ident
        self.table = table
        self.left_fork = left_fork
        self.right_fork = right_fork
        self.meals_eaten = 0
        self.is_eating = False
        self.last_meal = current_time_ms()

    def __repr__(self) -> str:
        return f"Philosopher({self.ident}, meals_eaten={self.meals_eaten})"

    def run(self) -> None:
        """Loop over eating, sleeping and thinking until the table is done."""
        if self.ident % 2 == 0:
            precise_sleep(1)
        while not self.table.is_over() and self.table.settings.number_of_philosophers > 1:
            self.eat()
            self.sleep()
            self.think()

    def eat(self) -> None:
        """Take both forks, eat for ``time_to_eat`` and put the forks back."""
        if self.ident % 2 == 0:
            first, second = self.left_fork, self.right_fork
        else:
            first, second = self.right_fork, self.left_fork
        settings = self.table.settings
        with first:
            self.table.announce(self, TAKEN_FORK)
            with second:
                self.table.announce(self, TAKEN_FORK)
                with self.table.meal_lock:
                    self.is_eating = True
                self.table.announce(self, EATING)
                with self.table.meal_lock:
                    self.last_meal = current_time_ms()
                    self.meals_eaten += 1
                precise_sleep(settings.time_to_eat)
                with self.table.meal_lock:
                    self.is_eating = False

    def sleep(self) -> None:
        """Announce sleeping and sleep for ``time_to_sleep``."""
        self.table.announce(self, SLEEPING)
        precise_sleep(self.table.settings.time_to_sleep)

    def think(self) -> None:
        """Announce thinking."""
        self.table.announce(self, THINKING)

    def is_starving(self) -> bool:
        """Whether more than ``time_to_die`` has passed since the last meal."""
        with self.table.meal_lock:
            hungry_for = current_time_ms() - self.last_meal
            return hungry_for > self.table.settings.time_to_die and not self.is_eating


class Table:
    """Shared state of one simulation: forks, philosophers and the end flag."""

    def __init__(self, settings: Settings, out: TextIO) -> None:
        self.settings = settings
        self.out = out
        self.meal_lock = threading.Lock()
        self._over_lock = threading.Lock()
        self._message_lock = threading.Lock()
        self._over = False
        self.start = current_time_ms()
        count = settings.number_of_philosophers
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(i + 1, self, self.forks[i - 1], self.forks[i])
            for i in range(count)
        ]

    def is_over(self) -> bool:
        """Whether someone died or everyone has eaten enough."""
        with self._over_lock:
            return self._over

    def _write(self, philosopher: Philosopher, message: str) -> None:
        with self._message_lock:
            elapsed = current_time_ms() - self.start
            self.out.write(
                f"\x1b[36m[{elapsed}]\x1b[0m \x1b[35m{philosopher.ident}\x1b[0m {message}\n"
            )
            self.out.flush()

    def announce(self, philosopher: Philosopher, message: str) -> None:
        """Print a timestamped status line unless the simulation is over."""
        with self._over_lock:
            if not self._over:
                self._write(philosopher, message)

    def check_death(self) -> bool:
        """Report the first starving philosopher and end the simulation."""
        for philosopher in self.philosophers:
            if philosopher.is_starving():
                with self._over_lock:
                    if not self._over:
                        self._write(philosopher, DIED)
                    self._over = True
                return True
        return False

    def check_meals(self) -> bool:
        """Whether every philosopher has eaten the required number of meals."""
        required = self.settings.meals_required
        if required is None:
            return False
        with self.meal_lock:
            return all(p.meals_eaten >= required for p in self.philosophers)

    def monitor(self) -> None:
        """Watch the philosophers until one dies or all have eaten enough."""
        while True:
            precise_sleep(_MONITOR_INTERVAL_MS)
            if self.check_death():
                break
            if self.check_meals():
                with self._over_lock, self._message_lock:
                    self.out.write(f"{ALL_FED}\n")
                    self.out.flush()
                    self._over = True
                break

    def run(self) -> None:
        """Start the monitor and every philosopher, then wait for all of them."""
        threads = [threading.Thread(target=self.monitor, name="monitor")]
        threads.extend(
            threading.Thread(target=p.run, name=f"philosopher-{p.ident}")
            for p in self.philosophers
        )
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()


def simulate(settings: Settings, out: TextIO) -> Table:
    """Run a whole simulation, writing its log to ``out``; return the table."""
    table = Table(settings, out)
    table.run()
    return table