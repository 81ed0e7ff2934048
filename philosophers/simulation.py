"""Threaded dining philosophers simulation with a monitoring loop."""

from __future__ import annotations

import sys
import threading
import time
from typing import Optional, Sequence, TextIO

from .settings import ArgumentError, Settings, parse_settings


def current_time() -> int:
    """Wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


class Philosopher:
    """One diner, running its eat/sleep/think cycle in its own thread."""

    def __init__(self, simulation: "Simulation", position: int, forks: Sequence[threading.Lock]):
        self.simulation = simulation
        self.id = position + 1
        self.meals_eaten = 0
        self.last_meal_time = current_time()
        count = len(forks)
        here, next_one = forks[position], forks[(position + 1) % count]
        if self.id % 2 == 0:
            self.right_fork, self.left_fork = here, next_one
        else:
            self.right_fork, self.left_fork = next_one, here

    def eat(self) -> None:
        sim = self.simulation
        if self.id % 2 != 0:
            time.sleep(0.001)
        if sim.ended():
            return
        with self.left_fork:
            sim.print_state(self, "has taken a fork")
            if sim.settings.philosopher_count == 1:
                sim.end()
                return
            with self.right_fork:
                sim.print_state(self, "has taken a fork")
                sim.print_state(self, "is eating")
                with sim.lock:
                    self.last_meal_time = current_time()
                    self.meals_eaten += 1
                sim.exact_sleep(sim.settings.time_to_eat)

    def sleep(self) -> None:
        sim = self.simulation
        if not sim.ended():
            sim.print_state(self, "is sleeping")
            sim.exact_sleep(sim.settings.time_to_sleep)

    def think(self) -> None:
        sim = self.simulation
        if not sim.ended():
            sim.print_state(self, "is thinking")
            think_us = sim.settings.think_time_us()
            if think_us > 0:
                time.sleep(think_us / 1_000_000)

    def routine(self) -> None:
        while not self.simulation.ended():
            self.eat()
            self.sleep()
            self.think()


class Simulation:
    """Shared state of a run: forks, philosophers, the end flag and output."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None):
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.lock = threading.Lock()
        self._ended = False
        self.start_time = current_time()
        self.forks = tuple(threading.Lock() for _ in range(settings.philosopher_count))
        self.philosophers = [
            Philosopher(self, position, self.forks)
            for position in range(settings.philosopher_count)
        ]

    def ended(self) -> bool:
        with self.lock:
            return self._ended

    def end(self) -> None:
        with self.lock:
            self._ended = True

    def _write(self, line: str) -> None:
        self.out.write(line + "\n")
        self.out.flush()

    def print_state(self, philosopher: Philosopher, state: str) -> None:
        """Print a timestamped state line unless the simulation has ended."""
        with self.lock:
            if self._ended:
                return
            elapsed = current_time() - self.start_time
            self._write(f"{elapsed} {philosopher.id} {state}")

    def exact_sleep(self, duration_ms: int) -> None:
        """Sleep for *duration_ms*, waking early if the simulation ends."""
        start = current_time()
        while current_time() - start < duration_ms:
            if self.ended():
                break
            time.sleep(0.0001)

    def check_death(self, philosopher: Philosopher) -> bool:
        """End the run and report it if *philosopher* has starved."""
        with self.lock:
            now = current_time()
            if now - philosopher.last_meal_time >= self.settings.time_to_die:
                self._ended = True
                self._write(f"{now - self.start_time} {philosopher.id} died")
                return True
        return False

    def monitor(self) -> None:
        """Watch for a death or for every philosopher reaching the meal limit."""
        limit = self.settings.meal_limit
        while True:
            all_full = True
            for philosopher in self.philosophers:
                if limit is not None:
                    with self.lock:
                        if philosopher.meals_eaten < limit:
                            all_full = False
                if self.check_death(philosopher):
                    return
            if all_full and limit is not None:
                self.end()
                return
            time.sleep(0.0005)

    def run(self) -> None:
        """Start every philosopher, monitor until the end, then join them."""
        with self.lock:
            self._ended = False
        self.start_time = current_time()
        threads = [
            threading.Thread(target=philosopher.routine, name=f"philosopher-{philosopher.id}")
            for philosopher in self.philosophers
        ]
        for thread in threads:
            thread.start()
        self.monitor()
        for thread in threads:
            thread.join()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the simulation from command-line arguments."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        settings = parse_settings(args)
    except ArgumentError as error:
        print(error)
        return 1
    Simulation(settings).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())