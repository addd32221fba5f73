"""Simulation - one session: a world, its rules, its rng, and a paced loop."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from foodweb.model import World
from foodweb.presets import DensityLevel, build_initial_world
from foodweb.rng import SimulationRng
from foodweb.rules import RuleMode, RuleSet, create_rule_set
from foodweb.status import WorldStatus, classify
from foodweb.tick import advance

logger = logging.getLogger(__name__)

DETERMINISTIC_SEED = 42

TickHook = Callable[[World, WorldStatus], None]
StatusHook = Callable[[WorldStatus, WorldStatus], None]
LifecycleHook = Callable[[World], None]


@dataclass(frozen=True, slots=True)
class SimulationConfig:
    rows: int = 20
    cols: int = 20
    grass_density: DensityLevel = DensityLevel.MEDIUM
    prey_density: DensityLevel = DensityLevel.MEDIUM
    predator_density: DensityLevel = DensityLevel.MEDIUM
    mode: RuleMode = RuleMode.NORMAL
    deterministic: bool = True
    tps: int = 2


class Simulation:
    """Drives ``advance`` for one session.

    The session owns its SimulationRng; two sessions must never share one.
    ``step`` always advances. ``tick`` only advances while playing, which is
    what a periodic scheduler should call.
    """

    def __init__(
        self,
        world: World,
        rules: RuleSet,
        rng: SimulationRng,
        tps: int = 2,
        config: SimulationConfig | None = None,
    ) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._world = world
        self._rules = rules
        self._rng = rng
        self._tps = tps
        self._dt = 1.0 / tps
        self._config = config
        self._status = classify(world)
        self._playing = False
        self._stop_requested = False
        self._tick_hooks: list[TickHook] = []
        self._status_hooks: list[StatusHook] = []
        self._start_hooks: list[LifecycleHook] = []
        self._stop_hooks: list[LifecycleHook] = []

    @classmethod
    def from_config(
        cls, config: SimulationConfig, seed: int | None = None
    ) -> Simulation:
        if seed is None and config.deterministic:
            seed = DETERMINISTIC_SEED
        rng = SimulationRng(seed)
        rules = create_rule_set(config.mode)
        world = _world_from_config(config, rng)
        logger.info(
            "new %s session on %dx%d grid, seed=%d",
            config.mode.value,
            config.rows,
            config.cols,
            rng.seed,
        )
        return cls(world, rules, rng, tps=config.tps, config=config)

    # --- State ---

    @property
    def world(self) -> World:
        return self._world

    @property
    def rules(self) -> RuleSet:
        return self._rules

    @property
    def rng(self) -> SimulationRng:
        return self._rng

    @property
    def status(self) -> WorldStatus:
        return self._status

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def running(self) -> bool:
        return self._playing

    # --- Hooks ---

    def on_tick(self, hook: TickHook) -> None:
        self._tick_hooks.append(hook)

    def on_status_change(self, hook: StatusHook) -> None:
        self._status_hooks.append(hook)

    def on_start(self, hook: LifecycleHook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: LifecycleHook) -> None:
        self._stop_hooks.append(hook)

    # --- Control ---

    def play(self) -> None:
        self._playing = True

    def pause(self) -> None:
        self._playing = False

    def request_stop(self) -> None:
        logger.debug("stop requested at tick %d", self._world.tick)
        self._stop_requested = True

    def reset(self, world: World | None = None) -> None:
        """Replace the world and pause. The rng keeps its cursor."""
        if world is None:
            if self._config is None:
                raise ValueError("reset() needs a world when no config is set")
            world = _world_from_config(self._config, self._rng)
        self._world = world
        self._status = classify(world)
        self._playing = False

    # --- Stepping ---

    def _advance(self) -> World:
        previous = self._status
        self._world = advance(self._world, self._rules, self._rng)
        self._status = classify(self._world)

        for hook in self._tick_hooks:
            hook(self._world, self._status)
        if self._status is not previous:
            logger.info(
                "tick %d: status %s -> %s",
                self._world.tick,
                previous.value,
                self._status.value,
            )
            for status_hook in self._status_hooks:
                status_hook(previous, self._status)
        return self._world

    def step(self) -> World:
        self._stop_requested = False
        return self._advance()

    def tick(self) -> World:
        if self._playing:
            return self.step()
        return self._world

    def run(self, n: int) -> World:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self._world)

        for _ in range(n):
            self._advance()
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self._world)
        return self._world

    def run_forever(self) -> World:
        self._stop_requested = False
        self._playing = True
        for hook in self._start_hooks:
            hook(self._world)

        while not self._stop_requested:
            start = time.monotonic()
            self._advance()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = self._dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        self._playing = False
        for hook in self._stop_hooks:
            hook(self._world)
        return self._world


def _world_from_config(config: SimulationConfig, rng: SimulationRng) -> World:
    return build_initial_world(
        config.rows,
        config.cols,
        config.grass_density,
        config.prey_density,
        config.predator_density,
        rng,
    )
