"""A swappable game interface and the instance that drives it."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

import pygame

from . import game
from .state import State

log = logging.getLogger(__name__)


class GameInterface:
    """The five entry points through which the game loop drives the game."""

    def __init__(self) -> None:
        self.state: State | None = None

    def initialize(self) -> State:
        """Return the entered state, creating one if there is none."""
        if self.state is None:
            self.state = game.create_state()
        return self.state

    def update(
        self,
        delta_time: float,
        surface: pygame.Surface | None = None,
        fps: int = 0,
    ) -> None:
        """Run one frame of game logic on the entered state."""
        if self.state is None:
            raise RuntimeError("no state has been entered")
        game.update(self.state, delta_time, surface, fps)

    def release(self, state: State) -> None:
        """Free all resources held by ``state``."""
        game.free_state(state)

    def enter(self, state: State | None) -> None:
        """Start using this interface with ``state`` (None on first load)."""
        self.state = state

    def leave(self) -> None:
        """Stop using this interface and drop its reference to the state."""
        self.state = None


class _Interface(Protocol):
    def initialize(self) -> State: ...

    def update(
        self, delta_time: float, surface: pygame.Surface | None, fps: int
    ) -> None: ...

    def release(self, state: State) -> None: ...

    def enter(self, state: State | None) -> None: ...

    def leave(self) -> None: ...


class Instance:
    """Owns the game state and the interface currently bound to it."""

    def __init__(
        self, interface_factory: Callable[[], _Interface] = GameInterface
    ) -> None:
        self._factory = interface_factory
        self._interface: _Interface | None = None
        self.state: State | None = None

    def __enter__(self) -> Instance:
        self.initialize()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()

    def _bound(self) -> _Interface:
        if self._interface is None:
            raise RuntimeError("instance has not been initialized")
        return self._interface

    def initialize(self) -> State:
        """Bind an interface, enter it with no state, then create the state."""
        log.debug("[hotload] initializing")
        self._interface = self._factory()
        self._interface.enter(None)
        self.state = self._interface.initialize()
        return self.state

    def update(
        self,
        delta_time: float,
        surface: pygame.Surface | None = None,
        fps: int = 0,
    ) -> None:
        """Run one frame through the bound interface."""
        self._bound().update(delta_time, surface, fps)

    def reload(self) -> None:
        """Leave the bound interface, bind a fresh one and enter it."""
        log.info("[hotload] reloading")
        previous = self._bound()
        log.info("[hotload] leaving previous")
        previous.leave()
        log.info("[hotload] binding")
        self._interface = self._factory()
        log.info("[hotload] entering")
        self._interface.enter(self.state)

    def terminate(self) -> None:
        """Leave the interface and release the state, if there is one."""
        log.debug("[hotload] terminating")
        if self.state is None:
            return
        interface = self._bound()
        interface.leave()
        interface.release(self.state)
        self.state = None