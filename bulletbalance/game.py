"""Game logic: entity setup, movement, overlap detection and drawing."""

from __future__ import annotations

import logging

import pygame

from .components import Color, DrawColor, Position, Radius, Vector2, Velocity
from .registry import Registry
from .state import State
from .spatial_hash import SpatialHash

MAX_SPATIAL_HASH_ENTITIES = 10000
SPATIAL_HASH_SPACING = 20.0
INITIAL_ENTITY_COUNT = 10
FPS_TEXT_POSITION = (10, 20)
FPS_TEXT_SIZE = 20

log = logging.getLogger(__name__)


def create_state() -> State:
    """Return a fresh game state with an empty registry."""
    return State(
        spatial_hash=SpatialHash(SPATIAL_HASH_SPACING, MAX_SPATIAL_HASH_ENTITIES)
    )


def free_state(state: State) -> None:
    """Drop every entity held by ``state``."""
    state.registry = Registry()
    state.spatial_hash.create(state.registry)


def setup_entities(state: State) -> None:
    """Create the initial row of balls; every other one moves to the right."""
    registry = state.registry
    for i in range(INITIAL_ENTITY_COUNT):
        entity = registry.create()
        registry.emplace(entity, Position(Vector2(100 + i * 1.0, 100 + i * 2.0)))
        registry.emplace(entity, Radius(10.0))
        registry.emplace(entity, DrawColor(Color.GRAY))
        if i % 2 == 0:
            registry.emplace(entity, Velocity(Vector2(i * 1.0, 0.0)))


def move(state: State, delta_time: float) -> None:
    """Advance every moving entity by its velocity over ``delta_time`` seconds."""
    for _, position, velocity in state.registry.view(Position, Velocity):
        position.value = position.value + velocity.value * delta_time


def detect_overlaps(state: State) -> None:
    """Colour overlapping entities yellow and all others gray."""
    registry = state.registry
    spatial_hash = state.spatial_hash
    spatial_hash.create(registry)

    for entity, position, radius, color in registry.view(Position, Radius, DrawColor):
        color.value = Color.GRAY
        candidates = spatial_hash.query(position.value, 2 * radius.value)
        log.debug("%d candidates near entity %d", len(candidates), entity)
        for candidate in candidates:
            if candidate == entity:
                continue
            c_position, c_radius = registry.get(candidate, Position, Radius)
            reach = radius.value + c_radius.value
            if position.value.distance_sqr(c_position.value) <= reach * reach:
                color.value = Color.YELLOW
                break


def draw(state: State, surface: pygame.Surface, fps: int) -> None:
    """Render every entity and the frame rate onto ``surface``."""
    surface.fill(Color.RAYWHITE.rgba)
    for _, position, radius, color in state.registry.view(Position, Radius, DrawColor):
        pygame.draw.circle(
            surface,
            color.value.rgba,
            (position.value.x, position.value.y),
            radius.value,
        )

    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, FPS_TEXT_SIZE)
    text = font.render(str(fps), True, Color.BLACK.rgba)
    surface.blit(text, FPS_TEXT_POSITION)


def update(
    state: State,
    delta_time: float,
    surface: pygame.Surface | None = None,
    fps: int = 0,
) -> None:
    """Run one frame: set up on the first tick, move, collide and draw."""
    if state.tick == 0:
        setup_entities(state)
    move(state, delta_time)
    detect_overlaps(state)
    if surface is not None:
        draw(state, surface, fps)
    state.tick += 1