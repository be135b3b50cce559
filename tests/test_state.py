import pytest

from bulletbalance.components import Radius
from bulletbalance.spatial_hash import SpatialHash
from bulletbalance.state import State


def test_new_state_starts_at_tick_zero():
    state = State(spatial_hash=SpatialHash(20.0, 10))
    assert state.tick == 0
    assert len(state.registry) == 0


def test_states_do_not_share_registries():
    first = State(spatial_hash=SpatialHash(20.0, 10))
    second = State(spatial_hash=SpatialHash(20.0, 10))
    entity = first.registry.create()
    first.registry.emplace(entity, Radius(1.0))
    assert len(first.registry) == 1
    assert len(second.registry) == 0


def test_state_keeps_given_spatial_hash():
    spatial_hash = SpatialHash(20.0, 10)
    state = State(spatial_hash=spatial_hash)
    assert state.spatial_hash is spatial_hash


def test_spatial_hash_is_required():
    with pytest.raises(TypeError):
        State()


def test_fields_are_keyword_only():
    with pytest.raises(TypeError):
        State(SpatialHash(20.0, 10))