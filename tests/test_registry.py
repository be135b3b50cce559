import pytest

from bulletbalance.components import Position, Radius, Velocity, Vector2
from bulletbalance.registry import Registry


def test_create_returns_distinct_entities():
    registry = Registry()
    entities = [registry.create() for _ in range(5)]
    assert len(set(entities)) == 5
    assert len(registry) == 5
    assert all(entity in registry for entity in entities)


def test_emplace_returns_the_component():
    registry = Registry()
    entity = registry.create()
    position = Position(Vector2(1.0, 2.0))
    assert registry.emplace(entity, position) is position


def test_has_reports_components():
    registry = Registry()
    entity = registry.create()
    registry.emplace(entity, Radius(3.0))
    assert registry.has(entity, Radius)
    assert not registry.has(entity, Position)
    assert not registry.has(entity + 100, Radius)


def test_get_single_component():
    registry = Registry()
    entity = registry.create()
    radius = Radius(4.0)
    registry.emplace(entity, radius)
    assert registry.get(entity, Radius) is radius


def test_get_several_components_returns_tuple_in_order():
    registry = Registry()
    entity = registry.create()
    position = Position(Vector2(1.0, 1.0))
    radius = Radius(2.0)
    registry.emplace(entity, radius)
    registry.emplace(entity, position)
    assert registry.get(entity, Position, Radius) == (position, radius)


def test_get_missing_component_raises_key_error():
    registry = Registry()
    entity = registry.create()
    with pytest.raises(KeyError):
        registry.get(entity, Velocity)


def test_get_without_types_raises_type_error():
    registry = Registry()
    entity = registry.create()
    with pytest.raises(TypeError):
        registry.get(entity)


def test_emplace_twice_raises_value_error():
    registry = Registry()
    entity = registry.create()
    registry.emplace(entity, Radius(1.0))
    with pytest.raises(ValueError):
        registry.emplace(entity, Radius(2.0))


def test_emplace_on_unknown_entity_raises_key_error():
    registry = Registry()
    with pytest.raises(KeyError):
        registry.emplace(42, Radius(1.0))


def test_view_only_yields_entities_with_all_types():
    registry = Registry()
    moving = registry.create()
    still = registry.create()
    registry.emplace(moving, Position(Vector2(0.0, 0.0)))
    registry.emplace(moving, Velocity(Vector2(1.0, 0.0)))
    registry.emplace(still, Position(Vector2(5.0, 5.0)))

    seen = [row[0] for row in registry.view(Position, Velocity)]
    assert seen == [moving]
    assert {row[0] for row in registry.view(Position)} == {moving, still}


def test_view_yields_live_components():
    registry = Registry()
    entity = registry.create()
    registry.emplace(entity, Position(Vector2(0.0, 0.0)))
    registry.emplace(entity, Velocity(Vector2(2.0, 3.0)))

    for _, position, velocity in registry.view(Position, Velocity):
        position.value = position.value + velocity.value

    assert registry.get(entity, Position).value == Vector2(2.0, 3.0)


def test_view_without_types_raises_type_error():
    registry = Registry()
    with pytest.raises(TypeError):
        list(registry.view())