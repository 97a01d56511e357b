from shapewars.components import Collision
from shapewars.entity import Entity


def test_new_entity_is_active():
    assert Entity(3, "enemy").is_active is True


def test_id_and_tag():
    e = Entity(7, "bullet")
    assert e.id == 7
    assert e.tag == "bullet"


def test_default_tag():
    assert Entity(0).tag == "default"


def test_destroy_deactivates():
    e = Entity(1, "enemy")
    e.destroy()
    assert e.is_active is False


def test_destroy_is_idempotent():
    e = Entity(1, "enemy")
    e.destroy()
    e.destroy()
    assert e.is_active is False


def test_components_start_empty_and_can_be_set():
    e = Entity(2, "player")
    assert e.transform is None and e.shape is None and e.lifespan is None
    e.collision = Collision(5)
    assert e.collision.radius == 5