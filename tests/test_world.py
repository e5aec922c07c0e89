import pytest

from advworld.player import Player
from advworld.world import Item, Room, World, validate_world


def make_world() -> World:
    key = Item("key", "A small iron key.")
    start = Room("Start", exits={"north": "Hall"}, items=[key])
    hall = Room("Hall", exits={"south": "Start"})
    return World(rooms={"Start": start, "Hall": hall}, items={"key": key}, start_room_name="Start")


def test_lookups() -> None:
    world = make_world()
    assert world.get_room("Hall").name == "Hall"
    assert world.get_room("Attic") is None
    assert world.get_item("key").description == "A small iron key."
    assert world.get_item("sword") is None
    assert world.start_room() is world.get_room("Start")


def test_item_is_immutable() -> None:
    item = Item("key")
    with pytest.raises(AttributeError):
        item.name = "lock"


def test_add_exit_normalizes_direction() -> None:
    room = Room("Start")
    room.add_exit("  NORTH ", " Hall ")
    assert room.exits == {"north": "Hall"}


@pytest.mark.parametrize("direction, destination", [("", "Hall"), ("north", "  "), (None, "Hall")])
def test_add_exit_rejects_blank(direction, destination) -> None:
    with pytest.raises(ValueError):
        Room("Start").add_exit(direction, destination)


def test_remove_item_uses_identity() -> None:
    room = Room("Start")
    registered = Item("key")
    lookalike = Item("key")
    room.add_item(registered)
    assert room.remove_item(lookalike) is False
    assert room.remove_item(registered) is True
    assert room.items == []


def test_room_rejects_missing_item() -> None:
    with pytest.raises(ValueError):
        Room("Start").add_item(None)


def test_take_and_drop_share_identity_with_world() -> None:
    world = make_world()
    player = Player(world.start_room_name)
    room = world.get_room(player.current_room_name)
    key = room.items[0]

    assert room.remove_item(key)
    player.take_item(key)
    assert player.inventory[0] is world.get_item("key")

    player.move_to("Hall")
    assert player.drop_item(key)
    world.get_room(player.current_room_name).add_item(key)
    assert world.get_room("Hall").items[0] is world.get_item("key")
    assert validate_world(world) == []


def test_player_drop_unknown_item() -> None:
    player = Player("Start")
    assert player.drop_item(Item("key")) is False


def test_player_room_names() -> None:
    player = Player("  Start ")
    assert player.current_room_name == "Start"
    with pytest.raises(ValueError):
        player.move_to(" ")
    with pytest.raises(ValueError):
        Player("")


def test_player_rejects_missing_items() -> None:
    player = Player("Start")
    with pytest.raises(ValueError):
        player.take_item(None)
    with pytest.raises(ValueError):
        player.drop_item(None)


def test_validate_world_reports_broken_state() -> None:
    world = make_world()
    world.get_room("Hall").exits["down"] = "Cellar"
    world.get_room("Hall").items.append(Item("key"))
    world.rooms["Attic"] = Room("Loft")
    world.start_room_name = "Garden"

    issues = validate_world(world)
    assert len(issues) == 4
    assert any("Cellar" in issue for issue in issues)
    assert any("not the item registered" in issue for issue in issues)
    assert any("'Attic'" in issue for issue in issues)
    assert any("Garden" in issue for issue in issues)
