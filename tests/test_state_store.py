from __future__ import annotations

from typing import Any

import pytest
from pydantic import ValidationError

from pyrobots.models.robot import Robot
from pyrobots.state.commands import RemoveOne, ReplaceAll, UpsertOne
from pyrobots.state.store import RobotStore


def _robot(robot_id: str, name: str | None = None, **extra: Any) -> Robot:
    return Robot(
        id=robot_id,
        name=name or f"Robot {robot_id}",
        image="#",
        creation_date="13/08/2022",
        speed=extra.get("speed", 5),
        endurance=extra.get("endurance", 5),
    )


def _ids(store: RobotStore) -> list[str]:
    return [robot.id for robot in store.select_all()]


def test_store_starts_empty() -> None:
    store = RobotStore()
    assert store.select_all() == ()
    assert len(store) == 0


def test_replace_all_preserves_received_order() -> None:
    store = RobotStore()
    robots = (_robot("3"), _robot("1"), _robot("2"))

    store.apply(ReplaceAll(robots=robots))

    assert store.select_all() == robots


def test_replace_all_discards_previous_contents() -> None:
    store = RobotStore()
    store.apply(ReplaceAll(robots=(_robot("1"), _robot("2"))))
    store.apply(ReplaceAll(robots=(_robot("9"),)))

    assert _ids(store) == ["9"]
    assert "1" not in store


def test_replace_all_collapses_duplicate_ids() -> None:
    store = RobotStore()
    store.apply(ReplaceAll(robots=(_robot("1", "first"), _robot("2"), _robot("1", "second"))))

    assert _ids(store) == ["1", "2"]
    assert store.get("1") is not None
    assert store.get("1").name == "second"  # type: ignore[union-attr]


def test_upsert_appends_new_robot() -> None:
    store = RobotStore()
    a, b = _robot("a"), _robot("b")
    store.apply(ReplaceAll(robots=(a,)))

    store.apply(UpsertOne(robot=b))

    assert store.select_all() == (a, b)


def test_upsert_replaces_in_place() -> None:
    store = RobotStore()
    a, b, c = _robot("a"), _robot("b"), _robot("c")
    store.apply(ReplaceAll(robots=(a, b, c)))
    b_prime = _robot("b", "B prime", speed=1)

    store.apply(UpsertOne(robot=b_prime))

    assert store.select_all() == (a, b_prime, c)


def test_remove_keeps_survivor_order() -> None:
    store = RobotStore()
    a, b, c = _robot("a"), _robot("b"), _robot("c")
    store.apply(ReplaceAll(robots=(a, b, c)))

    store.apply(RemoveOne(robot_id="b"))

    assert store.select_all() == (a, c)


def test_remove_absent_id_is_a_noop() -> None:
    store = RobotStore()
    store.apply(ReplaceAll(robots=(_robot("a"),)))

    store.apply(RemoveOne(robot_id="zzz"))

    assert _ids(store) == ["a"]


def test_ids_stay_unique_over_mixed_commands() -> None:
    store = RobotStore()
    commands = [
        ReplaceAll(robots=(_robot("1"), _robot("2"), _robot("1"))),
        UpsertOne(robot=_robot("2", "again")),
        UpsertOne(robot=_robot("3")),
        UpsertOne(robot=_robot("1", "once more")),
        ReplaceAll(robots=(_robot("3"), _robot("3"), _robot("4"))),
        UpsertOne(robot=_robot("4", "four")),
    ]
    for command in commands:
        store.apply(command)
        ids = _ids(store)
        assert len(ids) == len(set(ids))

    assert _ids(store) == ["3", "4"]


def test_commands_reject_unpersisted_robots() -> None:
    unsaved = _robot("")
    with pytest.raises(ValidationError):
        UpsertOne(robot=unsaved)
    with pytest.raises(ValidationError):
        ReplaceAll(robots=(_robot("1"), unsaved))


def test_unknown_command_type_raises() -> None:
    store = RobotStore()
    with pytest.raises(TypeError):
        store.apply("not a command")  # type: ignore[arg-type]


def test_listeners_receive_snapshot_after_each_command() -> None:
    store = RobotStore()
    seen: list[tuple[Robot, ...]] = []
    unsubscribe = store.subscribe(seen.append)

    store.apply(UpsertOne(robot=_robot("1")))
    store.apply(RemoveOne(robot_id="1"))
    unsubscribe()
    store.apply(UpsertOne(robot=_robot("2")))

    assert [[r.id for r in snapshot] for snapshot in seen] == [["1"], []]


def test_failing_listener_does_not_break_store_or_other_listeners() -> None:
    store = RobotStore()
    seen: list[int] = []

    def _broken(_snapshot: tuple[Robot, ...]) -> None:
        raise RuntimeError("boom")

    store.subscribe(_broken)
    store.subscribe(lambda snapshot: seen.append(len(snapshot)))

    store.apply(UpsertOne(robot=_robot("1")))

    assert seen == [1]
    assert _ids(store) == ["1"]
