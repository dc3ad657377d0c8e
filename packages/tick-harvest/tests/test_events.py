"""Tests for the harvest hook chain."""
from __future__ import annotations

import pytest
from tick_harvest import (
    AfterHarvest,
    Block,
    BlockGrid,
    BlockState,
    Face,
    Hand,
    Harvester,
    HarvestCheck,
    HarvestDrops,
    HarvestEvents,
    ItemStack,
)

CROP = BlockState(Block("minecraft:wheat"))
WHEAT = ItemStack("minecraft:wheat")
SEEDS = ItemStack("minecraft:wheat_seeds", 2)


def _check(first: bool = True) -> HarvestCheck:
    return HarvestCheck(BlockGrid(4, 4, 4), CROP, (1, 1, 1), Harvester(), Hand.MAIN_HAND, first)


def _drops(*stacks: ItemStack) -> HarvestDrops:
    return HarvestDrops(
        BlockGrid(4, 4, 4),
        CROP,
        (1, 1, 1),
        Face.UP,
        None,
        Harvester(),
        Hand.MAIN_HAND,
        _stacks=list(stacks),
    )


class TestDispatch:
    def test_registration_order(self) -> None:
        events = HarvestEvents()
        order: list[str] = []
        events.subscribe(HarvestCheck, lambda e: order.append("a"))
        events.subscribe(HarvestCheck, lambda e: order.append("b"))
        events.subscribe(HarvestCheck, lambda e: order.append("c"))
        events.post(_check())
        assert order == ["a", "b", "c"]

    def test_stages_are_separate(self) -> None:
        events = HarvestEvents()
        seen: list[object] = []
        events.subscribe(AfterHarvest, seen.append)
        events.post(_check())
        assert seen == []

    def test_post_without_listeners_returns_event(self) -> None:
        event = _check()
        assert HarvestEvents().post(event) is event

    def test_unsubscribe(self) -> None:
        events = HarvestEvents()
        seen: list[object] = []
        events.subscribe(HarvestCheck, seen.append)
        events.unsubscribe(HarvestCheck, seen.append)
        events.post(_check())
        assert seen == []

    def test_unsubscribe_unknown_is_noop(self) -> None:
        HarvestEvents().unsubscribe(HarvestCheck, print)

    def test_unknown_stage_raises(self) -> None:
        with pytest.raises(TypeError, match="not a harvest hook"):
            HarvestEvents().subscribe(int, print)

    def test_listener_added_during_post_waits(self) -> None:
        events = HarvestEvents()
        late: list[object] = []

        def adder(event: HarvestCheck) -> None:
            events.subscribe(HarvestCheck, late.append)

        events.subscribe(HarvestCheck, adder)
        events.post(_check())
        assert late == []
        events.post(_check())
        assert len(late) == 1

    def test_listeners_is_a_copy(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestCheck, print)
        events.listeners(HarvestCheck).clear()
        assert events.listeners(HarvestCheck) == [print]

    def test_clear(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestCheck, print)
        events.clear()
        assert events.listeners(HarvestCheck) == []

    def test_listener_errors_propagate(self) -> None:
        events = HarvestEvents()

        def broken(event: HarvestCheck) -> None:
            raise RuntimeError("listener bug")

        events.subscribe(HarvestCheck, broken)
        with pytest.raises(RuntimeError, match="listener bug"):
            events.post(_check())


class TestHarvestCheck:
    def test_allowed_by_default(self) -> None:
        assert _check().allowed

    def test_deny(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestCheck, lambda e: e.deny())
        assert not events.post(_check()).allowed

    def test_final_value_honored(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestCheck, lambda e: e.deny())
        events.subscribe(HarvestCheck, lambda e: setattr(e, "allowed", True))
        assert events.post(_check()).allowed

    def test_neighbor_flag(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestCheck, lambda e: None if e.first else e.deny())
        assert events.post(_check(first=True)).allowed
        assert not events.post(_check(first=False)).allowed


class TestHarvestDrops:
    def test_untouched_defaults(self) -> None:
        result = HarvestEvents().post(_drops(WHEAT, SEEDS)).result()
        assert result.stacks == (WHEAT, SEEDS)
        assert not result.changed

    def test_add_drop(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestDrops, lambda e: e.add_drop(ItemStack("minecraft:poppy")))
        result = events.post(_drops(WHEAT)).result()
        assert result.stacks == (WHEAT, ItemStack("minecraft:poppy"))
        assert result.changed

    def test_set_drops_replaces(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestDrops, lambda e: e.set_drops([SEEDS]))
        result = events.post(_drops(WHEAT)).result()
        assert result.stacks == (SEEDS,)
        assert result.changed

    def test_clear(self) -> None:
        event = _drops(WHEAT)
        event.clear()
        assert event.drops == ()
        assert event.changed

    def test_listeners_chain(self) -> None:
        events = HarvestEvents()
        events.subscribe(HarvestDrops, lambda e: e.set_drops([SEEDS]))
        events.subscribe(HarvestDrops, lambda e: e.add_drop(e.drops[0]))
        assert events.post(_drops(WHEAT)).drops == (SEEDS, SEEDS)

    def test_seed_list_is_copied(self) -> None:
        seed = [WHEAT]
        event = HarvestDrops(
            BlockGrid(4, 4, 4),
            CROP,
            (1, 1, 1),
            Face.UP,
            None,
            Harvester(),
            Hand.MAIN_HAND,
            _stacks=seed,
        )
        event.add_drop(SEEDS)
        event.clear()
        assert seed == [WHEAT]
