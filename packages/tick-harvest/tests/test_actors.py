"""Tests for the Harvester component."""
from __future__ import annotations

import pytest
from tick_harvest import HOE_ACTIONS, IRON, Block, BlockState, Hand, Harvester, Tool


def _hoe(max_damage: int = 250) -> Tool:
    return Tool("minecraft:iron_hoe", IRON, HOE_ACTIONS, max_damage=max_damage)


class TestHeldItems:
    def test_held_item_per_hand(self) -> None:
        main, off = _hoe(), _hoe()
        actor = Harvester(main_hand=main, off_hand=off)
        assert actor.held_item(Hand.MAIN_HAND) is main
        assert actor.held_item(Hand.OFF_HAND) is off

    def test_empty_hands(self) -> None:
        assert Harvester().held_item(Hand.MAIN_HAND) is None


class TestReward:
    def test_grant_accumulates(self) -> None:
        actor = Harvester()
        actor.grant_reward(2)
        actor.grant_reward(3)
        assert actor.experience == 5

    def test_negative_raises(self) -> None:
        with pytest.raises(ValueError, match="amount must be >= 0"):
            Harvester().grant_reward(-1)


class TestToolDamage:
    def test_damage(self) -> None:
        actor = Harvester(main_hand=_hoe())
        actor.damage_held_tool(Hand.MAIN_HAND, 3)
        assert actor.main_hand.durability == 247

    def test_breaks_at_max_damage(self) -> None:
        actor = Harvester(off_hand=_hoe(max_damage=2))
        actor.damage_held_tool(Hand.OFF_HAND, 2)
        assert actor.off_hand is None

    def test_empty_hand_is_noop(self) -> None:
        Harvester().damage_held_tool(Hand.MAIN_HAND, 1)

    def test_unbreakable_tool(self) -> None:
        stick = Tool("mod:stick")
        actor = Harvester(main_hand=stick)
        actor.damage_held_tool(Hand.MAIN_HAND, 5)
        assert stick.damage == 0


class TestCanHarvest:
    def test_forbidden_blocks(self) -> None:
        actor = Harvester(forbidden=frozenset({"mod:bedrock_crop"}))
        assert actor.can_harvest(BlockState(Block("mod:wheat")))
        assert not actor.can_harvest(BlockState(Block("mod:bedrock_crop")))
