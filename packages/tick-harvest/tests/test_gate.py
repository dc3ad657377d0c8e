"""Tests for the eligibility gate."""
from __future__ import annotations

from tick_harvest import (
    HOE_ACTIONS,
    IRON,
    BlockGrid,
    DefaultToolRules,
    Face,
    Hand,
    Harvester,
    HarvestConfig,
    InteractionEvent,
    Tool,
    can_interact,
    interaction_hand,
)

RULES = DefaultToolRules()
REQUIRE = HarvestConfig(require_tool=True)
LENIENT = HarvestConfig(require_tool=False)


def _hoe() -> Tool:
    return Tool("minecraft:iron_hoe", IRON, HOE_ACTIONS, max_damage=250)


def _sword() -> Tool:
    return Tool("minecraft:iron_sword", IRON, frozenset({"sword_dig"}), max_damage=250)


class TestInteractionHand:
    def test_main_hand_hoe(self) -> None:
        actor = Harvester(main_hand=_hoe())
        assert interaction_hand(actor, RULES, REQUIRE) is Hand.MAIN_HAND

    def test_off_hand_hoe(self) -> None:
        actor = Harvester(main_hand=_sword(), off_hand=_hoe())
        assert interaction_hand(actor, RULES, REQUIRE) is Hand.OFF_HAND

    def test_main_hand_wins_over_off_hand(self) -> None:
        actor = Harvester(main_hand=_hoe(), off_hand=_hoe())
        assert interaction_hand(actor, RULES, REQUIRE) is Hand.MAIN_HAND

    def test_no_tool_required_tool(self) -> None:
        actor = Harvester(main_hand=_sword())
        assert interaction_hand(actor, RULES, REQUIRE) is None

    def test_no_tool_lenient_defaults_to_main(self) -> None:
        assert interaction_hand(Harvester(), RULES, LENIENT) is Hand.MAIN_HAND

    def test_lenient_still_prefers_off_hand_hoe(self) -> None:
        actor = Harvester(off_hand=_hoe())
        assert interaction_hand(actor, RULES, LENIENT) is Hand.OFF_HAND

    def test_sneaking_with_hoe(self) -> None:
        actor = Harvester(main_hand=_hoe(), sneaking=True)
        assert interaction_hand(actor, RULES, REQUIRE) is None

    def test_sneaking_lenient(self) -> None:
        actor = Harvester(sneaking=True)
        assert interaction_hand(actor, RULES, LENIENT) is None

    def test_partial_hoe_actions_not_a_tool(self) -> None:
        actor = Harvester(main_hand=Tool("mod:rake", IRON, frozenset({"hoe_till"})))
        assert interaction_hand(actor, RULES, REQUIRE) is None


class TestCanInteract:
    def _event(self, actor: Harvester, denied: bool = False) -> InteractionEvent:
        return InteractionEvent(
            actor, BlockGrid(4, 4, 4), Hand.MAIN_HAND, (1, 1, 1), Face.UP, denied=denied
        )

    def test_regular_actor(self) -> None:
        actor = Harvester(main_hand=_hoe())
        assert can_interact(actor, self._event(actor))

    def test_spectator(self) -> None:
        actor = Harvester(main_hand=_hoe(), off_hand=_hoe(), spectator=True)
        assert not can_interact(actor, self._event(actor))

    def test_denied_by_outer_permission(self) -> None:
        actor = Harvester(main_hand=_hoe())
        assert not can_interact(actor, self._event(actor, denied=True))
