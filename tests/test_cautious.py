import random

import pytest

from tactics.errors import NoUsableMoveError, TeamNotFoundError
from tactics.schema import AttackAction, ItemKind, SwitchAction, UseItemAction
from tactics.strategies.cautious import CautiousStrategy
from tests.builders import CHART, ME, ScriptedRandom, bag, battle, mon, move


def cautious(rng=None) -> CautiousStrategy:
    return CautiousStrategy(ME, chart=CHART, rng=rng or ScriptedRandom())


def test_heals_below_half_health():
    state = battle([mon(1, "Charmander", "fire", hp=20), mon(2, "Squirtle", "water")], mon(9, "Bulbasaur", "grass"))
    action = cautious().choose_action(state, bag(potion=1, revive=0))
    assert action == UseItemAction(trainer_id=ME, target_id=1, item=ItemKind.POTION)


def test_no_heal_at_half_health_or_more():
    state = battle([mon(1, "Charmander", "fire", hp=50)], mon(9, "Bulbasaur", "grass"))
    action = cautious().choose_action(state, bag(potion=3))
    assert isinstance(action, AttackAction)


def test_revives_knocked_out_active_when_out_of_heals():
    state = battle([mon(1, "Charmander", "fire", hp=0), mon(2, "Squirtle", "water")], mon(9, "Bulbasaur", "grass"))
    action = cautious().choose_action(state, bag(potion=0, revive=1))
    assert action == UseItemAction(trainer_id=ME, target_id=1, item=ItemKind.REVIVE)


def test_basic_heal_comes_before_revive_when_knocked_out():
    state = battle([mon(1, "Charmander", "fire", hp=0)], mon(9, "Bulbasaur", "grass"))
    action = cautious().choose_action(state, bag(potion=1, revive=1))
    assert action == UseItemAction(trainer_id=ME, target_id=1, item=ItemKind.POTION)


@pytest.mark.parametrize("seed", range(20))
def test_healthy_favourable_matchup_always_attacks(seed):
    state = battle([mon(1, "Charmander", "fire", hp=80), mon(2, "Squirtle", "water")], mon(9, "Bulbasaur", "grass"))
    action = cautious(random.Random(seed)).choose_action(state, bag(potion=5, revive=5))
    assert isinstance(action, AttackAction)


def test_switches_out_of_an_immune_matchup_even_when_healthy():
    state = battle(
        [
            mon(1, "Rattata", "normal"),
            mon(2, "Charmander", "fire"),
            mon(3, "Squirtle", "water", defense=100, special_defense=100),
        ],
        mon(9, "Gastly", "ghost"),
    )
    action = cautious().choose_action(state, bag())
    assert action == SwitchAction(trainer_id=ME, target_id=3)


def test_immune_matchup_without_candidates_attacks():
    state = battle([mon(1, "Rattata", "normal"), mon(2, "Charmander", "fire", hp=0)], mon(9, "Gastly", "ghost"))
    action = cautious().choose_action(state, bag())
    assert isinstance(action, AttackAction)


def test_switches_when_low_and_disadvantaged():
    state = battle([mon(1, "Caterpie", "bug", hp=30), mon(2, "Squirtle", "water")], mon(9, "Vulpix", "fire"))
    action = cautious().choose_action(state, bag())
    assert action == SwitchAction(trainer_id=ME, target_id=2)


def test_stays_in_when_disadvantaged_but_healthy():
    state = battle([mon(1, "Caterpie", "bug", hp=60), mon(2, "Squirtle", "water")], mon(9, "Vulpix", "fire"))
    action = cautious().choose_action(state, bag())
    assert isinstance(action, AttackAction)


def test_switch_score_caps_type_advantage():
    # Squirtle's 2x would win uncapped; capped at 1.0 the bulkier Snorlax wins.
    state = battle(
        [
            mon(1, "Caterpie", "bug", hp=30),
            mon(2, "Squirtle", "water"),
            mon(3, "Snorlax", "normal", defense=120, special_defense=120),
        ],
        mon(9, "Vulpix", "fire"),
    )
    action = cautious().choose_action(state, bag())
    assert action == SwitchAction(trainer_id=ME, target_id=3)


def test_shields_when_low_and_draw_is_under_threshold():
    moves = [move(1, "Tackle"), move(2, "Protect", power=0)]
    state = battle([mon(1, "Rattata", "normal", hp=30, moves=moves)], mon(9, "Vulpix", "fire"))
    action = cautious(ScriptedRandom(0.1)).choose_action(state, bag())
    assert action == AttackAction(move_id=2, combatant_id=1, trainer_id=ME)


def test_no_shield_when_draw_misses():
    moves = [move(1, "Tackle"), move(2, "Protect", power=0)]
    state = battle([mon(1, "Rattata", "normal", hp=30, moves=moves)], mon(9, "Vulpix", "fire"))
    action = cautious(ScriptedRandom(0.5)).choose_action(state, bag())
    assert action == AttackAction(move_id=1, combatant_id=1, trainer_id=ME)


def test_exhausted_protect_is_never_chosen():
    moves = [move(1, "Tackle"), move(2, "Protect", power=0, pp=0)]
    state = battle([mon(1, "Rattata", "normal", hp=30, moves=moves)], mon(9, "Vulpix", "fire"))
    action = cautious(ScriptedRandom(0.1)).choose_action(state, bag())
    assert action.move_id == 1


def test_prefers_stat_lowering_status_moves():
    moves = [move(1, "Ember", "fire"), move(2, "Growl", power=0, status="attack_down")]
    state = battle([mon(1, "Charmander", "fire", moves=moves)], mon(9, "Bulbasaur", "grass"))
    action = cautious().choose_action(state, bag())
    assert action.move_id == 2


def test_move_score():
    opponent = mon(9, "Bulbasaur", "grass")
    strategy = cautious()
    assert strategy.score_move(move(1, "Ember", "fire"), opponent) == pytest.approx(2.0 * 0.2 + 0.1 + 0.05)
    growl = move(2, "Growl", power=0, status="attack_down")
    assert strategy.score_move(growl, opponent) == pytest.approx(0.7 + 0.3 + 0.2 + 0.1 + 0.05)
    sing = move(3, "Sing", power=0, accuracy=50, status="sleep")
    assert strategy.score_move(sing, opponent) == pytest.approx(0.7 + 0.2 + 0.05 + 0.05)


def test_move_score_is_deterministic_under_a_fixed_draw():
    opponent = mon(9, "Bulbasaur", "grass")
    ember = move(1, "Ember", "fire")
    strategy = cautious(ScriptedRandom(0.3, 0.3))
    assert strategy.score_move(ember, opponent) == strategy.score_move(ember, opponent)


def test_unknown_move_type_scores_as_neutral():
    opponent = mon(9, "Bulbasaur", "grass")
    assert cautious().score_move(move(1, "Oddity", "cosmic"), opponent) == pytest.approx(0.2 + 0.1 + 0.05)


def test_ties_go_to_the_first_move():
    moves = [move(4, "Tackle"), move(5, "Tackle")]
    state = battle([mon(1, "Rattata", "normal", moves=moves)], mon(9, "Vulpix", "fire"))
    assert cautious().choose_action(state, bag()).move_id == 4


def test_no_usable_move_is_a_fault():
    moves = [move(1, pp=0)]
    state = battle([mon(1, "Rattata", "normal", moves=moves)], mon(9, "Vulpix", "fire"))
    with pytest.raises(NoUsableMoveError):
        cautious().choose_action(state, bag())


def test_unknown_trainer_is_a_fault():
    state = battle([mon(1, "Rattata", "normal")], mon(9, "Vulpix", "fire"))
    with pytest.raises(TeamNotFoundError):
        CautiousStrategy(42, chart=CHART).choose_action(state, bag())
