"""
Tests for complete matches between policies.
"""

import pytest

from ..bots import BotDecision, BotPolicy, FirstLegalPolicy, MonteCarloBot, RandomPolicy
from ..engine_core.search import MonteCarloSearch, NoLegalMoves
from ..games.nim import NimState
from ..session import Match


class TestMatch:
    """Tests for the match loop."""

    def test_nim_match_finishes(self, nim_adapter, config):
        bot = MonteCarloBot(search=MonteCarloSearch(nim_adapter, config), difficulty=80)
        result = Match(nim_adapter, {0: bot, 1: FirstLegalPolicy()}).play(NimState(pile=6))

        assert result.finished
        assert result.stop_reason == ""
        assert nim_adapter.is_terminal(result.final_state)
        assert [m.player for m in result.moves] == [i % 2 for i in range(len(result.moves))]
        assert result.scores[0] == -result.scores[1]
        assert result.winner in (0, 1)

    def test_card_match_plays_ten_moves(self, card_adapter, small_config, dealt_state):
        bot = MonteCarloBot(search=MonteCarloSearch(card_adapter, small_config), difficulty=50)
        result = Match(card_adapter, {0: bot, 1: RandomPolicy(seed=3)}).play(dealt_state)

        assert result.finished
        assert len(result.moves) == 10
        assert result.final_state.round == 5
        assert result.scores[0] + result.scores[1] == 0

    def test_turn_limit_stops_early(self, nim_adapter):
        policies = {0: FirstLegalPolicy(), 1: FirstLegalPolicy()}
        result = Match(nim_adapter, policies, max_turns=2).play(NimState(pile=10))

        assert not result.finished
        assert len(result.moves) == 2
        assert "turn limit" in result.stop_reason
        assert result.winner is None

    def test_policy_without_move_stops_match(self, nim_adapter):
        class Resigning(BotPolicy):
            def select_action(self, adapter, state) -> BotDecision:
                raise NoLegalMoves("resigned")

        result = Match(nim_adapter, {0: Resigning(), 1: FirstLegalPolicy()}).play(NimState(pile=4))

        assert not result.finished
        assert result.moves == []
        assert "no legal move" in result.stop_reason

    def test_missing_policy_is_error(self, nim_adapter):
        with pytest.raises(KeyError):
            Match(nim_adapter, {0: FirstLegalPolicy()}).play(NimState(pile=4, to_move=1))

    def test_already_finished_game(self, nim_adapter):
        result = Match(nim_adapter, {0: FirstLegalPolicy(), 1: FirstLegalPolicy()}).play(NimState(pile=0))
        assert result.finished
        assert result.moves == []
