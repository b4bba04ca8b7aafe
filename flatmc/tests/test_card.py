"""
Tests for the card capture adapter.

Tests:
- Action enumeration order and capacity
- Turn, round and hand bookkeeping
- Capture rules and scoring
- Dealing and serialization
- Legality of suggested moves
"""

import pytest

from ..engine_core.search import MonteCarloSearch
from ..engine_core.stream import StreamContext
from ..games.card import (
    CardState,
    Color,
    PlaceCard,
    board_counts,
    deal_game,
    winner,
)
from .conftest import TEST_SEED, make_hand


def _state(hand0=(), hand1=(), **kwargs) -> CardState:
    return CardState(hands=(make_hand(*hand0), make_hand(*hand1)), **kwargs)


class TestListActions:
    """Tests for enumeration."""

    def test_fresh_game_has_every_cell_and_slot(self, card_adapter, dealt_state):
        actions = card_adapter.list_actions(dealt_state, 128)
        assert len(actions) == 16 * 5
        assert actions[0] == PlaceCard(hand_index=0, x=0, y=0)
        assert actions[1] == PlaceCard(hand_index=1, x=0, y=0)
        assert actions[5] == PlaceCard(hand_index=0, x=0, y=1)

    def test_capacity_truncates(self, card_adapter, dealt_state):
        actions = card_adapter.list_actions(dealt_state, 10)
        assert len(actions) == 10
        assert actions.is_full
        assert actions[9] == PlaceCard(hand_index=4, x=0, y=1)

    def test_used_slots_and_filled_cells_skipped(self, card_adapter, dealt_state):
        state = card_adapter.apply(dealt_state, PlaceCard(hand_index=2, x=1, y=1))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))

        # Player 0 again: 14 empty cells x 4 unused slots
        actions = list(card_adapter.list_actions(state, 128))
        assert len(actions) == 14 * 4
        assert all(a.hand_index != 2 for a in actions)
        assert all((a.x, a.y) not in {(1, 1), (0, 0)} for a in actions)

    def test_no_actions_after_last_round(self, card_adapter):
        state = _state(round=5, max_rounds=5)
        assert len(card_adapter.list_actions(state, 128)) == 0
        assert card_adapter.is_terminal(state)
        assert card_adapter.random_action(state, 42) is None


class TestApply:
    """Tests for turn and hand bookkeeping."""

    def test_player_zero_move(self, card_adapter, dealt_state):
        state = card_adapter.apply(dealt_state, PlaceCard(hand_index=3, x=2, y=1))

        assert state.player_turn == 1
        assert state.round == 0
        assert state.hands[0].entries[3].used
        placed = state.cell(2, 1)
        assert placed.color == Color.BLUE
        assert placed.top == dealt_state.hands[0].entries[3].north

    def test_round_advances_when_turn_wraps(self, card_adapter, dealt_state):
        state = card_adapter.apply(dealt_state, PlaceCard(hand_index=0, x=0, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=3, y=3))

        assert state.player_turn == 0
        assert state.round == 1
        assert state.hands[1].entries[0].used
        assert state.cell(3, 3).color == Color.RED

    def test_input_state_untouched(self, card_adapter, dealt_state):
        before = dealt_state.to_dict()
        card_adapter.apply(dealt_state, PlaceCard(hand_index=0, x=0, y=0))
        assert dealt_state.to_dict() == before
        assert dealt_state.cell(0, 0) is None

    def test_full_game_ends_after_max_rounds(self, card_adapter, dealt_state):
        state = dealt_state
        moves = 0
        while not card_adapter.is_terminal(state):
            state = card_adapter.apply(state, card_adapter.list_actions(state, 128)[0])
            moves += 1
        assert moves == 10
        assert state.round == 5


class TestCaptures:
    """Tests for capture rules and scores."""

    def test_higher_side_captures(self, card_adapter):
        state = _state(hand0=[(1, 1, 1, 1)], hand1=[(1, 2, 1, 5)])
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=1, y=0))

        assert state.cell(0, 0).color == Color.RED
        assert state.scores == (0, 1)
        assert card_adapter.score(state, 1) == 1
        assert card_adapter.score(state, 0) == -1

    def test_recapture_moves_point(self, card_adapter):
        state = _state(hand0=[(1, 1, 1, 1), (1, 1, 1, 9)], hand1=[(1, 2, 1, 5)])
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=1, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=1, x=2, y=0))

        assert state.cell(1, 0).color == Color.BLUE
        assert state.scores == (1, 0)

    def test_equal_rank_does_not_capture(self, card_adapter):
        state = _state(hand0=[(1, 1, 3, 1)], hand1=[(3, 1, 1, 1)])
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=1))

        assert state.cell(0, 0).color == Color.BLUE
        assert state.scores == (0, 0)

    def test_top_side_faces_bottom_of_card_above(self, card_adapter):
        state = _state(hand0=[(1, 1, 3, 1)], hand1=[(4, 1, 1, 1)])
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=1))

        assert state.cell(0, 0).color == Color.RED
        assert state.scores == (0, 1)

    def test_own_cards_are_not_captured(self, card_adapter):
        state = _state(hand0=[(1, 1, 1, 1), (9, 9, 9, 9)], hand1=[(1, 1, 1, 1)])
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=3, y=3))
        state = card_adapter.apply(state, PlaceCard(hand_index=1, x=1, y=0))

        assert state.scores == (0, 0)
        assert state.cell(0, 0).color == Color.BLUE

    def test_board_counts_and_winner(self, card_adapter):
        state = _state(hand0=[(1, 1, 1, 1)], hand1=[(1, 2, 1, 5)])
        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=0, y=0))
        assert winner(state) == Color.BLUE

        state = card_adapter.apply(state, PlaceCard(hand_index=0, x=1, y=0))
        assert board_counts(state) == {Color.BLUE: 0, Color.RED: 2}
        assert winner(state) == Color.RED

    def test_empty_board_is_a_draw(self):
        assert winner(_state()) is None


class TestRandomAction:
    """random_action picks by seed modulo the action count."""

    def test_index_is_seed_modulo_count(self, card_adapter, dealt_state):
        actions = card_adapter.list_actions(dealt_state, 128)
        assert card_adapter.random_action(dealt_state, 0) == actions[0]
        assert card_adapter.random_action(dealt_state, 81) == actions[1]
        assert card_adapter.random_action(dealt_state, 2**64 - 1) == actions[(2**64 - 1) % 80]

    def test_pure(self, card_adapter, dealt_state):
        assert card_adapter.random_action(dealt_state, 1234) == card_adapter.random_action(dealt_state, 1234)


class TestDealing:
    """Tests for deterministic setup."""

    def test_same_seed_same_game(self):
        assert deal_game(StreamContext(3)) == deal_game(StreamContext(3))

    def test_different_seed_different_hands(self):
        assert deal_game(StreamContext(3)).hands != deal_game(StreamContext(4)).hands

    def test_ranks_in_range(self, dealt_state):
        for hand in dealt_state.hands:
            assert len(hand.entries) == 5
            for entry in hand.entries:
                assert not entry.used
                for rank in (entry.north, entry.east, entry.south, entry.west):
                    assert 1 <= rank <= 9

    def test_deal_draw_count(self):
        stream = StreamContext(3)
        deal_game(stream)
        assert stream.nonce == 40

    def test_rejects_too_many_rounds(self):
        with pytest.raises(ValueError):
            deal_game(StreamContext(3), max_rounds=6)


class TestSerialization:
    """Tests for encode/decode."""

    def test_mid_game_state_survives_encoding(self, card_adapter, dealt_state):
        state = card_adapter.apply(dealt_state, PlaceCard(hand_index=1, x=2, y=2))
        decoded = card_adapter.decode_state(card_adapter.encode_state(state))
        assert decoded == state

    def test_missing_hands_is_value_error(self, card_adapter):
        with pytest.raises(ValueError):
            card_adapter.decode_state({"board": None})

    @pytest.mark.parametrize("cell", ["x", [1], 7])
    def test_non_object_board_cell_is_value_error(self, card_adapter, dealt_state, cell):
        data = card_adapter.encode_state(dealt_state)
        data["board"][0][0] = cell
        with pytest.raises(ValueError, match="card must be an object"):
            card_adapter.decode_state(data)

    def test_non_object_hand_entry_is_value_error(self, card_adapter, dealt_state):
        data = card_adapter.encode_state(dealt_state)
        data["hands"][1]["entries"][2] = "ace"
        with pytest.raises(ValueError, match="hand entry must be an object"):
            card_adapter.decode_state(data)

    def test_off_board_action_rejected(self, card_adapter):
        with pytest.raises(ValueError):
            card_adapter.decode_action({"hand_index": 0, "x": 4, "y": 0})


class TestSuggestedMoveLegality:
    """Moves returned by the search are legal and apply cleanly."""

    def test_suggestion_is_legal_for_both_players(self, card_adapter, small_config, dealt_state):
        search = MonteCarloSearch(card_adapter, small_config, StreamContext(TEST_SEED))
        state = dealt_state

        for _ in range(4):
            mover = state.player_turn
            action = search.suggest(state, 60)

            assert state.cell(action.x, action.y) is None
            assert not state.hands[mover].entries[action.hand_index].used

            after = card_adapter.apply(state, action)
            assert after.hands[mover].entries[action.hand_index].used
            assert after.player_turn == 1 - mover
            expected_round = state.round + 1 if mover == 1 else state.round
            assert after.round == expected_round
            state = after
