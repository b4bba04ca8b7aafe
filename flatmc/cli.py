"""
flatmc CLI - Command-line interface for the engine.

Usage:
    flatmc suggest nim --pile 3 [--to-move 0] [--difficulty 95]
    flatmc suggest card [--deal-seed 7] [--difficulty 50]
    flatmc play nim|card [--difficulty 80] [--opponent random|first|mc]
"""

import argparse
import logging
import sys

from .engine_core.config import SearchConfig
from .engine_core.search import MonteCarloSearch, NoLegalMoves
from .engine_core.stream import StreamContext


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="flatmc - Deterministic flat Monte-Carlo move suggestions",
        prog="flatmc",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--base-iterations", type=int, help="Rollouts at difficulty 50")
    parser.add_argument("--max-depth", type=int, help="Rollout depth cutoff")
    parser.add_argument("--seed", type=lambda s: int(s, 0), help="64-bit stream seed")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Suggest command
    suggest_parser = subparsers.add_parser("suggest", help="Suggest one move")
    suggest_games = suggest_parser.add_subparsers(dest="game", help="Game")

    nim_parser = suggest_games.add_parser("nim", help="Take-1-or-2 pile game")
    nim_parser.add_argument("--pile", type=int, required=True, help="Stones left")
    nim_parser.add_argument("--to-move", type=int, default=0, choices=[0, 1])
    nim_parser.add_argument("--difficulty", type=int, default=50)

    card_parser = suggest_games.add_parser("card", help="Card capture game (fresh deal)")
    card_parser.add_argument("--deal-seed", type=int, default=0, help="Seed for dealing hands")
    card_parser.add_argument("--difficulty", type=int, default=50)

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a full game against a baseline")
    play_parser.add_argument("game", choices=["nim", "card"])
    play_parser.add_argument("--difficulty", type=int, default=50)
    play_parser.add_argument("--pile", type=int, default=10, help="Starting pile (nim)")
    play_parser.add_argument("--deal-seed", type=int, default=0, help="Seed for dealing hands (card)")
    play_parser.add_argument(
        "--opponent", choices=["random", "first", "mc"], default="random",
        help="Policy for player 1",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = SearchConfig.from_env().with_overrides(
            base_iterations=args.base_iterations,
            max_playout_depth=args.max_depth,
            seed=args.seed,
        )
        if args.command == "suggest" and args.game:
            cmd_suggest(args, config)
        elif args.command == "play":
            cmd_play(args, config)
        else:
            parser.print_help()
            sys.exit(1)
    except NoLegalMoves as e:
        print(f"No legal moves: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def _start_state(args, game):
    """Build the adapter and the start state for a game."""
    if game == "nim":
        from .games.nim import NimAdapter
        adapter = NimAdapter()
        return adapter, adapter.decode_state({"pile": args.pile, "to_move": getattr(args, "to_move", 0)})

    from .games.card import CardAdapter, deal_game
    return CardAdapter(), deal_game(StreamContext(args.deal_seed))


def cmd_suggest(args, config):
    """Suggest a single move."""
    adapter, state = _start_state(args, args.game)
    search = MonteCarloSearch(adapter, config, StreamContext(config.seed))

    report = search.evaluate(state, args.difficulty)
    if not report.has_move:
        raise NoLegalMoves(f"{args.game} state offers no action")

    print(f"Suggested: {adapter.encode_action(report.action)}")
    print(f"Iterations: {report.iterations} ({report.sims_per_action} per candidate)")
    print(f"Candidates: {report.candidates}")
    print(f"Best average: {report.best_average}")


def cmd_play(args, config):
    """Play a match: Monte-Carlo bot as player 0 against a baseline."""
    from .bots import FirstLegalPolicy, MonteCarloBot, RandomPolicy
    from .session import Match

    adapter, state = _start_state(args, args.game)
    stream = StreamContext(config.seed)
    bot = MonteCarloBot(search=MonteCarloSearch(adapter, config, stream), difficulty=args.difficulty)

    if args.opponent == "first":
        opponent = FirstLegalPolicy()
    elif args.opponent == "mc":
        opponent = MonteCarloBot(search=MonteCarloSearch(adapter, config, stream), difficulty=args.difficulty)
    else:
        opponent = RandomPolicy(seed=config.seed ^ 1)

    print(f"Playing {args.game}: {bot.get_name()} vs {opponent.get_name()}")
    result = Match(adapter, {0: bot, 1: opponent}).play(state)

    for move in result.moves:
        print(f"  {move.turn:3d}  player {move.player}: {adapter.encode_action(move.action)}")

    if not result.finished:
        print(f"\nStopped early: {result.stop_reason}")
    print(f"\nScores: {result.scores}")
    winner = result.winner
    print("Result: draw" if winner is None else f"Result: player {winner} wins")


if __name__ == "__main__":
    main()
