"""
flatmc - Deterministic flat Monte-Carlo move suggestion.

Given any two-player, turn-based, perfect-information game exposed through
a GameAdapter, the engine proposes a move by running a bounded number of
random playouts per candidate and comparing integer averages.
The package provides:
- The adapter contract and a seeded, reproducible value stream
- The rollout simulator and search engine
- Reference games (card capture, take-1-or-2 pile)
- Bot policies, a match loop, a suggestion service and HTTP API
"""

__version__ = "0.1.0"
