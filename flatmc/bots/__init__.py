"""
Bots module - Automa implementations.

Provides:
- BotPolicy: Interface for bot decision-making
- RandomPolicy, FirstLegalPolicy: Baselines
- MonteCarloBot: Policy backed by the flat Monte-Carlo search
"""

from .policy import BotPolicy, BotDecision, RandomPolicy, FirstLegalPolicy
from .monte_carlo_bot import MonteCarloBot

__all__ = [
    "BotPolicy",
    "BotDecision",
    "RandomPolicy",
    "FirstLegalPolicy",
    "MonteCarloBot",
]
