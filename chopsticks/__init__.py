"""
Chopsticks - Two-player hand-tapping game engine

A deterministic, pure state-transition engine for Chopsticks:
- Configurable hands per player (1-5)
- Tap and split actions; illegal actions are no-ops
- Win detection
- Sessions and an in-process API for presentation layers
"""

__version__ = "0.1.0"
