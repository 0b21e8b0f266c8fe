"""
Orchestrator — The update routine and what drives it

- SentinelEngine: one update pass (classify, tint, warn, display)
- UpdateScheduler: timer + triggers, never overlapping
"""

from .engine import SentinelEngine, EngineState, UpdateResult
from .scheduler import UpdateScheduler

__all__ = ['SentinelEngine', 'EngineState', 'UpdateResult', 'UpdateScheduler']
