"""
Test Fixtures Package

Provides centralized fixtures for the audit pipeline:
- Fake host context and audit engine
- Report namer with a frozen clock
"""

from .lighthouse import DEFAULT_LHR, FakeEngine, attached_context, fake_engine, fixed_clock_namer, make_context

__all__ = [
    "DEFAULT_LHR",
    "FakeEngine",
    "attached_context",
    "fake_engine",
    "fixed_clock_namer",
    "make_context",
]
