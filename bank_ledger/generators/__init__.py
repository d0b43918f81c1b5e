"""Synthetic data generators."""

from bank_ledger.generators.activity import ActivityGenerator, Operation

__all__ = ["ActivityGenerator", "Operation"]
