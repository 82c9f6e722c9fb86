"""
Aurora Verdict API - Calculation Layer

This package contains all of the numeric logic for the aurora verdict engine,
separated from CLI presentation concerns.

The API is organized into logical subpackages:
- core: Types, enums, constants, validation, configuration, and exceptions
- reference: Static reference city dataset
- geomagnetic: Coordinate transform, auroral oval, and visibility
- verdict: Intensity scoring, physics validation, and verdict assembly
- appearance: Location-aware appearance prediction
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Package is organized into subpackages - import directly from them:
    # from aurora_verdict.api.geomagnetic import ...
    # from aurora_verdict.api.verdict import ...
    # from aurora_verdict.api.engine import ...
]
