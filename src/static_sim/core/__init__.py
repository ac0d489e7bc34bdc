# MIT License (see LICENSE)
"""
Core electrostatics helpers.

This subpackage provides:
    - Force law: the inverse-power force shared by every interaction.
    - Invariants: charge conservation checks and state snapshots.

Typical usage:
    from static_sim.core import get_force, total_charge

    f = get_force(sweater.center, balloon.center, kqq)
    assert total_charge(model) == 0
"""
from .forces import get_force, cap_magnitude
from .invariants import total_charge, check_invariants, snapshot

__all__ = [
    # Forces
    "get_force",
    "cap_magnitude",
    # Invariants
    "total_charge",
    "check_invariants",
    "snapshot",
]
