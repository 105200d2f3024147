"""
Base handler module containing:
- BaseHandler: Base class for all handlers
- converters: Stoichiometric unit conversion utilities
- decorators: Tool-output tracking for AI functions
- result_wrappers: Standardized result envelopes

This module provides the foundation for all specialized handlers in the system.
"""

from .base import BaseHandler
from .decorators import track_tool_output
from .result_wrappers import (
    success_result,
    error_result,
    ErrorType,
    Confidence,
    ensure_list,
)

# Re-export converters
from .converters import (
    # Unit normalization
    kilograms_to_grams,
    milliliters_to_liters,

    # Mass <-> moles
    mass_to_moles,
    moles_to_mass,

    # Moles <-> gas volume
    moles_to_volume,
    volume_to_moles,

    # Particle counts
    moles_to_particles,
    moles_to_atom_count,
    avogadro_coefficient_to_particles,
    avogadro_coefficient_to_moles,
)

__all__ = [
    'BaseHandler',
    'track_tool_output',
    # Result wrappers
    'success_result',
    'error_result',
    'ErrorType',
    'Confidence',
    'ensure_list',
    # Unit normalization
    'kilograms_to_grams',
    'milliliters_to_liters',
    # Mass <-> moles
    'mass_to_moles',
    'moles_to_mass',
    # Gas volume
    'moles_to_volume',
    'volume_to_moles',
    # Particle counts
    'moles_to_particles',
    'moles_to_atom_count',
    'avogadro_coefficient_to_particles',
    'avogadro_coefficient_to_moles',
]
