"""
Handler package.

- base/: BaseHandler, result wrappers, unit converters, decorators
- constants/: Physical constants, unit vocabulary, element names
- stoichiometry/: Molar mass and mass/mole/volume/particle conversions
"""

from .base import BaseHandler
from .stoichiometry import StoichiometryHandler

__all__ = [
    # Base classes
    "BaseHandler",

    # Stoichiometry handlers
    "StoichiometryHandler",
]
