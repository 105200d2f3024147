"""
Stoichiometry Handler

Handler for mole-concept conversions between mass, moles, gas volume at STP
and particle counts for a chemical formula.
"""

import logging
from typing import Any, Mapping, Optional

from ..base import BaseHandler
from .ai_functions import StoichiometryAIFunctionsMixin
from .config import resolve_locale
from .element_table import get_element_table
from .models import StoichiometryResult
from .utils import FormulaInput, compute_stoichiometry

_log = logging.getLogger(__name__)


class StoichiometryHandler(BaseHandler, StoichiometryAIFunctionsMixin):
    """
    Handler for stoichiometric conversions.

    Provides tools to:
    - Compute molar mass with a per-element breakdown
    - Convert g/kg, mol, L/mL and NA-coefficient inputs into each other
    - Produce step-by-step derivations in English or Korean

    Inherits AI functions from StoichiometryAIFunctionsMixin.
    """

    def __init__(self, element_table: Optional[Mapping[str, Any]] = None, locale: Optional[str] = None, **kwargs):
        """
        Initialize the StoichiometryHandler.

        Args:
            element_table: Symbol -> element record mapping. Defaults to the
                configured table (JSON file or mendeleev), loaded on first use.
            locale: Default derivation language ("en" or "ko")
        """
        super().__init__(**kwargs)
        self._element_table = element_table
        self.locale = resolve_locale(locale)
        _log.info("StoichiometryHandler initialized")

    @property
    def element_table(self) -> Mapping[str, Any]:
        if self._element_table is None:
            self._element_table = get_element_table()
        return self._element_table

    def calculate(
        self,
        formula: FormulaInput,
        amount: Any = None,
        unit: Optional[str] = None,
        locale: Optional[str] = None,
    ) -> StoichiometryResult:
        """
        Run the stoichiometry calculation against this handler's element table.

        Args:
            formula: ParsedFormula or upstream atom list
            amount: Quantity value
            unit: Unit tag
            locale: Overrides the handler's derivation language
        """
        return compute_stoichiometry(
            formula,
            amount=amount,
            unit=unit,
            table=self.element_table,
            locale=resolve_locale(locale) if locale else self.locale,
        )
