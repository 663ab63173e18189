"""
Currency descriptors and the fixed catalog offered by the currency selector.

Rates convert document-entered amounts into the display currency. Every
catalog rate is 1 until a rate source exists, but the computation code
honors any rate.
"""

from dataclasses import dataclass
from typing import Sequence

from invoice_editor.utils import format_currency


@dataclass(slots=True, frozen=True)
class Currency:
    """Code, symbol and conversion rate used to scale and label amounts."""

    code: str
    symbol: str
    rate: float = 1.0

    def format(self, value: float) -> str:
        """Return the amount prefixed with this currency's symbol."""
        return format_currency(value, self.symbol)

    @property
    def label(self) -> str:
        """Option label shown in the currency selector."""
        return f"{self.code} ({self.symbol})"


CURRENCIES: Sequence[Currency] = (
    Currency("USD", "$"),
    Currency("EUR", "€"),
    Currency("GBP", "£"),
    Currency("JPY", "¥"),
    Currency("CAD", "C$"),
    Currency("LKR", "Rs."),
)

DEFAULT_CURRENCY = CURRENCIES[0]

_BY_CODE = {currency.code: currency for currency in CURRENCIES}


def find_currency(code: str | None) -> Currency | None:
    """Return the catalog entry for a code, or None when it is not offered."""
    if not code:
        return None
    return _BY_CODE.get(code)
