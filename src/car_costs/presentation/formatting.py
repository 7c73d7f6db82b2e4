"""
Locale-aware display formatting for engine outputs.

Locale and currency are explicit parameters (FormatSettings) rather than
process-wide state. Only the locales in LOCALE_CONVENTIONS are supported.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext

from car_costs.domain.finance_math import ENGINE_CONTEXT


@dataclass(frozen=True, slots=True)
class LocaleConventions:
    group_separator: str
    decimal_separator: str
    # Currency symbol placement, e.g. "{symbol}{amount}" or "{amount}\u00a0{symbol}"
    currency_pattern: str


# Separators and symbol spacing use no-break spaces (U+00A0, narrow U+202F),
# matching Intl.NumberFormat output.
LOCALE_CONVENTIONS: dict[str, LocaleConventions] = {
    "en-GB": LocaleConventions(",", ".", "{symbol}{amount}"),
    "en-US": LocaleConventions(",", ".", "{symbol}{amount}"),
    "en-IE": LocaleConventions(",", ".", "{symbol}{amount}"),
    "de-DE": LocaleConventions(".", ",", "{amount}\u00a0{symbol}"),
    "fr-FR": LocaleConventions("\u202f", ",", "{amount}\u00a0{symbol}"),
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "GBP": "£",
    "EUR": "€",
    "USD": "$",
}

INFINITY_SIGN = "∞"
NAN_SIGN = "NaN"


@dataclass(frozen=True, slots=True)
class FormatSettings:
    locale: str = "en-GB"
    currency: str = "GBP"
    currency_decimals: int = 0

    def __post_init__(self) -> None:
        if self.locale not in LOCALE_CONVENTIONS:
            raise ValueError(
                f"Unsupported locale '{self.locale}', expected one of {sorted(LOCALE_CONVENTIONS)}"
            )

    @property
    def conventions(self) -> LocaleConventions:
        return LOCALE_CONVENTIONS[self.locale]

    @property
    def currency_symbol(self) -> str:
        # Unknown currencies fall back to their ISO code.
        return CURRENCY_SYMBOLS.get(self.currency, f"{self.currency}\u00a0")


DEFAULT_FORMAT_SETTINGS = FormatSettings()


def _group_digits(value: Decimal, decimals: int, conventions: LocaleConventions) -> str:
    """Render an absolute, finite value with locale separators and rounding half away from zero."""
    with localcontext(ENGINE_CONTEXT):
        quantized = value.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)

    if not quantized.is_finite():
        # Too many digits for the context precision to round
        return NAN_SIGN

    rendered = f"{quantized:,.{decimals}f}"
    integer_part, _, fraction_part = rendered.partition(".")
    integer_part = integer_part.replace(",", conventions.group_separator)

    if fraction_part:
        return f"{integer_part}{conventions.decimal_separator}{fraction_part}"
    return integer_part


def format_number(
    value: Decimal | int,
    decimals: int = 0,
    settings: FormatSettings = DEFAULT_FORMAT_SETTINGS,
) -> str:
    """Format a count with grouping and a fixed number of decimal places."""
    value = Decimal(value)

    if value.is_nan():
        return NAN_SIGN
    magnitude = INFINITY_SIGN if value.is_infinite() else _group_digits(
        abs(value), decimals, settings.conventions
    )
    sign = "-" if value < 0 else ""
    return f"{sign}{magnitude}"


def format_currency(
    amount: Decimal | int,
    settings: FormatSettings = DEFAULT_FORMAT_SETTINGS,
) -> str:
    """
    Format an amount of money, by default as whole pounds sterling.

    >>> format_currency(Decimal("1234.5"))
    '£1,235'
    """
    amount = Decimal(amount)

    if amount.is_nan():
        return NAN_SIGN
    magnitude = INFINITY_SIGN if amount.is_infinite() else _group_digits(
        abs(amount), settings.currency_decimals, settings.conventions
    )
    formatted = settings.conventions.currency_pattern.format(
        symbol=settings.currency_symbol, amount=magnitude
    )
    sign = "-" if amount < 0 else ""
    return f"{sign}{formatted.strip()}"
