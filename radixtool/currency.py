import math
from dataclasses import dataclass


# value of one unit, in rupiah
EXCHANGE_RATES = {
    "IDR": 1.0,
    "USD": 16000.0,
    "JPY": 105.0,
    "EUR": 17400.0,
    "GBP": 20100.0,
    "AUD": 10600.0,
    "SGD": 11800.0,
    "CNY": 2225.0,
    "SAR": 4250.0,
    "MYR": 3375.0,
}

CURRENCY_NAMES = {
    "IDR": "Indonesian Rupiah",
    "USD": "United States Dollar",
    "JPY": "Japanese Yen",
    "EUR": "Euro",
    "GBP": "British Pound Sterling",
    "AUD": "Australian Dollar",
    "SGD": "Singapore Dollar",
    "CNY": "Chinese Yuan",
    "SAR": "Saudi Riyal",
    "MYR": "Malaysian Ringgit",
}

DEFAULT_FROM = "IDR"
DEFAULT_TO = "USD"


class CurrencyError(ValueError):
    pass


class InvalidAmountError(CurrencyError):
    pass


class UnknownCurrencyError(CurrencyError):
    pass


class InvalidRateError(CurrencyError):
    pass


@dataclass(frozen=True)
class CurrencyQuote:
    amount: float
    from_code: str
    to_code: str
    result: float
    unit_rate: float

    def summary(self) -> str:
        return f"{format_amount(self.result)} {self.to_code}"

    def detail(self) -> str:
        return f"1 {self.from_code} = {format_rate(self.unit_rate)} {self.to_code}"


def parse_amount(text: str) -> float | None:
    cleaned = text.strip().replace(",", "")
    if not cleaned:
        return None

    try:
        amount = float(cleaned)
    except ValueError:
        raise InvalidAmountError(f"'{text.strip()}' is not a valid amount.")

    if not math.isfinite(amount):
        raise InvalidAmountError(f"'{text.strip()}' is not a valid amount.")
    if amount < 0:
        raise InvalidAmountError("Amount must not be negative.")
    return amount


def _lookup_rate(code: str, rates: dict[str, float]) -> tuple[str, float]:
    normalized = code.strip().upper()
    if normalized not in rates:
        raise UnknownCurrencyError(
            f"Unknown currency '{code}'. Available: {', '.join(rates)}."
        )
    return normalized, rates[normalized]


def convert_currency(
    amount: float,
    from_code: str,
    to_code: str,
    rates: dict[str, float] | None = None,
) -> CurrencyQuote:
    if rates is None:
        rates = EXCHANGE_RATES
    if amount < 0:
        raise InvalidAmountError("Amount must not be negative.")

    from_code, rate_from = _lookup_rate(from_code, rates)
    to_code, rate_to = _lookup_rate(to_code, rates)
    if rate_from == 0 or rate_to == 0:
        raise InvalidRateError(f"No usable rate for {from_code} -> {to_code}.")

    unit_rate = rate_from / rate_to
    return CurrencyQuote(
        amount=amount,
        from_code=from_code,
        to_code=to_code,
        result=amount * unit_rate,
        unit_rate=unit_rate,
    )


def format_amount(value: float) -> str:
    """Thousands separators, two to six fraction digits."""
    whole, frac = f"{value:,.6f}".split(".")
    return f"{whole}.{frac.rstrip('0').ljust(2, '0')}"


def format_rate(value: float) -> str:
    whole, frac = f"{value:,.2f}".split(".")
    frac = frac.rstrip("0")
    return f"{whole}.{frac}" if frac else whole
