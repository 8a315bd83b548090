from dataclasses import dataclass, field
from enum import Enum


INT32_MAX = 2147483647
INVALID_INPUT = "Invalid Input"

_DIGITS = "0123456789ABCDEF"


class NumeralBase(Enum):
    DECIMAL = 10
    BINARY = 2
    OCTAL = 8
    HEXADECIMAL = 16

    @property
    def radix(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        return self.name.capitalize()

    @property
    def alphabet(self) -> str:
        return _DIGITS[: self.value]

    @property
    def accepted(self) -> str:
        """Alphabet plus the lowercase hex letters."""
        return self.alphabet + self.alphabet[10:].lower()


SUPPORTED_BASES = tuple(b.radix for b in NumeralBase)

BASE_ALIASES = {
    "2": NumeralBase.BINARY,
    "bin": NumeralBase.BINARY,
    "binary": NumeralBase.BINARY,
    "8": NumeralBase.OCTAL,
    "oct": NumeralBase.OCTAL,
    "octal": NumeralBase.OCTAL,
    "10": NumeralBase.DECIMAL,
    "dec": NumeralBase.DECIMAL,
    "decimal": NumeralBase.DECIMAL,
    "16": NumeralBase.HEXADECIMAL,
    "hex": NumeralBase.HEXADECIMAL,
    "hexadecimal": NumeralBase.HEXADECIMAL,
}


class ConversionError(ValueError):
    kind = "invalid_input"


class EmptyInputError(ConversionError):
    kind = "empty_input"

    def __init__(self, base: NumeralBase):
        super().__init__(f"No {base.label.lower()} number was given.")
        self.base = base


class IllegalCharacterError(ConversionError):
    kind = "illegal_character"

    def __init__(self, text: str, base: NumeralBase, char: str, position: int):
        super().__init__(
            f"'{text}' is not a valid number in base {base.radix} "
            f"(unexpected {char!r} at position {position})."
        )
        self.text = text
        self.base = base
        self.char = char
        self.position = position


class MagnitudeOverflowError(ConversionError):
    kind = "magnitude_overflow"

    def __init__(self, text: str, base: NumeralBase):
        super().__init__(
            f"'{text}' is larger than {INT32_MAX}, the biggest supported value."
        )
        self.text = text
        self.base = base


@dataclass(frozen=True)
class ConversionResult:
    """Four textual renderings of one number.

    A failed conversion has the same shape: every field holds INVALID_INPUT
    and ``error`` keeps the reason.
    """

    decimal: str
    binary: str
    octal: str
    hexadecimal: str
    error: ConversionError | None = field(default=None, compare=False, repr=False)

    @classmethod
    def failed(cls, error: ConversionError) -> "ConversionResult":
        return cls(INVALID_INPUT, INVALID_INPUT, INVALID_INPUT, INVALID_INPUT, error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_for(self, base: NumeralBase) -> str:
        return getattr(self, base.name.lower())

    def fields(self) -> list[tuple[str, str]]:
        return [(base.label, self.value_for(base)) for base in NumeralBase]

    def as_dict(self) -> dict[str, str]:
        return {base.name.lower(): self.value_for(base) for base in NumeralBase}


def parse_base(value: str) -> NumeralBase:
    base = BASE_ALIASES.get(str(value).strip().lower())
    if base is None:
        raise ValueError(
            f"Only these bases are supported: {', '.join(map(str, SUPPORTED_BASES))}."
        )
    return base


def sanitize(text: str, base: NumeralBase) -> str:
    # upper-case only after filtering; str.upper() can expand a character
    return "".join(ch.upper() for ch in text if ch in base.accepted)


def parse_number(text: str, base: NumeralBase) -> int:
    """Parse an unsigned numeral, rejecting anything int() would be lenient about.

    Signs, underscores, ``0x`` prefixes and non-ASCII digits are all refused.
    """
    digits = text.strip()
    if not digits:
        raise EmptyInputError(base)

    for position, ch in enumerate(digits):
        if ch not in base.accepted:
            raise IllegalCharacterError(digits, base, ch, position)

    value = int(digits, base.radix)
    if value > INT32_MAX:
        raise MagnitudeOverflowError(digits, base)
    return value


def format_number(value: int, base: NumeralBase) -> str:
    if value < 0:
        raise ValueError(f"Only unsigned values can be formatted, got {value}.")
    if base is NumeralBase.DECIMAL:
        return str(value)
    if base is NumeralBase.BINARY:
        return bin(value)[2:]
    if base is NumeralBase.OCTAL:
        return oct(value)[2:]
    return hex(value)[2:].upper()


def convert(text: str, base: NumeralBase) -> ConversionResult:
    try:
        value = parse_number(text, base)
    except ConversionError as e:
        return ConversionResult.failed(e)

    rendered = {b.name.lower(): format_number(value, b) for b in NumeralBase}

    # the source base shows back what was typed, leading zeros included
    echoed = text.strip()
    if base is NumeralBase.HEXADECIMAL:
        echoed = echoed.upper()
    rendered[base.name.lower()] = echoed

    return ConversionResult(**rendered)


def convert_number(num_str: str, from_base: NumeralBase, to_base: NumeralBase) -> str:
    return format_number(parse_number(num_str, from_base), to_base)
