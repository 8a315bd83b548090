from .bases import (
    INVALID_INPUT,
    ConversionError,
    ConversionResult,
    EmptyInputError,
    IllegalCharacterError,
    MagnitudeOverflowError,
    NumeralBase,
    convert,
    convert_number,
    format_number,
    parse_base,
    parse_number,
    sanitize,
)

__version__ = "1.0.0"
