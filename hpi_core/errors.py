"""Errors raised while turning a raw table into a SeriesIndex."""


class HpiDataError(Exception):
    """Base error for a load that cannot produce chart data."""

    user_message = "could not load this file."


class SchemaError(HpiDataError):
    """Raised when the region, date or value columns cannot be identified."""

    user_message = "cannot read this file's structure."


class EmptyResultError(HpiDataError):
    """Raised when no row survives validation."""

    user_message = "no usable data."


class UnreadableFileError(HpiDataError):
    """Raised when the file cannot be parsed as a delimited table at all."""

    user_message = "could not read this file."
