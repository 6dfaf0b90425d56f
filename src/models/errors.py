"""Errors raised by the probability calculators."""


class CalculatorError(Exception):
    """Base error for calculator failures."""


class InvalidInputError(CalculatorError, ValueError):
    """A required argument was missing or out of range."""
