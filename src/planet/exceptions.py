"""Custom exceptions for planet terrain generation."""


class PlanetError(Exception):
    """Base exception for planet errors."""

    pass


class PlanetNotConfiguredError(PlanetError):
    """Raised when a terrain query is issued before the planet is initialized."""

    pass
