"""Exceptions raised by fixturedoc."""


class FixtureDocError(Exception):
    """Base class for fixturedoc errors."""


class EntityModelError(FixtureDocError):
    """An entity model could not be read or validated."""
