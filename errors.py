"""Typed errors raised by the drawing core and its settings loader."""


class PaintbrushError(Exception):
    """Base error for the project."""


class UnknownModeError(PaintbrushError):
    """A drag finished with a creation mode that builds no shape."""


class UnknownTransformError(PaintbrushError):
    """A transform request named a kind the engine does not know."""


class SettingsError(PaintbrushError):
    """The settings file could not be read or parsed."""
