from __future__ import annotations


class JsformError(Exception):
    """Base class for errors raised by jsform itself."""


class SchemaError(JsformError, ValueError):
    """A schema node can't be parsed or has no template (absent or unknown ``type``)."""


class ShapeError(JsformError, TypeError):
    """A path doesn't match the shape of the data it is applied to."""
