"""Exception types shared across the screener."""


class ProfileConfigError(ValueError):
    """Role profile table is malformed (bad weights, empty keyword list, missing role)."""


class DocumentError(ValueError):
    """A document could not be turned into text (unsupported type, empty file)."""
