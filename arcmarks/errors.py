"""Exceptions raised while exporting Arc sidebar data."""


class ArcDataError(Exception):
    """Custom exception for Arc data parsing errors."""
    pass


class InputNotFoundError(ArcDataError):
    """No readable StorableSidebar.json was found."""
    pass


class MalformedShapeError(ArcDataError):
    """The sidebar document does not have the expected structure."""
    pass


class OutputWriteError(ArcDataError):
    """The HTML file could not be written."""
    pass
