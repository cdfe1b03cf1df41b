"""
Exceptions raised by the builder, the server and the configuration layer.
"""


class FolioError(Exception):
    """Base class for all Folio errors."""


class ConfigError(FolioError):
    """A configuration value is invalid."""


class PortfolioError(FolioError):
    """The portfolio data file is missing or malformed."""


class RenderError(FolioError):
    """A page template failed to render."""

    def __init__(self, page: str, message: str):
        super().__init__(f"Error building {page}: {message}")
        self.page = page


class MissingAssetError(FolioError):
    """A static file is missing and the build is configured to fail."""

    def __init__(self, filename: str):
        super().__init__(f"{filename} not found")
        self.filename = filename


class OutputDirMissingError(FolioError):
    """The server was asked to serve an output directory that does not exist."""
