class AssetError(Exception):
    """Base class for asset pipeline failures."""


class SourceError(AssetError):
    """A byte source could not answer for `path`."""

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path


class AssetImportError(AssetError):
    """
    Importing `path` with format `format_name` failed.
    The underlying error is chained as `__cause__`.
    """

    def __init__(self, path: str, format_name: str, message: str) -> None:
        super().__init__(f"Failed to import {path} as {format_name}: {message}")
        self.path = path
        self.format_name = format_name


class ReloadConsumedError(RuntimeError):
    """A reload handle was used after its consuming `reload()` call."""
