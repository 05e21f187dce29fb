"""Exception hierarchy for material-inspector."""

from pathlib import Path


class MaterialInspectorError(Exception):
    """Base exception for all material-inspector errors.

    All exceptions in this package inherit from this class,
    allowing callers to catch all material-inspector errors with
    a single except clause.
    """

    pass


# Configuration Errors
class ConfigError(MaterialInspectorError):
    """Configuration-related errors."""

    pass


class ConfigParseError(ConfigError):
    """Configuration file has invalid syntax."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Invalid config at {path}: {detail}")


class ConfigValidationError(ConfigError):
    """Configuration value is invalid."""

    def __init__(self, key: str, value: object, reason: str) -> None:
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid config value for '{key}': {reason}")


# Manifest Errors
class ManifestError(MaterialInspectorError):
    """Material manifest errors."""

    pass


class ManifestNotFoundError(ManifestError):
    """Manifest file doesn't exist."""

    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Manifest not found: {path}")


class ManifestReadError(ManifestError):
    """Manifest path exists but cannot be read as a file."""

    def __init__(self, path: Path, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"Cannot read manifest {path}: {detail}")


class ManifestParseError(ManifestError):
    """Manifest file is not valid JSON."""

    def __init__(self, source: str, detail: str) -> None:
        self.source = source
        self.detail = detail
        super().__init__(f"Invalid manifest {source}: {detail}")


class ManifestValidationError(ManifestError):
    """Manifest content has the wrong shape."""

    def __init__(self, field: str, value: object, reason: str) -> None:
        self.field = field
        self.value = value
        self.reason = reason
        super().__init__(f"Invalid manifest value for '{field}': {reason}")


# Session Errors
class TabIndexError(MaterialInspectorError):
    """Tab index is outside the tab set."""

    def __init__(self, index: int, count: int) -> None:
        self.index = index
        self.count = count
        super().__init__(f"Tab index {index} out of range (have {count} tabs)")
