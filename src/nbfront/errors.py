"""Exception classes for nbfront.

Provides the error taxonomy for configuration, renderer availability,
header decoding and HTML conversion.
"""

from __future__ import annotations


class NbfrontError(Exception):
    """Base exception for all nbfront errors.

    Subclass this for specific error categories.
    """

    pass


class ConfigError(NbfrontError):
    """Invalid configuration value.

    Raised while building a NotebookConfig, never later.
    """

    def __init__(self, key: str, message: str) -> None:
        """Initialize config error.

        Args:
            key: Configuration key that failed validation
            message: Description of the problem
        """
        self.key = key
        super().__init__(f"Invalid '{key}': {message}")


class UnsupportedEngineError(ConfigError):
    """Unknown notebook engine selected in configuration."""

    def __init__(self, engine: str, valid: tuple[str, ...]) -> None:
        self.engine = engine
        self.valid = valid
        options = ", ".join(valid)
        super().__init__("notebook", f"unknown engine {engine!r} (valid options are [ {options} ])")


class MissingDependencyError(NbfrontError):
    """The external notebook renderer cannot be reached.

    Carries a human-readable remediation hint. Fatal: the build cannot
    produce notebook output without the renderer.
    """

    def __init__(self, dependency: str, hint: str = "") -> None:
        """Initialize missing dependency error.

        Args:
            dependency: Name of the missing tool (e.g., "jupyter")
            hint: Remediation text shown to the user
        """
        self.dependency = dependency
        self.hint = hint
        message = f"Missing dependency: {dependency}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message)


class HeaderParseError(NbfrontError):
    """Notebook header is not valid structured data.

    Recovered by the metadata promotion pipeline: the page is treated as
    having no promotable metadata.
    """

    def __init__(self, message: str, source_file: str | None = None) -> None:
        self.message = message
        self.source_file = source_file
        location = f"{source_file}: " if source_file else ""
        super().__init__(f"{location}{message}")


class RenderError(NbfrontError):
    """The external renderer failed to produce HTML.

    Raised on non-zero exit or when the expected output file is missing.
    No partial output is returned.
    """

    def __init__(
        self,
        message: str,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        """Initialize render error.

        Args:
            message: Error description
            returncode: Exit status of the renderer process, if it ran
            stderr: Captured standard error of the renderer
        """
        self.returncode = returncode
        self.stderr = stderr
        detail = message
        if returncode is not None:
            detail = f"{detail} (exit status {returncode})"
        if stderr.strip():
            detail = f"{detail}: {stderr.strip()}"
        super().__init__(detail)
