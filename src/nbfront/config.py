"""Immutable notebook configuration for nbfront.

Built once from the host site's configuration mapping and passed by
reference to every component that needs it. Nothing mutates it after
construction; hosts that change settings build a new instance.

Usage:
    from nbfront.config import NotebookConfig

    config = NotebookConfig.from_dict({
        "notebook_ext": "ipynb,nb",
        "notebook_page_attribute_prefix": "page",
        "nbconvert": {"safe": "unsafe"},
    })
    config.extensions  # ('ipynb', 'nb')

"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from nbfront.errors import ConfigError, UnsupportedEngineError


class Engine(Enum):
    """Closed set of notebook conversion engines."""

    NBCONVERT = "nbconvert"

    @classmethod
    def parse(cls, value: str | Engine) -> Engine:
        """Resolve an engine name, failing fast on unknown values.

        Raises:
            UnsupportedEngineError: If value names no known engine
        """
        if isinstance(value, Engine):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise UnsupportedEngineError(str(value), tuple(e.value for e in cls)) from None


class SafeMode(Enum):
    """HTML safety mode forwarded to the renderer."""

    SAFE = "safe"
    UNSAFE = "unsafe"


DEFAULT_EXTENSION = "ipynb"
DEFAULT_PAGE_ATTRIBUTE_PREFIX = "page"
DEFAULT_TEMPLATING_KEY = "liquid"


@dataclass(frozen=True, slots=True)
class NbconvertOptions:
    """Passthrough options for the nbconvert renderer.

    Attributes:
        command: Executable that provides the ``nbconvert`` subcommand
        attributes: Extra command-line arguments, appended verbatim
        safe: Whether rendered HTML is sanitized

    """

    command: str = "jupyter"
    attributes: tuple[str, ...] = ()
    safe: SafeMode = SafeMode.SAFE

    @classmethod
    def from_dict(cls, options: Mapping[str, Any] | None) -> NbconvertOptions:
        if not options:
            return cls()
        command = str(options.get("command") or "jupyter")
        attributes = options.get("attributes") or ()
        if isinstance(attributes, str):
            attributes = attributes.split()
        safe_value = str(options.get("safe") or SafeMode.SAFE.value).lower()
        try:
            safe = SafeMode(safe_value)
        except ValueError:
            raise ConfigError(
                "nbconvert.safe", f"expected 'safe' or 'unsafe', got {safe_value!r}"
            ) from None
        return cls(command=command, attributes=tuple(str(a) for a in attributes), safe=safe)


@dataclass(frozen=True, slots=True)
class NotebookConfig:
    """Immutable notebook integration configuration.

    Attributes:
        engine: Conversion engine, validated at construction
        extensions: Recognized notebook extensions, lowercase, without dots
        page_attribute_prefix: Prefix marking header keys destined for page
            data (``page-title`` is promoted as ``title``); empty disables it
        templating_key: Metadata key that can switch templating off
        nbconvert: Options forwarded to the nbconvert renderer

    """

    engine: Engine = Engine.NBCONVERT
    extensions: tuple[str, ...] = (DEFAULT_EXTENSION,)
    page_attribute_prefix: str = DEFAULT_PAGE_ATTRIBUTE_PREFIX
    templating_key: str = DEFAULT_TEMPLATING_KEY
    nbconvert: NbconvertOptions = field(default_factory=NbconvertOptions)

    def __post_init__(self) -> None:
        if not self.extensions:
            raise ConfigError("notebook_ext", "at least one extension is required")

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> NotebookConfig:
        """Create NotebookConfig from a site configuration mapping.

        Recognized keys are ``notebook``, ``notebook_ext``,
        ``notebook_page_attribute_prefix``, ``notebook_templating_key`` and
        ``nbconvert``. Unknown keys are silently ignored.

        Args:
            config_dict: Site configuration (e.g., loaded from _config.yml)

        Returns:
            New NotebookConfig instance

        Raises:
            UnsupportedEngineError: If ``notebook`` names an unknown engine
            ConfigError: If any other value is invalid

        Example:
            >>> config = NotebookConfig.from_dict({"notebook_ext": "IPYNB, nb"})
            >>> config.extensions
            ('ipynb', 'nb')

        """
        engine = Engine.parse(config_dict.get("notebook") or Engine.NBCONVERT)
        extensions = parse_extensions(config_dict.get("notebook_ext") or DEFAULT_EXTENSION)

        prefix = config_dict.get("notebook_page_attribute_prefix")
        if prefix is None:
            prefix = DEFAULT_PAGE_ATTRIBUTE_PREFIX

        nbconvert = config_dict.get("nbconvert")
        if nbconvert is not None and not isinstance(nbconvert, Mapping):
            raise ConfigError("nbconvert", "expected a mapping of renderer options")

        return cls(
            engine=engine,
            extensions=extensions,
            page_attribute_prefix=str(prefix).strip(),
            templating_key=str(config_dict.get("notebook_templating_key") or DEFAULT_TEMPLATING_KEY),
            nbconvert=NbconvertOptions.from_dict(nbconvert),
        )

    @property
    def primary_extension(self) -> str:
        """Extension used for files written for the renderer."""
        return self.extensions[0]

    def extension_pattern(self) -> re.Pattern[str]:
        """Compile a case-insensitive matcher for ``.ext`` strings."""
        alternatives = "|".join(re.escape(ext) for ext in self.extensions)
        return re.compile(rf"^\.(?:{alternatives})$", re.IGNORECASE)


def parse_extensions(value: str | list[str] | tuple[str, ...]) -> tuple[str, ...]:
    """Normalize a comma-separated extension list.

    Leading dots and surrounding whitespace are dropped, case is folded and
    duplicates removed while keeping order.

    Raises:
        ConfigError: If no extension remains
    """
    items = value.split(",") if isinstance(value, str) else list(value)
    seen: dict[str, None] = {}
    for item in items:
        ext = str(item).strip().lstrip(".").lower()
        if ext:
            seen.setdefault(ext, None)
    if not seen:
        raise ConfigError("notebook_ext", f"no extensions in {value!r}")
    return tuple(seen)


__all__ = [
    "DEFAULT_EXTENSION",
    "DEFAULT_PAGE_ATTRIBUTE_PREFIX",
    "DEFAULT_TEMPLATING_KEY",
    "Engine",
    "NbconvertOptions",
    "NotebookConfig",
    "SafeMode",
    "parse_extensions",
]
