# topmark:header:start
#
#   project      : Tealeaf
#   file         : styles.py
#   file_relpath : src/tealeaf/rendering/styles.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Style configuration for page rendering.

A `StyleConfig` maps each styled page element to a `Colorizer`, a callable
that decorates a string for display. The renderer only ever calls colorizers;
it has no knowledge of ANSI escapes or of the color library in use.

Colorizers are built from the configured `StyleSpec` directives with
`click.style`. When color is disabled, every slot gets `plain`, which returns
its input unchanged, so the output contains no escape sequences at all.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol

import click

from tealeaf.config.keys import StyleSlot

if TYPE_CHECKING:
    from tealeaf.config import Config, StyleSpec


class Colorizer(Protocol):
    """Callable that decorates a string for display."""

    def __call__(self, text: str) -> str:
        """Return ``text`` decorated for display."""
        ...


def plain(text: str) -> str:
    """Identity colorizer used when styling is disabled."""
    return text


class ClickColorizer:
    """Colorizer applying a fixed set of `click.style` arguments.

    Args:
        **style_kwargs (Any): Keyword arguments forwarded to `click.style`
            (``fg``, ``bg``, ``bold``, ``underline``...). ``None`` values are
            left to click's defaults.
    """

    def __init__(self, **style_kwargs: Any) -> None:
        self._kwargs: dict[str, Any] = {k: v for k, v in style_kwargs.items() if v is not None}

    def __call__(self, text: str) -> str:
        if not self._kwargs:
            return text
        return click.style(text, **self._kwargs)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._kwargs!r})"


def colorizer_for(spec: StyleSpec) -> Colorizer:
    """Return a colorizer rendering ``spec``."""
    return ClickColorizer(**spec.click_kwargs())


@dataclass(frozen=True, slots=True)
class StyleConfig:
    """Immutable mapping from page element to colorizer, fixed for one render.

    Attributes:
        command_name (Colorizer): Page title.
        description (Colorizer): Description lines.
        example_text (Colorizer): Example prose lines.
        example_code (Colorizer): Literal parts of example code.
        example_variable (Colorizer): Placeholder parts of example code.
    """

    command_name: Colorizer = plain
    description: Colorizer = plain
    example_text: Colorizer = plain
    example_code: Colorizer = plain
    example_variable: Colorizer = plain

    @classmethod
    def unstyled(cls) -> StyleConfig:
        """Return a config that emits no escape sequences."""
        return cls()

    @classmethod
    def from_config(cls, config: Config, *, enable_color: bool = True) -> StyleConfig:
        """Build colorizers from the ``[style]`` section of ``config``.

        Args:
            config (Config): Effective configuration.
            enable_color (bool): If False, return `StyleConfig.unstyled`.

        Returns:
            StyleConfig: The style configuration for one render.
        """
        if not enable_color:
            return cls.unstyled()
        return cls(**{slot: colorizer_for(config.style(slot)) for slot in StyleSlot.ALL})
