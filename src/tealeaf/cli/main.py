# topmark:header:start
#
#   project      : Tealeaf
#   file         : main.py
#   file_relpath : src/tealeaf/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tealeaf command-line entry point.

``tealeaf [OPTIONS] [COMMAND]...`` renders the page for ``COMMAND`` (multiple
words are joined with ``-``). Cache maintenance and introspection are flags on
the same command, in the style of the other tldr clients:

- ``--update`` / ``--clear-cache``: maintain the page cache.
- ``--list``: list pages for the platform.
- ``--render FILE``: render a local page file.
- ``--seed-config`` / ``--show-paths``: configuration helpers.

Actions run in a fixed order (clear, update, seed, paths, list, render, page)
so that ``tealeaf --update tar`` refreshes the cache before showing ``tar``.
Group-level state (console, logging, color) is initialized once and stored on
``ctx.obj``.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING

import click

from tealeaf.cache import ArchiveUpdater, PageCache
from tealeaf.cli.console import ClickConsole
from tealeaf.cli.errors import TealeafCacheError, TealeafCliError, translate_errors
from tealeaf.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from tealeaf.config import load_config
from tealeaf.config.loaders import load_default_config_template_toml_text
from tealeaf.config.logging import get_logger, resolve_env_log_level, setup_logging
from tealeaf.config.paths import config_file_path
from tealeaf.constants import COMMON_PLATFORM, TEALEAF_VERSION
from tealeaf.pages import check_freshness, detect_platform, normalize_command, resolve_page
from tealeaf.pages.resolver import KNOWN_PLATFORMS
from tealeaf.rendering.renderer import print_page
from tealeaf.rendering.sinks import open_sink
from tealeaf.rendering.styles import StyleConfig

if TYPE_CHECKING:
    from tealeaf.cache import CacheUpdater
    from tealeaf.config import Config
    from tealeaf.config.logging import TealeafLogger
    from tealeaf.pages import Freshness, ResolvedPage

logger: TealeafLogger = get_logger(__name__)

MSG_CACHE_MISSING = "Page cache not found. Please run `tealeaf --update` to download the cache."
MSG_UPDATED = "Successfully updated cache."
MSG_CLEARED = "Successfully deleted cache."


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (logging, color, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (bool): Whether ``--quiet`` was passed.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_env: int | None = resolve_env_log_level()
    setup_logging(level=level_env if level_env is not None else resolve_verbosity(verbose, quiet))

    effective: ColorMode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(color_mode_override=effective)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color, quiet=quiet)


def _updater(ctx: click.Context) -> CacheUpdater:
    # Tests inject a fake updater through ``obj={"updater": ...}``
    updater: CacheUpdater | None = ctx.obj.get("updater")
    return updater if updater is not None else ArchiveUpdater()


def update_cache(ctx: click.Context, cache: PageCache) -> None:
    """Download the pages archive into ``cache``."""
    console: ClickConsole = ctx.obj["console"]
    with translate_errors():
        count: int = _updater(ctx).update(cache)
    logger.info("Cache now holds %d pages", count)
    console.print(MSG_UPDATED)


def write_seed_config(console: ClickConsole, path: Path) -> None:
    """Write the annotated default config to ``path`` unless it exists."""
    if path.exists():
        raise TealeafCliError(
            f"A configuration file already exists at {path}, no action was taken."
        )
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(load_default_config_template_toml_text(), encoding="utf-8")
    except OSError as exc:
        raise TealeafCliError(f"Could not create seed config file at {path}: {exc}") from exc
    console.print(f"Successfully created seed config file at {path}")


def print_paths(console: ClickConsole, config: Config) -> None:
    """Print the config, cache and custom pages locations."""
    config_path: Path = config.config_file or config_file_path()
    custom: str = str(config.custom_pages_dir) if config.custom_pages_dir else "[not set]"
    for label, value in (
        ("Config path:", config_path),
        ("Cache dir:", config.cache_dir),
        ("Custom pages dir:", custom),
    ):
        console.print(f"{console.styled(label.ljust(18), bold=True)} {value}")


def warn_if_stale(ctx: click.Context, cache: PageCache, config: Config) -> None:
    """Auto-update a stale cache, or warn about it when auto-update is off."""
    console: ClickConsole = ctx.obj["console"]
    with translate_errors():
        freshness: Freshness = check_freshness(
            cache.mtime(),
            time.time(),
            interval_hours=config.auto_update_interval_hours,
            auto_update=config.auto_update,
        )
    if freshness.autoupdate:
        logger.info("Cache is %s old; updating", freshness.age)
        update_cache(ctx, cache)
    elif freshness.should_warn:
        console.warn(
            f"The cache hasn't been updated for {freshness.age.days} days. "
            "You should probably run `tealeaf --update` soon."
        )


def show_page(
    paths: list[Path],
    *,
    config: Config,
    enable_color: bool,
    markdown: bool,
) -> None:
    """Render ``paths`` as one page to stdout or the pager."""
    style: StyleConfig = StyleConfig.from_config(config, enable_color=enable_color)
    with translate_errors(), open_sink(use_pager=config.use_pager, color=enable_color) as sink:
        print_page(
            paths,
            style=style,
            sink=sink,
            markdown_passthrough=markdown,
            compact=config.compact,
        )


@click.command(
    name="tealeaf",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Render tldr command reference pages in the terminal.",
)
@click.argument("command", nargs=-1)
@click.option("-l", "--list", "list_pages", is_flag=True, help="List all pages for the platform.")
@click.option(
    "-f",
    "--render",
    "render_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Render a specific markdown file.",
)
@click.option(
    "-p",
    "--platform",
    type=click.Choice([COMMON_PLATFORM, *KNOWN_PLATFORMS]),
    default=None,
    help="Override the operating system platform.",
)
@click.option("-u", "--update", is_flag=True, help="Update the local page cache.")
@click.option("-c", "--clear-cache", is_flag=True, help="Clear the local page cache.")
@click.option(
    "-r",
    "--raw",
    "-m",
    "--markdown",
    "markdown",
    is_flag=True,
    help="Display the raw markdown instead of rendering it.",
)
@click.option(
    "--compact/--no-compact",
    default=None,
    help="Strip empty lines from output (overrides the config file).",
)
@click.option(
    "--pager/--no-pager",
    default=None,
    help="Use a pager to page output (overrides the config file).",
)
@click.option("--seed-config", is_flag=True, help="Create a basic config file.")
@click.option("--show-paths", "show_paths", is_flag=True, help="Show file and directory paths.")
@common_verbose_options
@common_color_options
@click.version_option(TEALEAF_VERSION, "--version", prog_name="tealeaf")
@click.pass_context
def cli(
    ctx: click.Context,
    command: tuple[str, ...],
    list_pages: bool,
    render_file: Path | None,
    platform: str | None,
    update: bool,
    clear_cache: bool,
    markdown: bool,
    compact: bool | None,
    pager: bool | None,
    seed_config: bool,
    show_paths: bool,
    verbose: int,
    quiet: bool,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the Tealeaf CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color)
    console: ClickConsole = ctx.obj["console"]
    enable_color: bool = ctx.obj["color_enabled"]

    with translate_errors():
        draft = load_config().thaw()
    if compact is not None:
        draft.compact = compact
    if pager is not None:
        draft.use_pager = pager
    config: Config = draft.freeze()
    cache = PageCache(config.cache_dir)
    page_platform: str = platform or detect_platform()
    acted: bool = False

    if clear_cache:
        with translate_errors():
            cleared: bool = cache.clear()
        console.print(MSG_CLEARED if cleared else f"Cache directory {cache.root} does not exist.")
        acted = True

    if update:
        update_cache(ctx, cache)
        acted = True

    if seed_config:
        write_seed_config(console, config_file_path())
        acted = True

    if show_paths:
        print_paths(console, config)
        acted = True

    if list_pages:
        if not cache.exists():
            raise TealeafCacheError(MSG_CACHE_MISSING)
        for name in cache.list_pages(page_platform, config.custom_pages_dir):
            console.print(name)
        acted = True

    if render_file is not None:
        show_page([render_file], config=config, enable_color=enable_color, markdown=markdown)
        acted = True

    if command:
        if not cache.exists():
            raise TealeafCacheError(MSG_CACHE_MISSING)
        if not update:
            warn_if_stale(ctx, cache, config)
        with translate_errors():
            page: ResolvedPage = resolve_page(
                normalize_command(command),
                page_platform,
                cache.root,
                config.custom_pages_dir,
            )
        show_page(list(page), config=config, enable_color=enable_color, markdown=markdown)
        acted = True

    if not acted:
        console.print(ctx.get_help())


if __name__ == "__main__":
    cli()
