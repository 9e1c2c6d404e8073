from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable
from typing import Any

from .config import EffectiveConfig, config_to_toml, resolve_config
from .errors import (
    CategoryNotFoundError,
    ConfigError,
    DocumentLoadError,
    PageNotFoundError,
    PlatedError,
    RecipeNotFoundError,
)
from .index import RecipeIndex
from .loader import load_configured_document
from .pages import PageRequest, build_page, parse_page_url, parse_recipe_id
from .render import get_renderer
from .views import (
    SiteSettings,
    category_view,
    home_view,
    recipe_detail_view,
    search_view,
    source_list_page_view,
    source_page_view,
    tag_page_view,
)

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    command = "tui" if getattr(args, "tui", False) or not args.command else args.command

    handlers: dict[str, Callable[[argparse.Namespace], int]] = {
        "home": _cmd_home,
        "category": _cmd_category,
        "appendix": _cmd_appendix,
        "sources": _cmd_sources,
        "source": _cmd_source,
        "recipe": _cmd_recipe,
        "search": _cmd_search,
        "page": _cmd_page,
        "config": _cmd_config,
        "tui": _cmd_tui,
    }

    handler = handlers.get(command)
    if handler is None:  # pragma: no cover
        return 1  # pragma: no cover

    try:
        return handler(args)
    except DocumentLoadError as exc:
        # Already logged by the loader.
        return _exit_code(exc)
    except PlatedError as exc:
        print(str(exc), file=sys.stderr)
        return _exit_code(exc)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False, argument_default=argparse.SUPPRESS)
    common.add_argument("--document", help="Path or http(s) URL of the recipe document")
    common.add_argument("--project")
    common.add_argument("--profile")
    common.add_argument("--site-title", dest="site_title")
    common.add_argument("--timeout", dest="fetch_timeout", type=float)
    common.add_argument("--avatar-template", dest="avatar_template")
    common.add_argument("--tui-header-icon", dest="tui_header_icon")
    common.add_argument("--log-level", dest="log_level")
    common.add_argument("--json", action="store_true", help="Print view models as JSON")
    common.add_argument("--verbose", action="store_true")

    parser = argparse.ArgumentParser(prog="plated", parents=[common])
    parser.add_argument("--tui", action="store_true", help="Launch interactive browser")
    sub = parser.add_subparsers(dest="command")

    sub.add_parser("home", parents=[common])

    category = sub.add_parser("category", parents=[common])
    category.add_argument("category_key")

    sub.add_parser("appendix", parents=[common])
    sub.add_parser("sources", parents=[common])

    source = sub.add_parser("source", parents=[common])
    source.add_argument("source_name")

    recipe = sub.add_parser("recipe", parents=[common])
    recipe.add_argument("category_key")
    recipe.add_argument("recipe_id")

    search = sub.add_parser("search", parents=[common])
    search.add_argument("query", nargs="*")

    page = sub.add_parser("page", parents=[common])
    page.add_argument("url", help="Site page, e.g. 'recipe.html?category=mains&id=1'")

    sub.add_parser("config", parents=[common])
    sub.add_parser("tui", parents=[common])

    return parser


def _cmd_home(args: argparse.Namespace) -> int:
    cfg, index = _load(args)
    return _emit(args, home_view(index, SiteSettings.from_config(cfg)))


def _cmd_category(args: argparse.Namespace) -> int:
    cfg, index = _load(args)
    return _emit(args, category_view(index, args.category_key, SiteSettings.from_config(cfg)))


def _cmd_appendix(args: argparse.Namespace) -> int:
    cfg, index = _load(args)
    return _emit(args, tag_page_view(index, SiteSettings.from_config(cfg)))


def _cmd_sources(args: argparse.Namespace) -> int:
    cfg, index = _load(args)
    return _emit(args, source_list_page_view(index, SiteSettings.from_config(cfg)))


def _cmd_source(args: argparse.Namespace) -> int:
    cfg, index = _load(args)
    return _emit(args, source_page_view(index, args.source_name, SiteSettings.from_config(cfg)))


def _cmd_recipe(args: argparse.Namespace) -> int:
    cfg, index = _load(args)
    recipe_id = parse_recipe_id(args.recipe_id)
    if recipe_id is None:
        raise RecipeNotFoundError(args.category_key, args.recipe_id)
    view = recipe_detail_view(index, args.category_key, recipe_id, SiteSettings.from_config(cfg))
    return _emit(args, view)


def _cmd_search(args: argparse.Namespace) -> int:
    _, index = _load(args)
    return _emit(args, search_view(index, " ".join(args.query)))


def _cmd_page(args: argparse.Namespace) -> int:
    request: PageRequest = parse_page_url(args.url)
    cfg, index = _load(args)
    return _emit(args, build_page(index, request, SiteSettings.from_config(cfg)))


def _cmd_config(args: argparse.Namespace) -> int:
    cfg = _resolve_cfg(args)
    print(config_to_toml(cfg), end="")
    return 0


def _cmd_tui(args: argparse.Namespace) -> int:
    from .tui import run_tui

    cfg = _resolve_cfg(args)
    return run_tui(cfg)


def _resolve_cfg(args: argparse.Namespace) -> EffectiveConfig:
    cfg = resolve_config(_cli_args_dict(args))
    level = "DEBUG" if getattr(args, "verbose", False) else cfg.log_level
    configure_logging(level)
    return cfg


def _load(args: argparse.Namespace) -> tuple[EffectiveConfig, RecipeIndex]:
    cfg = _resolve_cfg(args)
    document = load_configured_document(cfg)
    index = RecipeIndex(document)
    logger.debug("Indexed %d recipes across %d categories", len(index.recipes), len(index.categories))
    return cfg, index


def _emit(args: argparse.Namespace, view: Any) -> int:
    renderer = get_renderer(getattr(args, "json", False))
    output = renderer(view)
    print(output, end="" if output.endswith("\n") else "\n")
    return 0


def configure_logging(level: str) -> None:
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)
    root.setLevel(level)


def _cli_args_dict(args: argparse.Namespace) -> dict[str, object]:
    return vars(args).copy()


def _exit_code(exc: PlatedError) -> int:
    if isinstance(exc, ConfigError):
        return 2
    if isinstance(exc, DocumentLoadError):
        return 3
    if isinstance(exc, (CategoryNotFoundError, PageNotFoundError)):
        return 4
    if isinstance(exc, RecipeNotFoundError):
        return 5
    return 1
