"""Load the recipe document from a local file or an HTTP(S) URL.

JSON is the canonical format. Files or URLs ending in ``.yaml``/``.yml`` are
read with PyYAML so the collection can be authored by hand.
"""

from __future__ import annotations

import json
import logging
from pathlib import PurePosixPath
from typing import Any
from urllib.parse import urlsplit

import httpx
import yaml

from .config import DEFAULT_FETCH_TIMEOUT, EffectiveConfig
from .domain import RecipeDocument, parse_document
from .errors import DocumentLoadError
from .paths import DocumentLocation, resolve_document_location

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_configured_document(cfg: EffectiveConfig, client: httpx.Client | None = None) -> RecipeDocument:
    return load_document(resolve_document_location(cfg), timeout=cfg.fetch_timeout, client=client)


def load_document(
    location: DocumentLocation,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.Client | None = None,
) -> RecipeDocument:
    try:
        data = load_raw_document(location, timeout=timeout, client=client)
        document = parse_document(data)
    except DocumentLoadError as exc:
        logger.error("Error loading or parsing recipe document %s: %s", location, exc)
        raise
    logger.debug("Loaded %d categories from %s", len(document), location)
    return document


def load_raw_document(
    location: DocumentLocation,
    timeout: float = DEFAULT_FETCH_TIMEOUT,
    client: httpx.Client | None = None,
) -> Any:
    if location.url is not None:
        text = _fetch_text(location.url, timeout, client)
        name = urlsplit(location.url).path
    elif location.path is not None:
        try:
            text = location.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DocumentLoadError(f"Failed to read recipe document: {location.path}") from exc
        except UnicodeDecodeError as exc:
            raise DocumentLoadError(f"Invalid encoding in recipe document: {location.path}") from exc
        name = location.path.name
    else:
        raise DocumentLoadError(f"No recipe document location given: {location.raw!r}")
    return _decode(text, name, str(location))


def _fetch_text(url: str, timeout: float, client: httpx.Client | None) -> str:
    try:
        if client is None:
            with httpx.Client(timeout=timeout, follow_redirects=True) as owned:
                response = owned.get(url)
        else:
            response = client.get(url, timeout=timeout)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise DocumentLoadError(f"HTTP error! status: {exc.response.status_code}") from exc
    except httpx.HTTPError as exc:
        raise DocumentLoadError(f"Failed to fetch recipe document: {url}") from exc
    return response.text


def _decode(text: str, name: str, label: str) -> Any:
    if PurePosixPath(name).suffix.lower() in YAML_SUFFIXES:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Invalid YAML in recipe document: {label}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise DocumentLoadError(f"Invalid JSON in recipe document: {label}") from exc
