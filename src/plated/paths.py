from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import EffectiveConfig

REMOTE_SCHEMES = ("http://", "https://")


@dataclass(frozen=True)
class DocumentLocation:
    raw: str
    path: Path | None = None
    url: str | None = None

    @property
    def is_remote(self) -> bool:
        return self.url is not None

    def __str__(self) -> str:
        return self.url if self.url is not None else str(self.path)


def resolve_document_location(cfg: EffectiveConfig) -> DocumentLocation:
    return document_location(cfg.document, cfg.project_dir)


def document_location(raw: str, project_dir: str) -> DocumentLocation:
    text = raw.strip()
    if text.lower().startswith(REMOTE_SCHEMES):
        return DocumentLocation(raw=raw, url=text)

    path = Path(text).expanduser()
    if not path.is_absolute():
        path = Path(project_dir) / path
    return DocumentLocation(raw=raw, path=path)


def avatar_path(template: str, source_name: str) -> str:
    return template.format(name=source_name)
