"""Template rendering and temporary file helpers."""

from __future__ import annotations

import dataclasses
import os
import sys
import tempfile
from collections.abc import Mapping
from typing import Any

import jinja2


class TemplateError(ValueError):
    """Raised when a template cannot be parsed or rendered."""


_ENV = jinja2.Environment(
    undefined=jinja2.StrictUndefined,
    keep_trailing_newline=True,
    autoescape=False,
)


def write_temp_file(content: str) -> str:
    """Write ``content`` to a new temporary file and return its path."""
    prefix = f"{os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else 'mapt'}-"
    with tempfile.NamedTemporaryFile(
        "w", prefix=prefix, delete=False, encoding="utf-8"
    ) as handle:
        handle.write(content)
        return handle.name


def _context(data: Any) -> dict[str, Any]:
    if data is None:
        return {}
    if isinstance(data, Mapping):
        return dict(data)
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    return dict(vars(data))


def render_template(data: Any, template_content: str) -> str:
    """Render ``template_content`` with the fields of ``data`` as variables."""
    try:
        template = _ENV.from_string(template_content)
        return template.render(_context(data))
    except jinja2.TemplateError as exc:
        raise TemplateError(str(exc)) from exc