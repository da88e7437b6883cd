"""
Concrete AccountView implementations.

PageView collects presenter calls and renders the HTML page with Jinja2;
ConsoleView writes the same states to a text stream for the CLI.
"""

from __future__ import annotations

import json
import sys
from dataclasses import asdict
from pathlib import Path
from typing import Any, TextIO

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ton_inspector.inspector.presenter import AccountViewModel

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
PAGE_TEMPLATE = "index.html"

_env = Environment(
    loader=FileSystemLoader(str(TEMPLATES_DIR)),
    autoescape=select_autoescape(enabled_extensions=("html",)),
    trim_blocks=True,
    lstrip_blocks=True,
)


class PageView:
    """Holds page state between presenter calls; render() produces the full HTML document."""

    def __init__(self, address: str = "") -> None:
        self.address = address
        self.loading = False
        self.error: str | None = None
        self.results: AccountViewModel | None = None

    def show_loading(self, show: bool) -> None:
        self.loading = show

    def show_error(self, message: str) -> None:
        self.error = message

    def hide_error(self) -> None:
        self.error = None

    def hide_results(self) -> None:
        self.results = None

    def show_results(self, model: AccountViewModel) -> None:
        self.results = model

    def render(self) -> str:
        template = _env.get_template(PAGE_TEMPLATE)
        return template.render(
            address=self.address,
            loading=self.loading,
            error=self.error,
            results=self.results,
        )


class ConsoleView:
    """Plain-text (or JSON) rendering for the terminal."""

    def __init__(self, out: TextIO | None = None, err: TextIO | None = None, as_json: bool = False) -> None:
        self.out = out or sys.stdout
        self.err = err or sys.stderr
        self.as_json = as_json
        self.failed = False

    def show_loading(self, show: bool) -> None:
        pass

    def show_error(self, message: str) -> None:
        self.failed = True
        print(message, file=self.err)

    def hide_error(self) -> None:
        pass

    def hide_results(self) -> None:
        pass

    def show_results(self, model: AccountViewModel) -> None:
        if self.as_json:
            payload: dict[str, Any] = asdict(model)
            payload.pop("badge", None)
            print(json.dumps(payload, indent=2), file=self.out)
            return
        rows = [
            ("Address", model.address),
            ("Status", model.status_label),
            ("Balance", model.balance),
            ("Contract type", model.contract_type),
            ("Last activity", model.last_activity),
            ("Explorer", model.explorer_url),
        ]
        width = max(len(label) for label, _ in rows)
        for label, value in rows:
            print(f"{label.ljust(width)}  {value}", file=self.out)
