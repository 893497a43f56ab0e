# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import pathlib

from typing import TYPE_CHECKING, override

from rich.console import Console, ConsoleRenderable, RenderableType
from rich.containers import Renderables
from rich.logging import RichHandler
from rich.table import Table
from rich.text import Text


if TYPE_CHECKING:
    import logging

    from rich.traceback import Traceback


def _is_simple(record: logging.LogRecord) -> bool:
    return bool(getattr(record, "simple", False))


class CustomRichHandler(RichHandler):
    """Compact :class:`rich.logging.RichHandler` rendering ``[L:logger.name] message`` with the source location on the right.

    Records logged with ``extra={"simple": True}`` are rendered as the bare message.
    """

    def __init__(self, *, show_path: bool = True, show_level: bool = True, **kwargs) -> None:
        kwargs.setdefault("console", Console(stderr=True))
        super().__init__(rich_tracebacks=True, enable_link_path=False, show_path=show_path, show_level=show_level, **kwargs)

    @staticmethod
    def level_style(record: logging.LogRecord) -> str:
        return f"logging.level.{record.levelname.lower()}"

    def _prefix(self, record: logging.LogRecord) -> Text:
        prefix = Text("[", style="dim")
        if self._log_render.show_level:
            prefix.append(record.levelname[0], style=self.level_style(record))
            prefix.append(":", style="dim")
        prefix.append(record.name, style="dim")
        prefix.append("] ", style="dim")
        return prefix

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        text = Text() if _is_simple(record) else self._prefix(record)
        text.append(message)
        return text

    @override
    def render(self, *, record: logging.LogRecord, traceback: Traceback | None, message_renderable: ConsoleRenderable) -> ConsoleRenderable:
        if _is_simple(record):
            return message_renderable

        body: list[RenderableType] = [message_renderable]
        if traceback is not None:
            body.append(traceback)

        grid = Table.grid(padding=(0, 1), expand=True)
        grid.add_column(ratio=1, style=self.level_style(record), overflow="fold")

        location = pathlib.Path(record.pathname).name
        if self._log_render.show_path and location:
            grid.add_column(style="log.path")
            grid.add_row(Renderables(body), Text(f"{location}:{record.lineno}" if record.lineno else location))
        else:
            grid.add_row(Renderables(body))
        return grid
