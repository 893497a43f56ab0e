# SPDX-License-Identifier: GPLv3-or-later
# Copyright © 2025 reflectutil Rui Pinheiro

import logging

import pytest

from rich.table import Table
from rich.text import Text

from reflectutil.util.logging.config import LoggingConfig
from reflectutil.util.logging.handlers import ConditionalFormatter, HandlerFilter, create_file_handler, create_tty_handler
from reflectutil.util.logging.rich_handler import CustomRichHandler


def _record(message: str = "hello", **extra) -> logging.LogRecord:
    record = logging.LogRecord("demo.logger", logging.INFO, "/tmp/module.py", 12, message, None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


@pytest.mark.logging
class TestHandlerFilter:
    def test_unrouted_records_pass(self):
        assert HandlerFilter("tty").filter(_record())

    def test_routed_records(self):
        assert HandlerFilter("tty").filter(_record(handler="tty"))
        assert not HandlerFilter("file").filter(_record(handler="tty"))


@pytest.mark.logging
class TestConditionalFormatter:
    def test_formats_normal_records(self):
        formatter = ConditionalFormatter("[%(levelname)s:%(name)s] %(message)s")

        assert formatter.format(_record()) == "[INFO:demo.logger] hello"

    def test_simple_records_are_bare(self):
        formatter = ConditionalFormatter("[%(levelname)s:%(name)s] %(message)s")

        assert formatter.format(_record(simple=True)) == "hello"


@pytest.mark.logging
class TestCustomRichHandler:
    def test_render_message_prefix(self):
        handler = CustomRichHandler()

        text = handler.render_message(_record(), "hello")

        assert isinstance(text, Text)
        assert text.plain == "[I:demo.logger] hello"

    def test_render_message_without_level(self):
        handler = CustomRichHandler(show_level=False)

        assert handler.render_message(_record(), "hello").plain == "[demo.logger] hello"

    def test_render_message_simple(self):
        handler = CustomRichHandler()

        assert handler.render_message(_record(simple=True), "hello").plain == "hello"

    def test_render_adds_path_column(self):
        handler = CustomRichHandler()
        message = Text("hello")

        output = handler.render(record=_record(), message_renderable=message, traceback=None)

        assert isinstance(output, Table)
        assert len(output.columns) == 2

    def test_render_simple_returns_message(self):
        handler = CustomRichHandler()
        message = Text("hello")

        assert handler.render(record=_record(simple=True), message_renderable=message, traceback=None) is message


@pytest.mark.logging
class TestHandlerFactories:
    def test_file_handler_disabled(self, tmp_path):
        config = LoggingConfig(dir=tmp_path, levels={"file": "OFF"})

        assert create_file_handler(config, tmp_path / "out.log") is None

    def test_file_handler(self, tmp_path):
        config = LoggingConfig(dir=tmp_path, levels={"file": "debug"})
        path = tmp_path / "logs" / "out.log"

        handler = create_file_handler(config, path)
        try:
            assert isinstance(handler, logging.FileHandler)
            assert handler.get_name() == "file"
            assert handler.level == logging.DEBUG
            assert path.parent.is_dir()
        finally:
            handler.close()

    def test_tty_handler_disabled(self):
        config = LoggingConfig(levels={"tty": False})

        assert create_tty_handler(config) is None

    def test_tty_handler_plain(self):
        handler = create_tty_handler(LoggingConfig(levels={"tty": "warning"}, rich=False))

        assert type(handler) is logging.StreamHandler
        assert isinstance(handler.formatter, ConditionalFormatter)
        assert handler.level == logging.WARNING

    def test_tty_handler_rich(self):
        handler = create_tty_handler(LoggingConfig(levels={"tty": "info"}, rich=True))

        assert isinstance(handler, CustomRichHandler)
        assert handler.get_name() == "tty"
