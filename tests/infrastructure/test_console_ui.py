"""Tests for ConsoleUi."""

import logging

from core.infrastructure.adapters.ui import ConsoleUi


def test_console_ui_levels_and_prefixes(caplog):
    """Progress and detail go to INFO, errors to ERROR."""
    ui = ConsoleUi(prefix="packer-1")

    with caplog.at_level(logging.INFO, logger="imageforge.ui"):
        ui.say("Creating temporary firewall rule...")
        ui.message("line one\nline two")
        ui.error("Error deleting firewall rule.")

    records = [(r.levelno, r.getMessage()) for r in caplog.records]
    assert records == [
        (logging.INFO, "==> packer-1: Creating temporary firewall rule..."),
        (logging.INFO, "    packer-1: line one"),
        (logging.INFO, "    packer-1: line two"),
        (logging.ERROR, "==> packer-1: Error deleting firewall rule."),
    ]
