"""Unit tests for the package logger factory."""

import logging

from invoice_editor.lib import logs


def test_logger_uses_module_stem():
    log = logs.logger("/srv/app/src/invoice_editor/services/export_service_pdf.py")

    assert log.name == "invoice_editor.export_service_pdf"
    assert logs.logger("session").name == "invoice_editor.session"


def test_handler_lives_on_package_logger():
    first = logs.logger(__file__)
    second = logs.logger(__file__)

    package = logging.getLogger(logs.PACKAGE_LOGGER)
    assert first is second
    assert first.handlers == []
    assert first.propagate
    assert len(package.handlers) == 1


def test_module_records_reach_package_handler(caplog):
    log = logs.logger("state")

    with caplog.at_level(logging.WARNING, logger=logs.PACKAGE_LOGGER):
        log.warning("Export interrupted before completing")

    assert [record.name for record in caplog.records] == ["invoice_editor.state"]
