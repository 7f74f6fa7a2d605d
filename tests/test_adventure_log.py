import logging

import adventure_log


def test_setup_logging_adds_console_and_file_handlers(monkeypatch, tmp_path):
    root = logging.getLogger()
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)
    log_file = tmp_path / "client.log"

    adventure_log.setup_logging("INFO", str(log_file))
    try:
        kinds = [type(h) for h in root.handlers]
        assert kinds == [logging.StreamHandler, logging.FileHandler]
        assert root.handlers[0].level == logging.INFO
        assert root.handlers[1].level == logging.DEBUG

        logging.getLogger("game_api").debug("hello from the client")
        root.handlers[1].flush()
        assert "[DEBUG] hello from the client" in log_file.read_text()
    finally:
        for handler in root.handlers:
            handler.close()


def test_setup_logging_leaves_existing_config_alone(monkeypatch):
    root = logging.getLogger()
    existing = logging.NullHandler()
    monkeypatch.setattr(root, "handlers", [existing])
    adventure_log.setup_logging("DEBUG", None)
    assert root.handlers == [existing]
