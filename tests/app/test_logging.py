import logging

from src.app.logging import NOISY_LOGGERS, configure_logging, get_logger


def test_router_log_line_is_emitted_once(capsys):
    # Arrange
    configure_logging("INFO")
    logger = get_logger("src.app.api.v1.clients")

    # Act
    logger.info("client created")

    # Assert
    output = capsys.readouterr().out
    assert output.count("client created") == 1
    assert logger.handlers == []
    assert logger.propagate is True


def test_noisy_libraries_are_quieted():
    configure_logging("DEBUG")

    for name in NOISY_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
