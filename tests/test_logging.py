import logging

from pytest import raises

from wgmint.logging import get_logger, setup_logging


def test_get_logger_namespace() -> None:
    """Loggers live under the wgmint namespace."""
    assert get_logger("wgmint.services").name == "wgmint.services"
    assert get_logger("cli").name == "wgmint.cli"
    assert get_logger("cli") is get_logger("cli")


def test_setup_logging_debug_mode() -> None:
    """Debug mode forces DEBUG and replaces handlers."""
    setup_logging(level="WARNING", debug_mode=True)
    setup_logging(level="WARNING", debug_mode=True)

    root = logging.getLogger("wgmint")
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1


def test_generation_does_not_log_private_key(config_mint, caplog) -> None:
    """Only the public key appears in log records."""
    with caplog.at_level(logging.DEBUG, logger="wgmint"):
        artifact = config_mint.generate()

    private_line = artifact.config_text.splitlines()[1]
    private_encoded = private_line.split(" = ")[1]
    assert artifact.client_public_key_encoded in caplog.text
    assert private_encoded not in caplog.text


def test_setup_logging_unknown_level() -> None:
    """An unknown level name is a clear ValueError."""
    with raises(ValueError, match="VERBOSE"):
        setup_logging(level="VERBOSE")
