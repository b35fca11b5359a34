import logging

from wavesim.logging_config import setup_logging


def test_repeated_setup_does_not_duplicate_handlers(clean_wavesim_logger):
    setup_logging()
    logger = setup_logging(level=logging.DEBUG)

    assert logger.name == "wavesim"
    assert logger.level == logging.DEBUG
    assert len(logger.handlers) == 1


def test_log_file(tmp_path, clean_wavesim_logger):
    log_file = tmp_path / "wavesim.log"
    logger = setup_logging(log_file=str(log_file))

    logging.getLogger("wavesim.model.wave_grid").info("hello from the grid")
    for handler in logger.handlers:
        handler.flush()

    assert len(logger.handlers) == 2
    text = log_file.read_text(encoding="utf-8")
    assert "Logging initialized." in text
    assert "wavesim.model.wave_grid - INFO - hello from the grid" in text
