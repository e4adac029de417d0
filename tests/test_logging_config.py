from __future__ import annotations

import logging

from cubelet_engine.core.interpolator import cell_transform
from cubelet_engine.logging_config import setup_logging


def test_setup_logging_is_idempotent(tmp_path):
    log_file = tmp_path / "run.log"
    setup_logging(level=logging.DEBUG, log_file=str(log_file))
    logger = setup_logging(level=logging.DEBUG, log_file=str(log_file))
    try:
        assert logger.name == "cubelet_engine"
        assert len(logger.handlers) == 2

        cell_transform(["bogus"], "000", 1.0)
        for h in logger.handlers:
            h.flush()
        assert "Invalid generator bogus" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(logger.handlers):
            h.close()
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
