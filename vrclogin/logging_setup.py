"""
Logging configuration for vrclogin
"""

import logging
from pathlib import Path


def setup_logging(level: int = logging.INFO, log_file: Path | None = None):
    """Setup console (and optional file) logging with HTTP library logs suppressed to WARNING"""
    logging.getLogger("curl_cffi").setLevel(logging.WARNING)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    vrclogin_logger = logging.getLogger("vrclogin")
    vrclogin_logger.setLevel(level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    vrclogin_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        vrclogin_logger.addHandler(file_handler)
