import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path


def setup_logger(app=None, log_level=None, log_to_file=True):
    if log_level is None:
        log_level = logging.INFO

    logger = logging.getLogger('vidtube')
    logger.setLevel(log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s in %(name)s (%(filename)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    #NOTE: console handler writes to stdout
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if not log_to_file:
        _share_handlers(app, logger, log_level)
        return logger

    #NOTE: rotate every 10MB, keep 5 files
    log_dir = Path('logs')
    log_dir.mkdir(exist_ok=True)

    file_handler = RotatingFileHandler(
        log_dir / 'vidtube.log',
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    file_handler.setLevel(log_level)
    file_handler.setFormatter(formatter)

    error_handler = RotatingFileHandler(
        log_dir / 'error.log',
        maxBytes=10 * 1024 * 1024,  # 10MB
        backupCount=5,
        encoding='utf-8'
    )
    error_handler.setLevel(logging.ERROR)
    error_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(error_handler)

    _share_handlers(app, logger, log_level)

    return logger


def get_logger(name=None):
    if name:
        return logging.getLogger(f'vidtube.{name}')
    return logging.getLogger('vidtube')


def _share_handlers(app, logger, log_level):
    #NOTE: Flask app.logger writes through the same handlers as the vidtube.* loggers
    if app is None:
        return
    app.logger.setLevel(log_level)
    for handler in logger.handlers:
        app.logger.addHandler(handler)
