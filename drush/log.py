import logging
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
LOGGER_NAME = 'drush'

def configure_logging(level: int=logging.INFO) -> logging.Logger:
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    return logger

def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)
