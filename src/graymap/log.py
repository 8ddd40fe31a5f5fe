import argparse
import logging


class Log:
    LOGGER_NAME = 'graymap'
    FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
    LEVELS = {
        'debug': logging.DEBUG,
        'info': logging.INFO,
        'warning': logging.WARNING,
        'error': logging.ERROR,
    }

    logger = logging.getLogger(LOGGER_NAME)

    @staticmethod
    def add_args(parser: argparse.ArgumentParser):
        parser.add_argument('--log-level', choices=list(Log.LEVELS), default='info', help='Log verbosity')

    @staticmethod
    def setup(args):
        Log.setup_level(Log.LEVELS[args.log_level])

    @staticmethod
    def setup_level(level: int):
        # Repeated setup (tests, several entry points) must not stack handlers
        for handler in list(Log.logger.handlers):
            Log.logger.removeHandler(handler)

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(Log.FORMAT))
        Log.logger.addHandler(handler)
        Log.logger.setLevel(level)

    @staticmethod
    def debug(message: str):
        Log.logger.debug(message)

    @staticmethod
    def info(message: str):
        Log.logger.info(message)

    @staticmethod
    def warning(message: str):
        Log.logger.warning(message)

    @staticmethod
    def error(message: str):
        Log.logger.error(message)
