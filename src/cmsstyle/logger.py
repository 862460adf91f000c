import logging

from .config import log_level

logging.basicConfig(
    format='%(asctime)s %(levelname)-8s %(filename)-15s %(message)s',
    datefmt='%Y-%m-%d,%H:%M:%S')


class CmsLogger:
    def __init__(self, name):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level())

    def get_logger(self):
        return self.logger
