import logging
import os
from datetime import datetime, timezone

from pythonjsonlogger.json import JsonFormatter

TIME_FORMAT = "%b %d,%Y %H:%M:%S"
DEFAULT_FMT = "%(levelname)-5s : %(name)s : %(asctime)s | %(message)s"


def get_module_level_logger(name):
    """module loggers are children of the `convdim` logger, which is configured by `Logger`"""
    return logging.getLogger(name)


class CustomJsonFormatter(JsonFormatter):
    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        if log_record.get('asctime'):
            log_record['asctime'] = datetime.fromtimestamp(record.created, timezone.utc).strftime(TIME_FORMAT)
        if not log_record.get('level'):
            log_record['level'] = record.levelname


class Logger:
    def __init__(self, name, level=logging.DEBUG):
        self.log_fullpath = None
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.propagate = False
        self.logger.setLevel(level)
        self.handlers = []

    def __add_handler(self, handler: logging.Handler, level):
        handler.setLevel(level)
        self.logger.addHandler(handler)
        self.handlers.append(handler)

    @classmethod
    def __get_formatter(cls, fmt: str):
        return logging.Formatter(fmt, TIME_FORMAT)

    @classmethod
    def __get_json_formatter(cls, fmt):
        return CustomJsonFormatter(fmt=fmt)

    def add_filehandler(self, log_fullpath, fmt: str = None, in_json=False, level=logging.DEBUG):
        """logs to `log_fullpath`, one json object per line if `in_json`"""
        if fmt is None:
            fmt = DEFAULT_FMT
        self.log_fullpath = log_fullpath
        folder = os.path.dirname(self.log_fullpath)
        if folder:
            os.makedirs(folder, exist_ok=True)
        file_handler = logging.FileHandler(self.log_fullpath)
        if in_json:
            file_handler.setFormatter(self.__get_json_formatter(fmt))
        else:
            file_handler.setFormatter(self.__get_formatter(fmt))
        self.__add_handler(file_handler, level)

    def add_console_handler(self, fmt: str = None, level=logging.DEBUG):
        if fmt is None:
            fmt = DEFAULT_FMT
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(self.__get_formatter(fmt))
        self.__add_handler(console_handler, level)

    @property
    def debug(self):
        return self.logger.debug

    @property
    def info(self):
        return self.logger.info

    def cleanup(self):
        for handler in self.handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self.handlers = []
