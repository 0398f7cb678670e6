import collections
import logging
import sys

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

LOG_LEVEL = logging.DEBUG
LOG_FORMAT = '[%(asctime)s] <%(module)s> %(levelname)s:  %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'
TANK_CAPACITY = 10_000

LOG_LEVELS = (
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
)


def set_logging_level(level):
    """
    Sets the logging level for the root logger and all of its handlers.

    Args:
        level (int): The logging level to set. Should be one of the standard logging levels.
    """
    if not isinstance(level, int) or isinstance(level, bool):
        raise ValueError("Logging level must be an integer.")
    if level not in LOG_LEVELS:
        raise ValueError('Invalid logging level. Use one of the standard logging levels, e.g., logging.DEBUG.')

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def qt_message_handler(mode, context, message):
    """
    Converts Qt messages to standard Python logging.
    """
    logger = logging.getLogger('Qt')

    # Qt message may have newline/stripped formatting
    message = message.strip()

    if mode == QtMsgType.QtDebugMsg:
        logger.debug(message)
    elif mode == QtMsgType.QtInfoMsg:
        logger.info(message)
    elif mode == QtMsgType.QtWarningMsg:
        logger.warning(message)
    elif mode == QtMsgType.QtCriticalMsg:
        logger.error(message)
    elif mode == QtMsgType.QtFatalMsg:
        logger.critical(message)
        sys.exit(1)


def setup_logging(enable_stream_handler=True, enable_qt_handler=True, log_level=LOG_LEVEL,
                  tank_capacity=TANK_CAPACITY):
    """
    Configures the root logger and installs the Qt message handler.

    Args:
        enable_stream_handler (bool): Log to stdout in addition to the in-memory tank.
        enable_qt_handler (bool): Route Qt's own messages through Python logging.
        log_level (int): The initial logging level.
        tank_capacity (int): Number of records the in-memory tank keeps.

    Returns:
        TankHandler: The installed in-memory handler.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers = [TankHandler(capacity=tank_capacity)]
    if enable_stream_handler:
        handlers.insert(0, logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    if enable_qt_handler:
        qInstallMessageHandler(qt_message_handler)

    return handlers[-1]


class TankHandler(logging.Handler):
    """Keeps the most recent formatted log records in memory.

    Once ``capacity`` records are stored the oldest are discarded.

    Attributes:
        tank (collections.deque[tuple[int, str]]): (level, formatted message) pairs.
    """

    def __init__(self, capacity=TANK_CAPACITY):
        if capacity < 1:
            raise ValueError(f'Tank capacity must be positive, got {capacity}.')
        super().__init__()
        self.tank = collections.deque(maxlen=capacity)

    @property
    def capacity(self):
        return self.tank.maxlen

    def emit(self, record):
        try:
            self.tank.append((record.levelno, self.format(record)))
        except Exception:
            self.handleError(record)

    def get_logs(self, level=logging.NOTSET):
        """Returns the stored messages with a level >= ``level``, oldest first."""
        return [msg for lvl, msg in self.tank if lvl >= level]

    def clear_logs(self):
        self.tank.clear()
