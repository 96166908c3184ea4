# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import logging


class ClassDiffFormatError(ValueError):
    "Raised for input files that do not hold a configuration tree."


logger = logging.getLogger('classdiff')

LOG_FORMAT = '[%(levelname)1.1s %(name)s] %(message)s'

LOG_LEVELS = ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL')


def init_logging(level='INFO'):
    """Route classdiff log records to stderr at the given level.

    level can be a name from LOG_LEVELS or a logging constant.
    Handlers are only installed once, later calls just change the level.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level)
    if not logging.getLogger().handlers:
        logging.basicConfig(format=LOG_FORMAT)
    logger.setLevel(level)


debug = logger.debug
info = logger.info
warning = logger.warning
error = logger.error
