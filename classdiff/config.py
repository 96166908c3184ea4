# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Bool, Enum, List, Unicode, TraitError, validate
from traitlets.config import Config, Configurable
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .diffing.config import DiffConfig
from .log import LOG_LEVELS, debug


CONFIG_FILE = 'classdiff_config.json'


def config_search_path():
    "Directories searched for classdiff_config.json, highest priority first."
    return [os.getcwd()] + jupyter_config_path()


def load_config_files(path=None):
    """Merge all classdiff_config.json files found on path into one Config.

    Files earlier in path take precedence over later ones.
    """
    if path is None:
        path = config_search_path()
    config = Config()
    for directory in reversed(path):
        try:
            loaded = JSONFileConfigLoader(CONFIG_FILE, path=directory).load_config()
        except ConfigFileNotFound:
            continue
        debug("Loaded settings from %s", os.path.join(directory, CONFIG_FILE))
        config.merge(loaded)
    return config


class ClassDiff(Configurable):
    """Settings of the classdiff command.

    Read from the "ClassDiff" section of classdiff_config.json files,
    and used as defaults for the command line options.
    """

    log_level = Enum(
        LOG_LEVELS,
        'INFO',
        help="set the log level by name.",
    ).tag(config=True)

    atomic_paths = List(
        Unicode(),
        default_value=[],
        help="paths (e.g. /slots/base) whose values are compared as a whole, "
             "without splitting them into classes.",
    ).tag(config=True)

    color = Bool(
        True,
        help="whether to use colors in the printed diff.",
    ).tag(config=True)

    @validate('atomic_paths')
    def _validate_atomic_paths(self, proposal):
        for path in proposal['value']:
            if not path.startswith('/'):
                raise TraitError('atomic paths need to start with `/`, got %r' % (path,))
        return proposal['value']

    def settings(self):
        "Return the configurable values by name."
        return {name: getattr(self, name)
                for name in sorted(self.class_trait_names(config=True))}

    def diff_config(self):
        return DiffConfig(atomic_paths=self.atomic_paths)


def load_settings(path=None):
    "Return the ClassDiff settings configured on disk."
    return ClassDiff(config=load_config_files(path))
