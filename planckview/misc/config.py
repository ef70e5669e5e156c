# -*- coding: utf-8 -*-
"""
Summary
-------

Functions to parse the ``~/planckview.json`` configuration file

Notes
-----

Default values are read from ``planckview/default_planckview.json`` (Hjson,
comments allowed). Create a ``~/planckview.json`` file in your HOME to
override any of them, for instance::

    {
    "GRID_NPOINTS": 5000,
    "DEBUG_MODE": true
    }

Routine Listing
---------------

- :func:`~planckview.misc.config.get_config`
- :func:`~planckview.misc.config.get_user_config`
- :func:`~planckview.misc.config.check_config`

-------------------------------------------------------------------------------


"""


import json
import os
from json import JSONDecodeError
from os.path import exists, expanduser, join

import hjson

from planckview.misc.utils import getProjectRoot

# %% Functions to parse planckview/default_planckview.json

CONFIG_PATH_DEFAULT = join(getProjectRoot(), "default_planckview.json")
CONFIG_PATH_JSON = join(expanduser("~"), "planckview.json")

assert exists(CONFIG_PATH_DEFAULT)


def get_config(configpath=CONFIG_PATH_JSON):
    """Read the default planckview config file
    (:py:attr:`~planckview.misc.config.CONFIG_PATH_DEFAULT`) and override it
    with the entries of the user config file ``configpath`` (default
    :py:attr:`~planckview.misc.config.CONFIG_PATH_JSON`)"""

    jsonfile = CONFIG_PATH_DEFAULT
    with open(jsonfile) as f:
        try:
            config = hjson.load(f)
            # read with Hjson to allow comments in CONFIG_PATH_DEFAULT
            # we do not allow comments in (user) CONFIG_PATH_JSON
        except JSONDecodeError as err:
            raise JSONDecodeError(
                "Error reading '{0}' (line {2} col {3}): \n{1}".format(
                    jsonfile, err.msg, err.lineno, err.colno
                ),
                err.doc,
                err.pos,
            ) from err
    config = dict(config)

    user_config = get_user_config(configpath)

    check_config(user_config, config)
    config.update(user_config)

    return config


def get_user_config(configpath=CONFIG_PATH_JSON):
    r"""Read user config file and returns it. Returns an empty dict if the
    file does not exist or is empty."""

    if not exists(configpath) or os.stat(configpath).st_size == 0:
        return {}

    # Load the JSON file
    with open(configpath) as f:
        try:
            config = json.load(f)
        except JSONDecodeError as err:
            raise JSONDecodeError(
                "Error reading '{0}' (line {2} col {3}): \n{1}".format(
                    configpath, err.msg, err.lineno, err.colno
                ),
                err.doc,
                err.pos,
            ) from err

    return config


def check_config(user_config, default_config):
    """Raise a KeyError if ``user_config`` has keys that are unknown in
    ``default_config`` (typically a typo in ``~/planckview.json``)"""

    unknown = [k for k in user_config if k not in default_config]
    if unknown:
        raise KeyError(
            "Unknown keys in user config file: {0}. Expected any of {1}".format(
                unknown, sorted(default_config.keys())
            )
        )
