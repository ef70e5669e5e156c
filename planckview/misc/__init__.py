# -*- coding: utf-8 -*-
"""Misc. and support functions
"""


from .arrays import (
    is_strictly_increasing,
    logspace,
    readonly,
    trapezoid_areas,
)
from .config import get_config, get_user_config
from .debug import printdbg
from .utils import getProjectRoot, round_half_up
