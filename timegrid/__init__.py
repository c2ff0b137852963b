"""
timegrid: date/time labels and month-view calendar grids for UI code.
"""
import logging

from timegrid.utils import *  # noqa: F401,F403
from timegrid.utils import __all__ as _utils_all

logging.getLogger("timegrid").addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = list(_utils_all) + ["__version__"]
