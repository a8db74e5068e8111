"""build json schema trees in python"""
__version__ = "0.0.1"

import logging

from . import (
    apis,
    arrays,
    composites,
    exceptions,
    meta,
    numbers,
    objects,
    refs,
    strings,
    types,
    utils,
    values,
)
from .apis import *
from .arrays import *
from .composites import *
from .meta import *
from .numbers import *
from .objects import *
from .refs import *
from .strings import *
from .types import *
from .values import Arena

__all__ = (
    ("Arena", "exceptions")
    + types.__all__
    + objects.__all__
    + refs.__all__
    + strings.__all__
    + numbers.__all__
    + arrays.__all__
    + composites.__all__
    + meta.__all__
    + apis.__all__
)

logging.getLogger(__name__).addHandler(logging.NullHandler())
