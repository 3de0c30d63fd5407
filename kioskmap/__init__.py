# detect if we are imported from the setup procedure (borrowed from numpy code)
try:
    __KIOSKMAP_SETUP__
except NameError:
    __KIOSKMAP_SETUP__ = False

if not __KIOSKMAP_SETUP__:
    from .helpers import *
    from . import directory

__version__ = "0.3.0"
