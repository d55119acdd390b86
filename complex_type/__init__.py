"""
complex_type
------------
An immutable double-precision complex number with IEEE-style handling of
NaN, infinities and signed zeros.

    >>> from complex_type import Complex
    >>> Complex(1, 2) * Complex(3, -4)
    Complex(11.0, 2.0)

Plotting helpers live in ``complex_type.render`` (install the ``plot`` extra).
"""

import logging

from .complex import Complex

__all__ = ["Complex"]
__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())
