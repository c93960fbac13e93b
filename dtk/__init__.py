# -*- coding: utf-8 -*-
"""
DTK - Developer Toolkit.

Small developer utilities (codecs, digests, ID generators, a geodesic
distance calculator and a capacity-planning estimator) built on a
validated, side-effect-free computation core. A GUI shell or the
bundled command line front end (``python -m dtk``) sits on top.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

__version__ = "0.1.0"

from dtk.core.capacity import estimate, format_storage, parse_ratio
from dtk.core.codec import decode, encode
from dtk.core.errors import ValidationError
from dtk.core.geo import distance, validate_coordinate

__all__: list = [
    "ValidationError",
    "decode",
    "distance",
    "encode",
    "estimate",
    "format_storage",
    "parse_ratio",
    "validate_coordinate",
]
