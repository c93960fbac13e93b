# -*- coding: utf-8 -*-
"""
Core Module - Non-GUI business logic for DTK.

Contains the validated computation layer (codecs, digests, identifiers,
geodesic distance, capacity estimation, JSON formatting), the tool
catalog, the error taxonomy, and configuration loading.

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
