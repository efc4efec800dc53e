# -*- test-case-name: passthru.test -*-
# Copyright (c) 2011-2021. See LICENSE for details.

"""
Tests for L{passthru}.
"""

from hypothesis import HealthCheck, settings


settings.register_profile(
    "patience",
    settings(
        deadline=None,
        suppress_health_check=[
            HealthCheck.too_slow,
            # Mix-in property tests run from more than one TestCase class.
            HealthCheck.differing_executors,
        ],
    ),
)
settings.load_profile("patience")
