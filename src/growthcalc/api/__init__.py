"""HTTP surface for the growth calculator."""

from growthcalc.api.app import create_app

__all__ = ["create_app"]
