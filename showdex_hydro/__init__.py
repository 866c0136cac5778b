"""Compact string codec for Showdex settings.

The settings tree is persisted as a single delimited string (see
``showdex_hydro.header`` for the wire grammar) and hydrated back into an
immutable ``ShowdexSettings`` value.
"""

__version__ = "1.2.6"
__build_date__ = "2024-06-02"

from .dehydrate import dehydrate_settings
from .hydrate import hydrate_settings
from .model import ShowdexSettings, default_settings

__all__ = [
    "__version__",
    "__build_date__",
    "ShowdexSettings",
    "default_settings",
    "dehydrate_settings",
    "hydrate_settings",
]
