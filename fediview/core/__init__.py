"""Conversion core: aggregation, resolution, derived fields and converters."""

from fediview.core.batch import BatchResult, convert_batch
from fediview.core.converter import Converter, StatusInteractions
from fediview.core.multierror import MultiError
from fediview.core.resolver import Resolver

__all__ = [
    "BatchResult",
    "Converter",
    "MultiError",
    "Resolver",
    "StatusInteractions",
    "convert_batch",
]
