"""Object enumeration builder for property-panel hosts.

The core (records, builder, combinators) is pure and in-memory. YAML loading of
builder settings lives in `enumerationkit.config_io` and is never imported by the core.
"""

from enumerationkit.builder import ObjectEnumerationBuilder
from enumerationkit.combinators import (
    EnumerationLike,
    get_container_for_instance,
    merge,
    normalize,
    selector_equals,
)
from enumerationkit.config import EnumerationConfig
from enumerationkit.records import Container, Enumeration, Instance, Selector

__all__ = [
    "Container",
    "Enumeration",
    "EnumerationConfig",
    "EnumerationLike",
    "Instance",
    "ObjectEnumerationBuilder",
    "Selector",
    "get_container_for_instance",
    "merge",
    "normalize",
    "selector_equals",
]
