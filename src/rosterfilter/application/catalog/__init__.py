"""Option catalogs: fixed relationship and attribute catalogs, roster-derived options."""

from rosterfilter.application.catalog.attributes import ATTRIBUTE_CATALOG, find_attribute
from rosterfilter.application.catalog.generator import (
    generate_group_options,
    generate_options,
    generate_person_options,
)
from rosterfilter.application.catalog.relationships import RELATIONSHIP_CATALOG

__all__ = [
    "ATTRIBUTE_CATALOG",
    "RELATIONSHIP_CATALOG",
    "find_attribute",
    "generate_group_options",
    "generate_options",
    "generate_person_options",
]
