from z_dep_discovery.discovery.files import (
    find_ancestor,
    has_file,
    is_file,
    is_folder,
    or_predicates,
)
from z_dep_discovery.discovery.manifests import ManifestLocator
from z_dep_discovery.discovery.pom import parse_pom, parse_pom_text, pom_display_name

__all__ = [
    "ManifestLocator",
    "find_ancestor",
    "has_file",
    "is_file",
    "is_folder",
    "or_predicates",
    "parse_pom",
    "parse_pom_text",
    "pom_display_name",
]
