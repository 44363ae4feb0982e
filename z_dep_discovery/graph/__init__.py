from z_dep_discovery.graph.aggregator import compute_import_paths
from z_dep_discovery.graph.tree_parser import (
    MAVEN_TREE_FORMAT,
    TreeFormat,
    TreeParser,
    extract_sections,
    parse_maven_tree,
)

__all__ = [
    "MAVEN_TREE_FORMAT",
    "TreeFormat",
    "TreeParser",
    "compute_import_paths",
    "extract_sections",
    "parse_maven_tree",
]
