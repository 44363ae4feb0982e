from z_dep_discovery.resolve.binary import BinaryResolver, VersionProbe, version_probe

__all__ = ["BinaryResolver", "VersionProbe", "version_probe"]
