"""Package type implementations for the packaging pipeline.

Each platform module auto-registers its packager with the
PackagerRegistry when imported.
"""

# Platform modules are imported by PackagerRegistry.discover_platforms()
