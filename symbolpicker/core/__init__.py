"""Core layer: platform detection, catalog and bundled-list loading."""
