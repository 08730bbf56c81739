"""
Package marker for collection_helpers.

This ensures 'collection_helpers' is importable from the repository root,
so `from collection_helpers.src.map import map_collection` works without
modifying PYTHONPATH.
"""
# PUBLIC_INTERFACE
def get_version() -> str:
    """Return the collection helpers package version (static for now)."""
    return "0.1.0"
