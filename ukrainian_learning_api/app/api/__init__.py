"""
API package containing versioned routes.

Each version subpackage (currently only ``v1``) exposes a ``router``
that bundles its domain endpoints; ``main.create_app`` mounts it.
"""
