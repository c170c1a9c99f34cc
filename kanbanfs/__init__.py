"""Plain-file kanban helpers: slugs, atomic writes, markdown/YAML formats, paths, JSON board store, configuration and board view logic."""

__version__ = "0.1.0"