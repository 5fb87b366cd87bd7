"""Configuration defaults for costgraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GraphConfig:
    """Defaults applied by ``CostGraph`` and the command-line interface."""

    # Auto-create missing endpoints in direct ``add_links`` calls
    create_if_missing: bool = False

    # Auto-create missing endpoints during bulk construction from a mapping
    bulk_create_if_missing: bool = True

    # Raise ValueError on topology conflicts instead of recording a diagnostic
    strict: bool = False

    # Report every tied minimum-cost path rather than the first one found
    multi_path: bool = False

    def resolve_create(self, create_if_missing: Optional[bool]) -> bool:
        """Return the explicit flag, or the configured default when it is None."""
        if create_if_missing is None:
            return self.create_if_missing
        return bool(create_if_missing)


# Global configuration instance
GRAPH_CONFIG = GraphConfig()
