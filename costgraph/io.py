"""Reading and writing graphs in the nested-mapping exchange format.

The format is a single mapping ``{node: {neighbor: cost, ...}, ...}``. A node
with no outgoing links may map to an empty mapping or to null. Files are read
with ``yaml.safe_load``, so both YAML and JSON documents are accepted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Hashable, Optional, Union

import yaml

from costgraph.config import GraphConfig
from costgraph.diagnostics import DiagnosticSink
from costgraph.graph.cost_graph import CostGraph
from costgraph.logging import get_logger

logger = get_logger(__name__)

GraphDict = Dict[Hashable, Dict[Hashable, Any]]


def _string_key(key: Any) -> str:
    # YAML 1.1 boolean keys (yes/no/on/off) arrive as True/False.
    return str(key)


def load_graph_yaml(yaml_str: str, string_keys: bool = False) -> GraphDict:
    """Parse and shape-check a graph document.

    Args:
        yaml_str: YAML or JSON text.
        string_keys: Convert every node identifier to ``str``. Useful when
            node names come from the command line.

    Returns:
        ``{node: {neighbor: cost}}`` with null link maps replaced by ``{}``.

    Raises:
        ValueError: If the document is not a mapping of mappings.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("The graph document must map to a dictionary at top-level.")

    result: GraphDict = {}
    for node_id, links in data.items():
        if links is None:
            links = {}
        if not isinstance(links, dict):
            raise ValueError(
                f"Links of node '{node_id}' must be a mapping of neighbor to cost."
            )
        if string_keys:
            node_id = _string_key(node_id)
            links = {_string_key(nbr): cost for nbr, cost in links.items()}
        result[node_id] = dict(links)
    return result


def load_graph(
    path: Union[str, Path],
    string_keys: bool = True,
    diagnostics: Optional[DiagnosticSink] = None,
    config: Optional[GraphConfig] = None,
    declared_only: bool = False,
) -> CostGraph:
    """Read a graph file and bulk-load it into a new CostGraph.

    Args:
        path: YAML or JSON file in the exchange format.
        string_keys: See ``load_graph_yaml``.
        diagnostics: Sink for conflicts raised while loading.
        config: Config for the new graph.
        declared_only: Only top-level keys become nodes. A link to a node
            that is not declared is reported as ``NODE_NOT_FOUND`` and
            skipped instead of being auto-created.

    Returns:
        The loaded graph.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        ValueError: If the document has the wrong shape or a cost is invalid.
    """
    path = Path(path)
    data = load_graph_yaml(path.read_text(encoding="utf-8"), string_keys=string_keys)
    if declared_only:
        graph = CostGraph(diagnostics=diagnostics, config=config)
        for node_id in data:
            graph.add_node(node_id)
        for node_id, links in data.items():
            graph.add_links(node_id, links, create_if_missing=False)
    else:
        graph = CostGraph(data, diagnostics=diagnostics, config=config)
    logger.debug(
        "Loaded graph from %s: %d nodes, %d links",
        path,
        graph.number_of_nodes(),
        graph.number_of_edges(),
    )
    return graph


def dump_graph_yaml(graph: CostGraph) -> str:
    """Serialize ``graph`` to YAML in the exchange format."""
    return yaml.safe_dump(graph.to_mapping(), sort_keys=False)
