"""
Immutable walkway graph with precomputed adjacency.
"""

import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

import networkx as nx

from ...data.circuit_graph import CIRCUIT_EDGES, CIRCUIT_NODES
from ...data.distance_utils import position_distance
from ...data.models import Edge, Node

logger = logging.getLogger(__name__)


class GraphDataError(ValueError):
    """Raised when a node/edge dataset is internally inconsistent."""


class GraphStore:
    """
    Static map of a venue's walkways.

    Built once per process and never mutated. Adjacency is grouped by the
    edge origin at construction so that ``neighbors`` is a dictionary lookup.
    The same topology is mirrored into a frozen ``networkx.MultiDiGraph``
    (``y``/``x`` node attributes, ``length`` edge attribute) for
    route continuity checks and reachability diagnostics.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]):
        """
        Build the graph and validate the dataset.

        Args:
            nodes: Walkway nodes; ids must be unique
            edges: Directed edges; both endpoints must be known nodes

        Raises:
            GraphDataError: On duplicate node ids, dangling edge endpoints
                or non-positive edge distances
        """
        self._nodes: Dict[str, Node] = {}
        for node in nodes:
            if node.id in self._nodes:
                raise GraphDataError(f"Duplicate node id: {node.id}")
            self._nodes[node.id] = node

        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._validate_edges()

        grouped: Dict[str, List[Edge]] = defaultdict(list)
        for edge in self._edges:
            grouped[edge.from_id].append(edge)
        self._adjacency: Dict[str, Tuple[Edge, ...]] = {
            node_id: tuple(grouped.get(node_id, ())) for node_id in self._nodes
        }

        self._graph = nx.freeze(self._build_networkx_graph())

        logger.debug(f"GraphStore built: {len(self._nodes)} nodes, {len(self._edges)} edges")

    @classmethod
    def from_circuit(cls) -> 'GraphStore':
        """Build the compiled-in Circuit de Barcelona-Catalunya network."""
        return cls(CIRCUIT_NODES, CIRCUIT_EDGES)

    def _validate_edges(self) -> None:
        for edge in self._edges:
            for endpoint in (edge.from_id, edge.to_id):
                if endpoint not in self._nodes:
                    raise GraphDataError(
                        f"Edge {edge.from_id} -> {edge.to_id} references unknown node {endpoint}"
                    )
            if edge.distance_meters <= 0:
                raise GraphDataError(
                    f"Edge {edge.from_id} -> {edge.to_id} has non-positive distance {edge.distance_meters}"
                )

    def _build_networkx_graph(self) -> nx.MultiDiGraph:
        graph = nx.MultiDiGraph()
        for node in self._nodes.values():
            graph.add_node(node.id, y=node.position[0], x=node.position[1], name=node.name)
        for edge in self._edges:
            graph.add_edge(edge.from_id, edge.to_id,
                           length=edge.distance_meters,
                           has_stairs=edge.has_stairs,
                           has_shadow=edge.has_shadow)
        return graph

    # Lookups

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def has_node(self, node_id: str) -> bool:
        return node_id in self._nodes

    def neighbors(self, node_id: str) -> Tuple[Edge, ...]:
        """Outgoing edges of a node (empty for unknown ids)."""
        return self._adjacency.get(node_id, ())

    def all_nodes(self) -> List[Node]:
        return list(self._nodes.values())

    def all_edges(self) -> List[Edge]:
        return list(self._edges)

    def indoor_nodes(self) -> List[Node]:
        """Nodes inside buildings, tunnels or covered areas."""
        return [node for node in self._nodes.values() if node.is_indoor]

    def nodes_with_prefix(self, prefix: str) -> List[Node]:
        return [node for node in self._nodes.values() if node.id.startswith(prefix)]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self._nodes

    # Topology diagnostics

    @property
    def graph(self) -> nx.MultiDiGraph:
        """Frozen networkx view of the walkway network."""
        return self._graph

    def has_edge(self, from_id: str, to_id: str, step_free: bool = False) -> bool:
        """
        Check whether a directed edge joins two nodes.

        Args:
            from_id: Origin node id
            to_id: Destination node id
            step_free: Only count edges without stairs
        """
        parallel = self._graph.get_edge_data(from_id, to_id, default={})
        return any(not (step_free and data['has_stairs']) for data in parallel.values())

    def is_reachable(self, from_id: str, to_id: str, avoid_stairs: bool = False) -> bool:
        """
        Check whether any directed path joins two nodes.

        Args:
            from_id: Origin node id
            to_id: Destination node id
            avoid_stairs: Ignore edges with stairs

        Returns:
            False for unknown ids, otherwise whether a path exists
        """
        if from_id not in self._nodes or to_id not in self._nodes:
            return False

        graph = self._graph
        if avoid_stairs:
            graph = nx.subgraph_view(
                self._graph,
                filter_edge=lambda u, v, k: not self._graph.edges[u, v, k]['has_stairs']
            )
        return nx.has_path(graph, from_id, to_id)

    def get_bounds(self) -> Dict[str, float]:
        """
        Get the geographic bounds of the network.

        Returns:
            Dictionary with lat_min, lat_max, lon_min, lon_max
        """
        lats = [node.position[0] for node in self._nodes.values()]
        lons = [node.position[1] for node in self._nodes.values()]

        return {
            'lat_min': min(lats),
            'lat_max': max(lats),
            'lon_min': min(lons),
            'lon_max': max(lons)
        }

    def admissible_heuristic_scale(self, min_factor: float = 1.0) -> float:
        """
        Largest straight-line heuristic multiplier that never overestimates.

        Walkway lengths are measured along the path and can be shorter than
        the straight line between their end nodes (the circuit dataset has
        edges at a quarter of it). For every edge the cheapest possible
        traversal is ``distance_meters * min(min_factor, congestion_weight)``;
        the returned scale keeps ``scale * straight_line`` at or below that
        for all edges, which makes the heuristic consistent.

        Args:
            min_factor: Lowest congestion factor a source can report

        Returns:
            Scale in (0, 1]
        """
        scale = 1.0
        for edge in self._edges:
            straight = position_distance(self._nodes[edge.from_id].position,
                                         self._nodes[edge.to_id].position)
            if straight <= 0:
                continue
            cheapest = edge.distance_meters * min(min_factor, edge.congestion_weight)
            scale = min(scale, cheapest / straight)

        # float rounding must not tip scale * straight above the edge cost
        return scale * (1 - 1e-9)
