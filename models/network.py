"""Time network of a single itinerary."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Dict, List, Tuple
import networkx as nx

from models.flight import Flight


@dataclass
class NetworkNode:
    """Node in the itinerary network."""
    id: str
    node_type: str  # 'departure', 'arrival'
    time: datetime
    segment_index: int


@dataclass
class NetworkArc:
    """Arc in the itinerary network."""
    from_node: str
    to_node: str
    arc_type: str  # 'segment', 'ground'
    duration: timedelta = timedelta(0)

    @property
    def whole_minutes(self) -> int:
        """Duration in whole minutes, truncated toward zero."""
        return int(self.duration.total_seconds() / 60)


class ItineraryNetwork:
    """
    Time network for one flight.

    Every segment contributes a departure node, an arrival node and a
    segment arc between them. Ground arcs join the arrival of a segment
    to the departure of the segment right after it in itinerary order;
    non-adjacent segments are never connected.
    """

    def __init__(self, flight: Flight):
        self.flight = flight

        self.graph = nx.DiGraph()
        self.nodes: Dict[str, NetworkNode] = {}
        self.arcs: Dict[Tuple[str, str], NetworkArc] = {}

        self._build_network()

    def _build_network(self) -> None:
        """Construct the itinerary network."""
        ground_times = self.flight.ground_times

        for index, segment in enumerate(self.flight.segments):
            dep_id = f"S{index}_DEP"
            arr_id = f"S{index}_ARR"
            self._add_node(NetworkNode(dep_id, "departure", segment.departure, index))
            self._add_node(NetworkNode(arr_id, "arrival", segment.arrival, index))
            self._add_arc(NetworkArc(dep_id, arr_id, "segment", segment.duration))

            if index > 0:
                self._add_arc(NetworkArc(
                    from_node=f"S{index - 1}_ARR",
                    to_node=dep_id,
                    arc_type="ground",
                    duration=ground_times[index - 1]
                ))

    def _add_node(self, node: NetworkNode) -> None:
        self.nodes[node.id] = node
        self.graph.add_node(
            node.id,
            node_type=node.node_type,
            time=node.time,
            segment_index=node.segment_index
        )

    def _add_arc(self, arc: NetworkArc) -> None:
        self.arcs[(arc.from_node, arc.to_node)] = arc
        self.graph.add_edge(
            arc.from_node,
            arc.to_node,
            arc_type=arc.arc_type,
            minutes=arc.whole_minutes
        )

    def ground_arcs(self) -> List[NetworkArc]:
        """Ground arcs in itinerary order."""
        return [
            self.arcs[(u, v)]
            for u, v, arc_type in self.graph.edges(data="arc_type")
            if arc_type == "ground"
        ]

    def total_ground_minutes(self) -> int:
        """Total time on the ground, summed per connection in whole minutes."""
        return sum(arc.whole_minutes for arc in self.ground_arcs())

    @property
    def num_nodes(self) -> int:
        """Number of nodes in the network."""
        return len(self.nodes)

    @property
    def num_arcs(self) -> int:
        """Number of arcs in the network."""
        return len(self.arcs)

    def __repr__(self) -> str:
        return (
            f"ItineraryNetwork(segments={len(self.flight.segments)}, "
            f"nodes={self.num_nodes}, arcs={self.num_arcs})"
        )
