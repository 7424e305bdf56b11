from typing import Dict, List, Optional
from collections import defaultdict

import logging
import threading
import uuid

from .Types import Color, DEFAULT_COLOR

logger = logging.getLogger(__name__)


# A topic in the text network. Nodes are keyed by label: the graph holds at
# most one node per label.
class GraphNode:
    def __init__(self, label: str, color: Color = DEFAULT_COLOR):
        self.label = label
        self.color = color
        self.id = uuid.uuid4().hex

    def __repr__(self):
        return f"GraphNode({self.label!r})"


# A labeled, directed relation between two topics. Edges are never
# deduplicated, so two edges may share source, target and label.
class GraphEdge:
    def __init__(self, source: GraphNode, target: GraphNode, label: str, color: Color = DEFAULT_COLOR):
        self.source = source
        self.target = target
        self.label = label
        self.color = color
        self.id = uuid.uuid4().hex

    def is_self_loop(self) -> bool:
        return self.source is self.target

    def __str__(self):
        return f"{self.label}({self.source.label}, {self.target.label})"

    def __repr__(self):
        return f"GraphEdge({self.source.label!r} -[{self.label}]-> {self.target.label!r})"


class Graph:
    """
    Node/edge store for one compilation run (usually one document).

    find_or_create_node is a read-then-insert against the label space, so it
    and add_edge run under a single writer lock. Callers compiling sentences
    in parallel must share one Graph or merge into it from one thread.
    """

    def __init__(self):
        self.nodes: Dict[str, GraphNode] = {}
        self.edges: List[GraphEdge] = []

        self._incoming_edges: Dict[str, List[GraphEdge]] = defaultdict(list)
        self._outgoing_edges: Dict[str, List[GraphEdge]] = defaultdict(list)
        self._lock = threading.RLock()

    def find_node_by_label(self, label: str) -> Optional[GraphNode]:
        return self.nodes.get(label)

    def create_node(self, label: str) -> GraphNode:
        """Construct a node without adding it to the graph."""
        return GraphNode(label, DEFAULT_COLOR)

    def add_node(self, node: GraphNode):
        with self._lock:
            if node.label in self.nodes:
                raise ValueError(f"Node with label '{node.label}' already exists in the graph")
            self.nodes[node.label] = node
        logger.debug(f"Graph: added node '{node.label}'")

    def find_or_create_node(self, label: str) -> Optional[GraphNode]:
        """
        Return the node for `label`, creating and adding it when missing.
        An empty label produces no node.
        """
        if not label:
            return None
        with self._lock:
            node = self.find_node_by_label(label)
            if node is None:
                node = self.create_node(label)
                self.add_node(node)
            return node

    def create_edge(self, source: GraphNode, target: GraphNode, label: str = "") -> GraphEdge:
        """Construct an edge without adding it to the graph."""
        return GraphEdge(source, target, label, DEFAULT_COLOR)

    def add_edge(self, edge: GraphEdge):
        with self._lock:
            self.edges.append(edge)
            self._outgoing_edges[edge.source.id].append(edge)
            self._incoming_edges[edge.target.id].append(edge)
        logger.debug(f"Graph: added edge {edge}")

    def connect(self, source: GraphNode, target: GraphNode, label: str) -> GraphEdge:
        edge = self.create_edge(source, target, label)
        self.add_edge(edge)
        return edge

    def get_outgoing_edges(self, node: GraphNode) -> List[GraphEdge]:
        return self._outgoing_edges.get(node.id, [])

    def get_incoming_edges(self, node: GraphNode) -> List[GraphEdge]:
        return self._incoming_edges.get(node.id, [])

    def reset(self):
        with self._lock:
            self.nodes.clear()
            self.edges.clear()
            self._incoming_edges.clear()
            self._outgoing_edges.clear()

    def __len__(self):
        return len(self.nodes)

    def __repr__(self):
        return f"Graph(nodes={len(self.nodes)}, edges={len(self.edges)})"
