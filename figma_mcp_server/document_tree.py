"""
Document tree model and query engine for Figma files.

Two depth-first, pre-order traversals walk a Figma document:

* ``search_nodes`` collects nodes whose name contains a query
  (case-insensitive);
* ``extract_text`` collects every ``TEXT`` node with its characters and style.

Both share one accumulator list per call and return results in traversal
order. The tree is assumed to be finite and acyclic; recursion depth equals
tree depth.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

TEXT_NODE_TYPE = "TEXT"


def _drop_absent(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Omits ``None`` values from an output record.

    ``Node.from_dict`` reads a missing key and an explicit JSON ``null`` both
    as ``None``, so neither shows up in the serialized record.
    """
    return {key: value for key, value in data.items() if value is not None}


# ---------------------------------------------------------------------
# DATACLASS
# ---------------------------------------------------------------------
@dataclass(frozen=True)
class Node:
    """One element of a Figma document tree (frame, group, text, ...)."""
    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    children: Tuple["Node", ...] = field(default_factory=tuple)
    characters: Optional[str] = None
    style: Optional[Dict[str, Any]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Node":
        """Builds a node tree from the JSON shape returned by the Figma API."""
        children = data.get("children") or []
        return cls(
            id=data.get("id"),
            name=data.get("name"),
            type=data.get("type"),
            children=tuple(cls.from_dict(child) for child in children),
            characters=data.get("characters"),
            style=data.get("style"),
        )


@dataclass(frozen=True)
class Match:
    id: Optional[str]
    name: str
    type: Optional[str]
    # Only the matching node's own name, not its ancestors.
    path: Tuple[str, ...]

    def to_dict(self) -> Dict[str, Any]:
        return _drop_absent({
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "path": list(self.path),
        })


@dataclass(frozen=True)
class TextRecord:
    id: Optional[str]
    name: Optional[str]
    characters: Optional[str]
    style: Optional[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return _drop_absent({
            "id": self.id,
            "name": self.name,
            "characters": self.characters,
            "style": self.style,
        })


# ---------------------------------------------------------------------
# TRAVERSAL
# ---------------------------------------------------------------------
def search_nodes(node: Node, query: str, results: Optional[List[Match]] = None) -> List[Match]:
    """
    Recursively collects nodes whose name contains ``query``.

    The comparison is a case-insensitive substring check on ``name`` only;
    unnamed nodes never match. An empty query matches every named node.

    Args:
        node (Node): Root of the subtree to search.
        query (str): Text to look for in node names.
        results (List[Match], optional): Accumulator to append to. A fresh
            list is used when omitted.

    Returns:
        List[Match]: Matches in depth-first pre-order.
    """
    if results is None:
        results = []

    if node.name and query.lower() in node.name.lower():
        results.append(Match(
            id=node.id,
            name=node.name,
            type=node.type,
            path=(node.name,),
        ))

    for child in node.children:
        search_nodes(child, query, results)

    return results


def extract_text(node: Node, results: Optional[List[TextRecord]] = None) -> List[TextRecord]:
    """
    Recursively collects every ``TEXT`` node in depth-first pre-order.

    Children of a text node are still visited, so malformed trees with
    nested text nodes are reported in full.
    """
    if results is None:
        results = []

    if node.type == TEXT_NODE_TYPE:
        results.append(TextRecord(
            id=node.id,
            name=node.name,
            characters=node.characters,
            style=node.style,
        ))

    for child in node.children:
        extract_text(child, results)

    return results
