from __future__ import annotations

"""
Composite Node Identifier Codec.

Node identifiers handed to the tree widget embed the node kind and the
ancestor ids needed to expand the node later without re-walking the
hierarchy:

    hub_<hubId>
    project_<hubId>_<projectId>
    folder_<hubId>_<folderId>
    item_<itemId>

Segments are joined with '_'. Inside a segment the two reserved characters
are percent-escaped ('%' -> '%25', '_' -> '%5F'), so remote ids containing
either character survive the round trip. Ids free of both characters encode
exactly as the plain joined form.
"""

from typing import Dict, Optional

from modelhierarchy.domain.constants import ID_ESCAPE, ID_SEPARATOR
from modelhierarchy.domain.errors import MalformedIdentifier
from modelhierarchy.domain.models import ROOT_NODE_ID, NodeKind, NodeRef

# Number of embedded segments per kind
_SEGMENT_COUNT: Dict[NodeKind, int] = {
    NodeKind.HUB: 1,
    NodeKind.PROJECT: 2,
    NodeKind.FOLDER: 2,
    NodeKind.ITEM: 1,
}

_ESCAPES = {ID_ESCAPE: "%25", ID_SEPARATOR: "%5F"}
_UNESCAPES = {"25": ID_ESCAPE, "5F": ID_SEPARATOR}

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def encode_node_id(kind: NodeKind, *segments: str) -> str:
    """
    Compose an identifier from a kind tag and its ordered segments.

    Args:
        kind: Node kind.
        *segments: Ancestor ids followed by the node's own id.

    Returns:
        str: Encoded identifier.

    Raises:
        ValueError: If the segment count does not match the kind or a segment is empty.
    """
    kind = NodeKind(kind)
    expected = _SEGMENT_COUNT[kind]
    if len(segments) != expected:
        raise ValueError(f"{kind.value} ids take {expected} segment(s), got {len(segments)}.")
    if any(not s for s in segments):
        raise ValueError(f"{kind.value} id segments must be non-empty.")

    parts = [kind.value] + [_escape(s) for s in segments]
    return ID_SEPARATOR.join(parts)


def decode_node_id(node_id: Optional[str]) -> NodeRef:
    """
    Parse an identifier back into a typed reference.

    The root sentinel ("#"), an empty string and None all decode to the
    root reference, meaning "list the top-level hubs".

    Raises:
        MalformedIdentifier: On unknown kind tags, wrong segment counts,
            empty segments or invalid escapes.
    """
    if node_id is None or node_id == "" or node_id == ROOT_NODE_ID:
        return NodeRef()

    tag, sep, rest = node_id.partition(ID_SEPARATOR)
    if not sep:
        raise MalformedIdentifier(node_id, "missing kind separator")

    try:
        kind = NodeKind(tag)
    except ValueError:
        raise MalformedIdentifier(node_id, f"unknown kind '{tag}'") from None

    raw_segments = rest.split(ID_SEPARATOR)
    expected = _SEGMENT_COUNT[kind]
    if len(raw_segments) != expected:
        raise MalformedIdentifier(
            node_id, f"expected {expected} segment(s) for {kind.value}, found {len(raw_segments)}"
        )

    segments = [_unescape(node_id, s) for s in raw_segments]
    if any(not s for s in segments):
        raise MalformedIdentifier(node_id, "empty segment")

    if expected == 2:
        return NodeRef(kind=kind, hub_id=segments[0], own_id=segments[1])
    return NodeRef(kind=kind, own_id=segments[0])


def hub_node_id(hub_id: str) -> str:
    return encode_node_id(NodeKind.HUB, hub_id)


def project_node_id(hub_id: str, project_id: str) -> str:
    return encode_node_id(NodeKind.PROJECT, hub_id, project_id)


def folder_node_id(hub_id: str, folder_id: str) -> str:
    return encode_node_id(NodeKind.FOLDER, hub_id, folder_id)


def item_node_id(item_id: str) -> str:
    return encode_node_id(NodeKind.ITEM, item_id)


def encode_ref(ref: NodeRef) -> str:
    """Re-encode a decoded reference (inverse of decode_node_id)."""
    if ref.kind is None:
        return ROOT_NODE_ID
    if _SEGMENT_COUNT[ref.kind] == 2:
        return encode_node_id(ref.kind, ref.hub_id or "", ref.own_id or "")
    return encode_node_id(ref.kind, ref.own_id or "")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _escape(segment: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in segment)


def _unescape(node_id: str, segment: str) -> str:
    out = []
    i = 0
    while i < len(segment):
        ch = segment[i]
        if ch != ID_ESCAPE:
            out.append(ch)
            i += 1
            continue
        code = segment[i + 1:i + 3].upper()
        if code not in _UNESCAPES:
            raise MalformedIdentifier(node_id, f"invalid escape at '{segment[i:i + 3]}'")
        out.append(_UNESCAPES[code])
        i += 3
    return "".join(out)
