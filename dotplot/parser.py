import logging
import re
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from .colors import BLACK, parse_color
from .lexer import find_outside_quotes, split_outside_quotes, tokenize
from .model import Edge, EdgeStyle, Graph, Node, NodeShape, Subgraph

logger = logging.getLogger(__name__)

_HEADER_RE = re.compile(r'^(?:strict\s+)?(digraph|graph)\b\s*(.*)$', re.IGNORECASE)
_SUBGRAPH_RE = re.compile(r'^subgraph\b\s*(.*)$', re.IGNORECASE)
_ASSIGN_RE = re.compile(r'^([A-Za-z_][\w.]*)\s*=\s*(.*)$', re.DOTALL)
_ATTR_RE = re.compile(r'([A-Za-z_][\w.]*)\s*=\s*("(?:[^"\\]|\\.)*"|[^,;\]]+)')
_BARE_ID_RE = re.compile(r'^(?:"(?:[^"\\]|\\.)*"|[^\s"=\[\]{};,]+)$')

SHAPES: Dict[str, NodeShape] = {
    'box': NodeShape.RECTANGLE,
    'rectangle': NodeShape.RECTANGLE,
    'rect': NodeShape.RECTANGLE,
    'diamond': NodeShape.DIAMOND,
    'ellipse': NodeShape.ELLIPSE,
    'oval': NodeShape.ELLIPSE,
    'mdiamond': NodeShape.MDIAMOND,
    'msquare': NodeShape.MSQUARE,
    'circle': NodeShape.CIRCLE,
}

EDGE_STYLES: Dict[str, EdgeStyle] = {
    'solid': EdgeStyle.SOLID,
    'dashed': EdgeStyle.DASHED,
    'dotted': EdgeStyle.DOTTED,
}

DEFAULT_STATEMENTS = ('node', 'edge', 'graph')


class ParseError(ValueError):
    pass


class EmptyGraphError(ParseError):
    """Raised when a graph description contains no nodes at all."""


def shape_from_name(name: Optional[str]) -> NodeShape:
    if not name:
        return NodeShape.ELLIPSE
    return SHAPES.get(name.strip().strip('"').lower(), NodeShape.ELLIPSE)


def style_from_name(name: Optional[str]) -> EdgeStyle:
    if not name:
        return EdgeStyle.SOLID
    return EDGE_STYLES.get(name.strip().strip('"').lower(), EdgeStyle.SOLID)


def clean_name(raw: str) -> str:
    name = raw.strip()
    if len(name) >= 2 and name.startswith('"') and name.endswith('"'):
        name = name[1:-1]
    return name


def clean_value(raw: str) -> str:
    value = raw.strip().rstrip(';').strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1].replace('\\"', '"')
    return value


def parse_attributes(text: Optional[str]) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    if not text:
        return attrs
    for match in _ATTR_RE.finditer(text):
        attrs[match.group(1)] = clean_value(match.group(2))
    return attrs


def _split_attr_list(text: str) -> Tuple[str, Optional[str]]:
    start = find_outside_quotes(text, '[')
    if start is None:
        return text, None
    end = text.rfind(']')
    content = text[start + 1:end] if end > start else text[start + 1:]
    return text[:start], content


@dataclass
class _Scope:
    subgraph: Optional[Subgraph]
    open_depth: int
    node_defaults: Dict[str, str] = field(default_factory=dict)
    edge_defaults: Dict[str, str] = field(default_factory=dict)


class _GraphBuilder:
    def __init__(self) -> None:
        self.graph = Graph(directed=True)
        self.depth = 0
        self.header_seen = False
        self.scopes: List[_Scope] = [_Scope(None, 0)]
        self.anonymous_count = 0

    @property
    def scope(self) -> _Scope:
        return self.scopes[-1]

    @property
    def active(self) -> Optional[Subgraph]:
        return self.scope.subgraph

    def open_brace(self) -> None:
        self.depth += 1

    def close_brace(self) -> None:
        self.depth = max(self.depth - 1, 0)
        while len(self.scopes) > 1 and self.depth <= self.scope.open_depth:
            self._finalize_scope()

    def finish(self) -> Graph:
        while len(self.scopes) > 1:
            self._finalize_scope()
        return self.graph

    def _finalize_scope(self) -> None:
        scope = self.scopes.pop()
        if scope.subgraph is not None:
            self.graph.subgraphs.append(scope.subgraph)
            logger.debug(
                "Closed subgraph %s with %d member(s)", scope.subgraph.id, len(scope.subgraph.nodes)
            )

    def statement(self, text: str, line: int, col: int) -> None:
        if not self.header_seen and self.depth == 0:
            m = _HEADER_RE.match(text)
            if m and not m.group(2).startswith('['):
                self.header_seen = True
                self.graph.directed = m.group(1).lower() == 'digraph'
                name = clean_name(m.group(2))
                self.graph.name = name or None
                return

        m = _SUBGRAPH_RE.match(text)
        if m:
            self._open_subgraph(clean_name(m.group(1)))
            return

        body, attr_text = _split_attr_list(text)
        if find_outside_quotes(body, '->') is not None or find_outside_quotes(body, '--') is not None:
            self._edge_statement(body, parse_attributes(attr_text), line, col)
            return

        keyword = body.strip()
        if attr_text is not None:
            attrs = parse_attributes(attr_text)
            if keyword in DEFAULT_STATEMENTS:
                self._default_statement(keyword, attrs)
            else:
                self._node_statement(keyword, attrs, line, col)
            return

        assign = _ASSIGN_RE.match(keyword)
        if assign:
            self._assign(assign.group(1), clean_value(assign.group(2)))
            return

        if keyword in DEFAULT_STATEMENTS or not _BARE_ID_RE.match(keyword):
            logger.debug("[line %d, col %d] skipping statement %r", line, col, text)
            return
        name = clean_name(keyword)
        if not name:
            return
        self._ensure_node(name)
        if self.active is not None:
            self.active.add_member(name)

    def _open_subgraph(self, name: str) -> None:
        if not name:
            self.anonymous_count += 1
            name = f'subgraph_{self.anonymous_count}'
        parent = self.scope
        self.scopes.append(
            _Scope(
                Subgraph(id=name),
                self.depth,
                dict(parent.node_defaults),
                dict(parent.edge_defaults),
            )
        )
        logger.debug("Opened subgraph %s at depth %d", name, self.depth)

    def _assign(self, key: str, value: str) -> None:
        active = self.active
        if active is None:
            self.graph.attributes[key] = value
            return
        if key == 'label':
            active.label = value
        elif key == 'style':
            active.style = value
        elif key == 'color':
            # Colour doubles as fill colour; a later filled node default may replace it.
            active.color = value
            active.fill_color = value
        elif key == 'fillcolor':
            active.fill_color = value
        else:
            active.attributes[key] = value

    def _default_statement(self, keyword: str, attrs: Dict[str, str]) -> None:
        if keyword == 'graph':
            for key, value in attrs.items():
                self._assign(key, value)
            return
        if keyword == 'edge':
            self.scope.edge_defaults.update(attrs)
            return
        self.scope.node_defaults.update(attrs)
        active = self.active
        if active is not None and attrs.get('style', '').lower() == 'filled':
            active.fill_color = attrs.get('color') or 'lightgrey'

    def _ensure_node(self, name: str) -> Node:
        existing = self.graph.nodes.get(name)
        if existing is not None:
            return existing
        node = Node(id=name, label=name)
        _apply_node_attributes(node, self.scope.node_defaults)
        active = self.active
        if active is not None and active.fill_color:
            node.color = parse_color(active.fill_color)
        return self.graph.add_node(node)

    def _node_statement(self, raw_name: str, attrs: Dict[str, str], line: int, col: int) -> None:
        name = clean_name(raw_name)
        if not name:
            logger.debug("[line %d, col %d] attribute list without a node name", line, col)
            return
        node = self._ensure_node(name)
        _apply_node_attributes(node, attrs)
        active = self.active
        if active is not None:
            active.add_member(name)
            if active.fill_color:
                node.color = parse_color(active.fill_color)

    def _edge_statement(self, body: str, attrs: Dict[str, str], line: int, col: int) -> None:
        separator = '->' if find_outside_quotes(body, '->') is not None else '--'
        names = [clean_name(part) for part in split_outside_quotes(body, separator)]
        if len(names) < 2 or not all(names):
            logger.debug("[line %d, col %d] skipping malformed edge statement %r", line, col, body)
            return
        merged = dict(self.scope.edge_defaults)
        merged.update(attrs)
        for name in names:
            self._ensure_node(name)
            if self.active is not None:
                self.active.add_member(name)
        for source, target in zip(names, names[1:]):
            self.graph.edges.append(
                Edge(
                    source=source,
                    target=target,
                    label=merged.get('label'),
                    color=parse_color(merged['color']) if 'color' in merged else BLACK,
                    style=style_from_name(merged.get('style')),
                    directed=separator == '->',
                )
            )


def _apply_node_attributes(node: Node, attrs: Dict[str, str]) -> None:
    for key, value in attrs.items():
        if key == 'label':
            node.label = value
        elif key == 'shape':
            node.shape = shape_from_name(value)
        elif key == 'color':
            node.color = parse_color(value)
        else:
            node.attributes[key] = value


def parse_graph(text: str) -> Graph:
    builder = _GraphBuilder()
    for kind, value, line, col in tokenize(text):
        if kind == 'LBRACE':
            builder.open_brace()
        elif kind == 'RBRACE':
            builder.close_brace()
        else:
            builder.statement(value, line, col)
    graph = builder.finish()

    if not graph.nodes:
        raise EmptyGraphError('No nodes found in graph description')

    logger.info(
        "Parsed %s %s: %d nodes, %d edges, %d subgraphs",
        'digraph' if graph.directed else 'graph',
        graph.name or '<anonymous>',
        len(graph.nodes),
        len(graph.edges),
        len(graph.subgraphs),
    )
    return graph
