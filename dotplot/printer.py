import re
from typing import Dict, List, Optional

from .colors import BLACK, color_name
from .model import Edge, EdgeStyle, Graph, Node, NodeShape, Subgraph

_PLAIN_ID_RE = re.compile(r'^(?:[A-Za-z_]\w*|-?\d+(?:\.\d+)?)$')
_RESERVED = {'node', 'edge', 'graph', 'digraph', 'subgraph', 'strict'}


def quote(value: str) -> str:
    return '"' + value.replace('"', '\\"') + '"'


def id_str(name: str) -> str:
    if _PLAIN_ID_RE.match(name) and name.lower() not in _RESERVED:
        return name
    return quote(name)


def _format_attrs(attrs: Dict[str, str]) -> str:
    if not attrs:
        return ''
    parts = [f'{key}={quote(value)}' for key, value in attrs.items()]
    return ' [' + ', '.join(parts) + ']'


def node_attributes(node: Node) -> Dict[str, str]:
    attrs: Dict[str, str] = {}
    if node.label is not None:
        attrs['label'] = node.label
    if node.shape is not NodeShape.ELLIPSE:
        attrs['shape'] = node.shape.value
    name = color_name(node.color)
    if node.color != BLACK and name is not None:
        attrs['color'] = name
    attrs.update(node.attributes)
    return attrs


def format_node(node: Node) -> str:
    return f'{id_str(node.id)}{_format_attrs(node_attributes(node))};'


def format_edge(edge: Edge) -> str:
    attrs: Dict[str, str] = {}
    if edge.label is not None:
        attrs['label'] = edge.label
    name = color_name(edge.color)
    if edge.color != BLACK and name is not None:
        attrs['color'] = name
    if edge.style is not EdgeStyle.SOLID:
        attrs['style'] = edge.style.value
    op = '->' if edge.directed else '--'
    return f'{id_str(edge.source)} {op} {id_str(edge.target)}{_format_attrs(attrs)};'


def format_subgraph(subgraph: Subgraph, indent: str = '  ') -> List[str]:
    inner = indent * 2
    lines = [f'{indent}subgraph {id_str(subgraph.id)} {{']
    if subgraph.label is not None:
        lines.append(f'{inner}label={quote(subgraph.label)};')
    if subgraph.style is not None:
        lines.append(f'{inner}style={quote(subgraph.style)};')
    if subgraph.color is not None:
        lines.append(f'{inner}color={quote(subgraph.color)};')
    if subgraph.fill_color is not None and subgraph.fill_color != subgraph.color:
        lines.append(f'{inner}fillcolor={quote(subgraph.fill_color)};')
    for key, value in subgraph.attributes.items():
        lines.append(f'{inner}{key}={quote(value)};')
    for member in subgraph.nodes:
        lines.append(f'{inner}{id_str(member)};')
    lines.append(f'{indent}}}')
    return lines


def print_graph(graph: Graph, name: Optional[str] = None) -> str:
    """Emit canonical graph-language text for ``graph``.

    Node declarations come first with their full attributes, then subgraphs
    listing their members, then edges, so that parsing the text again yields
    the same nodes, memberships and edges. Subgraphs are written flat.
    """

    keyword = 'digraph' if graph.directed else 'graph'
    title = name if name is not None else graph.name
    header = f'{keyword} {id_str(title)} {{' if title else f'{keyword} {{'
    lines = [header]
    for key, value in graph.attributes.items():
        lines.append(f'  {key}={quote(value)};')
    for node in graph.nodes.values():
        lines.append('  ' + format_node(node))
    for subgraph in graph.subgraphs:
        lines.extend(format_subgraph(subgraph))
    for edge in graph.edges:
        lines.append('  ' + format_edge(edge))
    lines.append('}')
    return '\n'.join(lines) + '\n'
