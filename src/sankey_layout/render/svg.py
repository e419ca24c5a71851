"""SVG generation for Sankey diagrams using drawsvg."""

from __future__ import annotations

import math

import drawsvg as draw

from sankey_layout.layout.links import link_horizontal
from sankey_layout.parser.model import NodeId, SankeyGraph
from sankey_layout.render.constants import CANVAS_PADDING, TITLE_BASELINE, TITLE_HEIGHT
from sankey_layout.render.labels import LabelPlacement, LabelPosition, place_labels
from sankey_layout.render.style import Theme, blend_colors


def render_svg(
    graph: SankeyGraph,
    theme: Theme,
    width: int | None = None,
    height: int | None = None,
    padding: float = CANVAS_PADDING,
    selected_node: NodeId | None = None,
    label_position: LabelPosition | str = LabelPosition.AUTO,
) -> str:
    """Render a laid-out graph to an SVG string.

    Links touching ``selected_node`` are drawn more opaque and the node
    gets a highlight border.
    """
    if not graph.nodes:
        return '<svg xmlns="http://www.w3.org/2000/svg"></svg>'

    label_position = LabelPosition(label_position)
    content_w = max(node.x1 for node in graph.nodes)
    content_h = max(node.y1 for node in graph.nodes)
    labels = place_labels(
        graph,
        (content_w, content_h),
        theme.label_font_size,
        label_position,
        theme.show_values,
    )

    # Grow the drawing so labels outside the node area stay visible
    min_x, min_y, max_x, max_y = _extents(labels, content_w, content_h)
    left = padding - min_x
    top = padding + (TITLE_HEIGHT if graph.title else 0.0) - min_y

    svg_width = width or int(math.ceil(max_x + left + padding))
    svg_height = height or int(math.ceil(max_y + top + padding))

    d = draw.Drawing(svg_width, svg_height)

    # Background
    if theme.background_color != "none":
        d.append(draw.Rectangle(0, 0, svg_width, svg_height, fill=theme.background_color))

    # Title
    if graph.title:
        d.append(draw.Text(
            graph.title,
            theme.title_font_size,
            padding, TITLE_BASELINE,
            fill=theme.title_color,
            font_family=theme.label_font_family,
            font_weight="bold",
        ))

    body = draw.Group(transform=f"translate({left:g},{top:g})")
    _render_links(body, graph, theme, selected_node)
    _render_nodes(body, graph, theme, selected_node)
    _render_labels(body, labels, theme)
    d.append(body)

    return d.as_svg()


def _extents(
    labels: list[LabelPlacement], content_w: float, content_h: float
) -> tuple[float, float, float, float]:
    """Bounding box of the node area and every label."""
    min_x = min([0.0] + [label.x for label in labels])
    min_y = min([0.0] + [label.y for label in labels])
    max_x = max([content_w] + [label.x + label.width for label in labels])
    max_y = max([content_h] + [label.y + label.height for label in labels])
    return min_x, min_y, max_x, max_y


def _node_colors(graph: SankeyGraph, theme: Theme) -> list[str]:
    return [graph.colors.get(node.id) or theme.node_color(node.column) for node in graph.nodes]


def _render_links(
    group: draw.Group,
    graph: SankeyGraph,
    theme: Theme,
    selected_node: NodeId | None,
) -> None:
    """Draw each link as a stroked cubic band, behind the nodes."""
    colors = _node_colors(graph, theme)
    for link in graph.links:
        if link.width <= 0:
            continue
        source = graph.source(link)
        target = graph.target(link)
        connected = selected_node is not None and selected_node in (source.id, target.id)
        path = link_horizontal(graph, link)
        (c1x, c1y), (c2x, c2y) = path.control_points

        band = draw.Path(
            stroke=blend_colors(colors[source.index], colors[target.index], theme.link_color),
            stroke_width=path.width,
            stroke_opacity=theme.link_highlight_opacity if connected else theme.link_opacity,
            fill="none",
        )
        band.M(path.x0, path.y0).C(c1x, c1y, c2x, c2y, path.x1, path.y1)
        band.append_title(
            f"{source.display_label} → {target.display_label}: {link.value:g}"
        )
        group.append(band)


def _render_nodes(
    group: draw.Group,
    graph: SankeyGraph,
    theme: Theme,
    selected_node: NodeId | None,
) -> None:
    colors = _node_colors(graph, theme)
    for node in graph.nodes:
        rect = draw.Rectangle(
            node.x0, node.y0,
            node.x1 - node.x0, node.y1 - node.y0,
            fill=colors[node.index],
            stroke=theme.node_stroke,
            stroke_width=theme.node_stroke_width,
        )
        rect.append_title(f"{node.display_label}: {node.value:g}")
        group.append(rect)

        if selected_node is not None and node.id == selected_node:
            group.append(draw.Rectangle(
                node.x0, node.y0,
                node.x1 - node.x0, node.y1 - node.y0,
                fill="none",
                stroke=theme.selection_stroke,
                stroke_width=theme.selection_stroke_width,
            ))


def _render_labels(
    group: draw.Group,
    labels: list[LabelPlacement],
    theme: Theme,
) -> None:
    for label in labels:
        group.append(draw.Text(
            label.text,
            theme.label_font_size,
            label.x, label.y + label.height / 2,
            fill=theme.label_color,
            font_family=theme.label_font_family,
            dominant_baseline="central",
        ))
