"""Wrap a Graphviz SVG in a browsable HTML page."""

import html


def _strip_prolog(svg: str) -> str:
    """Drop the XML declaration, DOCTYPE and comments preceding the <svg> element."""
    start = svg.find("<svg")
    if start < 0:
        raise ValueError("Input does not contain an <svg> element")
    return svg[start:]


def generate_interactive_html(svg: bytes, title: str = "Dependency graph") -> bytes:
    """Generate a standalone HTML page around a rendered dependency graph.

    The page supports:
    - Pan (drag) and zoom (mouse wheel) of the graph
    - Clicking a module to highlight what it depends on (green) and what
      depends on it (blue), dimming everything else
    - Clicking the background or pressing Escape to clear the selection

    Node and edge identities are read from the ``<title>`` elements Graphviz
    writes for every node (``A``) and edge (``A->B``).

    Args:
        svg: SVG document produced by ``dot -Tsvg``.
        title: Page title.

    Returns:
        UTF-8 encoded HTML document.
    """
    svg_markup = _strip_prolog(svg.decode("utf-8"))
    page_title = html.escape(title)

    page = f"""<!DOCTYPE html>
<html>
<head>
<meta charset="utf-8">
<title>{page_title}</title>
<style>
html, body {{ margin: 0; padding: 0; height: 100%; overflow: hidden; background: #111111; }}
#graph {{ width: 100%; height: 100%; cursor: grab; }}
#graph.dragging {{ cursor: grabbing; }}
#graph svg {{ width: 100%; height: 100%; }}
.node, .edge {{ transition: opacity 0.15s; }}
.dimmed {{ opacity: 0.15; }}
.edge.outgoing path {{ stroke: #2ecc71; stroke-width: 2px; }}
.edge.outgoing polygon {{ stroke: #2ecc71; fill: #2ecc71; }}
.edge.incoming path {{ stroke: #3498db; stroke-width: 2px; }}
.edge.incoming polygon {{ stroke: #3498db; fill: #3498db; }}
.node {{ cursor: pointer; }}
</style>
</head>
<body>
<div id="graph">
{svg_markup}
</div>
<script type="text/javascript">
(function() {{
    var container = document.getElementById('graph');
    var svg = container.querySelector('svg');
    svg.removeAttribute('width');
    svg.removeAttribute('height');

    // Index nodes and edges by the names Graphviz stores in <title>
    var nodes = {{}};
    container.querySelectorAll('g.node').forEach(function(el) {{
        var name = el.querySelector('title').textContent;
        nodes[name] = el;
    }});

    var edges = [];
    container.querySelectorAll('g.edge').forEach(function(el) {{
        var label = el.querySelector('title').textContent;
        // Module names may contain "->"; find the split where both ends are nodes
        var idx = label.indexOf('->');
        while (idx >= 0) {{
            var from = label.slice(0, idx), to = label.slice(idx + 2);
            if (nodes[from] && nodes[to]) {{
                edges.push({{el: el, from: from, to: to}});
                return;
            }}
            idx = label.indexOf('->', idx + 1);
        }}
    }});

    function clearSelection() {{
        container.querySelectorAll('.dimmed, .incoming, .outgoing').forEach(function(el) {{
            el.classList.remove('dimmed', 'incoming', 'outgoing');
        }});
    }}

    function select(name) {{
        clearSelection();
        var keep = {{}};
        keep[name] = true;
        edges.forEach(function(edge) {{
            if (edge.from === name) {{
                edge.el.classList.add('outgoing');
                keep[edge.to] = true;
            }} else if (edge.to === name) {{
                edge.el.classList.add('incoming');
                keep[edge.from] = true;
            }} else {{
                edge.el.classList.add('dimmed');
            }}
        }});
        Object.keys(nodes).forEach(function(other) {{
            if (!keep[other]) {{
                nodes[other].classList.add('dimmed');
            }}
        }});
    }}

    Object.keys(nodes).forEach(function(name) {{
        nodes[name].addEventListener('click', function(evt) {{
            evt.stopPropagation();
            select(name);
        }});
    }});
    svg.addEventListener('click', clearSelection);
    document.addEventListener('keydown', function(evt) {{
        if (evt.key === 'Escape') clearSelection();
    }});

    // Pan and zoom by rewriting the viewBox
    var box = svg.viewBox.baseVal;
    var view = {{x: box.x, y: box.y, w: box.width, h: box.height}};
    function applyView() {{
        svg.setAttribute('viewBox', view.x + ' ' + view.y + ' ' + view.w + ' ' + view.h);
    }}

    container.addEventListener('wheel', function(evt) {{
        evt.preventDefault();
        var rect = svg.getBoundingClientRect();
        var px = view.x + (evt.clientX - rect.left) / rect.width * view.w;
        var py = view.y + (evt.clientY - rect.top) / rect.height * view.h;
        var scale = evt.deltaY > 0 ? 1.1 : 1 / 1.1;
        view.x = px - (px - view.x) * scale;
        view.y = py - (py - view.y) * scale;
        view.w *= scale;
        view.h *= scale;
        applyView();
    }}, {{passive: false}});

    var drag = null;
    container.addEventListener('mousedown', function(evt) {{
        drag = {{x: evt.clientX, y: evt.clientY, view: Object.assign({{}}, view)}};
        container.classList.add('dragging');
    }});
    window.addEventListener('mousemove', function(evt) {{
        if (!drag) return;
        var rect = svg.getBoundingClientRect();
        view.x = drag.view.x - (evt.clientX - drag.x) / rect.width * view.w;
        view.y = drag.view.y - (evt.clientY - drag.y) / rect.height * view.h;
        applyView();
    }});
    window.addEventListener('mouseup', function() {{
        drag = null;
        container.classList.remove('dragging');
    }});
}})();
</script>
</body>
</html>
"""
    return page.encode("utf-8")
