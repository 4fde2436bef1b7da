from __future__ import annotations

import argparse
from pathlib import Path
from typing import Dict, Hashable, List, Sequence, Tuple

import matplotlib.pyplot as plt
from matplotlib import animation
import networkx as nx

from config import build_graph, load_config, resolve_node
from dijkstra import DijkstraGraph


def compute_layout(graph_nx: nx.DiGraph) -> Dict[Hashable, Tuple[float, float]]:
    return nx.spring_layout(graph_nx, seed=42)


def route_edges(path: Sequence[Hashable]) -> List[Tuple[Hashable, Hashable]]:
    return list(zip(path[:-1], path[1:]))


def _draw_base(ax, graph_nx: nx.DiGraph, layout, path: Sequence[Hashable]) -> None:
    on_path = set(path)
    node_colors = ["#ffbb78" if node in on_path else "#c7e9c0" for node in graph_nx.nodes]

    nx.draw_networkx_edges(
        graph_nx, layout, ax=ax, edge_color="lightgray", width=1.0, arrows=True
    )
    nx.draw_networkx_nodes(
        graph_nx, layout, node_color=node_colors, node_size=600, ax=ax
    )
    nx.draw_networkx_labels(graph_nx, layout, font_size=10, ax=ax)

    edge_labels = {(u, v): data["weight"] for u, v, data in graph_nx.edges(data=True)}
    nx.draw_networkx_edge_labels(
        graph_nx, layout, edge_labels=edge_labels, font_size=8, ax=ax
    )


def draw_path(
    graph: DijkstraGraph,
    path: Sequence[Hashable],
    cost: float,
    output: Path | None = None,
    show: bool = False,
) -> None:
    graph_nx = graph.to_networkx()
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))
    _draw_base(ax, graph_nx, layout, path)

    path_edges = route_edges(path)
    if path_edges:
        nx.draw_networkx_edges(
            graph_nx,
            layout,
            edgelist=path_edges,
            edge_color="#d62728",
            width=2.5,
            arrows=True,
            ax=ax,
        )

    summary = "\n".join(
        [
            f"Path: {' -> '.join(str(node) for node in path)}",
            f"Cost: {cost:g}",
            f"Hops: {len(path_edges)}",
        ]
    )
    ax.text(
        1.02,
        0.5,
        summary,
        transform=ax.transAxes,
        va="center",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(f"Shortest path {path[0]} -> {path[-1]}")

    if output:
        fig.savefig(output, bbox_inches="tight")
    if show:
        plt.show()
    else:
        plt.close(fig)


def animate_path(
    graph: DijkstraGraph,
    path: Sequence[Hashable],
    output: Path | None = None,
    show: bool = False,
) -> None:
    if not path:
        return
    if output and Path(output).suffix.lower() != ".gif":
        raise ValueError(f"Animations are written as GIF; got {output}.")

    graph_nx = graph.to_networkx()
    layout = compute_layout(graph_nx)

    fig, ax = plt.subplots(figsize=(10, 8))
    _draw_base(ax, graph_nx, layout, path)

    path_line, = ax.plot([], [], color="#d62728", linewidth=2.0, zorder=2)
    current_edge_line, = ax.plot([], [], color="#ff7f0e", linewidth=3.0, zorder=3)
    marker = ax.scatter([], [], s=160, c="#1f77b4", zorder=4)
    status_text = ax.text(
        0.02,
        0.98,
        "",
        transform=ax.transAxes,
        va="top",
        fontsize=10,
        bbox=dict(facecolor="white", alpha=0.8, boxstyle="round"),
    )

    ax.set_axis_off()
    ax.set_title(f"Shortest path {path[0]} -> {path[-1]} (animated)")

    cumulative = [0.0]
    for u, v in route_edges(path):
        cumulative.append(cumulative[-1] + float(graph.get_edge(u, v)))

    def init():
        path_line.set_data([], [])
        current_edge_line.set_data([], [])
        marker.set_offsets([[float("nan"), float("nan")]])
        status_text.set_text("")
        return path_line, current_edge_line, marker, status_text

    def update(frame: int):
        node = path[frame]
        x, y = layout[node]
        prefix = path[: frame + 1]
        path_line.set_data([layout[n][0] for n in prefix], [layout[n][1] for n in prefix])
        marker.set_offsets([[x, y]])

        if frame > 0:
            x_prev, y_prev = layout[path[frame - 1]]
            current_edge_line.set_data([x_prev, x], [y_prev, y])
        else:
            current_edge_line.set_data([], [])

        status_text.set_text(
            "\n".join(
                [
                    f"Step {frame + 1}/{len(path)}",
                    f"At node: {node}",
                    f"Cost so far: {cumulative[frame]:g}",
                ]
            )
        )
        return path_line, current_edge_line, marker, status_text

    anim = animation.FuncAnimation(
        fig,
        update,
        frames=len(path),
        init_func=init,
        interval=800,
        blit=False,
    )

    if output:
        anim.save(Path(output), writer=animation.PillowWriter(fps=1))

    if show:
        plt.show()
    else:
        plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Visualise the shortest path between two nodes of a graph instance."
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("lecture_graph.yaml"),
        help="Path to the YAML graph instance.",
    )
    parser.add_argument("--start", required=True, help="Start node.")
    parser.add_argument("--end", required=True, help="End node.")
    parser.add_argument(
        "--static-out",
        type=Path,
        help="Optional path to save a static PNG of the graph and path.",
    )
    parser.add_argument(
        "--animation-out",
        type=Path,
        help="Optional path to save a GIF animation of the path.",
    )
    parser.add_argument(
        "--no-show",
        action="store_true",
        help="Do not display figures interactively.",
    )
    args = parser.parse_args()

    graph = build_graph(load_config(args.config)["graph"])
    cost, path = graph.shortest_path(
        resolve_node(graph, args.start), resolve_node(graph, args.end)
    )

    show = not args.no_show
    draw_path(graph, path, cost, output=args.static_out, show=show)
    animate_path(graph, path, output=args.animation_out, show=show)


if __name__ == "__main__":
    main()
