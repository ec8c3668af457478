"""cyclebasis CLI entry point.

Usage: uv run cyclebasis [command]
"""
import argparse
import logging
import sys

import networkx as nx


def _add_common_flags(p: argparse.ArgumentParser) -> None:
    p.add_argument(
        "--dot", action="store_true",
        help="Print the graph as Graphviz DOT instead of a cycle listing "
        "(spanning-tree edges solid, cycle-closing edges dashed).",
    )
    p.add_argument(
        "--single-component", action="store_true",
        help="Only traverse the component of the first node.",
    )
    p.add_argument(
        "-v", "--verbose", action="store_true",
        help="Log traversal details to stderr.",
    )


def _add_grid_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "grid",
        help="Fundamental cycles of a rectangular grid of unit cells.",
    )
    p.add_argument("cells_x", type=int, help="Cells along x")
    p.add_argument("cells_y", type=int, help="Cells along y")
    _add_common_flags(p)


def _add_edges_parser(subparsers: argparse._SubParsersAction) -> None:
    p = subparsers.add_parser(
        "edges",
        help="Fundamental cycles of a graph read from an edge list.",
    )
    p.add_argument(
        "file", type=argparse.FileType("r"),
        help="Edge list, one 'u v' pair per line, '#' comments ('-' for stdin)",
    )
    p.add_argument(
        "--int-nodes", action="store_true",
        help="Parse node names as integers.",
    )
    _add_common_flags(p)


def _run_grid(args: argparse.Namespace) -> str:
    from cyclebasis.cycles.fundamental import compute_fundamental_cycles
    from cyclebasis.graph.generators import grid_graph
    from cyclebasis.render.dot import to_dot
    from cyclebasis.render.report import format_report

    graph = grid_graph(args.cells_x, args.cells_y)
    basis = compute_fundamental_cycles(
        graph, all_components=not args.single_component, consume=False,
    )
    if args.dot:
        isolated = [n for n in graph.nodes() if graph.degree(n) == 0]
        return to_dot(
            ((u, v) for _, u, v in graph.edges()), nodes=isolated, basis=basis,
        )
    return format_report(
        basis, label=f"Grid {args.cells_x}x{args.cells_y}",
    )


def _run_edges(args: argparse.Namespace) -> str:
    from cyclebasis.cycles.fundamental import compute_fundamental_cycles
    from cyclebasis.graph.nx_adapter import NetworkXGraph
    from cyclebasis.render.dot import to_dot
    from cyclebasis.render.report import format_report

    with args.file as fh:
        nx_graph = nx.parse_edgelist(
            fh,
            create_using=nx.MultiGraph,
            nodetype=int if args.int_nodes else None,
            data=False,
        )
    graph = NetworkXGraph(nx_graph)
    basis = compute_fundamental_cycles(
        graph, all_components=not args.single_component, consume=False,
    )
    if args.dot:
        return to_dot(nx_graph.edges(), nodes=nx.isolates(nx_graph), basis=basis)
    return format_report(basis, label=f"Edge list {args.file.name}")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="cyclebasis",
        description="Fundamental cycle basis of an undirected graph.",
    )
    subparsers = parser.add_subparsers(dest="command")

    _add_grid_parser(subparsers)
    _add_edges_parser(subparsers)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from cyclebasis.cycles.ancestor_tree import CycleBasisError

    try:
        if args.command == "grid":
            out = _run_grid(args)
        else:
            out = _run_edges(args)
    except (CycleBasisError, ValueError, TypeError) as exc:
        print(f"cyclebasis: error: {exc}", file=sys.stderr)
        sys.exit(1)
    print(out)
