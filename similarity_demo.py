# ===============================================================
# Social similarity demo on a uniform random friendship graph
# ===============================================================
#
# Run with:
#     python similarity_demo.py
#     python similarity_demo.py --vertices 200 --edges 800 --seed 42 --verbose

import argparse
import sys

from friendship_graph import InconsistentGraphStateError
from random_graphs import VERTEX_PREFIX, generate_uniform_random
from social_similarity import similarity_breakdown


# ------------------------------------------------------------------
# PARAMETERS (defaults for the CLI flags)
# ------------------------------------------------------------------

VERTICES = 500
EDGES = 1000
SOURCE = VERTEX_PREFIX + "0"
TARGET = VERTEX_PREFIX + "1"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Asymmetric social similarity of two users in a random friendship graph"
    )
    parser.add_argument("--vertices", type=int, default=VERTICES, help="Number of vertices")
    parser.add_argument("--edges", type=int, default=EDGES, help="Number of random edge draws")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--source", type=str, default=SOURCE, help="First user (e.g. v0)")
    parser.add_argument("--target", type=str, default=TARGET, help="Second user (e.g. v1)")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Also print ego / mutual friendship graph sizes"
    )
    return parser.parse_args(argv)


def print_breakdown(info) -> None:
    print(f"\nComputing similarity of {info['source']} to {info['target']}")
    print(
        f"  friendship graph of {info['source']}: "
        f"{info['ego_vertices']} vertices, {info['fr_edge_count']} edges"
    )
    if info["fr_edge_count"] == 0:
        print("  no friendships among friends, similarity is 0")
        return
    print(
        f"  mutual friendship graph with {info['target']}: "
        f"{info['mutual_vertices']} vertices, {info['mutual_edge_count']} edges"
    )


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        graph = generate_uniform_random(args.vertices, args.edges, seed=args.seed)
        # Both directions are computed before anything is printed.
        forward = similarity_breakdown(graph, args.source, args.target)
        reverse = similarity_breakdown(graph, args.target, args.source)
    except (ValueError, InconsistentGraphStateError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print(f"The graph has {graph.edge_count()} edges and {graph.vertex_count()} vertices")

    if args.verbose:
        print_breakdown(forward)
        print_breakdown(reverse)

    print()
    print(f"sim({args.source} -> {args.target}) = {forward['score']:.6f}")
    print(f"sim({args.target} -> {args.source}) = {reverse['score']:.6f}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
