"""
Example: Graph algorithms in graphalgo

This example builds a small directed graph and a random undirected graph and
runs every registered algorithm on them, printing the results with vertex
labels.
"""

from graphalgo import (
    GraphBuilder,
    bfs,
    degree_sequence,
    detect_cycles,
    dfs,
    format_path,
    generate_random_graph,
    list_algorithms,
    minimum_spanning_tree,
    shortest_path,
    transitive_closure,
)


def example_directed_graph():
    """Example: Traversals, shortest path and closure on a digraph."""
    print("=" * 60)
    print("Example 1: Directed Graph")
    print("=" * 60)

    G = (
        GraphBuilder(directed=True)
        .edge("A", "B", 1.0)
        .edge("B", "C", 2.0)
        .edge("A", "C", 5.0)
        .edge("C", "D", 1.5)
        .edge("D", "B", 0.5)
        .build()
    )
    a = G.find_vertex("A")

    print(f"BFS from A: {format_path(bfs(G, a).order, ', ')}")
    print(f"DFS from A: {format_path(dfs(G, a).order, ', ')}")

    result = shortest_path(G, a, G.find_vertex("D"))
    print(f"Shortest path A to D: {format_path(result.path)} (weight {result.total_weight})")

    closure = transitive_closure(G, G.find_vertex("B"))
    print(f"Reachable from B: {format_path(closure.direct, ', ')}")
    print(f"Reaching B: {format_path(closure.inverse, ', ')}")

    cycles = detect_cycles(G)
    print(f"Cycles: {cycles.keys}")

    degrees = degree_sequence(G)
    print(f"Degree sequence: {degrees.sequence}")
    print()


def example_random_graph():
    """Example: Spanning tree and cycles of a random weighted graph."""
    print("=" * 60)
    print("Example 2: Random Weighted Graph")
    print("=" * 60)

    G = generate_random_graph(6, 8, directed=False, weighted=True, seed=2024)
    print(f"Generated {G.number_of_vertices()} vertices and {G.number_of_edges()} edges")
    for edge in G.edges:
        print(f"  {G.describe_edge(edge)}")

    mst = minimum_spanning_tree(G)
    total = sum(edge.weight for edge in mst)
    print(f"Minimum spanning tree ({len(mst)} edges, total {total:.2f}):")
    for edge in mst:
        print(f"  {G.describe_edge(edge)}")

    cycles = detect_cycles(G)
    print(f"Distinct cycles: {len(cycles.cycles)}")
    for key in cycles.keys:
        print(f"  {key}")
    print()


def main():
    print("Available algorithms:")
    for info in list_algorithms():
        print(f"  {info.name}: {info.description}")
    print()

    example_directed_graph()
    example_random_graph()
    print("All examples completed")


if __name__ == "__main__":
    main()
