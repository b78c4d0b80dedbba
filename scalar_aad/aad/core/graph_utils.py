"""
Computation-graph utilities.
Print and analyse the structure of the graph reachable from a root Node.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .node import Node
from .engine import topo_sort


def get_graph_stats(root: Node) -> Dict:
    """
    Collect statistics for the graph reachable from `root` (no printing).

    Returns:
        dict with node/edge/leaf counts, fan-in and fan-out figures, depth
        (longest predecessor chain, 0 for a lone leaf) and per-op counts.
    """
    nodes = topo_sort(root)
    n_nodes = len(nodes)
    n_edges = sum(len(node.predecessors) for node in nodes)

    # Fan-in
    fan_ins = [len(node.predecessors) for node in nodes]
    max_fan_in = max(fan_ins)
    avg_fan_in = float(np.mean(fan_ins))

    # Fan-out (counted within the reachable graph only) and depth
    fan_outs = Counter()
    depth = {}
    for node in nodes:
        for p in node.predecessors:
            fan_outs[p.id] += 1
        depth[node.id] = 1 + max((depth[p.id] for p in node.predecessors), default=-1)

    fan_out_list = [fan_outs[node.id] for node in nodes]
    max_fan_out = max(fan_out_list)
    avg_fan_out = float(np.mean(fan_out_list))

    op_counter = Counter(node.op_tag for node in nodes)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': op_counter.get('leaf', 0),
        'depth': depth[root.id],
        'max_fan_in': max_fan_in,
        'avg_fan_in': avg_fan_in,
        'max_fan_out': max_fan_out,
        'avg_fan_out': avg_fan_out,
        'operations': dict(op_counter)
    }


def print_graph_summary(root: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the computation graph.

    Args:
        root: output Node of the graph
        detailed: also list every node (only for graphs of at most 100 nodes)

    Returns:
        The statistics dict from `get_graph_stats`.
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Depth:              {stats['depth']}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for node in topo_sort(root):
            if node.predecessors:
                parent_info = ", ".join(f"Node{p.id}" for p in node.predecessors)
                print(f"Node {node.id:4d}: {node.op_tag:8s} ({float(node.value):12.6f}) <- [{parent_info}]")
            else:
                print(f"Node {node.id:4d}: {node.op_tag:8s} ({float(node.value):12.6f}) [leaf/input]")

    print("="*70 + "\n")
    return stats
