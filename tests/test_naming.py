"""Tests for isomertools.utils.naming."""
import networkx as nx

from isomertools.utils.naming import tree_name, partition_label


def test_tree_name_small():
    assert tree_name(nx.empty_graph(1)) == "K1"
    assert tree_name(nx.path_graph(2)) == "K2"


def test_tree_name_path():
    assert tree_name(nx.path_graph(5)) == "P5"


def test_tree_name_star():
    # neopentane skeleton
    assert tree_name(nx.star_graph(4)) == "K1,4"
    assert tree_name(nx.star_graph(3)) == "K1,3"


def test_tree_name_fork():
    # isopentane skeleton
    assert tree_name(nx.Graph([(0, 1), (1, 2), (2, 3), (2, 4)])) == "fork"


def test_tree_name_general():
    # 2,2-dimethylbutane skeleton
    T = nx.Graph([(1, 0), (1, 2), (1, 3), (1, 4), (4, 5)])
    assert tree_name(T) == "T6[421111]"


def test_partition_label():
    assert partition_label([(1, 1), (3, 2)]) == "3^2 + 1"
    assert partition_label([(5, 1)]) == "5"
    assert partition_label([]) == "0"
