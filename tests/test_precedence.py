import pytest

from reactive_topology.core import DEFAULT_PRECEDENCE, precedence
from reactive_topology.models import Cell
from tests.test_utils import create_test_graph, create_test_node


@pytest.mark.parametrize("node, expected", [
    (create_test_node(definitions={"Pkg"}), 1),
    (create_test_node(definitions={"DrWatson"}), 2),
    (create_test_node(references={"Pkg.activate"}), 3),
    (create_test_node(references={"Pkg.API.activate"}), 3),
    (create_test_node(references={"@pkg_str"}), 3),
    (create_test_node(references={"quickactivate"}), 3),
    (create_test_node(references={"DrWatson.@quickactivate"}), 3),
    (create_test_node(references={"Pkg.add"}), 4),
    (create_test_node(references={"Pkg.API.develop"}), 4),
    (create_test_node(references={"LOAD_PATH"}), 5),
    (create_test_node(definitions={"Revise"}), 6),
    (create_test_node(references={"include"}), 8),
    (create_test_node(definitions={"x"}, references={"y"}), DEFAULT_PRECEDENCE),
])
def test_precedence_ladder(node, expected):
    graph = create_test_graph({"cell": node})

    assert precedence(graph, Cell("cell")) == expected


def test_blanket_import():
    graph = create_test_graph(
        {"cell": create_test_node(definitions={"x"})},
        module_usings={"cell": {"LinearAlgebra"}},
    )

    assert precedence(graph, Cell("cell")) == 7


def test_first_match_wins():
    graph = create_test_graph(
        {"cell": create_test_node(definitions={"Pkg", "Revise"}, references={"Pkg.add", "include"})},
        module_usings={"cell": {"Pkg"}},
    )

    assert precedence(graph, Cell("cell")) == 1


def test_soft_definitions_do_not_count():
    graph = create_test_graph({"cell": create_test_node(soft_definitions={"Pkg"})})

    assert precedence(graph, Cell("cell")) == DEFAULT_PRECEDENCE
