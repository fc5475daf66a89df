"""Pytest configuration and shared fixtures for topology tests."""
import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from reactive_topology.models import Notebook
from tests.test_utils import create_test_graph, create_test_node


@pytest.fixture
def chain_graph():
    """a -> b -> c: each cell reads what the previous one writes."""
    return create_test_graph({
        "a": create_test_node(definitions={"x"}),
        "b": create_test_node(definitions={"y"}, references={"x"}),
        "c": create_test_node(references={"y"}),
    })


@pytest.fixture
def cyclic_graph():
    """a = b and b = a."""
    return create_test_graph({
        "a": create_test_node(definitions={"a"}, references={"b"}),
        "b": create_test_node(definitions={"b"}, references={"a"}),
    })


@pytest.fixture
def mutual_recursion_graph():
    """f calls g and g calls f, both functions without signatures."""
    return create_test_graph({
        "f": create_test_node(funcdefs_without_signatures={"f"}, references={"g"}),
        "g": create_test_node(funcdefs_without_signatures={"g"}, references={"f"}),
    })


@pytest.fixture
def test_notebook(chain_graph):
    """A notebook owning the chain graph."""
    return Notebook(id="test-notebook", cells=chain_graph.cells, topology=chain_graph)
