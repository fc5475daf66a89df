from reactive_topology.core import compute_order_cached, settings
from reactive_topology.models import Cell, Notebook
from tests.test_utils import create_test_graph, create_test_node, ids


def test_first_call_computes(test_notebook):
    order = compute_order_cached(test_notebook)

    assert ids(order.runnable) == ["a", "b", "c"]
    assert order.input_graph is test_notebook.topology
    assert test_notebook.cached_order is order


def test_unchanged_graph_returns_same_object(test_notebook):
    first = compute_order_cached(test_notebook)
    second = compute_order_cached(test_notebook)

    assert second is first


def test_changed_graph_recomputes(test_notebook):
    first = compute_order_cached(test_notebook)

    test_notebook.update_topology(
        test_notebook.topology.with_node(Cell("d"), create_test_node(references={"x"}))
    )
    second = compute_order_cached(test_notebook)

    assert second is not first
    assert test_notebook.revision == 1
    assert ids(second.runnable) == ["a", "b", "c", "d"]
    assert compute_order_cached(test_notebook) is second


def test_equal_but_distinct_graph_recomputes(test_notebook):
    first = compute_order_cached(test_notebook)

    rebuilt = create_test_graph({
        "a": create_test_node(definitions={"x"}),
        "b": create_test_node(definitions={"y"}, references={"x"}),
        "c": create_test_node(references={"y"}),
    })
    test_notebook.update_topology(rebuilt)
    second = compute_order_cached(test_notebook)

    assert second is not first
    assert second.runnable == first.runnable


def test_uses_configured_tolerance(monkeypatch):
    graph = create_test_graph({
        "c1": create_test_node(definitions={"x"}),
        "c2": create_test_node(definitions={"x"}),
    })
    notebook = Notebook(id="defs", cells=graph.cells, topology=graph)

    assert compute_order_cached(notebook).runnable == ()

    monkeypatch.setattr(settings, "ALLOW_MULTIPLE_DEFS", True)
    order = compute_order_cached(notebook)

    assert ids(order.runnable) == ["c1", "c2"]
    assert compute_order_cached(notebook) is order


def test_empty_notebook():
    notebook = Notebook(id="empty")

    order = compute_order_cached(notebook)

    assert order.runnable == ()
    assert order.errable == {}
