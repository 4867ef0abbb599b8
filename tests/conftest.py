import pytest

from adjacency_list_graph import AdjacencyListGraph
from adjacency_matrix_graph import AdjacencyMatrixGraph

REPRESENTATIONS = {
    "list": AdjacencyListGraph,
    # small capacity so growth is exercised by ordinary tests
    "matrix": lambda directed: AdjacencyMatrixGraph(directed, capacity=2),
}


@pytest.fixture(params=sorted(REPRESENTATIONS))
def graph_factory(request):
    """Factory building an empty graph in each storage layout."""
    return REPRESENTATIONS[request.param]
