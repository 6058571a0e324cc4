import pytest

from juez.restaurante import Restaurant, RestaurantError, solve


@pytest.fixture
def restaurant():
    r = Restaurant()
    r.new_table(1)
    r.new_table(2)
    return r


def test_serve_in_arrival_order(restaurant):
    restaurant.new_order(1, "sopa")
    restaurant.new_order(2, "pan")
    restaurant.new_order(1, "vino")
    assert restaurant.serve() == (1, "sopa")
    assert restaurant.serve() == (2, "pan")
    assert restaurant.serve() == (1, "vino")
    with pytest.raises(RestaurantError, match="No hay pedidos pendientes"):
        restaurant.serve()


def test_cancel_removes_most_recent(restaurant):
    restaurant.new_order(1, "sopa")
    restaurant.new_order(2, "pan")
    restaurant.new_order(1, "sopa")
    restaurant.cancel_order(1, "sopa")
    assert restaurant.serve() == (1, "sopa")
    assert restaurant.serve() == (2, "pan")
    assert restaurant.pending(1) == []


def test_pending_sorted_and_updated(restaurant):
    restaurant.new_order(1, "vino")
    restaurant.new_order(1, "agua")
    restaurant.new_order(1, "vino")
    assert restaurant.pending(1) == ["agua", "vino"]
    restaurant.serve()
    assert restaurant.pending(1) == ["agua", "vino"]
    restaurant.cancel_order(1, "vino")
    assert restaurant.pending(1) == ["agua"]


def test_errors(restaurant):
    with pytest.raises(RestaurantError, match="Mesa ocupada"):
        restaurant.new_table(1)
    with pytest.raises(RestaurantError, match="Mesa vacia"):
        restaurant.new_order(9, "sopa")
    with pytest.raises(RestaurantError, match="Mesa vacia"):
        restaurant.pending(9)
    with pytest.raises(RestaurantError, match="Producto no pedido por la mesa"):
        restaurant.cancel_order(1, "sopa")


def test_solve():
    text = (
        "nueva_mesa 3\n"
        "nuevo_pedido 3 sopa\n"
        "nuevo_pedido 3 flan\n"
        "que_falta 3\n"
        "servir\n"
        "nuevo_pedido 4 pan\n"
        "FIN\n"
    )
    assert solve(text) == (
        "En la mesa 3 falta:\n"
        "  flan\n"
        "  sopa\n"
        "sopa 3\n"
        "ERROR: Mesa vacia\n"
        "---\n"
    )