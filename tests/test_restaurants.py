"""Tests for the static restaurant catalogue and front-end order submission."""

import logging

import pytest

from restaurants import RESTAURANTS, Order, OrderError, find_restaurant, submit_order


def test_catalogue_has_four_marrakech_restaurants():
    assert [r.name for r in RESTAURANTS] == [
        "Chez Lalla Zahra",
        "Snack Moul Lkaskrout",
        "Dar Tanjia",
        "Café Safar",
    ]
    assert all(r.location.startswith("Marrakech") for r in RESTAURANTS)
    assert all(len(r.menu) == 3 for r in RESTAURANTS)


def test_find_restaurant_by_id():
    assert find_restaurant(3).name == "Dar Tanjia"


def test_find_unknown_restaurant_raises():
    with pytest.raises(KeyError):
        find_restaurant(99)


def test_submit_order_returns_the_order(caplog):
    restaurant = find_restaurant(1)

    with caplog.at_level(logging.INFO, logger="restaurants"):
        order = submit_order(restaurant, "  Amina ", "Harira", " extra lemon ")

    assert order == Order(restaurant="Chez Lalla Zahra", customer_name="Amina",
                          menu_item="Harira", notes="extra lemon")
    assert "ORDER FOR Chez Lalla Zahra" in caplog.text


def test_submit_order_notes_are_optional():
    order = submit_order(find_restaurant(4), "Youssef", "Msemen")

    assert order.notes == ""


@pytest.mark.parametrize("name", ["", "   ", None])
def test_submit_order_requires_a_name(name):
    with pytest.raises(OrderError):
        submit_order(find_restaurant(2), name, "Tacos")


def test_submit_order_rejects_items_from_another_menu():
    with pytest.raises(OrderError):
        submit_order(find_restaurant(2), "Youssef", "Couscous")


def test_order_error_is_a_value_error():
    assert issubclass(OrderError, ValueError)
