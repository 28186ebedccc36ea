import logging
from dataclasses import dataclass

from distance_estimator import Coordinate

logger = logging.getLogger(__name__)


class OrderError(ValueError):
    """Raised when an order form is incomplete or names an item not on the menu."""


@dataclass(frozen=True)
class Restaurant:
    id: int
    name: str
    location: str
    distance: str  # display value shown when the user's position is unknown
    menu: tuple[str, ...]
    coordinate: Coordinate


@dataclass(frozen=True)
class Order:
    restaurant: str
    customer_name: str
    menu_item: str
    notes: str = ""


RESTAURANTS: tuple[Restaurant, ...] = (
    Restaurant(
        id=1,
        name="Chez Lalla Zahra",
        location="Marrakech, Bab Doukkala",
        distance="2.5 km",
        menu=("Tajine b l7out", "Harira", "Batbout b lkhodra"),
        coordinate=Coordinate(31.6345, -7.9966),
    ),
    Restaurant(
        id=2,
        name="Snack Moul Lkaskrout",
        location="Marrakech, Gueliz",
        distance="3.2 km",
        menu=("Tacos", "Sandwich", "Fries"),
        coordinate=Coordinate(31.6363, -8.0104),
    ),
    Restaurant(
        id=3,
        name="Dar Tanjia",
        location="Marrakech, Medina",
        distance="1.8 km",
        menu=("Couscous", "Tajine d l7out", "Rfissa"),
        coordinate=Coordinate(31.6258, -7.9891),
    ),
    Restaurant(
        id=4,
        name="Café Safar",
        location="Marrakech, Hivernage",
        distance="4.1 km",
        menu=("Qahwa", "Msemen", "Croissant"),
        coordinate=Coordinate(31.6214, -8.0137),
    ),
)


def find_restaurant(restaurant_id: int) -> Restaurant:
    for restaurant in RESTAURANTS:
        if restaurant.id == restaurant_id:
            return restaurant
    raise KeyError(f"Unknown restaurant id: {restaurant_id}")


def submit_order(restaurant: Restaurant, customer_name: str, menu_item: str, notes: str = "") -> Order:
    """
    Validates and "sends" an order.
    ---
    Logic:
    1. Require a customer name and an item that is on this restaurant's menu.
    2. Log the order. There is no backend, so nothing is stored and the order is
       returned only so the page can show a confirmation.
    """
    if not customer_name or not customer_name.strip():
        raise OrderError("Customer name is required.")
    if menu_item not in restaurant.menu:
        raise OrderError(f"'{menu_item}' is not on the menu of {restaurant.name}.")

    order = Order(
        restaurant=restaurant.name,
        customer_name=customer_name.strip(),
        menu_item=menu_item,
        notes=(notes or "").strip(),
    )
    logger.info("ORDER FOR %s: %s", restaurant.name, order)
    return order
