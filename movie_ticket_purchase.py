"""
Movie Ticket Purchase
=====================

Core Design: A customer buys a ticket and food combos for a movie while the
movie catalog broadcasts its changes to interested observers.

Design Patterns & Strategies Used:
1. Decorator Pattern - Food combos wrap edible products and add extras
2. Observer Pattern - Catalog changes are pushed to subscribed observers
3. Singleton Pattern - One shared movie catalog per process

Concurrency Handling:
- Lazy catalog creation uses double-checked locking
- Adding movies and assigning seats are guarded by locks
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from threading import Lock
from typing import Dict, List, Optional, Tuple, Union
from uuid import uuid4

from singleton import Singleton


# ==================== DECORATOR PATTERN ====================
# Edible products and combos built around them

class Edible(ABC):
    """Component interface - anything with a description"""

    @abstractmethod
    def get_description(self) -> str:
        pass


class EdibleProduct(Edible):
    """Concrete Component - a single food item"""

    def __init__(self, name: str):
        self.name = name

    def get_description(self) -> str:
        return self.name


class Combo(Edible):
    """Decorator interface - an edible that accepts extras"""

    @abstractmethod
    def add_extra(self, extra: Edible):
        pass


class BaseCombo(Combo):
    """Base Decorator - wrapped edible plus its own ordered extras"""

    SEPARATOR = " con: "

    def __init__(self, edible: Edible):
        self._edible = edible
        self.extras: List[Edible] = []

    def add_extra(self, extra: Edible):
        self.extras.append(extra)

    def get_description(self) -> str:
        base_description = self._edible.get_description()
        extras_description = ", ".join(extra.get_description() for extra in self.extras)
        return f"{base_description}{self.SEPARATOR}{extras_description}"


class BeverageCombo(BaseCombo):
    """Concrete Decorator - adds a beverage"""

    def __init__(self, edible: Edible, beverage: Edible):
        super().__init__(edible)
        self.beverage = beverage
        self.add_extra(beverage)


class DessertCombo(BaseCombo):
    """Concrete Decorator - adds a dessert"""

    def __init__(self, edible: Edible, dessert: Edible):
        super().__init__(edible)
        self.dessert = dessert
        self.add_extra(dessert)


# ==================== DOMAIN ====================

@dataclass(frozen=True)
class Movie:
    title: str


@dataclass(frozen=True)
class Customer:
    name: str


class InvalidHallNumberError(ValueError):
    """Raised when a cinema hall is created with a non-positive number"""


class CinemaHall:
    """Cinema hall with a fixed, depleting seat pool"""

    SEAT_LAYOUT = ("A1", "A2", "B1", "B2", "C1", "C2")
    SEAT_UNAVAILABLE = "Not available"

    def __init__(self, hall_number: int, snacks: List[str]):
        if hall_number <= 0:
            raise InvalidHallNumberError("Hall number must be greater than zero.")
        self.hall_number = hall_number
        self.snacks = list(snacks)
        self.available_seats: List[str] = list(self.SEAT_LAYOUT)
        self.lock = Lock()

    def pop_seat(self) -> str:
        """Assign the last free seat, or the sentinel when the hall is full"""
        with self.lock:
            if not self.available_seats:
                return self.SEAT_UNAVAILABLE
            return self.available_seats.pop()


# ==================== OBSERVER PATTERN ====================
# Broadcast catalog changes

class CatalogObserver(ABC):
    """Observer interface"""

    @abstractmethod
    def update(self, action: str, movie: Movie):
        pass


class MovieChangeObserver(CatalogObserver):
    """Prints every catalog change"""

    def update(self, action: str, movie: Movie):
        print(f"[Catalog] Movie {movie.title} has been {action}")


class Subject:
    """Subject for Observer Pattern"""

    def __init__(self):
        # subscription id -> observer, kept in subscription order
        self._observers: Dict[str, CatalogObserver] = {}

    def subscribe(self, observer: CatalogObserver) -> str:
        """Register observer, returns a handle for unsubscribing"""
        subscription_id = str(uuid4())
        self._observers[subscription_id] = observer
        return subscription_id

    def unsubscribe(self, subscription: Union[str, CatalogObserver]):
        """Remove by handle, or drop every subscription of an observer"""
        if isinstance(subscription, str):
            self._observers.pop(subscription, None)
            return
        for subscription_id, observer in list(self._observers.items()):
            if observer is subscription:
                del self._observers[subscription_id]

    def notify(self, action: str, movie: Movie):
        for observer in list(self._observers.values()):
            observer.update(action, movie)

    @property
    def subscriber_count(self) -> int:
        return len(self._observers)


# ==================== SINGLETON PATTERN ====================

class MovieCatalog(Subject, Singleton):
    """Shared movie list; MovieCatalog.instance() gives the process-wide one"""

    ACTION_ADDED = "added"

    def __init__(self):
        super().__init__()
        self._movies: List[Movie] = []
        self.lock = Lock()

    def add_movie(self, movie: Movie):
        with self.lock:
            self._movies.append(movie)
        self.notify(self.ACTION_ADDED, movie)

    def list_movies(self) -> Tuple[Movie, ...]:
        """Snapshot of the catalog in insertion order"""
        with self.lock:
            return tuple(self._movies)


# ==================== PURCHASE ====================

class PurchaseSummaryPrinter:
    """Formats a purchase for the console"""

    @staticmethod
    def format_summary(purchase: 'Purchase', products_description: str) -> str:
        return "\n".join([
            f"Customer: {purchase.customer.name}",
            f"Movie: {purchase.movie.title}",
            f"Cinema Hall: {purchase.hall.hall_number}",
            f"Seat: {purchase.seat}",
            f"Free Snacks: {', '.join(purchase.hall.snacks)}",
            f"Edible Products: {products_description}",
        ])

    @staticmethod
    def print_summary(purchase: 'Purchase', products_description: str):
        print(PurchaseSummaryPrinter.format_summary(purchase, products_description))


class Purchase(Subject):
    """Completed ticket purchase. Observers may subscribe, none are notified yet."""

    def __init__(self, customer: Customer, movie: Movie, hall: CinemaHall,
                 seat: str, products: List[Edible]):
        super().__init__()
        self.customer = customer
        self.movie = movie
        self.hall = hall
        self.seat = seat
        self.products = products

    def show_summary(self):
        products_description = ", ".join(product.get_description() for product in self.products)
        PurchaseSummaryPrinter.print_summary(self, products_description)


# ==================== DEMONSTRATION ====================

def main(catalog: Optional[MovieCatalog] = None):
    if catalog is None:
        catalog = MovieCatalog.instance()

    print("=" * 60)
    print("MOVIE TICKET PURCHASE DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Adding movies to the catalog:")
    catalog.subscribe(MovieChangeObserver())
    for title in ["John Wick", "Aladdin", "Avengers"]:
        catalog.add_movie(Movie(title))
    print()

    print("2. Movie listing:")
    movies = catalog.list_movies()
    for movie in movies:
        print(movie.title)
    print()

    customer = Customer("Juan")
    hall = CinemaHall(1, ["Canguil", "Hot-dog", "Bebidas"])
    seat = hall.pop_seat()

    popcorn = EdibleProduct("Canguil")
    drink = EdibleProduct("Bebida")
    dessert = EdibleProduct("Postre")
    full_combo = DessertCombo(BeverageCombo(popcorn, drink), dessert)

    purchase = Purchase(customer, movies[0], hall, seat, [full_combo])

    print("3. Purchase summary:")
    purchase.show_summary()
    print()

    print("=" * 60)
    print("DESIGN PATTERNS:")
    print("=" * 60)
    print("1. Decorator Pattern - Combos wrap products and add extras")
    print("2. Observer Pattern - Catalog changes pushed to observers")
    print("3. Singleton Pattern - One shared movie catalog")
    print("=" * 60)


if __name__ == "__main__":
    main()
