'''
NOTE:

1.Mock in-memory store for users, carts, orders and payment orders. Nothing here is durable, data lives as long as the process.
2.Like the Mongo client, the store is initialized once and reused in all functions or routes (get_store()).
3.reset_store() drops everything and re-seeds the demo user and the product catalog.

'''
from typing import Dict, List, Any, Container
from functools import lru_cache
import time
import bcrypt

DEMO_USER_EMAIL = "user@example.com"
DEMO_USER_PASSWORD = "password123"
PLACEHOLDER_IMAGE_URL = "https://placehold.co/400x400.png"

SEED_PRODUCTS: List[Dict[str, Any]] = [
    {
        "id": "1",
        "name": "Pain Reliever (Ibuprofen)",
        "price": "8.99",
        "category": "Pain Relief",
        "stock": 50,
        "description": "Fast-acting pain relief for headaches, muscle pain, and inflammation."
    },
    {
        "id": "2",
        "name": "Allergy Relief (Loratadine)",
        "price": "12.50",
        "category": "Allergy",
        "stock": 30,
        "description": "24-hour non-drowsy allergy relief for seasonal allergies."
    },
    {
        "id": "3",
        "name": "Cold & Flu Syrup",
        "price": "10.25",
        "category": "Cold & Flu",
        "stock": 25,
        "description": "Multi-symptom relief for cold and flu symptoms."
    },
    {
        "id": "4",
        "name": "Digital Thermometer",
        "price": "15.00",
        "category": "Medical Devices",
        "stock": 20,
        "description": "Accurate digital thermometer for quick temperature readings."
    },
    {
        "id": "5",
        "name": "Adhesive Bandages (Assorted)",
        "price": "5.49",
        "category": "First Aid",
        "stock": 100,
        "description": "Sterile adhesive bandages in various sizes for minor cuts."
    },
    {
        "id": "6",
        "name": "Vitamin C Gummies",
        "price": "9.99",
        "category": "Vitamins",
        "stock": 40,
        "description": "Delicious vitamin C gummies to support immune health."
    },
    {
        "id": "7",
        "name": "Antiseptic Wipes",
        "price": "4.75",
        "category": "First Aid",
        "stock": 60,
        "description": "Sterile antiseptic wipes for wound cleaning and disinfection."
    },
    {
        "id": "8",
        "name": "Hand Sanitizer",
        "price": "3.99",
        "category": "Personal Care",
        "stock": 80,
        "description": "Alcohol-based hand sanitizer for effective hand hygiene."
    },
]


@lru_cache(maxsize=1)
def demo_password_hash() -> str:
    """bcrypt hash of the demo password (hashed once per process)."""
    return bcrypt.hashpw(DEMO_USER_PASSWORD.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def epoch_ms() -> int:
    return int(time.time() * 1000)


def timestamp_id(prefix: str, taken: Container[str]) -> str:
    """
    "<prefix>_<epoch ms>" identifier, suffixed when that millisecond is already used.
    """
    base = f"{prefix}_{epoch_ms()}"
    candidate = base
    counter = 1
    while candidate in taken:
        candidate = f"{base}_{counter}"
        counter += 1
    return candidate


class MockStore:
    """Process-local stand-in for a real datastore."""

    def __init__(self) -> None:
        self.users: List[Dict[str, Any]] = [
            {
                "user_id": "1",
                "email": DEMO_USER_EMAIL,
                "password_hash": demo_password_hash(),
                "name": "John Doe",
                "phone": "+1234567890"
            }
        ]
        self.products: List[Dict[str, Any]] = [dict(product) for product in SEED_PRODUCTS]
        self.carts: Dict[str, List[Dict[str, Any]]] = {}
        self.orders: Dict[str, Dict[str, Any]] = {}
        self.payment_orders: Dict[str, Dict[str, Any]] = {}


#Initialize store (note:This will be initialized once and reused in all functions or routes)
store: MockStore | None = None


def get_store() -> MockStore:
    """Get or initialize the mock store."""
    global store
    if store is None:
        store = MockStore()
        print("🗄️ Mock in-memory store initialized")
    return store


def reset_store() -> MockStore:
    """Drop all mock data and re-seed."""
    global store
    store = MockStore()
    return store
