"""
Mock pharmacy utilities (in-memory products, carts and orders)
"""
from app.database.mock_store import get_store, timestamp_id, PLACEHOLDER_IMAGE_URL
from app.database.mongo import log_error
from .schemas import (
    Product, CartItem, CartProduct, CartAction, CartUpdateRequest,
    Order, OrderCreateRequest, OrderStatus, PaymentStatus, utc_now
)
from typing import Optional, List, Dict, Any, Tuple


class ProductNotFoundError(Exception):
    """Raised when a cart operation names a product that is not in the catalog"""


class OrderNotFoundError(Exception):
    """Raised when an order id is unknown"""


def _to_product(doc: Dict[str, Any]) -> Product:
    return Product.model_validate({**doc, "image": PLACEHOLDER_IMAGE_URL, "images": []})


def list_products(category: Optional[str] = None, search: Optional[str] = None) -> List[Product]:
    """
    Catalog products, optionally filtered.

    Args:
        category: Exact category match; None or "All" disables the filter
        search: Case-insensitive match on name or description

    Returns:
        List[Product]: Matching products with placeholder images
    """
    products = get_store().products

    if category and category != "All":
        products = [p for p in products if p["category"] == category]

    if search:
        needle = search.lower()
        products = [
            p for p in products
            if needle in p["name"].lower() or needle in (p.get("description") or "").lower()
        ]

    return [_to_product(p) for p in products]


def get_product(product_id: str) -> Optional[Product]:
    for doc in get_store().products:
        if doc["id"] == product_id:
            return _to_product(doc)
    return None


def cart_total(items: List[Dict[str, Any]]) -> float:
    return round(sum(float(item["product"]["price"]) * item["quantity"] for item in items), 2)


def get_cart(user_id: str = "guest") -> Tuple[List[CartItem], float]:
    """Cart lines and total price for a user."""
    items = get_store().carts.get(user_id, [])
    return [CartItem.model_validate(item) for item in items], cart_total(items)


def _find_line(items: List[Dict[str, Any]], product_id: str) -> Optional[Dict[str, Any]]:
    return next((item for item in items if item["product"]["id"] == product_id), None)


async def update_cart(request: CartUpdateRequest) -> Tuple[List[CartItem], float]:
    """
    Apply an add/update/remove action to a user's cart.

    add merges into an existing line. update with quantity <= 0 removes the line.
    update/remove on a product that is not in the cart is a no-op.

    Raises:
        ValueError: If add is called with a non-positive quantity
        ProductNotFoundError: If add names a product not in the catalog
    """
    try:
        store = get_store()
        items = store.carts.setdefault(request.user_id, [])
        line = _find_line(items, request.product_id)

        if request.action == CartAction.add:
            if request.quantity <= 0:
                raise ValueError("Quantity must be at least 1.")
            if line:
                line["quantity"] += request.quantity
            else:
                product = get_product(request.product_id)
                if product is None:
                    raise ProductNotFoundError(f"Product {request.product_id} not found")
                cart_product = CartProduct(
                    id=product.id,
                    name=product.name,
                    price=product.price,
                    image=product.image
                )
                items.append({"product": cart_product.model_dump(), "quantity": request.quantity})

        elif request.action == CartAction.update:
            if line and request.quantity <= 0:
                items.remove(line)
            elif line:
                line["quantity"] = request.quantity

        elif request.action == CartAction.remove:
            if line:
                items.remove(line)

        return get_cart(request.user_id)

    except (ValueError, ProductNotFoundError):
        raise
    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/utils.py - update_cart",
            additional_info=request.model_dump()
        )
        raise


async def create_order(request: OrderCreateRequest) -> Order:
    """
    Create a pending order.

    Args:
        request: OrderCreateRequest; total_amount defaults to the sum of price x quantity

    Returns:
        Order: The stored order
    """
    try:
        store = get_store()

        total_amount = request.total_amount
        if total_amount is None:
            total_amount = round(sum(p.price * p.quantity for p in request.products), 2)

        order = Order(
            order_id=timestamp_id("order", store.orders),
            user=request.user_id,
            products=request.products,
            total_amount=total_amount,
            delivery_address=request.delivery_address
        )
        store.orders[order.order_id] = order.model_dump()
        print(f"🧾 Created order {order.order_id} for user {order.user}")

        return order

    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/utils.py - create_order",
            additional_info={"user_id": request.user_id, "product_count": len(request.products)}
        )
        raise


def list_orders(user_id: Optional[str] = None) -> List[Order]:
    orders = get_store().orders.values()
    if user_id:
        orders = [order for order in orders if order["user"] == user_id]
    return [Order.model_validate(order) for order in orders]


def get_order(order_id: str) -> Optional[Order]:
    doc = get_store().orders.get(order_id)
    return Order.model_validate(doc) if doc else None


def mark_order_paid(order_id: str) -> Order:
    """
    Confirm an order after a successful payment.

    Raises:
        OrderNotFoundError: If the order id is unknown
    """
    doc = get_store().orders.get(order_id)
    if doc is None:
        raise OrderNotFoundError(f"Order {order_id} not found")

    doc.update({
        "status": OrderStatus.confirmed,
        "payment_status": PaymentStatus.completed,
        "updated_at": utc_now()
    })
    return Order.model_validate(doc)
