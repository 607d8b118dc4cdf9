"""
Mock pharmacy routes: product catalog, cart and orders
"""
from fastapi import APIRouter, HTTPException, Query, status
from typing import Optional
from .schemas import (
    ProductsResponse, CartResponse, CartUpdateRequest,
    OrderCreateRequest, OrderResponse, OrdersResponse
)
from .utils import (
    list_products, get_cart, update_cart, create_order, list_orders,
    ProductNotFoundError
)
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/pharmacy", tags=["pharmacy"])


@router.get("/products", response_model=ProductsResponse)
async def get_products(
    category: Optional[str] = Query(default=None, description="Exact category, 'All' for every category"),
    search: Optional[str] = Query(default=None, description="Matches product name or description")
):
    """
    List catalog products.

    Returns:
        ProductsResponse with matching products
    """
    try:
        return ProductsResponse(success=True, products=list_products(category, search))

    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/routes.py - get_products",
            additional_info={"category": category, "search": search}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch products"
        )


@router.get("/cart", response_model=CartResponse)
async def get_cart_route(user_id: str = Query(default="guest", min_length=1)):
    """
    Get a user's cart with its total price.
    """
    try:
        items, total_price = get_cart(user_id)
        return CartResponse(success=True, cart=items, total_price=total_price)

    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/routes.py - get_cart_route",
            additional_info={"user_id": user_id}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch cart"
        )


@router.post("/cart", response_model=CartResponse)
async def update_cart_route(request: CartUpdateRequest):
    """
    Add, update or remove a cart line.

    Args:
        request: CartUpdateRequest with product id, quantity and action

    Returns:
        CartResponse with the updated cart
    """
    try:
        items, total_price = await update_cart(request)
        return CartResponse(success=True, cart=items, total_price=total_price)

    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except ProductNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/routes.py - update_cart_route",
            additional_info=request.model_dump()
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to update cart"
        )


@router.get("/orders", response_model=OrdersResponse)
async def get_orders(user_id: Optional[str] = Query(default=None, description="Only this user's orders")):
    """
    List orders, optionally for a single user.
    """
    try:
        return OrdersResponse(success=True, orders=list_orders(user_id))

    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/routes.py - get_orders",
            additional_info={"user_id": user_id}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch orders"
        )


@router.post("/orders", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order_route(request: OrderCreateRequest):
    """
    Create a pending order.

    Args:
        request: OrderCreateRequest with products and delivery address

    Returns:
        OrderResponse with the created order
    """
    try:
        order = await create_order(request)
        return OrderResponse(success=True, order=order)

    except Exception as e:
        await log_error(
            error=e,
            location="pharmacy/routes.py - create_order_route",
            additional_info={"user_id": request.user_id}
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create order"
        )
