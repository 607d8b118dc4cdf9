"""
Mock pharmacy schemas: products, cart and orders

NOTE:
1.utc_now() is a function that returns the current UTC time with timezone information
"""
from pydantic import BaseModel, Field
from datetime import datetime, timezone
from typing import Optional, List
from enum import Enum

def utc_now():
    """
    Returns the current UTC time with timezone information
    """
    return datetime.now(timezone.utc)

class Product(BaseModel):
    """Catalog product"""
    id: str
    name: str
    price: str = Field(..., description="Unit price as a decimal string, e.g. '8.99'")
    category: str
    stock: int = Field(..., ge=0)
    description: Optional[str] = None
    image: str
    images: List[str] = Field(default_factory=list)

class ProductsResponse(BaseModel):
    success: bool
    products: List[Product]

class CartAction(str, Enum):
    add = "add"
    update = "update"
    remove = "remove"

class CartUpdateRequest(BaseModel):
    product_id: str = Field(..., min_length=1)
    quantity: int = Field(default=1, description="Quantity to add, or the new quantity on update (<= 0 removes)")
    action: CartAction
    user_id: str = Field(default="guest", min_length=1, description="Cart owner, 'guest' when not logged in")

class CartProduct(BaseModel):
    id: str
    name: str
    price: str
    image: Optional[str] = None

class CartItem(BaseModel):
    product: CartProduct
    quantity: int

class CartResponse(BaseModel):
    success: bool
    cart: List[CartItem]
    total_price: float

class OrderStatus(str, Enum):
    pending = "pending"
    confirmed = "confirmed"
    shipped = "shipped"
    delivered = "delivered"
    cancelled = "cancelled"

class PaymentStatus(str, Enum):
    pending = "pending"
    completed = "completed"
    failed = "failed"

class OrderProduct(BaseModel):
    product: str = Field(..., min_length=1, description="Product id")
    quantity: int = Field(..., gt=0)
    price: float = Field(..., ge=0, description="Unit price")

class DeliveryAddress(BaseModel):
    street: str
    city: str
    state: str
    zip_code: str
    phone: str

class OrderCreateRequest(BaseModel):
    user_id: str = Field(..., min_length=1)
    products: List[OrderProduct] = Field(..., min_length=1)
    total_amount: Optional[float] = Field(default=None, ge=0, description="Defaults to the sum of price x quantity")
    delivery_address: DeliveryAddress

class Order(BaseModel):
    """Mock order record"""
    order_id: str
    user: str
    products: List[OrderProduct]
    total_amount: float
    status: OrderStatus = OrderStatus.pending
    payment_status: PaymentStatus = PaymentStatus.pending
    delivery_address: DeliveryAddress
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

class OrderResponse(BaseModel):
    success: bool
    order: Order

class OrdersResponse(BaseModel):
    success: bool
    orders: List[Order]
