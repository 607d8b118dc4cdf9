"""
Simulated payment gateway schemas (Razorpay-shaped mock orders)
"""
from pydantic import BaseModel, Field
from enum import Enum
from typing import Optional, List

class PaymentMethod(str, Enum):
    card = "card"
    upi = "upi"
    netbanking = "netbanking"
    wallet = "wallet"

class PaymentOrderStatus(str, Enum):
    created = "created"        # Order created, no payment attempt yet
    attempted = "attempted"    # Payment in progress
    paid = "paid"              # Payment captured

class PaymentOptions(BaseModel):
    card: bool = True
    netbanking: bool = True
    upi: bool = True
    wallet: bool = True
    paylater: bool = True

class CreatePaymentOrderRequest(BaseModel):
    amount: float = Field(..., gt=0, description="Amount in major currency units (e.g. rupees)")
    currency: Optional[str] = Field(default=None, min_length=3, max_length=3, description="Defaults to settings.DEFAULT_CURRENCY")
    receipt: Optional[str] = None
    order_reference: Optional[str] = Field(default=None, description="Pharmacy order id to confirm once paid")

class PaymentOrder(BaseModel):
    """Mock gateway order; amounts are in minor units (paise)"""
    id: str
    entity: str = "order"
    amount: int
    amount_paid: int = 0
    amount_due: int
    currency: str
    receipt: str
    status: PaymentOrderStatus = PaymentOrderStatus.created
    attempts: int = 0
    notes: List[str] = Field(default_factory=list)
    created_at: int = Field(..., description="Epoch milliseconds")
    order_reference: Optional[str] = None
    payment_options: PaymentOptions = Field(default_factory=PaymentOptions)
    payment_url: str

class PaymentOrderResponse(BaseModel):
    success: bool
    order: PaymentOrder

class ProcessPaymentRequest(BaseModel):
    order_id: str = Field(..., min_length=1)
    payment_method: PaymentMethod

class PaymentResult(BaseModel):
    payment_id: str
    order_id: str
    payment_method: PaymentMethod
    amount: float = Field(..., description="Amount paid in major currency units")
    currency: str
    status: str = "captured"
    estimated_delivery: str = Field(..., description="ISO date, 3 days from payment")
    message: str = "Your order has been confirmed and will be delivered soon."

class ProcessPaymentResponse(BaseModel):
    success: bool
    payment: PaymentResult
    order: PaymentOrder
