"""
Simulated payment gateway. No real gateway is called: orders are created in
memory and "processing" is a configurable delay followed by success.
"""
from app.core.config import settings
from app.database.mock_store import get_store, timestamp_id, epoch_ms
from app.database.mongo import log_error
from app.pharmacy.utils import get_order, mark_order_paid, OrderNotFoundError
from .schemas import (
    CreatePaymentOrderRequest, PaymentOrder, PaymentOrderStatus,
    ProcessPaymentRequest, PaymentResult
)
from datetime import date, timedelta
from typing import Tuple
from urllib.parse import urlencode
import asyncio

DELIVERY_DAYS = 3


class PaymentOrderNotFoundError(Exception):
    """Raised when a payment order id is unknown"""


def to_minor_units(amount: float) -> int:
    return int(round(amount * 100))


def format_amount(amount: float) -> str:
    """10.0 -> "10", 10.25 -> "10.25" (as shown in payment URLs)."""
    return format(amount, "f").rstrip("0").rstrip(".")


def build_payment_url(order_id: str, amount: float, currency: str) -> str:
    query = urlencode({"order_id": order_id, "amount": format_amount(amount), "currency": currency})
    return f"/payment/process?{query}"


async def create_payment_order(request: CreatePaymentOrderRequest) -> PaymentOrder:
    """
    Create a mock gateway order.

    Raises:
        OrderNotFoundError: If order_reference names an unknown pharmacy order
    """
    try:
        if request.order_reference and get_order(request.order_reference) is None:
            raise OrderNotFoundError(f"Order {request.order_reference} not found")

        store = get_store()
        currency = (request.currency or settings.DEFAULT_CURRENCY).upper()
        order_id = timestamp_id("order", store.payment_orders)
        minor_amount = to_minor_units(request.amount)

        payment_order = PaymentOrder(
            id=order_id,
            amount=minor_amount,
            amount_due=minor_amount,
            currency=currency,
            receipt=request.receipt or f"receipt_{epoch_ms()}",
            created_at=epoch_ms(),
            order_reference=request.order_reference,
            payment_url=build_payment_url(order_id, request.amount, currency)
        )
        store.payment_orders[order_id] = payment_order.model_dump()

        return payment_order

    except OrderNotFoundError:
        raise
    except Exception as e:
        await log_error(
            error=e,
            location="payments/utils.py - create_payment_order",
            additional_info=request.model_dump()
        )
        raise


async def process_payment(request: ProcessPaymentRequest) -> Tuple[PaymentResult, PaymentOrder]:
    """
    Simulate paying a gateway order.

    Waits PAYMENT_PROCESSING_DELAY_SECONDS, confirms the referenced pharmacy
    order (if any), then marks the gateway order paid. An order that is not
    captured (error or cancellation) goes back to "created".

    Raises:
        PaymentOrderNotFoundError: If the gateway order is unknown
        ValueError: If the order is already paid or a payment is in progress
    """
    store = get_store()
    doc = store.payment_orders.get(request.order_id)

    if doc is None:
        raise PaymentOrderNotFoundError(f"Payment order {request.order_id} not found")
    if doc["status"] == PaymentOrderStatus.paid:
        raise ValueError("Order has already been paid")
    if doc["status"] == PaymentOrderStatus.attempted:
        raise ValueError("Payment is already being processed")

    doc["status"] = PaymentOrderStatus.attempted
    doc["attempts"] += 1

    try:
        await asyncio.sleep(settings.PAYMENT_PROCESSING_DELAY_SECONDS)

        if doc.get("order_reference"):
            mark_order_paid(doc["order_reference"])

        doc.update({
            "status": PaymentOrderStatus.paid,
            "amount_paid": doc["amount"],
            "amount_due": 0
        })

        result = PaymentResult(
            payment_id=timestamp_id("pay", ()),
            order_id=doc["id"],
            payment_method=request.payment_method,
            amount=doc["amount"] / 100,
            currency=doc["currency"],
            estimated_delivery=(date.today() + timedelta(days=DELIVERY_DAYS)).isoformat()
        )
        print(f"💳 Payment {result.payment_id} captured for {doc['id']} via {request.payment_method.value}")

        return result, PaymentOrder.model_validate(doc)

    except Exception as e:
        await log_error(
            error=e,
            location="payments/utils.py - process_payment",
            additional_info={"order_id": request.order_id}
        )
        raise
    finally:
        # Failed or cancelled before capture: the order stays payable
        if doc["status"] != PaymentOrderStatus.paid:
            doc["status"] = PaymentOrderStatus.created
