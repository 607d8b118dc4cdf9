from fastapi import APIRouter, HTTPException, status
from .schemas import (
    CreatePaymentOrderRequest, PaymentOrderResponse,
    ProcessPaymentRequest, ProcessPaymentResponse
)
from .utils import create_payment_order, process_payment, PaymentOrderNotFoundError
from app.pharmacy.utils import OrderNotFoundError
from app.database.mongo import log_error

router = APIRouter(prefix="/v1/payment", tags=["payment"])

@router.post("/create-order", response_model=PaymentOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_payment_order_route(request: CreatePaymentOrderRequest):
    """
    Create a mock gateway order for checkout.

    Args:
        request: CreatePaymentOrderRequest with amount, currency, receipt and optional pharmacy order reference

    Returns:
        PaymentOrderResponse with the gateway order and its payment URL
    """
    try:
        order = await create_payment_order(request)
        return PaymentOrderResponse(success=True, order=order)

    except OrderNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="payments/routes.py - create_payment_order_route",
            additional_info=request.model_dump()
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create payment order"
        )

@router.post("/process", response_model=ProcessPaymentResponse)
async def process_payment_route(request: ProcessPaymentRequest):
    """
    Simulate paying a gateway order with the chosen payment method.

    Args:
        request: ProcessPaymentRequest with order id and payment method

    Returns:
        ProcessPaymentResponse with payment details and the updated gateway order
    """
    try:
        payment, order = await process_payment(request)
        return ProcessPaymentResponse(success=True, payment=payment, order=order)

    except PaymentOrderNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e)
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        await log_error(
            error=e,
            location="payments/routes.py - process_payment_route",
            additional_info=request.model_dump()
        )
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Payment failed. Please try again or contact support."
        )
