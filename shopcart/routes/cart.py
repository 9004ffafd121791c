"""Cart API routes"""

from fastapi import APIRouter, HTTPException

from ..core.config import settings
from ..database.carts import cart_db
from ..errors import InvalidPromoCode, ValidationError
from ..models.cart import ApplyDiscountRequest, CartResponse, LineItem
from ..services.cart import Cart

router = APIRouter(prefix="/api/cart", tags=["Cart"])


def _get_cart_or_404(cart_id: str) -> Cart:
    cart = cart_db.get_cart(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


@router.post("", response_model=CartResponse)
async def create_cart():
    """Create a new shopping cart"""
    cart_db.cleanup_old_carts(settings.cart_max_age_hours)
    cart = cart_db.create_cart()
    return CartResponse(cart=cart.summary(), message="Cart created")


@router.get("/{cart_id}", response_model=CartResponse)
async def get_cart(cart_id: str):
    """Get cart by ID"""
    cart = _get_cart_or_404(cart_id)
    return CartResponse(cart=cart.summary())


@router.post("/{cart_id}/items", response_model=CartResponse)
async def add_to_cart(cart_id: str, request: LineItem):
    """Add an item to the cart"""
    cart = _get_cart_or_404(cart_id)

    try:
        cart.add_product(request)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=str(e))

    stored = next(item for item in cart.items if item.id == request.id)
    return CartResponse(
        cart=cart.summary(),
        message=f"Added {request.quantity}x {stored.name} to cart",
    )


@router.delete("/{cart_id}/items/{product_id}", response_model=CartResponse)
async def remove_from_cart(cart_id: str, product_id: str):
    """Remove an item from the cart"""
    cart = _get_cart_or_404(cart_id)
    cart.remove_product(product_id)
    return CartResponse(cart=cart.summary(), message="Item removed")


@router.post("/{cart_id}/discount", response_model=CartResponse)
async def apply_discount(cart_id: str, request: ApplyDiscountRequest):
    """Apply a promo code to the cart"""
    cart = _get_cart_or_404(cart_id)

    try:
        cart.apply_discount(request.code)
    except InvalidPromoCode as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CartResponse(cart=cart.summary(), message=f"Promo code {request.code} applied")


@router.delete("/{cart_id}", response_model=CartResponse)
async def reset_cart(cart_id: str):
    """Clear all items and the discount"""
    cart = _get_cart_or_404(cart_id)
    cart.reset_cart()
    return CartResponse(cart=cart.summary(), message="Cart cleared")
