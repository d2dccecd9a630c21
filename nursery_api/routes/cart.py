"""Cart API routes"""

from fastapi import APIRouter, Depends

from ..models.product import ClearCartResponse
from ..database.products import ProductDatabase
from .products import get_product_db

router = APIRouter(tags=["Cart"])


@router.post("/clear-cart", response_model=ClearCartResponse)
def clear_cart(products: ProductDatabase = Depends(get_product_db)):
    """
    Empty the cart.

    The cart is the set of products flagged addedToCart, shared by every
    visitor, so this resets the flag on the whole catalog.
    """
    modified = products.clear_cart()
    return ClearCartResponse(message="Cart cleared successfully", modifiedCount=modified)
