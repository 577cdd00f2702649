from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Response, status

from app.dependencies.services import get_cart_manager
from app.schemas.cart_schemas import CreateCartRequest, ItemRequest, ShoppingCartResponse
from app.schemas.checkout_schemas import CheckoutResult
from app.services.cart_manager import CartManager


router = APIRouter()

# List / View Cart

@router.get("/", response_model=List[ShoppingCartResponse])
def get_all_carts(manager: CartManager = Depends(get_cart_manager)):
    return manager.get_all()


@router.get("/{cart_id}", response_model=ShoppingCartResponse)
def get_cart(cart_id: str, manager: CartManager = Depends(get_cart_manager)):
    cart = manager.find_by_id(cart_id)
    if not cart:
        raise HTTPException(status_code=404, detail="Cart not found")
    return cart


# Checkout totals

@router.get("/{cart_id}/totals", response_model=CheckoutResult)
def calculate_totals(
    cart_id: str,
    coupon_id: Optional[str] = None,
    manager: CartManager = Depends(get_cart_manager),
):
    return manager.calculate_totals(cart_id, coupon_id)


# Create Cart

@router.post("/", response_model=ShoppingCartResponse, status_code=status.HTTP_201_CREATED)
def create_cart(data: CreateCartRequest, manager: CartManager = Depends(get_cart_manager)):
    return manager.create(data)


# Add / Remove items

@router.put("/{cart_id}/items", response_model=ShoppingCartResponse)
def add_item(
    cart_id: str,
    data: ItemRequest,
    manager: CartManager = Depends(get_cart_manager),
):
    return manager.add_item(cart_id, data)


@router.delete("/{cart_id}/items/{product_id}", response_model=ShoppingCartResponse)
def remove_item(
    cart_id: str,
    product_id: str,
    manager: CartManager = Depends(get_cart_manager),
):
    return manager.remove_item(cart_id, product_id)


# Delete Cart

@router.delete("/{cart_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cart(cart_id: str, manager: CartManager = Depends(get_cart_manager)):
    manager.delete(cart_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
