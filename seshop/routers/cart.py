import uuid

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlmodel import Session

from seshop.database import get_session
from seshop.repositories.cart_repo import CartRepository
from seshop.schemas.cart import (
    CartClearResult,
    CartItemCreate,
    CartItemRead,
    CartItemUpdate,
)
from seshop.services.cart_service import CartService

router = APIRouter(prefix="/carts", tags=["Carts"])

cart_repo = CartRepository()
service = CartService(cart_repo)


@router.get("", response_model=list[CartItemRead])
def list_cart_items(session: Session = Depends(get_session)):
    """
    Retrieve every cart item, across all owners.
    """
    return service.list_items(session)


@router.get("/{email}", response_model=list[CartItemRead])
def list_cart_items_by_email(
    email: str,
    session: Session = Depends(get_session),
):
    """
    Get the cart items owned by `email`. An empty cart is an empty list.
    """
    return service.list_for_email(session, email)


@router.post(
    "",
    response_model=CartItemRead,
    status_code=status.HTTP_201_CREATED,
    responses={
        status.HTTP_200_OK: {
            "model": CartItemCreate,
            "description": "Existing item; quantity merged, request body echoed",
        }
    },
)
def add_to_cart(
    payload: CartItemCreate,
    session: Session = Depends(get_session),
):
    """
    Add a product to a cart.

    - 201 with the stored item when (productId, email) is new.
    - 200 with the request body when the pair already exists and its
      quantity was increased.
    """
    body, created = service.add_to_cart(session, payload)
    if not created:
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=payload.model_dump(mode="json", by_alias=True),
        )
    return body


@router.put("/{item_id}", response_model=CartItemRead)
def update_cart_item(
    item_id: uuid.UUID,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace a cart item. Every field must be sent.
    """
    return service.replace_item(session, item_id, payload)


@router.delete("/{item_id}", response_model=CartItemRead)
def remove_cart_item(
    item_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a cart item and return it.
    """
    return service.remove_item(session, item_id)


@router.delete("/clear/{email}", response_model=CartClearResult)
def clear_cart(
    email: str,
    session: Session = Depends(get_session),
):
    """
    Delete all cart items owned by `email`.

    404 when the cart was already empty.
    """
    return service.clear_cart(session, email)
