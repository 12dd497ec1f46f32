import logging
import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from seshop.models.cart import CartItem
from seshop.repositories.cart_repo import CartRepository
from seshop.schemas.cart import (
    CartClearResult,
    CartItemCreate,
    CartItemRead,
    CartItemUpdate,
)

logger = logging.getLogger(__name__)


class CartService:
    """
    Business logic for cart operations.

    Responsibilities:
      - keep one row per (product_id, email) by merging quantities on add
      - map missing rows / empty carts to 404
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    # ---- internal helpers ----

    def _get_item(self, session: Session, item_id: uuid.UUID) -> CartItem:
        item = self.cart_repo.get_by_id(session, item_id)
        if not item:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Cart not found",
            )
        return item

    # ---- public operations ----

    def list_items(self, session: Session) -> list[CartItem]:
        return self.cart_repo.list_all(session)

    def list_for_email(self, session: Session, email: str) -> list[CartItem]:
        return self.cart_repo.list_for_email(session, email)

    def add_to_cart(
        self,
        session: Session,
        payload: CartItemCreate,
    ) -> tuple[CartItem | CartItemCreate, bool]:
        """
        Add a product to an owner's cart.

        Returns (body, created):
          - new (product_id, email) pair => (stored item, True)
          - existing pair => quantity is increased and (payload, False) is
            returned; clients get their own request back, not the merged row

        The lookup and the increment are separate statements, so two
        concurrent adds for the same pair can lose one increment.
        """
        existing = self.cart_repo.get_item(session, payload.product_id, payload.email)

        if existing:
            existing.quantity += payload.quantity
            self.cart_repo.update(session, existing)
            logger.info(
                "Merged cart item %s for %s (quantity=%d)",
                existing.product_id,
                existing.email,
                existing.quantity,
            )
            return payload, False

        item = CartItem(**payload.model_dump())
        return self.cart_repo.create(session, item), True

    def replace_item(
        self,
        session: Session,
        item_id: uuid.UUID,
        payload: CartItemUpdate,
    ) -> CartItem:
        """Overwrite every field of an existing cart item."""
        item = self._get_item(session, item_id)
        item.sqlmodel_update(payload.model_dump())
        return self.cart_repo.update(session, item)

    def remove_item(self, session: Session, item_id: uuid.UUID) -> CartItemRead:
        """Delete a cart item and return what was stored."""
        item = self._get_item(session, item_id)
        deleted = CartItemRead.model_validate(item)
        self.cart_repo.delete(session, item)
        return deleted

    def clear_cart(self, session: Session, email: str) -> CartClearResult:
        """
        Remove every item owned by `email`.

        Raises:
            HTTPException(404): if nothing was removed.
        """
        deleted_count = self.cart_repo.clear_for_email(session, email)
        if deleted_count == 0:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Empty cart",
            )
        return CartClearResult(deleted_count=deleted_count)
