import uuid

from sqlmodel import Session, select

from seshop.models.cart import CartItem


class CartRepository:

    def list_all(self, session: Session) -> list[CartItem]:
        return session.exec(select(CartItem)).all()

    # Get items for an owner
    def list_for_email(self, session: Session, email: str) -> list[CartItem]:
        stmt = select(CartItem).where(CartItem.email == email)
        return session.exec(stmt).all()

    def get_item(
        self, session: Session, product_id: str, email: str
    ) -> CartItem | None:
        stmt = select(CartItem).where(
            CartItem.product_id == product_id, CartItem.email == email
        )
        return session.exec(stmt).first()

    def get_by_id(self, session: Session, item_id: uuid.UUID) -> CartItem | None:
        return session.get(CartItem, item_id)

    # CRUD
    def create(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def update(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.commit()
        session.refresh(item)
        return item

    def delete(self, session: Session, item: CartItem) -> None:
        session.delete(item)
        session.commit()

    def clear_for_email(self, session: Session, email: str) -> int:
        """Delete every item owned by `email` and return how many were removed."""
        rows = self.list_for_email(session, email)
        for row in rows:
            session.delete(row)
        session.commit()
        return len(rows)
