import uuid

from fastapi import HTTPException, status
from sqlmodel import Session

from seshop.models.product import Product
from seshop.repositories.product_repo import ProductRepository
from seshop.schemas.product import ProductCreate, ProductRead, ProductUpdate


class ProductService:
    """
    Business logic for Product.

    Responsibilities:
      - orchestrate repository operations
      - map missing rows to 404
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, session: Session) -> list[Product]:
        return self.repo.list_all(session)

    def get_product(self, session: Session, product_id: uuid.UUID) -> Product:
        """
        Raises:
            HTTPException(404): if not found.
        """
        product = self.repo.get_by_id(session, product_id)
        if not product:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail="Product not found",
            )
        return product

    def create_product(self, session: Session, payload: ProductCreate) -> Product:
        product = Product(**payload.model_dump())
        return self.repo.create(session, product)

    def replace_product(
        self,
        session: Session,
        product_id: uuid.UUID,
        payload: ProductUpdate,
    ) -> Product:
        """Overwrite every field of an existing product."""
        product = self.get_product(session, product_id)
        product.sqlmodel_update(payload.model_dump())
        return self.repo.update(session, product)

    def delete_product(self, session: Session, product_id: uuid.UUID) -> ProductRead:
        """Delete a product and return what was stored."""
        product = self.get_product(session, product_id)
        deleted = ProductRead.model_validate(product)
        self.repo.delete(session, product)
        return deleted
