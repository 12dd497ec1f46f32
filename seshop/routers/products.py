import uuid

from fastapi import APIRouter, Depends, status
from sqlmodel import Session

from seshop.database import get_session
from seshop.repositories.product_repo import ProductRepository
from seshop.schemas.product import ProductCreate, ProductRead, ProductUpdate
from seshop.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    Retrieve a list of all products.
    """
    return service.list_products(session)


@router.get("/{product_id}", response_model=ProductRead)
def get_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Get a single product by id.
    """
    return service.get_product(session, product_id)


@router.post(
    "",
    response_model=ProductRead,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    payload: ProductCreate,
    session: Session = Depends(get_session),
):
    """
    Create a new product.
    """
    return service.create_product(session, payload)


@router.put("/{product_id}", response_model=ProductRead)
def update_product(
    product_id: uuid.UUID,
    payload: ProductUpdate,
    session: Session = Depends(get_session),
):
    """
    Replace an existing product. Every field must be sent.
    """
    return service.replace_product(session, product_id, payload)


@router.delete("/{product_id}", response_model=ProductRead)
def delete_product(
    product_id: uuid.UUID,
    session: Session = Depends(get_session),
):
    """
    Delete a product and return it.

    Cart items referencing the product are left untouched.
    """
    return service.delete_product(session, product_id)
