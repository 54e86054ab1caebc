"""Units, VAT rates and products."""

from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from backend.app.crud.crud_reference import ensure_references, product_crud, unit_crud, vat_rate_crud
from backend.app.db.session import get_db
from backend.app.dependencies.auth import get_current_user
from backend.app.schemas.catalog import (
    ProductCreate,
    ProductRead,
    ProductUpdate,
    UnitCreate,
    UnitRead,
    UnitUpdate,
    VatRateCreate,
    VatRateRead,
    VatRateUpdate,
)

router = APIRouter(tags=["catalog"], dependencies=[Depends(get_current_user)])


@router.get("/units", response_model=List[UnitRead])
def list_units(db: Session = Depends(get_db)):
    return unit_crud.get_multi(db)


@router.post("/units", response_model=UnitRead, status_code=status.HTTP_201_CREATED)
def create_unit(unit_in: UnitCreate, db: Session = Depends(get_db)):
    return unit_crud.create(db, obj_in=unit_in)


@router.get("/units/{unit_id}", response_model=UnitRead)
def get_unit(unit_id: int, db: Session = Depends(get_db)):
    return unit_crud.get(db, id=unit_id)


@router.patch("/units/{unit_id}", response_model=UnitRead)
def update_unit(unit_id: int, unit_in: UnitUpdate, db: Session = Depends(get_db)):
    unit = unit_crud.get(db, id=unit_id)
    return unit_crud.update(db, db_obj=unit, obj_in=unit_in)


@router.delete("/units/{unit_id}")
def delete_unit(unit_id: int, db: Session = Depends(get_db)):
    unit_crud.delete(db, id=unit_id)
    return {"message": "unit successfully deleted"}


@router.get("/vat_rates", response_model=List[VatRateRead])
def list_vat_rates(db: Session = Depends(get_db)):
    return vat_rate_crud.get_multi(db)


@router.post("/vat_rates", response_model=VatRateRead, status_code=status.HTTP_201_CREATED)
def create_vat_rate(vat_rate_in: VatRateCreate, db: Session = Depends(get_db)):
    return vat_rate_crud.create(db, obj_in=vat_rate_in)


@router.get("/vat_rates/{vat_rate_id}", response_model=VatRateRead)
def get_vat_rate(vat_rate_id: int, db: Session = Depends(get_db)):
    return vat_rate_crud.get(db, id=vat_rate_id)


@router.patch("/vat_rates/{vat_rate_id}", response_model=VatRateRead)
def update_vat_rate(vat_rate_id: int, vat_rate_in: VatRateUpdate, db: Session = Depends(get_db)):
    vat_rate = vat_rate_crud.get(db, id=vat_rate_id)
    return vat_rate_crud.update(db, db_obj=vat_rate, obj_in=vat_rate_in)


@router.delete("/vat_rates/{vat_rate_id}")
def delete_vat_rate(vat_rate_id: int, db: Session = Depends(get_db)):
    vat_rate_crud.delete(db, id=vat_rate_id)
    return {"message": "vat_rate successfully deleted"}


@router.get("/products", response_model=List[ProductRead])
def list_products(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return product_crud.get_multi(db, skip=skip, limit=limit)


@router.post("/products", response_model=ProductRead, status_code=status.HTTP_201_CREATED)
def create_product(product_in: ProductCreate, db: Session = Depends(get_db)):
    ensure_references(db, product_in.model_dump(), {"unit_id": unit_crud, "vat_rate_id": vat_rate_crud})
    return product_crud.create(db, obj_in=product_in)


@router.get("/products/{product_id}", response_model=ProductRead)
def get_product(product_id: int, db: Session = Depends(get_db)):
    return product_crud.get(db, id=product_id)


@router.patch("/products/{product_id}", response_model=ProductRead)
def update_product(product_id: int, product_in: ProductUpdate, db: Session = Depends(get_db)):
    product = product_crud.get(db, id=product_id)
    ensure_references(
        db, product_in.model_dump(exclude_unset=True), {"unit_id": unit_crud, "vat_rate_id": vat_rate_crud}
    )
    return product_crud.update(db, db_obj=product, obj_in=product_in)


@router.delete("/products/{product_id}")
def delete_product(product_id: int, db: Session = Depends(get_db)):
    product_crud.delete(db, id=product_id)
    return {"message": "product successfully deleted"}
