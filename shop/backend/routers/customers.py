from typing import List
from fastapi import APIRouter, HTTPException
from shop.backend import common
from shop.models import Customer

router = APIRouter(prefix="/customers", tags=["customers"])


@router.get("", response_model=List[Customer])
def list_customers():
    return common.load_data().get("customers", [])


@router.get("/{email}", response_model=Customer)
def get_customer(email: str):
    customer = common.find_customer(common.load_data(), email)
    if not customer:
        raise HTTPException(status_code=404, detail="Customer not found")
    return customer
