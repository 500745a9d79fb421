from fastapi import APIRouter, Depends
from sqlmodel import Session

from order_ledger import crud
from order_ledger.api.deps import get_db
from order_ledger.schemas.common import OrderFailure
from order_ledger.schemas.order import OrderCreate, OrderCreated

router = APIRouter(prefix="/orders", tags=["orders"])


@router.post("", response_model=OrderCreated, responses={500: {"model": OrderFailure}})
def create_order(payload: OrderCreate, db: Session = Depends(get_db)) -> OrderCreated:
    return crud.create_order(db, payload)
