from fastapi import APIRouter, Depends
from sqlmodel import Session

from order_ledger import crud
from order_ledger.api.deps import get_db
from order_ledger.schemas.menu import MenuItemRead, OrderHistoryRow

router = APIRouter()

_TEXT_FAILURE = {500: {"content": {"text/plain": {}}, "description": "Store failure"}}


@router.get("/menu-items", response_model=list[MenuItemRead], tags=["menu"], responses=_TEXT_FAILURE)
def list_menu_items(db: Session = Depends(get_db)) -> list[MenuItemRead]:
    return [MenuItemRead.model_validate(item) for item in crud.list_menu_items(db)]


@router.get("/order-history", response_model=list[OrderHistoryRow], tags=["history"], responses=_TEXT_FAILURE)
def list_order_history(db: Session = Depends(get_db)) -> list[OrderHistoryRow]:
    return [OrderHistoryRow.model_validate(row) for row in crud.list_order_history(db)]
