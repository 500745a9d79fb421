from fastapi import APIRouter, Depends
from sqlmodel import Session

from order_ledger import reports
from order_ledger.api.deps import date_range_params, get_db
from order_ledger.reports import DateRange
from order_ledger.schemas.common import ErrorBody
from order_ledger.schemas.dashboard import DailySales, PaymentStatusBucket, PendingCustomer, SalesByItem

router = APIRouter(prefix="/dashboard", tags=["dashboard"], responses={500: {"model": ErrorBody}})


@router.get("/sales-by-item", response_model=list[SalesByItem])
def sales_by_item(
    date_range: DateRange = Depends(date_range_params),
    db: Session = Depends(get_db),
) -> list[dict]:
    return reports.sales_by_item(db, date_range)


@router.get("/daily-sales", response_model=list[DailySales])
def daily_sales(
    date_range: DateRange = Depends(date_range_params),
    db: Session = Depends(get_db),
) -> list[dict]:
    return reports.daily_sales(db, date_range)


@router.get("/payment-status-distribution", response_model=list[PaymentStatusBucket])
def payment_status_distribution(
    date_range: DateRange = Depends(date_range_params),
    db: Session = Depends(get_db),
) -> list[dict]:
    return reports.payment_status_distribution(db, date_range)


@router.get("/top-pending-customers", response_model=list[PendingCustomer])
def top_pending_customers(db: Session = Depends(get_db)) -> list[dict]:
    return reports.top_pending_customers(db)
