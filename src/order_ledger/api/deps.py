from datetime import date
from typing import Generator, Optional

from fastapi import Query
from sqlmodel import Session

from order_ledger.db.session import session_scope
from order_ledger.reports import DateRange


def get_db() -> Generator[Session, None, None]:
    with session_scope() as session:
        yield session


def date_range_params(
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
) -> DateRange:
    return DateRange(start=start_date, end=end_date)
