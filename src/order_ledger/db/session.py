import logging
from contextlib import contextmanager
from typing import Generator

from sqlalchemy import inspect, text
from sqlmodel import Session, SQLModel, create_engine

from order_ledger.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()
_connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}
engine = create_engine(settings.database_url, echo=settings.echo_sql, connect_args=_connect_args)

HISTORY_SOURCE = "customer_order_items"

CUSTOMER_ORDER_ITEMS_VIEW = """
CREATE VIEW customer_order_items AS
SELECT o.customer_name,
       o.customer_phone,
       oi.item_name,
       SUM(oi.quantity) AS total_quantity,
       o.order_type,
       SUM(oi.total) AS total_spent_on_item
FROM orders o
JOIN order_items oi ON oi.order_id = o.id
GROUP BY o.customer_name, o.customer_phone, oi.item_name, o.order_type
"""


def init_db() -> None:
    from order_ledger.models import base  # noqa: F401 ensures models are imported

    SQLModel.metadata.create_all(bind=engine)
    with engine.begin() as connection:
        inspector = inspect(connection)
        if HISTORY_SOURCE in inspector.get_view_names() or inspector.has_table(HISTORY_SOURCE):
            logger.info("Keeping existing %s", HISTORY_SOURCE)
        else:
            connection.execute(text(CUSTOMER_ORDER_ITEMS_VIEW))
    logger.info("Schema ready on %s", engine.url.render_as_string(hide_password=True))


def drop_db() -> None:
    from order_ledger.models import base  # noqa: F401

    with engine.begin() as connection:
        if HISTORY_SOURCE in inspect(connection).get_view_names():
            connection.execute(text(f"DROP VIEW {HISTORY_SOURCE}"))
    SQLModel.metadata.drop_all(bind=engine)


@contextmanager
def session_scope() -> Generator[Session, None, None]:
    session = Session(engine)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
