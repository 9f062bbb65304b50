from typing import List
from utils.pagination import Pageable
from logger import get_logger

logger = get_logger()


def sortable_fields(model) -> tuple:
    """Fields of *model* that may be used for sorting."""
    return getattr(model, "__sortable__", ())


def filter_sort(pageable: Pageable, model) -> Pageable:
    """Returns *pageable* with every order on a non-sortable field removed."""
    allowed = sortable_fields(model)
    kept = []
    for order in pageable.sort:
        if order.field in allowed:
            kept.append(order)
        else:
            logger.debug(f"Ignoring sort on '{order.field}' for {model.__name__}")
    return pageable.with_sort(kept)


def order_by_clauses(sort, model) -> List:
    """SQLAlchemy order-by clauses for the whitelisted orders in *sort*."""
    allowed = sortable_fields(model)
    clauses = []
    for order in sort:
        if order.field not in allowed:
            continue
        column = getattr(model, order.field)
        clauses.append(column.desc() if order.descending else column.asc())
    return clauses
