"""
SQL helpers shared by the service layer.
"""
from typing import Any, Dict, List, Mapping, Optional, Tuple

from sqlalchemy import Table, bindparam
from sqlalchemy.sql.elements import BindParameter

from app.core.exceptions import BadRequestError


def sql_for_partial_update(
    data_to_update: Mapping[str, Any],
    js_to_sql: Optional[Mapping[str, str]] = None,
) -> Tuple[str, Dict[str, Any]]:
    """
    Build the SET clause of a partial UPDATE.

    Keys of ``data_to_update`` are API field names; ``js_to_sql`` maps the
    ones whose column name differs (``{"firstName": "first_name"}``). Each
    column gets a named bind parameter of the same name, so the result can be
    passed straight to ``sqlalchemy.text``:

        >>> sql_for_partial_update({"firstName": "Aliya", "age": 32},
        ...                        {"firstName": "first_name"})
        ('"first_name"=:first_name, "age"=:age', {'first_name': 'Aliya', 'age': 32})

    Raises BadRequestError when there is nothing to update.
    """
    if not data_to_update:
        raise BadRequestError("No data")

    js_to_sql = js_to_sql or {}
    cols = []
    values: Dict[str, Any] = {}
    for field, value in data_to_update.items():
        column = js_to_sql.get(field, field)
        cols.append(f'"{column}"=:{column}')
        values[column] = value

    return ", ".join(cols), values


def typed_bindparams(table: Table, values: Mapping[str, Any]) -> List[BindParameter]:
    """
    Bind parameters typed after the table's columns, so values such as
    Decimal go through the dialect's converters inside a ``text()`` statement.
    """
    return [bindparam(name, type_=table.c[name].type) for name in values]
