"""
HRMS Employee API — Employee Document Mapping
===============================================

What:  Maps between API schemas and the documents stored in the
       `employees` collection.

Document shape:
    {
        "_id":    <engine-assigned identifier>,
        "name":   str,
        "salary": float,
        "age":    float,
    }

No indexes beyond the engine's default `_id` index are required: every
query is either a full scan (list) or an `_id` lookup.
"""

from typing import Any, Callable, Dict, Mapping

from hrms.schemas.employee import EmployeeIn, EmployeeResponse

ID_FIELD = "_id"
WRITABLE_FIELDS = ("name", "salary", "age")


def to_document(employee: EmployeeIn) -> Dict[str, Any]:
    """Build the stored field set for an insert or a `$set` update."""
    return {field: getattr(employee, field) for field in WRITABLE_FIELDS}


def from_document(
    document: Mapping[str, Any],
    format_id: Callable[[Any], str],
) -> EmployeeResponse:
    """
    Decode a stored document into the API representation.

    Missing writable fields decode to their zero value, matching what the
    API writes for omitted input. Wrongly-typed stored values raise
    pydantic.ValidationError; the repository reports those as storage errors.
    """
    zero_values = EmployeeIn()
    return EmployeeResponse(
        id=format_id(document[ID_FIELD]),
        **{
            field: document.get(field, getattr(zero_values, field))
            for field in WRITABLE_FIELDS
        },
    )
