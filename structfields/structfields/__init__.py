"""Field enumeration, access and mutation for dataclass and NamedTuple records."""

from structfields.adapters import (
    DataclassAdapter,
    NamedTupleAdapter,
    RecordAdapter,
    adapter_for,
    is_record,
)
from structfields.errors import (
    IntrospectionError,
    InvalidArgumentError,
    NotSettableError,
    UnknownFieldError,
    UnreadableFieldError,
)
from structfields.fields import (
    FlattenOptions,
    as_dict,
    get_field,
    get_vals,
    list_fields,
    list_fields_flatten,
    set_field,
)
from structfields.frame import RecordCollector, records_to_frame
from structfields.refs import Ref, deref


__all__ = [
    "DataclassAdapter",
    "FlattenOptions",
    "IntrospectionError",
    "InvalidArgumentError",
    "NamedTupleAdapter",
    "NotSettableError",
    "RecordAdapter",
    "RecordCollector",
    "Ref",
    "UnknownFieldError",
    "UnreadableFieldError",
    "adapter_for",
    "as_dict",
    "deref",
    "get_field",
    "get_vals",
    "is_record",
    "list_fields",
    "list_fields_flatten",
    "records_to_frame",
    "set_field",
]
