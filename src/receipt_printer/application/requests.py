"""
Typed requests, one per instruction name.

The boundary format is a loosely-typed parameter list. ``parse_request``
turns it into one of the request structs below, or raises
``InvalidArgument`` / ``UnknownMethod`` before anything is printed.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional, Sequence, Type, Union

from receipt_printer.domain.exception import InvalidArgument, UnknownMethod


@dataclass(frozen=True)
class AlignRequest:
    alignment: str


@dataclass(frozen=True)
class BarcodeRequest:
    data: str
    symbology: int
    height: int
    width: int
    text_position: int


@dataclass(frozen=True)
class BitmapRequest:
    raw: bytes


@dataclass(frozen=True)
class BoldRequest:
    value: Optional[bool] = None


@dataclass(frozen=True)
class DarknessRequest:
    level: int


@dataclass(frozen=True)
class FontSizeRequest:
    width: int
    height: int


@dataclass(frozen=True)
class LineSpacingRequest:
    value: Optional[int] = None


@dataclass(frozen=True)
class NewLineRequest:
    count: Optional[int] = None


@dataclass(frozen=True)
class PrintRequest:
    text: Optional[str] = None


@dataclass(frozen=True)
class PrintLineRequest:
    text: Optional[str] = None


@dataclass(frozen=True)
class QrRequest:
    data: str
    module_size: int
    error_level: int


@dataclass(frozen=True)
class Qr2Request:
    data1: str
    data2: str
    module_size: int
    error_level: int


@dataclass(frozen=True)
class UnderlineRequest:
    mode: str


Request = Union[
    AlignRequest,
    BarcodeRequest,
    BitmapRequest,
    BoldRequest,
    DarknessRequest,
    FontSizeRequest,
    LineSpacingRequest,
    NewLineRequest,
    PrintRequest,
    PrintLineRequest,
    QrRequest,
    Qr2Request,
    UnderlineRequest,
]

""" Format:
instruction name: (request struct, parameter types, number of required parameters)
"""
REQUEST_TABLE: Dict[str, tuple] = {
    "align": (AlignRequest, (str,), 1),
    "barcode": (BarcodeRequest, (str, int, int, int, int), 5),
    "bitmap": (BitmapRequest, (bytes,), 1),
    "bold": (BoldRequest, (bool,), 0),
    "darkness": (DarknessRequest, (int,), 1),
    "fontSize": (FontSizeRequest, (int, int), 2),
    "lineSpacing": (LineSpacingRequest, (int,), 0),
    "newLine": (NewLineRequest, (int,), 0),
    "print": (PrintRequest, (str,), 0),
    "println": (PrintLineRequest, (str,), 0),
    "qr": (QrRequest, (str, int, int), 3),
    "qr2": (Qr2Request, (str, str, int, int), 4),
    "underline": (UnderlineRequest, (str,), 1),
}


def _coerce(method: str, index: int, value: Any, kind: Type) -> Any:
    if kind is int and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is bytes and isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if kind in (str, bool) and isinstance(value, kind):
        return value
    raise InvalidArgument(
        f"'{method}' expects {kind.__name__} at position {index}, "
        f"got {type(value).__name__}"
    )


def parse_request(method: Any, params: Optional[Sequence[Any]]) -> Request:
    if not isinstance(method, str) or method not in REQUEST_TABLE:
        raise UnknownMethod(f"Method not found: {method!r}")

    if params is None:
        params = ()
    if not isinstance(params, (list, tuple)):
        raise InvalidArgument(
            f"'{method}' params must be a list, got {type(params).__name__}"
        )

    request_cls, kinds, required = REQUEST_TABLE[method]
    if len(params) < required:
        raise InvalidArgument(
            f"'{method}' expects {required} parameter(s), got {len(params)}"
        )

    values = []
    for index, kind in enumerate(kinds):
        value = params[index] if index < len(params) else None
        if value is None and index >= required:
            values.append(None)
            continue
        if value is None:
            raise InvalidArgument(f"'{method}' parameter {index} cannot be null")
        values.append(_coerce(method, index, value, kind))

    return request_cls(*values)
