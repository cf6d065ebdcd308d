from .parse import parse_document
from .extract import Extraction, extract_records
from .normalize import Listing, normalize_record
from .ids import encode_id, decode_id
from .paginate import Page, paginate, parse_positive_int

__all__ = [
    "parse_document",
    "Extraction",
    "extract_records",
    "Listing",
    "normalize_record",
    "encode_id",
    "decode_id",
    "Page",
    "paginate",
    "parse_positive_int",
]
