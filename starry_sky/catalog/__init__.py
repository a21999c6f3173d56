from .bsc5_reader import (
    CatalogHeader,
    RawStarRecord,
    HEADER_DTYPE,
    RECORD_DTYPE,
    HEADER_SIZE,
    RECORD_SIZE,
    read_header,
    read_record_array,
    read_catalog,
    load_catalog,
)

__all__ = [
    "CatalogHeader",
    "RawStarRecord",
    "HEADER_DTYPE",
    "RECORD_DTYPE",
    "HEADER_SIZE",
    "RECORD_SIZE",
    "read_header",
    "read_record_array",
    "read_catalog",
    "load_catalog",
]
