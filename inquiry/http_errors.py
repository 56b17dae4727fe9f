from fastapi import HTTPException

from inquiry.errors import EmptyContent, InquiryError, InvalidInput, NotFound

_STATUS_BY_ERROR = (
    (InvalidInput, 400),
    (NotFound, 404),
    (EmptyContent, 422),
)

def to_http_exception(e: InquiryError) -> HTTPException:
    """Map a pipeline error onto an HTTP status for the local dev routers."""
    for err_type, status_code in _STATUS_BY_ERROR:
        if isinstance(e, err_type):
            return HTTPException(status_code=status_code, detail=str(e))
    return HTTPException(status_code=502, detail=f"{type(e).__name__}: {e}")
