"""Translation of asset domain errors into HTTP responses."""

from fastapi import HTTPException, status

from asset_registry.modules.assets import (
    AssetAlreadyExistsError,
    AssetDecodeError,
    AssetEncodeError,
    AssetError,
    AssetNotFoundError,
    LedgerStoreError,
)

_ERROR_STATUS: dict[type[AssetError], int] = {
    AssetNotFoundError: status.HTTP_404_NOT_FOUND,
    AssetAlreadyExistsError: status.HTTP_409_CONFLICT,
    AssetEncodeError: status.HTTP_422_UNPROCESSABLE_ENTITY,
    AssetDecodeError: status.HTTP_500_INTERNAL_SERVER_ERROR,
    LedgerStoreError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


def to_http_error(exc: AssetError) -> HTTPException:
    status_code = _ERROR_STATUS.get(type(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)
    return HTTPException(status_code=status_code, detail=str(exc))
