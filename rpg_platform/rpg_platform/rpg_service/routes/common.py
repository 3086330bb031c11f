from fastapi import status
from fastapi.responses import JSONResponse

from ..schemas import Outcome, ServiceResult

OUTCOME_STATUS = {
    Outcome.OK: status.HTTP_200_OK,
    Outcome.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    Outcome.INVALID_PASSWORD: status.HTTP_400_BAD_REQUEST,
    Outcome.DUPLICATE: status.HTTP_400_BAD_REQUEST,
}


def service_response(result: ServiceResult) -> JSONResponse:
    """Render a ServiceResult with the status code matching its outcome."""
    if result.success:
        status_code = status.HTTP_200_OK
    else:
        status_code = OUTCOME_STATUS.get(result.outcome, status.HTTP_400_BAD_REQUEST)
    return JSONResponse(status_code=status_code, content=result.model_dump(mode="json"))
