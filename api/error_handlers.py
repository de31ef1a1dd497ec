import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.schemas import ErrorResponse
from domain.exceptions.currency import ProviderError, ValidationError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(ValidationError)
	async def validation_error_handler(request: Request, exc: ValidationError):
		logger.info(f'Rejected request to {request.url.path}: {exc.message}')
		body = ErrorResponse(error='validation_error', kind=exc.kind, detail=exc.message)
		return JSONResponse(status_code=400, content=body.model_dump(exclude_none=True))

	@app.exception_handler(ProviderError)
	async def provider_error_handler(request: Request, exc: ProviderError):
		logger.error(f'Provider error on {request.url.path}: {exc}')
		body = ErrorResponse(
			error='provider_error',
			kind=exc.kind,
			detail=f'Exchange rate service unavailable: {exc.message}',
			provider=exc.provider,
		)
		return JSONResponse(status_code=503, content=body.model_dump())
