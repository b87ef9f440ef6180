import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.exceptions.rates import InvalidRateError, RatesInputTooLargeError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(RatesInputTooLargeError)
	async def input_too_large_handler(request: Request, exc: RatesInputTooLargeError):
		return JSONResponse(status_code=413, content={'detail': str(exc)})

	# Reached only when rates are added to a store without going through the parser.
	@app.exception_handler(InvalidRateError)
	async def invalid_rate_handler(request: Request, exc: InvalidRateError):
		logger.error(f'Invalid rate: {exc}')
		return JSONResponse(status_code=400, content={'detail': str(exc)})
