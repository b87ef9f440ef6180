from typing import Annotated

from fastapi import Depends

from application.services import ExchangeService
from config.settings import Settings, get_settings


def get_exchange_service(settings: Annotated[Settings, Depends(get_settings)]) -> ExchangeService:
	return ExchangeService(settings=settings)
