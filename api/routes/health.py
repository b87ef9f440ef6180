import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from api.schemas import HealthResponse
from config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix='/api', tags=['health'])


@router.get('/health', response_model=HealthResponse, summary='Service health check')
async def health_check(settings: Annotated[Settings, Depends(get_settings)]) -> HealthResponse:
	logger.debug('Performing health check')
	return HealthResponse(
		status='healthy',
		app_name=settings.APP_NAME,
		search_strategy=settings.SEARCH_STRATEGY,
	)
