from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
	# Resolver
	SEARCH_STRATEGY: Literal['bfs', 'relaxation'] = 'bfs'
	FOLLOW_RECIPROCAL_EDGES: bool = False

	# Input limits
	MAX_RATE_PAIRS: int = 10_000
	MAX_RATES_LENGTH: int = 500_000

	# Application
	APP_NAME: str = 'Exchange Rate Resolver API'
	LOG_LEVEL: str = 'INFO'
	HOST: str = '0.0.0.0'
	PORT: int = 8000

	model_config = SettingsConfigDict(env_file='.env', case_sensitive=False, extra='ignore')


@lru_cache
def get_settings() -> Settings:
	return Settings()
