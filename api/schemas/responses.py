from pydantic import BaseModel, ConfigDict, Field


class ExchangeRateResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: float | None = Field(None, description='Best rate found, null when no path exists')

	model_config = ConfigDict(
		json_schema_extra={'example': {'from_currency': 'AUD', 'to_currency': 'CAD', 'rate': 0.84}}
	)


class ConversionPathResponse(BaseModel):
	from_currency: str = Field(..., description='Source currency code')
	to_currency: str = Field(..., description='Target currency code')
	rate: float | None = Field(None, description='Product of the rates along the path')
	path: list[str] | None = Field(None, description='Currencies traversed, source first')

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'from_currency': 'AUD',
				'to_currency': 'CAD',
				'rate': 0.84,
				'path': ['AUD', 'USD', 'CAD'],
			}
		}
	)


class HealthResponse(BaseModel):
	status: str
	app_name: str
	search_strategy: str
