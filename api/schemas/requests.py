from pydantic import BaseModel, ConfigDict, Field


class RateQueryRequest(BaseModel):
	rates: str = Field('', description='Comma separated FROM:TO:RATE pairs')
	from_currency: str = Field(..., min_length=1)
	to_currency: str = Field(..., min_length=1)

	model_config = ConfigDict(
		json_schema_extra={
			'example': {
				'rates': 'AUD:USD:0.7,AUD:JPY:100,USD:CAD:1.2',
				'from_currency': 'AUD',
				'to_currency': 'CAD',
			}
		}
	)
