class RatesException(Exception):
	pass


class InvalidRateError(RatesException):
	pass


class RatesInputTooLargeError(RatesException):
	pass
