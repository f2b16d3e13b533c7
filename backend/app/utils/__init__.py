from .json import dumps_bytes
from .errors import ApiError, api_error, error_response
