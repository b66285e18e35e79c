from json import JSONDecodeError

INVALID_JSON_MESSAGE = 'The provider response is not valid JSON'


def is_valid_json_response(response):
    try:
        return response.json()
    except (JSONDecodeError, ValueError):
        return {'message': INVALID_JSON_MESSAGE}


def is_client_error(status_code) -> bool:
    return status_code is not None and 400 <= status_code < 500
