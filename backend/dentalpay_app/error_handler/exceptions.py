from rest_framework.exceptions import ValidationError
from rest_framework.views import exception_handler


def _first_message(detail):
    if isinstance(detail, dict):
        for value in detail.values():
            msg = _first_message(value)
            if msg:
                return msg
        return ""
    if isinstance(detail, (list, tuple)):
        for value in detail:
            msg = _first_message(value)
            if msg:
                return msg
        return ""
    return str(detail)


# Validation errors go back to the client as one message: {"error": "..."}

def custom_exception_handler(exc, context):
    response = exception_handler(exc, context)

    if response is not None and isinstance(exc, ValidationError):
        response.data = {
            'error': _first_message(exc.detail)
        }

    return response
