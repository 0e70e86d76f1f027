import uuid

import structlog

REQUEST_ID_HEADER = "X-Request-ID"


class RequestContextMiddleware:
    """
    Vincula request_id / método / rota aos contextvars do structlog para
    que todas as linhas de log da requisição carreguem esses campos.
    O id é devolvido no header `X-Request-ID`.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.path,
        )
        try:
            response = self.get_response(request)
        finally:
            structlog.contextvars.clear_contextvars()
        response[REQUEST_ID_HEADER] = request_id
        return response
