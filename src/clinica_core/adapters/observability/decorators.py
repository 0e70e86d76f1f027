import time
from functools import wraps

import structlog
from pydantic import ValidationError

from clinica_core.adapters.observability.metrics import HTTP_VIEW_DURATION
from clinica_core.core.domain.exceptions import DomainError

logger = structlog.get_logger(__name__)


def track_http(view_name):
    """
    Mede a duração de um método de view e registra no histograma.

    Erros de domínio e de validação ainda não passaram pelo exception
    handler do DRF aqui; o rótulo `status` recebe o código HTTP que ele
    vai devolver.
    """
    def decorator(fn):
        @wraps(fn)
        def wrapper(self, request, *args, **kwargs):
            start = time.perf_counter()
            status_label = "error"
            try:
                resp = fn(self, request, *args, **kwargs)
                status_label = str(resp.status_code)
                return resp
            except DomainError as exc:
                status_label = str(exc.status_code)
                raise
            except ValidationError:
                status_label = "400"
                raise
            finally:
                elapsed = time.perf_counter() - start
                HTTP_VIEW_DURATION.labels(view=view_name, status=status_label).observe(elapsed)
                logger.debug("http.view", view=view_name, status=status_label, duration=f"{elapsed:.3f}s")
        return wrapper
    return decorator
