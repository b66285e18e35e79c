import dataclasses
import logging
import timeit
from contextlib import contextmanager
from contextvars import ContextVar
from functools import wraps
from typing import Iterator, List, Optional


@dataclasses.dataclass
class RequestContext:
    network_calls: int = 0
    network_wait: float = 0.0
    start_time: float = 0.0
    urls: List[str] = dataclasses.field(default_factory=list)


request_context: ContextVar[Optional[RequestContext]] = ContextVar(
    "request", default=None
)


@contextmanager
def network_wait(url: str = ''):
    context = request_context.get()
    start_time = timeit.default_timer()
    try:
        yield
    finally:
        if context:
            context.network_calls += 1
            context.network_wait += timeit.default_timer() - start_time
            context.urls.append(url)


@contextmanager
def request_log() -> Iterator[RequestContext]:
    context = RequestContext(start_time=timeit.default_timer())
    prev = request_context.set(context)
    try:
        yield context
    finally:
        request_context.reset(prev)


def log_request(
    url: str = '',
    function: str = '',
    logger_name: str = __name__,
) -> None:
    custom_logger = logging.getLogger(logger_name)
    custom_logger.info(f'URL: {url} - Function {function}')


def log_request_action(
    vendor: str,
    action: str,
    is_started: bool = True,
    logger_name: str = __name__,
) -> None:
    def _get_status_log():
        return 'Started' if is_started else 'Ended'

    custom_logger = logging.getLogger(logger_name)
    custom_logger.info(f'{vendor} - Processing {action} - {_get_status_log()}')


def log_action(vendor_name: str, logger_name: str = __name__):
    def perform_logging(function):
        @wraps(function)
        def decorator(*args, **kwargs):
            log_request_action(vendor_name, function.__name__, True, logger_name)
            result = function(*args, **kwargs)
            log_request_action(vendor_name, function.__name__, False, logger_name)

            return result

        return decorator

    return perform_logging
