from functools import wraps
from typing import Callable

from django.http import HttpRequest

from .validators import parse_id


def valid_id(param: str):
    """
    Decorator that validates a path parameter as a positive id before the
    endpoint runs. The endpoint receives the parsed int.

    Usage:
        @router.delete("/{tarefa_id}")
        @valid_id("tarefa_id")
        async def delete_tarefa_api(request, tarefa_id: str):
            ...
    """
    def decorator(view_func: Callable):
        @wraps(view_func)
        async def wrapper(request: HttpRequest, *args, **kwargs):
            kwargs[param] = parse_id(kwargs[param])
            return await view_func(request, *args, **kwargs)
        return wrapper
    return decorator


def valid_payload(check: Callable):
    """
    Decorator that runs `check(payload)` on the parsed request body before
    the endpoint runs. `check` raises HttpError to reject.
    """
    def decorator(view_func: Callable):
        @wraps(view_func)
        async def wrapper(request: HttpRequest, *args, **kwargs):
            check(kwargs['payload'])
            return await view_func(request, *args, **kwargs)
        return wrapper
    return decorator
