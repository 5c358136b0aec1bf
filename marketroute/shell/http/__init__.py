from marketroute.shell.http.redirect_interceptor import (
    InterceptorConfig,
    InterceptState,
    RedirectInterceptor,
    RedirectInterceptorMiddleware,
    preserve_query_params,
    should_check,
)

__all__ = [
    "InterceptState",
    "InterceptorConfig",
    "RedirectInterceptor",
    "RedirectInterceptorMiddleware",
    "preserve_query_params",
    "should_check",
]
