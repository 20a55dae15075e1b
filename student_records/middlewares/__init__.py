from .request_id_middleware import RequestIDMiddleware
from .security_middleware import DevSecurityMiddleware, ProdSecurityMiddleware

__all__ = [
    "RequestIDMiddleware",
    "DevSecurityMiddleware",
    "ProdSecurityMiddleware",
]
