class HttpError(Exception):
    code = "http_error"

    def __init__(self, status: int, url: str, message: str = "", body_snippet: str = ""):
        super().__init__(message or f"HTTP {status} for {url}")
        self.status = status
        self.url = url
        self.body_snippet = body_snippet

class UnauthorizedError(HttpError): code = "unauthorized"      # 401
class ForbiddenError(HttpError): code = "forbidden"            # 403
class NotFoundError(HttpError): code = "not_found"             # 404
class ThrottleError(HttpError): code = "throttled"             # 429
class ServerError(HttpError): code = "server_error"            # 5xx
class NetworkError(HttpError): code = "network_error"          # request/timeout
