"""
Unguka Server Package.

This package contains the web server implementation for Unguka. It includes
the API definition, the service layer and configuration.

Subpackages:
    api: FastAPI route definitions and endpoint logic.
    core: Server configuration.
    services: Business operations shared by the endpoints.
    exception_handlers: Translation of errors into JSON responses.
    middleware: Request timing and logging.
"""
