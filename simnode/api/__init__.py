"""FastAPI integration of the provider error layer."""
from .handlers import install_error_handlers, provider_error_handler
