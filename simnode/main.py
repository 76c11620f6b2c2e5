"""simnode API entry point."""
import logging

from fastapi import FastAPI

from .api.handlers import install_error_handlers
from .config import config

# Configure logging
logging.basicConfig(
    level=getattr(logging, config.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create the application with provider errors written as JSON-RPC errors."""
    app = FastAPI(
        title="simnode",
        description="Ethereum JSON-RPC node simulator",
        version="0.1.0",
    )
    install_error_handlers(app)

    logger.info(f"Created simnode app for chain {config.chain_id} ({config.hardfork})")
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "simnode.main:app",
        host=config.api_host,
        port=config.api_port,
        log_level=config.log_level.lower(),
    )
