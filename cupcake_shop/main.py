# Load environment variables FIRST, before any module imports that need them
from dotenv import load_dotenv
load_dotenv()

import argparse
import logging

from .app_factory import create_app
from .logging_config import setup_logging

# Configure logging at module load time
setup_logging()

logger = logging.getLogger(__name__)

app = create_app()


def main():
    parser = argparse.ArgumentParser(description="Run the cupcake shop API")
    parser.add_argument(
        "--host",
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=8000,
        help="Port to run on (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        "-r",
        action="store_true",
        help="Enable auto-reload for development",
    )
    args = parser.parse_args()

    import uvicorn

    logger.info("Starting cupcake shop on %s:%d", args.host, args.port)
    uvicorn.run(
        "cupcake_shop.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )


if __name__ == "__main__":
    main()
