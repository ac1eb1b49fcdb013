import argparse
import logging

import uvicorn
from dotenv import load_dotenv

logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


def main():
    """
    Start the API server with uvicorn.
    """
    parser = argparse.ArgumentParser(description="Run the DevConnector API")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind the server to")
    parser.add_argument("--port", type=int, default=5000, help="Port to bind the server to")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes")
    parser.add_argument("--env-file", default=".env", help="Environment file to load before startup")

    args = parser.parse_args()

    # Settings are read at import time, so the environment must be ready first
    load_dotenv(dotenv_path=args.env_file, override=True)

    logger.info(f"Serving DevConnector API at http://{args.host}:{args.port}")
    logger.info(f"Swagger UI: http://{args.host}:{args.port}/docs")

    uvicorn.run(
        "devconnector.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload
    )


if __name__ == "__main__":
    main()
