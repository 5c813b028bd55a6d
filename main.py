import os

from dotenv import load_dotenv

# Load environment-specific .env file BEFORE any app imports
env = os.getenv("ENV", "local")
dotenv_file = f".env.{env}"
load_dotenv(dotenv_file)

from app.app_factory import create_app
from app.utils import logger

app = create_app()


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting Account Ledger Backend (env={env})")
    uvicorn.run("main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=env == "local")
