import logging

import uvicorn

from app.config import HOST, LOG_LEVEL, PORT

# --- LOGGING CONFIGURATION ---
logging.basicConfig(level=LOG_LEVEL, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    logger.info(f"Server is listening on http://{HOST}:{PORT}")
    uvicorn.run("app.main:app", host=HOST, port=PORT, log_level=LOG_LEVEL.lower())
