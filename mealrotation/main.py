import logging

import uvicorn
from mealrotation.api.api_run import app
from mealrotation.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print(f"Uvicorn running on http://localhost:{APP_PORT} (Press CTRL+C to quit)")
    print(f"Trigger a rotation with: POST http://localhost:{APP_PORT}/api/plan/generate")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())
