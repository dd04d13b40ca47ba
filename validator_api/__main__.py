"""Run the API with uvicorn: ``python -m validator_api``."""

from __future__ import annotations

import uvicorn

from validator_api.core.config import settings

if __name__ == "__main__":
    uvicorn.run("validator_api.main:app", host="0.0.0.0", port=settings.PORT)
