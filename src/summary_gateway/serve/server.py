"""Launch the FastAPI app with uvicorn."""
from __future__ import annotations

import uvicorn

from summary_gateway.common.config import HOST, PORT

def main() -> None:
    uvicorn.run(
        "summary_gateway.serve.fastapi_app:app",
        host=HOST,
        port=PORT,
        log_config=None,
    )

if __name__ == "__main__":
    main()
