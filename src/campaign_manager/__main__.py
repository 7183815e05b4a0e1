"""
Run the API with uvicorn: ``python -m campaign_manager``.
"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "campaign_manager.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        # One worker: the in-memory store is process local.
        workers=1,
    )


if __name__ == "__main__":
    main()
