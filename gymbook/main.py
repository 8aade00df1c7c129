import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gymbook.core.config import HOST, PORT, get_cors_origins, get_log_level
from gymbook.database.db import Base, engine
from gymbook.routes import bookings, slots

logging.basicConfig(
    level=get_log_level(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="gymbook")

# Configure CORS from CORS_ORIGINS
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Create all tables (in production, run the Alembic migrations instead)
Base.metadata.create_all(bind=engine)

# Include the routers
app.include_router(slots.router)
app.include_router(bookings.router)


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}


def run():
    """Serve the app with uvicorn on HOST:PORT."""
    uvicorn.run("gymbook.main:app", host=HOST, port=PORT)


if __name__ == "__main__":
    run()
