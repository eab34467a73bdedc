import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .core.config import settings
from .core.errors import BloomDataError, bloom_data_error_handler
from .routers import bloom_data

logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s: %(name)s - %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(BloomDataError, bloom_data_error_handler)
app.include_router(bloom_data.router)

@app.get("/")
def root():
    return {"name": settings.app_name, "env": settings.app_env, "message": "OK"}


def run():
    import uvicorn

    logger.info("Backend server is running at http://localhost:%d", settings.port)
    uvicorn.run("bloom_api.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
