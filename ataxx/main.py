from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ataxx.api.routes import router as game_router
from ataxx.config import configure_logging, get_settings

settings = get_settings()
configure_logging(settings.log_level, settings.log_file)

app = FastAPI(title="Ataxx Engine API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(game_router)


@app.get("/")
async def root():
    return {"message": "Ataxx Engine API"}
