import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from oxo.config import load_settings
from oxo.session import session_manager
from oxo.ws_handler import router as ws_router

settings = load_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

session_manager.settings = settings.game

app = FastAPI(title="OXO Engine")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(ws_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
