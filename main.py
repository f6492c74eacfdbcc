import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import CORS_ORIGINS, LOG_LEVEL

# Routers
from routers.health import router as health_router
from routers.marking import router as marking_router
from routers.questions import router as questions_router
from routers.sessions import router as sessions_router

logger = logging.getLogger("mental-math")
logging.basicConfig(level=LOG_LEVEL)

app = FastAPI(title="Mental Math Trainer – Practice API")

# Allow calls from the web client during development and in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
def health_root():
    return {"ok": True}


app.include_router(questions_router)  # /questions/next, /questions/reset
app.include_router(marking_router)  # /mark, /combine
app.include_router(sessions_router)  # /sessions/start, /sessions/{id}/next, /sessions/summary
app.include_router(health_router)  # /health/templates

logger.info("practice API ready (origins: %s)", ", ".join(CORS_ORIGINS))
