import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles

from .core.config import settings
from .core.logging import configure_logging
from .llm.openai_client import OpenAIClient
from .api.routes.analyze import router as analyze_router
from .api.routes.chat import router as chat_router
from .api.routes.misc import router as misc_router

configure_logging()

app = FastAPI(title="Mental Health Triage API", version=settings.API_VERSION)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.state.llm_client = None


@app.on_event("startup")
def on_startup():
    app.state.llm_client = OpenAIClient.from_settings(settings)

app.include_router(misc_router)
app.include_router(analyze_router)
app.include_router(chat_router)

if settings.STATIC_DIR:
    @app.get("/", include_in_schema=False)
    def index():
        return FileResponse(os.path.join(settings.STATIC_DIR, settings.STATIC_INDEX))

    # mounted last so the API routes above take precedence
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR), name="static")
