"""
FastAPI frontend: contact listing page and htmx fragments for create/delete.
Run with uvicorn: uvicorn api.main:app --reload
"""

import asyncio
import logging
import time
from pathlib import Path

from dotenv import load_dotenv

# Load .env from repo root (when run from repo root or from Docker)
for path in (
    Path(__file__).resolve().parent.parent.parent / ".env",
    Path.cwd() / ".env",
):
    if path.exists():
        load_dotenv(path)
        break

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, Form, Request, Response
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from api.config import Settings, load_settings
from contactbook.application import (
    ContactDirectory,
    DuplicateEmail,
    NotFound,
)
from contactbook.infrastructure import InMemoryContactRepository, SequentialIdGenerator

settings = load_settings()

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=getattr(logging, settings.log_level, logging.INFO),
)
logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

SAMPLE_CONTACTS = (
    ("John", "jd@gmail.com"),
    ("Clara", "cd@gmail.com"),
)
EMAIL_EXISTS_MSG = "Email already exists"


class FormData(BaseModel):
    """Submitted values and per-field errors for the create form."""

    values: dict[str, str] = Field(default_factory=dict)
    errors: dict[str, str] = Field(default_factory=dict)


def build_directory(delete_delay_seconds: float = 0.0) -> ContactDirectory:
    """Directory with in-memory storage; deletes wait delete_delay_seconds before applying."""
    before_delete = None
    if delete_delay_seconds > 0:

        async def before_delete() -> None:
            # Slow downstream effect, so the page can show a progress indicator
            await asyncio.sleep(delete_delay_seconds)

    return ContactDirectory(
        InMemoryContactRepository(),
        SequentialIdGenerator(),
        before_delete=before_delete,
    )


def get_directory(request: Request) -> ContactDirectory:
    return request.app.state.directory


def create_app(
    directory: ContactDirectory | None = None,
    *,
    app_settings: Settings | None = None,
    seed: bool = True,
) -> FastAPI:
    """Build the app. Without a directory, one is built from settings (with the delete delay)."""
    cfg = app_settings or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if directory is None:
            app.state.directory = build_directory(cfg.delete_delay_seconds)
        else:
            app.state.directory = directory
        if seed:
            seeded = await app.state.directory.seed(SAMPLE_CONTACTS)
            logger.info("Seeded %d sample contacts", len(seeded))
        yield

    app = FastAPI(title="Contactbook", lifespan=lifespan)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %d (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    for name in ("css", "images"):
        static_path = cfg.static_dir / name
        if static_path.is_dir():
            app.mount(f"/{name}", StaticFiles(directory=str(static_path)), name=name)
        else:
            logger.debug("Static directory %s not found, /%s not mounted", static_path, name)

    # --- REST: health ---

    @app.get("/health")
    def health():
        return {"status": "ok"}

    # --- HTML: contacts ---

    @app.get("/", response_class=HTMLResponse)
    async def index(
        request: Request,
        directory: ContactDirectory = Depends(get_directory),
    ):
        contacts = await directory.list()
        return templates.TemplateResponse(
            request,
            "index.html",
            {"contacts": contacts, "form_data": FormData()},
        )

    @app.post("/contacts", response_class=HTMLResponse)
    async def add_contact(
        request: Request,
        name: str = Form(""),
        email: str = Form(""),
        directory: ContactDirectory = Depends(get_directory),
    ):
        result = await directory.create(name, email)
        if isinstance(result, DuplicateEmail):
            logger.info("Rejected contact: email %r already exists", result.email)
            form_data = FormData(
                values={"name": name, "email": email},
                errors={"email": EMAIL_EXISTS_MSG},
            )
            return templates.TemplateResponse(
                request,
                "form.html",
                {"form_data": form_data},
                status_code=422,
            )
        logger.info("Created contact %d", result.contact.id)
        rendered_form = templates.get_template("form.html").render(form_data=FormData())
        rendered_oob = templates.get_template("oob-contact.html").render(
            contact=result.contact
        )
        return HTMLResponse(f"{rendered_form}\n{rendered_oob}")

    @app.delete("/contacts/{contact_id}")
    async def delete_contact(
        contact_id: int,
        directory: ContactDirectory = Depends(get_directory),
    ):
        result = await directory.delete(contact_id)
        if isinstance(result, NotFound):
            logger.warning("Delete: contact %d not found", result.contact_id)
            return Response(status_code=404)
        logger.info("Deleted contact %d", contact_id)
        return Response(status_code=200)

    return app


app = create_app()
