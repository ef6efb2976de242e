from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.templating import Jinja2Templates

from modules.base_convert.core.base import convert_base, convert_value
from modules.base_convert.core.decode import max_magnitude
from modules.base_convert.core.validate import validate_arguments
from universe.errors import install_error_handlers
from universe.logger import setup_logger
from universe.registry import load_module_manifest
from universe.settings import get_settings

BASE_DIR = Path(__file__).parent
MODULE_DIR = BASE_DIR.parent
MANIFEST = load_module_manifest(MODULE_DIR)

settings = get_settings()
log = setup_logger(settings.log_level, json_logs=settings.log_json)

app = FastAPI(
    title=MANIFEST.get("title") or "Base Converter",
    description=MANIFEST.get("description") or "",
    version=str(MANIFEST.get("version") or "0.0.0"),
)
install_error_handlers(app)

templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))


@app.get("/", response_class=HTMLResponse)
def index(request: Request):
    base_path = request.url.path.rstrip("/")
    return templates.TemplateResponse(
        request,
        "index.html",
        {"module": MANIFEST, "base_path": base_path},
    )


@app.post("/convert")
def convert(
    value: str | None = Form(None),
    base_from: str | None = Form(None),
    base_to: str | None = Form(None),
):
    result, error = convert_base(
        value, base_from, base_to, bits=settings.int_bits
    )
    if error:
        log.info("convert.rejected", error=error)
        return JSONResponse({"error": error}, status_code=400)
    return result


@app.get("/api/convert")
def convert_query(value: str, base_from: str, base_to: str):
    source, dest, numeral = validate_arguments([base_from, base_to, value.strip()])
    converted = convert_value(
        source, dest, numeral, max_value=max_magnitude(settings.int_bits)
    )
    return {"base_from": source, "base_to": dest, "converted": converted}
