from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from doc_intake.config.settings import Settings
from doc_intake.intake.exceptions import IntakeConfigurationError, RuleNotFoundError
from doc_intake.intake.models import UploadedFile
from doc_intake.intake.validator import IntakeValidator
from doc_intake.logging.logger import Log

RULE_NOT_FOUND_MESSAGE = "Invalid document type or rules not found."


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def create_app(validator: IntakeValidator, settings: Settings | None = None) -> FastAPI:
    """Build the HTTP boundary around an IntakeValidator.

    Validation failures and OCR deferrals are ordinary 200 responses; only
    missing form fields, unknown document types and server faults are errors.
    """
    settings = settings or Settings()
    app = FastAPI(title="doc-intake-validator")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["POST", "GET", "OPTIONS"],
        allow_headers=["authorization", "x-client-info", "apikey", "content-type"],
    )

    @app.exception_handler(RequestValidationError)
    async def malformed_form(request: Request, exc: RequestValidationError) -> JSONResponse:
        # A non-file "files" part counts as no files at all
        Log.warning(f"Rejected malformed form: {exc.errors()}")
        fields = {str(loc) for error in exc.errors() for loc in error.get("loc", ())}
        if "files" in fields:
            return _error(400, "Missing files.")
        if "doc_type_id" in fields:
            return _error(400, "Missing doc_type_id.")
        return _error(400, "Malformed request.")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/validate")
    @app.post("/document-parser")
    async def validate_submission(
        files: list[UploadFile] | None = File(None),
        doc_type_id: str | None = Form(None),
    ) -> JSONResponse:
        Log.bind_request()
        if not files:
            return _error(400, "Missing files.")
        if not doc_type_id:
            return _error(400, "Missing doc_type_id.")

        batch = []
        for upload in files:
            content = await upload.read()
            batch.append(UploadedFile(name=upload.filename or "", content=content))

        try:
            verdict = await run_in_threadpool(validator.validate, doc_type_id, batch)
        except RuleNotFoundError as exc:
            Log.warning(str(exc))
            return _error(400, RULE_NOT_FOUND_MESSAGE)
        except IntakeConfigurationError as exc:
            Log.error(f"Configuration error: {exc}")
            return _error(500, str(exc))
        except Exception as exc:
            Log.exception(f"Unexpected intake failure: {exc}")
            return _error(500, str(exc))

        return JSONResponse(status_code=200, content=verdict.to_payload())

    return app
