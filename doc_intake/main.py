import uvicorn

from doc_intake.api.app import create_app
from doc_intake.config.settings import Settings
from doc_intake.database.connection import close_pool, init_pool
from doc_intake.intake.exceptions import IntakeConfigurationError
from doc_intake.intake.validator import build_validator
from doc_intake.logging.logger import Log


def main() -> None:
    """Entry point: initialize pool -> build validator -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    try:
        init_pool(settings)
    except IntakeConfigurationError as exc:
        # Keep serving: every request reports the fault as a 500.
        Log.error(str(exc))

    try:
        app = create_app(build_validator(settings), settings)
        Log.info(f"Serving intake validator on {settings.api_host}:{settings.api_port}")
        uvicorn.run(app, host=settings.api_host, port=settings.api_port)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
