"""
FastAPI Application Entry Point
"""
from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from evaleads.core.config import Settings, settings
from evaleads.core.dependencies import get_settings
from evaleads.api.v1.router import api_router
from evaleads.services.rate_limiter import FixedWindowRateLimiter
from evaleads.utils.exceptions import LeadSubmissionError, WebhookError
from evaleads.utils.logging import get_logger, app_logger

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for application startup and shutdown.
    Reports configuration problems early; requests still fail closed on them.
    """
    app_settings = app.state.settings
    app_logger.info("🚀 [bold green]Starting lead service...[/bold green]")
    missing = app_settings.missing_email_settings()
    if missing:
        app_logger.warning(
            f"⚠️ [yellow]Email settings missing, lead and SMS requests will fail:[/yellow] "
            f"{', '.join(missing)}"
        )
    if not app_settings.sms.verify_signature:
        app_logger.warning(
            "⚠️ [bold yellow]SMS webhook signature verification is disabled[/bold yellow]"
        )
    elif not app_settings.sms.auth_token:
        app_logger.warning("⚠️ [yellow]TWILIO_AUTH_TOKEN missing, SMS webhook will fail[/yellow]")
    app_logger.info(
        f"✅ [bold green]Lead form variant:[/bold green] [cyan]{app_settings.lead_form.variant}[/cyan]"
    )

    yield

    app_logger.info("🛑 [yellow]Shutting down lead service...[/yellow]")


async def lead_error_handler(request: Request, exc: LeadSubmissionError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


async def webhook_error_handler(request: Request, exc: WebhookError):
    return PlainTextResponse(exc.detail, status_code=exc.status_code)


def create_app(app_settings: Settings = settings) -> FastAPI:
    app = FastAPI(
        title=app_settings.project_name,
        version=app_settings.version,
        description=app_settings.description,
        lifespan=lifespan,
    )

    app.state.settings = app_settings
    # The only state shared between requests
    app.state.lead_rate_limiter = FixedWindowRateLimiter.from_config(app_settings.rate_limit)

    if app_settings.backend_cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=[str(origin) for origin in app_settings.backend_cors_origins],
            allow_credentials=True,
            allow_methods=["POST"],
            allow_headers=["*"],
        )

    app.add_exception_handler(LeadSubmissionError, lead_error_handler)
    app.add_exception_handler(WebhookError, webhook_error_handler)

    app.include_router(api_router)

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": "API is running", "version": app_settings.version}

    @app.get("/health")
    async def health_check(current: Settings = Depends(get_settings)):
        """Health check endpoint; reports which settings are present, never their values"""
        missing_email = current.missing_email_settings()
        return {
            "status": "healthy" if not missing_email else "degraded",
            "email_configured": not missing_email,
            "sms_configured": not current.missing_sms_settings(),
            "sms_signature_verification": current.sms.verify_signature,
            "lead_form_variant": current.lead_form.variant,
        }

    return app


app = create_app()
