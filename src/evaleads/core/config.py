"""
Application configuration settings loaded from config.yaml and the environment
"""
import os
import yaml
from pathlib import Path
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, field_validator


class EmailConfig(BaseModel):
    """Transactional email (Resend) configuration"""
    api_key: Optional[str] = None
    from_email: Optional[str] = None  # Sender address
    leads_to: Optional[str] = None  # Operator address receiving lead notices
    base_url: str = "https://api.resend.com"
    timeout: float = 10.0  # Seconds per send attempt


class LeadFormConfig(BaseModel):
    """Lead form configuration"""
    variant: Literal["full", "quick"] = "full"


class RateLimitConfig(BaseModel):
    """Fixed-window rate limit for lead submissions"""
    window_seconds: int = 15 * 60
    max_requests: int = 5


class SmsConfig(BaseModel):
    """Inbound SMS webhook (Twilio) configuration"""
    auth_token: Optional[str] = None  # Twilio auth token used to sign webhooks
    verify_signature: bool = True
    reply: Literal["twiml", "empty"] = "twiml"
    public_url: Optional[str] = None  # Exact URL configured in Twilio, when behind a proxy
    auto_reply_text: str = (
        "Thanks for texting Eva Home Cleaning! "
        "We received your message and will reply shortly."
    )


class Settings(BaseModel):
    """Application settings loaded from config.yaml"""

    # Project settings
    project_name: str = "Eva Leads API"
    version: str = "1.0.0"
    description: str = "Lead capture and SMS webhook service for the Eva Home Cleaning website"
    business_name: str = "Eva Home Cleaning"

    email: EmailConfig = EmailConfig()
    lead_form: LeadFormConfig = LeadFormConfig()
    rate_limit: RateLimitConfig = RateLimitConfig()
    sms: SmsConfig = SmsConfig()

    # CORS settings
    backend_cors_origins: List[str] = []

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        return []

    # Logging
    log_level: str = "INFO"

    def missing_email_settings(self) -> List[str]:
        """Names of required email settings that are not configured"""
        required = {
            "RESEND_API_KEY": self.email.api_key,
            "FROM_EMAIL": self.email.from_email,
            "LEADS_TO": self.email.leads_to,
        }
        return [name for name, value in required.items() if not value]

    def missing_sms_settings(self) -> List[str]:
        """Email settings plus the webhook secret when signatures are verified"""
        missing = self.missing_email_settings()
        if self.sms.verify_signature and not self.sms.auth_token:
            missing.append("TWILIO_AUTH_TOKEN")
        return missing


# Environment variable -> (section, key); a section of None means top level
ENV_OVERRIDES = {
    "RESEND_API_KEY": ("email", "api_key"),
    "FROM_EMAIL": ("email", "from_email"),
    "LEADS_TO": ("email", "leads_to"),
    "TWILIO_AUTH_TOKEN": ("sms", "auth_token"),
    "SMS_VERIFY_SIGNATURE": ("sms", "verify_signature"),
    "SMS_REPLY": ("sms", "reply"),
    "SMS_PUBLIC_URL": ("sms", "public_url"),
    "LEAD_FORM_VARIANT": ("lead_form", "variant"),
    "BACKEND_CORS_ORIGINS": (None, "backend_cors_origins"),
    "LOG_LEVEL": (None, "log_level"),
}


def _find_config_file(config_path: Optional[str]) -> Optional[Path]:
    if config_path is None:
        config_path = os.environ.get("EVALEADS_CONFIG")
    if config_path is not None:
        config_file = Path(config_path)
        if not config_file.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")
        return config_file

    # Try current directory first, then the project root (src/evaleads/core/ -> root)
    for candidate in (
        Path.cwd() / "config.yaml",
        Path(__file__).parent.parent.parent.parent / "config.yaml",
    ):
        if candidate.exists():
            return candidate
    return None


def apply_env_overrides(config_data: Dict[str, Any], environ=None) -> Dict[str, Any]:
    """
    Overlay environment values onto the parsed YAML data.

    Empty environment values are ignored so an exported-but-blank variable
    does not mask a value from config.yaml.
    """
    environ = os.environ if environ is None else environ
    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if not value:
            continue
        if section is None:
            config_data[key] = value
        else:
            config_data.setdefault(section, {})
            if config_data[section] is None:
                config_data[section] = {}
            config_data[section][key] = value
    return config_data


def load_config(config_path: Optional[str] = None, environ=None) -> Settings:
    """
    Load configuration from YAML file and environment.

    Args:
        config_path: Path to config.yaml file. If None, uses $EVALEADS_CONFIG or
                    looks for config.yaml in:
                    1. Current directory
                    2. Project root (src/../config.yaml)
                    A missing file is allowed; every setting has a default or
                    can come from the environment.
        environ: Mapping to read overrides from (defaults to os.environ)

    Returns:
        Settings: Loaded and validated settings
    """
    config_data: Dict[str, Any] = {}
    config_file = _find_config_file(config_path)
    if config_file is not None:
        with open(config_file, "r") as f:
            loaded = yaml.safe_load(f)
        if loaded is not None and not isinstance(loaded, dict):
            raise ValueError("Configuration file is empty or invalid")
        config_data = loaded or {}

    return Settings(**apply_env_overrides(config_data, environ))


# Load settings on module import
settings = load_config()
