import logging
import os
import sys
from threading import Lock
from typing import Any, TypeVar, cast

from dotenv import load_dotenv
from google import genai
from openinference.instrumentation.google_genai import GoogleGenAIInstrumentor

from imagegen.components.storage.local_file_storage import LocalFileStorage
from imagegen.components.storage.storage_interface import StorageInterface
from imagegen.config.settings import Settings, load_settings


load_dotenv()

APP_LOGGER_NAME = "imagegen"

_instrumented: bool = False


def _is_test_environment() -> bool:
    """
    Check if we are running in a test environment.

    Returns:
        True if running under pytest or if TESTING env var is set, False otherwise.
    """
    if any("pytest" in arg for arg in sys.argv):
        return True

    if os.getenv("TESTING", "").lower() in ("true", "1", "yes"):
        return True

    return False


def _validate_otel_env_vars() -> None:
    """
    Validate OpenTelemetry/Langfuse environment variables for instrumentation.

    Langfuse native integration (public key, secret key and base URL all set)
    needs nothing else. Otherwise both OTEL_EXPORTER_OTLP_ENDPOINT and
    OTEL_EXPORTER_OTLP_HEADERS must be set for a manual OTLP export.

    Raises:
        RuntimeError: If neither configuration path is complete.
    """
    otel_endpoint: str = os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT", "").strip()
    otel_headers: str = os.getenv("OTEL_EXPORTER_OTLP_HEADERS", "").strip()

    langfuse_public_key: str = os.getenv("LANGFUSE_PUBLIC_KEY", "").strip()
    langfuse_secret_key: str = os.getenv("LANGFUSE_SECRET_KEY", "").strip()
    langfuse_base_url: str = os.getenv("LANGFUSE_BASE_URL", "").strip()

    if langfuse_public_key and langfuse_secret_key and langfuse_base_url:
        return

    if not otel_endpoint:
        raise RuntimeError(
            "OTEL_EXPORTER_OTLP_ENDPOINT environment variable is not set or is empty. "
            "Set it to a valid OTLP endpoint URL, or provide LANGFUSE_PUBLIC_KEY, "
            "LANGFUSE_SECRET_KEY and LANGFUSE_BASE_URL, or disable TRACING_ENABLED."
        )

    if not otel_headers:
        raise RuntimeError(
            "OTEL_EXPORTER_OTLP_HEADERS environment variable is not set or is empty. "
            "Set it directly (e.g., 'Authorization=Basic <base64_credentials>') "
            "or provide the Langfuse keys."
        )


def _configure_tracing(settings: Settings) -> None:
    global _instrumented
    if not settings.tracing_enabled or _is_test_environment() or _instrumented:
        return

    _validate_otel_env_vars()
    GoogleGenAIInstrumentor().instrument()
    _instrumented = True


def _configure_logging(settings: Settings) -> logging.Logger:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format=settings.log_format,
        stream=sys.stdout,
    )
    logger = logging.getLogger(APP_LOGGER_NAME)
    logger.setLevel(settings.log_level.upper())
    return logger


def _create_genai_client(settings: Settings) -> genai.Client:
    if settings.use_vertexai:
        return genai.Client(
            vertexai=True,
            project=settings.vertex_project_id,
            location=settings.vertex_location,
        )
    # With no explicit key the SDK falls back to GOOGLE_API_KEY / GEMINI_API_KEY
    return genai.Client(api_key=settings.gemini_api_key)


T = TypeVar("T")


class ComponentsMeta(type):
    _instances: dict[tuple[type, str], "Components"] = {}
    _lock: Lock = Lock()

    def __call__(cls, *args, **kwargs):
        env = args[0] if args else kwargs.get("env")
        if env is None:
            raise ValueError("Environment must be provided")

        env_key = str(env)
        key = (cls, env_key)
        with cls._lock:
            if key not in cls._instances:
                instance = super().__call__(*args, **kwargs)
                cls._instances[key] = instance
        return cls._instances[key]


class Components(metaclass=ComponentsMeta):
    def __init__(self, env: str) -> None:
        self.__env: str = env
        self.__components: dict[type[Any], Any] = self.__bootstrap_components()

    def __bootstrap_components(self) -> dict[type[Any], Any]:
        if self.__env in {"development", "staging", "production"}:
            return self.__get_components()

        raise ValueError(f"Invalid environment: {self.__env}")

    def __get_components(self) -> dict[type[Any], Any]:
        settings: Settings = load_settings(self.__env)

        logger: logging.Logger = _configure_logging(settings)
        _configure_tracing(settings)

        client: genai.Client = _create_genai_client(settings)

        storage: StorageInterface = LocalFileStorage()

        logger.getChild("Components").info(
            "Components ready for %s (storage_dir=%s, public url=%s)",
            self.__env,
            settings.storage_dir,
            settings.api_url,
        )

        components: dict[type[Any], Any] = {
            Settings: settings,
            logging.Logger: logger,
            genai.Client: client,
            StorageInterface: storage,
        }

        return components

    def get_component(self, component_name: type[T]) -> T:
        if component_name not in self.__components:
            raise ValueError(f"Component {component_name} not found")

        return cast(T, self.__components[component_name])

    def get_env(self) -> str:
        return self.__env
