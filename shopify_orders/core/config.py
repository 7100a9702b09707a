"""
Configuración centralizada de la librería.

Este módulo maneja las variables de entorno del cliente de Shopify y del
logging usando Pydantic Settings para validación automática.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Configuración usando Pydantic Settings.

    Todas las configuraciones se cargan desde variables de entorno
    con valores por defecto apropiados para desarrollo.
    """

    # === CONFIGURACIÓN BÁSICA ===
    APP_NAME: str = "shopify-orders"
    APP_VERSION: str = "0.1.0"
    ENVIRONMENT: str = Field(default="development")
    DEBUG: bool = Field(default=False)

    # === CONFIGURACIÓN DE SHOPIFY ===
    SHOPIFY_SHOP_URL: str = Field(default="your-shop.myshopify.com")
    SHOPIFY_ACCESS_TOKEN: str = Field(default="your-access-token")
    SHOPIFY_API_VERSION: str = Field(default="2024-01")
    SHOPIFY_REQUEST_TIMEOUT: int = Field(default=30)
    SHOPIFY_CONNECT_TIMEOUT: int = Field(default=10)
    # Shopify acepta como máximo 250 registros por página
    SHOPIFY_DEFAULT_PAGE_LIMIT: int = Field(default=50)

    # === CONFIGURACIÓN DE LOGGING ===
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_PATH: Optional[str] = Field(default=None)
    LOG_MAX_SIZE_MB: int = Field(default=10)
    LOG_BACKUP_COUNT: int = Field(default=5)
    LOG_FORMAT: str = Field(default="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "allow",
    }

    @field_validator("SHOPIFY_SHOP_URL")
    @classmethod
    def validate_shopify_url(cls, v):
        """Valida que la URL de Shopify tenga el formato correcto."""
        if v in ["your-shop.myshopify.com"]:
            return v
        host = v.replace("https://", "").replace("http://", "").rstrip("/")
        if not host.endswith(".myshopify.com"):
            raise ValueError("SHOPIFY_SHOP_URL debe terminar en .myshopify.com")
        return host

    @field_validator("SHOPIFY_DEFAULT_PAGE_LIMIT")
    @classmethod
    def validate_page_limit(cls, v):
        """Valida que el tamaño de página esté en el rango aceptado por Shopify."""
        if not 1 <= v <= 250:
            raise ValueError("SHOPIFY_DEFAULT_PAGE_LIMIT debe estar entre 1 y 250")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Valida que el nivel de log sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL debe ser uno de: {valid_levels}")
        return v.upper()

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Valida que el entorno sea válido."""
        valid_envs = ["development", "staging", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"ENVIRONMENT debe ser uno de: {valid_envs}")
        return v.lower()

    @property
    def is_production(self) -> bool:
        """Verifica si está en entorno de producción."""
        return self.ENVIRONMENT == "production"

    def get_shopify_headers(self) -> dict:
        """
        Obtiene headers para requests a Shopify.

        Returns:
            dict: Headers de autenticación
        """
        return {
            "X-Shopify-Access-Token": self.SHOPIFY_ACCESS_TOKEN,
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"{self.APP_NAME}/{self.APP_VERSION}",
        }


@lru_cache()
def get_settings() -> Settings:
    """
    Obtiene instancia singleton de configuración.

    Returns:
        Settings: Instancia de configuración
    """
    return Settings()


def reload_settings() -> Settings:
    """
    Recarga la configuración (útil para testing).

    Returns:
        Settings: Nueva instancia de configuración
    """
    get_settings.cache_clear()
    return get_settings()
