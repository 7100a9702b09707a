"""
Sistema de manejo de errores del binding de órdenes.

Este módulo define las excepciones de la librería y utilidades para
registrar errores de manera consistente.
"""

import logging
import traceback
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


class ErrorCode(Enum):
    """
    Códigos de error estandardizados para la librería.
    """

    UNKNOWN_ERROR = "UNKNOWN_ERROR"

    # Errores de transporte
    SHOPIFY_CONNECTION_FAILED = "SHOPIFY_CONNECTION_FAILED"
    SHOPIFY_API_ERROR = "SHOPIFY_API_ERROR"
    INVALID_API_KEY = "INVALID_API_KEY"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Errores de datos
    DECODE_ERROR = "DECODE_ERROR"
    INVALID_PAGINATION_LINK = "INVALID_PAGINATION_LINK"

    # Paginación
    PAGINATION_INTERRUPTED = "PAGINATION_INTERRUPTED"
    PAGINATION_CANCELLED = "PAGINATION_CANCELLED"


class ErrorSeverity(Enum):
    """
    Niveles de severidad para errores.
    """

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class AppException(Exception):
    """
    Excepción base para todas las excepciones de la librería.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        is_retryable: bool = False,
    ):
        """
        Inicializa la excepción.

        Args:
            message: Mensaje de error
            error_code: Código de error estandardizado
            details: Información adicional del error
            status_code: Código HTTP asociado
            severity: Severidad del error
            is_retryable: Si la operación puede reintentarse
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        self.severity = severity
        self.is_retryable = is_retryable
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte la excepción a diccionario.

        Returns:
            Dict: Representación de la excepción
        """
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code.value,
            "details": self.details,
            "status_code": self.status_code,
            "severity": self.severity.value,
            "is_retryable": self.is_retryable,
            "timestamp": self.timestamp.isoformat(),
        }

    def __str__(self) -> str:
        """String representation del error."""
        return f"{self.error_code.value}: {self.message}"


class TransportError(AppException):
    """
    Falla de la llamada HTTP contra la API de Shopify (red, status HTTP, auth).
    """

    def __init__(
        self,
        message: str,
        api_response_code: Optional[int] = None,
        endpoint: Optional[str] = None,
        response_body: Optional[str] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de transporte.

        Args:
            message: Mensaje de error
            api_response_code: Código de respuesta de Shopify (None si no hubo respuesta)
            endpoint: Endpoint que falló
            response_body: Cuerpo de la respuesta, si existe
            **kwargs: Argumentos adicionales para AppException
        """
        error_code = ErrorCode.SHOPIFY_API_ERROR
        severity = ErrorSeverity.MEDIUM

        if api_response_code is None:
            error_code = ErrorCode.SHOPIFY_CONNECTION_FAILED
        elif api_response_code in (401, 403):
            error_code = ErrorCode.INVALID_API_KEY
            severity = ErrorSeverity.HIGH
        elif api_response_code == 404:
            error_code = ErrorCode.RESOURCE_NOT_FOUND
            severity = ErrorSeverity.LOW
        elif api_response_code >= 500:
            severity = ErrorSeverity.HIGH

        super().__init__(
            message=message,
            error_code=error_code,
            status_code=api_response_code or 503,
            severity=severity,
            is_retryable=api_response_code is None or api_response_code >= 500,
            **kwargs,
        )

        self.api_response_code = api_response_code
        self.endpoint = endpoint
        self.response_body = response_body

        self.details.update({"api_response_code": api_response_code, "endpoint": endpoint})


class DecodeError(AppException):
    """
    JSON malformado o con una forma que el decoder no reconoce.
    """

    def __init__(
        self,
        message: str,
        model: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        **kwargs,
    ):
        """
        Inicializa la excepción de decodificación.

        Args:
            message: Mensaje de error
            model: Nombre del modelo que se intentaba decodificar
            errors: Lista de errores reportados por pydantic
            **kwargs: Argumentos adicionales para AppException
        """
        kwargs.setdefault("error_code", ErrorCode.DECODE_ERROR)
        super().__init__(
            message=message,
            status_code=422,
            severity=ErrorSeverity.MEDIUM,
            **kwargs,
        )
        self.model = model
        self.errors = errors or []

        self.details.update({"model": model, "error_count": len(self.errors)})


class PaginationCancelled(AppException):
    """
    La enumeración de páginas fue cancelada entre dos llamadas.
    """

    def __init__(self, message: str = "Pagination cancelled by caller", **kwargs):
        super().__init__(
            message=message,
            error_code=ErrorCode.PAGINATION_CANCELLED,
            status_code=499,
            severity=ErrorSeverity.LOW,
            **kwargs,
        )


class PartialResultsError(AppException):
    """
    Error fatal durante una enumeración completa.

    Lleva los registros acumulados antes de la falla para que el llamador
    decida si le sirven. El error original queda en `error` y como `__cause__`.
    """

    def __init__(self, records: List[Any], error: Exception, pages_fetched: int = 0, **kwargs):
        """
        Inicializa la excepción de resultados parciales.

        Args:
            records: Registros acumulados hasta la falla
            error: Primer error fatal
            pages_fetched: Páginas obtenidas con éxito
            **kwargs: Argumentos adicionales para AppException
        """
        status_code = error.status_code if isinstance(error, AppException) else 500
        super().__init__(
            message=f"Pagination stopped after {pages_fetched} pages ({len(records)} records): {error}",
            error_code=ErrorCode.PAGINATION_INTERRUPTED,
            status_code=status_code,
            severity=ErrorSeverity.MEDIUM,
            is_retryable=getattr(error, "is_retryable", False),
            **kwargs,
        )
        self.records = records
        self.error = error
        self.pages_fetched = pages_fetched

        self.details.update(
            {
                "records_collected": len(records),
                "pages_fetched": pages_fetched,
                "cause": type(error).__name__,
            }
        )


def log_error(
    exception: Exception,
    context: Optional[Dict[str, Any]] = None,
    level: int = logging.ERROR,
) -> None:
    """
    Loggea un error de manera consistente.

    Args:
        exception: Excepción a loggear
        context: Contexto adicional
        level: Nivel de logging
    """
    context = context or {}

    log_data = {
        "exception_type": type(exception).__name__,
        "exception_message": str(exception),
        "traceback": traceback.format_exc(),
        **context,
    }

    if isinstance(exception, AppException):
        message = f"{exception.error_code.value}: {exception.message}"
        log_data.update(
            {
                "error_code": exception.error_code.value,
                "severity": exception.severity.value,
                "is_retryable": exception.is_retryable,
            }
        )
    else:
        message = f"Unhandled exception: {type(exception).__name__}: {str(exception)}"

    logger.log(level, message, extra=log_data)
