"""Jerarquía de errores de aplicación compartida."""

from __future__ import annotations


class AppError(Exception):
    """Excepción base para errores específicos de la aplicación."""


class NetworkError(AppError):
    """Representa fallas relacionadas con la red."""


class ConnectionError(NetworkError):
    """Se genera cuando no se puede obtener o interpretar el WSDL del servicio.

    Es fatal para la instancia del cliente: hay que construir uno nuevo.
    """


class ExternalAPIError(AppError):
    """Se genera cuando una API externa devuelve un error."""


class RemoteServiceError(ExternalAPIError):
    """Falla de una operación remota puntual (red, SOAP fault o payload inválido)."""


__all__ = [
    "AppError",
    "NetworkError",
    "ConnectionError",
    "ExternalAPIError",
    "RemoteServiceError",
]
