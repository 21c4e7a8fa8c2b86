from fastapi import status


class TasadorError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Error interno del servidor."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)
        self.message = message or self.message


class CatalogLoadError(TasadorError):
    message = "No se pudo leer el catálogo de coches."


class CatalogWriteError(TasadorError):
    message = "No se pudo guardar el catálogo de coches."


class MissingFieldsError(TasadorError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Faltan datos para la tasación."


class NoComparableListingsError(TasadorError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No se encontraron coches similares para tasar."


class NoClosestListingError(TasadorError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "No se pudo encontrar un coche similar para tasar."


class InvalidReferencePriceError(TasadorError):
    status_code = 422
    message = "El coche de referencia no tiene un precio válido."
