from typing import Any, Optional

from fastapi import HTTPException, status


class ReferenciaNoEncontradaException(HTTPException):
    """Empleado, producto, cliente o venta inexistente"""

    def __init__(self, detail: str, identificador: Optional[Any] = None):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)
        self.identificador = identificador


class SolicitudInvalidaException(HTTPException):
    """Falta un campo obligatorio o un valor no es coherente"""

    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class StockInsuficienteException(HTTPException):
    """El stock del producto no alcanza para la cantidad solicitada"""

    def __init__(self, codigo_producto: str, solicitado: int):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Stock insuficiente para el codigoProducto: {codigo_producto}. Solicitado: {solicitado}"
        )
        self.codigo_producto = codigo_producto
        self.solicitado = solicitado


class RegistroDuplicadoException(HTTPException):
    def __init__(self, detail: str):
        super().__init__(status_code=status.HTTP_409_CONFLICT, detail=detail)
