from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from src.new_bill.exceptions import DraftNotReadyError, FileValidationError
from src.store.exceptions import TransportError
from src.users.exceptions import SessionError

def exception_handler(app: FastAPI) -> None:
    """
    Registers global exception handlers for the FastAPI application.
    Translates domain exceptions into HTTP responses.
    """

    @app.exception_handler(FileValidationError)
    async def file_validation_error_handler(request: Request, exc: FileValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": exc.message},
        )

    @app.exception_handler(SessionError)
    async def session_error_handler(request: Request, exc: SessionError):
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"detail": exc.message},
        )

    @app.exception_handler(DraftNotReadyError)
    async def draft_not_ready_handler(request: Request, exc: DraftNotReadyError):
        return JSONResponse(
            status_code=status.HTTP_409_CONFLICT,
            content={"detail": exc.message},
        )

    @app.exception_handler(TransportError)
    async def transport_error_handler(request: Request, exc: TransportError):
        return JSONResponse(
            status_code=status.HTTP_502_BAD_GATEWAY,
            content={"detail": exc.message},
        )
