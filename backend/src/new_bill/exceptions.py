from src.common.exceptions import AppError

INVALID_FILE_MESSAGE = "Seuls les fichiers jpg, jpeg et png sont acceptés."


class FileValidationError(AppError):
    """Selected proof file has an extension other than jpg, jpeg or png"""

    def __init__(self, message: str = INVALID_FILE_MESSAGE):
        super().__init__(message)


class DraftNotReadyError(AppError):
    """Submission attempted before a proof file was accepted and uploaded"""

    def __init__(self, state: str):
        self.state = state
        super().__init__(f"Impossible d'envoyer la note de frais : aucun justificatif valide (état : {state}).")
