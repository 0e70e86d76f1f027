class DomainError(Exception):
    """Classe base para erros de negócio devolvidos ao cliente."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(DomainError):
    """Campos obrigatórios ausentes ou malformados (400)."""
    status_code = 400


class NotFoundError(DomainError):
    """Registro referenciado não existe ou pertence a outra clínica (404)."""
    status_code = 404


class ConflictError(DomainError):
    """
    Operação de escrita única já realizada.
    Exemplo: parcelas já geradas para o caso ortodôntico (409).
    """
    status_code = 409
