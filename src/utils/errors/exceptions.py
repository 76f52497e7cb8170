"""Exceções tipadas do núcleo de apontamentos.

Cada exceção carrega um ``kind`` (conjunto fechado em ``ErrorKind``) e um
``code`` estável para a borda HTTP. Chamadores decidem pelo tipo ou pelo
kind, nunca pelo texto da mensagem.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Conjunto fechado de categorias de erro do núcleo."""

    REFERENCE_NOT_FOUND = "REFERENCE_NOT_FOUND"
    NOT_FOUND = "NOT_FOUND"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_PERIOD = "INVALID_PERIOD"
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"
    PERSISTENCE_FAILURE = "PERSISTENCE_FAILURE"
    PERMISSION_DENIED = "PERMISSION_DENIED"


class DomainError(Exception):
    """Base das falhas de regra de negócio e validação."""

    kind: ErrorKind
    code: str = "ERRO_DOMINIO"


class ReferenceNotFoundError(DomainError):
    """Funcionário ou obra referenciado não existe."""

    kind = ErrorKind.REFERENCE_NOT_FOUND
    code = "REFERENCIA_NAO_ENCONTRADA"

    def __init__(self, reference: str, reference_id: str) -> None:
        self.reference = reference
        self.reference_id = reference_id
        super().__init__(f"{reference} com id [{reference_id}] não encontrado(a)")


class TimesheetNotFoundError(DomainError):
    """Apontamento inexistente."""

    kind = ErrorKind.NOT_FOUND
    code = "APONTAMENTO_NAO_ENCONTRADO"

    def __init__(self, timesheet_id: str) -> None:
        self.timesheet_id = timesheet_id
        super().__init__(f"Apontamento [{timesheet_id}] não encontrado")


class InvalidDateFormatError(DomainError):
    """Data fora do formato YYYY-MM-DD."""

    kind = ErrorKind.INVALID_DATE_FORMAT
    code = "DATA_INVALIDA"

    def __init__(self, field: str, value: str) -> None:
        self.field = field
        self.value = value
        super().__init__(f"{field} inválida: '{value}' (esperado YYYY-MM-DD)")


class InvalidPeriodError(DomainError):
    """Período com início igual ou posterior ao fim."""

    kind = ErrorKind.INVALID_PERIOD
    code = "PERIODO_INVALIDO"


class InvalidStateTransitionError(DomainError):
    """Operação tentada a partir de um status que não a permite."""

    kind = ErrorKind.INVALID_STATE_TRANSITION
    code = "REGRA_NEGOCIO_VIOLADA"

    def __init__(self, operation: str, current_status: str, reason: str) -> None:
        self.operation = operation
        self.current_status = current_status
        super().__init__(reason)


class ConcurrentModificationError(DomainError):
    """Versão persistida divergiu da versão lida (escrita concorrente)."""

    kind = ErrorKind.CONCURRENT_MODIFICATION
    code = "CONFLITO_DE_VERSAO"

    def __init__(self, timesheet_id: str, expected: int, found: int) -> None:
        self.timesheet_id = timesheet_id
        self.expected = expected
        self.found = found
        super().__init__(
            f"Apontamento [{timesheet_id}] foi alterado por outra operação "
            f"(versão esperada {expected}, encontrada {found})"
        )


class PermissionDeniedError(DomainError):
    """Papel do usuário não concede a permissão exigida."""

    kind = ErrorKind.PERMISSION_DENIED
    code = "ACESSO_NEGADO"

    def __init__(self, role: str, permission: str) -> None:
        self.role = role
        self.permission = permission
        super().__init__(f"Papel '{role}' não possui a permissão '{permission}'")


class InfrastructureError(RuntimeError):
    """Base para falhas de infraestrutura."""

    kind = ErrorKind.PERSISTENCE_FAILURE
    code = "ERRO_INTERNO"


class PersistenceError(InfrastructureError):
    """Falha ao ler ou gravar no repositório."""
