"""Carga inicial dos cadastros de funcionários e obras a partir de YAML.

Formato:
    employees:
      - id: func-001
        name: Carlos Pereira
        daily_rate: "180.50"
    works:
      - id: obra-001
        name: Residencial Aurora
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ValidationError

from app.domain.people import Employee, Work

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_SEED_PATH = Path(__file__).resolve().parent / "directory_seed.yaml"


class DirectorySeedError(Exception):
    """Arquivo de carga inicial inválido ou inexistente."""


@dataclass(frozen=True)
class DirectorySeed:
    """Funcionários e obras lidos do arquivo de carga."""

    employees: tuple[Employee, ...] = ()
    works: tuple[Work, ...] = ()


def _parse_entries(
    section: str,
    entries: Any,
    model: type[BaseModel],
) -> tuple[Any, ...]:
    if entries is None:
        return ()
    if not isinstance(entries, list):
        raise DirectorySeedError(f"Chave '{section}' deve ser uma lista")
    try:
        return tuple(model.model_validate(entry) for entry in entries)
    except ValidationError as exc:
        raise DirectorySeedError(f"Registro inválido em '{section}': {exc}") from exc


def load_directory_seed(path: Path | str | None = None) -> DirectorySeed:
    """Lê funcionários e obras do YAML.

    Args:
        path: Caminho do YAML (usa o arquivo padrão se None)

    Raises:
        DirectorySeedError: arquivo inexistente, YAML inválido ou registro
            fora do formato
    """
    resolved = Path(path) if path is not None else DEFAULT_DIRECTORY_SEED_PATH

    if not resolved.is_file():
        raise DirectorySeedError(f"Arquivo de carga não encontrado: {resolved}")

    try:
        with resolved.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as exc:
        raise DirectorySeedError(f"YAML de carga inválido: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise DirectorySeedError("YAML de carga deve ser um dicionário")

    seed = DirectorySeed(
        employees=_parse_entries("employees", data.get("employees"), Employee),
        works=_parse_entries("works", data.get("works"), Work),
    )
    logger.info(
        "directory_seed_loaded",
        extra={
            "path": str(resolved),
            "employees": len(seed.employees),
            "works": len(seed.works),
        },
    )
    return seed
