"""Testes do carregamento da tabela de papéis."""

from __future__ import annotations

from pathlib import Path

import pytest

from app.authz import RoleTable, RoleTableError, load_role_table


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "roles.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadRoleTable:
    """Leitura do YAML."""

    def test_loads_custom_file(self, tmp_path: Path) -> None:
        path = _write(
            tmp_path,
            "privileged_role: SUPER\nroles:\n  LEITOR:\n    - obras:ler\n",
        )

        table = load_role_table(path)

        assert table.privileged_role == "SUPER"
        assert dict(table.roles) == {"LEITOR": frozenset({"obras:ler"})}
        assert table.role_names == frozenset({"SUPER", "LEITOR"})

    @pytest.mark.parametrize(
        "content",
        [
            "roles: [",
            "- apenas\n- lista\n",
            "privileged_role: ADMIN\n",
            "roles:\n  LEITOR: obras:ler\n",
            "roles:\n  LEITOR:\n    - semdominio\n",
            "roles:\n  LEITOR:\n    - ':ler'\n",
            "roles:\n  ADMIN:\n    - obras:ler\n",
        ],
    )
    def test_malformed_file_raises(self, tmp_path: Path, content: str) -> None:
        with pytest.raises(RoleTableError):
            load_role_table(_write(tmp_path, content))

    def test_missing_explicit_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(RoleTableError):
            load_role_table(tmp_path / "nao_existe.yaml")


class TestRoleTable:
    """Imutabilidade da tabela."""

    def test_roles_mapping_is_read_only(self) -> None:
        table = RoleTable.from_mapping({"LEITOR": ["obras:ler"]})

        with pytest.raises(TypeError):
            table.roles["NOVO"] = frozenset()  # type: ignore[index]

    def test_with_role_returns_new_table(self) -> None:
        table = RoleTable.from_mapping({"LEITOR": ["obras:ler"]})

        extended = table.with_role("ESCRITOR", ["obras:escrever"])

        assert "ESCRITOR" not in table.roles
        assert extended.roles["ESCRITOR"] == frozenset({"obras:escrever"})
