"""Testes do resultado de replicação em lote."""

from __future__ import annotations

from app.domain.replication import REASON_NO_TEMPLATE, ReplicationResult


def test_result_counts_and_public_keys() -> None:
    result = ReplicationResult.for_batch(2)
    result.add_success("emp-1", "ts-new")
    result.add_failure("emp-2", REASON_NO_TEMPLATE)

    assert result.has_failures is True
    assert result.to_response() == {
        "resumo": {"totalSolicitado": 2, "totalSucesso": 1, "totalFalha": 1},
        "sucessos": [{"funcionarioId": "emp-1", "novoApontamentoId": "ts-new"}],
        "falhas": [{"funcionarioId": "emp-2", "motivo": REASON_NO_TEMPLATE}],
    }


def test_empty_batch() -> None:
    result = ReplicationResult.for_batch(0)

    assert result.has_failures is False
    assert result.to_response()["resumo"] == {
        "totalSolicitado": 0,
        "totalSucesso": 0,
        "totalFalha": 0,
    }
