"""
Tests de los repositorios en memoria.

Verifican el contrato de los Ports que también cumplen los
repositorios Django: None ante la ausencia, rangos inclusivos,
IDs distintos y filtro de adhesiones aprobadas.
"""

from datetime import datetime

import pytest

from src.core.companies.entities import Adhesion, AdhesionStatus, Transfer
from src.core.companies.ports import (
    AdhesionRepository,
    CompanyRepository,
    InMemoryAdhesionRepository,
    InMemoryCompanyRepository,
    InMemoryTransferRepository,
    TransferRepository,
)
from src.core.shared.exceptions import ValidationError
from src.core.shared.interfaces import Repository


SEPT_START = datetime(2025, 9, 1)
SEPT_END = datetime(2025, 9, 30, 23, 59, 59, 999999)


def transfer(transfer_id, company_id, when):
    return Transfer(
        id=transfer_id,
        company_id=company_id,
        amount=1000,
        currency="ARS",
        destination_account="0001-0001-0001-12345678",
        description="Pago",
        transfer_date=when,
    )


class TestProtocols:

    def test_implementaciones_en_memoria_cumplen_los_protocols(self):
        assert isinstance(InMemoryCompanyRepository(), CompanyRepository)
        assert isinstance(InMemoryTransferRepository(), TransferRepository)
        assert isinstance(InMemoryAdhesionRepository(), AdhesionRepository)

    @pytest.mark.parametrize("port", [CompanyRepository, TransferRepository, AdhesionRepository])
    def test_los_ports_extienden_el_repositorio_generico(self, port):
        assert Repository in port.__mro__
        for method in ("find_all", "find_by_id", "save", "delete"):
            assert hasattr(port, method)

    def test_implementaciones_en_memoria_cumplen_el_repositorio_generico(self):
        assert isinstance(InMemoryCompanyRepository(), Repository)
        assert isinstance(InMemoryTransferRepository(), Repository)
        assert isinstance(InMemoryAdhesionRepository(), Repository)


class TestInMemoryCompanyRepository:

    @pytest.fixture
    def repo(self, pyme, corporativa):
        repo = InMemoryCompanyRepository()
        repo.save(pyme)
        repo.save(corporativa)
        return repo

    def test_busquedas(self, repo, pyme, corporativa):
        assert repo.find_by_id(pyme.id) == pyme
        assert repo.find_by_cuit(corporativa.cuit) == corporativa
        assert repo.find_by_email(pyme.email) == pyme
        assert len(repo.find_all()) == 2

    def test_ausencia_devuelve_none(self, repo):
        assert repo.find_by_id("no-existe") is None
        assert repo.find_by_cuit("20-00000000-0") is None
        assert repo.find_by_email("nadie@ejemplo.com") is None

    def test_save_es_upsert(self, repo, pyme):
        renamed = pyme.with_updates({"name": "Otro Nombre"})

        assert repo.save(renamed) is renamed
        assert repo.find_by_id(pyme.id).name == "Otro Nombre"
        assert len(repo.find_all()) == 2

    def test_update(self, repo, pyme):
        updated = repo.update(pyme.id, {"employee_count": 30})

        assert updated.employee_count == 30
        assert repo.find_by_id(pyme.id).employee_count == 30

    def test_update_inexistente(self, repo):
        assert repo.update("no-existe", {"name": "X"}) is None

    def test_update_invalido_no_modifica(self, repo, pyme):
        with pytest.raises(ValidationError):
            repo.update(pyme.id, {"employee_count": 0})

        assert repo.find_by_id(pyme.id).employee_count == pyme.employee_count

    def test_delete(self, repo, pyme):
        assert repo.delete(pyme.id) is True
        assert repo.delete(pyme.id) is False
        assert repo.find_by_id(pyme.id) is None


class TestInMemoryTransferRepository:

    @pytest.fixture
    def repo(self):
        repo = InMemoryTransferRepository()
        repo.save(transfer("t1", "c1", datetime(2025, 9, 15)))
        repo.save(transfer("t2", "c2", datetime(2025, 9, 20)))
        repo.save(transfer("t3", "c1", datetime(2025, 9, 30, 23, 59, 59, 999999)))
        repo.save(transfer("t4", "c3", datetime(2025, 8, 31, 23, 59, 59)))
        repo.save(transfer("t5", "c4", datetime(2025, 10, 1)))
        repo.save(transfer("t6", "c5", datetime(2025, 9, 1)))
        return repo

    def test_rango_inclusivo_y_descendente(self, repo):
        found = repo.find_by_date_range(SEPT_START, SEPT_END)

        assert [t.id for t in found] == ["t3", "t2", "t1", "t6"]

    def test_ids_de_empresas_distintos(self, repo):
        company_ids = repo.find_companies_by_transfer_date_range(SEPT_START, SEPT_END)

        assert company_ids == ["c1", "c2", "c5"]

    def test_sin_transferencias_en_rango(self, repo):
        assert repo.find_companies_by_transfer_date_range(
            datetime(2024, 1, 1), datetime(2024, 1, 31)
        ) == []

    def test_por_empresa(self, repo):
        assert {t.id for t in repo.find_by_company_id("c1")} == {"t1", "t3"}

    def test_find_by_id_y_delete(self, repo):
        assert repo.find_by_id("t1").company_id == "c1"
        assert repo.delete("t1") is True
        assert repo.find_by_id("t1") is None
        assert repo.delete("t1") is False


class TestInMemoryAdhesionRepository:

    @pytest.fixture
    def repo(self, pyme, corporativa):
        repo = InMemoryAdhesionRepository()
        repo.save(Adhesion("a1", pyme, datetime(2025, 9, 10), AdhesionStatus.APPROVED))
        repo.save(Adhesion("a2", corporativa, datetime(2025, 9, 20), AdhesionStatus.PENDING))
        repo.save(Adhesion("a3", corporativa, datetime(2025, 9, 25), AdhesionStatus.REJECTED))
        repo.save(Adhesion("a4", corporativa, datetime(2025, 8, 20), AdhesionStatus.APPROVED))
        return repo

    def test_solo_empresas_aprobadas(self, repo, pyme):
        companies = repo.find_companies_by_adhesion_date_range(SEPT_START, SEPT_END)

        assert companies == [pyme]

    def test_rango_incluye_todos_los_estados(self, repo):
        found = repo.find_by_date_range(SEPT_START, SEPT_END)

        assert [a.id for a in found] == ["a3", "a2", "a1"]

    def test_por_empresa(self, repo, corporativa):
        assert {a.id for a in repo.find_by_company_id(corporativa.id)} == {"a2", "a3", "a4"}

    def test_update_de_estado(self, repo):
        updated = repo.update("a2", AdhesionStatus.APPROVED)

        assert updated.status == AdhesionStatus.APPROVED
        assert repo.find_by_id("a2").status == AdhesionStatus.APPROVED

    def test_update_inexistente(self, repo):
        assert repo.update("no-existe", AdhesionStatus.APPROVED) is None

    def test_delete(self, repo):
        assert repo.delete("a1") is True
        assert repo.delete("a1") is False
        assert len(repo.find_all()) == 3
