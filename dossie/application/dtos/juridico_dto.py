# dossie/application/dtos/juridico_dto.py
from __future__ import annotations

from pydantic import BaseModel

from dossie.domain.juridico.entities import DadosJuridicos


class ProcessoDTO(BaseModel):
    numero: str
    tribunal: str
    tipo: str
    status: str
    data: str
    valor: str
    partes: list[str]


class MandadoDTO(BaseModel):
    numero: str
    tribunal: str
    tipo: str
    status: str
    data: str


class FalenciaDTO(BaseModel):
    status: str
    data: str
    tribunal: str


class JuridicoDTO(BaseModel):
    processos: list[ProcessoDTO]
    mandados: list[MandadoDTO]
    falencia: FalenciaDTO | None

    @classmethod
    def from_domain(cls, juridico: DadosJuridicos) -> JuridicoDTO:
        return cls(
            processos=[
                ProcessoDTO(
                    numero=p.numero,
                    tribunal=p.tribunal,
                    tipo=p.tipo,
                    status=p.status,
                    data=p.data.isoformat(),
                    valor=str(p.valor),
                    partes=list(p.partes),
                )
                for p in juridico.processos
            ],
            mandados=[
                MandadoDTO(
                    numero=m.numero,
                    tribunal=m.tribunal,
                    tipo=m.tipo,
                    status=m.status,
                    data=m.data.isoformat(),
                )
                for m in juridico.mandados
            ],
            falencia=FalenciaDTO(
                status=juridico.falencia.status,
                data=juridico.falencia.data.isoformat(),
                tribunal=juridico.falencia.tribunal,
            )
            if juridico.falencia
            else None,
        )
