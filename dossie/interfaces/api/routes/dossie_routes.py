# dossie/interfaces/api/routes/dossie_routes.py
from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import HTMLResponse, Response

from dossie.application.dtos.dossie_dto import ConsultaCNPJDTO, DossieDTO
from dossie.application.errors import PDF_UNAVAILABLE, PROCESSING_ERROR, ErroAplicacao
from dossie.application.services.dossie_service import DossieService
from dossie.application.services.export_service import ExportService
from dossie.infrastructure import pdf_generator
from dossie.infrastructure.layouts import renderizar_resumo
from dossie.interfaces.api.dependencies import get_dossie_service, get_export_service

router = APIRouter()


def _cnpj_do_corpo(body: ConsultaCNPJDTO | None) -> str | None:
    return body.cnpj if body is not None else None


@router.post("/cnpj", response_model=DossieDTO)
def consultar_cnpj(
    body: ConsultaCNPJDTO | None = None,
    service: DossieService = Depends(get_dossie_service),  # noqa: B008
) -> DossieDTO:
    return service.obter_dossie(_cnpj_do_corpo(body))


@router.post("/cnpj/resumo", response_class=HTMLResponse)
def resumo_cnpj(
    body: ConsultaCNPJDTO | None = None,
    service: DossieService = Depends(get_dossie_service),  # noqa: B008
) -> HTMLResponse:
    dossie = service.obter_dossie(_cnpj_do_corpo(body))
    return HTMLResponse(content=renderizar_resumo(dossie))


@router.post("/cnpj/export")
def exportar_cnpj(
    body: ConsultaCNPJDTO | None = None,
    formato: Literal["csv", "json", "pdf"] = Query(...),
    layout: Literal["completo", "minimo"] = Query("completo"),
    dossie_service: DossieService = Depends(get_dossie_service),  # noqa: B008
    export_service: ExportService = Depends(get_export_service),  # noqa: B008
) -> Response:
    dossie = dossie_service.obter_dossie(_cnpj_do_corpo(body))
    nome_arquivo = f"dossie_{dossie.cnpj_digitos}"

    if formato == "json":
        return Response(
            content=export_service.exportar_json(dossie),
            media_type="application/json",
            headers={"Content-Disposition": f"attachment; filename={nome_arquivo}.json"},
        )
    if formato == "csv":
        return Response(
            content=export_service.exportar_csv(dossie),
            media_type="text/csv",
            headers={"Content-Disposition": f"attachment; filename={nome_arquivo}.csv"},
        )
    # pdf
    try:
        pdf_bytes = pdf_generator.gerar_pdf_dossie(dossie, layout)
    except RuntimeError as err:
        raise ErroAplicacao(str(err), PDF_UNAVAILABLE, status=501) from err
    except Exception as err:
        raise ErroAplicacao("Falha ao gerar PDF", PROCESSING_ERROR, status=500, detalhes=str(err)) from err
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename={nome_arquivo}_{layout}.pdf"},
    )
