# dossie/infrastructure/pdf_generator.py
from __future__ import annotations

from typing import TYPE_CHECKING

from .layouts import LAYOUTS_DOCUMENTO

if TYPE_CHECKING:
    from dossie.application.dtos.dossie_dto import DossieDTO


def gerar_pdf_dossie(dossie: DossieDTO, layout: str = "completo") -> bytes:
    """Generate the dossier PDF in the chosen layout (completo | minimo).

    Raises RuntimeError if weasyprint (or its native libraries) is not installed.
    Raises KeyError for an unknown layout.
    """
    renderizar = LAYOUTS_DOCUMENTO[layout]
    try:
        from weasyprint import HTML  # type: ignore[import-untyped,import-not-found]
    except (ImportError, OSError) as err:
        msg = "PDF export requires weasyprint. Install with: pip install dossie-cnpj[pdf]"
        raise RuntimeError(msg) from err

    return HTML(string=renderizar(dossie)).write_pdf()  # type: ignore[no-any-return]
