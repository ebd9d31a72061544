# dossie/application/services/export_service.py
from __future__ import annotations

import csv
import io

from ..dtos.dossie_dto import DossieDTO


class ExportService:
    def exportar_json(self, dossie: DossieDTO) -> str:
        return dossie.model_dump_json(indent=2)

    def exportar_csv(self, dossie: DossieDTO) -> str:
        output = io.StringIO()
        writer = csv.writer(output)

        # Dados cadastrais
        output.write("# DADOS CADASTRAIS\n")
        writer.writerow(["Campo", "Valor"])
        writer.writerow(["CNPJ", dossie.cnpj])
        writer.writerow(["Razao Social", dossie.razao_social])
        writer.writerow(["Natureza Juridica", dossie.natureza_juridica])
        writer.writerow(["Situacao", dossie.situacao])
        writer.writerow(["Data Abertura", dossie.data_abertura or ""])
        writer.writerow(["Capital Social", dossie.capital_social])
        writer.writerow(["Atividade Principal", dossie.atividade_principal or ""])
        writer.writerow(["Endereco", dossie.endereco_completo])
        writer.writerow(["Procedencia Cadastro", dossie.procedencia.empresa])
        output.write("\n")

        if dossie.financeiro:
            output.write("# DADOS FINANCEIROS\n")
            writer.writerow(["Receita", dossie.financeiro.receita])
            writer.writerow(["Lucro", dossie.financeiro.lucro])
            writer.writerow(["Funcionarios", dossie.financeiro.funcionarios])
            output.write("\n")

        # Risco
        output.write("# ANALISE DE RISCO\n")
        writer.writerow(["Score", f"{dossie.risco.score}/{dossie.risco.escala_maxima}"])
        writer.writerow(["Faixa", dossie.risco.faixa])
        for pen in dossie.risco.penalidades:
            writer.writerow([f"Penalidade: {pen.tipo}", f"-{pen.pontos}", pen.descricao])
        output.write("\n")

        if dossie.risco.alertas:
            output.write("# ALERTAS\n")
            writer.writerow(["Severidade", "Mensagem", "Detalhe"])
            for a in dossie.risco.alertas:
                writer.writerow([a.severidade, a.mensagem, a.detalhe or ""])
            output.write("\n")

        if dossie.risco.recomendacoes:
            output.write("# RECOMENDACOES\n")
            writer.writerow(["Prioridade", "Mensagem", "Acao"])
            for r in dossie.risco.recomendacoes:
                writer.writerow([r.prioridade, r.mensagem, r.acao or ""])
            output.write("\n")

        if dossie.juridico.processos:
            output.write("# PROCESSOS\n")
            writer.writerow(["Numero", "Tribunal", "Tipo", "Status", "Data", "Valor"])
            for p in dossie.juridico.processos:
                writer.writerow([p.numero, p.tribunal, p.tipo, p.status, p.data, p.valor])
            output.write("\n")

        if dossie.midia.noticias:
            output.write("# NOTICIAS\n")
            writer.writerow(["Titulo", "Fonte", "Data", "Sentimento"])
            for n in dossie.midia.noticias:
                writer.writerow([n.titulo, n.fonte, n.data, n.sentimento])
            output.write("\n")

        # Socios
        if dossie.socios:
            output.write("# SOCIOS\n")
            writer.writerow(["Nome", "Documento", "Qualificacao"])
            for s in dossie.socios:
                writer.writerow([s.nome, s.documento, s.qualificacao])

        return output.getvalue()
