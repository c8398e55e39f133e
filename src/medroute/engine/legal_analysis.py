"""
MedRoute Legal Analysis Engine

Decides whether current law grants the citizen a right to remedy.

Key features:
- Closed dispatch table: one handler per IssueType, checked for exhaustiveness
- Competent agency resolved through directory role bindings
- Urgency justification computed from urgency, not a boolean flag
- Pure: no I/O, no randomness, no clock
"""
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional

from .. import legal_framework as law
from ..directory import AgencyDirectory
from ..exceptions import InvalidComplaintError
from ..models import (
    AgencyRole,
    Confidence,
    EstimatedCost,
    IssueType,
    LegalAnalysis,
    MedicationComplaint,
    Urgency,
)


# =============================================================================
# Handler Output
# =============================================================================

@dataclass(frozen=True)
class Ruling:
    """
    What an issue handler decides, before agency resolution.

    The handler names a role; the engine resolves it to an agency id so
    handlers never depend on directory contents.
    """
    has_right: bool
    legal_basis: tuple[str, ...]
    reasoning: str
    required_documents: tuple[str, ...]
    competent_role: AgencyRole
    recommended_procedure: str
    confidence: Confidence
    estimated_cost: Optional[EstimatedCost] = None


def _join(*parts: str) -> str:
    """Join sentence fragments, skipping empty ones."""
    return " ".join(p for p in parts if p)


def _cost(low: int, high: int) -> EstimatedCost:
    return EstimatedCost(min=Decimal(low), max=Decimal(high))


# =============================================================================
# Issue Handlers
# =============================================================================

def analyze_shortage(complaint: MedicationComplaint) -> Ruling:
    """Shortage: the right follows citizenship; non-citizens get the treaty path."""
    patient = complaint.patient

    documents = [
        "Documento de identificação (RG, CPF ou passaporte)",
        "Cartão SUS ou comprovante de cadastro",
        "Prescrição médica com CID-10",
        "Relatório médico justificando a necessidade",
        "Comprovante de residência",
    ]
    if not patient.is_citizen:
        documents.append("Documento migratório (RNM ou protocolo de refúgio)")
    if patient.has_chronic_condition:
        documents.append("Laudos comprovando condição crônica")
    if patient.is_pregnant:
        documents.append("Cartão pré-natal ou atestado médico de gravidez")

    if patient.has_chronic_condition and patient.is_pregnant:
        priority = "Sua condição crônica e sua gravidez garantem prioridade no atendimento."
    elif patient.has_chronic_condition:
        priority = "Sua condição crônica garante prioridade no atendimento."
    elif patient.is_pregnant:
        priority = "Sua gravidez garante prioridade no atendimento."
    else:
        priority = ""

    if patient.is_citizen:
        return Ruling(
            has_right=True,
            legal_basis=(law.CF_ART_196, law.LEI_SUS, law.PNM, law.LEI_MARCO_2024),
            reasoning=_join(
                "Como cidadão brasileiro, você tem direito constitucional à saúde.",
                priority,
                "O SUS deve fornecer gratuitamente os medicamentos essenciais. Caso o "
                "medicamento não esteja disponível, ele pode ser solicitado pelo "
                "Componente Especializado da Assistência Farmacêutica (CEAF).",
            ),
            required_documents=tuple(documents),
            competent_role=AgencyRole.HEALTH_MINISTRY,
            recommended_procedure=(
                "Solicite o medicamento na farmácia do SUS ou pelo CEAF e, persistindo "
                "a falta, registre manifestação na Ouvidoria do SUS guardando o protocolo."
            ),
            confidence=Confidence.HIGH,
        )

    return Ruling(
        has_right=False,
        legal_basis=(law.PIDESC_ART_12, law.LEI_MIGRACAO, law.LEI_SUS),
        reasoning=_join(
            "Sem a cidadania brasileira, o direito ao fornecimento não é confirmado "
            "diretamente por esta análise.",
            "Existe, porém, um caminho alternativo: o Brasil ratificou o Pacto "
            "Internacional sobre Direitos Econômicos, Sociais e Culturais (Art. 12), e "
            "a Lei de Migração assegura ao migrante acesso à saúde pública em "
            "igualdade de condições.",
            priority,
            "Procure a unidade do SUS com seu documento migratório e, havendo recusa, "
            "peça a negativa por escrito.",
        ),
        required_documents=tuple(documents),
        competent_role=AgencyRole.HEALTH_MINISTRY,
        recommended_procedure=(
            "Solicite o medicamento na unidade do SUS apresentando o documento migratório; "
            "em caso de recusa, registre manifestação na Ouvidoria do SUS citando o PIDESC "
            "e a Lei de Migração."
        ),
        confidence=Confidence.MEDIUM,
    )


def analyze_quality(complaint: MedicationComplaint) -> Ruling:
    """Quality defect: always a right; physical evidence goes to the regulator."""
    return Ruling(
        has_right=True,
        legal_basis=(law.LEI_VIGILANCIA, law.CDC_SAFETY, law.RDC_BPF, law.LEI_MARCO_2024),
        reasoning=(
            "Você tem direito a medicamentos seguros e de qualidade. Desvios de qualidade "
            "devem ser comunicados à vigilância sanitária. Você pode exigir a troca do "
            "produto, o reembolso integral e indenização por eventuais danos; o fabricante "
            "responde pelos prejuízos causados."
        ),
        required_documents=(
            "Medicamento com defeito (se possível)",
            "Embalagem original com lote e validade",
            "Nota fiscal de compra",
            "Fotos do problema",
            "Relatório médico se houve consequências",
        ),
        competent_role=AgencyRole.SAFETY_REGULATOR,
        recommended_procedure=(
            "Registre uma queixa técnica de desvio de qualidade na ANVISA e guarde o "
            "produto, a embalagem e a nota fiscal até a conclusão da apuração."
        ),
        confidence=Confidence.HIGH,
    )


def analyze_adverse_reaction(complaint: MedicationComplaint) -> Ruling:
    """Adverse reaction: always a right; pharmacovigilance notification."""
    if complaint.urgency.is_elevated:
        advice = "Em casos graves, procure atendimento de emergência imediatamente."
    else:
        advice = "Notifique a ANVISA para proteger outros pacientes."

    return Ruling(
        has_right=True,
        legal_basis=(law.RDC_FARMACOVIGILANCIA, law.CDC_LIABILITY, law.CF_HEALTH_SAFETY, law.SCTIE_2025),
        reasoning=_join(
            "Reações adversas devem ser notificadas à farmacovigilância. Você tem direito "
            "a atendimento médico gratuito, a um medicamento alternativo e a indenização "
            "se comprovado o nexo causal.",
            advice,
        ),
        required_documents=(
            "Relatório médico detalhado da reação",
            "Medicamento que causou a reação (se ainda houver)",
            "Prescrição médica original",
            "Exames médicos relacionados",
        ),
        competent_role=AgencyRole.SAFETY_REGULATOR,
        recommended_procedure=(
            "Notifique o evento adverso à ANVISA pelo canal de farmacovigilância e leve "
            "o relatório médico ao profissional que prescreveu o medicamento."
        ),
        confidence=Confidence.HIGH,
    )


def analyze_price(complaint: MedicationComplaint) -> Ruling:
    """Price: always a right; consumer and market regulation."""
    return Ruling(
        has_right=True,
        legal_basis=(law.CDC, law.LEI_ORDEM_ECONOMICA, law.LEI_CMED, law.LEI_FARMACIA_POPULAR),
        reasoning=(
            "Você tem direito a medicamentos com preços regulados. A CMED fixa o preço "
            "máximo ao consumidor e a cobrança acima desse teto é prática abusiva. Além "
            "da denúncia, você pode buscar o Farmácia Popular, solicitar o genérico "
            "equivalente ou recorrer ao SUS se elegível."
        ),
        required_documents=(
            "Comprovantes de preços em diferentes farmácias",
            "Nota fiscal da compra",
            "Prescrição médica",
            "Pesquisa de preços online (capturas de tela)",
        ),
        competent_role=AgencyRole.MARKET_REGULATOR,
        recommended_procedure=(
            "Compare o valor cobrado com o preço máximo da tabela CMED e formalize "
            "denúncia de preço abusivo, anexando notas fiscais e pesquisas de preço."
        ),
        confidence=Confidence.HIGH,
        estimated_cost=_cost(0, 50),
    )


def analyze_accessibility(complaint: MedicationComplaint) -> Ruling:
    """Accessibility: always a right; routed to the health ministry."""
    patient = complaint.patient
    return Ruling(
        has_right=True,
        legal_basis=(law.CF_ART_196, law.LEI_SUS, law.CEAF, law.LEI_FARMACIA_POPULAR, law.CIT_2024),
        reasoning=_join(
            "O acesso a medicamentos é direito fundamental. Você pode obter "
            "medicamentos básicos gratuitos pelo SUS, medicamentos especializados pelo "
            "CEAF, descontos pelo Farmácia Popular e, para alto custo, pedido "
            "administrativo ou judicial.",
            "Sua condição crônica garante prioridade e acesso facilitado."
            if patient.has_chronic_condition else "",
            "Estrangeiros residentes também têm direito ao SUS."
            if not patient.is_citizen else "",
        ),
        required_documents=(
            "Documento de identificação",
            "Cartão SUS",
            "Prescrição médica atualizada",
            "Exames que comprovem a necessidade",
            "Comprovante de renda (para alguns programas)",
            "Registro da tentativa de acesso anterior",
        ),
        competent_role=AgencyRole.HEALTH_MINISTRY,
        recommended_procedure=(
            "Formalize pedido administrativo na Secretaria de Saúde ou pelo CEAF e, "
            "diante de negativa, registre manifestação na Ouvidoria do SUS com o protocolo."
        ),
        confidence=Confidence.HIGH,
        estimated_cost=_cost(0, 100),
    )


def analyze_registration(complaint: MedicationComplaint) -> Ruling:
    """Registration: the right is to a lawful alternative route to the treatment."""
    return Ruling(
        has_right=True,
        legal_basis=(law.LEI_VIGILANCIA, law.RDC_REGISTRO, law.RDC_ACESSO_EXPANDIDO, law.CF_ART_196),
        reasoning=(
            "Medicamentos sem registro não podem ser comercializados no Brasil, mas o "
            "direito ao tratamento permanece: você pode buscar um equivalente "
            "registrado, participar de programa de acesso expandido ou uso compassivo, "
            "ou solicitar importação excepcional para uso pessoal."
        ),
        required_documents=(
            "Prescrição médica justificando a necessidade",
            "Relatório médico detalhado",
            "Comprovação de inexistência de alternativa registrada",
        ),
        competent_role=AgencyRole.SAFETY_REGULATOR,
        recommended_procedure=(
            "Consulte a situação do registro na ANVISA e, sem alternativa registrada, "
            "peça ao médico a inclusão em programa de acesso expandido ou uso compassivo."
        ),
        confidence=Confidence.MEDIUM,
        estimated_cost=_cost(200, 2000),
    )


def analyze_import(complaint: MedicationComplaint) -> Ruling:
    """Import: personal-use importation rules."""
    if complaint.urgency.is_elevated:
        timing = "Casos urgentes podem ter tramitação prioritária."
    else:
        timing = "O processo regular costuma levar de 30 a 60 dias."

    return Ruling(
        has_right=True,
        legal_basis=(law.RDC_IMPORTACAO, law.IN_RFB_IMPORTACAO, law.LEI_MARCO_2024),
        reasoning=_join(
            "Você pode importar medicamentos para uso pessoal com prescrição médica, em "
            "quantidade limitada a até seis meses de tratamento. Alguns produtos exigem "
            "autorização especial da ANVISA.",
            timing,
        ),
        required_documents=(
            "Prescrição médica com justificativa",
            "Relatório médico detalhado",
            "CPF e documento de identidade",
            "Formulário de solicitação da ANVISA",
            "Comprovante de inexistência no mercado nacional",
        ),
        competent_role=AgencyRole.SAFETY_REGULATOR,
        recommended_procedure=(
            "Solicite à ANVISA a autorização de importação para uso próprio, anexando "
            "prescrição e justificativa médica."
        ),
        confidence=Confidence.MEDIUM,
        estimated_cost=_cost(100, 1000),
    )


def analyze_other(complaint: MedicationComplaint) -> Ruling:
    """Other: generic route; the case needs individual triage."""
    return Ruling(
        has_right=True,
        legal_basis=(law.CF_ART_196, law.LEI_SUS),
        reasoning=(
            "O direito à saúde é garantido pela Constituição, mas o tipo de problema "
            "relatado não se encaixa nas categorias padrão. O caso precisa de triagem "
            "individual para identificar o órgão competente definitivo."
        ),
        required_documents=(
            "Documento de identificação",
            "Prescrição médica",
            "Relatório médico",
        ),
        competent_role=AgencyRole.SAFETY_REGULATOR,
        recommended_procedure=(
            "Registre manifestação na ouvidoria da ANVISA descrevendo o problema; a "
            "análise caso a caso indicará se outro órgão deve assumir a demanda."
        ),
        confidence=Confidence.LOW,
    )


IssueHandler = Callable[[MedicationComplaint], Ruling]

ISSUE_HANDLERS: dict[IssueType, IssueHandler] = {
    IssueType.SHORTAGE: analyze_shortage,
    IssueType.QUALITY: analyze_quality,
    IssueType.ADVERSE_REACTION: analyze_adverse_reaction,
    IssueType.REGISTRATION: analyze_registration,
    IssueType.PRICE: analyze_price,
    IssueType.ACCESSIBILITY: analyze_accessibility,
    IssueType.IMPORT: analyze_import,
    IssueType.OTHER: analyze_other,
}


# =============================================================================
# Urgency Justification
# =============================================================================

URGENCY_JUSTIFICATIONS: dict[Urgency, str] = {
    Urgency.HIGH: (
        "Alta urgência: o caso justifica pedido de tramitação prioritária nos "
        "órgãos competentes."
    ),
    Urgency.EMERGENCY: (
        "Emergência: há risco imediato à saúde, o que autoriza pedido de tutela de "
        "urgência e atendimento imediato pelo SUS, sem aguardar os prazos "
        "administrativos regulares."
    ),
}

ISSUE_URGENCY_CLAUSES: dict[IssueType, str] = {
    IssueType.SHORTAGE: (
        "A falta de medicamento em caso urgente admite tramitação judicial acelerada "
        "conforme a jurisprudência do STF."
    ),
    IssueType.ADVERSE_REACTION: (
        "Reações adversas graves são emergência médica com direito a atendimento "
        "imediato pelo SUS."
    ),
    IssueType.IMPORT: "A ANVISA admite pedido de tramitação prioritária para importação urgente.",
}


def urgency_justification(complaint: MedicationComplaint) -> Optional[str]:
    """
    Expedited-handling justification for elevated urgency.

    Returns None for low/medium. High and emergency have distinct base texts,
    optionally followed by an issue-specific clause.
    """
    base = URGENCY_JUSTIFICATIONS.get(complaint.urgency)
    if base is None:
        return None
    return _join(base, ISSUE_URGENCY_CLAUSES.get(complaint.issue_type, ""))


# =============================================================================
# Legal Analysis Engine
# =============================================================================

@dataclass
class LegalAnalysisEngine:
    """
    Maps a complaint to a LegalAnalysis.

    Usage:
        engine = LegalAnalysisEngine(directory)
        analysis = engine.analyze(complaint)

        if analysis.has_right:
            print(analysis.legal_basis)
    """

    directory: AgencyDirectory
    handlers: Optional[dict[IssueType, IssueHandler]] = None

    def __post_init__(self) -> None:
        if self.handlers is None:
            self.handlers = dict(ISSUE_HANDLERS)
        missing = [t.value for t in IssueType if t not in self.handlers]
        if missing:
            raise ValueError(f"No legal analysis handler for issue types: {missing}")

    def analyze(self, complaint: MedicationComplaint) -> LegalAnalysis:
        """
        Analyze the citizen's rights for a complaint.

        Args:
            complaint: Validated complaint

        Returns:
            LegalAnalysis with competent agency resolved through the directory

        Raises:
            InvalidComplaintError: If the issue type is not a known IssueType
            AgencyNotFoundError: If the competent role resolves to no agency
        """
        issue_type = complaint.issue_type
        if not isinstance(issue_type, IssueType):
            raise InvalidComplaintError(
                message=f"Unknown issueType: {issue_type!r}",
                field_name="issueType",
                details={"allowed": [t.value for t in IssueType]},
            )

        ruling = self.handlers[issue_type](complaint)
        competent = self.directory.agency_for_role(ruling.competent_role)

        return LegalAnalysis(
            has_right=ruling.has_right,
            legal_basis=ruling.legal_basis,
            reasoning=ruling.reasoning,
            required_documents=ruling.required_documents,
            competent_agency_id=competent.id,
            recommended_procedure=ruling.recommended_procedure,
            urgency_justification=urgency_justification(complaint),
            confidence=ruling.confidence,
            estimated_cost=ruling.estimated_cost,
        )


# =============================================================================
# Convenience Functions
# =============================================================================

def analyze(complaint: MedicationComplaint, directory: AgencyDirectory) -> LegalAnalysis:
    """
    Analyze a complaint's legal basis.

    Convenience function that creates a temporary engine.
    """
    return LegalAnalysisEngine(directory).analyze(complaint)
