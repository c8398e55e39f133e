"""
MedRoute Recommendation Builder

Turns a complaint and its legal analysis into a complete, ordered plan.

Key features:
- Primary agency from the legal analysis, secondaries from a fixed rule set
- Escalation evaluated as its own track, reported separately
- Step orders assigned sequentially, never reused
- Either a full Recommendation is built or an error is raised

Core Principle: "The citizen decides. MedRoute routes and documents."
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..directory import AgencyDirectory
from ..models import (
    Agency,
    AgencyRole,
    EscalationRecommendation,
    IssueType,
    LegalAnalysis,
    MedicationComplaint,
    Recommendation,
    RecommendationStep,
    ServiceLink,
    Urgency,
)
from .escalation import evaluate_escalation


# =============================================================================
# Reference Tables
# =============================================================================

CONSUMER_ISSUES = frozenset({IssueType.PRICE, IssueType.QUALITY, IssueType.ACCESSIBILITY})
HEALTH_ACCESS_ISSUES = frozenset({IssueType.SHORTAGE, IssueType.ACCESSIBILITY})
REGISTRATION_CHECK_ISSUES = frozenset({IssueType.QUALITY, IssueType.ADVERSE_REACTION})

BASE_DOCUMENTS = (
    "Documento de identificação (RG ou CPF)",
    "Comprovante de residência",
)

ISSUE_DOCUMENTS: dict[IssueType, tuple[str, ...]] = {
    IssueType.QUALITY: (
        "Embalagem original do medicamento",
        "Nota fiscal de compra",
        "Fotos do problema (se visível)",
        "Laudo técnico (se disponível)",
    ),
    IssueType.ADVERSE_REACTION: (
        "Prescrição médica",
        "Relatório médico sobre a reação",
        "Medicamento (se ainda houver)",
        "Exames médicos relacionados",
    ),
    IssueType.SHORTAGE: (
        "Prescrição médica",
        "Comprovante de tentativa de compra",
        "Relatório médico sobre necessidade",
    ),
    IssueType.PRICE: (
        "Comprovantes de preços em diferentes estabelecimentos",
        "Nota fiscal",
        "Prescrição médica",
    ),
}

# Fixed short estimates; other urgencies use the primary agency's own estimate
URGENT_TIME_ESTIMATES: dict[Urgency, str] = {
    Urgency.EMERGENCY: "1 a 5 dias úteis (urgência máxima)",
    Urgency.HIGH: "5 a 15 dias úteis (alta prioridade)",
}

REGULATOR_PROCESS_TYPES: dict[IssueType, str] = {
    IssueType.QUALITY: "denúncia de qualidade",
    IssueType.ADVERSE_REACTION: "notificação de evento adverso",
    IssueType.REGISTRATION: "consulta sobre registro",
    IssueType.IMPORT: "solicitação de importação",
}

ROLE_PROCESS_DESCRIPTIONS: dict[AgencyRole, str] = {
    AgencyRole.HEALTH_MINISTRY: (
        "Entre em contato com o {acronym} através dos canais oficiais para relatar "
        "o problema de acesso ao medicamento."
    ),
    AgencyRole.MARKET_REGULATOR: (
        "Formalize uma denúncia junto ao {acronym} sobre práticas anticompetitivas "
        "ou preços abusivos."
    ),
    AgencyRole.CONSUMER_PROTECTION: (
        "Registre uma reclamação no {acronym} sobre o problema de consumo "
        "relacionado ao medicamento."
    ),
    AgencyRole.PUBLIC_HEALTH_PROSECUTOR: (
        "Comunique ao Ministério Público sobre a questão de saúde pública "
        "relacionada ao medicamento."
    ),
    AgencyRole.ESCALATION: (
        "Formalize uma representação junto ao Ministério Público Estadual sobre "
        "violação dos seus direitos à saúde."
    ),
}
DEFAULT_PROCESS_DESCRIPTION = "Siga os procedimentos padrão do órgão para abertura de processo."

REGISTRATION_LOOKUP_SERVICE = "Consulta de Medicamentos Registrados"

PREPARATION_LABEL = "Preparação"
TRACKING_LABEL = "Acompanhamento"


def _unique(items: Iterable[str]) -> tuple[str, ...]:
    """De-duplicate preserving first occurrence."""
    return tuple(dict.fromkeys(items))


# =============================================================================
# Recommendation Builder
# =============================================================================

@dataclass
class RecommendationBuilder:
    """
    Builds the routing recommendation for an analyzed complaint.

    Usage:
        builder = RecommendationBuilder(directory)
        recommendation = builder.build(complaint, legal_analysis)

        for step in recommendation.steps:
            print(step.order, step.title)
    """

    directory: AgencyDirectory

    def build(
        self,
        complaint: MedicationComplaint,
        legal: LegalAnalysis,
    ) -> Recommendation:
        """
        Build the complete recommendation.

        Args:
            complaint: Validated complaint
            legal: Legal analysis of the same complaint

        Returns:
            Fully populated Recommendation

        Raises:
            AgencyNotFoundError: If any referenced agency is missing
        """
        primary = self.directory.get_agency(legal.competent_agency_id)
        secondaries = self.select_secondary_agencies(complaint, primary)
        escalation = evaluate_escalation(complaint, legal, self.directory)

        return Recommendation(
            primary_agency=primary,
            secondary_agencies=secondaries,
            steps=self.build_steps(complaint, legal, primary, secondaries, escalation),
            estimated_time=self.estimate_time(complaint, primary),
            urgency_level=complaint.urgency,
            additional_info=self.additional_info(complaint, legal),
            legal_analysis=legal,
            escalation=escalation,
        )

    # -------------------------------------------------------------------------
    # Agency selection
    # -------------------------------------------------------------------------

    def select_secondary_agencies(
        self,
        complaint: MedicationComplaint,
        primary: Agency,
    ) -> tuple[Agency, ...]:
        """
        Apply the secondary rules independently and union the results.

        Ordered by first insertion; never contains the primary agency.
        """
        candidates: list[Agency] = []

        if complaint.issue_type in CONSUMER_ISSUES:
            candidates.append(self.directory.agency_for_role(AgencyRole.CONSUMER_PROTECTION))

        health_ministry = self.directory.agency_for_role(AgencyRole.HEALTH_MINISTRY)
        if complaint.issue_type in HEALTH_ACCESS_ISSUES and primary.id != health_ministry.id:
            candidates.append(health_ministry)

        if complaint.urgency.is_elevated:
            candidates.append(self.directory.agency_for_role(AgencyRole.PUBLIC_HEALTH_PROSECUTOR))

        selected: dict[str, Agency] = {}
        for agency in candidates:
            if agency.id != primary.id and agency.id not in selected:
                selected[agency.id] = agency
        return tuple(selected.values())

    # -------------------------------------------------------------------------
    # Steps
    # -------------------------------------------------------------------------

    def build_steps(
        self,
        complaint: MedicationComplaint,
        legal: LegalAnalysis,
        primary: Agency,
        secondaries: tuple[Agency, ...],
        escalation: EscalationRecommendation,
    ) -> tuple[RecommendationStep, ...]:
        """Build the ordered step plan. Orders run 1..n."""
        steps: list[RecommendationStep] = []

        def add(**kwargs) -> None:
            steps.append(RecommendationStep(order=len(steps) + 1, **kwargs))

        add(
            title="Colete todas as informações necessárias",
            description="Reúna toda a documentação relacionada ao problema com o medicamento.",
            agency_label=PREPARATION_LABEL,
            documents=self.gathering_documents(complaint, legal),
            estimated_time="1-2 horas",
        )

        if complaint.issue_type in REGISTRATION_CHECK_ISSUES:
            regulator = self.directory.agency_for_role(AgencyRole.SAFETY_REGULATOR)
            add(
                title="Verifique o registro do medicamento",
                description=f"Confirme se o medicamento está registrado na {regulator.acronym}.",
                agency_label=regulator.acronym,
                links=self._registration_lookup_links(regulator),
                estimated_time="15-30 minutos",
            )

        add(
            title=f"Abra um processo/denúncia na {primary.acronym}",
            description=self.process_description(primary, complaint.issue_type),
            agency_label=primary.acronym,
            documents=primary.required_documents or None,
            links=primary.primary_services or None,
            estimated_time=primary.processing_time_estimate,
        )

        escalation_id = self.directory.agency_id_for_role(AgencyRole.ESCALATION)
        for agency in secondaries:
            if agency.id == escalation_id:
                continue
            add(
                title=f"Considere também procurar {agency.acronym}",
                description=(
                    "Para reforçar sua solicitação ou obter suporte adicional, você "
                    f"pode também procurar {agency.name}."
                ),
                agency_label=agency.acronym,
                documents=agency.required_documents or None,
                links=agency.primary_services or None,
                estimated_time=agency.processing_time_estimate,
            )

        if escalation.recommended and escalation.agency is not None:
            agency = escalation.agency
            add(
                title=f"Procure o {agency.name} ({agency.acronym})",
                description=(
                    f"{escalation.reason} O {agency.acronym} pode atuar para garantir "
                    "seus direitos constitucionais à saúde."
                ),
                agency_label=agency.acronym,
                documents=agency.required_documents or None,
                links=agency.primary_services or None,
                estimated_time=agency.processing_time_estimate,
            )

        add(
            title="Acompanhe o andamento",
            description=(
                "Mantenha-se informado sobre o status da sua solicitação e forneça "
                "informações adicionais se solicitado."
            ),
            agency_label=TRACKING_LABEL,
            estimated_time="Contínuo",
        )

        return tuple(steps)

    def gathering_documents(
        self,
        complaint: MedicationComplaint,
        legal: LegalAnalysis,
    ) -> tuple[str, ...]:
        """Legal analysis documents, then base and issue-specific additions."""
        return _unique((
            *legal.required_documents,
            *BASE_DOCUMENTS,
            *ISSUE_DOCUMENTS.get(complaint.issue_type, ()),
        ))

    def process_description(self, agency: Agency, issue_type: IssueType) -> str:
        """How to open a case at this agency, keyed by the roles it is bound to."""
        roles = [role for role, agency_id in self.directory.roles.items() if agency_id == agency.id]

        if AgencyRole.SAFETY_REGULATOR in roles:
            process_type = REGULATOR_PROCESS_TYPES.get(issue_type, "solicitação")
            return (
                f"Abra um processo de {process_type} através do sistema de "
                f"peticionamento eletrônico da {agency.acronym}."
            )

        for role in AgencyRole:
            if role in roles and role in ROLE_PROCESS_DESCRIPTIONS:
                return ROLE_PROCESS_DESCRIPTIONS[role].format(acronym=agency.acronym)

        return DEFAULT_PROCESS_DESCRIPTION

    def _registration_lookup_links(self, regulator: Agency) -> Optional[tuple[ServiceLink, ...]]:
        lookup = tuple(s for s in regulator.online_services if s.name == REGISTRATION_LOOKUP_SERVICE)
        return lookup or regulator.primary_services or None

    # -------------------------------------------------------------------------
    # Time and text
    # -------------------------------------------------------------------------

    def estimate_time(self, complaint: MedicationComplaint, primary: Agency) -> str:
        """Fixed estimate for high/emergency, the agency's own estimate otherwise."""
        return URGENT_TIME_ESTIMATES.get(complaint.urgency, primary.processing_time_estimate)

    def additional_info(self, complaint: MedicationComplaint, legal: LegalAnalysis) -> str:
        """
        Concatenate the guidance clauses in fixed order.

        Each clause is either fully present or absent.
        """
        patient = complaint.patient
        clauses: list[str] = []

        if legal.has_right:
            clauses.append(
                "✅ SEUS DIREITOS: Você tem direito legal ao que está solicitando "
                "conforme a legislação brasileira. Os serviços de saúde pública são "
                "gratuitos conforme o SUS."
            )
        else:
            clauses.append(
                "⚠️ ATENÇÃO: Este caso pode não se enquadrar nos direitos garantidos, "
                "mas ainda vale buscar orientação."
            )

        if patient.has_chronic_condition:
            clauses.append(
                "Como se trata de um paciente com condição crônica, mencione isso na "
                "sua solicitação para dar maior prioridade ao caso."
            )
        if patient.is_pregnant:
            clauses.append(
                "Gestantes têm prioridade especial nos atendimentos de saúde: "
                "certifique-se de informar esta condição."
            )
        if complaint.urgency == Urgency.EMERGENCY:
            clauses.append(
                "Em casos de emergência, procure também atendimento médico imediato e "
                "mantenha todos os registros para a denúncia."
            )
        if not patient.is_citizen:
            clauses.append(
                "Estrangeiros também têm direito ao atendimento no SUS e podem fazer "
                "denúncias aos órgãos competentes."
            )

        info = " ".join(clauses)
        if legal.legal_basis:
            info += f"\n\n📋 BASE LEGAL: {', '.join(legal.legal_basis[:2])}."
        return info


# =============================================================================
# Convenience Functions
# =============================================================================

def recommend(
    complaint: MedicationComplaint,
    legal: LegalAnalysis,
    directory: AgencyDirectory,
) -> Recommendation:
    """
    Build a recommendation.

    Convenience function that creates a temporary builder.
    """
    return RecommendationBuilder(directory).build(complaint, legal)
