"""
MedRoute Escalation Evaluation

Decides whether to recommend a parallel referral to the State Public
Prosecutor (MPE), and with which reason.

Eligibility is a plain OR over independent conditions. The reason text is
picked by a fixed priority, first match wins:

    has_right -> emergency -> vulnerable patient -> generic
"""
from __future__ import annotations

from ..directory import AgencyDirectory
from ..models import (
    AgencyRole,
    EscalationRecommendation,
    IssueType,
    LegalAnalysis,
    MedicationComplaint,
    Urgency,
)


# Issue types where a denied health right is the usual cause
RIGHTS_DENIAL_ISSUES = frozenset({IssueType.SHORTAGE, IssueType.ACCESSIBILITY})

REASON_RIGHTS_CONFIRMED = (
    "O MPE pode ajudar a garantir seus direitos constitucionais à saúde quando "
    "outros órgãos não respondem adequadamente."
)
REASON_EMERGENCY = (
    "Em casos de emergência, o MPE pode atuar rapidamente para garantir o acesso "
    "ao medicamento."
)
REASON_VULNERABLE = (
    "O MPE tem competência especial para defender direitos de grupos vulneráveis "
    "como pacientes crônicos e gestantes."
)
REASON_GENERIC = (
    "O MPE pode auxiliar na defesa dos seus direitos à saúde e acesso a medicamentos."
)


def should_escalate(complaint: MedicationComplaint, legal: LegalAnalysis) -> bool:
    """
    True when any escalation condition holds.

    With the bundled handlers this is always True: the only ruling without
    a right is the non-citizen shortage, and shortage is a rights-denial
    issue. A False result needs a LegalAnalysis built outside the engine.
    """
    patient = complaint.patient
    issue = complaint.issue_type
    return (
        legal.has_right
        or complaint.urgency.is_elevated
        or (issue == IssueType.ACCESSIBILITY and patient.has_chronic_condition)
        or (issue == IssueType.SHORTAGE and patient.is_pregnant)
        or issue in RIGHTS_DENIAL_ISSUES
    )


def escalation_reason(complaint: MedicationComplaint, legal: LegalAnalysis) -> str:
    """Reason text by priority. Only meaningful when escalation applies."""
    if legal.has_right:
        return REASON_RIGHTS_CONFIRMED
    if complaint.urgency == Urgency.EMERGENCY:
        return REASON_EMERGENCY
    if complaint.patient.is_vulnerable:
        return REASON_VULNERABLE
    return REASON_GENERIC


def evaluate_escalation(
    complaint: MedicationComplaint,
    legal: LegalAnalysis,
    directory: AgencyDirectory,
) -> EscalationRecommendation:
    """
    Evaluate the prosecutorial escalation track.

    Raises:
        AgencyNotFoundError: If the escalation role points at no agency
    """
    if not should_escalate(complaint, legal):
        return EscalationRecommendation(recommended=False)

    return EscalationRecommendation(
        recommended=True,
        reason=escalation_reason(complaint, legal),
        agency=directory.agency_for_role(AgencyRole.ESCALATION),
    )
