"""
Brazilian legal framework citations used by the legal analysis engine.

Each constant is the display form of a statute or regulation as it appears
in LegalAnalysis.legal_basis. Grouped by source of law.
"""
from __future__ import annotations


# =============================================================================
# Constitution
# =============================================================================

CF_ART_196 = "CF/88, Art. 196 - A saúde é direito de todos e dever do Estado"
CF_ART_197 = "CF/88, Art. 197 - Ações e serviços de saúde são de relevância pública"
CF_HEALTH_SAFETY = "CF/88, Arts. 6º e 196 - Direito à saúde e à segurança"


# =============================================================================
# Federal Laws
# =============================================================================

LEI_SUS = "Lei 8.080/90 - Lei Orgânica da Saúde (SUS)"
LEI_VIGILANCIA = "Lei 6.360/76 - Vigilância Sanitária de medicamentos"
LEI_ANVISA = "Lei 9.782/99 - Sistema Nacional de Vigilância Sanitária"
CDC = "Lei 8.078/90 - Código de Defesa do Consumidor"
CDC_SAFETY = "Lei 8.078/90 (CDC), Art. 6º - Direito à segurança e qualidade"
CDC_LIABILITY = "Lei 8.078/90 (CDC), Art. 12 - Responsabilidade por danos"
LEI_ORDEM_ECONOMICA = "Lei 8.137/90 - Crimes contra a ordem econômica"
LEI_CMED = "Lei 10.742/03 - Regulação do Mercado de Medicamentos (CMED)"
LEI_FARMACIA_POPULAR = "Lei 10.858/04 - Programa Farmácia Popular do Brasil"
LEI_MIGRACAO = "Lei 13.445/17, Art. 4º - Acesso do migrante à saúde pública"
LEI_MARCO_2024 = "Lei 14.821/24 - Marco Legal da Assistência Farmacêutica"


# =============================================================================
# Treaties
# =============================================================================

PIDESC_ART_12 = (
    "Decreto 591/92 - Pacto Internacional sobre Direitos Econômicos, "
    "Sociais e Culturais, Art. 12"
)


# =============================================================================
# Ministry of Health Ordinances
# =============================================================================

PNM = "Portaria GM/MS nº 3.916/98 - Política Nacional de Medicamentos"
CEAF = "Portaria GM/MS nº 2.981/09 - Componente Especializado da Assistência Farmacêutica"
CIT_2024 = "Resolução CIT nº 07/24 - Atualização de protocolos de acesso"
SCTIE_2025 = "Portaria SCTIE/MS nº 15/25 - Novos critérios de incorporação"


# =============================================================================
# ANVISA Resolutions
# =============================================================================

RDC_BPF = "RDC ANVISA nº 301/19 - Boas práticas de fabricação"
RDC_FARMACOVIGILANCIA = "RDC ANVISA nº 4/09 - Farmacovigilância"
RDC_REGISTRO = "RDC ANVISA nº 200/17 - Registro de medicamentos"
RDC_ACESSO_EXPANDIDO = "RDC ANVISA nº 38/13 - Programas de acesso expandido e uso compassivo"
RDC_IMPORTACAO = "RDC ANVISA nº 81/08 - Importação para uso próprio"
IN_RFB_IMPORTACAO = "Instrução Normativa RFB nº 1.059/10 - Bagagem e remessas"


# =============================================================================
# Case Law
# =============================================================================

STF_TEMA_793 = "STF, Tema 793 - Responsabilidade solidária dos entes no fornecimento de medicamentos"
