"""Mediation / conciliation strategy per case category.

The five objectives are shared by every category today. They are kept as a
separate list, selected through ``_objectives_for``, so that per-category
objectives can be introduced later without changing callers.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from pydantic import BaseModel, ConfigDict

from barangay_case.categories import CaseCategory

MAX_OBJECTIVES = 5

COMMON_OBJECTIVES: Tuple[str, ...] = (
    'Clarify all facts and ensure both parties are fully heard',
    'Encourage parties to agree on appropriate restitution or compensation',
    'Promote respect and restore harmony within the barangay community',
    'Prevent escalation to formal court proceedings when possible',
    'Ensure compliance with applicable laws and ordinances',
)


class MediationStrategy(BaseModel):
    model_config = ConfigDict(frozen=True)

    objectives: Tuple[str, ...]
    issues: Tuple[str, ...]
    not_for_mediation: Tuple[str, ...]
    outcomes: Tuple[str, ...]


_GUIDANCE: Dict[CaseCategory, Dict[str, Tuple[str, ...]]] = {
    CaseCategory.THEFT: {
        'issues': (
            'Return of the allegedly stolen property or restitution of its value',
            'Apology and acknowledgement of harm caused',
            'Agreement on future conduct and respect for property rights',
        ),
        'not_for_mediation': (
            'Determination of criminal guilt for theft (requires court jurisdiction)',
        ),
        'outcomes': (
            'Full restitution and documented apology',
            'Community service or volunteer work as a gesture of remorse',
        ),
    },
    CaseCategory.THREAT: {
        'issues': (
            'Commitment by respondent to refrain from making threats or harassing statements',
            'Discussion of any underlying disputes prompting the threat',
            'Agreement on safety measures or distance requirements',
        ),
        'not_for_mediation': (
            'Prosecution of grave threats if elements are present',
        ),
        'outcomes': (
            'Written undertaking to maintain peace and respect',
            'Agreement on mutual non‑harassment or communications guidelines',
        ),
    },
    CaseCategory.DEFAMATION: {
        'issues': (
            'Withdrawal or correction of defamatory statements',
            'Public or written apology to restore reputation',
            'Agreement to avoid repeating defamatory statements in the future',
        ),
        'not_for_mediation': (
            'Criminal prosecution for serious defamation',
        ),
        'outcomes': (
            'Signed retraction and apology',
            'Community clarification to mitigate reputational harm',
        ),
    },
    CaseCategory.INJURY: {
        'issues': (
            'Compensation for medical expenses and lost wages',
            'Agreement on avoiding physical confrontation in future',
            'Exploring root causes of the altercation',
        ),
        'not_for_mediation': (
            'Determination of liability for serious physical injuries',
        ),
        'outcomes': (
            'Payment of medical costs and damages',
            'Mutual agreement to maintain distance and respect',
        ),
    },
    CaseCategory.GENERAL: {
        'issues': (
            'Clarification of the specific grievances presented',
            'Identification of applicable laws and ordinances',
            'Exploration of remedies agreeable to both parties',
        ),
        'not_for_mediation': (
            'Matters involving imprisonment of more than one year or fines over ₱5,000',
        ),
        'outcomes': (
            'Amicable settlement documented with the Lupong Tagapamayapa',
            'Referral to appropriate agencies if outside barangay jurisdiction',
        ),
    },
}

MEDIATION_GUIDANCE: Mapping[CaseCategory, Mapping[str, Tuple[str, ...]]] = MappingProxyType(
    {c: MappingProxyType(g) for c, g in _GUIDANCE.items()}
)


def _objectives_for(category: CaseCategory) -> Tuple[str, ...]:
    return COMMON_OBJECTIVES[:MAX_OBJECTIVES]


def strategize(category: CaseCategory) -> MediationStrategy:
    guidance = MEDIATION_GUIDANCE[category]
    return MediationStrategy(
        objectives=_objectives_for(category),
        issues=guidance['issues'],
        not_for_mediation=guidance['not_for_mediation'],
        outcomes=guidance['outcomes'],
    )
